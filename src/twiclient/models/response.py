"""
Response envelope — the decoded body of one REST call.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class ResourceKind(str, Enum):
    """Element names a response can carry directly under <TwilioResponse>."""

    ACCOUNT = "Account"
    ACCOUNTS = "Accounts"
    MESSAGE = "Message"
    MESSAGES = "Messages"
    MEDIA = "Media"
    MEDIA_LIST = "MediaList"
    CALL = "Call"
    CALLS = "Calls"
    NOTIFICATION = "Notification"
    NOTIFICATIONS = "Notifications"
    OUTGOING_CALLER_ID = "OutgoingCallerId"
    OUTGOING_CALLER_IDS = "OutgoingCallerIds"
    VALIDATION_REQUEST = "ValidationRequest"
    RECORDING = "Recording"
    RECORDINGS = "Recordings"
    USAGE_RECORDS = "UsageRecords"
    QUEUE = "Queue"
    QUEUES = "Queues"
    QUEUE_MEMBER = "QueueMember"
    QUEUE_MEMBERS = "QueueMembers"
    CONFERENCE = "Conference"
    CONFERENCES = "Conferences"
    PARTICIPANT = "Participant"
    PARTICIPANTS = "Participants"
    INCOMING_PHONE_NUMBER = "IncomingPhoneNumber"
    INCOMING_PHONE_NUMBERS = "IncomingPhoneNumbers"
    AVAILABLE_PHONE_NUMBERS = "AvailablePhoneNumbers"

    @classmethod
    def from_tag(cls, tag: str) -> Optional[ResourceKind]:
        try:
            return cls(tag)
        except ValueError:
            return None


class Resource(BaseModel):
    """A decoded element: attributes, text and child elements."""

    tag: str
    attributes: dict[str, str] = Field(default_factory=dict)
    text: str = ""
    children: list[Resource] = Field(default_factory=list)

    def find(self, name: str) -> Optional[Resource]:
        for child in self.children:
            if child.tag == name:
                return child
        return None

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Text of the first child called ``name``."""
        child = self.find(name)
        return child.text if child is not None else default

    @property
    def sid(self) -> Optional[str]:
        return self.get("Sid")

    @property
    def items(self) -> list[Resource]:
        """Entries of a list resource (<Messages><Message/>...</Messages>)."""
        return [c for c in self.children if c.children]

    def to_dict(self) -> dict[str, Any]:
        """Flatten into plain Python data; repeated child tags become lists."""
        out: dict[str, Any] = dict(self.attributes)
        for child in self.children:
            value: Any = child.to_dict() if child.children else child.text
            if child.tag in out:
                if not isinstance(out[child.tag], list):
                    out[child.tag] = [out[child.tag]]
                out[child.tag].append(value)
            else:
                out[child.tag] = value
        return out


class RestException(BaseModel):
    code: int = 0
    message: str = ""
    detail: str = ""
    more_info: str = ""
    status: int = 0

    @property
    def description(self) -> str:
        return self.detail or self.message


class Status(BaseModel):
    http: int = 0
    provider: int = 0


class Response(BaseModel):
    status: Status = Field(default_factory=Status)
    kind: Optional[ResourceKind] = None
    resource: Optional[Resource] = None
    exception: Optional[RestException] = None
    content: bytes = b""
    content_type: str = ""
    decode_error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.exception is None and 200 <= self.status.http < 300
