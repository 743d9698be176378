"""Conference and participant descriptors."""

from typing import ClassVar, Optional

from twiclient.descriptors.base import Descriptor, PathRole, path, query


class Conferences(Descriptor):
    resource: ClassVar[Optional[str]] = "/Conferences"

    status: str = query("Status")
    friendly_name: str = query("FriendlyName")
    date_created: str = query("DateCreated")
    date_created_before: str = query("DateCreated<")
    date_created_after: str = query("DateCreated>")
    date_updated: str = query("DateUpdated")


class Conference(Descriptor):
    resource: ClassVar[Optional[str]] = "/Conferences"

    sid: str = path(PathRole.SID)


class Participants(Descriptor):
    resource: ClassVar[Optional[str]] = "/Conferences"
    subresource: ClassVar[Optional[str]] = "/Participants"

    sid: str = path(PathRole.SID)
    muted: str = query("Muted")


class Participant(Descriptor):
    resource: ClassVar[Optional[str]] = "/Conferences"
    subresource: ClassVar[Optional[str]] = "/Participants"

    sid: str = path(PathRole.SID)
    call_sid: str = path(PathRole.CALL_SID)


class UpdateParticipant(Descriptor):
    resource: ClassVar[Optional[str]] = "/Conferences"
    subresource: ClassVar[Optional[str]] = "/Participants"

    sid: str = path(PathRole.SID)
    call_sid: str = path(PathRole.CALL_SID)
    muted: str = query("Muted")


class DeleteParticipant(Descriptor):
    resource: ClassVar[Optional[str]] = "/Conferences"
    subresource: ClassVar[Optional[str]] = "/Participants"

    sid: str = path(PathRole.SID)
    call_sid: str = path(PathRole.CALL_SID)
