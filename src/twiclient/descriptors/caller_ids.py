"""Outgoing caller id descriptors."""

from typing import ClassVar, Optional

from twiclient.descriptors.base import Descriptor, PathRole, path, query


class OutgoingCallerIds(Descriptor):
    resource: ClassVar[Optional[str]] = "/OutgoingCallerIds"

    phone_number: str = query("PhoneNumber")
    friendly_name: str = query("FriendlyName")


class OutgoingCallerId(Descriptor):
    resource: ClassVar[Optional[str]] = "/OutgoingCallerIds"

    sid: str = path(PathRole.SID)


class AddOutgoingCallerId(Descriptor):
    resource: ClassVar[Optional[str]] = "/OutgoingCallerIds"

    phone_number: str = query("PhoneNumber")
    friendly_name: str = query("FriendlyName")
    call_delay: str = query("CallDelay")
    extension: str = query("Extension")
    status_callback: str = query("StatusCallback")
    status_callback_method: str = query("StatusCallbackMethod")


class UpdateOutgoingCallerId(Descriptor):
    resource: ClassVar[Optional[str]] = "/OutgoingCallerIds"

    sid: str = path(PathRole.SID)
    friendly_name: str = query("FriendlyName")


class DeleteOutgoingCallerId(Descriptor):
    resource: ClassVar[Optional[str]] = "/OutgoingCallerIds"

    sid: str = path(PathRole.SID)
