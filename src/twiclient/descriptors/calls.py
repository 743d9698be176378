"""Voice call descriptors."""

from typing import ClassVar, Optional

from twiclient.descriptors.base import Descriptor, PathRole, path, query


class MakeCall(Descriptor):
    resource: ClassVar[Optional[str]] = "/Calls"

    from_: str = query("From")
    to: str = query("To")
    url: str = query("Url")
    application_sid: str = query("ApplicationSid")
    method: str = query("Method")
    fallback_url: str = query("FallbackUrl")
    fallback_method: str = query("FallbackMethod")
    status_callback: str = query("StatusCallback")
    status_callback_method: str = query("StatusCallbackMethod")
    status_callback_event: tuple[str, ...] = query("StatusCallbackEvent", repeated=True)
    send_digits: str = query("SendDigits")
    if_machine: str = query("IfMachine")
    timeout: str = query("Timeout")
    record: str = query("Record")
    recording_status_callback: str = query("RecordingStatusCallback")
    recording_status_callback_method: str = query("RecordingStatusCallbackMethod")


class Calls(Descriptor):
    resource: ClassVar[Optional[str]] = "/Calls"

    to: str = query("To")
    from_: str = query("From")
    status: str = query("Status")
    start_time: str = query("StartTime")
    start_time_before: str = query("StartTime<")
    start_time_after: str = query("StartTime>")
    parent_call_sid: str = query("ParentCallSid")
    page_size: str = query("PageSize")


class Call(Descriptor):
    """A single call, or its recordings/notifications (recordings wins when both are set)."""

    resource: ClassVar[Optional[str]] = "/Calls"

    sid: str = path(PathRole.SID)
    recordings: bool = False
    notifications: bool = False


class ModifyCall(Descriptor):
    resource: ClassVar[Optional[str]] = "/Calls"

    sid: str = path(PathRole.SID)
    url: str = query("Url")
    method: str = query("Method")
    status: str = query("Status")
    fallback_url: str = query("FallbackUrl")
    fallback_method: str = query("FallbackMethod")
    status_callback: str = query("StatusCallback")
    status_callback_method: str = query("StatusCallbackMethod")
    twiml: str = query("Twiml")
