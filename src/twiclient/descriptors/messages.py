"""Message (SMS/MMS) descriptors."""

from typing import ClassVar, Optional

from twiclient.descriptors.base import Descriptor, PathRole, path, query


class SendMessage(Descriptor):
    resource: ClassVar[Optional[str]] = "/Messages"

    to: str = query("To")
    from_: str = query("From")
    messaging_service_sid: str = query("MessagingServiceSid")
    body: str = query("Body")
    media_url: tuple[str, ...] = query("MediaUrl", repeated=True)
    status_callback: str = query("StatusCallback")
    application_sid: str = query("ApplicationSid")
    max_price: str = query("MaxPrice")
    validity_period: str = query("ValidityPeriod")


class Messages(Descriptor):
    resource: ClassVar[Optional[str]] = "/Messages"

    to: str = query("To")
    from_: str = query("From")
    date_sent: str = query("DateSent")
    date_sent_before: str = query("DateSent<")
    date_sent_after: str = query("DateSent>")
    page_size: str = query("PageSize")


class Message(Descriptor):
    """A single message. ``media`` switches to its media list, ``media_sid`` to one item."""

    resource: ClassVar[Optional[str]] = "/Messages"

    sid: str = path(PathRole.SID)
    media: bool = False
    media_sid: str = ""
