"""Notification (debugger log) descriptors."""

from typing import ClassVar, Optional

from twiclient.descriptors.base import Descriptor, PathRole, path, query


class Notifications(Descriptor):
    resource: ClassVar[Optional[str]] = "/Notifications"

    log: str = query("Log")
    message_date: str = query("MessageDate")
    message_date_before: str = query("MessageDate<")
    message_date_after: str = query("MessageDate>")


class Notification(Descriptor):
    resource: ClassVar[Optional[str]] = "/Notifications"

    sid: str = path(PathRole.SID)


class DeleteNotification(Descriptor):
    resource: ClassVar[Optional[str]] = "/Notifications"

    sid: str = path(PathRole.SID)
