"""Queue and queue member descriptors."""

from typing import ClassVar, Optional

from twiclient.descriptors.base import Descriptor, PathRole, path, query


class Queues(Descriptor):
    resource: ClassVar[Optional[str]] = "/Queues"


class Queue(Descriptor):
    resource: ClassVar[Optional[str]] = "/Queues"

    sid: str = path(PathRole.SID)


class CreateQueue(Descriptor):
    resource: ClassVar[Optional[str]] = "/Queues"

    friendly_name: str = query("FriendlyName")
    max_size: str = query("MaxSize")


class ChangeQueue(Descriptor):
    resource: ClassVar[Optional[str]] = "/Queues"

    sid: str = path(PathRole.SID)
    friendly_name: str = query("FriendlyName")
    max_size: str = query("MaxSize")


class DeleteQueue(Descriptor):
    resource: ClassVar[Optional[str]] = "/Queues"

    sid: str = path(PathRole.SID)


class QueueMembers(Descriptor):
    resource: ClassVar[Optional[str]] = "/Queues"
    subresource: ClassVar[Optional[str]] = "/Members"

    sid: str = path(PathRole.SID)


class QueueMember(Descriptor):
    """One member of a queue, by call sid, or the member at the front."""

    resource: ClassVar[Optional[str]] = "/Queues"
    subresource: ClassVar[Optional[str]] = "/Members"

    sid: str = path(PathRole.SID)
    call_sid: str = path(PathRole.CALL_SID)
    front: bool = False


class DeQueue(Descriptor):
    """Redirect a queued call (or the front of the queue) to new TwiML."""

    resource: ClassVar[Optional[str]] = "/Queues"
    subresource: ClassVar[Optional[str]] = "/Members"

    sid: str = path(PathRole.SID)
    call_sid: str = path(PathRole.CALL_SID)
    front: bool = False
    url: str = query("Url")
    method: str = query("Method")
