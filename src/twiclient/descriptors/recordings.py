"""Recording descriptors."""

from typing import ClassVar, Optional

from twiclient.descriptors.base import Descriptor, PathRole, path, query


class Recordings(Descriptor):
    resource: ClassVar[Optional[str]] = "/Recordings"

    # A filter here, not a path segment.
    call_sid: str = query("CallSid")
    date_created: str = query("DateCreated")
    date_created_before: str = query("DateCreated<")
    date_created_after: str = query("DateCreated>")


class Recording(Descriptor):
    """Recording metadata (``.json``), or the audio itself with ``get_recording``.

    ``get_mp3`` only applies together with ``get_recording``; the default
    audio format is WAV.
    """

    resource: ClassVar[Optional[str]] = "/Recordings"

    sid: str = path(PathRole.SID)
    get_recording: bool = False
    get_mp3: bool = False


class DeleteRecording(Descriptor):
    resource: ClassVar[Optional[str]] = "/Recordings"

    sid: str = path(PathRole.SID)
