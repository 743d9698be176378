"""
TwiML voice/messaging vocabulary.
"""

from __future__ import annotations

from typing import ClassVar, Optional, Union

from pydantic import Field

from twiclient.twiml.base import XML_DECLARATION, Element, to_xml


class Say(Element):
    text_field: ClassVar[Optional[str]] = "text"

    text: str = ""
    voice: str = ""
    language: str = ""
    loop: Optional[int] = None


class Play(Element):
    text_field: ClassVar[Optional[str]] = "url"

    url: str = ""
    loop: Optional[int] = None
    digits: str = ""


class Pause(Element):
    length: Optional[int] = None


class Sms(Element):
    text_field: ClassVar[Optional[str]] = "text"

    text: str = ""
    to: str = ""
    from_: str = Field("", alias="from")
    action: str = ""
    method: str = ""
    status_callback: str = ""


class Redirect(Element):
    text_field: ClassVar[Optional[str]] = "url"

    url: str = ""
    method: str = ""


class Hangup(Element):
    pass


class Leave(Element):
    pass


class Reject(Element):
    reason: str = ""


class Enqueue(Element):
    text_field: ClassVar[Optional[str]] = "name"

    name: str = ""
    action: str = ""
    method: str = ""
    wait_url: str = ""
    wait_url_method: str = ""
    workflow_sid: str = ""


class Record(Element):
    action: str = ""
    method: str = ""
    timeout: Optional[int] = None
    finish_on_key: str = ""
    max_length: Optional[int] = None
    transcribe: Optional[bool] = None
    transcribe_callback: str = ""
    play_beep: Optional[bool] = None
    trim: str = ""
    recording_status_callback: str = ""
    recording_status_callback_method: str = ""


class Gather(Element):
    """Collect digits or speech; nested Say/Play/Pause are played while waiting."""

    action: str = ""
    method: str = ""
    timeout: Optional[int] = None
    finish_on_key: str = ""
    num_digits: Optional[int] = None
    input: str = ""
    speech_timeout: str = ""
    children: tuple[Union[Say, Play, Pause], ...] = ()


# Dial nouns


class Number(Element):
    text_field: ClassVar[Optional[str]] = "number"

    number: str = ""
    send_digits: str = ""
    url: str = ""
    method: str = ""
    status_callback: str = ""
    status_callback_method: str = ""


class Client(Element):
    text_field: ClassVar[Optional[str]] = "name"

    name: str = ""
    url: str = ""
    method: str = ""


class Conference(Element):
    text_field: ClassVar[Optional[str]] = "name"

    name: str = ""
    muted: Optional[bool] = None
    beep: str = ""
    start_conference_on_enter: Optional[bool] = None
    end_conference_on_exit: Optional[bool] = None
    wait_url: str = ""
    wait_method: str = ""
    max_participants: Optional[int] = None
    record: str = ""


class Queue(Element):
    text_field: ClassVar[Optional[str]] = "name"

    name: str = ""
    url: str = ""
    method: str = ""


class Dial(Element):
    """Connect the call. ``number`` is dialled directly; nouns go in ``children``."""

    text_field: ClassVar[Optional[str]] = "number"

    number: str = ""
    action: str = ""
    method: str = ""
    timeout: Optional[int] = None
    hangup_on_star: Optional[bool] = None
    time_limit: Optional[int] = None
    caller_id: str = ""
    record: str = ""
    recording_status_callback: str = ""
    recording_status_callback_method: str = ""
    children: tuple[Union[Number, Client, Conference, Queue], ...] = ()


Verb = Union[Say, Play, Pause, Sms, Redirect, Hangup, Leave, Reject, Enqueue, Record, Gather, Dial]


class Response(Element):
    """The <Response> document root."""

    children: tuple[Verb, ...] = ()

    def to_xml(self) -> str:
        return XML_DECLARATION + to_xml(self)
