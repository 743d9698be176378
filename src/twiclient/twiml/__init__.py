"""
TwiML generation — call-control instructions serialized to XML.
"""

from twiclient.twiml.base import Element, to_xml
from twiclient.twiml.verbs import (
    Client,
    Conference,
    Dial,
    Enqueue,
    Gather,
    Hangup,
    Leave,
    Number,
    Pause,
    Play,
    Queue,
    Record,
    Redirect,
    Reject,
    Response,
    Say,
    Sms,
)

__all__ = [
    "Element",
    "to_xml",
    "Client",
    "Conference",
    "Dial",
    "Enqueue",
    "Gather",
    "Hangup",
    "Leave",
    "Number",
    "Pause",
    "Play",
    "Queue",
    "Record",
    "Redirect",
    "Reject",
    "Response",
    "Say",
    "Sms",
]
