"""
Request descriptors — one frozen model per REST resource or action.
"""

from twiclient.descriptors.base import Descriptor, PathRole, path, query
from twiclient.descriptors.accounts import Account, Accounts
from twiclient.descriptors.messages import Message, Messages, SendMessage
from twiclient.descriptors.calls import Call, Calls, MakeCall, ModifyCall
from twiclient.descriptors.notifications import DeleteNotification, Notification, Notifications
from twiclient.descriptors.caller_ids import (
    AddOutgoingCallerId,
    DeleteOutgoingCallerId,
    OutgoingCallerId,
    OutgoingCallerIds,
    UpdateOutgoingCallerId,
)
from twiclient.descriptors.recordings import DeleteRecording, Recording, Recordings
from twiclient.descriptors.usage import UsageRecords
from twiclient.descriptors.queues import (
    ChangeQueue,
    CreateQueue,
    DeleteQueue,
    DeQueue,
    Queue,
    QueueMember,
    QueueMembers,
    Queues,
)
from twiclient.descriptors.conferences import (
    Conference,
    Conferences,
    DeleteParticipant,
    Participant,
    Participants,
    UpdateParticipant,
)
from twiclient.descriptors.numbers import (
    AvailablePhoneNumbers,
    CreateIncomingPhoneNumber,
    IncomingPhoneNumber,
    IncomingPhoneNumbers,
)

__all__ = [
    "Descriptor",
    "PathRole",
    "path",
    "query",
    "Account",
    "Accounts",
    "Message",
    "Messages",
    "SendMessage",
    "Call",
    "Calls",
    "MakeCall",
    "ModifyCall",
    "DeleteNotification",
    "Notification",
    "Notifications",
    "AddOutgoingCallerId",
    "DeleteOutgoingCallerId",
    "OutgoingCallerId",
    "OutgoingCallerIds",
    "UpdateOutgoingCallerId",
    "DeleteRecording",
    "Recording",
    "Recordings",
    "UsageRecords",
    "ChangeQueue",
    "CreateQueue",
    "DeleteQueue",
    "DeQueue",
    "Queue",
    "QueueMember",
    "QueueMembers",
    "Queues",
    "Conference",
    "Conferences",
    "DeleteParticipant",
    "Participant",
    "Participants",
    "UpdateParticipant",
    "AvailablePhoneNumbers",
    "CreateIncomingPhoneNumber",
    "IncomingPhoneNumber",
    "IncomingPhoneNumbers",
]
