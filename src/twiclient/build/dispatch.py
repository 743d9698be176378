"""
HTTP method classification and request assembly.
"""

from dataclasses import dataclass, field
from enum import Enum

from twiclient import descriptors as d
from twiclient.build.query import encode_query
from twiclient.build.url import DEFAULT_BASE_URL, build_url

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


# Every descriptor class is listed here; tests check nothing is missing.
METHODS: dict[type[d.Descriptor], HttpMethod] = {
    # DELETE
    d.DeleteNotification: HttpMethod.DELETE,
    d.DeleteOutgoingCallerId: HttpMethod.DELETE,
    d.DeleteRecording: HttpMethod.DELETE,
    d.DeleteParticipant: HttpMethod.DELETE,
    d.DeleteQueue: HttpMethod.DELETE,
    # POST
    d.SendMessage: HttpMethod.POST,
    d.MakeCall: HttpMethod.POST,
    d.ModifyCall: HttpMethod.POST,
    d.CreateQueue: HttpMethod.POST,
    d.ChangeQueue: HttpMethod.POST,
    d.DeQueue: HttpMethod.POST,
    d.UpdateParticipant: HttpMethod.POST,
    d.AddOutgoingCallerId: HttpMethod.POST,
    d.UpdateOutgoingCallerId: HttpMethod.POST,
    d.CreateIncomingPhoneNumber: HttpMethod.POST,
    # GET
    d.Accounts: HttpMethod.GET,
    d.Account: HttpMethod.GET,
    d.Messages: HttpMethod.GET,
    d.Message: HttpMethod.GET,
    d.Calls: HttpMethod.GET,
    d.Call: HttpMethod.GET,
    d.Notifications: HttpMethod.GET,
    d.Notification: HttpMethod.GET,
    d.OutgoingCallerIds: HttpMethod.GET,
    d.OutgoingCallerId: HttpMethod.GET,
    d.Recordings: HttpMethod.GET,
    d.Recording: HttpMethod.GET,
    d.UsageRecords: HttpMethod.GET,
    d.Queues: HttpMethod.GET,
    d.Queue: HttpMethod.GET,
    d.QueueMembers: HttpMethod.GET,
    d.QueueMember: HttpMethod.GET,
    d.Conferences: HttpMethod.GET,
    d.Conference: HttpMethod.GET,
    d.Participants: HttpMethod.GET,
    d.Participant: HttpMethod.GET,
    d.IncomingPhoneNumbers: HttpMethod.GET,
    d.IncomingPhoneNumber: HttpMethod.GET,
    d.AvailablePhoneNumbers: HttpMethod.GET,
}


def method_for(descriptor: d.Descriptor) -> HttpMethod:
    return METHODS.get(type(descriptor), HttpMethod.GET)


@dataclass(frozen=True)
class PreparedRequest:
    method: HttpMethod
    url: str
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)


def build_request(
    descriptor: d.Descriptor, account_sid: str, base_url: str = DEFAULT_BASE_URL,
) -> PreparedRequest:
    """Turn a descriptor into method, URL and body.

    GET carries the parameters in the URL; POST and DELETE send them as a
    form-encoded body. Raises ValidationError from build_url.
    """
    url = build_url(descriptor, account_sid, base_url)
    query_str = encode_query(descriptor)
    method = method_for(descriptor)

    if method is HttpMethod.GET:
        if query_str:
            url = f"{url}?{query_str}"
        return PreparedRequest(method=method, url=url)
    return PreparedRequest(
        method=method, url=url, body=query_str, headers={"Content-Type": FORM_CONTENT_TYPE},
    )
