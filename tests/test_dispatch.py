from typing import ClassVar, Optional

import pytest

from twiclient import descriptors as d
from twiclient.build import METHODS, HttpMethod, build_request, method_for
from twiclient.errors import ValidationError

CATALOG = [
    getattr(d, name) for name in d.__all__
    if isinstance(getattr(d, name), type) and issubclass(getattr(d, name), d.Descriptor)
    and getattr(d, name) is not d.Descriptor
]


class Ping(d.Descriptor):
    resource: ClassVar[Optional[str]] = "/Ping"


def test_method_table_covers_every_descriptor():
    missing = [cls.__name__ for cls in CATALOG if cls not in METHODS]
    assert missing == []


@pytest.mark.parametrize(
    "cls",
    [d.DeleteNotification, d.DeleteOutgoingCallerId, d.DeleteRecording, d.DeleteParticipant, d.DeleteQueue],
)
def test_delete_variants(cls):
    assert METHODS[cls] is HttpMethod.DELETE


@pytest.mark.parametrize(
    "cls",
    [
        d.SendMessage, d.MakeCall, d.ModifyCall, d.CreateQueue, d.ChangeQueue, d.DeQueue,
        d.UpdateParticipant, d.AddOutgoingCallerId, d.UpdateOutgoingCallerId, d.CreateIncomingPhoneNumber,
    ],
)
def test_post_variants(cls):
    assert METHODS[cls] is HttpMethod.POST


def test_everything_else_is_get():
    non_get = {cls for cls, method in METHODS.items() if method is not HttpMethod.GET}
    assert len(non_get) == 15
    assert all(METHODS[cls] is HttpMethod.GET for cls in CATALOG if cls not in non_get)


def test_unclassified_descriptor_defaults_to_get():
    assert method_for(Ping()) is HttpMethod.GET


def test_get_puts_query_in_url():
    req = build_request(d.Messages(to="+15551234567"), "AC123")
    assert req.method is HttpMethod.GET
    assert req.url == "https://api.twilio.com/2010-04-01/Accounts/AC123/Messages?To=%2B15551234567"
    assert req.body == ""
    assert req.headers == {}


def test_get_without_parameters_has_no_question_mark():
    req = build_request(d.Queues(), "AC123")
    assert req.url == "https://api.twilio.com/2010-04-01/Accounts/AC123/Queues"


def test_post_puts_query_in_body():
    req = build_request(d.SendMessage(to="+1", body="hi there"), "AC123")
    assert req.method is HttpMethod.POST
    assert req.url == "https://api.twilio.com/2010-04-01/Accounts/AC123/Messages"
    assert req.body == "To=%2B1&Body=hi+there"
    assert req.headers["Content-Type"] == "application/x-www-form-urlencoded"


def test_delete_has_form_content_type():
    req = build_request(d.DeleteQueue(sid="QU1"), "AC123")
    assert req.method is HttpMethod.DELETE
    assert "?" not in req.url
    assert req.body == ""
    assert req.headers["Content-Type"] == "application/x-www-form-urlencoded"


def test_validation_error_propagates():
    with pytest.raises(ValidationError):
        build_request(d.ChangeQueue(friendly_name="support"), "AC123")
