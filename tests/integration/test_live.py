"""
Integration tests for twiclient — run against the real Twilio API.

Requires environment variables:
  TWILIO_ACCOUNT_SID  — account to query
  TWILIO_AUTH_TOKEN   — its auth token

Run: TWICLIENT_INTEGRATION=1 pytest tests/integration/ -v

Only read-only requests are made; nothing is sent or charged.
"""

import os

import pytest

from twiclient import ProviderError, TwilioClient, ValidationError
from twiclient import descriptors as d
from twiclient.models.response import ResourceKind

SKIP = not os.environ.get("TWICLIENT_INTEGRATION")
ACCOUNT_SID = os.environ.get("TWILIO_ACCOUNT_SID", "")
AUTH_TOKEN = os.environ.get("TWILIO_AUTH_TOKEN", "")

pytestmark = pytest.mark.skipif(SKIP, reason="TWICLIENT_INTEGRATION not set")


@pytest.fixture
def client():
    with TwilioClient(ACCOUNT_SID, AUTH_TOKEN) as c:
        yield c


class TestAccount:
    def test_fetch_own_account(self, client):
        resp = client.request(d.Account(sid=ACCOUNT_SID))
        assert resp.status.http == 200
        assert resp.kind is ResourceKind.ACCOUNT
        assert resp.resource.sid == ACCOUNT_SID

    def test_bad_token_is_provider_error(self):
        with TwilioClient(ACCOUNT_SID, "not-a-token") as bad:
            with pytest.raises(ProviderError) as excinfo:
                bad.request(d.Account(sid=ACCOUNT_SID))
        assert excinfo.value.code == 20003
        assert excinfo.value.http_status == 401


class TestListing:
    def test_list_messages(self, client):
        resp = client.request(d.Messages(page_size="5"))
        assert resp.kind is ResourceKind.MESSAGES
        assert len(resp.resource.items) <= 5

    def test_list_queues(self, client):
        resp = client.request(d.Queues())
        assert resp.kind is ResourceKind.QUEUES

    def test_unknown_recording(self, client):
        with pytest.raises(ProviderError) as excinfo:
            client.request(d.Recording(sid="RE00000000000000000000000000000000"))
        assert excinfo.value.http_status == 404

    def test_missing_sid_never_reaches_api(self, client):
        with pytest.raises(ValidationError):
            client.request(d.Call())
