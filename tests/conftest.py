"""Shared fixtures: canned Twilio bodies and a client wired to httpx.MockTransport."""

from typing import Callable

import httpx
import pytest

from twiclient import TwilioClient

ACCOUNT_SID = "AC123"
AUTH_TOKEN = "secret-token"

MESSAGE_XML = b"""<?xml version='1.0' encoding='UTF-8'?>
<TwilioResponse>
  <Message>
    <Sid>SM123</Sid>
    <AccountSid>AC123</AccountSid>
    <To>+15551234567</To>
    <From>+15557654321</From>
    <Body>Hello</Body>
    <Status>queued</Status>
    <SubresourceUris>
      <Media>/2010-04-01/Accounts/AC123/Messages/SM123/Media</Media>
    </SubresourceUris>
  </Message>
</TwilioResponse>"""

MESSAGES_XML = b"""<?xml version='1.0' encoding='UTF-8'?>
<TwilioResponse>
  <Messages page="0" pagesize="50">
    <Message><Sid>SM1</Sid><To>+15551234567</To><Status>delivered</Status></Message>
    <Message><Sid>SM2</Sid><To>+15551234568</To><Status>failed</Status></Message>
  </Messages>
</TwilioResponse>"""

AUTH_ERROR_XML = b"""<?xml version='1.0' encoding='UTF-8'?>
<TwilioResponse>
  <RestException>
    <Code>20003</Code>
    <Detail>Authentication Error</Detail>
    <Message>Authenticate</Message>
    <MoreInfo>https://www.example.com/errors</MoreInfo>
    <Status>401</Status>
  </RestException>
</TwilioResponse>"""

XML_HEADERS = {"Content-Type": "application/xml; charset=utf-8"}


@pytest.fixture
def make_client():
    clients: list[TwilioClient] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response], *credentials: str) -> TwilioClient:
        client = TwilioClient(*(credentials or (ACCOUNT_SID, AUTH_TOKEN)), transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()
