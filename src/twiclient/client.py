"""
TwilioClient — executes descriptors against the REST API.
"""

import logging
from typing import Any, Optional

import httpx

from twiclient.build.dispatch import PreparedRequest, build_request
from twiclient.build.url import DEFAULT_BASE_URL
from twiclient.descriptors import Descriptor
from twiclient.errors import ConfigurationError, ProviderError
from twiclient.models.response import ResourceKind, Response
from twiclient.transport.decode import decode_response
from twiclient.transport.http import HttpClient

logger = logging.getLogger(__name__)


class TwilioClient:
    """Synchronous REST client.

    Construct with ``(account_sid, auth_token)`` or, to authenticate with an
    API key, ``(account_sid, api_key_sid, api_key_secret)``. The account sid
    is always needed because it is part of every resource URL.

    The client holds no per-request state and can be shared between threads.
    """

    def __init__(
        self,
        *credentials: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        if len(credentials) not in (2, 3):
            raise ConfigurationError(
                f"expected (account_sid, auth_token) or (account_sid, api_key, api_secret), "
                f"got {len(credentials)} credential(s)"
            )
        self._account_sid = credentials[0]
        if len(credentials) == 2:
            self._auth_user = ""
            self._auth_token = credentials[1]
        else:
            self._auth_user = credentials[1]
            self._auth_token = credentials[2]
        self._base_url = base_url

        self.http = HttpClient(
            username=self._auth_user or self._account_sid,
            password=self._auth_token,
            timeout=timeout,
            transport=transport,
        )

    @property
    def account_sid(self) -> str:
        return self._account_sid

    def prepare(self, descriptor: Descriptor) -> PreparedRequest:
        """Build the request for ``descriptor`` without sending it."""
        return build_request(descriptor, self._account_sid, self._base_url)

    def request(self, descriptor: Descriptor) -> Response:
        """Send one request and decode the reply.

        Raises ValidationError (nothing sent), TransportError (no response),
        or ProviderError when Twilio returned a RestException; the decoded
        envelope is then on ``err.response``.
        """
        prepared = self.prepare(descriptor)
        http_resp = self.http.send(prepared)

        name = type(descriptor).__name__
        resp = decode_response(
            http_resp.content,
            content_type=http_resp.headers.get("content-type", ""),
            http_status=http_resp.status_code,
            json_tag=name if ResourceKind.from_tag(name) else None,
        )
        if resp.exception is not None:
            exc = resp.exception
            logger.debug("Twilio error %s (HTTP %s): %s", exc.code, resp.status.http, exc.description)
            raise ProviderError(exc.code, exc.description, exc.more_info, response=resp)
        return resp

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "TwilioClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
