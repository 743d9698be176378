"""
HTTP transport — one synchronous httpx.Client per TwilioClient.
"""

import logging
from typing import Optional

import httpx

from twiclient.build.dispatch import PreparedRequest
from twiclient.errors import TransportError

logger = logging.getLogger(__name__)

USER_AGENT = "twiclient/0.1.0"


class HttpClient:
    def __init__(
        self,
        username: str,
        password: str,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._client = httpx.Client(
            auth=httpx.BasicAuth(username, password),
            headers={"User-Agent": USER_AGENT, "Accept": "*/*"},
            timeout=timeout,
            transport=transport,
        )

    def send(self, request: PreparedRequest) -> httpx.Response:
        """Execute a prepared request. Non-2xx statuses are returned, not raised."""
        if request.body:
            logger.debug("%s %s body=%r", request.method.value, request.url, request.body)
        else:
            logger.debug("%s %s", request.method.value, request.url)
        try:
            resp = self._client.request(
                request.method.value,
                request.url,
                content=request.body.encode() if request.body else None,
                headers=request.headers,
            )
        except httpx.HTTPError as e:
            raise TransportError(f"{request.method.value} {request.url} failed: {e}") from e
        logger.debug("HTTP %s from %s", resp.status_code, request.url)
        return resp

    def close(self) -> None:
        self._client.close()
