"""
Response body decoding.

Twilio answers in XML unless the URL asks for ``.json``; recordings fetched
as audio come back as raw bytes. Decoding never raises: a malformed body
leaves the envelope partially filled and the parse error on
``Response.decode_error``.
"""

import json
import logging
from typing import Any, Optional
from xml.etree import ElementTree

from twiclient.models.response import Resource, ResourceKind, Response, RestException, Status

logger = logging.getLogger(__name__)

EXCEPTION_TAG = "RestException"


def _element_to_resource(elem: ElementTree.Element) -> Resource:
    return Resource(
        tag=elem.tag,
        attributes=dict(elem.attrib),
        text=(elem.text or "").strip(),
        children=[_element_to_resource(child) for child in elem],
    )


def _int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _exception_from_xml(elem: ElementTree.Element) -> RestException:
    return RestException(
        code=_int(elem.findtext("Code")),
        message=elem.findtext("Message") or "",
        detail=elem.findtext("Detail") or "",
        more_info=elem.findtext("MoreInfo") or "",
        status=_int(elem.findtext("Status")),
    )


def _json_to_resource(tag: str, data: Any) -> Resource:
    if isinstance(data, dict):
        return Resource(tag=tag, children=[_json_to_resource(k, v) for k, v in data.items()])
    if isinstance(data, list):
        return Resource(tag=tag, children=[_json_to_resource(tag, v) for v in data])
    return Resource(tag=tag, text="" if data is None else str(data))


def _decode_xml(resp: Response, content: bytes) -> None:
    try:
        root = ElementTree.fromstring(content)
    except ElementTree.ParseError as e:
        resp.decode_error = f"invalid XML: {e}"
        return

    for child in root:
        if child.tag == EXCEPTION_TAG:
            if resp.exception is None:
                resp.exception = _exception_from_xml(child)
        elif resp.resource is None:
            resp.resource = _element_to_resource(child)
            resp.kind = ResourceKind.from_tag(child.tag)


def _decode_json(resp: Response, content: bytes, json_tag: Optional[str]) -> None:
    try:
        data = json.loads(content)
    except ValueError as e:
        resp.decode_error = f"invalid JSON: {e}"
        return

    if isinstance(data, dict) and "code" in data and "more_info" in data:
        resp.exception = RestException(
            code=_int(data.get("code")),
            message=data.get("message") or "",
            detail=data.get("detail") or "",
            more_info=data.get("more_info") or "",
            status=_int(data.get("status")),
        )
        return
    tag = json_tag or "Resource"
    resp.resource = _json_to_resource(tag, data)
    resp.kind = ResourceKind.from_tag(tag)


def decode_response(
    content: bytes, content_type: str = "", http_status: int = 0, json_tag: Optional[str] = None,
) -> Response:
    """Decode a response body into a Response envelope.

    ``json_tag`` names the resource when the body is JSON, which carries no
    element name of its own.
    """
    resp = Response(status=Status(http=http_status), content=content, content_type=content_type)
    mime = content_type.split(";", 1)[0].strip().lower()

    if not content.strip():
        return resp
    if mime.endswith("json"):
        _decode_json(resp, content, json_tag)
    elif not mime or mime.endswith("xml"):
        _decode_xml(resp, content)
    else:
        # audio/*, octet-stream: kept as raw content
        return resp

    if resp.decode_error:
        logger.warning("Could not decode %s response (HTTP %s): %s", mime or "untyped", http_status, resp.decode_error)
    if resp.exception is not None:
        resp.status.provider = resp.exception.code
    return resp
