"""
twiclient — Twilio REST API client for Python.

Describe a request as a descriptor, send it with TwilioClient.request and
get the decoded XML response back. TwiML generation lives in twiclient.twiml.
"""

from twiclient.client import TwilioClient
from twiclient.build import HttpMethod, PreparedRequest, build_request, build_url, encode_query, method_for
from twiclient.errors import ConfigurationError, ProviderError, TransportError, TwilioError, ValidationError
from twiclient.models.response import Resource, ResourceKind, Response, RestException, Status

__version__ = "0.1.0"
__all__ = [
    "TwilioClient",
    "HttpMethod",
    "PreparedRequest",
    "build_request",
    "build_url",
    "encode_query",
    "method_for",
    "TwilioError",
    "ValidationError",
    "ConfigurationError",
    "TransportError",
    "ProviderError",
    "Resource",
    "ResourceKind",
    "Response",
    "RestException",
    "Status",
]
