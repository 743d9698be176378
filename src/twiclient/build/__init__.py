"""Descriptor -> HTTP request construction."""

from twiclient.build.dispatch import METHODS, HttpMethod, PreparedRequest, build_request, method_for
from twiclient.build.query import encode_query
from twiclient.build.url import API_VERSION, DEFAULT_BASE_URL, SUFFIX_RULES, build_url

__all__ = [
    "API_VERSION",
    "DEFAULT_BASE_URL",
    "METHODS",
    "SUFFIX_RULES",
    "HttpMethod",
    "PreparedRequest",
    "build_request",
    "build_url",
    "encode_query",
    "method_for",
]
