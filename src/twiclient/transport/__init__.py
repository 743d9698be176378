from twiclient.transport.decode import decode_response
from twiclient.transport.http import HttpClient

__all__ = ["HttpClient", "decode_response"]
