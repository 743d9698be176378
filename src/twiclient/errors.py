"""
twiclient error types.
"""

from typing import TYPE_CHECKING, Any, Optional, Union

if TYPE_CHECKING:
    from twiclient.models.response import Response


class TwilioError(Exception):
    def __init__(self, code: Union[str, int], message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class ValidationError(TwilioError):
    """A descriptor is missing a field the URL needs. Raised before any network call."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__("validation_error", message, {"field": field} if field else None)
        self.field = field


class ConfigurationError(TwilioError):
    def __init__(self, message: str):
        super().__init__("configuration_error", message)


class TransportError(TwilioError):
    def __init__(self, message: str):
        super().__init__("transport_error", message)


class ProviderError(TwilioError):
    """Twilio answered with a RestException body.

    ``code`` is Twilio's numeric error code; the decoded envelope (with the
    HTTP status) is kept on ``response``.
    """

    def __init__(self, code: int, detail: str, more_info: str = "", response: Optional["Response"] = None):
        message = f"{detail} ({more_info})" if more_info else detail
        super().__init__(code, message, {"more_info": more_info} if more_info else None)
        self.detail = detail
        self.more_info = more_info
        self.response = response

    @property
    def http_status(self) -> Optional[int]:
        return self.response.status.http if self.response is not None else None
