"""
Resource URL construction.

    {base}/{version}/Accounts/{AccountSid}{resource}/{Sid}{subresource}/{CallSid}{suffix}

Path roles are walked in a fixed order for every descriptor; the only
per-type behaviour is the suffix rule looked up in ``SUFFIX_RULES``.
"""

from typing import Callable

from twiclient.descriptors import (
    AvailablePhoneNumbers,
    Call,
    DeQueue,
    Descriptor,
    Message,
    PathRole,
    QueueMember,
    Recording,
    UsageRecords,
)
from twiclient.errors import ValidationError

API_VERSION = "2010-04-01"
DEFAULT_BASE_URL = "https://api.twilio.com"


def _recording_suffix(d: Recording) -> str:
    if not d.get_recording:
        return ".json"
    if d.get_mp3:
        return ".mp3"
    return ""


def _available_numbers_suffix(d: AvailablePhoneNumbers) -> str:
    suffix = ""
    if d.country_code:
        suffix += f"/{d.country_code}"
    if d.number_type:
        suffix += f"/{d.number_type}"
    return suffix


def _message_suffix(d: Message) -> str:
    if not d.media:
        return ""
    return f"/Media/{d.media_sid}" if d.media_sid else "/Media"


def _call_suffix(d: Call) -> str:
    if d.recordings:
        return "/Recordings"
    if d.notifications:
        return "/Notifications"
    return ""


def _usage_suffix(d: UsageRecords) -> str:
    return f"/{d.sub_resource}"


def _front_of_queue_suffix(d: Descriptor) -> str:
    if d.front and not d.call_sid:  # type: ignore[attr-defined]
        return "/Front"
    return ""


SUFFIX_RULES: dict[type[Descriptor], Callable[..., str]] = {
    Recording: _recording_suffix,
    AvailablePhoneNumbers: _available_numbers_suffix,
    Message: _message_suffix,
    Call: _call_suffix,
    UsageRecords: _usage_suffix,
    QueueMember: _front_of_queue_suffix,
    DeQueue: _front_of_queue_suffix,
}


def build_url(descriptor: Descriptor, account_sid: str, base_url: str = DEFAULT_BASE_URL) -> str:
    """Build the resource URL for ``descriptor``.

    Raises ValidationError when the descriptor declares a ``Sid`` segment
    and leaves it empty.
    """
    url = f"{base_url.rstrip('/')}/{API_VERSION}/Accounts"
    roles = descriptor.path_roles()

    if PathRole.RESOURCE in roles:
        url += f"/{account_sid}{roles[PathRole.RESOURCE]}"
    if PathRole.SID in roles:
        sid = roles[PathRole.SID]
        if not sid:
            raise ValidationError(
                f"required field missing: Sid ({type(descriptor).__name__})", field="Sid",
            )
        url += f"/{sid}"
    if PathRole.SUBRESOURCE in roles:
        url += roles[PathRole.SUBRESOURCE]
    if roles.get(PathRole.CALL_SID):
        url += f"/{roles[PathRole.CALL_SID]}"

    rule = SUFFIX_RULES.get(type(descriptor))
    if rule is not None:
        url += rule(descriptor)
    return url
