"""Incoming and available phone number descriptors."""

from typing import ClassVar, Optional

from twiclient.descriptors.base import Descriptor, PathRole, path, query


class IncomingPhoneNumbers(Descriptor):
    resource: ClassVar[Optional[str]] = "/IncomingPhoneNumbers"

    phone_number: str = query("PhoneNumber")
    friendly_name: str = query("FriendlyName")


class IncomingPhoneNumber(Descriptor):
    resource: ClassVar[Optional[str]] = "/IncomingPhoneNumbers"

    sid: str = path(PathRole.SID)


class CreateIncomingPhoneNumber(Descriptor):
    resource: ClassVar[Optional[str]] = "/IncomingPhoneNumbers"

    phone_number: str = query("PhoneNumber")
    area_code: str = query("AreaCode")
    friendly_name: str = query("FriendlyName")
    voice_url: str = query("VoiceUrl")
    voice_method: str = query("VoiceMethod")
    voice_fallback_url: str = query("VoiceFallbackUrl")
    voice_fallback_method: str = query("VoiceFallbackMethod")
    status_callback: str = query("StatusCallback")
    status_callback_method: str = query("StatusCallbackMethod")
    sms_url: str = query("SmsUrl")
    sms_method: str = query("SmsMethod")
    sms_fallback_url: str = query("SmsFallbackUrl")
    sms_fallback_method: str = query("SmsFallbackMethod")


class AvailablePhoneNumbers(Descriptor):
    """Number search: /AvailablePhoneNumbers/{country_code}/{number_type}."""

    resource: ClassVar[Optional[str]] = "/AvailablePhoneNumbers"

    country_code: str = ""
    number_type: str = ""
    area_code: str = query("AreaCode")
    contains: str = query("Contains")
    in_region: str = query("InRegion")
    in_postal_code: str = query("InPostalCode")
    near_number: str = query("NearNumber")
    near_lat_long: str = query("NearLatLong")
    distance: str = query("Distance")
    sms_enabled: str = query("SmsEnabled")
    mms_enabled: str = query("MmsEnabled")
    voice_enabled: str = query("VoiceEnabled")
