"""Error codes carried by :class:`gigya_sdk.errors.GigyaSDKError`."""
from __future__ import annotations

from enum import Enum


class ERROR_CODE(str, Enum):
    """Failure kinds raised by the SDK."""

    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    PARSE_ERROR = "PARSE_ERROR"
    API_ERROR = "API_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    MISSING_SECRET = "MISSING_SECRET"

    def __str__(self) -> str:
        return self.value
