"""Custom exceptions for the Gigya Python SDK."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from .types.errors import ERROR_CODE


@dataclass(eq=False)
class GigyaSDKError(Exception):
    """Base exception raised by the Gigya SDK."""

    message: str
    code: str
    details: Optional[Mapping[str, Any]] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    @property
    def payload(self) -> Optional[Mapping[str, Any]]:
        """The response body as returned by the API, for ``API_ERROR`` failures."""

        if self.code != ERROR_CODE.API_ERROR:
            return None
        return self.details

    @property
    def error_code(self) -> Optional[int]:
        if not self.details:
            return None
        return self.details.get("errorCode")

    @property
    def error_message(self) -> Optional[str]:
        if not self.details:
            return None
        return self.details.get("errorMessage")

    @classmethod
    def transport_error(cls, url: str, exc: BaseException) -> "GigyaSDKError":
        return cls(
            f"Could not execute Gigya call to {url}: {exc}",
            ERROR_CODE.TRANSPORT_ERROR,
            {"url": url, "reason": str(exc)},
        )

    @classmethod
    def parse_error(cls, url: str, exc: BaseException) -> "GigyaSDKError":
        return cls(
            f"Invalid JSON response from {url}: {exc}",
            ERROR_CODE.PARSE_ERROR,
            {"url": url, "reason": str(exc)},
        )

    @classmethod
    def api_error(cls, payload: Mapping[str, Any]) -> "GigyaSDKError":
        error_code = payload.get("errorCode")
        error_message = payload.get("errorMessage") or "Unknown error"
        return cls(
            f"Gigya Error {error_code}: {error_message}",
            ERROR_CODE.API_ERROR,
            payload,
        )

    @classmethod
    def configuration_error(cls, field: str, value: Any, reason: str) -> "GigyaSDKError":
        return cls(
            f"Invalid {field}: {reason}",
            ERROR_CODE.CONFIGURATION_ERROR,
            {"field": field, "value": value, "reason": reason},
        )

    @classmethod
    def unknown_options_error(cls, names: Iterable[str]) -> "GigyaSDKError":
        unknown = sorted(names)
        return cls(
            f"Unknown request options: {', '.join(unknown)}",
            ERROR_CODE.CONFIGURATION_ERROR,
            {"unknown": unknown},
        )

    @classmethod
    def missing_secret_error(cls) -> "GigyaSDKError":
        return cls(
            "This call requires a secret. Please provide one to the client configuration.",
            ERROR_CODE.MISSING_SECRET,
        )
