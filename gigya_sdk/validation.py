"""Input validation helpers."""
from __future__ import annotations

from typing import Any, Mapping, Optional

from .errors import GigyaSDKError
from .types.datacenters import SUPPORTED_REQUEST_METHODS


def validate_request_method(req_method: Any) -> str:
    if not isinstance(req_method, str):
        raise GigyaSDKError.configuration_error(
            "req_method", req_method, "must be a string"
        )
    normalized = req_method.strip().upper()
    if normalized not in SUPPORTED_REQUEST_METHODS:
        raise GigyaSDKError.configuration_error(
            "req_method",
            req_method,
            f"must be one of {', '.join(SUPPORTED_REQUEST_METHODS)}",
        )
    return normalized


def validate_nonce_size(nonce_size: Any) -> int:
    if isinstance(nonce_size, bool) or not isinstance(nonce_size, int) or nonce_size < 0:
        raise GigyaSDKError.configuration_error(
            "nonce_size", nonce_size, "must be a non-negative integer"
        )
    return nonce_size


def validate_connection_timeout(connection_timeout: Any) -> int:
    if (
        isinstance(connection_timeout, bool)
        or not isinstance(connection_timeout, (int, float))
        or connection_timeout <= 0
    ):
        raise GigyaSDKError.configuration_error(
            "connection_timeout", connection_timeout, "must be a positive number of milliseconds"
        )
    return connection_timeout


def validate_name(value: Any, field: str) -> str:
    """Validate a host or path component such as ``service`` or ``datacenter``."""

    if not isinstance(value, str) or not value.strip():
        raise GigyaSDKError.configuration_error(field, value, "must be a non-empty string")
    return value.strip()


def validate_method(method: Optional[str]) -> str:
    if method is None:
        raise GigyaSDKError.configuration_error(
            "method", method, "no API method given, e.g. 'getUserInfo'"
        )
    return validate_name(method, "method")


def validate_params(params: Any) -> Mapping[str, Any]:
    if params is None:
        return {}
    if not isinstance(params, Mapping):
        raise GigyaSDKError.configuration_error(
            "params", type(params).__name__, "must be a mapping of parameter names to values"
        )
    for name in params:
        if not isinstance(name, str):
            raise GigyaSDKError.configuration_error(
                "params", name, "parameter names must be strings"
            )
    return params
