"""Request signing helpers used by the SDK.

Gigya verifies every non-TLS request by recomputing an OAuth 1.0 style
HMAC-SHA1 signature over the HTTP verb, the endpoint URL and the sorted,
percent-encoded parameters.  The helpers in this module reproduce that
procedure byte for byte.
"""
from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
import secrets
import string
from typing import TYPE_CHECKING, Any, Mapping
from urllib.parse import quote

from .errors import GigyaSDKError

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .config import RequestOptions

NONCE_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits

# encodeURIComponent leaves these unescaped, OAuth does not.
_OAUTH_RESERVED = {
    "!": "%21",
    "'": "%27",
    "(": "%28",
    ")": "%29",
    "*": "%2A",
}
_URI_COMPONENT_SAFE = "-_.!~*'()"


def stringify_value(value: Any) -> str:
    """Return the wire representation of a parameter value."""

    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def encode(value: Any) -> str:
    """Percent-encode ``value`` with the reserved set OAuth expects."""

    if value is None or value == "":
        return ""

    encoded = quote(stringify_value(value), safe=_URI_COMPONENT_SAFE)
    for char, escaped in _OAUTH_RESERVED.items():
        encoded = encoded.replace(char, escaped)
    return encoded


def create_signature(text: str, key: str) -> str:
    """Sign ``text`` with the base64 encoded secret ``key``.

    The secret is decoded to raw bytes and used as the HMAC-SHA1 key; the
    digest is returned base64 encoded.
    """

    try:
        salt = base64.b64decode(key)
    except (binascii.Error, ValueError, TypeError) as exc:
        raise GigyaSDKError.configuration_error(
            "secret", None, "must be a base64 encoded string"
        ) from exc

    digest = hmac.new(salt, text.encode("utf-8"), hashlib.sha1).digest()
    return base64.b64encode(digest).decode("ascii")


def create_nonce(size: int) -> str:
    """Return ``size`` random alphanumeric characters."""

    return "".join(secrets.choice(NONCE_ALPHABET) for _ in range(size))


def canonical_parameters(params: Mapping[str, Any]) -> str:
    """Sort and encode parameters, then encode the joined string once more."""

    tokens = sorted(f"{encode(name)}={encode(value)}" for name, value in params.items())
    return encode("&".join(tokens))


def build_signature_base(options: "RequestOptions", params: Mapping[str, Any]) -> str:
    """Compose the string that is signed to produce the ``sig`` parameter."""

    url = encode(f"{options.scheme}{options.host}{options.path}")
    return "&".join([options.req_method.upper(), url, canonical_parameters(params)])


def create_request_signature(options: "RequestOptions", params: Mapping[str, Any]) -> str:
    if not options.secret:
        raise GigyaSDKError.missing_secret_error()
    return create_signature(build_signature_base(options, params), options.secret)


def _signatures_match(expected: str, signature: Any) -> bool:
    if not isinstance(signature, str):
        return False
    return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))


def validate_user_signature(signature: str, timestamp: Any, uid: str, secret: str) -> bool:
    """Check the ``UIDSignature`` Gigya attaches to user objects."""

    base = "_".join([stringify_value(timestamp), stringify_value(uid)])
    return _signatures_match(create_signature(base, secret), signature)


def validate_friend_signature(
    signature: str, timestamp: Any, friend_uid: str, uid: str, secret: str
) -> bool:
    """Check the ``friendshipSignature`` Gigya attaches to friend objects."""

    base = "_".join(
        [stringify_value(timestamp), stringify_value(friend_uid), stringify_value(uid)]
    )
    return _signatures_match(create_signature(base, secret), signature)
