"""Python client for the Gigya identity and social login REST API."""
from .client import GigyaClient
from .config import ClientConfig, RequestOptions, resolve_options
from .errors import GigyaSDKError
from .gigya import Gigya
from .request_builder import SignedRequest, build_request
from .services import DS, GM, IDS, Accounts, Comments, Reports, Socialize
from .signing import (
    create_nonce,
    create_request_signature,
    create_signature,
    encode,
    validate_user_signature,
)
from .types import DATACENTER, ERROR_CODE

__all__ = [
    "Accounts",
    "ClientConfig",
    "Comments",
    "DATACENTER",
    "DS",
    "ERROR_CODE",
    "GM",
    "Gigya",
    "GigyaClient",
    "GigyaSDKError",
    "IDS",
    "Reports",
    "RequestOptions",
    "SignedRequest",
    "Socialize",
    "build_request",
    "create_nonce",
    "create_request_signature",
    "create_signature",
    "encode",
    "resolve_options",
    "validate_user_signature",
]
