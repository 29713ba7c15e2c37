"""Construction of signed Gigya requests."""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional
from urllib.parse import quote, urlencode

from .config import RequestOptions
from .errors import GigyaSDKError
from .signing import create_nonce, create_request_signature, stringify_value

USER_AGENT = "python-gigya-sdk/0.1"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

NonceFactory = Callable[[int], str]


@dataclass(slots=True)
class SignedRequest:
    """A fully prepared request, ready to hand over to the transport."""

    host: str
    path: str
    method: str
    scheme: str
    params: Dict[str, str]
    body: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def url(self) -> str:
        return f"{self.scheme}{self.host}{self.path}"


def build_params(
    options: RequestOptions,
    *,
    now: Optional[float] = None,
    nonce_factory: NonceFactory = create_nonce,
) -> Dict[str, str]:
    """Return the final parameter mapping, credentials and signature included."""

    params = {name: stringify_value(value) for name, value in options.params.items()}
    if options.api_key:
        params["apiKey"] = options.api_key
    if options.user_key:
        params["userKey"] = options.user_key
    params["format"] = "json"

    if not options.secret:
        raise GigyaSDKError.missing_secret_error()

    if options.ssl:
        params["secret"] = options.secret
        return params

    timestamp = time.time() if now is None else now
    params["timestamp"] = str(round(timestamp))
    params["nonce"] = nonce_factory(options.nonce_size)
    params.pop("sig", None)
    params["sig"] = create_request_signature(options, params)
    return params


def build_request(
    options: RequestOptions,
    *,
    now: Optional[float] = None,
    nonce_factory: NonceFactory = create_nonce,
) -> SignedRequest:
    params = build_params(options, now=now, nonce_factory=nonce_factory)
    encoded = urlencode(params, quote_via=quote)

    request = SignedRequest(
        host=options.host,
        path=options.path,
        method=options.req_method,
        scheme=options.scheme,
        params=params,
        headers={"User-Agent": USER_AGENT},
    )

    if options.req_method == "POST":
        request.body = encoded
        request.headers["Content-Type"] = FORM_CONTENT_TYPE
        request.headers["Content-Length"] = str(len(encoded.encode("utf-8")))
    else:
        request.path = f"{request.path}?{encoded}"

    return request
