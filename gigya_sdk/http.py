"""HTTP transport used by the Gigya SDK."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, MutableMapping, Optional

import requests

from .errors import GigyaSDKError
from .request_builder import SignedRequest

logger = logging.getLogger(__name__)

HttpRequestor = Callable[[str, Mapping[str, Any]], requests.Response]

HTTP_BAD_REQUEST = 400


def _default_requestor(url: str, kwargs: Mapping[str, Any]) -> requests.Response:
    # A fresh session per call; connections are not shared between requests.
    with requests.Session() as session:
        return session.request(url=url, **dict(kwargs))


@dataclass
class HttpClient:
    """Small convenience wrapper around :mod:`requests` issuing signed requests."""

    requestor: Optional[HttpRequestor] = None

    def __post_init__(self) -> None:
        if self.requestor is None:
            self.requestor = _default_requestor

    def send(self, request: SignedRequest, timeout_ms: float) -> Any:
        """Issue ``request`` and return the parsed JSON body.

        Raises :class:`GigyaSDKError` with code ``TRANSPORT_ERROR`` when the
        request cannot be completed within ``timeout_ms``, ``PARSE_ERROR``
        when the body is not JSON and ``API_ERROR`` when the body reports a
        ``statusCode`` of 400 or more.
        """

        url = request.url
        kwargs: MutableMapping[str, Any] = {
            "method": request.method,
            "headers": dict(request.headers),
            "timeout": timeout_ms / 1000,
        }
        if request.body is not None:
            kwargs["data"] = request.body.encode("utf-8")

        logger.debug("Sending %s %s%s", request.method, request.host, request.path.split("?", 1)[0])

        assert self.requestor is not None
        try:
            response = self.requestor(url, kwargs)
        except requests.RequestException as exc:
            logger.warning("Gigya call to %s failed: %s", request.host, exc)
            raise GigyaSDKError.transport_error(url, exc) from exc

        try:
            result = response.json()
        except ValueError as exc:
            logger.warning("Gigya call to %s returned a non-JSON body: %s", request.host, exc)
            raise GigyaSDKError.parse_error(url, exc) from exc

        if isinstance(result, Mapping) and _is_error_status(result.get("statusCode")):
            logger.info(
                "Gigya call to %s returned errorCode %s",
                request.host,
                result.get("errorCode"),
            )
            raise GigyaSDKError.api_error(result)

        return result


def _is_error_status(status: Any) -> bool:
    if isinstance(status, bool):
        return False
    try:
        return int(status) >= HTTP_BAD_REQUEST
    except (TypeError, ValueError):
        return False
