"""Low level client issuing signed Gigya requests."""
from __future__ import annotations

import threading
from concurrent.futures import Future
from typing import Any, Callable, Mapping, Optional

from .config import DEFAULT_CONFIG, ClientConfig, RequestOptions, merge_config, resolve_options
from .errors import GigyaSDKError
from .http import HttpClient, HttpRequestor
from .request_builder import NonceFactory, SignedRequest, build_request
from .signing import create_nonce, validate_friend_signature, validate_user_signature

Callback = Callable[[Optional[BaseException], Any], None]


class GigyaClient:
    """Creates, signs and issues Gigya API calls.

    Configuration is taken from ``config`` (defaults when omitted) with any
    keyword ``options`` applied on top, and is never mutated afterwards.
    Every call may override any configuration field without affecting
    the client or other calls.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        http_requestor: Optional[HttpRequestor] = None,
        nonce_factory: NonceFactory = create_nonce,
        **options: Any,
    ) -> None:
        self.config = merge_config(config or DEFAULT_CONFIG, options)
        self._http_client = HttpClient(http_requestor)
        self._nonce_factory = nonce_factory

    def prepare(
        self, method: str, params: Optional[Mapping[str, Any]] = None, **overrides: Any
    ) -> tuple[RequestOptions, SignedRequest]:
        """Resolve options for one call and build its signed request."""

        options = resolve_options(
            self.config, {**overrides, "method": method, "params": params}
        )
        return options, build_request(options, nonce_factory=self._nonce_factory)

    def raw(self, request: SignedRequest, options: RequestOptions) -> Any:
        """Issue an already prepared request."""

        return self._http_client.send(request, options.connection_timeout)

    def request(
        self,
        method: str,
        params: Optional[Mapping[str, Any]] = None,
        callback: Optional[Callback] = None,
        **overrides: Any,
    ) -> Any:
        """Call ``service.method`` and return the parsed response.

        When ``callback`` is given it is invoked exactly once as
        ``callback(error, result)`` and ``None`` is returned instead of
        raising.
        """

        if callback is None:
            options, signed = self.prepare(method, params, **overrides)
            return self.raw(signed, options)

        try:
            options, signed = self.prepare(method, params, **overrides)
            result = self.raw(signed, options)
        except GigyaSDKError as exc:
            callback(exc, None)
            return None
        callback(None, result)
        return None

    def request_async(
        self, method: str, params: Optional[Mapping[str, Any]] = None, **overrides: Any
    ) -> "Future[Any]":
        """Run :meth:`request` on a worker thread and return its future."""

        future: "Future[Any]" = Future()

        def run() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = self.request(method, params, **overrides)
            except Exception as exc:  # forwarded to the future
                future.set_exception(exc)
            else:
                future.set_result(result)

        worker = threading.Thread(target=run, name=f"gigya-{method}", daemon=True)
        worker.start()
        return future

    def validate_user_signature(self, signature: str, timestamp: Any, uid: str) -> bool:
        if not self.config.secret:
            raise GigyaSDKError.missing_secret_error()
        return validate_user_signature(signature, timestamp, uid, self.config.secret)

    def validate_friend_signature(
        self, signature: str, timestamp: Any, friend_uid: str, uid: str
    ) -> bool:
        if not self.config.secret:
            raise GigyaSDKError.missing_secret_error()
        return validate_friend_signature(
            signature, timestamp, friend_uid, uid, self.config.secret
        )
