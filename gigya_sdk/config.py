"""Configuration objects for the Gigya Python SDK."""
from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping, Optional

from .errors import GigyaSDKError
from .validation import (
    validate_connection_timeout,
    validate_method,
    validate_name,
    validate_nonce_size,
    validate_params,
    validate_request_method,
)

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(slots=True, frozen=True)
class ClientConfig:
    api_key: Optional[str] = None
    user_key: Optional[str] = None
    secret: Optional[str] = None
    datacenter: str = "us1"
    domain: str = "gigya.com"
    ssl: bool = False
    connection_timeout: int = 60_000
    nonce_size: int = 32
    req_method: str = "GET"
    service: str = "socialize"

    @classmethod
    def from_env(
        cls, prefix: str = "GIGYA_", environ: Optional[Mapping[str, str]] = None
    ) -> "ClientConfig":
        """Build a configuration from ``GIGYA_*`` environment variables.

        Variables that are not set keep their default value.
        """

        env = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        for name in CONFIG_FIELDS:
            raw = env.get(f"{prefix}{name.upper()}")
            if raw is None:
                continue
            if name == "ssl":
                values[name] = raw.strip().lower() in _TRUTHY
            elif name in ("connection_timeout", "nonce_size"):
                try:
                    values[name] = int(raw)
                except ValueError as exc:
                    raise GigyaSDKError.configuration_error(
                        name, raw, f"{prefix}{name.upper()} must be an integer"
                    ) from exc
            else:
                values[name] = raw
        return merge_config(DEFAULT_CONFIG, values)


@dataclass(slots=True, frozen=True)
class RequestOptions(ClientConfig):
    """Snapshot of everything needed to build one request."""

    method: Optional[str] = None
    params: Mapping[str, Any] = field(default_factory=dict)

    @property
    def scheme(self) -> str:
        return "https://" if self.ssl else "http://"

    @property
    def port(self) -> int:
        return 443 if self.ssl else 80

    @property
    def host(self) -> str:
        return ".".join([self.service, self.datacenter, self.domain])

    @property
    def path(self) -> str:
        return f"/{self.service}.{self.method}"


DEFAULT_CONFIG = ClientConfig()

CONFIG_FIELDS = tuple(f.name for f in fields(ClientConfig))

REQUEST_FIELDS = ("method", "params")


def _config_values(config: ClientConfig) -> Dict[str, Any]:
    return {name: getattr(config, name) for name in CONFIG_FIELDS}


def validate_config(config: ClientConfig) -> ClientConfig:
    return ClientConfig(
        api_key=config.api_key,
        user_key=config.user_key,
        secret=config.secret,
        datacenter=validate_name(config.datacenter, "datacenter"),
        domain=validate_name(config.domain, "domain"),
        ssl=bool(config.ssl),
        connection_timeout=validate_connection_timeout(config.connection_timeout),
        nonce_size=validate_nonce_size(config.nonce_size),
        req_method=validate_request_method(config.req_method),
        service=validate_name(config.service, "service"),
    )


def merge_config(base: ClientConfig, overrides: Mapping[str, Any]) -> ClientConfig:
    """Return a validated copy of ``base`` with ``overrides`` applied."""

    unknown = set(overrides) - set(CONFIG_FIELDS)
    if unknown:
        raise GigyaSDKError.unknown_options_error(unknown)

    values = _config_values(base)
    values.update(overrides)
    return validate_config(ClientConfig(**values))


def resolve_options(
    config: Optional[ClientConfig] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    defaults: ClientConfig = DEFAULT_CONFIG,
) -> RequestOptions:
    """Resolve defaults, client configuration and per-call overrides.

    Later layers win.  ``overrides`` may name any :class:`ClientConfig`
    field plus ``method`` and ``params``.  Nothing passed in is mutated;
    ``params`` is copied into the returned snapshot.
    """

    overrides = dict(overrides or {})
    unknown = set(overrides) - set(CONFIG_FIELDS) - set(REQUEST_FIELDS)
    if unknown:
        raise GigyaSDKError.unknown_options_error(unknown)

    method = overrides.pop("method", None)
    params = validate_params(overrides.pop("params", None))

    merged = merge_config(config if config is not None else defaults, overrides)
    return RequestOptions(
        **_config_values(merged),
        method=validate_method(method),
        params=dict(params),
    )
