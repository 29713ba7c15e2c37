"""Public entry point for the Gigya Python SDK."""
from __future__ import annotations

from typing import Any, Optional

from .client import GigyaClient
from .config import ClientConfig
from .http import HttpRequestor
from .services import DS, GM, IDS, Accounts, Comments, Reports, Socialize


class Gigya:
    """One configured client shared by every API domain."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        http_requestor: Optional[HttpRequestor] = None,
        **options: Any,
    ) -> None:
        self.client = GigyaClient(config, http_requestor=http_requestor, **options)

        self.socialize = Socialize(self.client)
        self.accounts = Accounts(self.client)
        self.comments = Comments(self.client)
        self.gm = GM(self.client)
        self.ds = DS(self.client)
        self.ids = IDS(self.client)
        self.reports = Reports(self.client)

    @property
    def config(self) -> ClientConfig:
        return self.client.config

    def validate_user_signature(self, signature: str, timestamp: Any, uid: str) -> bool:
        return self.client.validate_user_signature(signature, timestamp, uid)
