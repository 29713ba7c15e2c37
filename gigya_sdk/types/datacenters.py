"""Constants that describe the API endpoint clusters and HTTP verbs."""
from __future__ import annotations

from enum import Enum


class DATACENTER(str, Enum):
    """Region codes selecting which endpoint cluster to call."""

    US1 = "us1"
    EU1 = "eu1"
    AU1 = "au1"


ALL_DATACENTERS = (
    DATACENTER.US1,
    DATACENTER.EU1,
    DATACENTER.AU1,
)

SUPPORTED_REQUEST_METHODS = ("GET", "POST")
