"""Constants shared across the SDK."""
from .datacenters import ALL_DATACENTERS, DATACENTER, SUPPORTED_REQUEST_METHODS
from .errors import ERROR_CODE

__all__ = [
    "ALL_DATACENTERS",
    "DATACENTER",
    "ERROR_CODE",
    "SUPPORTED_REQUEST_METHODS",
]
