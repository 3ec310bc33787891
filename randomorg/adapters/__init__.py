"""Adapter layer package for the random.org transport boundary."""

from .httpx_transport import HttpxTransportAdapter
from .interfaces import TransportPort, TransportResponse
from .random_org_error_codes import RandomOrgErrorCode
from .random_org_errors import (
    RandomOrgDecodeError,
    RandomOrgError,
    RandomOrgInvalidParameterError,
    RandomOrgServiceError,
    RandomOrgStatusError,
    RandomOrgTimeoutError,
    RandomOrgTransportError,
)

__all__ = [
    "HttpxTransportAdapter",
    "RandomOrgDecodeError",
    "RandomOrgError",
    "RandomOrgErrorCode",
    "RandomOrgInvalidParameterError",
    "RandomOrgServiceError",
    "RandomOrgStatusError",
    "RandomOrgTimeoutError",
    "RandomOrgTransportError",
    "TransportPort",
    "TransportResponse",
]
