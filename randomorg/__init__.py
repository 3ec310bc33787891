"""Typed client for the random.org JSON-RPC API.

The randomness comes from atmospheric noise. An API key is required; see
https://api.random.org/api-keys.
"""

__version__ = "1.0.0"

from randomorg.adapters import (  # noqa: E402
    HttpxTransportAdapter,
    RandomOrgDecodeError,
    RandomOrgError,
    RandomOrgInvalidParameterError,
    RandomOrgServiceError,
    RandomOrgStatusError,
    RandomOrgTimeoutError,
    RandomOrgTransportError,
)
from randomorg.client import RandomOrgClient  # noqa: E402
from randomorg.domain import (  # noqa: E402
    AllowedCharacters,
    ApiKeyStatus,
    GetUsageResult,
    Method,
    RandomData,
    RandomResult,
    Request,
    Response,
    ResponseError,
)

__all__ = [
    "AllowedCharacters",
    "ApiKeyStatus",
    "GetUsageResult",
    "HttpxTransportAdapter",
    "Method",
    "RandomData",
    "RandomOrgClient",
    "RandomOrgDecodeError",
    "RandomOrgError",
    "RandomOrgInvalidParameterError",
    "RandomOrgServiceError",
    "RandomOrgStatusError",
    "RandomOrgTimeoutError",
    "RandomOrgTransportError",
    "RandomResult",
    "Request",
    "Response",
    "ResponseError",
    "__version__",
]
