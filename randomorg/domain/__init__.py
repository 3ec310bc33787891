"""Domain contracts for random.org requests, responses and parameters."""

from .envelopes import (
    DOMAIN_DEFAULT_REQUEST_ID,
    DOMAIN_JSON_RPC_VERSION,
    ErrorEnvelope,
    Request,
    Response,
    ResponseError,
    domain_build_request,
)
from .methods import Method
from .models import LibraryMetadata
from .params import (
    DOMAIN_DEFAULT_CHARACTERS,
    AllowedCharacters,
    ApiKeyParams,
    GenerateBlobsParams,
    GenerateDecimalFractionsParams,
    GenerateGaussiansParams,
    GenerateIntegersParams,
    GenerateStringsParams,
    GenerateUUIDsParams,
)
from .results import (
    ApiKeyStatus,
    GenerateBlobsResult,
    GenerateDecimalFractionsResult,
    GenerateGaussiansResult,
    GenerateIntegersResult,
    GenerateStringsResult,
    GenerateUUIDsResult,
    GetUsageResult,
    RandomData,
    RandomResult,
)
from .service_dates import (
    DOMAIN_SERVICE_DATETIME_FORMAT,
    ServiceDateTime,
    domain_format_service_datetime,
    domain_parse_service_datetime,
)

__all__ = [
    "AllowedCharacters",
    "ApiKeyParams",
    "ApiKeyStatus",
    "DOMAIN_DEFAULT_CHARACTERS",
    "DOMAIN_DEFAULT_REQUEST_ID",
    "DOMAIN_JSON_RPC_VERSION",
    "DOMAIN_SERVICE_DATETIME_FORMAT",
    "ErrorEnvelope",
    "GenerateBlobsParams",
    "GenerateBlobsResult",
    "GenerateDecimalFractionsParams",
    "GenerateDecimalFractionsResult",
    "GenerateGaussiansParams",
    "GenerateGaussiansResult",
    "GenerateIntegersParams",
    "GenerateIntegersResult",
    "GenerateStringsParams",
    "GenerateStringsResult",
    "GenerateUUIDsParams",
    "GenerateUUIDsResult",
    "GetUsageResult",
    "LibraryMetadata",
    "Method",
    "RandomData",
    "RandomResult",
    "Request",
    "Response",
    "ResponseError",
    "ServiceDateTime",
    "domain_build_request",
    "domain_format_service_datetime",
    "domain_parse_service_datetime",
]
