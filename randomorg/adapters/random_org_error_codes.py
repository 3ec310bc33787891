"""Canonical random.org error-code semantics for caller-side routing."""

from __future__ import annotations

from enum import IntEnum
from typing import Final


class RandomOrgErrorCode(IntEnum):
    """Known random.org JSON-RPC error codes."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603
    SERVICE_UNAVAILABLE = 100
    PARAMETER_MALFORMED = 200
    RANGE_INVALID = 300
    RANGE_TOO_SMALL = 301
    API_KEY_NOT_FOUND = 400
    API_KEY_NOT_RUNNING = 401
    REQUEST_ALLOWANCE_EXCEEDED = 402
    BIT_ALLOWANCE_EXCEEDED = 403


RANDOM_ORG_ERROR_DEFAULT_MESSAGES: Final[dict[int, str]] = {
    RandomOrgErrorCode.PARSE_ERROR.value: "Invalid JSON was received by the server.",
    RandomOrgErrorCode.INVALID_REQUEST.value: "The JSON sent is not a valid Request object.",
    RandomOrgErrorCode.METHOD_NOT_FOUND.value: "The method does not exist or is not available.",
    RandomOrgErrorCode.INVALID_PARAMS.value: "Invalid method parameter(s).",
    RandomOrgErrorCode.INTERNAL_ERROR.value: "Internal JSON-RPC error.",
    RandomOrgErrorCode.SERVICE_UNAVAILABLE.value: "The API is temporarily unable to serve requests.",
    RandomOrgErrorCode.PARAMETER_MALFORMED.value: "A request parameter is malformed.",
    RandomOrgErrorCode.RANGE_INVALID.value: "The minimum must be less than or equal to the maximum.",
    RandomOrgErrorCode.RANGE_TOO_SMALL.value: (
        "More unique values were requested than the range contains."
    ),
    RandomOrgErrorCode.API_KEY_NOT_FOUND.value: "The API key you specified does not exist.",
    RandomOrgErrorCode.API_KEY_NOT_RUNNING.value: "The API key you specified is not running.",
    RandomOrgErrorCode.REQUEST_ALLOWANCE_EXCEEDED.value: (
        "The API key you specified has exceeded its daily request allowance."
    ),
    RandomOrgErrorCode.BIT_ALLOWANCE_EXCEEDED.value: (
        "The API key you specified has exceeded its daily bit allowance."
    ),
}

RANDOM_ORG_RETRYABLE_CODES: Final[frozenset[int]] = frozenset(
    {
        RandomOrgErrorCode.INTERNAL_ERROR.value,
        RandomOrgErrorCode.SERVICE_UNAVAILABLE.value,
    }
)

RANDOM_ORG_QUOTA_CODES: Final[frozenset[int]] = frozenset(
    {
        RandomOrgErrorCode.REQUEST_ALLOWANCE_EXCEEDED.value,
        RandomOrgErrorCode.BIT_ALLOWANCE_EXCEEDED.value,
    }
)

RANDOM_ORG_API_KEY_CODES: Final[frozenset[int]] = frozenset(
    {
        RandomOrgErrorCode.API_KEY_NOT_FOUND.value,
        RandomOrgErrorCode.API_KEY_NOT_RUNNING.value,
    }
)

RANDOM_ORG_FATAL_CODES: Final[frozenset[int]] = frozenset(
    set(RANDOM_ORG_ERROR_DEFAULT_MESSAGES.keys())
    - set(RANDOM_ORG_RETRYABLE_CODES)
    - set(RANDOM_ORG_QUOTA_CODES)
    - set(RANDOM_ORG_API_KEY_CODES)
)


def random_org_error_default_message(error_code: int, fallback_message: str) -> str:
    """Return canonical default message for an error code.

    Args:
        error_code: Service error code.
        fallback_message: Fallback message when code is unknown.

    Returns:
        str: Canonical message for known code, else provided fallback message.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return RANDOM_ORG_ERROR_DEFAULT_MESSAGES.get(error_code, fallback_message)


def random_org_error_is_retryable(error_code: int) -> bool:
    """Return whether an error code reports a transient service condition."""

    return error_code in RANDOM_ORG_RETRYABLE_CODES
