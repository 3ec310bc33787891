"""Project-native typed exceptions for random.org client failures."""

from __future__ import annotations

from randomorg.domain import ResponseError

from .random_org_error_codes import (
    RANDOM_ORG_API_KEY_CODES,
    RANDOM_ORG_QUOTA_CODES,
    random_org_error_is_retryable,
)


class RandomOrgError(Exception):
    """Base exception for every random.org client failure."""


class RandomOrgTransportError(RandomOrgError, ConnectionError):
    """The HTTP exchange itself could not complete."""


class RandomOrgTimeoutError(RandomOrgTransportError, TimeoutError):
    """The HTTP exchange exceeded the configured timeout."""


class RandomOrgServiceError(RandomOrgError, RuntimeError):
    """Service-reported failure carrying a numeric code and message.

    Attributes:
        status_code: HTTP status of the response that carried the error.
        error: Decoded service error object.
    """

    def __init__(self, status_code: int, error: ResponseError):
        super().__init__(f"random.org error: status={status_code}, code={error.code}, message={error.message}")
        self.status_code = status_code
        self.error = error

    @property
    def code(self) -> int:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def retryable(self) -> bool:
        """Return whether the service condition is expected to clear on retry."""

        return random_org_error_is_retryable(self.error.code)

    @property
    def quota_exhausted(self) -> bool:
        return self.error.code in RANDOM_ORG_QUOTA_CODES

    @property
    def api_key_rejected(self) -> bool:
        return self.error.code in RANDOM_ORG_API_KEY_CODES


class RandomOrgStatusError(RandomOrgError, RuntimeError):
    """Non-success HTTP status whose body is not a service error object.

    Attributes:
        status_code: Raw HTTP status.
        body: Raw response body text.
    """

    def __init__(self, status_code: int, body: str):
        super().__init__(f"random.org returned HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class RandomOrgDecodeError(RandomOrgError, ValueError):
    """Success response whose body does not match the expected result shape.

    Attributes:
        detail: Underlying parse or validation error text.
        body: Offending response body text.
    """

    def __init__(self, detail: str, body: str):
        super().__init__(f"random.org response decode failed: {detail}")
        self.detail = detail
        self.body = body


class RandomOrgInvalidParameterError(RandomOrgError, ValueError):
    """Request parameter outside its documented range, rejected before sending.

    Attributes:
        parameter: Wire name of the offending parameter.
        value: Rejected value.
        detail: Constraint violation description.
    """

    def __init__(self, parameter: str, value: object, detail: str):
        super().__init__(f"invalid parameter {parameter}={value!r}: {detail}")
        self.parameter = parameter
        self.value = value
        self.detail = detail
