"""Parsing helpers for random.org timestamp fields.

The service reports ``completionTime`` and ``creationTime`` as
``"2011-10-10 13:19:12Z"``: a space separator and a literal ``Z`` suffix rather
than full ISO-8601. Values are parsed into naive ``datetime`` objects.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Final

from pydantic import BeforeValidator

DOMAIN_SERVICE_DATETIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%SZ"


def domain_parse_service_datetime(value: object) -> datetime:
    """Parse one service timestamp into a naive datetime.

    Args:
        value: Raw timestamp string, or an already parsed datetime.

    Returns:
        datetime: Naive (timezone-unaware) datetime value.

    Raises:
        ValueError: Raised when the value is not a string in the service format.
    """

    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected a datetime string, got {type(value).__name__}")

    try:
        return datetime.strptime(value, DOMAIN_SERVICE_DATETIME_FORMAT)
    except ValueError as error:
        raise ValueError(f"Parse error {error} for {value}") from error


def domain_format_service_datetime(value: datetime) -> str:
    """Format a datetime back into the service timestamp representation."""

    return value.strftime(DOMAIN_SERVICE_DATETIME_FORMAT)


ServiceDateTime = Annotated[datetime, BeforeValidator(domain_parse_service_datetime)]
