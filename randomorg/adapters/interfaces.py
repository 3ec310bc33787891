"""Typed interfaces for adapter-layer responsibilities."""

from dataclasses import dataclass
from typing import Any
from typing import Protocol


@dataclass(frozen=True)
class TransportResponse:
    """Result contract for one HTTP exchange.

    Attributes:
        status_code: HTTP status returned by the upstream endpoint.
        body: Immutable raw response body bytes.
    """

    status_code: int
    body: bytes

    def transport_is_success(self) -> bool:
        """Return whether the status is in the 2xx success range."""

        return 200 <= self.status_code < 300

    def transport_body_text(self) -> str:
        """Return the body decoded as UTF-8, replacing undecodable bytes."""

        return self.body.decode("utf-8", errors="replace")


class TransportPort(Protocol):
    """Port definition for posting JSON documents to the random.org endpoint."""

    def transport_post_json(self, url: str, payload: dict[str, Any]) -> TransportResponse:
        """Send one JSON document and return the raw status and body.

        Args:
            url: Endpoint URL.
            payload: JSON-serializable request body.

        Returns:
            TransportResponse: Raw status and body for any completed exchange,
                including non-success statuses.

        Raises:
            RandomOrgTransportError: Raised when the exchange could not complete.
            RandomOrgTimeoutError: Raised when the exchange timed out.
        """

    def transport_close(self) -> None:
        """Release pooled connections held by the transport."""
