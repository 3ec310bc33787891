"""httpx-backed transport for posting JSON-RPC documents to random.org."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Any, Callable, Final

import httpx

from .interfaces import TransportPort, TransportResponse
from .random_org_errors import RandomOrgTimeoutError, RandomOrgTransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _TransportRetryStrategy:
    """Immutable retry strategy config and calculation helpers.

    Attributes:
        retry_attempts: Total number of attempts per request.
        backoff_base_seconds: Base delay for exponential backoff.
        max_backoff_seconds: Exponential delay cap before jitter.
        jitter_min_multiplier: Minimum jitter multiplier.
        jitter_max_multiplier: Maximum jitter multiplier.
        random_unit_interval_provider: Provider returning value in [0.0, 1.0].
    """

    retry_attempts: int
    backoff_base_seconds: float
    max_backoff_seconds: float
    jitter_min_multiplier: float
    jitter_max_multiplier: float
    random_unit_interval_provider: Callable[[], float]

    def strategy_calculate_retry_wait_seconds(self, retry_index: int) -> float:
        """Calculate exponential retry wait with cap and jitter.

        Args:
            retry_index: Zero-based retry index.

        Returns:
            float: Computed wait seconds before the retry.

        Raises:
            ValueError: Raised when retry index is negative.
            RuntimeError: Raised when jitter provider returns out-of-range value.
        """

        if retry_index < 0:
            raise ValueError("retry_index must be >= 0")

        backoff_seconds = self.backoff_base_seconds * (2**retry_index)
        capped_backoff_seconds = min(backoff_seconds, self.max_backoff_seconds)
        return float(capped_backoff_seconds * self.strategy_calculate_jitter_multiplier())

    def strategy_calculate_jitter_multiplier(self) -> float:
        """Return jitter multiplier using configured min/max bounds.

        Returns:
            float: Jitter multiplier value.

        Raises:
            RuntimeError: Raised when jitter source returns value outside [0.0, 1.0].
        """

        random_ratio = float(self.random_unit_interval_provider())
        if random_ratio < 0.0 or random_ratio > 1.0:
            raise RuntimeError("random_unit_interval_provider must return a value in [0.0, 1.0]")

        jitter_span = self.jitter_max_multiplier - self.jitter_min_multiplier
        return self.jitter_min_multiplier + (random_ratio * jitter_span)


class HttpxTransportAdapter(TransportPort):
    """Transport implementation over one pooled ``httpx.Client``.

    Connection-level failures (refused, reset, broken pipe) are retried with
    exponential backoff; timeouts and HTTP statuses are never retried here.
    """

    _USER_AGENT: Final[str] = "randomorg-python/1.0 (httpx)"

    def __init__(
        self,
        request_timeout_seconds: float = 30.0,
        retry_attempts: int = 2,
        retry_backoff_base_seconds: float = 0.5,
        retry_max_backoff_seconds: float = 5.0,
        jitter_min_multiplier: float = 0.5,
        jitter_max_multiplier: float = 1.5,
        random_unit_interval_provider: Callable[[], float] | None = None,
        client: httpx.Client | None = None,
    ):
        """Initialize the transport.

        Args:
            request_timeout_seconds: HTTP request timeout in seconds.
            retry_attempts: Total attempts per request for connection failures.
            retry_backoff_base_seconds: Base retry delay used by exponential backoff.
            retry_max_backoff_seconds: Maximum retry delay cap before applying jitter.
            jitter_min_multiplier: Minimum jitter multiplier for computed retry delay.
            jitter_max_multiplier: Maximum jitter multiplier for computed retry delay.
            random_unit_interval_provider: Optional provider returning random values in [0.0, 1.0].
            client: Optional preconfigured client; the adapter does not close it.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when required config values are invalid.
        """

        if request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be > 0")
        if retry_attempts < 1:
            raise ValueError("retry_attempts must be >= 1")
        if retry_backoff_base_seconds < 0:
            raise ValueError("retry_backoff_base_seconds must be >= 0")
        if retry_max_backoff_seconds <= 0:
            raise ValueError("retry_max_backoff_seconds must be > 0")
        if jitter_min_multiplier <= 0:
            raise ValueError("jitter_min_multiplier must be > 0")
        if jitter_max_multiplier < jitter_min_multiplier:
            raise ValueError("jitter_max_multiplier must be >= jitter_min_multiplier")

        self._retry_strategy = _TransportRetryStrategy(
            retry_attempts=retry_attempts,
            backoff_base_seconds=retry_backoff_base_seconds,
            max_backoff_seconds=retry_max_backoff_seconds,
            jitter_min_multiplier=jitter_min_multiplier,
            jitter_max_multiplier=jitter_max_multiplier,
            random_unit_interval_provider=random_unit_interval_provider or random.random,
        )
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=request_timeout_seconds,
            headers={"User-Agent": self._USER_AGENT, "Accept": "application/json"},
        )

    def transport_post_json(self, url: str, payload: dict[str, Any]) -> TransportResponse:
        """POST one JSON document, retrying connection-level failures.

        Args:
            url: Endpoint URL.
            payload: JSON-serializable request body.

        Returns:
            TransportResponse: Raw status and body bytes.

        Raises:
            RandomOrgTimeoutError: Raised when the request timed out.
            RandomOrgTransportError: Raised when all attempts failed to connect.
        """

        attempts = self._retry_strategy.retry_attempts
        for attempt_index in range(attempts):
            try:
                response = self._client.post(url, json=payload)
            except httpx.TimeoutException as error:
                raise RandomOrgTimeoutError("random.org transport request timed out") from error
            except (httpx.NetworkError, httpx.RemoteProtocolError) as error:
                if attempt_index + 1 >= attempts:
                    raise RandomOrgTransportError(f"random.org transport request failed: {error}") from error
                wait_seconds = self.transport_calculate_retry_wait_seconds(retry_index=attempt_index)
                logger.warning(
                    "random.org transport attempt %d/%d failed (%s); retrying in %.2fs",
                    attempt_index + 1,
                    attempts,
                    type(error).__name__,
                    wait_seconds,
                )
                if wait_seconds > 0:
                    time.sleep(wait_seconds)
                continue
            except httpx.HTTPError as error:
                raise RandomOrgTransportError(f"random.org transport request failed: {error}") from error

            return TransportResponse(status_code=response.status_code, body=bytes(response.content))

        raise RandomOrgTransportError("random.org transport request failed after all attempts")

    def transport_calculate_retry_wait_seconds(self, retry_index: int) -> float:
        """Calculate the backoff delay before retry ``retry_index``."""

        return self._retry_strategy.strategy_calculate_retry_wait_seconds(retry_index=retry_index)

    def transport_close(self) -> None:
        """Close the pooled client when this adapter created it."""

        if self._owns_client:
            self._client.close()
