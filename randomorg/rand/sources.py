"""Randomness sources backed by random.org with a local fallback.

Usage::

    source = FallbackRandomnessSource(
        primary=RandomOrgRandomnessSource(RandomOrgClient("API KEY")),
        fallback=LocalRandomnessSource(),
    )
    key = source.source_random_bytes(16)
"""

from __future__ import annotations

import base64
import binascii
import logging
import random
from typing import Protocol

from randomorg.adapters import RandomOrgDecodeError, RandomOrgError
from randomorg.client import RandomOrgClient

logger = logging.getLogger(__name__)


class RandomnessSource(Protocol):
    """Port for general-purpose randomness consumers."""

    def source_next_u32(self) -> int:
        """Return one unsigned 32-bit integer."""

    def source_next_u64(self) -> int:
        """Return one unsigned 64-bit integer."""

    def source_random_bytes(self, size: int) -> bytes:
        """Return ``size`` random bytes.

        Args:
            size: Number of bytes, >= 0.

        Returns:
            bytes: Random bytes of exactly ``size`` length.

        Raises:
            ValueError: Raised when size is negative.
        """


class RandomOrgRandomnessSource(RandomnessSource):
    """Network-backed source drawing true random bits through ``generateBlobs``.

    One request of a single blob is made per call; a call may request at most
    131072 bytes (the service's 1048576-bit blob limit).
    """

    def __init__(self, client: RandomOrgClient):
        self._client = client

    def source_next_u32(self) -> int:
        return int.from_bytes(self.source_random_bytes(4), "big")

    def source_next_u64(self) -> int:
        return int.from_bytes(self.source_random_bytes(8), "big")

    def source_random_bytes(self, size: int) -> bytes:
        """Fetch ``size`` bytes as one base64 blob.

        Args:
            size: Number of bytes, >= 0.

        Returns:
            bytes: Decoded random bytes.

        Raises:
            ValueError: Raised when size is negative.
            RandomOrgInvalidParameterError: Raised when size exceeds the blob limit.
            RandomOrgError: Raised for transport, service, status or decode failures.
        """

        if size < 0:
            raise ValueError("size must be >= 0")
        if size == 0:
            return b""

        result = self._client.generate_blobs(limit=1, size=size * 8)
        if not result.random.data:
            raise RandomOrgDecodeError(detail="generateBlobs returned no data", body="")
        encoded_blob = result.random.data[0]
        try:
            decoded_blob = base64.b64decode(encoded_blob, validate=True)
        except (binascii.Error, ValueError) as error:
            raise RandomOrgDecodeError(detail=f"blob is not valid base64: {error}", body=encoded_blob) from error
        if len(decoded_blob) != size:
            raise RandomOrgDecodeError(
                detail=f"blob has {len(decoded_blob)} bytes, expected {size}",
                body=encoded_blob,
            )
        return decoded_blob


class LocalRandomnessSource(RandomnessSource):
    """Local source over ``random.SystemRandom``, or a seeded ``random.Random`` for tests."""

    def __init__(self, seed: int | None = None):
        self._rng: random.Random = random.SystemRandom() if seed is None else random.Random(seed)

    def source_next_u32(self) -> int:
        return self._rng.getrandbits(32)

    def source_next_u64(self) -> int:
        return self._rng.getrandbits(64)

    def source_random_bytes(self, size: int) -> bytes:
        if size < 0:
            raise ValueError("size must be >= 0")
        if size == 0:
            return b""
        return self._rng.getrandbits(size * 8).to_bytes(size, "big")


class FallbackRandomnessSource(RandomnessSource):
    """Source that tries ``primary`` first and uses ``fallback`` on any client failure.

    Attributes:
        primary: Preferred source, usually ``RandomOrgRandomnessSource``.
        fallback: Source used when the primary raises ``RandomOrgError``.
    """

    def __init__(self, primary: RandomnessSource, fallback: RandomnessSource):
        self.primary = primary
        self.fallback = fallback

    def source_next_u32(self) -> int:
        try:
            return self.primary.source_next_u32()
        except RandomOrgError as error:
            logger.warning("Could not draw u32 from primary randomness source, using fallback: %s", error)
            return self.fallback.source_next_u32()

    def source_next_u64(self) -> int:
        try:
            return self.primary.source_next_u64()
        except RandomOrgError as error:
            logger.warning("Could not draw u64 from primary randomness source, using fallback: %s", error)
            return self.fallback.source_next_u64()

    def source_random_bytes(self, size: int) -> bytes:
        try:
            return self.primary.source_random_bytes(size)
        except RandomOrgError as error:
            logger.warning("Could not fill %d bytes from primary randomness source, using fallback: %s", size, error)
            return self.fallback.source_random_bytes(size)
