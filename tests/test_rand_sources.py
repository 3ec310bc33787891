"""Unit tests for random.org-backed and fallback randomness sources."""

from __future__ import annotations

import base64
from unittest.mock import Mock

import pytest

from randomorg.adapters import RandomOrgDecodeError, RandomOrgServiceError, RandomOrgTransportError
from randomorg.domain import ResponseError
from randomorg.rand import FallbackRandomnessSource, LocalRandomnessSource, RandomOrgRandomnessSource


def test_rand_random_org_source_decodes_blob_into_u32(
    make_client,
    json_response_factory,
    random_result_body_factory,
) -> None:
    """Draw one 32-bit blob and read it as a big-endian integer.

    Args:
        make_client: Fixture building a client over a recording transport.
        json_response_factory: Fixture building transport responses.
        random_result_body_factory: Fixture building success bodies.

    Returns:
        None: Assertions validate request sizing and decoding.

    Raises:
        AssertionError: Raised when blob decoding regresses.
    """

    client, transport = make_client(json_response_factory(random_result_body_factory(["AAAAAQ=="])))
    source = RandomOrgRandomnessSource(client)

    assert source.source_next_u32() == 1
    assert transport.calls[0][1]["method"] == "generateBlobs"
    assert transport.calls[0][1]["params"] == {"apiKey": "test-key", "n": 1, "size": 32}


def test_rand_random_org_source_returns_requested_bytes(
    make_client,
    json_response_factory,
    random_result_body_factory,
) -> None:
    expected_bytes = bytes(range(8))
    client, _ = make_client(
        json_response_factory(random_result_body_factory([base64.b64encode(expected_bytes).decode("ascii")]))
    )
    source = RandomOrgRandomnessSource(client)

    assert source.source_next_u64() == int.from_bytes(expected_bytes, "big")


def test_rand_random_org_source_handles_zero_and_negative_sizes(make_client) -> None:
    client, transport = make_client()
    source = RandomOrgRandomnessSource(client)

    assert source.source_random_bytes(0) == b""
    with pytest.raises(ValueError, match="size"):
        source.source_random_bytes(-1)
    assert transport.calls == []


@pytest.mark.parametrize("blob_data", [[], ["AAE="], ["not base64!"]])
def test_rand_random_org_source_rejects_unusable_blob(
    make_client,
    json_response_factory,
    random_result_body_factory,
    blob_data: list[str],
) -> None:
    """Raise a decode error for empty, short or non-base64 blob data.

    Args:
        make_client: Fixture building a client over a recording transport.
        json_response_factory: Fixture building transport responses.
        random_result_body_factory: Fixture building success bodies.
        blob_data: Blob list returned by the service.

    Returns:
        None: Assertions validate decode-error mapping.

    Raises:
        AssertionError: Raised when unusable data is accepted.
    """

    client, _ = make_client(json_response_factory(random_result_body_factory(blob_data)))
    source = RandomOrgRandomnessSource(client)

    with pytest.raises(RandomOrgDecodeError):
        source.source_random_bytes(4)


def test_rand_local_source_is_reproducible_when_seeded() -> None:
    first_source = LocalRandomnessSource(seed=1234)
    second_source = LocalRandomnessSource(seed=1234)

    assert first_source.source_next_u64() == second_source.source_next_u64()
    assert first_source.source_random_bytes(16) == second_source.source_random_bytes(16)
    assert 0 <= first_source.source_next_u32() < 2**32
    assert len(LocalRandomnessSource().source_random_bytes(5)) == 5


@pytest.mark.parametrize(
    "primary_error",
    [
        RandomOrgTransportError("connection refused"),
        RandomOrgServiceError(status_code=200, error=ResponseError(code=403, message="Bit allowance exceeded")),
    ],
)
def test_rand_fallback_source_uses_fallback_on_client_failure(make_client, primary_error: Exception) -> None:
    """Return values from the fallback when the primary source fails.

    Args:
        make_client: Fixture building a client over a recording transport.
        primary_error: Client failure raised by the primary transport.

    Returns:
        None: Assertions validate fallback output.

    Raises:
        AssertionError: Raised when the fallback is not used.
    """

    client, _ = make_client(primary_error, primary_error, primary_error)
    source = FallbackRandomnessSource(
        primary=RandomOrgRandomnessSource(client),
        fallback=LocalRandomnessSource(seed=7),
    )
    reference = LocalRandomnessSource(seed=7)

    assert source.source_next_u32() == reference.source_next_u32()
    assert source.source_next_u64() == reference.source_next_u64()
    assert source.source_random_bytes(3) == reference.source_random_bytes(3)


def test_rand_fallback_source_does_not_mask_programming_errors(make_client) -> None:
    client, _ = make_client()
    source = FallbackRandomnessSource(
        primary=RandomOrgRandomnessSource(client),
        fallback=LocalRandomnessSource(seed=7),
    )

    with pytest.raises(ValueError):
        source.source_random_bytes(-1)


def test_rand_fallback_source_skips_fallback_when_primary_succeeds() -> None:
    """Use only the primary source while it keeps answering."""

    primary = Mock()
    primary.source_next_u32.return_value = 99
    fallback = Mock()
    source = FallbackRandomnessSource(primary=primary, fallback=fallback)

    assert source.source_next_u32() == 99
    fallback.source_next_u32.assert_not_called()


def test_rand_fallback_source_logs_primary_failure(caplog: pytest.LogCaptureFixture) -> None:
    primary = Mock()
    primary.source_random_bytes.side_effect = RandomOrgTransportError("connection refused")
    fallback = Mock()
    fallback.source_random_bytes.return_value = b"\x01\x02"
    source = FallbackRandomnessSource(primary=primary, fallback=fallback)

    with caplog.at_level("WARNING", logger="randomorg.rand.sources"):
        assert source.source_random_bytes(2) == b"\x01\x02"

    fallback.source_random_bytes.assert_called_once_with(2)
    assert "connection refused" in caplog.text
