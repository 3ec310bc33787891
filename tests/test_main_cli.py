"""Regression tests for the command-line entrypoint."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from randomorg.adapters import RandomOrgTransportError
import randomorg.main as main_module


@pytest.fixture
def cli_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    """Provide an API key, an empty working directory and no logging side effects."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("RANDOM_ORG_API_KEY", "cli-key")
    monkeypatch.setattr(main_module, "config_configure_logging", lambda settings: None)
    return monkeypatch


def test_main_version_prints_library_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    """Print metadata without loading settings or contacting the service.

    Args:
        capsys: Pytest output capture fixture.

    Returns:
        None: Assertions validate printed metadata.

    Raises:
        AssertionError: Raised when version output differs.
    """

    main_module.main(["version"])

    printed_metadata = json.loads(capsys.readouterr().out)
    assert printed_metadata["package_name"] == "randomorg"
    assert printed_metadata["api_endpoint_url"] == "https://api.random.org/json-rpc/2/invoke"
    assert printed_metadata["package_version"]
    assert printed_metadata["python_version"]


def test_main_integers_prints_result_with_wire_names(
    cli_environment: pytest.MonkeyPatch,
    make_client,
    json_response_factory,
    random_result_body_factory,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Run one command through the bootstrapped client and print its JSON result.

    Args:
        cli_environment: Monkeypatch with API key and logging stubbed.
        make_client: Fixture building a client over a recording transport.
        json_response_factory: Fixture building transport responses.
        random_result_body_factory: Fixture building success bodies.
        capsys: Pytest output capture fixture.

    Returns:
        None: Assertions validate request arguments and printed output.

    Raises:
        AssertionError: Raised when CLI wiring differs.
    """

    client, transport = make_client(json_response_factory(random_result_body_factory([4, 2])))
    seen_settings: list[object] = []

    def _create_client(settings: object) -> object:
        seen_settings.append(settings)
        return client

    cli_environment.setattr(main_module, "bootstrap_create_client", _create_client)

    main_module.main(["integers", "--min", "1", "--max", "6", "--limit", "2", "--no-replacement"])

    printed_result = json.loads(capsys.readouterr().out)
    assert printed_result["random"]["data"] == [4, 2]
    assert printed_result["random"]["completionTime"] == "2011-10-10 13:19:12Z"
    assert printed_result["bitsLeft"] == 199984
    assert transport.calls[0][1]["params"] == {"apiKey": "test-key", "min": 1, "max": 6, "n": 2, "replacement": False}
    assert seen_settings[0].random_org_api_key.get_secret_value() == "cli-key"


def test_main_usage_prints_key_status(
    cli_environment: pytest.MonkeyPatch,
    make_client,
    json_response_factory,
    capsys: pytest.CaptureFixture[str],
) -> None:
    client, _ = make_client(
        json_response_factory(
            '{"jsonrpc":"2.0","result":{"status":"paused","creationTime":"2017-06-22 13:32:16Z",'
            '"bitsLeft":10,"requestsLeft":5,"totalBits":3,"totalRequests":1},"id":1}'
        )
    )
    cli_environment.setattr(main_module, "bootstrap_create_client", lambda settings: client)

    main_module.main(["usage"])

    printed_usage = json.loads(capsys.readouterr().out)
    assert printed_usage["status"] == "paused"
    assert printed_usage["creationTime"] == "2017-06-22 13:32:16Z"


def test_main_request_failure_exits_with_status_one(
    cli_environment: pytest.MonkeyPatch,
    make_client,
    capsys: pytest.CaptureFixture[str],
) -> None:
    client, _ = make_client(RandomOrgTransportError("connection refused"))
    cli_environment.setattr(main_module, "bootstrap_create_client", lambda settings: client)

    with pytest.raises(SystemExit) as exit_info:
        main_module.main(["uuids", "--limit", "1"])

    assert exit_info.value.code == 1
    assert "connection refused" in capsys.readouterr().err


def test_main_invalid_parameter_exits_with_status_one(
    cli_environment: pytest.MonkeyPatch,
    make_client,
    capsys: pytest.CaptureFixture[str],
) -> None:
    client, transport = make_client()
    cli_environment.setattr(main_module, "bootstrap_create_client", lambda settings: client)

    with pytest.raises(SystemExit) as exit_info:
        main_module.main(["blobs", "--size", "12"])

    assert exit_info.value.code == 1
    assert "size" in capsys.readouterr().err
    assert transport.calls == []


def test_main_missing_api_key_exits_with_status_one(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Exit before building a client when settings fail validation."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RANDOM_ORG_API_KEY", raising=False)

    def _unexpected_client(settings: object) -> object:
        raise AssertionError("client must not be created")

    monkeypatch.setattr(main_module, "bootstrap_create_client", _unexpected_client)

    with pytest.raises(SystemExit) as exit_info:
        main_module.main(["usage"])

    assert exit_info.value.code == 1
    assert "random_org_api_key" in capsys.readouterr().err
