"""Unit tests for settings loading, bootstrap wiring and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from randomorg.adapters import HttpxTransportAdapter
from randomorg.bootstrap import bootstrap_create_client
from randomorg.config import SettingsLoadError, config_configure_logging, config_load_settings

_SETTINGS_ENV_NAMES = (
    "RANDOM_ORG_API_KEY",
    "RANDOM_ORG_ENDPOINT_URL",
    "RANDOM_ORG_REQUEST_TIMEOUT_SECONDS",
    "RANDOM_ORG_RETRY_ATTEMPTS",
    "RANDOM_ORG_BACKOFF_BASE_SECONDS",
    "RANDOM_ORG_BACKOFF_MAX_SECONDS",
    "RANDOM_ORG_JITTER_MIN_MULTIPLIER",
    "RANDOM_ORG_JITTER_MAX_MULTIPLIER",
    "LOG_LEVEL",
    "LOGFMT_ENABLED",
)


@pytest.fixture
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    """Clear settings variables and run from an empty directory without `.env`."""

    for env_name in _SETTINGS_ENV_NAMES:
        monkeypatch.delenv(env_name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


def test_config_load_settings_reads_environment_with_defaults(isolated_environment: pytest.MonkeyPatch) -> None:
    """Load the API key from the environment and apply defaults.

    Args:
        isolated_environment: Monkeypatch with settings variables cleared.

    Returns:
        None: Assertions validate loaded values.

    Raises:
        AssertionError: Raised when defaults or normalization differ.
    """

    isolated_environment.setenv("RANDOM_ORG_API_KEY", "  env-key  ")
    isolated_environment.setenv("LOG_LEVEL", "debug")

    settings = config_load_settings()

    assert settings.random_org_api_key.get_secret_value() == "env-key"
    assert settings.random_org_endpoint_url == "https://api.random.org/json-rpc/2/invoke"
    assert settings.random_org_request_timeout_seconds == 30.0
    assert settings.random_org_retry_attempts == 2
    assert settings.log_level == "DEBUG"
    assert settings.logfmt_enabled is False
    assert "env-key" not in repr(settings)


def test_config_load_settings_reads_dotenv_file(isolated_environment: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("RANDOM_ORG_API_KEY=dotenv-key\nRANDOM_ORG_RETRY_ATTEMPTS=4\n", encoding="utf-8")

    settings = config_load_settings()

    assert settings.random_org_api_key.get_secret_value() == "dotenv-key"
    assert settings.random_org_retry_attempts == 4


def test_config_load_settings_requires_api_key(isolated_environment: pytest.MonkeyPatch) -> None:
    with pytest.raises(SettingsLoadError, match="random_org_api_key"):
        config_load_settings()


@pytest.mark.parametrize(
    ("env_name", "env_value"),
    [
        ("RANDOM_ORG_API_KEY", "   "),
        ("RANDOM_ORG_ENDPOINT_URL", "   "),
        ("RANDOM_ORG_RETRY_ATTEMPTS", "0"),
        ("RANDOM_ORG_BACKOFF_MAX_SECONDS", "0.1"),
        ("RANDOM_ORG_JITTER_MAX_MULTIPLIER", "0.2"),
        ("LOG_LEVEL", "verbose"),
    ],
)
def test_config_load_settings_rejects_invalid_values(
    isolated_environment: pytest.MonkeyPatch,
    env_name: str,
    env_value: str,
) -> None:
    """Wrap every validation failure in the settings load error.

    Args:
        isolated_environment: Monkeypatch with settings variables cleared.
        env_name: Variable to override.
        env_value: Invalid value for the variable.

    Returns:
        None: Assertions validate error wrapping.

    Raises:
        AssertionError: Raised when invalid settings are accepted.
    """

    isolated_environment.setenv("RANDOM_ORG_API_KEY", "env-key")
    isolated_environment.setenv(env_name, env_value)

    with pytest.raises(SettingsLoadError, match="validation failed"):
        config_load_settings()


def test_bootstrap_create_client_wires_settings_into_transport(isolated_environment: pytest.MonkeyPatch) -> None:
    """Build a client whose owned transport reflects configured retry values."""

    isolated_environment.setenv("RANDOM_ORG_API_KEY", "env-key")
    isolated_environment.setenv("RANDOM_ORG_ENDPOINT_URL", "https://example.test/invoke")
    isolated_environment.setenv("RANDOM_ORG_RETRY_ATTEMPTS", "3")

    client = bootstrap_create_client()

    assert client.endpoint_url == "https://example.test/invoke"
    assert isinstance(client._transport, HttpxTransportAdapter)
    assert client._transport._retry_strategy.retry_attempts == 3
    client.close()
    assert client._transport._client.is_closed is True


@pytest.mark.parametrize("logfmt_enabled", ["true", "false"])
def test_config_configure_logging_installs_single_handler(
    isolated_environment: pytest.MonkeyPatch,
    logfmt_enabled: str,
) -> None:
    """Install one handler with the configured level and restore logger state afterwards.

    Args:
        isolated_environment: Monkeypatch with settings variables cleared.
        logfmt_enabled: Environment flag selecting the formatter.

    Returns:
        None: Assertions validate logger configuration.

    Raises:
        AssertionError: Raised when logger configuration differs.
    """

    package_logger = logging.getLogger("randomorg")
    saved_state = (list(package_logger.handlers), package_logger.level, package_logger.propagate)
    isolated_environment.setenv("RANDOM_ORG_API_KEY", "env-key")
    isolated_environment.setenv("LOG_LEVEL", "WARNING")
    isolated_environment.setenv("LOGFMT_ENABLED", logfmt_enabled)

    try:
        configured_logger = config_configure_logging(config_load_settings())
        config_configure_logging(config_load_settings())

        assert configured_logger is package_logger
        assert configured_logger.level == logging.WARNING
        assert len(configured_logger.handlers) == 1
        assert configured_logger.propagate is False
    finally:
        saved_handlers, saved_level, saved_propagate = saved_state
        package_logger.handlers = saved_handlers
        package_logger.setLevel(saved_level)
        package_logger.propagate = saved_propagate
