"""Typed client settings with dotenv support and startup validation."""

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when client settings cannot be loaded or validated."""


class RandomOrgSettings(BaseSettings):
    """Settings for the random.org client, transport and logging.

    Environment variable names map directly to field names in uppercase.
    Example: `random_org_api_key` reads from `RANDOM_ORG_API_KEY`.

    Attributes:
        random_org_api_key: random.org API key.
        random_org_endpoint_url: JSON-RPC invoke endpoint.
        random_org_request_timeout_seconds: HTTP request timeout.
        random_org_retry_attempts: Transport attempts per request for connection failures.
        random_org_backoff_base_seconds: Base retry delay for exponential backoff.
        random_org_backoff_max_seconds: Maximum retry delay cap.
        random_org_jitter_min_multiplier: Minimum retry jitter multiplier.
        random_org_jitter_max_multiplier: Maximum retry jitter multiplier.
        log_level: Level name for the `randomorg` logger.
        logfmt_enabled: Emit logfmt-formatted log lines when True.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    random_org_api_key: SecretStr
    random_org_endpoint_url: str = Field(default="https://api.random.org/json-rpc/2/invoke", min_length=1)
    random_org_request_timeout_seconds: float = Field(default=30.0, gt=0)
    random_org_retry_attempts: int = Field(default=2, ge=1)
    random_org_backoff_base_seconds: float = Field(default=0.5, ge=0)
    random_org_backoff_max_seconds: float = Field(default=5.0, gt=0)
    random_org_jitter_min_multiplier: float = Field(default=0.5, gt=0)
    random_org_jitter_max_multiplier: float = Field(default=1.5, gt=0)
    log_level: str = Field(default="INFO")
    logfmt_enabled: bool = Field(default=False)

    @field_validator("random_org_api_key")
    @classmethod
    def _validate_api_key_not_blank(cls, value: SecretStr) -> SecretStr:
        stripped_value = value.get_secret_value().strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return SecretStr(stripped_value)

    @field_validator("random_org_endpoint_url")
    @classmethod
    def _validate_endpoint_not_blank(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("random_org_backoff_max_seconds")
    @classmethod
    def _validate_backoff_cap_bounds(cls, value: float, info) -> float:
        backoff_base_seconds = float(info.data.get("random_org_backoff_base_seconds", 0.5))
        if value < backoff_base_seconds:
            raise ValueError(
                "random_org_backoff_max_seconds must be greater than or equal to random_org_backoff_base_seconds"
            )
        return value

    @field_validator("random_org_jitter_max_multiplier")
    @classmethod
    def _validate_jitter_bounds(cls, value: float, info) -> float:
        jitter_min_multiplier = float(info.data.get("random_org_jitter_min_multiplier", 0.5))
        if value < jitter_min_multiplier:
            raise ValueError(
                "random_org_jitter_max_multiplier must be greater than or equal to random_org_jitter_min_multiplier"
            )
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}:
            raise ValueError(f"unsupported log level: {value}")
        return normalized_value


def config_load_settings() -> RandomOrgSettings:
    """Load and validate client settings from environment and dotenv.

    Returns:
        RandomOrgSettings: Validated settings object.

    Raises:
        SettingsLoadError: Raised when required settings are missing or invalid.
    """

    try:
        return RandomOrgSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Client configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
