"""Client bootstrap wiring from validated settings."""

from randomorg.adapters import HttpxTransportAdapter
from randomorg.client import RandomOrgClient
from randomorg.config import RandomOrgSettings, config_load_settings


def bootstrap_create_client(settings: RandomOrgSettings | None = None) -> RandomOrgClient:
    """Assemble a client with an httpx transport configured from settings.

    Args:
        settings: Optional preloaded settings; loaded from the environment when omitted.

    Returns:
        RandomOrgClient: Client owning its transport; close it when done.

    Raises:
        SettingsLoadError: Raised when settings are loaded and validation fails.
    """

    resolved_settings = settings or config_load_settings()
    transport = HttpxTransportAdapter(
        request_timeout_seconds=resolved_settings.random_org_request_timeout_seconds,
        retry_attempts=resolved_settings.random_org_retry_attempts,
        retry_backoff_base_seconds=resolved_settings.random_org_backoff_base_seconds,
        retry_max_backoff_seconds=resolved_settings.random_org_backoff_max_seconds,
        jitter_min_multiplier=resolved_settings.random_org_jitter_min_multiplier,
        jitter_max_multiplier=resolved_settings.random_org_jitter_max_multiplier,
    )
    return RandomOrgClient(
        api_key=resolved_settings.random_org_api_key.get_secret_value(),
        transport=transport,
        endpoint_url=resolved_settings.random_org_endpoint_url,
        close_transport=True,
    )
