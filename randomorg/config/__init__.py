"""Configuration package for client settings and logging setup."""

from .logging_setup import config_configure_logging
from .settings import RandomOrgSettings, SettingsLoadError, config_load_settings

__all__ = ["RandomOrgSettings", "SettingsLoadError", "config_configure_logging", "config_load_settings"]
