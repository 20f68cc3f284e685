"""Configuration management module."""

from ingestkit.core.config.settings import (
    ConfigManager,
    IngestDefaults,
    IngestKitConfig,
    LoggingConfig,
    load_config_from_env,
)

__all__ = [
    "ConfigManager",
    "IngestDefaults",
    "IngestKitConfig",
    "LoggingConfig",
    "load_config_from_env",
]
