"""
Configuration management for the gobench client.

Usage:
    from gobench_client.core.config import ConfigManager

    config = ConfigManager().load_config()
    config.api.base_url
"""

from gobench_client.exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
    MissingConfigurationError,
)

from .manager import ConfigManager, default_config_file
from .models import (
    ApiConfig,
    GobenchClientConfig,
    GobenchClientSettings,
    LoggingSettings,
    LogLevel,
    PollingConfig,
)

__all__ = [
    "GobenchClientConfig",
    "GobenchClientSettings",
    "ApiConfig",
    "PollingConfig",
    "LoggingSettings",
    "LogLevel",
    "ConfigManager",
    "default_config_file",
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "ConfigurationValidationError",
]
