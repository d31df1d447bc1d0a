"""
Configuration manager for the gobench client.

Loads the TOML configuration file, applies ``GOBENCH_*`` environment
overrides and validates the result into a ``GobenchClientConfig``.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w
from pydantic import ValidationError as PydanticValidationError

from gobench_client.constants import CONFIG_DIR_NAME, CONFIG_FILE_NAME
from gobench_client.exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)

from .models import GobenchClientConfig, GobenchClientSettings


@dataclass
class EnvironmentOverride:
    """Helper for applying environment variable overrides."""

    config_section: Dict[str, Any]
    settings: GobenchClientSettings

    def apply_if_set(self, setting_name: str, config_key: str) -> None:
        value = getattr(self.settings, setting_name, None)
        if value is not None:
            self.config_section[config_key] = value

    def apply_string_if_set(self, setting_name: str, config_key: str) -> None:
        value = getattr(self.settings, setting_name, None)
        if value:
            self.config_section[config_key] = value


def default_config_file() -> Path:
    """Standard user config location."""
    return Path.home() / ".config" / CONFIG_DIR_NAME / CONFIG_FILE_NAME


class ConfigManager:
    """Loads, validates and saves the client configuration."""

    def __init__(self, config_file: Optional[Path] = None):
        self.config_file = Path(config_file) if config_file else default_config_file()
        self._config: Optional[GobenchClientConfig] = None

    @property
    def config_directory(self) -> Path:
        return self.config_file.parent

    def load_config(self) -> GobenchClientConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}
        if self.config_file.exists():
            config_data = self._load_toml_file()

        config_data = self._apply_env_overrides(config_data)

        try:
            self._config = GobenchClientConfig(**config_data)
        except PydanticValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            raise ConfigurationValidationError(errors) from e
        except (ValueError, TypeError) as e:
            raise ConfigurationValidationError([f"Configuration validation failed: {e}"]) from e

        return self._config

    def reload(self) -> GobenchClientConfig:
        self._config = None
        return self.load_config()

    def _load_toml_file(self) -> Dict[str, Any]:
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InvalidConfigurationError(
                str(self.config_file), f"Invalid TOML syntax: {e}", "valid TOML format"
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file {self.config_file}: {e}",
                description="Check that the file exists and is readable",
            ) from e

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        settings = GobenchClientSettings()

        for section in ("api", "polling", "logging"):
            config_data.setdefault(section, {})

        api = EnvironmentOverride(config_data["api"], settings)
        api.apply_string_if_set("gobench_api_url", "base_url")
        api.apply_if_set("gobench_api_timeout", "timeout")
        api.apply_if_set("gobench_api_max_retries", "max_retries")

        polling = EnvironmentOverride(config_data["polling"], settings)
        polling.apply_if_set("gobench_poll_interval", "interval_seconds")

        log = EnvironmentOverride(config_data["logging"], settings)
        log.apply_string_if_set("gobench_log_level", "level")
        log.apply_string_if_set("gobench_log_format", "format")
        if settings.gobench_log_file_path:
            log.config_section["file_path"] = settings.gobench_log_file_path
            outputs = list(log.config_section.get("output", ["console"]))
            if "file" not in outputs:
                outputs.append("file")
            log.config_section["output"] = outputs

        return config_data

    def save_config(self, config: Optional[GobenchClientConfig] = None) -> Path:
        """Write the configuration to the TOML file, creating its directory."""
        config = config or self.load_config()
        data = config.model_dump(mode="json", exclude_none=True)

        try:
            self.config_directory.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "wb") as f:
                tomli_w.dump(data, f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot write configuration file {self.config_file}: {e}",
                description="Check permissions of the configuration directory",
            ) from e

        self._config = config
        return self.config_file
