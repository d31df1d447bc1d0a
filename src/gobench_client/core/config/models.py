"""
Configuration models for the gobench client.

Pydantic-based configuration models that provide validation, type safety,
and documentation for the API gateway, polling and logging settings.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gobench_client.constants import (
    DEFAULT_API_URL,
    DEFAULT_BACKOFF_FACTOR,
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    DEFAULT_MAX_RETRIES,
    DEFAULT_POLL_INTERVAL_SECONDS,
    DEFAULT_TIMEOUT_SECONDS,
    MAX_POLL_INTERVAL_SECONDS,
    MAX_RETRIES_LIMIT,
    MAX_TIMEOUT_SECONDS,
    MIN_LOG_FILE_SIZE_BYTES,
    MIN_POLL_INTERVAL_SECONDS,
)


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ApiConfig(BaseModel):
    """gobench master API connection settings."""

    base_url: str = Field(DEFAULT_API_URL, description="Base URL of the gobench master")
    timeout: Optional[float] = Field(
        DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        le=MAX_TIMEOUT_SECONDS,
        description="Request timeout in seconds (unset means wait indefinitely)",
    )
    max_retries: int = Field(
        DEFAULT_MAX_RETRIES,
        ge=0,
        le=MAX_RETRIES_LIMIT,
        description="Retries for idempotent reads; mutations are never retried",
    )
    backoff_factor: float = Field(DEFAULT_BACKOFF_FACTOR, ge=0)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")


class PollingConfig(BaseModel):
    """Polling scheduler settings."""

    interval_seconds: float = Field(
        DEFAULT_POLL_INTERVAL_SECONDS,
        ge=MIN_POLL_INTERVAL_SECONDS,
        le=MAX_POLL_INTERVAL_SECONDS,
        description="Seconds between two refreshes of the application list",
    )


class LoggingSettings(BaseModel):
    """Logging configuration section."""

    level: LogLevel = Field(LogLevel.INFO, description="Logging level")
    format: str = Field("console", description="Log format: console, json, rich")
    output: List[str] = Field(["console"], description="Log outputs: console, file")
    file_path: Optional[Path] = Field(None, description="Log file path")
    max_file_size: int = Field(
        DEFAULT_LOG_FILE_SIZE_BYTES,
        ge=MIN_LOG_FILE_SIZE_BYTES,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(DEFAULT_LOG_BACKUP_COUNT, ge=1, le=20)

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ["console", "json", "rich"]:
            raise ValueError("format must be one of: console, json, rich")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: List[str]) -> List[str]:
        valid_outputs = {"console", "file"}
        for output in v:
            if output not in valid_outputs:
                raise ValueError(
                    f"output must contain only: {', '.join(sorted(valid_outputs))}"
                )
        return v


class GobenchClientConfig(BaseModel):
    """Main client configuration model."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    polling: PollingConfig = Field(default_factory=PollingConfig)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "str_strip_whitespace": True,
    }


class GobenchClientSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    gobench_api_url: Optional[str] = Field(None, alias="GOBENCH_API_URL")
    gobench_api_timeout: Optional[float] = Field(None, alias="GOBENCH_API_TIMEOUT")
    gobench_api_max_retries: Optional[int] = Field(None, alias="GOBENCH_API_MAX_RETRIES")
    gobench_poll_interval: Optional[float] = Field(None, alias="GOBENCH_POLL_INTERVAL")
    gobench_log_level: Optional[str] = Field(None, alias="GOBENCH_LOG_LEVEL")
    gobench_log_format: Optional[str] = Field(None, alias="GOBENCH_LOG_FORMAT")
    gobench_log_file_path: Optional[str] = Field(None, alias="GOBENCH_LOG_FILE_PATH")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )
