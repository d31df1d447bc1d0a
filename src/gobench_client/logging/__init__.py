"""
gobench client logging package.

- formatters: Log formatting (JSON, console, rich)
- loggers: Logger wrapper with correlation IDs and structured context
- config: Logging configuration
- manager: Centralized logging setup
"""

from .config import LoggingConfig, create_default_config
from .formatters import StructuredFormatter, create_console_formatter, create_rich_handler
from .loggers import ClientLogger
from .manager import LoggingManager, configure_logging, logging_manager

get_logger = logging_manager.get_logger

__all__ = [
    "LoggingConfig",
    "LoggingManager",
    "ClientLogger",
    "StructuredFormatter",
    "configure_logging",
    "create_console_formatter",
    "create_default_config",
    "create_rich_handler",
    "get_logger",
    "logging_manager",
]
