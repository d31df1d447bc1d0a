"""
Centralized error handling for the gobench client CLI.

Errors reported by dispatchers reach the console through
``ConsoleNoticePrinter``; errors escaping a command are mapped to exit
codes by ``handle_cli_exceptions``.
"""

import logging
import sys
from typing import Callable

import click
from rich.console import Console

from gobench_client.application.notifications import ErrorNotice
from gobench_client.exceptions import (
    ApiConnectionError,
    ApiError,
    ConfigurationError,
    GobenchClientError,
    ValidationError,
)
from gobench_client.logging import get_logger

logger = get_logger(__name__)

EXIT_FAILURE = 1
EXIT_VALIDATION = 2
EXIT_CONFIGURATION = 3
EXIT_CONNECTION = 4
EXIT_API = 5
EXIT_INTERRUPTED = 130


def exit_code_for(error: BaseException) -> int:
    if isinstance(error, ValidationError):
        return EXIT_VALIDATION
    if isinstance(error, ConfigurationError):
        return EXIT_CONFIGURATION
    if isinstance(error, ApiConnectionError):
        return EXIT_CONNECTION
    if isinstance(error, ApiError):
        return EXIT_API
    return EXIT_FAILURE


class ConsoleNoticePrinter:
    """NotificationCenter listener printing notices and remembering the first exit code."""

    def __init__(self, console: Console):
        self.console = console
        self.exit_code = 0

    def __call__(self, notice: ErrorNotice, error: GobenchClientError) -> None:
        print_error(self.console, error)
        if not self.exit_code:
            self.exit_code = exit_code_for(error)


def print_error(console: Console, error: GobenchClientError) -> None:
    console.print(f"[red]✗ {error.message}[/red]")
    if error.description:
        console.print(f"[blue]💡 {error.description}[/blue]")
    if error.user_action:
        console.print(f"[green]🔧 Action: {error.user_action}[/green]")
    console.print(f"[dim]🔍 Error ID: {error.correlation_id}[/dim]")


def handle_cli_exceptions(console: Console, command: Callable[..., object]) -> None:
    """Run a click command in standalone=False mode and map errors to exit codes."""
    try:
        result = command(standalone_mode=False)
        if isinstance(result, int) and result:
            sys.exit(result)
    except click.exceptions.Abort:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(EXIT_INTERRUPTED)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(EXIT_INTERRUPTED)
    except GobenchClientError as e:
        print_error(console, e)
        logger.error(
            f"{type(e).__name__}: {e.message}",
            exc_info=logger.logger.isEnabledFor(logging.DEBUG),
            **e.log_fields(),
        )
        sys.exit(exit_code_for(e))
