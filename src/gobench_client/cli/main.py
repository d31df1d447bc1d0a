#!/usr/bin/env python3
"""gobench-client CLI main entry point.

Command-line front end for managing gobench benchmark applications. Every
command drives the same synchronization layer a long-running client
uses: an ``ApplicationSession`` whose store is loaded from the master,
whose dispatchers perform the mutation and whose errors are reported to
the console.
"""

import asyncio
import logging
from pathlib import Path
from typing import Awaitable, Callable, Optional, TypeVar

import click
from rich.console import Console

from gobench_client import __version__
from gobench_client.application import ApplicationSession, NotificationCenter
from gobench_client.core.config import ApiConfig, ConfigManager, GobenchClientConfig
from gobench_client.exceptions import CloneSourceNotFoundError
from gobench_client.infrastructure.api import AsyncApplicationGateway, GobenchApi
from gobench_client.logging import LoggingConfig, configure_logging, get_logger

from .error_handler import ConsoleNoticePrinter, handle_cli_exceptions
from .render import applications_table

console = Console()
logger = logging.getLogger(__name__)

T = TypeVar("T")


def setup_logging(settings: GobenchClientConfig, verbose: int = 0) -> None:
    """Set up logging from the configuration, raised to DEBUG/INFO by -v flags."""
    log_config = LoggingConfig.from_settings(
        settings.logging, service_name="gobench-client", version=__version__
    )
    if verbose > 1:
        log_config.level = logging.DEBUG
    elif verbose == 1:
        log_config.level = min(log_config.level, logging.INFO)
    elif log_config.level < logging.WARNING and "file" not in log_config.output:
        # Keep command output readable unless logging was asked for.
        log_config.level = logging.WARNING
    configure_logging(log_config)


def run_session(
    ctx: click.Context,
    action: Callable[[ApplicationSession], Awaitable[T]],
    poll: bool = False,
    interval: Optional[float] = None,
    subscribe: Optional[Callable] = None,
) -> T:
    """Open a session against the configured master, run ``action``, close it."""
    settings: GobenchClientConfig = ctx.obj["settings"]
    printer: ConsoleNoticePrinter = ctx.obj["printer"]

    notifications = NotificationCenter()
    notifications.add_listener(printer)
    api = GobenchApi.from_config(settings.api)
    gateway = AsyncApplicationGateway(api)

    async def runner() -> T:
        session = ApplicationSession(
            gateway,
            poll_interval=interval or settings.polling.interval_seconds,
            error_surface=notifications,
            poll=poll,
        )
        if subscribe is not None:
            session.store.subscribe(subscribe)
        async with session:
            return await action(session)

    try:
        return asyncio.run(runner())
    finally:
        gateway.close()


def finish(ctx: click.Context, ok: bool = True) -> None:
    printer: ConsoleNoticePrinter = ctx.obj["printer"]
    code = printer.exit_code or (0 if ok else 1)
    if code:
        ctx.exit(code)


@click.group()
@click.version_option(version=__version__, prog_name="gobench-client")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Configuration file path",
)
@click.option("--api-url", help="Base URL of the gobench master (overrides config)")
@click.option(
    "--verbose", "-v",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], api_url: Optional[str], verbose: int) -> None:
    """gobench-client: manage gobench benchmark applications.

    \b
    Examples:
        gobench-client list
        gobench-client create --name load-test --scenario-file scenario.go
        gobench-client clone load-test
        gobench-client cancel 12
        gobench-client watch --interval 5
    """
    ctx.ensure_object(dict)

    config_manager = ConfigManager(config)
    settings = config_manager.load_config()
    if api_url:
        settings.api = ApiConfig(**{**settings.api.model_dump(), "base_url": api_url})

    setup_logging(settings, verbose)
    get_logger("gobench_client.cli").debug(
        "CLI started", version=__version__, api_url=settings.api.base_url
    )

    ctx.obj["config_manager"] = config_manager
    ctx.obj["settings"] = settings
    ctx.obj["printer"] = ConsoleNoticePrinter(console)


@cli.command("list")
@click.pass_context
def list_applications(ctx: click.Context) -> None:
    """List the applications known to the master."""

    async def action(session: ApplicationSession):
        return session.store.snapshot

    snapshot = run_session(ctx, action)
    if snapshot.apps is not None:
        if snapshot.apps:
            console.print(applications_table(snapshot.apps))
        else:
            console.print("[dim]No applications yet.[/dim]")
    finish(ctx, snapshot.apps is not None)


@cli.command()
@click.option("--name", "-n", required=True, help="Application name")
@click.option(
    "--scenario-file", "-f",
    type=click.File("r", encoding="utf-8"),
    required=True,
    help="Scenario source file ('-' for stdin)",
)
@click.pass_context
def create(ctx: click.Context, name: str, scenario_file) -> None:
    """Create an application from a scenario file."""
    scenario = scenario_file.read()

    async def action(session: ApplicationSession):
        created = await session.dispatchers.create(name, scenario)
        return created, session.navigator.current

    created, route = run_session(ctx, action)
    if created is not None:
        console.print(f"[green]✓ Created application {created}[/green] → {route}")
    finish(ctx, created is not None)


@cli.command()
@click.argument("source")
@click.option("--name", "-n", help="Name of the clone (default: <source>-<timestamp>)")
@click.option(
    "--scenario-file", "-f",
    type=click.File("r", encoding="utf-8"),
    help="Replace the copied scenario with this file",
)
@click.pass_context
def clone(ctx: click.Context, source: str, name: Optional[str], scenario_file) -> None:
    """Create a copy of the application named SOURCE."""
    scenario = scenario_file.read() if scenario_file else None

    async def action(session: ApplicationSession):
        session.dispatchers.clone(source)
        form = session.creation_form()
        try:
            if not form.prefill_applied:
                if session.store.apps is not None:
                    session.error_surface.report(CloneSourceNotFoundError(source))
                return None
            if name:
                form.set_name(name)
            if scenario is not None:
                form.set_scenario(scenario)
            return await form.submit()
        finally:
            form.close()

    created = run_session(ctx, action)
    if created is not None:
        console.print(f"[green]✓ Cloned {source} as {created}[/green]")
    finish(ctx, created is not None)


@cli.command()
@click.argument("application_id")
@click.pass_context
def delete(ctx: click.Context, application_id: str) -> None:
    """Delete the application APPLICATION_ID."""

    async def action(session: ApplicationSession):
        return await session.dispatchers.delete(application_id)

    ok = run_session(ctx, action)
    if ok:
        console.print(f"[green]✓ Deleted application {application_id}[/green]")
    finish(ctx, ok)


@cli.command()
@click.argument("application_id")
@click.pass_context
def cancel(ctx: click.Context, application_id: str) -> None:
    """Cancel the running benchmark of APPLICATION_ID (the record is kept)."""

    async def action(session: ApplicationSession):
        ok = await session.dispatchers.cancel(application_id)
        return ok, session.store.snapshot

    ok, snapshot = run_session(ctx, action)
    if ok:
        console.print(f"[green]✓ Cancel requested for application {application_id}[/green]")
        console.print(applications_table(snapshot.apps))
    finish(ctx, ok)


@cli.command()
@click.option("--interval", "-i", type=float, help="Seconds between refreshes (default: config)")
@click.option("--count", type=click.IntRange(min=1), help="Stop after this many refreshes")
@click.pass_context
def watch(ctx: click.Context, interval: Optional[float], count: Optional[int]) -> None:
    """Show the application list and keep it refreshed.

    Polling idles while the master knows no application.
    """
    seen = {"refreshes": 0, "last": None}

    def render(snapshot) -> None:
        if snapshot.apps is None or snapshot.apps is seen["last"]:
            return
        seen["last"] = snapshot.apps
        seen["refreshes"] += 1
        console.print(applications_table(snapshot.apps, title=f"Applications (v{snapshot.version})"))

    async def action(session: ApplicationSession):
        if not session.store.has_apps:
            console.print("[dim]No applications yet; polling idles until one exists.[/dim]")
        while count is None or seen["refreshes"] < count:
            await asyncio.sleep(session.scheduler.interval / 4)
        return session.scheduler.refreshes

    run_session(ctx, action, poll=True, interval=interval, subscribe=render)
    finish(ctx)


@cli.group()
def config() -> None:
    """Inspect or initialize the configuration file."""


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Print the effective configuration."""
    config_manager: ConfigManager = ctx.obj["config_manager"]
    settings: GobenchClientConfig = ctx.obj["settings"]
    console.print(f"[dim]# {config_manager.config_file}[/dim]")
    console.print_json(settings.model_dump_json(exclude_none=True))


@config.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing file")
@click.pass_context
def config_init(ctx: click.Context, force: bool) -> None:
    """Write the effective configuration to the configuration file."""
    config_manager: ConfigManager = ctx.obj["config_manager"]
    if config_manager.config_file.exists() and not force:
        raise click.ClickException(
            f"{config_manager.config_file} already exists (use --force to overwrite)"
        )
    path = config_manager.save_config(ctx.obj["settings"])
    console.print(f"[green]✓ Configuration written to {path}[/green]")


def main() -> None:
    """Main entry point for the CLI."""
    handle_cli_exceptions(console, cli)


if __name__ == "__main__":
    main()
