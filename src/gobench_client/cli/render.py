"""Rich rendering of store snapshots."""

from typing import Iterable, Optional

from rich.table import Table

from gobench_client.models import Application, ApplicationStatus

STATUS_STYLES = {
    ApplicationStatus.PENDING: "yellow",
    ApplicationStatus.PROVISIONING: "yellow",
    ApplicationStatus.RUNNING: "cyan",
    ApplicationStatus.FINISHED: "green",
    ApplicationStatus.CANCEL: "magenta",
    ApplicationStatus.ERROR: "red",
}


def format_status(app: Application) -> str:
    status = app.status or "-"
    style = STATUS_STYLES.get(app.state)
    return f"[{style}]{status}[/{style}]" if style else status


def applications_table(apps: Optional[Iterable[Application]], title: str = "Applications") -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Status")
    table.add_column("Created")
    table.add_column("Updated")
    table.add_column("Tags", style="dim")

    for app in apps or ():
        table.add_row(
            str(app.id) if app.id is not None else "-",
            app.name,
            format_status(app),
            app.created_at or "-",
            app.updated_at or "-",
            app.tags or "",
        )
    return table
