"""teamlog command line.

Usage:
    teamlog summary --demo --start 2026-10-01 --end 2026-10-31
    teamlog export --format csv --user 1
    teamlog remind            # run once a day from cron / systemd
    teamlog schedule --backend systemd
"""

import asyncio
import shutil
import sys
from contextlib import asynccontextmanager
from datetime import date
from pathlib import Path
from typing import AsyncIterator, List, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from .core.config import get_settings
from .core.container import ServiceContainer
from .core.services import Services, setup_services
from .domain.errors import DomainError
from .models.user import User
from .models.value_objects import Role, parse_log_date
from .models.worklog import WorkLog
from .services.aggregation import (
    average_mood,
    completed_tasks,
    developer_rollups,
    top_tags,
    total_log_time,
    total_tasks,
)
from .services.log_queries import recent_logs, sort_newest_first
from .services.report_export import ExportFormat
from .services.scheduler import reminder_job
from .utils.formatting import format_display_date, format_mood, format_time
from .utils.logging import setup_logging

console = Console()
app = typer.Typer(help="Team work log reports and reminders")

ALL_DEVELOPERS = "All Developers"


def _load_env_files() -> None:
    # .env.local wins over .env; variables already set in the environment win over both
    for name in (".env.local", ".env"):
        env_file = Path.cwd() / name
        if env_file.exists():
            load_dotenv(env_file, override=False)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, help="Override LOG_LEVEL"),
) -> None:
    _load_env_files()
    settings = get_settings()
    level = log_level or ("DEBUG" if settings.debug else settings.log_level)
    setup_logging(level, settings.log_to_file)


@asynccontextmanager
async def open_services(demo: bool) -> AsyncIterator[ServiceContainer]:
    """Container backed by the demo data set or the configured database."""
    if demo:
        yield setup_services(ServiceContainer())
        return

    from .core.database import close_database, get_db_session, init_database
    from .infrastructure.repositories import SqlAlchemyWorkLogRepository

    await init_database()
    try:
        async with get_db_session() as session:
            yield setup_services(
                ServiceContainer(),
                worklog_repository=SqlAlchemyWorkLogRepository(session),
            )
    finally:
        await close_database()


def _parse_day(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return parse_log_date(value)
    except DomainError as e:
        raise typer.BadParameter(str(e))


async def _filtered_logs(
    container: ServiceContainer,
    user: Optional[str],
    start: Optional[str],
    end: Optional[str],
    query: Optional[str],
) -> List[WorkLog]:
    service = container.get(Services.WORKLOG)
    return await service.list(user, _parse_day(start), _parse_day(end), query)


def _tag_cell(log: WorkLog, limit: int) -> str:
    tags = top_tags(log, limit)
    text = ", ".join(tags.shown)
    if tags.hidden:
        text = f"{text} +{tags.hidden} more"
    return text


def _print_recent(logs: List[WorkLog], developers: List[User]) -> None:
    settings = get_settings()
    recent = sort_newest_first(recent_logs(logs, settings.recent_window_days))
    if not recent:
        return

    names = {dev.id: dev.name for dev in developers}
    table = Table(title=f"Last {settings.recent_window_days} Days")
    table.add_column("Date")
    table.add_column("Developer")
    table.add_column("Time", justify="right")
    table.add_column("Mood")
    table.add_column("Tags")
    table.add_column("Reviewed")
    for log in recent:
        table.add_row(
            format_display_date(log.date),
            names.get(log.user_id, log.user_id),
            format_time(log.total_time),
            log.mood.emoji,
            _tag_cell(log, settings.top_tags_limit),
            "yes" if log.reviewed else "no",
        )
    console.print(table)


@app.command()
def summary(
    user: Optional[str] = typer.Option(None, help="Developer ID (all developers if unset)"),
    start: Optional[str] = typer.Option(None, help="First day, YYYY-MM-DD"),
    end: Optional[str] = typer.Option(None, help="Last day, YYYY-MM-DD"),
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Search text"),
    demo: bool = typer.Option(False, "--demo", help="Use the built-in demo data"),
) -> None:
    """Aggregate time, tasks and mood for a filtered set of logs."""

    async def _run() -> None:
        async with open_services(demo) as container:
            logs = await _filtered_logs(container, user, start, end, query)
            developers = await container.get(Services.USERS).list_by_role(Role.DEVELOPER)

        if not logs:
            console.print("[yellow]No work logs match the filters.[/yellow]")
            return

        table = Table(title="Productivity Summary")
        table.add_column("Developer")
        table.add_column("Logs", justify="right")
        table.add_column("Tasks", justify="right")
        table.add_column("Time", justify="right")
        table.add_column("Avg Mood")
        table.add_column("Blockers", justify="right")
        for rollup in developer_rollups(logs, developers):
            if not rollup.logs:
                continue
            table.add_row(
                rollup.developer.name,
                str(len(rollup.logs)),
                str(rollup.task_count),
                format_time(rollup.total_minutes),
                format_mood(rollup.average_mood),
                str(rollup.blocker_count),
            )
        console.print(table)
        console.print(
            f"Total: {format_time(total_log_time(logs))} over {total_tasks(logs)} tasks "
            f"({completed_tasks(logs)} completed), average mood "
            f"{format_mood(average_mood(logs))}"
        )
        _print_recent(logs, developers)

    asyncio.run(_run())


@app.command()
def export(
    fmt: ExportFormat = typer.Option(ExportFormat.PDF, "--format", "-f", help="pdf or csv"),
    user: Optional[str] = typer.Option(None, help="Developer ID (all developers if unset)"),
    start: Optional[str] = typer.Option(None, help="First day, YYYY-MM-DD"),
    end: Optional[str] = typer.Option(None, help="Last day, YYYY-MM-DD"),
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Search text"),
    output_dir: Optional[Path] = typer.Option(None, help="Defaults to EXPORT_DIR"),
    demo: bool = typer.Option(False, "--demo", help="Use the built-in demo data"),
) -> None:
    """Write a PDF or CSV productivity report."""

    async def _run() -> None:
        async with open_services(demo) as container:
            logs = await _filtered_logs(container, user, start, end, query)
            label = ALL_DEVELOPERS
            if user:
                developer = await container.get(Services.USERS).get_by_id(user)
                label = developer.name if developer else user
            artifact = container.get(Services.EXPORTER).export(
                logs, label, fmt, start=start, end=end
            )

        if artifact is None:
            console.print("[yellow]No data to export.[/yellow]")
            raise typer.Exit(1)
        path = artifact.write_to(output_dir or get_settings().export_dir)
        console.print(f"[green]Written:[/green] {path}")

    asyncio.run(_run())


@app.command()
def remind(
    day: Optional[str] = typer.Option(None, "--date", help="Day to check (default today)"),
    demo: bool = typer.Option(False, "--demo", help="Use the built-in demo data"),
) -> None:
    """Remind developers who have not logged the day. Run once daily."""

    async def _run() -> None:
        async with open_services(demo) as container:
            result = await container.get(Services.REMINDERS).run(_parse_day(day))
            notifications = await container.get(Services.EVENT_BUS).dispatch(result)

        for notification in notifications:
            console.print(f"Reminded user {notification.user_id}: {notification.message}")
        console.print(f"{len(notifications)} reminder(s) sent")

    asyncio.run(_run())


@app.command()
def schedule(
    backend: str = typer.Option("cron", help="cron, systemd or launchd"),
    project_root: Path = typer.Option(Path.cwd(), help="Working directory for the job"),
) -> None:
    """Print the OS schedule that runs ``teamlog remind`` daily."""
    from .services.scheduler.install_generators import (
        generate_crontab_entry,
        generate_launchd_plist,
        generate_systemd_units,
    )

    job = reminder_job(get_settings())
    executable = shutil.which("teamlog") or f"{sys.executable} -m teamlog"

    if backend == "cron":
        typer.echo(generate_crontab_entry(job, project_root, executable))
    elif backend == "systemd":
        service_text, timer_text = generate_systemd_units(job, project_root, executable)
        typer.echo(f"# teamlog-{job.name}.service\n{service_text}")
        typer.echo(f"# teamlog-{job.name}.timer\n{timer_text}")
    elif backend == "launchd":
        typer.echo(generate_launchd_plist(job, project_root, executable))
    else:
        console.print(f"[red]Unknown backend: {backend}[/red]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
