"""Service management commands."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from svc_core import ServiceActions, SvcError, get_registrar
from svc_core.models import Entry, EntryKind, SvcConfig
from svc_core.process_manager import ProcessController
from svc_core.services import ConfigManager
from svc_logging import configure_from_config

console = Console()
err_console = Console(stderr=True)


def _build_actions() -> ServiceActions:
    controller = ProcessController()
    return ServiceActions(
        process_table=controller,
        launcher=controller,
        registrar=get_registrar(),
    )


def _load_config(ctx: typer.Context) -> SvcConfig:
    config_path: Path | None = (ctx.obj or {}).get("config_path")
    config = ConfigManager(config_path).config
    configure_from_config(config)
    return config


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]✗[/red] {escape(message)}")
    return typer.Exit(code=1)


def _lookup(ctx: typer.Context, name: str) -> tuple[Entry, ServiceActions]:
    config = _load_config(ctx)
    return config.services.find_by_name(name), _build_actions()


def enable(ctx: typer.Context, name: str = typer.Argument(..., help="Service name")):
    """Start a service automatically at login."""
    try:
        entry, actions = _lookup(ctx, name)
        actions.enable(entry)
    except SvcError as e:
        raise _fail(str(e))

    console.print(f"[green]✓[/green] Service [cyan]{escape(name)}[/cyan] enabled.")


def disable(ctx: typer.Context, name: str = typer.Argument(..., help="Service name")):
    """Stop starting a service at login."""
    try:
        entry, actions = _lookup(ctx, name)
        actions.disable(entry)
    except SvcError as e:
        raise _fail(str(e))

    console.print(f"[green]✓[/green] Service [cyan]{escape(name)}[/cyan] disabled.")


def run(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Service name"),
    at_keyword: str | None = typer.Argument(None, metavar="at", show_default=False),
    directory: str | None = typer.Argument(None, metavar="DIR", show_default=False),
    at: str | None = typer.Option(None, "--at", help="Working directory for this launch"),
):
    """Start a service in the background, optionally: run NAME at DIR."""
    if at_keyword is not None:
        if at_keyword != "at" or directory is None:
            raise _fail("Usage: svc run <name> [at <directory>]")
        if at is not None:
            raise _fail("Give the working directory either as 'at DIR' or --at, not both")
        at = directory

    try:
        entry, actions = _lookup(ctx, name)
        pid = actions.run(entry, at)
    except SvcError as e:
        raise _fail(str(e))

    console.print(
        f"[green]✓[/green] {entry.kind.label} [cyan]{escape(entry.path)}[/cyan] "
        f"started in the background (PID {pid})."
    )


def kill(ctx: typer.Context, name: str = typer.Argument(..., help="Service name")):
    """Terminate every process running the service's executable."""
    try:
        entry, actions = _lookup(ctx, name)
        report = actions.kill(entry)
    except SvcError as e:
        raise _fail(str(e))

    for pid in report.terminated:
        console.print(f"[green]✓[/green] Service [cyan]{escape(name)}[/cyan] with PID {pid} killed.")
    for pid, reason in report.failures:
        err_console.print(f"[red]✗[/red] PID {pid}: {escape(reason)}")

    if not report.terminated_count:
        raise typer.Exit(code=1)


def status(ctx: typer.Context, name: str = typer.Argument(..., help="Service name")):
    """Show whether a service is running and enabled at login."""
    try:
        entry, actions = _lookup(ctx, name)
        service_status = actions.status(entry)
    except SvcError as e:
        raise _fail(str(e))

    table = Table(title=f"Service {escape(name)}")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("Name", escape(entry.name))
    table.add_row("Type", entry.kind.label)
    table.add_row("Path", escape(entry.path))
    if entry.kind is EntryKind.UTIL:
        table.add_row("Interpreter", escape(entry.effective_interpreter or ""))

    if service_status.running:
        table.add_row("State", f"[green]running ({service_status.count})[/green]")
        table.add_row("PID", ", ".join(str(pid) for pid in service_status.pids))
    else:
        table.add_row("State", "[yellow]stopped[/yellow]")

    if service_status.enabled is None:
        startup = "[dim]unknown[/dim]"
    elif service_status.enabled:
        startup = "[green]enabled[/green]"
    else:
        startup = "[yellow]disabled[/yellow]"
    table.add_row("Start-up", startup)

    console.print(table)


def list_services(ctx: typer.Context):
    """List configured services."""
    try:
        config = _load_config(ctx)
    except SvcError as e:
        raise _fail(str(e))

    if not len(config.services):
        console.print(f"[yellow]No services configured in {escape(str(config.source))}[/yellow]")
        return

    table = Table(title="Services")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Path")

    for entry in config.services:
        table.add_row(escape(entry.name), entry.kind.label, escape(entry.path))

    console.print(table)
