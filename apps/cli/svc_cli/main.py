from pathlib import Path

import typer
from svc_core import __version__

from svc_cli.commands import service_cmd

app = typer.Typer(
    help="svc - manage configured services and utilities",
    no_args_is_help=True,
    add_completion=False
)


def _version_callback(value: bool):
    if value:
        typer.echo(f"svc {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to services.yaml (default: $SVC_CONFIG or ./services.yaml)"
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """svc - start, stop and auto-start configured programs."""
    ctx.obj = {"config_path": config}


app.command(name="enable")(service_cmd.enable)
app.command(name="disable")(service_cmd.disable)
app.command(name="run")(service_cmd.run)
app.command(name="kill")(service_cmd.kill)
app.command(name="status")(service_cmd.status)
app.command(name="list")(service_cmd.list_services)


def main():
    app()


if __name__ == "__main__":
    main()
