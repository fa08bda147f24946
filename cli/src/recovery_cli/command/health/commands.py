import traceback
from asyncio import run as asyncio_run
from pathlib import Path
from typing import Annotated

from rich import print as rprint
from typer import Argument, Exit, Option, Typer

from recovery_cli.command.health.service import check_health_async

health_app = Typer(help="🩺 Dependency health checks")


@health_app.command("check")
def check_health(
    config_path: Annotated[
        Path, Argument(help="Path to YAML configuration", exists=True)
    ],
    env_file: Annotated[
        Path | None, Option("--env-file", help="Path to .env file")
    ] = None,
    verbose: Annotated[
        bool, Option("--verbose", "-v", help="Detailed conclusion")
    ] = False,
) -> None:
    """🩺 Probe configured dependencies."""
    try:
        asyncio_run(check_health_async(config_path, env_file))
    except Exit:
        raise
    except Exception as ex:
        rprint(f"[red]❌ Error: {ex}[/red]")
        if verbose:
            rprint(f"[dim]{traceback.format_exc()}[/dim]")
        raise Exit(1) from ex
