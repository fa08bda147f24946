from pathlib import Path
from typing import Annotated

from rich import print as rprint
from typer import Argument, Exit, Option, Typer

from recovery_cli.command.config.service import validate_config

config_app = Typer(help="⚙️ Resilience configuration")


@config_app.command("validate")
def validate(
    config_path: Annotated[
        Path, Argument(help="Path to YAML configuration", exists=True)
    ],
    env_file: Annotated[
        Path | None, Option("--env-file", help="Path to .env file")
    ] = None,
) -> None:
    """Validate configuration file."""
    try:
        validate_config(config_path, env_file)
    except Exit:
        raise
    except Exception as ex:
        rprint(f"[red]❌ Error: {ex}[/red]")
        raise Exit(1) from ex
