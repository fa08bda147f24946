"""Database recovery CLI."""

import typer
from rich import print as rprint
from rich.console import Console

from recovery_cli.command import config_app, health_app

console = Console()
app = typer.Typer(
    name="recovery",
    help="🛡️ Retry, circuit breaking and health checks for remote databases",
    add_completion=False,
)

app.add_typer(health_app, name="health")
app.add_typer(config_app, name="config")


@app.command()
def version() -> None:
    """📋 Show the application version."""
    rprint("[bold blue]DB Recovery[/bold blue] [green]v1.0.0[/green]")
    rprint("🛡️  Resilience layer for remote databases")


if __name__ == "__main__":
    app()
