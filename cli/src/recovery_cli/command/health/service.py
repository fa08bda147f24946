from pathlib import Path

from rich import print as rprint
from rich.console import Console
from rich.table import Table
from typer import Exit

from recovery.health import (
    HealthCheck,
    HealthReport,
    http_probe,
    validate_dependencies,
)
from recovery.yaml_loader import YAMLConfigParser
from recovery.yaml_loader.interfaces import ResilienceConfig
from recovery_cli.utils import load_env_file

console = Console()


async def check_health_async(
    config_path: Path,
    env_file: Path | None,
) -> HealthReport:
    if env_file:
        load_env_file(env_file)

    config = YAMLConfigParser.parse_file(config_path)
    if not config.dependencies:
        rprint("[yellow]⚠️ No dependencies configured[/yellow]")
        return HealthReport(healthy=True)

    rprint(
        f"🩺 Checking [bold blue]{len(config.dependencies)}[/bold blue] "
        f"dependencies of [bold]{config.name}[/bold]..."
    )

    report = await validate_dependencies(
        build_probes(config), policy=config.health_check
    )
    display_health_report(config, report)

    if not report.healthy:
        raise Exit(1)

    rprint("✅ All dependencies are healthy!")
    return report


def build_probes(config: ResilienceConfig) -> dict[str, HealthCheck]:
    return {
        name: http_probe(dependency.url, dependency.timeout, dependency.method)
        for name, dependency in config.dependencies.items()
    }


def display_health_report(
    config: ResilienceConfig, report: HealthReport
) -> None:
    table = Table(title="🩺 Dependency health")
    table.add_column("Dependency", style="cyan")
    table.add_column("URL", style="dim")
    table.add_column("Status")

    for name, dependency in config.dependencies.items():
        failed = any(f"Dependency {name} " in issue for issue in report.issues)
        status = "[red]❌ unhealthy[/red]" if failed else "[green]✅ ok[/green]"
        table.add_row(name, dependency.url, status)

    console.print(table)

    for issue in report.issues:
        rprint(f"[red]• {issue}[/red]")
