from pathlib import Path

from rich import print as rprint
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from recovery.yaml_loader import YAMLConfigParser
from recovery.yaml_loader.interfaces import ResilienceConfig
from recovery_cli.command.config.const import MESSAGE_INFO_CONFIG
from recovery_cli.utils import load_env_file

console = Console()


def validate_config(config_path: Path, env_file: Path | None) -> None:
    if env_file:
        load_env_file(env_file)

    config = YAMLConfigParser.parse_file(config_path)

    display_config_info(config)
    display_resources(config)

    env_vars = YAMLConfigParser.get_env_vars_from_config(config_path)
    if env_vars:
        names = ", ".join(sorted(env_vars))
        rprint(f"[dim]Environment variables: {names}[/dim]")

    rprint("✅ Configuration is valid!")


def display_config_info(config: ResilienceConfig) -> None:
    retry = config.default_retry
    panel_content = MESSAGE_INFO_CONFIG.format(
        config.name,
        config.description or "Not specified",
        retry.max_attempts,
        retry.base_delay,
        retry.max_delay,
        retry.backoff_multiplier,
        "on" if retry.use_jitter else "off",
        len(config.resources),
        len(config.dependencies),
    )

    console.print(
        Panel(
            panel_content,
            title="🛡️ Resilience configuration",
            border_style="green",
        )
    )


def display_resources(config: ResilienceConfig) -> None:
    if not config.resources:
        return

    table = Table(title="🔌 Protected resources")
    table.add_column("Resource", style="cyan")
    table.add_column("Attempts", justify="right")
    table.add_column("Failure threshold", justify="right")
    table.add_column("Reset timeout, s", justify="right")
    table.add_column("Call timeout, s", justify="right")

    for name, resource in config.resources.items():
        retry = config.get_effective_retry(name)
        breaker = resource.circuit_breaker
        if breaker is None:
            table.add_row(name, str(retry.max_attempts), "-", "-", "-")
            continue

        table.add_row(
            name,
            str(retry.max_attempts),
            str(breaker.failure_threshold),
            f"{breaker.reset_timeout:g}",
            f"{breaker.timeout:g}",
        )

    console.print(table)
