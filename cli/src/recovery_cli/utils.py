import os
from pathlib import Path

from rich import print as rprint
from typer import Exit


def parse_env_line(line: str) -> tuple[str, str] | None:
    """Разбирает строку `.env`; комментарии и пустые строки пропускаются."""
    stripped = line.strip()
    if not stripped or stripped.startswith("#") or "=" not in stripped:
        return None

    stripped = stripped.removeprefix("export ").lstrip()
    key, value = stripped.split("=", 1)
    return key.strip(), value.strip().strip("\"'")


def load_env_file(env_file: Path) -> None:
    try:
        with open(env_file, encoding="utf-8") as f:
            entries = [entry for entry in map(parse_env_line, f) if entry]
    except OSError as e:
        rprint(f"[red]❌ Error loading env file: {e}[/red]")
        raise Exit(1) from e

    os.environ.update(entries)
    rprint(
        f"[green]✅ Loaded {len(entries)} variables from {env_file}[/green]"
    )
