from recovery_cli.command.config.commands import config_app
from recovery_cli.command.health.commands import health_app

__all__ = [
    "config_app",
    "health_app",
]
