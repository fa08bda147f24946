"""Interfaces yaml configure."""

from recovery.yaml_loader.interfaces.resilience import (
    DependencyConfig,
    ResilienceConfig,
    ResourceConfig,
    RetryOverrides,
)

__all__ = [
    "DependencyConfig",
    "ResilienceConfig",
    "ResourceConfig",
    "RetryOverrides",
]
