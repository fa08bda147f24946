"""Public interface of YAML configuration parser."""

from recovery.yaml_loader.parser import YAMLConfigParser

__all__: tuple[str, ...] = ("YAMLConfigParser",)
