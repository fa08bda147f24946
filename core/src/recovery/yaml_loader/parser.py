"""Загрузка конфигурации устойчивости из YAML."""

import os
import re
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from recovery.retry_politic import RetryPolicy
from recovery.yaml_loader.interfaces import ResilienceConfig

ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def split_env_reference(reference: str) -> tuple[str, str | None]:
    """Разбирает `VAR` или `VAR:default` на имя и значение по умолчанию."""
    name, separator, default = reference.partition(":")
    return name, default if separator else None


def format_validation_error(error: ValidationError) -> str:
    """Склеивает ошибки pydantic в строку вида `resources.db.retry: ...`."""
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        problems.append(f"{location}: {item['msg']}")
    return "; ".join(problems)


def _iter_strings(obj: Any) -> Iterator[str]:
    if isinstance(obj, dict):
        for value in obj.values():
            yield from _iter_strings(value)
    elif isinstance(obj, list):
        for item in obj:
            yield from _iter_strings(item)
    elif isinstance(obj, str):
        yield obj


class YAMLConfigParser:
    @classmethod
    def parse_file(cls, config_path: Path) -> ResilienceConfig:
        raw_config = cls._load_yaml(config_path)

        try:
            return cls.parse_dict(raw_config)
        except ValidationError as ve:
            msg = (
                f"Invalid resilience config {config_path}: "
                f"{format_validation_error(ve)}"
            )
            raise ValueError(msg) from ve
        except (TypeError, ValueError) as ex:
            msg = f"Error parsing config {config_path}: {ex}"
            raise ValueError(msg) from ex

    @classmethod
    def parse_dict(cls, raw_config: Any) -> ResilienceConfig:
        if not isinstance(raw_config, dict):
            msg = "Config root must be a mapping"
            raise TypeError(msg)

        config = ResilienceConfig.model_validate(
            cls._substitute_env_vars(raw_config)
        )

        cls._validate_env_vars(config)
        cls._validate_retry_policies(config)

        return config

    @classmethod
    def get_env_vars_from_config(cls, config_path: Path) -> set[str]:
        """Имена переменных окружения, на которые ссылаются значения."""
        raw_config = cls._load_yaml(config_path)

        return {
            split_env_reference(match.group(1))[0]
            for text in _iter_strings(raw_config)
            for match in ENV_VAR_PATTERN.finditer(text)
        }

    @staticmethod
    def _load_yaml(config_path: Path) -> Any:
        if not config_path.exists():
            msg = f"Config file not found: {config_path}"
            raise FileNotFoundError(msg)

        try:
            with open(config_path, encoding="utf-8") as file:
                return yaml.safe_load(file)
        except yaml.YAMLError as ye:
            msg = f"Invalid YAML syntax in {config_path}: {ye}"
            raise ValueError(msg) from ye

    @classmethod
    def _substitute_env_vars(cls, obj: Any) -> Any:
        if isinstance(obj, dict):
            return {k: cls._substitute_env_vars(v) for k, v in obj.items()}
        if isinstance(obj, list):
            return [cls._substitute_env_vars(item) for item in obj]
        if isinstance(obj, str):
            return ENV_VAR_PATTERN.sub(cls._resolve_env_reference, obj)
        return obj

    @staticmethod
    def _resolve_env_reference(match: re.Match[str]) -> str:
        name, default = split_env_reference(match.group(1))
        value = os.environ.get(name, default)
        if value is None:
            msg = f"Required environment variable not set: {name}"
            raise ValueError(msg)
        return value

    @staticmethod
    def _validate_env_vars(config: ResilienceConfig) -> None:
        missing_vars = [
            var_name
            for var_name in config.required_env_vars
            if var_name not in os.environ
        ]

        if missing_vars:
            msg = f"Missing required environment variables: {missing_vars}"
            raise ValueError(msg)

    @staticmethod
    def _validate_retry_policies(config: ResilienceConfig) -> None:
        """Проверяет, что max_delay не меньше base_delay в каждой политике.

        Для ресурсов проверяется итоговая политика после наложения
        переопределений на default_retry.
        """
        policies: dict[str, RetryPolicy] = {
            "default_retry": config.default_retry,
            "health_check": config.health_check,
        }
        for resource_name in config.resources:
            policies[f"resource {resource_name}"] = (
                config.get_effective_retry(resource_name)
            )

        problems = [
            f"{where}: max_delay {policy.max_delay:g}s is below "
            f"base_delay {policy.base_delay:g}s"
            for where, policy in policies.items()
            if policy.max_delay < policy.base_delay
        ]

        if problems:
            msg = f"Inconsistent retry policies: {'; '.join(problems)}"
            raise ValueError(msg)
