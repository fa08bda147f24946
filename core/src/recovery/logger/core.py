"""Структурированный логгер с вызовом (message, category, detail)."""

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from recovery.constants import REDACTED, SENSITIVE_KEY_MARKERS


class RecoveryLogger(Protocol):
    def debug(
        self, message: str, category: str, detail: Any = None
    ) -> None: ...  # pragma: no cover

    def info(
        self, message: str, category: str, detail: Any = None
    ) -> None: ...  # pragma: no cover

    def warning(
        self, message: str, category: str, detail: Any = None
    ) -> None: ...  # pragma: no cover

    def error(
        self, message: str, category: str, detail: Any = None
    ) -> None: ...  # pragma: no cover


def redact_sensitive_data(detail: Any) -> Any:
    """
    Скрывает чувствительные поля в деталях лога.

    Args:
        detail: Произвольные данные (словарь, список, скаляр)

    Returns:
        Копия данных, где значения секретных ключей заменены на REDACTED
    """
    if isinstance(detail, Mapping):
        return {
            key: REDACTED
            if _is_sensitive_key(key)
            else redact_sensitive_data(value)
            for key, value in detail.items()
        }
    if isinstance(detail, list | tuple):
        return [redact_sensitive_data(item) for item in detail]
    return detail


def _is_sensitive_key(key: object) -> bool:
    lowered = str(key).lower()
    return any(marker in lowered for marker in SENSITIVE_KEY_MARKERS)


class StructuredLogger:
    """Адаптер stdlib logging под вызов (message, category, detail)."""

    def __init__(self, name: str = "recovery") -> None:
        self._logger = logging.getLogger(name)

    def debug(self, message: str, category: str, detail: Any = None) -> None:
        self._log(logging.DEBUG, message, category, detail)

    def info(self, message: str, category: str, detail: Any = None) -> None:
        self._log(logging.INFO, message, category, detail)

    def warning(
        self, message: str, category: str, detail: Any = None
    ) -> None:
        self._log(logging.WARNING, message, category, detail)

    def error(self, message: str, category: str, detail: Any = None) -> None:
        self._log(logging.ERROR, message, category, detail)

    def _log(
        self, level: int, message: str, category: str, detail: Any
    ) -> None:
        if not self._logger.isEnabledFor(level):
            return

        safe_detail = redact_sensitive_data(detail)
        extra = {"category": category, "detail": safe_detail}

        if safe_detail is None:
            self._logger.log(level, "[%s] %s", category, message, extra=extra)
        else:
            self._logger.log(
                level,
                "[%s] %s: %s",
                category,
                message,
                safe_detail,
                extra=extra,
            )


class NullLogger:
    """Логгер, который ничего не пишет."""

    def debug(self, message: str, category: str, detail: Any = None) -> None:
        pass

    def info(self, message: str, category: str, detail: Any = None) -> None:
        pass

    def warning(
        self, message: str, category: str, detail: Any = None
    ) -> None:
        pass

    def error(self, message: str, category: str, detail: Any = None) -> None:
        pass


def resolve_logger(logger: RecoveryLogger | None) -> RecoveryLogger:
    """Возвращает переданный логгер или логгер по умолчанию."""
    return logger if logger is not None else StructuredLogger()
