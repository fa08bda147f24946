from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import BaseModel, Field

from recovery.enums import RecoveryStrategy

_STATUS_KEYS: tuple[str, ...] = ("status", "statusCode", "status_code")


@dataclass(frozen=True, slots=True)
class ClassifiableError:
    """Узкое представление ошибки внешнего клиента."""

    message: str | None = None
    code: str | None = None
    status: int | None = None


class ErrorHandling(BaseModel):
    """Решение по обработке ошибки БД."""

    recovery_strategy: RecoveryStrategy
    user_message: str
    internal_actions: list[str] = Field(default_factory=list)
    is_retryable: bool
    should_circuit_break: bool


def to_classifiable(error: object) -> ClassifiableError:
    """
    Приводит произвольную ошибку к ClassifiableError.

    Args:
        error: Исключение, словарь или любой объект с атрибутами
            code / status / status_code

    Returns:
        Нормализованное представление ошибки
    """
    if isinstance(error, ClassifiableError):
        return error

    if isinstance(error, Mapping):
        raw_message = error.get("message")
        raw_code = error.get("code")
        raw_status = next(
            (error[key] for key in _STATUS_KEYS if error.get(key)), None
        )
    else:
        raw_message = (
            str(error)
            if isinstance(error, BaseException)
            else getattr(error, "message", None)
        )
        raw_code = getattr(error, "code", None)
        raw_status = next(
            (
                getattr(error, key)
                for key in _STATUS_KEYS
                if getattr(error, key, None)
            ),
            None,
        )

    return ClassifiableError(
        message=raw_message if isinstance(raw_message, str) else None,
        code=raw_code if isinstance(raw_code, str) else None,
        status=_as_status(raw_status),
    )


def _as_status(value: object) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value
