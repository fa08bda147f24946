"""Классификация ошибок удалённой БД."""

from typing import NamedTuple

import aiohttp

from recovery.classifier.interfaces import ErrorHandling, to_classifiable
from recovery.constants import (
    CIRCUIT_BREAK_CODES,
    NETWORK_ERROR_MARKERS,
    RETRYABLE_REMOTE_CODES,
    RETRYABLE_STATUS_CODES,
    SERVER_ERROR_STATUS,
)
from recovery.enums import LogCategory, RecoveryStrategy
from recovery.logger import RecoveryLogger, resolve_logger


# Исключения транспорта, которые повторяются независимо от текста
NETWORK_EXCEPTION_TYPES: tuple[type[BaseException], ...] = (
    TimeoutError,
    ConnectionError,
    aiohttp.ClientConnectionError,
)


class _Reaction(NamedTuple):
    strategy: RecoveryStrategy
    user_message: str
    internal_actions: list[str]


_CONNECTION_TIMEOUT = _Reaction(
    RecoveryStrategy.RETRY_WITH_BACKOFF,
    "Connection timeout. Please check your internet and try again.",
    ["Retry with exponential backoff", "Check network connectivity"],
)

KNOWN_ERROR_REACTIONS: dict[str, _Reaction] = {
    "permission-denied": _Reaction(
        RecoveryStrategy.AUTH_REFRESH,
        "You don't have permission to perform this action.",
        ["Check user permissions", "Refresh authentication token"],
    ),
    "not-found": _Reaction(
        RecoveryStrategy.FALLBACK,
        "The requested resource was not found.",
        ["Verify resource exists", "Check for data consistency issues"],
    ),
    "quota-exceeded": _Reaction(
        RecoveryStrategy.BACKOFF,
        "Service is temporarily unavailable. Please try again later.",
        ["Implement exponential backoff", "Monitor quota usage"],
    ),
    "network-timeout": _CONNECTION_TIMEOUT,
    "unavailable": _CONNECTION_TIMEOUT,
}

_TEMPORARY_ERROR = _Reaction(
    RecoveryStrategy.RETRY,
    "A temporary error occurred. Please try again.",
    ["Retry operation", "Log error for monitoring"],
)

_UNEXPECTED_ERROR = _Reaction(
    RecoveryStrategy.MANUAL_INTERVENTION,
    "An unexpected error occurred. "
    "Please contact support if this persists.",
    ["Manual investigation required", "Contact support team"],
)


def is_retryable_error(error: object) -> bool:
    """
    Определяет, имеет ли смысл повторить операцию после ошибки.

    Args:
        error: Исключение или объект ошибки внешнего клиента

    Returns:
        True для сетевых ошибок, временных кодов БД и статусов 5xx/429/408
    """
    if error is None:
        return False

    if isinstance(error, NETWORK_EXCEPTION_TYPES):
        return True

    classified = to_classifiable(error)

    if classified.message:
        message = classified.message.lower()
        if any(marker in message for marker in NETWORK_ERROR_MARKERS):
            return True

    if classified.code in RETRYABLE_REMOTE_CODES:
        return True

    if classified.status is not None:
        return (
            classified.status >= SERVER_ERROR_STATUS
            or classified.status in RETRYABLE_STATUS_CODES
        )

    return False


def handle_database_error(
    error: object,
    operation: str,
    logger: RecoveryLogger | None = None,
) -> ErrorHandling:
    """
    Подбирает стратегию восстановления для ошибки БД.

    Args:
        error: Ошибка, возникшая при выполнении операции
        operation: Имя операции для лога
        logger: Логгер (по умолчанию StructuredLogger)

    Returns:
        Стратегия, сообщение пользователю и внутренние действия
    """
    is_retryable = is_retryable_error(error)
    error_code = to_classifiable(error).code

    reaction = KNOWN_ERROR_REACTIONS.get(error_code or "")
    if reaction is None:
        reaction = _TEMPORARY_ERROR if is_retryable else _UNEXPECTED_ERROR

    resolve_logger(logger).error(
        f"Database error in {operation}",
        LogCategory.DATABASE_ERROR_HANDLER,
        {
            "error": repr(error),
            "recovery_strategy": reaction.strategy,
            "is_retryable": is_retryable,
            "error_code": error_code,
        },
    )

    return ErrorHandling(
        recovery_strategy=reaction.strategy,
        user_message=reaction.user_message,
        internal_actions=list(reaction.internal_actions),
        is_retryable=is_retryable,
        should_circuit_break=error_code in CIRCUIT_BREAK_CODES,
    )
