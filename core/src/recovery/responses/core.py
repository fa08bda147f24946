"""Построение ответов ApiResponse."""

from typing import TypeVar

from recovery.classifier import to_classifiable
from recovery.constants import (
    GRACEFUL_DEGRADATION_CODE,
    UNKNOWN_ERROR_CODE,
    UNKNOWN_ERROR_MESSAGE,
)
from recovery.enums import LogCategory
from recovery.logger import RecoveryLogger, resolve_logger
from recovery.responses.interfaces import (
    ApiResponse,
    ErrorDetails,
    WarningDetails,
    utc_now,
)

T = TypeVar("T")


def create_success_response(data: T) -> ApiResponse[T]:
    return ApiResponse(success=True, data=data)


def create_error_response(
    error: object,
    context: str,
    recovery_actions: list[str] | None = None,
    logger: RecoveryLogger | None = None,
) -> ApiResponse[T]:
    """
    Создает ответ с описанием ошибки.

    Args:
        error: Исходная ошибка
        context: Контекст операции (например, имя метода сервиса)
        recovery_actions: Предлагаемые действия по восстановлению
        logger: Логгер (по умолчанию StructuredLogger)

    Returns:
        ApiResponse с success=False и заполненным error
    """
    classified = to_classifiable(error)
    message = classified.message or UNKNOWN_ERROR_MESSAGE
    code = classified.code or UNKNOWN_ERROR_CODE

    resolve_logger(logger).error(
        f"Error in {context}", LogCategory.ERROR_RECOVERY, repr(error)
    )

    timestamp = utc_now()
    return ApiResponse(
        success=False,
        error=ErrorDetails(
            code=code,
            message=message,
            context=context,
            recovery_actions=recovery_actions,
            timestamp=timestamp.isoformat(),
        ),
        timestamp=timestamp,
    )


def create_graceful_degradation(
    fallback_data: T,
    reason: str,
    logger: RecoveryLogger | None = None,
) -> ApiResponse[T]:
    """
    Создает успешный ответ на резервных данных.

    Args:
        fallback_data: Кэшированные или дефолтные данные
        reason: Причина деградации

    Returns:
        ApiResponse с success=True и предупреждением GRACEFUL_DEGRADATION
    """
    resolve_logger(logger).warning(
        f"Graceful degradation activated: {reason}",
        LogCategory.ERROR_RECOVERY,
    )

    return ApiResponse(
        success=True,
        data=fallback_data,
        warning=WarningDetails(code=GRACEFUL_DEGRADATION_CODE, message=reason),
    )
