"""Общие енумы для проекта."""

from enum import StrEnum


class CircuitBreakerState(StrEnum):
    """Состояния Circuit Breaker."""

    CLOSED = "CLOSED"
    OPEN = "OPEN"
    HALF_OPEN = "HALF_OPEN"


class RecoveryStrategy(StrEnum):
    """Стратегии восстановления после ошибки."""

    RETRY = "retry"
    RETRY_WITH_BACKOFF = "retry-with-backoff"
    AUTH_REFRESH = "auth-refresh"
    FALLBACK = "fallback"
    BACKOFF = "backoff"
    MANUAL_INTERVENTION = "manual-intervention"


class LogCategory(StrEnum):
    """Категории структурированного лога."""

    ERROR_RECOVERY = "ErrorRecovery"
    CIRCUIT_BREAKER = "CircuitBreaker"
    DATABASE_ERROR_HANDLER = "DatabaseErrorHandler"
