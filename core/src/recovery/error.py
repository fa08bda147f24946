"""Исключения слоя восстановления."""

from typing import Any


class RecoveryError(Exception):
    """Базовое исключение пакета."""

    code: str = "recovery-error"


class CircuitBreakerOpenError(RecoveryError):
    """Исключение, выбрасываемое когда Circuit Breaker открыт."""

    code = "circuit-open"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Circuit breaker {name} is OPEN")


class OperationTimeoutError(RecoveryError, TimeoutError):
    """Операция не уложилась в таймаут Circuit Breaker."""

    code = "network-timeout"

    def __init__(self, message: str = "Operation timeout") -> None:
        super().__init__(message)


class DatabaseError(RecoveryError):
    """Ошибка удалённой БД с кодом и деталями."""

    def __init__(
        self,
        message: str,
        code: str,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details
