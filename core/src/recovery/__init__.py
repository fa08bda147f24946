"""Слой восстановления после ошибок удалённой БД."""

from recovery.cache import FallbackCache
from recovery.classifier import handle_database_error, is_retryable_error
from recovery.enums import CircuitBreakerState, RecoveryStrategy
from recovery.error import (
    CircuitBreakerOpenError,
    DatabaseError,
    OperationTimeoutError,
    RecoveryError,
)
from recovery.executor import ResilientExecutor
from recovery.health import HealthReport, validate_dependencies
from recovery.responses import (
    ApiResponse,
    create_error_response,
    create_graceful_degradation,
    create_success_response,
)
from recovery.retry_politic import (
    DEFAULT_RETRY_POLICY,
    CircuitBreaker,
    CircuitBreakerConfig,
    CircuitBreakerRegistry,
    RetryPolicy,
    with_retry,
)

__all__ = [
    "DEFAULT_RETRY_POLICY",
    "ApiResponse",
    "CircuitBreaker",
    "CircuitBreakerConfig",
    "CircuitBreakerOpenError",
    "CircuitBreakerRegistry",
    "CircuitBreakerState",
    "DatabaseError",
    "FallbackCache",
    "HealthReport",
    "OperationTimeoutError",
    "RecoveryError",
    "RecoveryStrategy",
    "ResilientExecutor",
    "RetryPolicy",
    "create_error_response",
    "create_graceful_degradation",
    "create_success_response",
    "handle_database_error",
    "is_retryable_error",
    "validate_dependencies",
    "with_retry",
]
