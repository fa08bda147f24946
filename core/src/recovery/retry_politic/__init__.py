from recovery.retry_politic.circuit_breaker import CircuitBreaker
from recovery.retry_politic.interfaces import (
    DEFAULT_RETRY_POLICY,
    HEALTH_CHECK_POLICY,
    CircuitBreakerConfig,
    CircuitBreakerStats,
    RetryPolicy,
)
from recovery.retry_politic.registry import CircuitBreakerRegistry
from recovery.retry_politic.retry_manager import (
    RetryManager,
    calculate_retry_delay,
    with_retry,
)

__all__ = [
    "DEFAULT_RETRY_POLICY",
    "HEALTH_CHECK_POLICY",
    "CircuitBreaker",
    "CircuitBreakerConfig",
    "CircuitBreakerRegistry",
    "CircuitBreakerStats",
    "RetryManager",
    "RetryPolicy",
    "calculate_retry_delay",
    "with_retry",
]
