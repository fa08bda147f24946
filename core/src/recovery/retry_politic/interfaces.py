from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from recovery.classifier import is_retryable_error
from recovery.constants import (
    HEALTH_CHECK_BASE_DELAY,
    HEALTH_CHECK_MAX_ATTEMPTS,
)
from recovery.enums import CircuitBreakerState


class RetryPolicy(BaseModel):
    """Параметры повторных попыток. Все задержки в секундах."""

    model_config = ConfigDict(frozen=True)

    max_attempts: int = Field(3, ge=1)
    base_delay: float = Field(1.0, ge=0)
    max_delay: float = Field(10.0, ge=0)
    backoff_multiplier: float = Field(2.0, gt=0)
    use_jitter: bool = Field(True)
    is_retryable: Callable[[object], bool] = Field(
        default=is_retryable_error, exclude=True
    )

    def with_overrides(self, **overrides: Any) -> "RetryPolicy":
        """Возвращает копию политики с частично переопределёнными полями."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        if not updates:
            return self

        return type(self).model_validate({**dict(self), **updates})


DEFAULT_RETRY_POLICY = RetryPolicy()
HEALTH_CHECK_POLICY = DEFAULT_RETRY_POLICY.with_overrides(
    max_attempts=HEALTH_CHECK_MAX_ATTEMPTS,
    base_delay=HEALTH_CHECK_BASE_DELAY,
)


class CircuitBreakerConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    failure_threshold: int = Field(5, ge=1)
    reset_timeout: float = Field(30.0, gt=0)
    timeout: float = Field(5.0, gt=0)


class CircuitBreakerStats(BaseModel):
    state: CircuitBreakerState
    failure_count: int
    success_count: int
    last_failure_time: float
