import asyncio
from collections.abc import Awaitable, Callable
from time import time
from typing import TypeVar

from recovery.constants import HALF_OPEN_SUCCESS_THRESHOLD
from recovery.enums import CircuitBreakerState, LogCategory
from recovery.error import CircuitBreakerOpenError, OperationTimeoutError
from recovery.logger import RecoveryLogger, resolve_logger
from recovery.retry_politic.interfaces import (
    CircuitBreakerConfig,
    CircuitBreakerStats,
)

T = TypeVar("T")


class CircuitBreaker:
    """
    Circuit Breaker для предотвращения каскадных сбоев.

    CLOSED пропускает вызовы, после failure_threshold ошибок подряд
    переходит в OPEN. OPEN отклоняет вызовы до истечения reset_timeout,
    затем следующий вызов переводит его в HALF_OPEN. В HALF_OPEN три
    успеха подряд закрывают цепь, любая ошибка снова открывает её.
    """

    def __init__(
        self,
        name: str,
        config: CircuitBreakerConfig | None = None,
        logger: RecoveryLogger | None = None,
    ) -> None:
        self.name = name
        self.config = config or CircuitBreakerConfig()
        self._logger = resolve_logger(logger)
        self._state = CircuitBreakerState.CLOSED
        self._failure_count = 0
        self._success_count = 0
        self._last_failure_time = 0.0
        self._abandoned: set[asyncio.Future[object]] = set()

    async def execute(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Выполняет операцию через Circuit Breaker."""
        if self._state == CircuitBreakerState.OPEN:
            if time() - self._last_failure_time < self.config.reset_timeout:
                self._logger.warning(
                    f"Circuit breaker {self.name} blocked request",
                    LogCategory.CIRCUIT_BREAKER,
                )
                raise CircuitBreakerOpenError(self.name)

            self._state = CircuitBreakerState.HALF_OPEN
            self._success_count = 0
            self._logger.info(
                f"Circuit breaker {self.name} transitioning to HALF_OPEN",
                LogCategory.CIRCUIT_BREAKER,
            )

        try:
            result = await self._run_with_timeout(operation)
        except Exception:
            self._on_failure()
            raise

        self._on_success()
        return result

    async def _run_with_timeout(
        self, operation: Callable[[], Awaitable[T]]
    ) -> T:
        task = asyncio.ensure_future(operation())
        try:
            done, _ = await asyncio.wait({task}, timeout=self.config.timeout)
        except asyncio.CancelledError:
            task.cancel()
            raise

        if task not in done:
            # операция продолжает работу, её результат будет отброшен
            self._abandoned.add(task)
            task.add_done_callback(self._discard_abandoned)
            raise OperationTimeoutError

        return task.result()

    def _discard_abandoned(self, task: asyncio.Future[object]) -> None:
        self._abandoned.discard(task)
        if task.cancelled():
            return

        error = task.exception()
        self._logger.debug(
            f"Circuit breaker {self.name} discarded late "
            f"{'failure' if error else 'result'}",
            LogCategory.CIRCUIT_BREAKER,
            repr(error) if error else None,
        )

    def _on_success(self) -> None:
        """Обработка успешного выполнения."""
        if self._state == CircuitBreakerState.HALF_OPEN:
            self._success_count += 1
            if self._success_count >= HALF_OPEN_SUCCESS_THRESHOLD:
                self._state = CircuitBreakerState.CLOSED
                self._failure_count = 0
                self._logger.info(
                    f"Circuit breaker {self.name} transitioned to CLOSED",
                    LogCategory.CIRCUIT_BREAKER,
                )
        elif self._state == CircuitBreakerState.CLOSED:
            self._failure_count = 0

    def _on_failure(self) -> None:
        """Обработка неудачного выполнения."""
        self._failure_count += 1
        self._last_failure_time = time()

        # failure_count при возврате в OPEN не сбрасывается
        if self._state == CircuitBreakerState.HALF_OPEN:
            self._state = CircuitBreakerState.OPEN
            self._logger.warning(
                f"Circuit breaker {self.name} "
                f"transitioned to OPEN from HALF_OPEN",
                LogCategory.CIRCUIT_BREAKER,
            )
        elif (
            self._state == CircuitBreakerState.CLOSED
            and self._failure_count >= self.config.failure_threshold
        ):
            self._state = CircuitBreakerState.OPEN
            self._logger.warning(
                f"Circuit breaker {self.name} transitioned to OPEN",
                LogCategory.CIRCUIT_BREAKER,
                {
                    "failure_count": self._failure_count,
                    "threshold": self.config.failure_threshold,
                },
            )

    def get_state(self) -> CircuitBreakerState:
        return self._state

    def get_stats(self) -> CircuitBreakerStats:
        return CircuitBreakerStats(
            state=self._state,
            failure_count=self._failure_count,
            success_count=self._success_count,
            last_failure_time=self._last_failure_time,
        )

    def reset(self) -> None:
        """Ручной сброс в CLOSED."""
        self._state = CircuitBreakerState.CLOSED
        self._failure_count = 0
        self._success_count = 0
        self._last_failure_time = 0.0
        self._logger.info(
            f"Circuit breaker {self.name} manually reset",
            LogCategory.CIRCUIT_BREAKER,
        )
