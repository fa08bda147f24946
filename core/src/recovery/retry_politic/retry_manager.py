from asyncio import sleep
from collections.abc import Awaitable, Callable
from secrets import SystemRandom
from typing import Any, TypeVar

from recovery.enums import LogCategory
from recovery.logger import RecoveryLogger, resolve_logger
from recovery.retry_politic.interfaces import DEFAULT_RETRY_POLICY, RetryPolicy

T = TypeVar("T")

_random = SystemRandom()


def calculate_retry_delay(attempt: int, policy: RetryPolicy) -> float:
    """
    Вычисляет задержку перед следующей попыткой.

    Args:
        attempt: Номер попытки, начиная с 0
        policy: Политика повторных попыток

    Returns:
        Задержка в секундах; с jitter не меньше половины расчётной
    """
    delay = min(
        policy.base_delay * policy.backoff_multiplier**attempt,
        policy.max_delay,
    )

    if policy.use_jitter:
        delay *= 0.5 + _random.random() * 0.5

    return delay


class RetryManager:
    """Управление повторными попытками с экспоненциальной задержкой."""

    def __init__(
        self,
        policy: RetryPolicy = DEFAULT_RETRY_POLICY,
        logger: RecoveryLogger | None = None,
    ) -> None:
        self.policy = policy
        self._logger = resolve_logger(logger)

    def calculate_delay(self, attempt: int) -> float:
        return calculate_retry_delay(attempt, self.policy)

    async def execute_with_retry(
        self, operation: Callable[[], Awaitable[T]]
    ) -> T:
        """Выполняет операцию с повторными попытками."""
        max_attempts = self.policy.max_attempts

        for attempt in range(max_attempts):
            try:
                result = await operation()
            except Exception as e:
                if attempt == max_attempts - 1:
                    self._logger.error(
                        f"Operation failed after {max_attempts} attempts",
                        LogCategory.ERROR_RECOVERY,
                        repr(e),
                    )
                    raise

                if not self.policy.is_retryable(e):
                    self._logger.warning(
                        "Non-retryable error encountered, giving up",
                        LogCategory.ERROR_RECOVERY,
                        repr(e),
                    )
                    raise

                delay = self.calculate_delay(attempt)
                self._logger.warning(
                    f"Attempt {attempt + 1} failed, "
                    f"retrying in {delay:.3f}s",
                    LogCategory.ERROR_RECOVERY,
                    repr(e),
                )
                await sleep(delay)
            else:
                if attempt > 0:
                    self._logger.info(
                        f"Operation succeeded after {attempt + 1} attempts",
                        LogCategory.ERROR_RECOVERY,
                    )
                return result

        # max_attempts >= 1, цикл всегда завершается return или raise
        msg = "Unknown error in retry manager"
        raise RuntimeError(msg)


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    logger: RecoveryLogger | None = None,
    policy: RetryPolicy = DEFAULT_RETRY_POLICY,
    **overrides: Any,
) -> T:
    """
    Выполняет операцию с повторными попытками.

    Args:
        operation: Асинхронная операция без аргументов
        logger: Логгер (по умолчанию StructuredLogger)
        policy: Базовая политика, по умолчанию DEFAULT_RETRY_POLICY
        **overrides: Поля RetryPolicy, переопределяющие базовую политику

    Returns:
        Результат первой успешной попытки
    """
    manager = RetryManager(policy.with_overrides(**overrides), logger)
    return await manager.execute_with_retry(operation)
