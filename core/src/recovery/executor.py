"""Обёртка вызовов удалённой БД: повторы, Circuit Breaker, ответы."""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from recovery.cache import FallbackCache
from recovery.classifier import handle_database_error
from recovery.logger import RecoveryLogger, resolve_logger
from recovery.responses import (
    ApiResponse,
    create_error_response,
    create_graceful_degradation,
    create_success_response,
)
from recovery.retry_politic import (
    DEFAULT_RETRY_POLICY,
    CircuitBreaker,
    RetryPolicy,
    with_retry,
)

T = TypeVar("T")

_MISSING = object()


class ResilientExecutor:
    """
    Выполняет операции над одним ресурсом.

    Каждая попытка проходит через Circuit Breaker (если он задан), а сами
    попытки повторяются по RetryPolicy. Открытая цепь не считается
    временной ошибкой, поэтому повторы сразу прекращаются.
    """

    def __init__(
        self,
        name: str,
        breaker: CircuitBreaker | None = None,
        policy: RetryPolicy = DEFAULT_RETRY_POLICY,
        cache: FallbackCache | None = None,
        logger: RecoveryLogger | None = None,
    ) -> None:
        self.name = name
        self.breaker = breaker
        self.policy = policy
        self.cache = cache
        self._logger = resolve_logger(logger)

    async def execute(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Выполняет операцию, пробрасывая итоговую ошибку."""
        breaker = self.breaker
        if breaker is None:
            return await with_retry(operation, self._logger, self.policy)

        async def guarded() -> T:
            return await breaker.execute(operation)

        return await with_retry(guarded, self._logger, self.policy)

    async def call(
        self,
        operation: Callable[[], Awaitable[T]],
        context: str,
        cache_key: str | None = None,
    ) -> ApiResponse[T]:
        """
        Выполняет операцию и возвращает ApiResponse вместо исключения.

        Args:
            operation: Асинхронная операция без аргументов
            context: Имя операции для лога и ответа
            cache_key: Ключ для сохранения результата и отката на него

        Returns:
            Успешный ответ, ответ на резервных данных или ответ с ошибкой
        """
        try:
            result = await self.execute(operation)
        except Exception as e:
            handling = handle_database_error(e, context, self._logger)

            fallback = self._cached(cache_key)
            if fallback is not _MISSING:
                return create_graceful_degradation(
                    fallback, handling.user_message, self._logger
                )

            return create_error_response(
                e, context, handling.internal_actions, self._logger
            )

        if self.cache is not None and cache_key is not None:
            self.cache.set(cache_key, result)

        return create_success_response(result)

    def _cached(self, cache_key: str | None) -> object:
        if self.cache is None or cache_key is None:
            return _MISSING
        return self.cache.get(cache_key, _MISSING)
