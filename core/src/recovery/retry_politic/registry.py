from typing import TYPE_CHECKING

from recovery.logger import RecoveryLogger
from recovery.retry_politic.circuit_breaker import CircuitBreaker
from recovery.retry_politic.interfaces import (
    CircuitBreakerConfig,
    CircuitBreakerStats,
)

if TYPE_CHECKING:
    from recovery.yaml_loader.interfaces import ResilienceConfig


class CircuitBreakerRegistry:
    """Реестр Circuit Breaker'ов, по одному на защищаемый ресурс."""

    def __init__(self, logger: RecoveryLogger | None = None) -> None:
        self._breakers: dict[str, CircuitBreaker] = {}
        self._logger = logger

    @classmethod
    def from_config(
        cls,
        config: "ResilienceConfig",
        logger: RecoveryLogger | None = None,
    ) -> "CircuitBreakerRegistry":
        """
        Создаёт реестр по конфигурации ресурсов.

        Args:
            config: Конфигурация устойчивости
            logger: Логгер для всех Circuit Breaker'ов

        Returns:
            Реестр с брейкерами для ресурсов, где они включены
        """
        registry = cls(logger)
        for resource_name, resource in config.resources.items():
            if resource.circuit_breaker is not None:
                registry.get_or_create(resource_name, resource.circuit_breaker)
        return registry

    def register(self, breaker: CircuitBreaker) -> CircuitBreaker:
        if breaker.name in self._breakers:
            msg = f"Circuit breaker already registered: {breaker.name}"
            raise ValueError(msg)

        self._breakers[breaker.name] = breaker
        return breaker

    def get_or_create(
        self, name: str, config: CircuitBreakerConfig | None = None
    ) -> CircuitBreaker:
        breaker = self._breakers.get(name)
        if breaker is None:
            breaker = self.register(CircuitBreaker(name, config, self._logger))
        return breaker

    def get(self, name: str) -> CircuitBreaker | None:
        return self._breakers.get(name)

    def names(self) -> list[str]:
        return list(self._breakers)

    def get_stats(self) -> dict[str, CircuitBreakerStats]:
        return {
            name: breaker.get_stats()
            for name, breaker in self._breakers.items()
        }

    def reset_all(self) -> None:
        for breaker in self._breakers.values():
            breaker.reset()

    def __contains__(self, name: object) -> bool:
        return name in self._breakers

    def __len__(self) -> int:
        return len(self._breakers)
