from polyfactory.factories.pydantic_factory import ModelFactory
from polyfactory.pytest_plugin import register_fixture

from recovery.classifier import is_retryable_error
from recovery.retry_politic import CircuitBreakerConfig, RetryPolicy
from recovery.yaml_loader.interfaces import (
    DependencyConfig,
    ResilienceConfig,
    ResourceConfig,
)


@register_fixture(name="factory_retry_policy")
class FactoryRetryPolicy(ModelFactory[RetryPolicy]):
    @classmethod
    def max_attempts(cls) -> int:
        return cls.__random__.randint(1, 5)

    @classmethod
    def base_delay(cls) -> float:
        return 0.0

    @classmethod
    def max_delay(cls) -> float:
        return 0.0

    @classmethod
    def backoff_multiplier(cls) -> float:
        return 2.0

    @classmethod
    def is_retryable(cls) -> object:
        return is_retryable_error


@register_fixture(name="factory_circuit_breaker_config")
class FactoryCircuitBreakerConfig(ModelFactory[CircuitBreakerConfig]):
    @classmethod
    def failure_threshold(cls) -> int:
        return cls.__random__.randint(1, 10)

    @classmethod
    def reset_timeout(cls) -> float:
        return cls.__random__.choice([5.0, 30.0, 60.0])

    @classmethod
    def timeout(cls) -> float:
        return cls.__random__.choice([1.0, 5.0])


class FactoryDependencyConfig(ModelFactory[DependencyConfig]):
    @classmethod
    def url(cls) -> str:
        return cls.__random__.choice(
            ["http://localhost:8080/health", "https://db.internal/ping"]
        )


class FactoryResourceConfig(ModelFactory[ResourceConfig]):
    @classmethod
    def circuit_breaker(cls) -> CircuitBreakerConfig:
        return FactoryCircuitBreakerConfig.build()


@register_fixture(name="factory_resilience_config")
class FactoryResilienceConfig(ModelFactory[ResilienceConfig]):
    @classmethod
    def default_retry(cls) -> RetryPolicy:
        return FactoryRetryPolicy.build()

    @classmethod
    def health_check(cls) -> RetryPolicy:
        return FactoryRetryPolicy.build(max_attempts=2)

    @classmethod
    def resources(cls) -> dict[str, ResourceConfig]:
        return {"firestore": FactoryResourceConfig.build()}

    @classmethod
    def dependencies(cls) -> dict[str, DependencyConfig]:
        return {"firestore": FactoryDependencyConfig.build()}

    @classmethod
    def required_env_vars(cls) -> list[str]:
        return []
