"""Type resilience config."""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from recovery.retry_politic.interfaces import (
    HEALTH_CHECK_POLICY,
    CircuitBreakerConfig,
    RetryPolicy,
)


class RetryOverrides(BaseModel):
    """Per-resource retry settings, unset fields inherit the default."""

    max_attempts: int | None = Field(default=None, ge=1)
    base_delay: float | None = Field(default=None, ge=0)
    max_delay: float | None = Field(default=None, ge=0)
    backoff_multiplier: float | None = Field(default=None, gt=0)
    use_jitter: bool | None = None


class ResourceConfig(BaseModel):
    """Protected resource configuration."""

    circuit_breaker: CircuitBreakerConfig | None = Field(
        default_factory=CircuitBreakerConfig
    )
    retry: RetryOverrides = Field(default_factory=RetryOverrides)


class DependencyConfig(BaseModel):
    """Health-checked dependency."""

    url: str = Field(..., min_length=1)
    timeout: float = Field(default=2.0, gt=0)
    method: Literal["GET", "HEAD"] = "GET"

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            msg = f"Dependency url must be http(s): {v}"
            raise ValueError(msg)
        return v


class ResilienceConfig(BaseModel):
    """Resilience configuration schema."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str = ""

    default_retry: RetryPolicy = Field(default_factory=RetryPolicy)
    health_check: RetryPolicy = Field(
        default_factory=lambda: HEALTH_CHECK_POLICY
    )

    resources: dict[str, ResourceConfig] = Field(default_factory=dict)
    dependencies: dict[str, DependencyConfig] = Field(default_factory=dict)

    # Environment variables
    required_env_vars: list[str] = Field(default_factory=list)

    @field_validator("health_check", mode="before")
    @classmethod
    def merge_health_check(cls, v: Any) -> Any:
        """Unset health check fields keep the health probe defaults."""
        if isinstance(v, dict):
            return HEALTH_CHECK_POLICY.with_overrides(**v)
        return v

    def get_effective_retry(self, resource_name: str) -> RetryPolicy:
        """Get the effective retry policy for the resource."""
        resource = self.resources.get(resource_name)
        if not resource:
            return self.default_retry

        return self.default_retry.with_overrides(
            **resource.retry.model_dump()
        )
