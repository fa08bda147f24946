from collections.abc import Awaitable, Callable

from pydantic import BaseModel, Field

HealthCheck = Callable[[], Awaitable[bool]]


class HealthReport(BaseModel):
    healthy: bool
    issues: list[str] = Field(default_factory=list)
