from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


def utc_now() -> datetime:
    return datetime.now(UTC)


class ErrorDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    context: str
    recovery_actions: list[str] | None = None
    timestamp: str


class WarningDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    message: str


class ApiResponse(BaseModel, Generic[T]):
    """Единый конверт ответа для вызывающего кода."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: bool
    data: T | None = None
    error: ErrorDetails | None = None
    warning: WarningDetails | None = None
    timestamp: datetime = Field(default_factory=utc_now)

    @property
    def is_degraded(self) -> bool:
        return self.success and self.warning is not None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
