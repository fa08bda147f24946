from recovery.responses.core import (
    create_error_response,
    create_graceful_degradation,
    create_success_response,
)
from recovery.responses.interfaces import (
    ApiResponse,
    ErrorDetails,
    WarningDetails,
)

__all__ = [
    "ApiResponse",
    "ErrorDetails",
    "WarningDetails",
    "create_error_response",
    "create_graceful_degradation",
    "create_success_response",
]
