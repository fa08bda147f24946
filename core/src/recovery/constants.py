"""Константы слоя восстановления после ошибок."""

# Коды удалённой БД, которые считаются временными
RETRYABLE_REMOTE_CODES: frozenset[str] = frozenset(
    {
        "unavailable",
        "deadline-exceeded",
        "resource-exhausted",
        "internal",
        "cancelled",
        "unknown",
    }
)

NETWORK_ERROR_MARKERS: tuple[str, ...] = (
    "network",
    "timeout",
    "connection",
    "fetch",
)

RETRYABLE_STATUS_CODES: frozenset[int] = frozenset({408, 429})
SERVER_ERROR_STATUS: int = 500

CIRCUIT_BREAK_CODES: frozenset[str] = frozenset(
    {"quota-exceeded", "internal", "unavailable"}
)

HALF_OPEN_SUCCESS_THRESHOLD: int = 3

UNKNOWN_ERROR_CODE: str = "UNKNOWN_ERROR"
UNKNOWN_ERROR_MESSAGE: str = "Unknown error occurred"
GRACEFUL_DEGRADATION_CODE: str = "GRACEFUL_DEGRADATION"

HEALTH_CHECK_MAX_ATTEMPTS: int = 2
HEALTH_CHECK_BASE_DELAY: float = 0.5

REDACTED: str = "[REDACTED]"
SENSITIVE_KEY_MARKERS: tuple[str, ...] = (
    "password",
    "token",
    "secret",
    "api_key",
    "authorization",
    "credential",
)
