from recovery.logger.core import (
    NullLogger,
    RecoveryLogger,
    StructuredLogger,
    redact_sensitive_data,
    resolve_logger,
)

__all__ = [
    "NullLogger",
    "RecoveryLogger",
    "StructuredLogger",
    "redact_sensitive_data",
    "resolve_logger",
]
