from recovery.classifier.core import handle_database_error, is_retryable_error
from recovery.classifier.interfaces import (
    ClassifiableError,
    ErrorHandling,
    to_classifiable,
)

__all__ = [
    "ClassifiableError",
    "ErrorHandling",
    "handle_database_error",
    "is_retryable_error",
    "to_classifiable",
]
