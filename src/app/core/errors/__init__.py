"""Error taxonomy - codes, exception classes, response body, error service."""

from src.app.core.errors.codes import (
    ERROR_MESSAGES,
    ERROR_STATUS_CODES,
    ErrorCode,
    map_error_code_to_status,
)
from src.app.core.errors.exceptions import (
    AppError,
    BusinessError,
    ErrorSeverity,
    ValidationError,
    ValidationErrorDetail,
)
from src.app.core.errors.schemas import ErrorResponse
from src.app.core.errors.service import ErrorService, sanitize_context

__all__ = [
    "ERROR_MESSAGES",
    "ERROR_STATUS_CODES",
    "AppError",
    "BusinessError",
    "ErrorCode",
    "ErrorResponse",
    "ErrorService",
    "ErrorSeverity",
    "ValidationError",
    "ValidationErrorDetail",
    "map_error_code_to_status",
    "sanitize_context",
]
