"""Error code table, default messages and HTTP status bindings.

Codes are grouped in numeric bands:

- 1000: general
- 2000: validation
- 3000: authentication / authorization
- 4000: resources
- 5000: business logic
- 6000: external services
"""

from enum import Enum


class ErrorCode(str, Enum):
    # General Errors (1000-1999)
    INTERNAL_SERVER_ERROR = "ERR_1000"
    UNKNOWN_ERROR = "ERR_1001"
    SERVICE_UNAVAILABLE = "ERR_1002"
    TIMEOUT = "ERR_1003"

    # Validation Errors (2000-2999)
    VALIDATION_ERROR = "ERR_2000"
    INVALID_INPUT = "ERR_2001"
    MISSING_REQUIRED_FIELD = "ERR_2002"
    INVALID_FORMAT = "ERR_2003"
    OUT_OF_RANGE = "ERR_2004"

    # Authentication Errors (3000-3999)
    UNAUTHORIZED = "ERR_3000"
    INVALID_TOKEN = "ERR_3001"
    TOKEN_EXPIRED = "ERR_3002"
    INSUFFICIENT_PERMISSIONS = "ERR_3003"
    INVALID_CREDENTIALS = "ERR_3004"

    # Resource Errors (4000-4999)
    NOT_FOUND = "ERR_4000"
    RESOURCE_NOT_FOUND = "ERR_4001"
    ALREADY_EXISTS = "ERR_4002"
    CONFLICT = "ERR_4003"

    # Business Logic Errors (5000-5999)
    BUSINESS_RULE_VIOLATION = "ERR_5000"
    INVALID_STATE = "ERR_5001"
    OPERATION_NOT_ALLOWED = "ERR_5002"
    QUOTA_EXCEEDED = "ERR_5003"

    # External Service Errors (6000-6999)
    EXTERNAL_SERVICE_ERROR = "ERR_6000"
    API_REQUEST_FAILED = "ERR_6001"
    DATABASE_ERROR = "ERR_6002"
    CACHE_ERROR = "ERR_6003"


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INTERNAL_SERVER_ERROR: "An internal server error occurred",
    ErrorCode.UNKNOWN_ERROR: "An unknown error occurred",
    ErrorCode.SERVICE_UNAVAILABLE: "Service temporarily unavailable",
    ErrorCode.TIMEOUT: "Request timeout",
    ErrorCode.VALIDATION_ERROR: "Validation failed",
    ErrorCode.INVALID_INPUT: "Invalid input provided",
    ErrorCode.MISSING_REQUIRED_FIELD: "Required field is missing",
    ErrorCode.INVALID_FORMAT: "Invalid format",
    ErrorCode.OUT_OF_RANGE: "Value is out of acceptable range",
    ErrorCode.UNAUTHORIZED: "Unauthorized access",
    ErrorCode.INVALID_TOKEN: "Invalid authentication token",
    ErrorCode.TOKEN_EXPIRED: "Authentication token has expired",
    ErrorCode.INSUFFICIENT_PERMISSIONS: "Insufficient permissions",
    ErrorCode.INVALID_CREDENTIALS: "Invalid credentials",
    ErrorCode.NOT_FOUND: "Resource not found",
    ErrorCode.RESOURCE_NOT_FOUND: "Requested resource not found",
    ErrorCode.ALREADY_EXISTS: "Resource already exists",
    ErrorCode.CONFLICT: "Resource conflict",
    ErrorCode.BUSINESS_RULE_VIOLATION: "Business rule violation",
    ErrorCode.INVALID_STATE: "Invalid state for operation",
    ErrorCode.OPERATION_NOT_ALLOWED: "Operation not allowed",
    ErrorCode.QUOTA_EXCEEDED: "Quota exceeded",
    ErrorCode.EXTERNAL_SERVICE_ERROR: "External service error",
    ErrorCode.API_REQUEST_FAILED: "API request failed",
    ErrorCode.DATABASE_ERROR: "Database error",
    ErrorCode.CACHE_ERROR: "Cache error",
}

ERROR_STATUS_CODES: dict[ErrorCode, int] = {
    # General
    ErrorCode.INTERNAL_SERVER_ERROR: 500,
    ErrorCode.UNKNOWN_ERROR: 500,
    ErrorCode.SERVICE_UNAVAILABLE: 503,
    ErrorCode.TIMEOUT: 504,
    # Validation
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.INVALID_INPUT: 400,
    ErrorCode.MISSING_REQUIRED_FIELD: 400,
    ErrorCode.INVALID_FORMAT: 400,
    ErrorCode.OUT_OF_RANGE: 400,
    # Auth
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.INVALID_TOKEN: 401,
    ErrorCode.TOKEN_EXPIRED: 401,
    ErrorCode.INSUFFICIENT_PERMISSIONS: 403,
    ErrorCode.INVALID_CREDENTIALS: 401,
    # Resource
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.RESOURCE_NOT_FOUND: 404,
    ErrorCode.ALREADY_EXISTS: 409,
    ErrorCode.CONFLICT: 409,
    # Business logic
    ErrorCode.BUSINESS_RULE_VIOLATION: 422,
    ErrorCode.INVALID_STATE: 422,
    ErrorCode.OPERATION_NOT_ALLOWED: 403,
    ErrorCode.QUOTA_EXCEEDED: 429,
    # External services
    ErrorCode.EXTERNAL_SERVICE_ERROR: 502,
    ErrorCode.API_REQUEST_FAILED: 502,
    ErrorCode.DATABASE_ERROR: 500,
    ErrorCode.CACHE_ERROR: 500,
}


def map_error_code_to_status(code: ErrorCode | str) -> int:
    """Map an error code to its HTTP status. Unknown codes map to 500."""
    try:
        return ERROR_STATUS_CODES[ErrorCode(code)]
    except (ValueError, KeyError):
        return 500
