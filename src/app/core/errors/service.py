"""Error classification, logging and crash reporting."""

from typing import Any

import sentry_sdk
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from src.app.core.config import ErrorNotificationStrategy, Settings, get_settings
from src.app.core.errors.codes import ErrorCode
from src.app.core.errors.exceptions import AppError, ErrorSeverity
from src.app.core.errors.schemas import ErrorResponse, format_stack
from src.app.core.logging import get_logger

logger = get_logger(__name__)

REDACTED = "***REDACTED***"

# Compared after lowercasing and stripping underscores, so "api_key" and
# "apiKey" both match.
SENSITIVE_KEYS = frozenset(
    {
        "password",
        "token",
        "apikey",
        "secret",
        "creditcard",
        "ssn",
        "connectionstring",
        "authorization",
        "cookie",
    }
)

_SENTRY_LEVELS = {
    ErrorSeverity.LOW: "info",
    ErrorSeverity.MEDIUM: "warning",
    ErrorSeverity.HIGH: "error",
    ErrorSeverity.CRITICAL: "fatal",
}


class ErrorService:
    """Turns exceptions into error responses and decides what to do with them."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def process_error(self, exc: BaseException, request: Request | None = None) -> ErrorResponse:
        include_stack = self.settings.error_include_stack_trace

        if isinstance(exc, AppError):
            return ErrorResponse.from_app_error(exc, request, include_stack)

        if isinstance(exc, StarletteHTTPException):
            message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
            code = ErrorCode.INTERNAL_SERVER_ERROR
        else:
            message = str(exc) or "An unknown error occurred"
            code = ErrorCode.UNKNOWN_ERROR

        return ErrorResponse(
            code=code.value,
            message=message,
            path=request.url.path if request is not None else None,
            method=request.method if request is not None else None,
            stack=format_stack(exc) if include_stack else None,
        )

    def should_notify(self, error: AppError) -> bool:
        strategy = self.settings.error_notification_strategy
        if strategy == ErrorNotificationStrategy.ALL:
            return True
        if strategy == ErrorNotificationStrategy.OPERATIONAL:
            return error.is_operational
        if strategy == ErrorNotificationStrategy.CRITICAL:
            return error.severity == ErrorSeverity.CRITICAL
        return False

    def log_error(self, exc: BaseException, context: dict[str, Any] | None = None) -> None:
        if not self.settings.error_log_errors:
            return

        sanitized = sanitize_context(context) if self.settings.error_capture_context else {}

        if isinstance(exc, AppError):
            log = {
                ErrorSeverity.LOW: logger.info,
                ErrorSeverity.MEDIUM: logger.warning,
            }.get(exc.severity, logger.error)
            log(
                f"[{exc.code.value}] {exc.message}",
                error_code=exc.code.value,
                severity=exc.severity.value,
                is_operational=exc.is_operational,
                context=sanitized,
            )
        elif isinstance(exc, StarletteHTTPException):
            logger.warning(
                "HTTP exception",
                status_code=exc.status_code,
                detail=exc.detail,
                context=sanitized,
            )
        else:
            logger.error(
                str(exc) or "Unknown error",
                exc_info=exc,
                context=sanitized,
            )

    async def report_error(self, exc: BaseException, context: dict[str, Any] | None = None) -> None:
        """Send an exception to Sentry. Never raises."""
        if not self.settings.sentry_enabled:
            return

        try:
            sanitized = sanitize_context(context)
            with sentry_sdk.new_scope() as scope:
                if sanitized:
                    scope.set_context("error_context", sanitized)

                if isinstance(exc, AppError):
                    scope.set_level(_SENTRY_LEVELS[exc.severity])
                    scope.set_tag("error_code", exc.code.value)
                    scope.set_tag("is_operational", str(exc.is_operational).lower())
                    scope.set_tag("severity", exc.severity.value)
                    if exc.context:
                        scope.set_context("app_error_context", sanitize_context(exc.context))

                if context:
                    if context.get("path"):
                        scope.set_tag("request_path", context["path"])
                    if context.get("method"):
                        scope.set_tag("request_method", context["method"])
                    if context.get("correlation_id"):
                        scope.set_tag("correlation_id", context["correlation_id"])

                sentry_sdk.capture_exception(exc)
            logger.debug("Error reported to Sentry", error=str(exc))
        except Exception as e:
            logger.error("Failed to report error to Sentry", error=str(e))


def sanitize_context(context: dict[str, Any] | None) -> dict[str, Any]:
    """Copy ``context`` with sensitive values redacted, recursing into dicts."""
    if not context:
        return {}

    sanitized: dict[str, Any] = {}
    for key, value in context.items():
        if key.replace("_", "").lower() in SENSITIVE_KEYS:
            sanitized[key] = REDACTED
        elif isinstance(value, dict):
            sanitized[key] = sanitize_context(value)
        else:
            sanitized[key] = value
    return sanitized
