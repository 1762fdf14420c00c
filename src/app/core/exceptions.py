"""Global exception handlers.

Every error leaving the API goes through here and is serialized to the same
body shape, with the correlation id attached when the request carries one.
"""

from typing import Any

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.background import BackgroundTasks
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.app.core.config import get_settings
from src.app.core.errors import (
    AppError,
    ErrorCode,
    ErrorResponse,
    ErrorService,
    ErrorSeverity,
    map_error_code_to_status,
)
from src.app.core.logging import get_logger
from src.app.core.notifications import (
    NotificationService,
    NotificationType,
    get_notification_service,
)

logger = get_logger(__name__)


def _validation_messages(exc: RequestValidationError) -> list[str]:
    messages = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        msg = err.get("msg", "Invalid value")
        messages.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return messages or ["Validation failed"]


def _status_for(exc: Exception, code: str) -> int:
    if isinstance(exc, StarletteHTTPException):
        return exc.status_code
    if isinstance(exc, AppError):
        return map_error_code_to_status(code)
    return 500


def setup_exception_handlers(
    app: FastAPI,
    error_service: ErrorService | None = None,
    notification_service: NotificationService | None = None,
) -> None:
    """Configure exception handlers for validation, HTTP, application and unexpected errors."""
    errors = error_service or ErrorService(get_settings())

    def _notifications() -> NotificationService:
        return notification_service or get_notification_service()

    async def notify_frontend(body: ErrorResponse) -> None:
        message = ", ".join(body.message) if isinstance(body.message, list) else body.message
        try:
            await _notifications().push(
                NotificationType.ERROR,
                message,
                {"code": body.code, **(body.context or {})},
            )
        except Exception as e:
            logger.error("Failed to dispatch frontend error notification", error=str(e))

    async def report_critical(exc: AppError, context: dict[str, Any]) -> None:
        try:
            await errors.report_error(exc, context)
        except Exception as e:
            logger.error("Failed to report critical error", error=str(e))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        body = ErrorResponse(
            code=ErrorCode.VALIDATION_ERROR.value,
            message=_validation_messages(exc),
            path=request.url.path,
            method=request.method,
            correlation_id=correlation_id.get(),
        )
        errors.log_error(exc, {"path": request.url.path, "method": request.method})
        return JSONResponse(status_code=400, content=body.to_body())

    async def handle_error(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        body = errors.process_error(exc, request)
        status_code = _status_for(exc, body.code)

        if request_id:
            body.correlation_id = request_id

        context = {
            "path": request.url.path,
            "method": request.method,
            "correlation_id": request_id,
        }
        errors.log_error(exc, context)

        background = BackgroundTasks()
        if isinstance(exc, AppError):
            if errors.settings.error_notify_frontend and errors.should_notify(exc):
                background.add_task(notify_frontend, body)
            if exc.severity == ErrorSeverity.CRITICAL:
                background.add_task(report_critical, exc, context)

        headers = getattr(exc, "headers", None) if isinstance(exc, StarletteHTTPException) else None
        return JSONResponse(
            status_code=status_code,
            content=body.to_body(),
            headers=headers,
            background=background,
        )

    app.add_exception_handler(AppError, handle_error)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, handle_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_error)
