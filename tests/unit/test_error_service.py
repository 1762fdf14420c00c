"""Tests for ErrorService and context sanitizing."""

from unittest.mock import MagicMock, patch

import pytest
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.app.core.config import ErrorNotificationStrategy, get_settings
from src.app.core.errors import (
    AppError,
    ErrorCode,
    ErrorService,
    ErrorSeverity,
    sanitize_context,
)

pytestmark = pytest.mark.unit


def make_service(**overrides) -> ErrorService:
    return ErrorService(get_settings().model_copy(update=overrides))


def make_request(path: str = "/api/v1/projects", method: str = "GET") -> MagicMock:
    request = MagicMock()
    request.url.path = path
    request.method = method
    return request


class TestProcessError:
    def test_app_error(self):
        error = AppError(ErrorCode.RESOURCE_NOT_FOUND, "Project not found", {"id": "1"})

        body = make_service().process_error(error, make_request())

        assert body.code == "ERR_4001"
        assert body.message == "Project not found"
        assert body.context == {"id": "1"}
        assert body.path == "/api/v1/projects"
        assert body.method == "GET"
        assert body.stack is None

    def test_http_exception_keeps_detail(self):
        body = make_service().process_error(StarletteHTTPException(404, "Not Found"))

        assert body.code == ErrorCode.INTERNAL_SERVER_ERROR.value
        assert body.message == "Not Found"

    def test_unexpected_exception(self):
        body = make_service().process_error(RuntimeError("boom"))

        assert body.code == ErrorCode.UNKNOWN_ERROR.value
        assert body.message == "boom"

    def test_unexpected_exception_without_message(self):
        body = make_service().process_error(RuntimeError())

        assert body.message == "An unknown error occurred"

    def test_stack_included_when_enabled(self):
        try:
            raise AppError(ErrorCode.INVALID_INPUT)
        except AppError as e:
            body = make_service(error_include_stack_trace=True).process_error(e)

        assert body.stack is not None
        assert "AppError" in body.stack

    def test_body_uses_camel_case_and_omits_none(self):
        body = make_service().process_error(AppError(ErrorCode.INVALID_INPUT))
        body.correlation_id = "abc"

        data = body.to_body()

        assert data["correlationId"] == "abc"
        assert data["status"] == "error"
        assert "stack" not in data
        assert "context" not in data


class TestShouldNotify:
    @pytest.mark.parametrize(
        ("strategy", "expected"),
        [
            (ErrorNotificationStrategy.ALL, True),
            (ErrorNotificationStrategy.OPERATIONAL, True),
            (ErrorNotificationStrategy.CRITICAL, False),
            (ErrorNotificationStrategy.NONE, False),
        ],
    )
    def test_operational_error(self, strategy, expected):
        service = make_service(error_notification_strategy=strategy)

        assert service.should_notify(AppError(ErrorCode.INVALID_INPUT)) is expected

    def test_operational_strategy_skips_critical(self):
        service = make_service(error_notification_strategy=ErrorNotificationStrategy.OPERATIONAL)

        assert service.should_notify(AppError.critical(ErrorCode.DATABASE_ERROR)) is False

    def test_critical_strategy_notifies_critical(self):
        service = make_service(error_notification_strategy=ErrorNotificationStrategy.CRITICAL)

        assert service.should_notify(AppError.critical(ErrorCode.DATABASE_ERROR)) is True


class TestLogError:
    @pytest.mark.parametrize(
        ("severity", "method"),
        [
            (ErrorSeverity.LOW, "info"),
            (ErrorSeverity.MEDIUM, "warning"),
            (ErrorSeverity.HIGH, "error"),
            (ErrorSeverity.CRITICAL, "error"),
        ],
    )
    def test_log_level_follows_severity(self, severity, method):
        error = AppError(ErrorCode.INVALID_INPUT, severity=severity)

        with patch("src.app.core.errors.service.logger") as mock_logger:
            make_service().log_error(error, {"path": "/x"})

        getattr(mock_logger, method).assert_called_once()

    def test_context_is_sanitized(self):
        error = AppError(ErrorCode.INVALID_INPUT)

        with patch("src.app.core.errors.service.logger") as mock_logger:
            make_service().log_error(error, {"password": "hunter2", "path": "/x"})

        context = mock_logger.warning.call_args.kwargs["context"]
        assert context == {"password": "***REDACTED***", "path": "/x"}

    def test_context_dropped_when_capture_disabled(self):
        with patch("src.app.core.errors.service.logger") as mock_logger:
            make_service(error_capture_context=False).log_error(
                AppError(ErrorCode.INVALID_INPUT), {"path": "/x"}
            )

        assert mock_logger.warning.call_args.kwargs["context"] == {}

    def test_disabled_logging(self):
        with patch("src.app.core.errors.service.logger") as mock_logger:
            make_service(error_log_errors=False).log_error(RuntimeError("boom"))

        mock_logger.error.assert_not_called()

    def test_unexpected_exception_logged_as_error(self):
        with patch("src.app.core.errors.service.logger") as mock_logger:
            make_service().log_error(RuntimeError("boom"))

        mock_logger.error.assert_called_once()


class TestReportError:
    async def test_skipped_when_sentry_disabled(self):
        with patch("src.app.core.errors.service.sentry_sdk") as mock_sentry:
            await make_service(sentry_enabled=False).report_error(RuntimeError("boom"))

        mock_sentry.capture_exception.assert_not_called()

    async def test_tags_and_capture(self):
        error = AppError.critical(ErrorCode.DATABASE_ERROR, context={"token": "abc"})

        with patch("src.app.core.errors.service.sentry_sdk") as mock_sentry:
            scope = mock_sentry.new_scope.return_value.__enter__.return_value
            await make_service(sentry_enabled=True).report_error(
                error, {"path": "/p", "method": "POST", "correlation_id": "cid"}
            )

        mock_sentry.capture_exception.assert_called_once_with(error)
        scope.set_level.assert_called_once_with("fatal")
        scope.set_tag.assert_any_call("error_code", "ERR_6002")
        scope.set_tag.assert_any_call("is_operational", "false")
        scope.set_tag.assert_any_call("request_path", "/p")
        scope.set_tag.assert_any_call("correlation_id", "cid")
        scope.set_context.assert_any_call("app_error_context", {"token": "***REDACTED***"})

    async def test_sentry_failure_is_swallowed_and_logged(self):
        with (
            patch("src.app.core.errors.service.sentry_sdk") as mock_sentry,
            patch("src.app.core.errors.service.logger") as mock_logger,
        ):
            mock_sentry.capture_exception.side_effect = RuntimeError("sentry down")
            await make_service(sentry_enabled=True).report_error(RuntimeError("boom"))

        mock_logger.error.assert_called_once()


class TestSanitizeContext:
    def test_redacts_sensitive_keys_in_any_casing(self):
        result = sanitize_context(
            {"apiKey": "k", "api_key": "k", "Authorization": "Bearer x", "name": "ok"}
        )

        assert result == {
            "apiKey": "***REDACTED***",
            "api_key": "***REDACTED***",
            "Authorization": "***REDACTED***",
            "name": "ok",
        }

    def test_recurses_into_nested_dicts(self):
        result = sanitize_context({"user": {"password": "x", "email": "a@b.c"}})

        assert result == {"user": {"password": "***REDACTED***", "email": "a@b.c"}}

    def test_does_not_mutate_input(self):
        context = {"secret": "s"}

        sanitize_context(context)

        assert context == {"secret": "s"}

    def test_empty(self):
        assert sanitize_context(None) == {}
