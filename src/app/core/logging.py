"""Structured logging with structlog.

Request and caller identity are bound through contextvars so every log line
written while handling a request carries them.
"""

import logging
import sys
from uuid import UUID

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

# Loggers that are too chatty at INFO
_QUIET_LOGGERS = ("sqlalchemy.engine", "httpx", "httpcore", "uvicorn.access")


def setup_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure stdlib logging and structlog.

    Args:
        debug: Colored console output when True, JSON lines otherwise.
        level: Root level name; defaults to DEBUG in debug mode, else INFO.
    """
    if level:
        log_level = logging.getLevelName(level.upper())
    else:
        log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)

    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.extend([structlog.processors.format_exc_info, structlog.processors.JSONRenderer()])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Optional logger name.

    Returns:
        A bound structlog logger.
    """
    return structlog.get_logger(name)


def bind_request_context(request_id: str | None) -> None:
    """Bind request-level context to all subsequent log calls.

    Args:
        request_id: The correlation ID for the current request.
    """
    if request_id:
        bind_contextvars(request_id=request_id)


def bind_user_context(
    user_id: UUID,
    university_id: UUID | None = None,
    email: str | None = None,
) -> None:
    """Bind caller identity to all subsequent log calls.

    Args:
        user_id: The authenticated user's ID.
        university_id: The university (tenant) from the token, if any.
        email: Optional user email. Only logged if settings.log_user_emails is True.
    """
    from src.app.core.config import get_settings

    bind_contextvars(user_id=str(user_id))
    if university_id is not None:
        bind_contextvars(university_id=str(university_id))

    settings = get_settings()
    if email and settings.log_user_emails:
        bind_contextvars(user_email=email)


def clear_request_context() -> None:
    """Clear all request-scoped context."""
    clear_contextvars()
