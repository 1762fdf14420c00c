"""Sentry SDK initialization."""

import sentry_sdk

from src.app.core.config import Settings
from src.app.core.logging import get_logger

logger = get_logger(__name__)


def init_sentry(settings: Settings) -> bool:
    """Initialize Sentry if enabled and a DSN is configured.

    Returns True when the SDK was initialized. Failures are logged and leave
    the application running without crash reporting.
    """
    if not settings.sentry_enabled or not settings.sentry_dsn:
        logger.info("Sentry disabled")
        return False

    try:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.sentry_environment or settings.app_env,
            traces_sample_rate=settings.sentry_traces_sample_rate,
            send_default_pii=False,
        )
    except Exception as e:
        logger.error("Failed to initialize Sentry", error=str(e))
        return False

    logger.info("Sentry initialized", environment=settings.sentry_environment or settings.app_env)
    return True
