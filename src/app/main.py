import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy import text

from src.app.api.middlewares import setup_middlewares
from src.app.api.v1.router import api_router
from src.app.core.config import get_settings
from src.app.core.db import dispose_engine, get_session
from src.app.core.errors.sentry import init_sentry
from src.app.core.exceptions import setup_exception_handlers
from src.app.core.logging import get_logger, setup_logging

logger = get_logger(__name__)

# Health check caching
_health_cache: dict[str, Any] | None = None
_health_cache_time: float = 0
HEALTH_CACHE_TTL = 10  # seconds


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    logger.info(f"Starting {settings.app_name}")

    yield

    logger.info("Closing connections...")
    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "projects", "description": "Client projects, approval and team assignment"},
    {"name": "bookmarks", "description": "Projects saved by students"},
    {"name": "experiences", "description": "Course experiences"},
    {"name": "student-experiences", "description": "Experiences of the calling student"},
    {"name": "notifications", "description": "In-app notification history"},
]


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.debug, settings.log_level)
    init_sentry(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Multi-tenant marketplace connecting students, clients and universities",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )

    setup_exception_handlers(app)
    setup_middlewares(app, settings)

    app.include_router(api_router)

    # Prometheus metrics instrumentation
    Instrumentator().instrument(app).expose(app, endpoint="/metrics")

    @app.get("/health")
    async def health() -> JSONResponse:
        """Health check with database validation and caching."""
        global _health_cache, _health_cache_time

        now = time.time()

        # Return cached result if still valid
        if _health_cache and (now - _health_cache_time) < HEALTH_CACHE_TTL:
            cached_response = _health_cache.copy()
            cached_response["cached"] = True
            cached_response["cache_age_seconds"] = round(now - _health_cache_time, 1)
            status_code = 200 if cached_response["status"] == "healthy" else 503
            return JSONResponse(content=cached_response, status_code=status_code)

        health_status: dict[str, Any] = {
            "status": "healthy",
            "database": "unknown",
            "cached": False,
            "timestamp": now,
        }

        try:
            async with get_session() as session:
                await session.execute(text("SELECT 1"))
            health_status["database"] = "healthy"
        except Exception as e:
            logger.warning("Health check database probe failed", error=str(e))
            health_status["database"] = f"unhealthy: {str(e)}"
            health_status["status"] = "unhealthy"

        _health_cache = health_status
        _health_cache_time = now

        status_code = 200 if health_status["status"] == "healthy" else 503
        return JSONResponse(content=health_status, status_code=status_code)

    return app


app = create_app()
