"""Request context middleware.

Decodes the bearer token (if any) into a RequestContext for the duration
of the request. Invalid or missing tokens leave the caller anonymous;
endpoints that need a user reject it through the authenticated dependency.
"""

from typing import Any
from uuid import UUID

from asgi_correlation_id import correlation_id
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.app.core.context import clear_request_context, set_request_context
from src.app.core.logging import bind_request_context, bind_user_context, get_logger
from src.app.core.logging import clear_request_context as clear_log_context
from src.app.core.security import decode_token
from src.app.models.enums import UserRole

logger = get_logger(__name__)


def _extract_identity(request: Request) -> dict[str, Any] | None:
    """Read sub, role and university_id claims from an access token."""
    auth_header = request.headers.get("authorization", "")
    if not auth_header.startswith("Bearer "):
        return None

    payload = decode_token(auth_header[7:])
    if not payload or payload.get("type") != "access":
        return None

    try:
        university_id = payload.get("university_id")
        return {
            "user_id": UUID(payload.get("sub", "")),
            "role": UserRole(payload["role"]) if payload.get("role") else None,
            "university_id": UUID(university_id) if university_id else None,
        }
    except (ValueError, TypeError, AttributeError):
        logger.warning("Access token carries malformed claims")
        return None


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Set the RequestContext and structlog bindings for the request.

    Both are cleared again once the response has been produced.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = correlation_id.get()
        clear_request_context()
        clear_log_context()
        bind_request_context(request_id)

        try:
            identity = _extract_identity(request) or {}
            set_request_context(
                user_id=identity.get("user_id"),
                role=identity.get("role"),
                university_id=identity.get("university_id"),
                correlation_id=request_id,
            )
            if identity:
                bind_user_context(
                    user_id=identity["user_id"],
                    university_id=identity["university_id"],
                )

            return await call_next(request)
        finally:
            clear_request_context()
            clear_log_context()
