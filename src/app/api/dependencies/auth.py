"""Caller identity dependencies.

The RequestContext is populated by RequestContextMiddleware; these
dependencies hand it to endpoints and services.
"""

from typing import Annotated

from fastapi import Depends

from src.app.core.context import RequestContext, get_request_context
from src.app.core.errors import AppError, ErrorCode


def get_current_context() -> RequestContext:
    """Context of the caller, anonymous when no valid token was sent."""
    return get_request_context()


def get_authenticated_context(
    ctx: Annotated[RequestContext, Depends(get_current_context)],
) -> RequestContext:
    """Context of an authenticated caller.

    Raises:
        AppError: UNAUTHORIZED when the request carries no valid token.
    """
    if not ctx.is_authenticated:
        raise AppError(ErrorCode.UNAUTHORIZED, "User must be authenticated")
    return ctx


CurrentContext = Annotated[RequestContext, Depends(get_current_context)]
AuthenticatedContext = Annotated[RequestContext, Depends(get_authenticated_context)]
