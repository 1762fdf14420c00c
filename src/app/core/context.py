"""Request context management using contextvars.

Holds the caller identity decoded from the bearer token plus the correlation
id. Middleware sets it per request; services receive it explicitly through
their constructor.
"""

from contextvars import ContextVar
from dataclasses import dataclass
from uuid import UUID

from src.app.core.errors import AppError, ErrorCode
from src.app.models.enums import UserRole

_request_context: ContextVar["RequestContext | None"] = ContextVar("request_context", default=None)


@dataclass(frozen=True)
class RequestContext:
    """Immutable identity of the current caller."""

    user_id: UUID | None = None
    role: UserRole | None = None
    university_id: UUID | None = None
    correlation_id: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    def require_user_id(self) -> UUID:
        """Return the caller id or fail with UNAUTHORIZED."""
        if self.user_id is None:
            raise AppError(ErrorCode.UNAUTHORIZED, "User must be authenticated")
        return self.user_id

    def require_role(self, *roles: UserRole) -> UUID:
        """Return the caller id if their role is one of ``roles``."""
        user_id = self.require_user_id()
        if self.role not in roles:
            raise AppError(
                ErrorCode.INSUFFICIENT_PERMISSIONS,
                f"Only {' or '.join(r.value for r in roles)} users can perform this action",
            )
        return user_id

    def require_university_id(self) -> UUID:
        """Return the caller's university or fail with INSUFFICIENT_PERMISSIONS."""
        if self.university_id is None:
            raise AppError(ErrorCode.INSUFFICIENT_PERMISSIONS, "University context required")
        return self.university_id


ANONYMOUS = RequestContext()


def set_request_context(
    user_id: UUID | None = None,
    role: UserRole | None = None,
    university_id: UUID | None = None,
    correlation_id: str | None = None,
) -> RequestContext:
    """Set request context for the current request."""
    ctx = RequestContext(
        user_id=user_id,
        role=role,
        university_id=university_id,
        correlation_id=correlation_id,
    )
    _request_context.set(ctx)
    return ctx


def get_request_context() -> RequestContext:
    """Get the current request context, anonymous when unset."""
    return _request_context.get() or ANONYMOUS


def clear_request_context() -> None:
    """Clear the request context."""
    _request_context.set(None)
