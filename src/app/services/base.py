"""Shared plumbing for domain services."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.app.core.context import RequestContext
from src.app.core.logging import get_logger
from src.app.core.notifications import NotificationService, NotificationType

logger = get_logger(__name__)


class DomainService:
    """Base for services acting on behalf of the caller in ``ctx``.

    Notifications are pushed after the write has been committed; a failed
    push is logged and never undoes the write.
    """

    def __init__(
        self,
        session: AsyncSession,
        ctx: RequestContext,
        notifications: NotificationService,
    ):
        self.session = session
        self.ctx = ctx
        self.notifications = notifications

    async def _notify(
        self,
        type: NotificationType,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> None:
        try:
            await self.notifications.push(type, message, context)
        except Exception as e:
            logger.error("Failed to push notification", notification_message=message, error=str(e))

    async def _commit(self, *refresh: Any) -> None:
        """Commit, rolling back on failure, then refresh the given entities."""
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        for entity in refresh:
            await self.session.refresh(entity)
