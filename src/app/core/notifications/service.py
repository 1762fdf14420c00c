"""In-app notification hub.

Services push fire-and-forget notifications here; subscribers (websocket
bridges, tests) receive each one synchronously. History is kept in memory
only when persistence is enabled.
"""

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from functools import lru_cache
from typing import Any
from uuid import UUID, uuid4

from src.app.core.config import Settings, get_settings
from src.app.core.logging import get_logger
from src.app.models.base import utc_now

logger = get_logger(__name__)


class NotificationType(str, Enum):
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"
    INFO = "INFO"
    UPDATE = "UPDATE"


@dataclass(frozen=True)
class Notification:
    type: NotificationType
    message: str
    context: dict[str, Any] | None = None
    id: UUID = field(default_factory=uuid4)
    timestamp: datetime = field(default_factory=utc_now)


NotificationCallback = Callable[[Notification], None]


class NotificationService:
    """Push notifications to subscribers and keep a bounded history."""

    def __init__(self, settings: Settings | None = None):
        settings = settings or get_settings()
        self.persist = settings.notification_persist
        self.enable_logging = settings.notification_enable_logging
        self._history: deque[Notification] = deque(maxlen=settings.notification_history_size)
        self._subscribers: list[NotificationCallback] = []

    async def push(
        self,
        type: NotificationType,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> Notification:
        notification = Notification(type=type, message=message, context=context)

        if self.enable_logging:
            logger.info(
                "Notification pushed",
                notification_type=notification.type.value,
                notification_message=notification.message,
            )
            if notification.context:
                logger.debug("Notification context", context=notification.context)

        if self.persist:
            self._history.append(notification)

        self._notify_subscribers(notification)
        return notification

    async def broadcast(
        self,
        room: str,
        type: NotificationType,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> Notification:
        """Push a notification tagged with a target room."""
        return await self.push(type, message, {**(context or {}), "room": room})

    async def get_history(
        self,
        type: NotificationType | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
        limit: int | None = None,
    ) -> list[Notification]:
        if not self.persist:
            logger.warning("Persistence is disabled. History is not available.")
            return []

        history = list(self._history)
        if type is not None:
            history = [n for n in history if n.type == type]
        if start_date is not None:
            history = [n for n in history if n.timestamp >= start_date]
        if end_date is not None:
            history = [n for n in history if n.timestamp <= end_date]
        if limit:
            history = history[:limit]
        return history

    def subscribe(self, callback: NotificationCallback) -> None:
        self._subscribers.append(callback)

    def unsubscribe(self, callback: NotificationCallback) -> None:
        self._subscribers = [cb for cb in self._subscribers if cb is not callback]

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _notify_subscribers(self, notification: Notification) -> None:
        for callback in list(self._subscribers):
            try:
                callback(notification)
            except Exception as e:
                logger.error(
                    "Notification subscriber failed",
                    notification_id=str(notification.id),
                    error=str(e),
                )


@lru_cache
def get_notification_service() -> NotificationService:
    """Process-wide notification hub."""
    return NotificationService()
