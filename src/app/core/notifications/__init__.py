"""In-app notifications."""

from src.app.core.notifications.service import (
    Notification,
    NotificationCallback,
    NotificationService,
    NotificationType,
    get_notification_service,
)

__all__ = [
    "Notification",
    "NotificationCallback",
    "NotificationService",
    "NotificationType",
    "get_notification_service",
]
