"""Notification endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query

from src.app.api.dependencies import AuthenticatedContext, Notifications
from src.app.models.enums import UserRole
from src.app.schemas.notification import NotificationHistoryParams, NotificationRead

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get(
    "/history",
    response_model=list[NotificationRead],
    summary="Notification history",
    description=(
        "Recent notifications across all users. Admin only. "
        "Empty unless NOTIFICATION_PERSIST is enabled."
    ),
    responses={403: {"description": "Caller is not an admin"}},
)
async def get_notification_history(
    params: Annotated[NotificationHistoryParams, Query()],
    notifications: Notifications,
    ctx: AuthenticatedContext,
) -> list[NotificationRead]:
    ctx.require_role(UserRole.ADMIN)
    history = await notifications.get_history(
        type=params.type,
        start_date=params.start_date,
        end_date=params.end_date,
        limit=params.limit,
    )
    return [NotificationRead.model_validate(n) for n in history]
