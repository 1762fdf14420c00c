"""Notification schemas for API request/response."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.app.core.notifications import NotificationType
from src.app.schemas.common import naive_utc


class NotificationHistoryParams(BaseModel):
    type: NotificationType | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    limit: int | None = Field(default=None, ge=1, le=1000)

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_dates(cls, v: datetime | None) -> datetime | None:
        return naive_utc(v)


class NotificationRead(BaseModel):
    id: UUID
    type: NotificationType
    message: str
    context: dict[str, Any] | None = None
    timestamp: datetime

    model_config = {"from_attributes": True}
