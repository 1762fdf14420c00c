"""Shared response schemas."""

from datetime import UTC, datetime

from pydantic import BaseModel


class OperationResult(BaseModel):
    """Result of a mutation with no entity to return."""

    success: bool = True
    message: str
    deleted_count: int | None = None


def naive_utc(v: datetime | None) -> datetime | None:
    """Convert aware datetimes to naive UTC to match the database columns."""
    if v is not None and v.tzinfo is not None:
        return v.astimezone(UTC).replace(tzinfo=None)
    return v
