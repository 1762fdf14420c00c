"""Experience model."""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid7

from sqlalchemy import Column
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field, SQLModel

from src.app.models.base import utc_now
from src.app.models.enums import ExperienceStatus


class Experience(SQLModel, table=True):
    """Structured learning engagement owned by its creator."""

    __tablename__ = "experiences"

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    created_by: UUID = Field(foreign_key="users.id", index=True)
    university_id: UUID | None = Field(default=None, foreign_key="universities.id", index=True)

    title: str = Field(max_length=255)
    course_code: str | None = Field(default=None, max_length=50)
    overview: str = Field(default="")
    start_date: datetime
    end_date: datetime
    duration_weeks: int | None = Field(default=None)

    expected_outcomes: list[str] | None = Field(default=None, sa_column=Column(JSONB, nullable=True))
    prerequisites: list[str] | None = Field(default=None, sa_column=Column(JSONB, nullable=True))
    main_contact: dict[str, Any] | None = Field(default=None, sa_column=Column(JSONB, nullable=True))
    tags: list[str] | None = Field(default=None, sa_column=Column(JSONB, nullable=True))
    matches_count: int = Field(default=0)

    status: str = Field(default=ExperienceStatus.DRAFT.value, max_length=20, index=True)
    published_at: datetime | None = Field(default=None)
    archived_at: datetime | None = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)
