"""Bookmark model."""

from datetime import datetime
from uuid import UUID, uuid7

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from src.app.models.base import utc_now


class Bookmark(SQLModel, table=True):
    """A project saved by a student, optionally shared to them by another user."""

    __tablename__ = "bookmarks"
    __table_args__ = (
        UniqueConstraint("student_id", "project_id", name="uq_bookmarks_student_project"),
    )

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    student_id: UUID = Field(foreign_key="users.id", index=True)
    project_id: UUID = Field(foreign_key="projects.id", index=True, ondelete="CASCADE")
    university_id: UUID | None = Field(default=None, foreign_key="universities.id", index=True)
    shared_by: UUID | None = Field(default=None, foreign_key="users.id")
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)
