"""Project model."""

from datetime import datetime
from uuid import UUID, uuid7

from sqlalchemy import Column
from sqlalchemy.dialects.postgresql import JSONB
from sqlmodel import Field, SQLModel

from src.app.models.base import utc_now
from src.app.models.enums import ApprovalStatus, ProjectCategory, ProjectDifficulty, ProjectStatus


class Project(SQLModel, table=True):
    """Project posted by a client.

    A project is published only after approval, and cannot be deleted or
    reassigned once a team is assigned.
    """

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    client_id: UUID = Field(foreign_key="clients.id", index=True)
    university_id: UUID | None = Field(default=None, foreign_key="universities.id", index=True)
    created_by: UUID = Field(foreign_key="users.id")

    title: str = Field(max_length=255)
    description: str
    organization: str | None = Field(default=None, max_length=255)
    organization_logo_url: str | None = Field(default=None, max_length=500)
    required_skills: list[str] = Field(
        default_factory=list, sa_column=Column(JSONB, nullable=False)
    )
    tags: list[str] | None = Field(default=None, sa_column=Column(JSONB, nullable=True))
    category: str = Field(default=ProjectCategory.OTHER.value, max_length=50, index=True)
    difficulty: str = Field(default=ProjectDifficulty.ROOKIE.value, max_length=20)
    industry: str | None = Field(default=None, max_length=100)
    is_remote: bool = Field(default=False)
    duration: int = Field(default=1)  # weeks
    deadline: datetime | None = Field(default=None)

    status: str = Field(default=ProjectStatus.DRAFT.value, max_length=20, index=True)
    approval_status: str = Field(default=ApprovalStatus.PENDING.value, max_length=20)
    approved_by: UUID | None = Field(default=None, foreign_key="users.id")
    approved_at: datetime | None = Field(default=None)
    is_published: bool = Field(default=False, index=True)
    published_at: datetime | None = Field(default=None)

    assigned_team_id: UUID | None = Field(default=None, index=True)
    assigned_at: datetime | None = Field(default=None)

    view_count: int = Field(default=0)
    application_count: int = Field(default=0)
    bookmark_count: int = Field(default=0)

    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)
