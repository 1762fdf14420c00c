"""Project schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.app.models.enums import (
    ApprovalStatus,
    ProjectCategory,
    ProjectDifficulty,
    ProjectStatus,
)
from src.app.schemas.common import naive_utc
from src.app.schemas.pagination import PageParams


def _clean_skills(v: list[str] | None) -> list[str] | None:
    if v is None:
        return None
    return [s.strip() for s in v if s and s.strip()]


class ProjectCreate(BaseModel):
    """Schema for creating a project."""

    model_config = {"use_enum_values": True}

    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    organization: str | None = Field(default=None, max_length=255)
    organization_logo_url: str | None = Field(default=None, max_length=500)
    required_skills: list[str] = Field(min_length=1)
    tags: list[str] | None = None
    category: ProjectCategory = ProjectCategory.OTHER
    difficulty: ProjectDifficulty = ProjectDifficulty.ROOKIE
    industry: str | None = Field(default=None, max_length=100)
    is_remote: bool = False
    duration: int = Field(default=1, ge=1, description="Duration in weeks")
    deadline: datetime | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Project title cannot be empty or whitespace only")
        return v

    @field_validator("required_skills", "tags")
    @classmethod
    def validate_skills(cls, v: list[str] | None) -> list[str] | None:
        return _clean_skills(v)

    @field_validator("deadline")
    @classmethod
    def normalize_deadline(cls, v: datetime | None) -> datetime | None:
        return naive_utc(v)


class ProjectUpdate(BaseModel):
    """Schema for updating a project. Unset fields are left unchanged."""

    model_config = {"use_enum_values": True}

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    organization: str | None = Field(default=None, max_length=255)
    organization_logo_url: str | None = Field(default=None, max_length=500)
    required_skills: list[str] | None = None
    tags: list[str] | None = None
    category: ProjectCategory | None = None
    difficulty: ProjectDifficulty | None = None
    status: ProjectStatus | None = None
    industry: str | None = Field(default=None, max_length=100)
    is_remote: bool | None = None
    duration: int | None = Field(default=None, ge=1)
    deadline: datetime | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                raise ValueError("Project title cannot be empty or whitespace only")
        return v

    @field_validator("required_skills", "tags")
    @classmethod
    def validate_skills(cls, v: list[str] | None) -> list[str] | None:
        return _clean_skills(v)

    @field_validator("deadline")
    @classmethod
    def normalize_deadline(cls, v: datetime | None) -> datetime | None:
        return naive_utc(v)


class ProjectFilters(PageParams):
    """Query parameters for listing projects."""

    status: ProjectStatus | None = None
    approval_status: ApprovalStatus | None = None
    category: ProjectCategory | None = None
    industry: str | None = None
    is_remote: bool | None = None
    is_published: bool | None = None
    is_available: bool | None = Field(
        default=None, description="Only projects without an assigned team"
    )
    required_skills: list[str] | None = None
    tags: list[str] | None = None


class AssignTeamRequest(BaseModel):
    team_id: UUID


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    id: UUID
    client_id: UUID
    university_id: UUID | None
    created_by: UUID
    title: str
    description: str
    organization: str | None
    organization_logo_url: str | None
    required_skills: list[str]
    tags: list[str] | None
    category: str
    difficulty: str
    industry: str | None
    is_remote: bool
    duration: int
    deadline: datetime | None
    status: str
    approval_status: str
    approved_by: UUID | None
    approved_at: datetime | None
    is_published: bool
    published_at: datetime | None
    assigned_team_id: UUID | None
    assigned_at: datetime | None
    view_count: int
    application_count: int
    bookmark_count: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
