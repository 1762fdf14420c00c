"""Experience schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

from src.app.models.enums import ExperienceStatus, ExperienceView, OwnershipFilter
from src.app.schemas.common import naive_utc
from src.app.schemas.pagination import PageParams


class MainContact(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    role: str = Field(min_length=1, max_length=100)
    email: EmailStr
    institution: str = Field(min_length=1, max_length=255)
    location: str = Field(min_length=1, max_length=255)


class ExperienceCreate(BaseModel):
    """Schema for creating an experience. New experiences start as drafts."""

    title: str = Field(min_length=1, max_length=255)
    course_code: str | None = Field(default=None, max_length=50)
    overview: str = Field(default="", max_length=5000)
    start_date: datetime
    end_date: datetime
    duration_weeks: int | None = Field(default=None, ge=1)
    expected_outcomes: list[str] | None = None
    prerequisites: list[str] | None = None
    main_contact: MainContact | None = None
    tags: list[str] | None = None

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_dates(cls, v: datetime | None) -> datetime | None:
        return naive_utc(v)

    @model_validator(mode="after")
    def check_dates(self) -> "ExperienceCreate":
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self


class ExperienceUpdate(BaseModel):
    """Schema for updating an experience. Unset fields are left unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    course_code: str | None = Field(default=None, max_length=50)
    overview: str | None = Field(default=None, max_length=5000)
    start_date: datetime | None = None
    end_date: datetime | None = None
    duration_weeks: int | None = Field(default=None, ge=1)
    expected_outcomes: list[str] | None = None
    prerequisites: list[str] | None = None
    main_contact: MainContact | None = None
    tags: list[str] | None = None

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_dates(cls, v: datetime | None) -> datetime | None:
        return naive_utc(v)

    @model_validator(mode="after")
    def check_dates(self) -> "ExperienceUpdate":
        if self.start_date and self.end_date and self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self


class ExperienceFilters(PageParams):
    """Query parameters for listing experiences. Sortable by created_at or title."""

    status: ExperienceStatus | None = None


class StudentExperienceFilters(ExperienceFilters):
    limit: int = Field(default=10, ge=1, le=50)
    filter: OwnershipFilter = OwnershipFilter.CREATED
    view: ExperienceView = ExperienceView.GRID


class ExperienceRead(BaseModel):
    id: UUID
    created_by: UUID
    university_id: UUID | None
    title: str
    course_code: str | None
    overview: str
    start_date: datetime
    end_date: datetime
    duration_weeks: int | None
    expected_outcomes: list[str] | None
    prerequisites: list[str] | None
    main_contact: MainContact | None
    tags: list[str] | None
    matches_count: int
    status: str
    published_at: datetime | None
    archived_at: datetime | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ExperienceCard(BaseModel):
    """Grid view entry."""

    id: UUID
    title: str
    course_code: str | None = None
    summary: str
    skills: list[str]
    status: str
    start_date: datetime
    end_date: datetime
    matches_count: int
    tags: list[str]


class ExperienceRow(BaseModel):
    """List view entry."""

    id: UUID
    name: str
    status: str
    created_by: str
    created_at: datetime
    end_date: datetime | None = None
    matches_url: str


class StudentExperienceList(BaseModel):
    """Paginated experiences as either cards (GRID) or rows (LIST)."""

    cards: list[ExperienceCard] | None = None
    rows: list[ExperienceRow] | None = None
    total: int
    page: int
    limit: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


class ExperienceDuration(BaseModel):
    start: datetime
    end: datetime
    weeks: int


class RecommendedProject(BaseModel):
    id: UUID
    title: str
    organization: str
    summary: str
    skills: list[str]
    difficulty: str


class ExperienceDetail(BaseModel):
    id: UUID
    title: str
    course_code: str | None = None
    duration: ExperienceDuration
    tags: list[str]
    status: str
    overview: str
    prerequisites: list[str]
    expected_outcomes: list[str]
    main_contact: MainContact | None = None
    recommended_projects: list[RecommendedProject]
