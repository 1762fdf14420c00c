"""Bookmark schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from src.app.models.enums import OwnershipFilter
from src.app.schemas.pagination import PageParams

MAX_BULK_DELETE = 100


class BookmarkCreate(BaseModel):
    project_id: UUID
    shared_by: UUID | None = Field(default=None, description="User who shared the project")


class BookmarkFilters(PageParams):
    """Query parameters for listing bookmarks. Only ``created_at`` sorting is supported."""

    filter: OwnershipFilter = OwnershipFilter.ALL


class BulkDeleteBookmarks(BaseModel):
    bookmark_ids: list[UUID] = Field(min_length=1, max_length=MAX_BULK_DELETE)


class BookmarkRead(BaseModel):
    id: UUID
    student_id: UUID
    project_id: UUID
    university_id: UUID | None
    shared_by: UUID | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class SharerRef(BaseModel):
    id: UUID
    name: str


class BookmarkCard(BaseModel):
    """Bookmark enriched with the project fields shown on a card."""

    id: UUID
    project_id: UUID
    title: str
    organization: str
    organization_logo_url: str | None = None
    summary: str
    skills: list[str]
    difficulty: str
    tags: list[str]
    posted_at: datetime
    time_remaining: str | None = Field(default=None, description="ISO-8601 duration, e.g. P2M or P5D")
    status: str
    shared_by: SharerRef | None = None
    created_at: datetime


class BookmarkSearchResult(BaseModel):
    bookmark_ids: list[UUID]


class BookmarkCount(BaseModel):
    count: int
