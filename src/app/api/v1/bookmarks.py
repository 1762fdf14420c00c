"""Bookmark endpoints - students saving projects."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from src.app.api.dependencies import AuthenticatedContext, BookmarkServiceDep
from src.app.schemas.bookmark import (
    BookmarkCard,
    BookmarkCount,
    BookmarkCreate,
    BookmarkFilters,
    BookmarkRead,
    BookmarkSearchResult,
    BulkDeleteBookmarks,
)
from src.app.schemas.common import OperationResult
from src.app.schemas.pagination import PaginatedResponse

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


@router.post(
    "",
    response_model=BookmarkRead,
    status_code=status.HTTP_201_CREATED,
    summary="Bookmark a project",
    responses={
        403: {"description": "Bookmark limit reached"},
        404: {"description": "Project not found"},
        409: {"description": "Project already bookmarked"},
    },
)
async def create_bookmark(
    data: BookmarkCreate,
    service: BookmarkServiceDep,
    _ctx: AuthenticatedContext,
) -> BookmarkRead:
    bookmark = await service.create(data.project_id, data.shared_by)
    return BookmarkRead.model_validate(bookmark)


@router.get(
    "",
    response_model=PaginatedResponse[BookmarkCard],
    summary="List bookmarks",
    description="Bookmarked projects as cards. Filter by CREATED, SHARED or ALL.",
)
async def list_bookmarks(
    filters: Annotated[BookmarkFilters, Query()],
    service: BookmarkServiceDep,
    _ctx: AuthenticatedContext,
) -> PaginatedResponse[BookmarkCard]:
    return await service.find_all(filters)


@router.get(
    "/search",
    response_model=BookmarkSearchResult,
    summary="Search bookmarks",
    description="IDs of bookmarks whose project title or description contains the term.",
)
async def search_bookmarks(
    service: BookmarkServiceDep,
    _ctx: AuthenticatedContext,
    q: Annotated[str, Query(min_length=1, max_length=200)],
) -> BookmarkSearchResult:
    return await service.search(q)


@router.get(
    "/count",
    response_model=BookmarkCount,
    summary="Count bookmarks",
    description="Number of bookmarks of the caller. 0 for anonymous callers.",
)
async def count_bookmarks(service: BookmarkServiceDep) -> BookmarkCount:
    return BookmarkCount(count=await service.get_count())


@router.post(
    "/bulk-delete",
    response_model=OperationResult,
    summary="Delete several bookmarks",
    description="All or nothing: every ID must belong to the caller.",
    responses={400: {"description": "Some IDs are invalid or not owned"}},
)
async def bulk_delete_bookmarks(
    data: BulkDeleteBookmarks,
    service: BookmarkServiceDep,
    _ctx: AuthenticatedContext,
) -> OperationResult:
    return await service.bulk_delete(data.bookmark_ids)


@router.delete(
    "/project/{project_id}",
    response_model=OperationResult,
    summary="Remove bookmark by project",
    responses={404: {"description": "Bookmark not found"}},
)
async def delete_bookmark_by_project(
    project_id: UUID,
    service: BookmarkServiceDep,
    _ctx: AuthenticatedContext,
) -> OperationResult:
    return await service.remove_by_project_id(project_id)


@router.get(
    "/{bookmark_id}",
    response_model=BookmarkRead,
    summary="Get bookmark",
    responses={
        403: {"description": "Not the bookmark owner"},
        404: {"description": "Bookmark not found"},
    },
)
async def get_bookmark(
    bookmark_id: UUID,
    service: BookmarkServiceDep,
    _ctx: AuthenticatedContext,
) -> BookmarkRead:
    bookmark = await service.find_one(bookmark_id)
    return BookmarkRead.model_validate(bookmark)


@router.delete(
    "/{bookmark_id}",
    response_model=OperationResult,
    summary="Remove bookmark",
    responses={
        403: {"description": "Not the bookmark owner"},
        404: {"description": "Bookmark not found"},
    },
)
async def delete_bookmark(
    bookmark_id: UUID,
    service: BookmarkServiceDep,
    _ctx: AuthenticatedContext,
) -> OperationResult:
    return await service.remove(bookmark_id)
