"""Bookmark service - students saving projects."""

from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.app.core.context import RequestContext
from src.app.core.errors import AppError, ErrorCode
from src.app.core.logging import get_logger
from src.app.core.notifications import NotificationService, NotificationType
from src.app.models import Bookmark, Project
from src.app.repositories import BookmarkRepository, ProjectRepository, UserRepository
from src.app.schemas.bookmark import (
    MAX_BULK_DELETE,
    BookmarkCard,
    BookmarkFilters,
    BookmarkSearchResult,
    SharerRef,
)
from src.app.schemas.common import OperationResult
from src.app.schemas.pagination import PaginatedResponse
from src.app.services.base import DomainService
from src.app.services.formatting import (
    MAX_CARD_SKILLS,
    compact_tags,
    display_status,
    summarize,
    time_remaining,
)

logger = get_logger(__name__)

MAX_BOOKMARKS_PER_STUDENT = 100


class BookmarkService(DomainService):
    """Manage the calling student's bookmarks."""

    def __init__(
        self,
        bookmark_repo: BookmarkRepository,
        project_repo: ProjectRepository,
        user_repo: UserRepository,
        session: AsyncSession,
        ctx: RequestContext,
        notifications: NotificationService,
    ):
        super().__init__(session, ctx, notifications)
        self.bookmark_repo = bookmark_repo
        self.project_repo = project_repo
        self.user_repo = user_repo

    async def create(self, project_id: UUID, shared_by: UUID | None = None) -> Bookmark:
        """Bookmark a project for the calling student.

        Raises:
            AppError: RESOURCE_NOT_FOUND if the project does not exist,
                ALREADY_EXISTS if already bookmarked, OPERATION_NOT_ALLOWED
                once the student has MAX_BOOKMARKS_PER_STUDENT bookmarks.
        """
        student_id = self.ctx.require_user_id()
        university_id = self.ctx.university_id

        project = await self.project_repo.get_scoped(project_id, university_id)
        if project is None:
            raise AppError(
                ErrorCode.RESOURCE_NOT_FOUND,
                "Project not found",
                {"project_id": str(project_id)},
            )

        existing = await self.bookmark_repo.get_by_student_and_project(
            student_id, project_id, university_id
        )
        if existing is not None:
            raise AppError(
                ErrorCode.ALREADY_EXISTS,
                "Project already bookmarked",
                {"project_id": str(project_id)},
            )

        current_count = await self.bookmark_repo.count_for_student(student_id, university_id)
        if current_count >= MAX_BOOKMARKS_PER_STUDENT:
            raise AppError(
                ErrorCode.OPERATION_NOT_ALLOWED,
                f"Maximum bookmark limit reached ({MAX_BOOKMARKS_PER_STUDENT})",
                {"current_count": current_count},
            )

        bookmark = Bookmark(
            student_id=student_id,
            project_id=project_id,
            university_id=university_id,
            shared_by=shared_by,
        )
        self.bookmark_repo.add(bookmark)
        try:
            await self._commit(bookmark)
        except IntegrityError as e:
            # Concurrent insert of the same (student, project) pair
            raise AppError(
                ErrorCode.ALREADY_EXISTS,
                "Project already bookmarked",
                {"project_id": str(project_id)},
            ) from e

        logger.info("Bookmark created", bookmark_id=str(bookmark.id), project_id=str(project_id))
        await self._notify(
            NotificationType.SUCCESS,
            "Saved to bookmarks",
            {"bookmark_id": str(bookmark.id), "project_id": str(project_id)},
        )
        if shared_by is not None:
            await self._notify(
                NotificationType.INFO,
                "Student saved your shared project",
                {
                    "recipient_id": str(shared_by),
                    "student_id": str(student_id),
                    "project_id": str(project_id),
                },
            )
        return bookmark

    async def find_all(self, filters: BookmarkFilters) -> PaginatedResponse[BookmarkCard]:
        """List the student's bookmarks as project cards."""
        student_id = self.ctx.require_user_id()
        rows, total = await self.bookmark_repo.list_with_projects(
            student_id, filters, self.ctx.university_id
        )

        sharer_ids = list({b.shared_by for b, _ in rows if b.shared_by is not None})
        sharer_names = await self.user_repo.get_names(sharer_ids)

        cards = [self._to_card(bookmark, project, sharer_names) for bookmark, project in rows]
        return PaginatedResponse[BookmarkCard].build(cards, total, filters.page, filters.limit)

    async def find_one(self, bookmark_id: UUID) -> Bookmark:
        student_id = self.ctx.require_user_id()
        bookmark = await self.bookmark_repo.get_scoped(bookmark_id, self.ctx.university_id)
        if bookmark is None:
            raise AppError(
                ErrorCode.RESOURCE_NOT_FOUND,
                "Bookmark not found",
                {"bookmark_id": str(bookmark_id)},
            )
        if bookmark.student_id != student_id:
            raise AppError(
                ErrorCode.INSUFFICIENT_PERMISSIONS,
                "You can only access your own bookmarks",
            )
        return bookmark

    async def remove(self, bookmark_id: UUID) -> OperationResult:
        bookmark = await self.find_one(bookmark_id)
        shared_by = bookmark.shared_by

        await self.bookmark_repo.delete(bookmark)
        await self._commit()

        logger.info("Bookmark removed", bookmark_id=str(bookmark_id))
        if shared_by is not None:
            await self._notify(
                NotificationType.INFO,
                "Student removed your shared bookmark",
                {"recipient_id": str(shared_by), "project_id": str(bookmark.project_id)},
            )
        await self._notify(
            NotificationType.INFO,
            "Removed from bookmarks",
            {"bookmark_id": str(bookmark_id)},
        )
        return OperationResult(message="Bookmark removed")

    async def remove_by_project_id(self, project_id: UUID) -> OperationResult:
        student_id = self.ctx.require_user_id()
        bookmark = await self.bookmark_repo.get_by_student_and_project(
            student_id, project_id, self.ctx.university_id
        )
        if bookmark is None:
            raise AppError(
                ErrorCode.RESOURCE_NOT_FOUND,
                "Bookmark not found",
                {"project_id": str(project_id)},
            )

        await self.bookmark_repo.delete(bookmark)
        await self._commit()

        await self._notify(
            NotificationType.INFO,
            "Removed from bookmarks",
            {"project_id": str(project_id)},
        )
        return OperationResult(message="Bookmark removed")

    async def bulk_delete(self, bookmark_ids: list[UUID]) -> OperationResult:
        """Delete several bookmarks, all or nothing.

        Every id must belong to the caller; otherwise nothing is deleted.
        """
        student_id = self.ctx.require_user_id()
        if not bookmark_ids or len(bookmark_ids) > MAX_BULK_DELETE:
            raise AppError(
                ErrorCode.INVALID_INPUT,
                f"Between 1 and {MAX_BULK_DELETE} bookmark IDs are required",
            )

        owned = await self.bookmark_repo.list_owned(
            bookmark_ids, student_id, self.ctx.university_id
        )
        if len(owned) != len(bookmark_ids):
            raise AppError(
                ErrorCode.INVALID_INPUT,
                "Some bookmark IDs are invalid or do not belong to you",
                {"requested": len(bookmark_ids), "found": len(owned)},
            )

        await self.bookmark_repo.delete_many([b.id for b in owned])
        await self._commit()

        deleted = len(owned)
        logger.info("Bookmarks bulk deleted", count=deleted)
        await self._notify(
            NotificationType.SUCCESS,
            f"{deleted} bookmarks removed successfully",
            {"count": deleted},
        )
        return OperationResult(
            message=f"{deleted} bookmarks removed successfully",
            deleted_count=deleted,
        )

    async def search(self, term: str) -> BookmarkSearchResult:
        student_id = self.ctx.require_user_id()
        ids = await self.bookmark_repo.search_ids(student_id, term, self.ctx.university_id)
        return BookmarkSearchResult(bookmark_ids=ids)

    async def get_count(self) -> int:
        """Number of bookmarks of the caller, 0 when anonymous."""
        if self.ctx.user_id is None:
            return 0
        return await self.bookmark_repo.count_for_student(self.ctx.user_id, self.ctx.university_id)

    @staticmethod
    def _to_card(bookmark: Bookmark, project: Project, sharer_names: dict[UUID, str]) -> BookmarkCard:
        sharer = None
        if bookmark.shared_by is not None:
            sharer = SharerRef(
                id=bookmark.shared_by,
                name=sharer_names.get(bookmark.shared_by, "Unknown"),
            )
        return BookmarkCard(
            id=bookmark.id,
            project_id=project.id,
            title=project.title,
            organization=project.organization or "Unknown",
            organization_logo_url=project.organization_logo_url,
            summary=summarize(project.description, ellipsis=True),
            skills=(project.required_skills or [])[:MAX_CARD_SKILLS],
            difficulty=project.difficulty,
            tags=compact_tags(project.tags),
            posted_at=project.created_at,
            time_remaining=time_remaining(project.deadline),
            status=display_status(project.status),
            shared_by=sharer,
            created_at=bookmark.created_at,
        )
