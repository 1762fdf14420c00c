"""Repository for Bookmark entity."""

from typing import Any
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import col, select

from src.app.models import Bookmark, OwnershipFilter, Project
from src.app.repositories.base import BaseRepository
from src.app.repositories.project_repository import search_condition
from src.app.schemas.bookmark import BookmarkFilters


class BookmarkRepository(BaseRepository[Bookmark]):
    """Repository for student bookmarks."""

    model = Bookmark

    def _owned(self, student_id: UUID, university_id: UUID | None) -> list[Any]:
        return [Bookmark.student_id == student_id, *self.tenant_scope(university_id)]

    async def get_scoped(self, id: UUID, university_id: UUID | None) -> Bookmark | None:
        result = await self.session.execute(
            select(Bookmark).where(Bookmark.id == id, *self.tenant_scope(university_id))
        )
        return result.scalar_one_or_none()

    async def get_by_student_and_project(
        self, student_id: UUID, project_id: UUID, university_id: UUID | None = None
    ) -> Bookmark | None:
        result = await self.session.execute(
            select(Bookmark).where(
                Bookmark.project_id == project_id,
                *self._owned(student_id, university_id),
            )
        )
        return result.scalar_one_or_none()

    async def count_for_student(self, student_id: UUID, university_id: UUID | None = None) -> int:
        return await self.count(*self._owned(student_id, university_id))

    async def list_with_projects(
        self,
        student_id: UUID,
        filters: BookmarkFilters,
        university_id: UUID | None = None,
    ) -> tuple[list[Any], int]:
        """List a student's bookmarks joined with their projects.

        Returns rows of ``(Bookmark, Project)`` and the total count.
        """
        conditions = self._owned(student_id, university_id)
        if filters.filter == OwnershipFilter.CREATED:
            conditions.append(col(Bookmark.shared_by).is_(None))
        elif filters.filter == OwnershipFilter.SHARED:
            conditions.append(col(Bookmark.shared_by).is_not(None))
        if filters.search:
            conditions.append(search_condition(filters.search))

        query = (
            select(Bookmark, Project)
            .join(Project, col(Bookmark.project_id) == col(Project.id))
            .where(*conditions)
        )
        return await self.paginate(
            query, filters.offset, filters.limit, Bookmark.created_at, filters.sort_order
        )

    async def list_owned(
        self, ids: list[UUID], student_id: UUID, university_id: UUID | None = None
    ) -> list[Bookmark]:
        """Return the subset of ``ids`` owned by the student."""
        result = await self.session.execute(
            select(Bookmark).where(
                col(Bookmark.id).in_(ids),
                *self._owned(student_id, university_id),
            )
        )
        return list(result.scalars().all())

    async def delete_many(self, ids: list[UUID]) -> None:
        """Delete bookmarks by id (no commit)."""
        await self.session.execute(delete(Bookmark).where(col(Bookmark.id).in_(ids)))

    async def search_ids(
        self, student_id: UUID, term: str, university_id: UUID | None = None
    ) -> list[UUID]:
        """Ids of the student's bookmarks whose project matches ``term``."""
        result = await self.session.execute(
            select(Bookmark.id)
            .join(Project, col(Bookmark.project_id) == col(Project.id))
            .where(*self._owned(student_id, university_id), search_condition(term))
        )
        return list(result.scalars().all())
