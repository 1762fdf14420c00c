"""Repository for Experience entity."""

from typing import Any
from uuid import UUID

from sqlalchemy import or_
from sqlmodel import col, select

from src.app.models import Experience, ExperienceStatus
from src.app.repositories.base import BaseRepository
from src.app.schemas.experience import ExperienceFilters

SORTABLE_FIELDS = {
    "created_at": Experience.created_at,
    "title": Experience.title,
}


class ExperienceRepository(BaseRepository[Experience]):
    """Repository for Experience entity."""

    model = Experience

    async def get_scoped(self, id: UUID, university_id: UUID | None) -> Experience | None:
        result = await self.session.execute(
            select(Experience).where(Experience.id == id, *self.tenant_scope(university_id))
        )
        return result.scalar_one_or_none()

    async def count_by_owner_and_status(self, owner_id: UUID, status: ExperienceStatus) -> int:
        return await self.count(
            Experience.created_by == owner_id,
            Experience.status == status.value,
        )

    async def list_filtered(
        self,
        filters: ExperienceFilters,
        university_id: UUID | None = None,
        created_by: UUID | None = None,
    ) -> tuple[list[Experience], int]:
        conditions: list[Any] = self.tenant_scope(university_id)
        if created_by is not None:
            conditions.append(Experience.created_by == created_by)
        if filters.search:
            pattern = f"%{filters.search}%"
            conditions.append(
                or_(
                    col(Experience.title).ilike(pattern),
                    col(Experience.overview).ilike(pattern),
                    col(Experience.course_code).ilike(pattern),
                )
            )
        if filters.status is not None:
            conditions.append(Experience.status == filters.status.value)

        query = select(Experience).where(*conditions)
        order_by = SORTABLE_FIELDS.get(filters.sort_by, Experience.created_at)
        return await self.paginate(query, filters.offset, filters.limit, order_by, filters.sort_order)
