"""Repository for Project entity."""

from typing import Any
from uuid import UUID

from sqlalchemy import or_
from sqlmodel import col, select

from src.app.models import ApprovalStatus, Project, ProjectStatus
from src.app.repositories.base import BaseRepository
from src.app.schemas.project import ProjectFilters

# Sort fields accepted from clients; anything else falls back to created_at.
SORTABLE_FIELDS = {
    "created_at": Project.created_at,
    "updated_at": Project.updated_at,
    "title": Project.title,
    "status": Project.status,
    "category": Project.category,
    "published_at": Project.published_at,
    "deadline": Project.deadline,
    "view_count": Project.view_count,
    "application_count": Project.application_count,
}


def search_condition(term: str) -> Any:
    """Case-insensitive substring match on title or description."""
    pattern = f"%{term}%"
    return or_(col(Project.title).ilike(pattern), col(Project.description).ilike(pattern))


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity."""

    model = Project

    async def get_scoped(self, id: UUID, university_id: UUID | None) -> Project | None:
        """Get a project by id within a university (unscoped when None)."""
        result = await self.session.execute(
            select(Project).where(Project.id == id, *self.tenant_scope(university_id))
        )
        return result.scalar_one_or_none()

    def _filter_conditions(self, filters: ProjectFilters) -> list[Any]:
        conditions: list[Any] = []
        if filters.search:
            conditions.append(search_condition(filters.search))
        if filters.status is not None:
            conditions.append(Project.status == filters.status.value)
        if filters.approval_status is not None:
            conditions.append(Project.approval_status == filters.approval_status.value)
        if filters.category is not None:
            conditions.append(Project.category == filters.category.value)
        if filters.industry:
            conditions.append(Project.industry == filters.industry)
        if filters.is_remote is not None:
            conditions.append(Project.is_remote == filters.is_remote)
        if filters.is_published is not None:
            conditions.append(Project.is_published == filters.is_published)
        if filters.is_available:
            conditions.append(col(Project.assigned_team_id).is_(None))
        if filters.required_skills:
            conditions.append(col(Project.required_skills).contains(filters.required_skills))
        if filters.tags:
            conditions.append(col(Project.tags).contains(filters.tags))
        return conditions

    async def list_filtered(
        self,
        filters: ProjectFilters,
        university_id: UUID | None = None,
    ) -> tuple[list[Project], int]:
        """List projects matching filters, with a total count."""
        query = select(Project).where(
            *self.tenant_scope(university_id),
            *self._filter_conditions(filters),
        )
        order_by = SORTABLE_FIELDS.get(filters.sort_by, Project.created_at)
        return await self.paginate(query, filters.offset, filters.limit, order_by, filters.sort_order)

    async def list_by_client(
        self, client_id: UUID, offset: int, limit: int
    ) -> tuple[list[Project], int]:
        """List a client's projects, newest first."""
        query = select(Project).where(Project.client_id == client_id)
        return await self.paginate(query, offset, limit, Project.created_at)

    async def list_recommended(self, university_id: UUID | None, limit: int = 3) -> list[Project]:
        """Newest published and approved projects."""
        result = await self.session.execute(
            select(Project)
            .where(
                Project.status == ProjectStatus.PUBLISHED.value,
                Project.approval_status == ApprovalStatus.APPROVED.value,
                col(Project.is_published).is_(True),
                *self.tenant_scope(university_id),
            )
            .order_by(col(Project.created_at).desc())
            .limit(limit)
        )
        return list(result.scalars().all())
