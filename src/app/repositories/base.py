"""Base repository with common CRUD operations."""

from typing import Any
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from src.app.models.enums import SortOrder


class BaseRepository[ModelType: SQLModel]:
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    should be done in the service layer.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: UUID) -> ModelType | None:
        """Get a record by its primary key."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        )
        return result.scalar_one_or_none()

    def tenant_scope(self, university_id: UUID | None) -> list[Any]:
        """WHERE clauses limiting rows to a university, or none when unscoped."""
        if university_id is None:
            return []
        return [self.model.university_id == university_id]  # type: ignore[attr-defined]

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    async def delete(self, entity: ModelType) -> None:
        """Mark entity for deletion (no commit)."""
        await self.session.delete(entity)

    async def count(self, *conditions: Any, query: Any = None) -> int:
        """Count rows matching ``conditions``.

        Args:
            conditions: WHERE clauses applied to the model table.
            query: Optional base select (e.g. with joins) to count instead.
        """
        if query is None:
            query = select(self.model)
        query = query.where(*conditions)
        result = await self.session.execute(select(func.count()).select_from(query.subquery()))
        return result.scalar_one()

    async def paginate(
        self,
        query: Any,  # SelectOfScalar or Select - SQLModel/SQLAlchemy query
        offset: int,
        limit: int,
        order_by: Any,
        sort_order: SortOrder = SortOrder.DESC,
    ) -> tuple[list[Any], int]:
        """Execute offset pagination on a query.

        Args:
            query: The base SQLAlchemy query to paginate, with filters applied
            offset: Number of rows to skip
            limit: Maximum number of items to return
            order_by: Column to sort on

        Returns:
            Tuple of (items, total) where total counts all matching rows.
        """
        total_result = await self.session.execute(
            select(func.count()).select_from(query.order_by(None).subquery())
        )
        total = total_result.scalar_one()

        ordering = order_by.asc() if sort_order == SortOrder.ASC else order_by.desc()
        result = await self.session.execute(query.order_by(ordering).offset(offset).limit(limit))
        if len(query.selected_columns) > 1:
            items = list(result.all())
        else:
            items = list(result.scalars().all())
        return items, total
