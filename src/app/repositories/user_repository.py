"""Repositories for User and Client entities."""

from uuid import UUID

from sqlmodel import select

from src.app.models import Client, User
from src.app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User entity."""

    model = User

    async def get_names(self, ids: list[UUID]) -> dict[UUID, str]:
        """Map user ids to full names for the given ids."""
        if not ids:
            return {}
        result = await self.session.execute(select(User.id, User.full_name).where(User.id.in_(ids)))  # type: ignore[attr-defined]
        return {row.id: row.full_name for row in result.all()}


class ClientRepository(BaseRepository[Client]):
    """Repository for Client profiles."""

    model = Client

    async def get_by_user_id(self, user_id: UUID) -> Client | None:
        result = await self.session.execute(select(Client).where(Client.user_id == user_id))
        return result.scalar_one_or_none()
