"""Request-scoped sessions."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from src.app.core.db.engine import get_session_factory


@asynccontextmanager
async def get_session(engine: AsyncEngine | None = None) -> AsyncGenerator[AsyncSession]:
    """Open a session on the shared factory, or on ``engine`` when given.

    Universities share one schema and are told apart by ``university_id`` on
    each row. Work not committed inside the block is rolled back on exit.
    """
    factory = (
        get_session_factory()
        if engine is None
        else async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)
    )
    async with factory() as session:
        yield session
