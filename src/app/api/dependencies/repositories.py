"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.app.api.dependencies.db import DBSession
from src.app.repositories import (
    BookmarkRepository,
    ClientRepository,
    ExperienceRepository,
    ProjectRepository,
    UserRepository,
)


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepository(session)


def get_client_repository(session: DBSession) -> ClientRepository:
    return ClientRepository(session)


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_bookmark_repository(session: DBSession) -> BookmarkRepository:
    return BookmarkRepository(session)


def get_experience_repository(session: DBSession) -> ExperienceRepository:
    return ExperienceRepository(session)


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
ClientRepo = Annotated[ClientRepository, Depends(get_client_repository)]
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
BookmarkRepo = Annotated[BookmarkRepository, Depends(get_bookmark_repository)]
ExperienceRepo = Annotated[ExperienceRepository, Depends(get_experience_repository)]
