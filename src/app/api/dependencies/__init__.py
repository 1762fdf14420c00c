"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenience.
"""

# Auth
from src.app.api.dependencies.auth import (
    AuthenticatedContext,
    CurrentContext,
    get_authenticated_context,
    get_current_context,
)

# Database
from src.app.api.dependencies.db import DBSession, get_db_session

# Repositories
from src.app.api.dependencies.repositories import (
    BookmarkRepo,
    ClientRepo,
    ExperienceRepo,
    ProjectRepo,
    UserRepo,
    get_bookmark_repository,
    get_client_repository,
    get_experience_repository,
    get_project_repository,
    get_user_repository,
)

# Services
from src.app.api.dependencies.services import (
    BookmarkServiceDep,
    ExperienceServiceDep,
    Notifications,
    ProjectServiceDep,
    StudentExperienceServiceDep,
    get_bookmark_service,
    get_experience_service,
    get_project_service,
    get_student_experience_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "AuthenticatedContext",
    "CurrentContext",
    "get_authenticated_context",
    "get_current_context",
    # Repositories
    "BookmarkRepo",
    "ClientRepo",
    "ExperienceRepo",
    "ProjectRepo",
    "UserRepo",
    "get_bookmark_repository",
    "get_client_repository",
    "get_experience_repository",
    "get_project_repository",
    "get_user_repository",
    # Services
    "BookmarkServiceDep",
    "ExperienceServiceDep",
    "Notifications",
    "ProjectServiceDep",
    "StudentExperienceServiceDep",
    "get_bookmark_service",
    "get_experience_service",
    "get_project_service",
    "get_student_experience_service",
]
