"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.app.api.dependencies.auth import CurrentContext
from src.app.api.dependencies.db import DBSession
from src.app.api.dependencies.repositories import (
    BookmarkRepo,
    ClientRepo,
    ExperienceRepo,
    ProjectRepo,
    UserRepo,
)
from src.app.core.notifications import NotificationService, get_notification_service
from src.app.services.bookmark_service import BookmarkService
from src.app.services.experience_service import ExperienceService
from src.app.services.project_service import ProjectService
from src.app.services.student_experience_service import StudentExperienceService

Notifications = Annotated[NotificationService, Depends(get_notification_service)]


def get_project_service(
    project_repo: ProjectRepo,
    client_repo: ClientRepo,
    session: DBSession,
    ctx: CurrentContext,
    notifications: Notifications,
) -> ProjectService:
    return ProjectService(project_repo, client_repo, session, ctx, notifications)


def get_bookmark_service(
    bookmark_repo: BookmarkRepo,
    project_repo: ProjectRepo,
    user_repo: UserRepo,
    session: DBSession,
    ctx: CurrentContext,
    notifications: Notifications,
) -> BookmarkService:
    return BookmarkService(bookmark_repo, project_repo, user_repo, session, ctx, notifications)


def get_experience_service(
    experience_repo: ExperienceRepo,
    session: DBSession,
    ctx: CurrentContext,
    notifications: Notifications,
) -> ExperienceService:
    return ExperienceService(experience_repo, session, ctx, notifications)


def get_student_experience_service(
    experience_service: Annotated[ExperienceService, Depends(get_experience_service)],
    experience_repo: ExperienceRepo,
    project_repo: ProjectRepo,
    ctx: CurrentContext,
) -> StudentExperienceService:
    """Student layer sharing the request's ExperienceService."""
    return StudentExperienceService(experience_service, experience_repo, project_repo, ctx)


ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
BookmarkServiceDep = Annotated[BookmarkService, Depends(get_bookmark_service)]
ExperienceServiceDep = Annotated[ExperienceService, Depends(get_experience_service)]
StudentExperienceServiceDep = Annotated[
    StudentExperienceService, Depends(get_student_experience_service)
]
