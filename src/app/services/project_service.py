"""Project service - client project lifecycle."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.app.core.context import RequestContext
from src.app.core.errors import AppError, ErrorCode
from src.app.core.logging import get_logger
from src.app.core.notifications import NotificationService, NotificationType
from src.app.models import ApprovalStatus, Client, Project, ProjectStatus, UserRole
from src.app.models.base import utc_now
from src.app.repositories import ClientRepository, ProjectRepository
from src.app.schemas.common import OperationResult
from src.app.schemas.pagination import PageParams, PaginatedResponse
from src.app.schemas.project import ProjectCreate, ProjectFilters, ProjectRead, ProjectUpdate
from src.app.services.base import DomainService

logger = get_logger(__name__)


class ProjectService(DomainService):
    """Create, review, publish and assign projects."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        client_repo: ClientRepository,
        session: AsyncSession,
        ctx: RequestContext,
        notifications: NotificationService,
    ):
        super().__init__(session, ctx, notifications)
        self.project_repo = project_repo
        self.client_repo = client_repo

    async def _require_client(self, user_id: UUID, action: str) -> Client:
        client = await self.client_repo.get_by_user_id(user_id)
        if client is None:
            raise AppError(ErrorCode.INSUFFICIENT_PERMISSIONS, f"Only clients can {action}")
        return client

    async def _get_owned(self, project_id: UUID, verb: str) -> Project:
        user_id = self.ctx.require_user_id()
        project = await self.find_by_id(project_id)
        if project.created_by != user_id:
            raise AppError(
                ErrorCode.INSUFFICIENT_PERMISSIONS,
                f"You can only {verb} your own projects",
            )
        return project

    async def create(self, data: ProjectCreate) -> Project:
        """Create a draft project pending review.

        Raises:
            AppError: UNAUTHORIZED without a caller, INSUFFICIENT_PERMISSIONS
                if the caller has no client profile.
        """
        user_id = self.ctx.require_user_id()
        client = await self._require_client(user_id, "create projects")

        project = Project(
            **data.model_dump(exclude={"organization", "organization_logo_url"}),
            client_id=client.id,
            university_id=self.ctx.university_id,
            created_by=user_id,
            organization=data.organization or client.organization,
            organization_logo_url=data.organization_logo_url or client.organization_logo_url,
            status=ProjectStatus.DRAFT.value,
            approval_status=ApprovalStatus.PENDING.value,
            is_published=False,
        )
        self.project_repo.add(project)
        await self._commit(project)

        logger.info("Project created", project_id=str(project.id), client_id=str(client.id))
        await self._notify(
            NotificationType.SUCCESS,
            "Project created successfully! It will be reviewed before publishing.",
            {"project_id": str(project.id)},
        )
        return project

    async def find_by_id(self, project_id: UUID) -> Project:
        """Get a project within the caller's university, without side effects."""
        project = await self.project_repo.get_scoped(project_id, self.ctx.university_id)
        if project is None:
            raise AppError(
                ErrorCode.RESOURCE_NOT_FOUND,
                "Project not found",
                {"project_id": str(project_id)},
            )
        return project

    async def find_one(self, project_id: UUID) -> Project:
        """Get a project and count the view."""
        project = await self.find_by_id(project_id)
        project.view_count = (project.view_count or 0) + 1
        await self._commit(project)
        return project

    async def find_all(self, filters: ProjectFilters) -> PaginatedResponse[ProjectRead]:
        items, total = await self.project_repo.list_filtered(filters, self.ctx.university_id)
        return PaginatedResponse[ProjectRead].build(
            [ProjectRead.model_validate(p) for p in items], total, filters.page, filters.limit
        )

    async def update(self, project_id: UUID, data: ProjectUpdate) -> Project:
        project = await self._get_owned(project_id, "update")

        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(project, field, value)
        project.updated_at = utc_now()
        await self._commit(project)

        await self._notify(
            NotificationType.SUCCESS,
            "Project updated successfully",
            {"project_id": str(project_id)},
        )
        return project

    async def remove(self, project_id: UUID) -> OperationResult:
        project = await self._get_owned(project_id, "delete")
        if project.assigned_team_id is not None:
            raise AppError(
                ErrorCode.OPERATION_NOT_ALLOWED,
                "Cannot delete a project that is assigned to a team",
                {"project_id": str(project_id)},
            )

        await self.project_repo.delete(project)
        await self._commit()

        logger.info("Project deleted", project_id=str(project_id))
        await self._notify(
            NotificationType.INFO,
            "Project deleted successfully",
            {"project_id": str(project_id)},
        )
        return OperationResult(message="Project deleted")

    async def publish(self, project_id: UUID) -> Project:
        project = await self._get_owned(project_id, "publish")
        if project.approval_status != ApprovalStatus.APPROVED.value:
            raise AppError(
                ErrorCode.OPERATION_NOT_ALLOWED,
                "Project must be approved before publishing",
                {"project_id": str(project_id), "approval_status": project.approval_status},
            )

        now = utc_now()
        project.status = ProjectStatus.PUBLISHED.value
        project.is_published = True
        project.published_at = now
        project.updated_at = now
        await self._commit(project)

        await self._notify(
            NotificationType.SUCCESS,
            "Project published successfully! Students can now view and apply.",
            {"project_id": str(project_id)},
        )
        return project

    async def approve(self, project_id: UUID) -> Project:
        """Approve a project for publishing. Supervisors and admins only."""
        user_id = self.ctx.require_role(UserRole.SUPERVISOR, UserRole.ADMIN)
        project = await self.find_by_id(project_id)

        now = utc_now()
        project.approval_status = ApprovalStatus.APPROVED.value
        project.approved_by = user_id
        project.approved_at = now
        project.updated_at = now
        await self._commit(project)

        logger.info("Project approved", project_id=str(project_id), approved_by=str(user_id))
        await self._notify(
            NotificationType.SUCCESS,
            "Project approved! Client can now publish it.",
            {"project_id": str(project_id)},
        )
        return project

    async def assign_team(self, project_id: UUID, team_id: UUID) -> Project:
        self.ctx.require_user_id()
        project = await self.find_by_id(project_id)
        if project.assigned_team_id is not None:
            raise AppError(
                ErrorCode.OPERATION_NOT_ALLOWED,
                "Project is already assigned to a team",
                {"project_id": str(project_id)},
            )

        now = utc_now()
        project.assigned_team_id = team_id
        project.assigned_at = now
        project.status = ProjectStatus.IN_PROGRESS.value
        project.updated_at = now
        await self._commit(project)

        await self._notify(
            NotificationType.SUCCESS,
            "Team assigned to project successfully!",
            {"project_id": str(project_id), "team_id": str(team_id)},
        )
        return project

    async def get_my_projects(self, params: PageParams) -> PaginatedResponse[ProjectRead]:
        """List the calling client's projects, newest first."""
        user_id = self.ctx.require_user_id()
        client = await self._require_client(user_id, "view their projects")

        items, total = await self.project_repo.list_by_client(client.id, params.offset, params.limit)
        return PaginatedResponse[ProjectRead].build(
            [ProjectRead.model_validate(p) for p in items], total, params.page, params.limit
        )
