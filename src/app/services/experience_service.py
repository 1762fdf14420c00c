"""Experience service - core experience CRUD and status transitions."""

import math
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.app.core.context import RequestContext
from src.app.core.errors import AppError, ErrorCode
from src.app.core.logging import get_logger
from src.app.core.notifications import NotificationService, NotificationType
from src.app.models import Experience, ExperienceStatus
from src.app.models.base import utc_now
from src.app.repositories import ExperienceRepository
from src.app.schemas.common import OperationResult
from src.app.schemas.experience import (
    ExperienceCreate,
    ExperienceFilters,
    ExperienceRead,
    ExperienceUpdate,
)
from src.app.schemas.pagination import PaginatedResponse
from src.app.services.base import DomainService

logger = get_logger(__name__)


class ExperienceService(DomainService):
    """Experience lifecycle: DRAFT -> PUBLISHED -> ARCHIVED."""

    def __init__(
        self,
        experience_repo: ExperienceRepository,
        session: AsyncSession,
        ctx: RequestContext,
        notifications: NotificationService,
    ):
        super().__init__(session, ctx, notifications)
        self.experience_repo = experience_repo

    async def _get_owned(self, experience_id: UUID, verb: str) -> Experience:
        user_id = self.ctx.require_user_id()
        experience = await self.find_by_id(experience_id)
        if experience.created_by != user_id:
            raise AppError(
                ErrorCode.INSUFFICIENT_PERMISSIONS,
                f"You can only {verb} your own experiences",
            )
        return experience

    async def create(self, data: ExperienceCreate) -> Experience:
        """Create a DRAFT experience owned by the caller.

        duration_weeks defaults to the date range rounded up to whole weeks.
        """
        user_id = self.ctx.require_user_id()

        duration_weeks = data.duration_weeks
        if duration_weeks is None:
            duration_weeks = math.ceil((data.end_date - data.start_date).days / 7)

        experience = Experience(
            **data.model_dump(exclude={"duration_weeks", "main_contact"}),
            main_contact=data.main_contact.model_dump() if data.main_contact else None,
            duration_weeks=duration_weeks,
            created_by=user_id,
            university_id=self.ctx.university_id,
            status=ExperienceStatus.DRAFT.value,
        )
        self.experience_repo.add(experience)
        await self._commit(experience)

        logger.info("Experience created", experience_id=str(experience.id))
        await self._notify(
            NotificationType.SUCCESS,
            "Experience created successfully",
            {"experience_id": str(experience.id)},
        )
        return experience

    async def find_all(
        self,
        filters: ExperienceFilters,
        created_by: UUID | None = None,
    ) -> PaginatedResponse[ExperienceRead]:
        items, total = await self.experience_repo.list_filtered(
            filters, self.ctx.university_id, created_by
        )
        return PaginatedResponse[ExperienceRead].build(
            [ExperienceRead.model_validate(e) for e in items], total, filters.page, filters.limit
        )

    async def find_by_id(self, experience_id: UUID) -> Experience:
        experience = await self.experience_repo.get_scoped(experience_id, self.ctx.university_id)
        if experience is None:
            raise AppError(
                ErrorCode.RESOURCE_NOT_FOUND,
                "Experience not found",
                {"experience_id": str(experience_id)},
            )
        return experience

    async def update(self, experience_id: UUID, data: ExperienceUpdate) -> Experience:
        experience = await self._get_owned(experience_id, "update")

        changes = data.model_dump(exclude_unset=True)
        start = changes.get("start_date", experience.start_date)
        end = changes.get("end_date", experience.end_date)
        if end <= start:
            raise AppError(ErrorCode.INVALID_INPUT, "end_date must be after start_date")

        for field, value in changes.items():
            setattr(experience, field, value)
        experience.updated_at = utc_now()
        await self._commit(experience)

        await self._notify(
            NotificationType.SUCCESS,
            "Experience updated successfully",
            {"experience_id": str(experience_id)},
        )
        return experience

    async def publish(self, experience_id: UUID) -> Experience:
        """Publish an experience.

        Raises:
            AppError: INVALID_INPUT unless overview, expected outcomes and a
                main contact are all present.
        """
        experience = await self._get_owned(experience_id, "publish")
        if not (experience.overview and experience.expected_outcomes and experience.main_contact):
            raise AppError(
                ErrorCode.INVALID_INPUT,
                "Experience must have overview, outcomes, and contact before publishing",
                {"experience_id": str(experience_id)},
            )

        now = utc_now()
        experience.status = ExperienceStatus.PUBLISHED.value
        experience.published_at = now
        experience.updated_at = now
        await self._commit(experience)

        await self._notify(
            NotificationType.SUCCESS,
            "Experience published successfully",
            {"experience_id": str(experience_id)},
        )
        return experience

    async def archive(self, experience_id: UUID) -> Experience:
        experience = await self._get_owned(experience_id, "archive")

        now = utc_now()
        experience.status = ExperienceStatus.ARCHIVED.value
        experience.archived_at = now
        experience.updated_at = now
        await self._commit(experience)

        await self._notify(
            NotificationType.INFO,
            "Experience archived",
            {"experience_id": str(experience_id)},
        )
        return experience

    async def delete(self, experience_id: UUID) -> OperationResult:
        experience = await self._get_owned(experience_id, "delete")
        if experience.status != ExperienceStatus.DRAFT.value:
            raise AppError(
                ErrorCode.OPERATION_NOT_ALLOWED,
                "Only draft experiences can be deleted",
                {"experience_id": str(experience_id), "status": experience.status},
            )

        await self.experience_repo.delete(experience)
        await self._commit()

        logger.info("Experience deleted", experience_id=str(experience_id))
        await self._notify(
            NotificationType.INFO,
            "Experience deleted",
            {"experience_id": str(experience_id)},
        )
        return OperationResult(message="Experience deleted")
