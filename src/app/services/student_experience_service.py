"""Student-facing experience operations.

Adds per-student quotas and card/row shaping on top of ExperienceService.
"""

from uuid import UUID

from src.app.core.context import RequestContext
from src.app.core.errors import AppError, ErrorCode
from src.app.core.logging import get_logger
from src.app.models import (
    Experience,
    ExperienceStatus,
    ExperienceView,
    OwnershipFilter,
    Project,
    UserRole,
)
from src.app.repositories import ExperienceRepository, ProjectRepository
from src.app.schemas.common import OperationResult
from src.app.schemas.experience import (
    ExperienceCard,
    ExperienceCreate,
    ExperienceDetail,
    ExperienceDuration,
    ExperienceRead,
    ExperienceRow,
    ExperienceUpdate,
    MainContact,
    RecommendedProject,
    StudentExperienceFilters,
    StudentExperienceList,
)
from src.app.services.experience_service import ExperienceService
from src.app.services.formatting import MAX_VISIBLE_TAGS, summarize

logger = get_logger(__name__)

MAX_DRAFT_EXPERIENCES = 5
MAX_PUBLISHED_EXPERIENCES = 10
RECOMMENDED_PROJECTS_LIMIT = 3


class StudentExperienceService:
    """Experience operations for the calling student."""

    def __init__(
        self,
        experience_service: ExperienceService,
        experience_repo: ExperienceRepository,
        project_repo: ProjectRepository,
        ctx: RequestContext,
    ):
        self.experiences = experience_service
        self.experience_repo = experience_repo
        self.project_repo = project_repo
        self.ctx = ctx

    async def _get_owned(self, experience_id: UUID, verb: str) -> Experience:
        student_id = self.ctx.require_user_id()
        experience = await self.experiences.find_by_id(experience_id)
        if experience.created_by != student_id:
            raise AppError(
                ErrorCode.INSUFFICIENT_PERMISSIONS,
                f"You can only {verb} your own experiences",
            )
        return experience

    async def get_experiences(self, filters: StudentExperienceFilters) -> StudentExperienceList:
        """List the student's experiences as cards (GRID) or rows (LIST).

        Nothing is shared with students yet, so SHARED is always empty.
        """
        student_id = self.ctx.require_role(UserRole.STUDENT)
        self.ctx.require_university_id()

        if filters.filter == OwnershipFilter.SHARED:
            items: list[ExperienceRead] = []
            total = 0
        else:
            created_by = student_id if filters.filter == OwnershipFilter.CREATED else None
            page = await self.experiences.find_all(filters, created_by=created_by)
            items, total = page.items, page.total

        result = StudentExperienceList(
            total=total,
            page=filters.page,
            limit=filters.limit,
            total_pages=-(-total // filters.limit),
            has_next_page=filters.page * filters.limit < total,
            has_previous_page=filters.page > 1,
        )
        if filters.view == ExperienceView.GRID:
            result.cards = [self._to_card(e) for e in items]
        else:
            result.rows = [self._to_row(e, student_id) for e in items]
        return result

    async def get_experience_detail(self, experience_id: UUID) -> ExperienceDetail:
        """Owner-only detail view with recommended projects once published."""
        experience = await self._get_owned(experience_id, "view")

        recommended: list[Project] = []
        if experience.status == ExperienceStatus.PUBLISHED.value:
            recommended = await self.project_repo.list_recommended(
                self.ctx.university_id, RECOMMENDED_PROJECTS_LIMIT
            )
        return self._to_detail(experience, recommended)

    async def create_experience(self, data: ExperienceCreate) -> Experience:
        student_id = self.ctx.require_user_id()

        drafts = await self.experience_repo.count_by_owner_and_status(
            student_id, ExperienceStatus.DRAFT
        )
        if drafts >= MAX_DRAFT_EXPERIENCES:
            raise AppError(
                ErrorCode.OPERATION_NOT_ALLOWED,
                f"Maximum draft limit reached ({MAX_DRAFT_EXPERIENCES})",
                {"current_drafts": drafts},
            )
        return await self.experiences.create(data)

    async def update_experience(self, experience_id: UUID, data: ExperienceUpdate) -> Experience:
        await self._get_owned(experience_id, "update")
        return await self.experiences.update(experience_id, data)

    async def publish_experience(self, experience_id: UUID) -> Experience:
        student_id = self.ctx.require_user_id()
        await self._get_owned(experience_id, "publish")

        published = await self.experience_repo.count_by_owner_and_status(
            student_id, ExperienceStatus.PUBLISHED
        )
        if published >= MAX_PUBLISHED_EXPERIENCES:
            raise AppError(
                ErrorCode.OPERATION_NOT_ALLOWED,
                f"Maximum published experiences limit reached ({MAX_PUBLISHED_EXPERIENCES})",
                {"current_published": published},
            )
        return await self.experiences.publish(experience_id)

    async def archive_experience(self, experience_id: UUID) -> Experience:
        await self._get_owned(experience_id, "archive")
        return await self.experiences.archive(experience_id)

    async def delete_experience(self, experience_id: UUID) -> OperationResult:
        await self._get_owned(experience_id, "delete")
        return await self.experiences.delete(experience_id)

    @staticmethod
    def _card_tags(experience: ExperienceRead) -> list[str]:
        tags = []
        if experience.status == ExperienceStatus.DRAFT.value:
            tags.append("Draft")
        if experience.tags and len(experience.tags) > MAX_VISIBLE_TAGS:
            tags.append(f"+{len(experience.tags) - MAX_VISIBLE_TAGS}")
        return tags

    def _to_card(self, experience: ExperienceRead) -> ExperienceCard:
        return ExperienceCard(
            id=experience.id,
            title=experience.title,
            course_code=experience.course_code,
            summary=summarize(experience.overview),
            skills=experience.tags or [],
            status=experience.status,
            start_date=experience.start_date,
            end_date=experience.end_date,
            matches_count=experience.matches_count or 0,
            tags=self._card_tags(experience),
        )

    @staticmethod
    def _to_row(experience: ExperienceRead, student_id: UUID) -> ExperienceRow:
        return ExperienceRow(
            id=experience.id,
            name=experience.title,
            status=experience.status,
            created_by="You" if experience.created_by == student_id else str(experience.created_by),
            created_at=experience.created_at,
            end_date=experience.end_date,
            matches_url=f"/experiences/{experience.id}/matches",
        )

    @staticmethod
    def _to_detail(experience: Experience, recommended: list[Project]) -> ExperienceDetail:
        return ExperienceDetail(
            id=experience.id,
            title=experience.title,
            course_code=experience.course_code,
            duration=ExperienceDuration(
                start=experience.start_date,
                end=experience.end_date,
                weeks=experience.duration_weeks or 0,
            ),
            tags=experience.tags or [],
            status=experience.status,
            overview=experience.overview or "",
            prerequisites=experience.prerequisites or [],
            expected_outcomes=experience.expected_outcomes or [],
            main_contact=MainContact.model_validate(experience.main_contact)
            if experience.main_contact
            else None,
            recommended_projects=[
                RecommendedProject(
                    id=p.id,
                    title=p.title,
                    organization=p.organization or "Unknown",
                    summary=summarize(p.description, 100),
                    skills=p.required_skills or [],
                    difficulty=p.difficulty,
                )
                for p in recommended
            ],
        )
