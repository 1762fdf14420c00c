"""Unit tests for StudentExperienceService."""

from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid7

import pytest

from src.app.core.context import RequestContext
from src.app.core.errors import AppError, ErrorCode
from src.app.models.enums import (
    ExperienceStatus,
    ExperienceView,
    OwnershipFilter,
    UserRole,
)
from src.app.schemas.experience import ExperienceCreate, StudentExperienceFilters
from src.app.services.experience_service import ExperienceService
from src.app.services.student_experience_service import (
    MAX_DRAFT_EXPERIENCES,
    MAX_PUBLISHED_EXPERIENCES,
    StudentExperienceService,
)
from tests.factories import ExperienceFactory, ProjectFactory

pytestmark = pytest.mark.unit


@pytest.fixture
def mock_experience_repo() -> MagicMock:
    repo = MagicMock()
    repo.add = MagicMock()
    repo.get_scoped = AsyncMock(return_value=None)
    repo.delete = AsyncMock()
    repo.list_filtered = AsyncMock(return_value=([], 0))
    repo.count_by_owner_and_status = AsyncMock(return_value=0)
    return repo


@pytest.fixture
def mock_project_repo() -> MagicMock:
    repo = MagicMock()
    repo.list_recommended = AsyncMock(return_value=[])
    return repo


def make_service(experience_repo, project_repo, session, ctx, notifications) -> StudentExperienceService:
    experiences = ExperienceService(experience_repo, session, ctx, notifications)
    return StudentExperienceService(experiences, experience_repo, project_repo, ctx)


@pytest.fixture
def service(mock_experience_repo, mock_project_repo, mock_session, student_ctx, mock_notifications):
    return make_service(
        mock_experience_repo, mock_project_repo, mock_session, student_ctx, mock_notifications
    )


def create_data() -> ExperienceCreate:
    start = datetime(2025, 2, 1)
    return ExperienceCreate(title="Capstone", start_date=start, end_date=start + timedelta(weeks=8))


class TestGetExperiences:
    async def test_grid_view_returns_cards(self, service, mock_experience_repo, user_id):
        experience = ExperienceFactory.build(
            created_by=user_id,
            overview="o" * 200,
            tags=["a", "b", "c", "d", "e"],
            matches_count=4,
        )
        mock_experience_repo.list_filtered.return_value = ([experience], 1)

        result = await service.get_experiences(StudentExperienceFilters())

        assert result.rows is None
        card = result.cards[0]
        assert len(card.summary) == 150
        assert card.skills == ["a", "b", "c", "d", "e"]
        assert card.tags == ["Draft", "+2"]
        assert card.matches_count == 4
        assert result.total == 1
        assert result.total_pages == 1

    async def test_published_card_has_no_draft_tag(self, service, mock_experience_repo, user_id):
        experience = ExperienceFactory.published(created_by=user_id, tags=["a"])
        mock_experience_repo.list_filtered.return_value = ([experience], 1)

        result = await service.get_experiences(StudentExperienceFilters())

        assert result.cards[0].tags == []

    async def test_list_view_returns_rows(self, service, mock_experience_repo, user_id):
        experience = ExperienceFactory.build(created_by=user_id)
        mock_experience_repo.list_filtered.return_value = ([experience], 1)

        result = await service.get_experiences(StudentExperienceFilters(view=ExperienceView.LIST))

        assert result.cards is None
        row = result.rows[0]
        assert row.name == experience.title
        assert row.created_by == "You"
        assert row.matches_url == f"/experiences/{experience.id}/matches"

    async def test_created_filter_scopes_to_caller(self, service, mock_experience_repo, user_id, university_id):
        filters = StudentExperienceFilters(filter=OwnershipFilter.CREATED)

        await service.get_experiences(filters)

        mock_experience_repo.list_filtered.assert_awaited_once_with(filters, university_id, user_id)

    async def test_all_filter_covers_university(self, service, mock_experience_repo, university_id):
        filters = StudentExperienceFilters(filter=OwnershipFilter.ALL)

        await service.get_experiences(filters)

        mock_experience_repo.list_filtered.assert_awaited_once_with(filters, university_id, None)

    async def test_shared_filter_is_empty(self, service, mock_experience_repo):
        result = await service.get_experiences(StudentExperienceFilters(filter=OwnershipFilter.SHARED))

        assert result.total == 0
        assert result.cards == []
        mock_experience_repo.list_filtered.assert_not_awaited()

    async def test_pagination_metadata(self, service, mock_experience_repo):
        mock_experience_repo.list_filtered.return_value = ([], 25)

        result = await service.get_experiences(StudentExperienceFilters(page=2, limit=10))

        assert result.total_pages == 3
        assert result.has_next_page is True
        assert result.has_previous_page is True

    async def test_students_only(
        self, mock_experience_repo, mock_project_repo, mock_session, client_ctx, mock_notifications
    ):
        service = make_service(
            mock_experience_repo, mock_project_repo, mock_session, client_ctx, mock_notifications
        )

        with pytest.raises(AppError) as exc_info:
            await service.get_experiences(StudentExperienceFilters())

        assert exc_info.value.code == ErrorCode.INSUFFICIENT_PERMISSIONS

    async def test_anonymous_rejected(
        self, mock_experience_repo, mock_project_repo, mock_session, anonymous_ctx, mock_notifications
    ):
        service = make_service(
            mock_experience_repo, mock_project_repo, mock_session, anonymous_ctx, mock_notifications
        )

        with pytest.raises(AppError) as exc_info:
            await service.get_experiences(StudentExperienceFilters())

        assert exc_info.value.code == ErrorCode.UNAUTHORIZED

    @pytest.mark.parametrize("filter_", list(OwnershipFilter))
    async def test_requires_university(
        self, mock_experience_repo, mock_project_repo, mock_session, mock_notifications, filter_
    ):
        ctx = RequestContext(user_id=uuid7(), role=UserRole.STUDENT)
        service = make_service(mock_experience_repo, mock_project_repo, mock_session, ctx, mock_notifications)

        with pytest.raises(AppError) as exc_info:
            await service.get_experiences(StudentExperienceFilters(filter=filter_))

        assert exc_info.value.code == ErrorCode.INSUFFICIENT_PERMISSIONS
        assert exc_info.value.message == "University context required"
        mock_experience_repo.list_filtered.assert_not_awaited()


class TestGetExperienceDetail:
    async def test_published_includes_recommendations(
        self, service, mock_experience_repo, mock_project_repo, user_id, university_id
    ):
        experience = ExperienceFactory.published(created_by=user_id)
        mock_experience_repo.get_scoped.return_value = experience
        projects = ProjectFactory.batch(3, description="x" * 300)
        mock_project_repo.list_recommended.return_value = projects

        detail = await service.get_experience_detail(experience.id)

        mock_project_repo.list_recommended.assert_awaited_once_with(university_id, 3)
        assert [p.id for p in detail.recommended_projects] == [p.id for p in projects]
        assert len(detail.recommended_projects[0].summary) == 100
        assert detail.duration.weeks == experience.duration_weeks
        assert detail.main_contact.email == "ada@example.edu"

    async def test_draft_has_no_recommendations(
        self, service, mock_experience_repo, mock_project_repo, user_id
    ):
        mock_experience_repo.get_scoped.return_value = ExperienceFactory.build(created_by=user_id)

        detail = await service.get_experience_detail(uuid7())

        assert detail.recommended_projects == []
        mock_project_repo.list_recommended.assert_not_awaited()

    async def test_owner_only(self, service, mock_experience_repo):
        mock_experience_repo.get_scoped.return_value = ExperienceFactory.published(created_by=uuid7())

        with pytest.raises(AppError) as exc_info:
            await service.get_experience_detail(uuid7())

        assert exc_info.value.code == ErrorCode.INSUFFICIENT_PERMISSIONS


class TestQuotas:
    async def test_create_below_draft_limit(self, service, mock_experience_repo, user_id):
        mock_experience_repo.count_by_owner_and_status.return_value = MAX_DRAFT_EXPERIENCES - 1

        experience = await service.create_experience(create_data())

        assert experience.status == ExperienceStatus.DRAFT.value
        mock_experience_repo.count_by_owner_and_status.assert_awaited_once_with(
            user_id, ExperienceStatus.DRAFT
        )

    async def test_create_at_draft_limit(self, service, mock_experience_repo, mock_session):
        mock_experience_repo.count_by_owner_and_status.return_value = MAX_DRAFT_EXPERIENCES

        with pytest.raises(AppError) as exc_info:
            await service.create_experience(create_data())

        assert exc_info.value.code == ErrorCode.OPERATION_NOT_ALLOWED
        assert exc_info.value.message == "Maximum draft limit reached (5)"
        mock_experience_repo.add.assert_not_called()
        mock_session.commit.assert_not_awaited()

    async def test_publish_at_published_limit(self, service, mock_experience_repo, user_id):
        experience = ExperienceFactory.build(created_by=user_id)
        mock_experience_repo.get_scoped.return_value = experience
        mock_experience_repo.count_by_owner_and_status.return_value = MAX_PUBLISHED_EXPERIENCES

        with pytest.raises(AppError) as exc_info:
            await service.publish_experience(experience.id)

        assert exc_info.value.code == ErrorCode.OPERATION_NOT_ALLOWED
        assert exc_info.value.message == "Maximum published experiences limit reached (10)"
        assert experience.status == ExperienceStatus.DRAFT.value

    async def test_publish_below_limit(self, service, mock_experience_repo, user_id):
        experience = ExperienceFactory.build(created_by=user_id)
        mock_experience_repo.get_scoped.return_value = experience
        mock_experience_repo.count_by_owner_and_status.return_value = MAX_PUBLISHED_EXPERIENCES - 1

        await service.publish_experience(experience.id)

        assert experience.status == ExperienceStatus.PUBLISHED.value

    async def test_publish_checks_owner_before_quota(self, service, mock_experience_repo):
        mock_experience_repo.get_scoped.return_value = ExperienceFactory.build(created_by=uuid7())

        with pytest.raises(AppError) as exc_info:
            await service.publish_experience(uuid7())

        assert exc_info.value.code == ErrorCode.INSUFFICIENT_PERMISSIONS
        mock_experience_repo.count_by_owner_and_status.assert_not_awaited()


class TestDelegation:
    async def test_archive(self, service, mock_experience_repo, user_id):
        experience = ExperienceFactory.published(created_by=user_id)
        mock_experience_repo.get_scoped.return_value = experience

        await service.archive_experience(experience.id)

        assert experience.status == ExperienceStatus.ARCHIVED.value

    async def test_delete_other_owner(self, service, mock_experience_repo):
        mock_experience_repo.get_scoped.return_value = ExperienceFactory.build(created_by=uuid7())

        with pytest.raises(AppError) as exc_info:
            await service.delete_experience(uuid7())

        assert exc_info.value.code == ErrorCode.INSUFFICIENT_PERMISSIONS
        mock_experience_repo.delete.assert_not_awaited()

    async def test_supervisor_cannot_list_as_student(
        self, mock_experience_repo, mock_project_repo, mock_session, mock_notifications
    ):
        ctx = RequestContext(user_id=uuid7(), role=UserRole.SUPERVISOR)
        service = make_service(mock_experience_repo, mock_project_repo, mock_session, ctx, mock_notifications)

        with pytest.raises(AppError) as exc_info:
            await service.get_experiences(StudentExperienceFilters())

        assert exc_info.value.code == ErrorCode.INSUFFICIENT_PERMISSIONS
        mock_experience_repo.list_filtered.assert_not_awaited()
