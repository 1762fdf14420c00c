"""Unit tests for BookmarkService."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid7

import pytest
from sqlalchemy.exc import IntegrityError

from src.app.core.errors import AppError, ErrorCode
from src.app.core.notifications import NotificationType
from src.app.schemas.bookmark import BookmarkFilters
from src.app.services.bookmark_service import MAX_BOOKMARKS_PER_STUDENT, BookmarkService
from tests.factories import BookmarkFactory, ProjectFactory

pytestmark = pytest.mark.unit


@pytest.fixture
def mock_bookmark_repo() -> MagicMock:
    repo = MagicMock()
    repo.add = MagicMock()
    repo.get_scoped = AsyncMock(return_value=None)
    repo.get_by_student_and_project = AsyncMock(return_value=None)
    repo.count_for_student = AsyncMock(return_value=0)
    repo.list_with_projects = AsyncMock(return_value=([], 0))
    repo.list_owned = AsyncMock(return_value=[])
    repo.delete = AsyncMock()
    repo.delete_many = AsyncMock()
    repo.search_ids = AsyncMock(return_value=[])
    return repo


@pytest.fixture
def project():
    return ProjectFactory.published()


@pytest.fixture
def mock_project_repo(project) -> MagicMock:
    repo = MagicMock()
    repo.get_scoped = AsyncMock(return_value=project)
    return repo


@pytest.fixture
def mock_user_repo() -> MagicMock:
    repo = MagicMock()
    repo.get_names = AsyncMock(return_value={})
    return repo


@pytest.fixture
def service(
    mock_bookmark_repo, mock_project_repo, mock_user_repo, mock_session, student_ctx, mock_notifications
) -> BookmarkService:
    return BookmarkService(
        mock_bookmark_repo,
        mock_project_repo,
        mock_user_repo,
        mock_session,
        student_ctx,
        mock_notifications,
    )


class TestCreate:
    async def test_creates_bookmark(self, service, mock_bookmark_repo, mock_session, project, user_id):
        bookmark = await service.create(project.id)

        assert bookmark.student_id == user_id
        assert bookmark.project_id == project.id
        mock_bookmark_repo.add.assert_called_once_with(bookmark)
        mock_session.commit.assert_awaited_once()

    async def test_sets_university_from_context(self, service, project, university_id):
        bookmark = await service.create(project.id)

        assert bookmark.university_id == university_id

    async def test_pushes_success_notification(self, service, mock_notifications, project):
        await service.create(project.id)

        mock_notifications.push.assert_awaited_once()
        type_, message, _ = mock_notifications.push.await_args.args
        assert type_ == NotificationType.SUCCESS
        assert message == "Saved to bookmarks"

    async def test_notifies_sharer(self, service, mock_notifications, project):
        sharer = uuid7()

        await service.create(project.id, shared_by=sharer)

        assert mock_notifications.push.await_count == 2
        type_, message, context = mock_notifications.push.await_args_list[1].args
        assert type_ == NotificationType.INFO
        assert message == "Student saved your shared project"
        assert context["recipient_id"] == str(sharer)

    async def test_project_not_found(self, service, mock_project_repo, mock_bookmark_repo):
        mock_project_repo.get_scoped.return_value = None

        with pytest.raises(AppError) as exc_info:
            await service.create(uuid7())

        assert exc_info.value.code == ErrorCode.RESOURCE_NOT_FOUND
        assert exc_info.value.message == "Project not found"
        mock_bookmark_repo.add.assert_not_called()

    async def test_already_bookmarked(self, service, mock_bookmark_repo, project):
        mock_bookmark_repo.get_by_student_and_project.return_value = BookmarkFactory.build()

        with pytest.raises(AppError) as exc_info:
            await service.create(project.id)

        assert exc_info.value.code == ErrorCode.ALREADY_EXISTS
        assert exc_info.value.message == "Project already bookmarked"

    async def test_limit_reached(self, service, mock_bookmark_repo, mock_session, project):
        mock_bookmark_repo.count_for_student.return_value = MAX_BOOKMARKS_PER_STUDENT

        with pytest.raises(AppError) as exc_info:
            await service.create(project.id)

        assert exc_info.value.code == ErrorCode.OPERATION_NOT_ALLOWED
        assert exc_info.value.message == "Maximum bookmark limit reached (100)"
        mock_session.commit.assert_not_awaited()

    async def test_below_limit_is_allowed(self, service, mock_bookmark_repo, project):
        mock_bookmark_repo.count_for_student.return_value = MAX_BOOKMARKS_PER_STUDENT - 1

        bookmark = await service.create(project.id)

        assert bookmark is not None

    async def test_concurrent_duplicate_maps_to_already_exists(self, service, mock_session, project):
        mock_session.commit.side_effect = IntegrityError("INSERT", {}, Exception("duplicate"))

        with pytest.raises(AppError) as exc_info:
            await service.create(project.id)

        assert exc_info.value.code == ErrorCode.ALREADY_EXISTS
        mock_session.rollback.assert_awaited_once()

    async def test_notification_failure_keeps_bookmark(self, service, mock_notifications, project):
        mock_notifications.push.side_effect = RuntimeError("hub down")

        bookmark = await service.create(project.id)

        assert bookmark.project_id == project.id

    async def test_requires_authentication(
        self, mock_bookmark_repo, mock_project_repo, mock_user_repo, mock_session, anonymous_ctx, mock_notifications
    ):
        service = BookmarkService(
            mock_bookmark_repo,
            mock_project_repo,
            mock_user_repo,
            mock_session,
            anonymous_ctx,
            mock_notifications,
        )

        with pytest.raises(AppError) as exc_info:
            await service.create(uuid7())

        assert exc_info.value.code == ErrorCode.UNAUTHORIZED


class TestFindAll:
    async def test_returns_cards_with_page_metadata(self, service, mock_bookmark_repo, user_id):
        project = ProjectFactory.published(
            description="d" * 300,
            required_skills=["a", "b", "c", "d", "e", "f", "g"],
            tags=["t1", "t2", "t3", "t4", "t5"],
        )
        bookmark = BookmarkFactory.build(student_id=user_id, project_id=project.id)
        mock_bookmark_repo.list_with_projects.return_value = ([(bookmark, project)], 11)

        page = await service.find_all(BookmarkFilters(page=1, limit=10))

        assert page.total == 11
        assert page.total_pages == 2
        assert page.has_next_page is True
        assert page.has_previous_page is False
        card = page.items[0]
        assert card.id == bookmark.id
        assert card.project_id == project.id
        assert card.summary == project.description[:150] + "..."
        assert card.skills == ["a", "b", "c", "d", "e", "f"]
        assert card.tags == ["t1", "t2", "t3", "+2"]
        assert card.status == "ACTIVE"
        assert card.shared_by is None

    async def test_resolves_sharer_names(self, service, mock_bookmark_repo, mock_user_repo):
        sharer = uuid7()
        project = ProjectFactory.published()
        bookmark = BookmarkFactory.build(project_id=project.id, shared_by=sharer)
        mock_bookmark_repo.list_with_projects.return_value = ([(bookmark, project)], 1)
        mock_user_repo.get_names.return_value = {sharer: "Grace Hopper"}

        page = await service.find_all(BookmarkFilters())

        assert page.items[0].shared_by.id == sharer
        assert page.items[0].shared_by.name == "Grace Hopper"


class TestFindOneAndRemove:
    async def test_not_found(self, service):
        with pytest.raises(AppError) as exc_info:
            await service.find_one(uuid7())

        assert exc_info.value.code == ErrorCode.RESOURCE_NOT_FOUND
        assert exc_info.value.message == "Bookmark not found"

    async def test_other_students_bookmark(self, service, mock_bookmark_repo):
        mock_bookmark_repo.get_scoped.return_value = BookmarkFactory.build(student_id=uuid7())

        with pytest.raises(AppError) as exc_info:
            await service.find_one(uuid7())

        assert exc_info.value.code == ErrorCode.INSUFFICIENT_PERMISSIONS

    async def test_remove(self, service, mock_bookmark_repo, mock_session, mock_notifications, user_id):
        bookmark = BookmarkFactory.build(student_id=user_id)
        mock_bookmark_repo.get_scoped.return_value = bookmark

        result = await service.remove(bookmark.id)

        assert result.success is True
        mock_bookmark_repo.delete.assert_awaited_once_with(bookmark)
        mock_session.commit.assert_awaited_once()
        assert mock_notifications.push.await_args.args[1] == "Removed from bookmarks"

    async def test_remove_notifies_sharer(self, service, mock_bookmark_repo, mock_notifications, user_id):
        sharer = uuid7()
        bookmark = BookmarkFactory.build(student_id=user_id, shared_by=sharer)
        mock_bookmark_repo.get_scoped.return_value = bookmark

        await service.remove(bookmark.id)

        messages = [c.args[1] for c in mock_notifications.push.await_args_list]
        assert messages == ["Student removed your shared bookmark", "Removed from bookmarks"]

    async def test_remove_by_project_id(self, service, mock_bookmark_repo, user_id):
        bookmark = BookmarkFactory.build(student_id=user_id)
        mock_bookmark_repo.get_by_student_and_project.return_value = bookmark

        await service.remove_by_project_id(bookmark.project_id)

        mock_bookmark_repo.delete.assert_awaited_once_with(bookmark)

    async def test_remove_by_project_id_not_found(self, service):
        with pytest.raises(AppError) as exc_info:
            await service.remove_by_project_id(uuid7())

        assert exc_info.value.code == ErrorCode.RESOURCE_NOT_FOUND


class TestBulkDelete:
    async def test_deletes_all_owned(self, service, mock_bookmark_repo, mock_notifications, user_id):
        bookmarks = BookmarkFactory.batch(3, student_id=user_id)
        mock_bookmark_repo.list_owned.return_value = bookmarks

        result = await service.bulk_delete([b.id for b in bookmarks])

        assert result.deleted_count == 3
        assert result.message == "3 bookmarks removed successfully"
        mock_bookmark_repo.delete_many.assert_awaited_once_with([b.id for b in bookmarks])
        assert mock_notifications.push.await_args.args[1] == "3 bookmarks removed successfully"

    async def test_any_foreign_id_deletes_nothing(self, service, mock_bookmark_repo, mock_session, user_id):
        owned = BookmarkFactory.batch(2, student_id=user_id)
        mock_bookmark_repo.list_owned.return_value = owned

        with pytest.raises(AppError) as exc_info:
            await service.bulk_delete([owned[0].id, owned[1].id, uuid7()])

        assert exc_info.value.code == ErrorCode.INVALID_INPUT
        assert exc_info.value.message == "Some bookmark IDs are invalid or do not belong to you"
        mock_bookmark_repo.delete_many.assert_not_awaited()
        mock_session.commit.assert_not_awaited()

    @pytest.mark.parametrize("count", [0, 101])
    async def test_rejects_bad_sizes(self, service, count):
        with pytest.raises(AppError) as exc_info:
            await service.bulk_delete([uuid7() for _ in range(count)])

        assert exc_info.value.code == ErrorCode.INVALID_INPUT


class TestSearchAndCount:
    async def test_search(self, service, mock_bookmark_repo, user_id, university_id):
        ids = [uuid7()]
        mock_bookmark_repo.search_ids.return_value = ids

        result = await service.search("pipeline")

        assert result.bookmark_ids == ids
        mock_bookmark_repo.search_ids.assert_awaited_once_with(user_id, "pipeline", university_id)

    async def test_count(self, service, mock_bookmark_repo):
        mock_bookmark_repo.count_for_student.return_value = 7

        assert await service.get_count() == 7

    async def test_count_anonymous_is_zero(
        self, mock_bookmark_repo, mock_project_repo, mock_user_repo, mock_session, anonymous_ctx, mock_notifications
    ):
        service = BookmarkService(
            mock_bookmark_repo,
            mock_project_repo,
            mock_user_repo,
            mock_session,
            anonymous_ctx,
            mock_notifications,
        )

        assert await service.get_count() == 0
        mock_bookmark_repo.count_for_student.assert_not_awaited()
