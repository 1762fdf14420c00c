from src.app.schemas.bookmark import (
    BookmarkCard,
    BookmarkCount,
    BookmarkCreate,
    BookmarkFilters,
    BookmarkRead,
    BookmarkSearchResult,
    BulkDeleteBookmarks,
)
from src.app.schemas.common import OperationResult
from src.app.schemas.experience import (
    ExperienceCreate,
    ExperienceDetail,
    ExperienceFilters,
    ExperienceRead,
    ExperienceUpdate,
    StudentExperienceFilters,
    StudentExperienceList,
)
from src.app.schemas.notification import NotificationHistoryParams, NotificationRead
from src.app.schemas.pagination import PageParams, PaginatedResponse
from src.app.schemas.project import (
    AssignTeamRequest,
    ProjectCreate,
    ProjectFilters,
    ProjectRead,
    ProjectUpdate,
)

__all__ = [
    # Bookmark
    "BookmarkCard",
    "BookmarkCount",
    "BookmarkCreate",
    "BookmarkFilters",
    "BookmarkRead",
    "BookmarkSearchResult",
    "BulkDeleteBookmarks",
    # Common
    "OperationResult",
    "PageParams",
    "PaginatedResponse",
    # Experience
    "ExperienceCreate",
    "ExperienceDetail",
    "ExperienceFilters",
    "ExperienceRead",
    "ExperienceUpdate",
    "StudentExperienceFilters",
    "StudentExperienceList",
    # Notification
    "NotificationHistoryParams",
    "NotificationRead",
    # Project
    "AssignTeamRequest",
    "ProjectCreate",
    "ProjectFilters",
    "ProjectRead",
    "ProjectUpdate",
]
