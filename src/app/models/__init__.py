"""Model exports.

Import from here: `from src.app.models import Project, Bookmark`
"""

# Enums
from src.app.models.enums import (
    ApprovalStatus,
    ExperienceStatus,
    ExperienceView,
    OwnershipFilter,
    ProjectCategory,
    ProjectDifficulty,
    ProjectStatus,
    SortOrder,
    UserRole,
)

# Tables
from src.app.models.bookmark import Bookmark
from src.app.models.experience import Experience
from src.app.models.project import Project
from src.app.models.user import Client, University, User

__all__ = [
    # Enums
    "ApprovalStatus",
    "ExperienceStatus",
    "ExperienceView",
    "OwnershipFilter",
    "ProjectCategory",
    "ProjectDifficulty",
    "ProjectStatus",
    "SortOrder",
    "UserRole",
    # Tables
    "Bookmark",
    "Client",
    "Experience",
    "Project",
    "University",
    "User",
]
