"""Repository layer - data access abstraction."""

from src.app.repositories.base import BaseRepository
from src.app.repositories.bookmark_repository import BookmarkRepository
from src.app.repositories.experience_repository import ExperienceRepository
from src.app.repositories.project_repository import ProjectRepository
from src.app.repositories.user_repository import ClientRepository, UserRepository

__all__ = [
    "BaseRepository",
    "BookmarkRepository",
    "ClientRepository",
    "ExperienceRepository",
    "ProjectRepository",
    "UserRepository",
]
