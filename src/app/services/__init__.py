from src.app.services.bookmark_service import BookmarkService
from src.app.services.experience_service import ExperienceService
from src.app.services.project_service import ProjectService
from src.app.services.student_experience_service import StudentExperienceService

__all__ = [
    "BookmarkService",
    "ExperienceService",
    "ProjectService",
    "StudentExperienceService",
]
