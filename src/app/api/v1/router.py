from fastapi import APIRouter

from src.app.api.v1 import (
    bookmarks,
    experiences,
    notifications,
    projects,
    student_experiences,
)

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(projects.router)
api_router.include_router(bookmarks.router)
api_router.include_router(experiences.router)
api_router.include_router(student_experiences.router)
api_router.include_router(notifications.router)
