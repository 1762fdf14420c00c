"""Student experience endpoints.

Same lifecycle as /experiences with per-student quotas and grid/list views.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.app.api.dependencies import StudentExperienceServiceDep, get_authenticated_context
from src.app.schemas.common import OperationResult
from src.app.schemas.experience import (
    ExperienceCreate,
    ExperienceDetail,
    ExperienceRead,
    ExperienceUpdate,
    StudentExperienceFilters,
    StudentExperienceList,
)

router = APIRouter(
    prefix="/students/experiences",
    tags=["student-experiences"],
    dependencies=[Depends(get_authenticated_context)],
)


@router.get(
    "",
    response_model=StudentExperienceList,
    response_model_exclude_none=True,
    summary="List my experiences",
    description="GRID view returns cards, LIST view returns rows.",
    responses={403: {"description": "Caller is not a student"}},
)
async def list_student_experiences(
    filters: Annotated[StudentExperienceFilters, Query()],
    service: StudentExperienceServiceDep,
) -> StudentExperienceList:
    return await service.get_experiences(filters)


@router.get(
    "/{experience_id}",
    response_model=ExperienceDetail,
    summary="Get experience detail",
    description="Includes up to three recommended projects once the experience is published.",
    responses={
        403: {"description": "Not the experience owner"},
        404: {"description": "Experience not found"},
    },
)
async def get_student_experience(
    experience_id: UUID,
    service: StudentExperienceServiceDep,
) -> ExperienceDetail:
    return await service.get_experience_detail(experience_id)


@router.post(
    "",
    response_model=ExperienceRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create experience",
    responses={403: {"description": "Draft limit reached"}},
)
async def create_student_experience(
    data: ExperienceCreate,
    service: StudentExperienceServiceDep,
) -> ExperienceRead:
    experience = await service.create_experience(data)
    return ExperienceRead.model_validate(experience)


@router.patch(
    "/{experience_id}",
    response_model=ExperienceRead,
    summary="Update experience",
)
async def update_student_experience(
    experience_id: UUID,
    data: ExperienceUpdate,
    service: StudentExperienceServiceDep,
) -> ExperienceRead:
    experience = await service.update_experience(experience_id, data)
    return ExperienceRead.model_validate(experience)


@router.post(
    "/{experience_id}/publish",
    response_model=ExperienceRead,
    summary="Publish experience",
    responses={
        400: {"description": "Overview, outcomes or contact missing"},
        403: {"description": "Published limit reached"},
    },
)
async def publish_student_experience(
    experience_id: UUID,
    service: StudentExperienceServiceDep,
) -> ExperienceRead:
    experience = await service.publish_experience(experience_id)
    return ExperienceRead.model_validate(experience)


@router.post(
    "/{experience_id}/archive",
    response_model=ExperienceRead,
    summary="Archive experience",
)
async def archive_student_experience(
    experience_id: UUID,
    service: StudentExperienceServiceDep,
) -> ExperienceRead:
    experience = await service.archive_experience(experience_id)
    return ExperienceRead.model_validate(experience)


@router.delete(
    "/{experience_id}",
    response_model=OperationResult,
    summary="Delete experience",
)
async def delete_student_experience(
    experience_id: UUID,
    service: StudentExperienceServiceDep,
) -> OperationResult:
    return await service.delete_experience(experience_id)
