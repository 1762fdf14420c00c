"""Experience endpoints - course experiences offered to the marketplace."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.app.api.dependencies import ExperienceServiceDep, get_authenticated_context
from src.app.schemas.common import OperationResult
from src.app.schemas.experience import (
    ExperienceCreate,
    ExperienceFilters,
    ExperienceRead,
    ExperienceUpdate,
)
from src.app.schemas.pagination import PaginatedResponse

router = APIRouter(
    prefix="/experiences",
    tags=["experiences"],
    dependencies=[Depends(get_authenticated_context)],
)


@router.get(
    "",
    response_model=PaginatedResponse[ExperienceRead],
    summary="List experiences",
    description="Experiences of the caller's university. Sortable by created_at or title.",
)
async def list_experiences(
    filters: Annotated[ExperienceFilters, Query()],
    service: ExperienceServiceDep,
) -> PaginatedResponse[ExperienceRead]:
    return await service.find_all(filters)


@router.get(
    "/{experience_id}",
    response_model=ExperienceRead,
    summary="Get experience",
    responses={404: {"description": "Experience not found"}},
)
async def get_experience(experience_id: UUID, service: ExperienceServiceDep) -> ExperienceRead:
    experience = await service.find_by_id(experience_id)
    return ExperienceRead.model_validate(experience)


@router.post(
    "",
    response_model=ExperienceRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create experience",
    responses={201: {"description": "Experience created as a draft"}},
)
async def create_experience(data: ExperienceCreate, service: ExperienceServiceDep) -> ExperienceRead:
    experience = await service.create(data)
    return ExperienceRead.model_validate(experience)


@router.patch(
    "/{experience_id}",
    response_model=ExperienceRead,
    summary="Update experience",
    responses={
        403: {"description": "Not the experience owner"},
        404: {"description": "Experience not found"},
    },
)
async def update_experience(
    experience_id: UUID,
    data: ExperienceUpdate,
    service: ExperienceServiceDep,
) -> ExperienceRead:
    experience = await service.update(experience_id, data)
    return ExperienceRead.model_validate(experience)


@router.post(
    "/{experience_id}/publish",
    response_model=ExperienceRead,
    summary="Publish experience",
    responses={400: {"description": "Overview, outcomes or contact missing"}},
)
async def publish_experience(experience_id: UUID, service: ExperienceServiceDep) -> ExperienceRead:
    experience = await service.publish(experience_id)
    return ExperienceRead.model_validate(experience)


@router.post(
    "/{experience_id}/archive",
    response_model=ExperienceRead,
    summary="Archive experience",
)
async def archive_experience(experience_id: UUID, service: ExperienceServiceDep) -> ExperienceRead:
    experience = await service.archive(experience_id)
    return ExperienceRead.model_validate(experience)


@router.delete(
    "/{experience_id}",
    response_model=OperationResult,
    summary="Delete experience",
    responses={403: {"description": "Only drafts can be deleted"}},
)
async def delete_experience(experience_id: UUID, service: ExperienceServiceDep) -> OperationResult:
    return await service.delete(experience_id)
