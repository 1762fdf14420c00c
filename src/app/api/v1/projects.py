"""Project endpoints - marketplace listings posted by clients."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.app.api.dependencies import ProjectServiceDep, get_authenticated_context
from src.app.schemas.common import OperationResult
from src.app.schemas.pagination import PageParams, PaginatedResponse
from src.app.schemas.project import (
    AssignTeamRequest,
    ProjectCreate,
    ProjectFilters,
    ProjectRead,
    ProjectUpdate,
)

router = APIRouter(
    prefix="/projects",
    tags=["projects"],
    dependencies=[Depends(get_authenticated_context)],
)


@router.get(
    "",
    response_model=PaginatedResponse[ProjectRead],
    summary="List projects",
    description="List projects of the caller's university with search, filters and sorting.",
)
async def list_projects(
    filters: Annotated[ProjectFilters, Query()],
    service: ProjectServiceDep,
) -> PaginatedResponse[ProjectRead]:
    return await service.find_all(filters)


@router.get(
    "/me",
    response_model=PaginatedResponse[ProjectRead],
    summary="List my projects",
    description="Projects owned by the calling client.",
    responses={403: {"description": "Caller is not a client"}},
)
async def list_my_projects(
    params: Annotated[PageParams, Query()],
    service: ProjectServiceDep,
) -> PaginatedResponse[ProjectRead]:
    return await service.get_my_projects(params)


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get project",
    description="Get a project by ID. Counts as a view.",
    responses={404: {"description": "Project not found"}},
)
async def get_project(project_id: UUID, service: ProjectServiceDep) -> ProjectRead:
    project = await service.find_one(project_id)
    return ProjectRead.model_validate(project)


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    responses={
        201: {"description": "Project created as a draft pending approval"},
        403: {"description": "Caller is not a client"},
    },
)
async def create_project(data: ProjectCreate, service: ProjectServiceDep) -> ProjectRead:
    project = await service.create(data)
    return ProjectRead.model_validate(project)


@router.patch(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Update project",
    responses={
        403: {"description": "Not the project owner"},
        404: {"description": "Project not found"},
    },
)
async def update_project(
    project_id: UUID,
    data: ProjectUpdate,
    service: ProjectServiceDep,
) -> ProjectRead:
    project = await service.update(project_id, data)
    return ProjectRead.model_validate(project)


@router.delete(
    "/{project_id}",
    response_model=OperationResult,
    summary="Delete project",
    responses={
        403: {"description": "Project is assigned to a team"},
        404: {"description": "Project not found"},
    },
)
async def delete_project(project_id: UUID, service: ProjectServiceDep) -> OperationResult:
    return await service.remove(project_id)


@router.post(
    "/{project_id}/publish",
    response_model=ProjectRead,
    summary="Publish project",
    responses={403: {"description": "Project is not approved"}},
)
async def publish_project(project_id: UUID, service: ProjectServiceDep) -> ProjectRead:
    project = await service.publish(project_id)
    return ProjectRead.model_validate(project)


@router.post(
    "/{project_id}/approve",
    response_model=ProjectRead,
    summary="Approve project",
    description="Supervisors and admins only.",
    responses={403: {"description": "Caller cannot approve projects"}},
)
async def approve_project(project_id: UUID, service: ProjectServiceDep) -> ProjectRead:
    project = await service.approve(project_id)
    return ProjectRead.model_validate(project)


@router.post(
    "/{project_id}/assign-team",
    response_model=ProjectRead,
    summary="Assign team",
    responses={403: {"description": "Project already has a team"}},
)
async def assign_team(
    project_id: UUID,
    data: AssignTeamRequest,
    service: ProjectServiceDep,
) -> ProjectRead:
    project = await service.assign_team(project_id, data.team_id)
    return ProjectRead.model_validate(project)
