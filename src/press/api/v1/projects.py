"""Ebook project endpoints."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from src.press.api.dependencies import AuthenticatedUser, ProjectServiceDep
from src.press.models import Project, ProjectStatus
from src.press.schemas import ProjectCreate, ProjectForm, ProjectRead

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List projects",
    description="Filter by exactly one of status, manager or reviewer. Manager and "
    "reviewer listings only include active projects.",
    responses={400: {"description": "Missing or conflicting filters"}},
)
async def list_projects(
    project_service: ProjectServiceDep,
    status_filter: Annotated[ProjectStatus | None, Query(alias="status")] = None,
    manager_user_id: Annotated[int | None, Query()] = None,
    reviewer_user_id: Annotated[int | None, Query()] = None,
) -> list[ProjectRead]:
    filters = [f for f in (status_filter, manager_user_id, reviewer_user_id) if f is not None]
    if len(filters) != 1:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Specify exactly one of status, manager_user_id or reviewer_user_id",
        )

    if status_filter is not None:
        projects = await project_service.get_all_by_status(status_filter)
    elif manager_user_id is not None:
        projects = await project_service.get_all_by_manager_user_id(manager_user_id)
    else:
        projects = await project_service.get_all_by_reviewer_user_id(reviewer_user_id)  # type: ignore[arg-type]

    return [ProjectRead.model_validate(p) for p in projects]


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get project",
    responses={404: {"description": "Project not found"}},
)
async def get_project(project_id: int, project_service: ProjectServiceDep) -> ProjectRead:
    project = await project_service.get(project_id)
    return ProjectRead.model_validate(project)


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    description="Open a project on a placeholder ebook. Activity timestamps are "
    "synced from GitHub and the discussion thread when reachable.",
    responses={
        201: {"description": "Project created"},
        404: {"description": "Ebook not found"},
        409: {"description": "Ebook is not a placeholder or already has an active project"},
        422: {"description": "Project failed validation"},
    },
)
async def create_project(
    request: ProjectCreate,
    project_service: ProjectServiceDep,
    _user: AuthenticatedUser,
) -> ProjectRead:
    project = request.apply_to(Project())
    project = await project_service.create(project)
    return ProjectRead.model_validate(project)


@router.put(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Update project",
    responses={
        404: {"description": "Project not found"},
        409: {"description": "Ebook already has an active project"},
        422: {"description": "Project failed validation"},
    },
)
async def update_project(
    project_id: int,
    request: ProjectForm,
    project_service: ProjectServiceDep,
    _user: AuthenticatedUser,
) -> ProjectRead:
    project = await project_service.get(project_id)
    project = await project_service.save(request.apply_to(project))
    return ProjectRead.model_validate(project)


@router.post(
    "/{project_id}/sync",
    response_model=ProjectRead,
    summary="Sync project activity",
    description="Refresh the last commit and last discussion timestamps.",
    responses={
        404: {"description": "Project not found"},
        502: {"description": "GitHub or the discussion thread could not be read"},
    },
)
async def sync_project(
    project_id: int,
    project_service: ProjectServiceDep,
    _user: AuthenticatedUser,
) -> ProjectRead:
    project = await project_service.get(project_id)
    project = await project_service.sync_activity(project)
    return ProjectRead.model_validate(project)
