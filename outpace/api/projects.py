"""Project endpoints. All require a bearer token and act on the caller's projects.

GET    /api/projects       - list own projects, newest first
POST   /api/projects       - create
GET    /api/projects/{id}  - single project
PUT    /api/projects/{id}  - partial update
DELETE /api/projects/{id}  - delete (tasks are detached, not deleted)
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from outpace.api.deps import get_project_service
from outpace.middleware.auth import current_user
from outpace.schemas.common import ApiResponse
from outpace.schemas.project import CreateProjectRequest, ProjectRead, UpdateProjectRequest
from outpace.security.tokens import TokenPayload
from outpace.services.project_service import ProjectService

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("", response_model=ApiResponse[list[ProjectRead]], response_model_exclude_unset=True)
def list_projects(
    user: TokenPayload = Depends(current_user),
    service: ProjectService = Depends(get_project_service),
) -> ApiResponse[list[ProjectRead]]:
    projects = [ProjectRead.model_validate(p) for p in service.list_projects(user.id)]
    return ApiResponse[list[ProjectRead]](
        success=True, data=projects, message="Projects retrieved successfully"
    )


@router.post(
    "",
    response_model=ApiResponse[ProjectRead],
    response_model_exclude_unset=True,
    status_code=201,
)
def create_project(
    request: CreateProjectRequest,
    user: TokenPayload = Depends(current_user),
    service: ProjectService = Depends(get_project_service),
) -> ApiResponse[ProjectRead]:
    project = service.create_project(request, user.id)
    return ApiResponse[ProjectRead](
        success=True,
        data=ProjectRead.model_validate(project),
        message="Project created successfully",
    )


@router.get(
    "/{project_id:int}", response_model=ApiResponse[ProjectRead], response_model_exclude_unset=True
)
def get_project(
    project_id: int,
    user: TokenPayload = Depends(current_user),
    service: ProjectService = Depends(get_project_service),
) -> ApiResponse[ProjectRead]:
    project = service.get_project(project_id, user.id)
    return ApiResponse[ProjectRead](
        success=True,
        data=ProjectRead.model_validate(project),
        message="Project retrieved successfully",
    )


@router.put(
    "/{project_id:int}", response_model=ApiResponse[ProjectRead], response_model_exclude_unset=True
)
def update_project(
    project_id: int,
    request: UpdateProjectRequest,
    user: TokenPayload = Depends(current_user),
    service: ProjectService = Depends(get_project_service),
) -> ApiResponse[ProjectRead]:
    project = service.update_project(project_id, user.id, request)
    return ApiResponse[ProjectRead](
        success=True,
        data=ProjectRead.model_validate(project),
        message="Project updated successfully",
    )


@router.delete(
    "/{project_id:int}", response_model=ApiResponse[None], response_model_exclude_unset=True
)
def delete_project(
    project_id: int,
    user: TokenPayload = Depends(current_user),
    service: ProjectService = Depends(get_project_service),
) -> ApiResponse[None]:
    service.delete_project(project_id, user.id)
    return ApiResponse[None](success=True, message="Project deleted successfully")
