"""Task endpoints. All require a bearer token and act on the caller's tasks.

GET    /api/tasks        - list own tasks, newest first
POST   /api/tasks        - create
GET    /api/tasks/stats  - total / completed / inProgress / todo
GET    /api/tasks/{id}   - single task
PUT    /api/tasks/{id}   - partial update
DELETE /api/tasks/{id}   - delete (assignments first)
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from outpace.api.deps import get_task_service
from outpace.middleware.auth import current_user
from outpace.schemas.common import ApiResponse
from outpace.schemas.task import (
    CreateTaskRequest,
    TaskListItem,
    TaskRead,
    TaskStats,
    UpdateTaskRequest,
)
from outpace.security.tokens import TokenPayload
from outpace.services.task_service import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=ApiResponse[list[TaskListItem]], response_model_exclude_unset=True)
def list_tasks(
    user: TokenPayload = Depends(current_user),
    service: TaskService = Depends(get_task_service),
) -> ApiResponse[list[TaskListItem]]:
    items = [
        TaskListItem.model_validate(task).model_copy(update={"creator_name": name})
        for task, name in service.list_tasks(user.id)
    ]
    return ApiResponse[list[TaskListItem]](
        success=True, data=items, message="Tasks retrieved successfully"
    )


@router.post(
    "",
    response_model=ApiResponse[TaskRead],
    response_model_exclude_unset=True,
    status_code=201,
)
def create_task(
    request: CreateTaskRequest,
    user: TokenPayload = Depends(current_user),
    service: TaskService = Depends(get_task_service),
) -> ApiResponse[TaskRead]:
    task = service.create_task(request, user.id)
    return ApiResponse[TaskRead](
        success=True, data=TaskRead.model_validate(task), message="Task created successfully"
    )


@router.get("/stats", response_model=ApiResponse[TaskStats], response_model_exclude_unset=True)
def get_task_stats(
    user: TokenPayload = Depends(current_user),
    service: TaskService = Depends(get_task_service),
) -> ApiResponse[TaskStats]:
    stats = service.get_task_stats(user.id)
    return ApiResponse[TaskStats](
        success=True, data=stats, message="Task stats retrieved successfully"
    )


@router.get("/{task_id:int}", response_model=ApiResponse[TaskRead], response_model_exclude_unset=True)
def get_task(
    task_id: int,
    user: TokenPayload = Depends(current_user),
    service: TaskService = Depends(get_task_service),
) -> ApiResponse[TaskRead]:
    task = service.get_task(task_id, user.id)
    return ApiResponse[TaskRead](
        success=True, data=TaskRead.model_validate(task), message="Task retrieved successfully"
    )


@router.put("/{task_id:int}", response_model=ApiResponse[TaskRead], response_model_exclude_unset=True)
def update_task(
    task_id: int,
    request: UpdateTaskRequest,
    user: TokenPayload = Depends(current_user),
    service: TaskService = Depends(get_task_service),
) -> ApiResponse[TaskRead]:
    task = service.update_task(task_id, user.id, request)
    return ApiResponse[TaskRead](
        success=True, data=TaskRead.model_validate(task), message="Task updated successfully"
    )


@router.delete("/{task_id:int}", response_model=ApiResponse[None], response_model_exclude_unset=True)
def delete_task(
    task_id: int,
    user: TokenPayload = Depends(current_user),
    service: TaskService = Depends(get_task_service),
) -> ApiResponse[None]:
    service.delete_task(task_id, user.id)
    return ApiResponse[None](success=True, message="Task deleted successfully")
