"""
FastAPI router for the tasks bounded context.

All routes delegate to TaskService. No business logic here.
Error mapping is handled by centralized error handlers.
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from taskapp.application.tasks.dtos import TaskCommand, TaskResult
from taskapp.application.tasks.task_service import TaskService
from taskapp.interfaces.tasks.dependencies import get_task_service
from taskapp.interfaces.tasks.schemas import TaskRequest, TaskResponse
from taskapp.shared.errors.schemas import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])

BAD_REQUEST = {400: {"model": ErrorResponse}}
NOT_FOUND = {404: {"model": ErrorResponse}}
SERVER_ERROR = {500: {"model": ErrorResponse}}


def _to_command(request: TaskRequest) -> TaskCommand:
    return TaskCommand(
        title=request.title,
        description=request.description,
        completed=request.completed,
    )


def _to_response(result: TaskResult) -> TaskResponse:
    return TaskResponse(
        id=result.id,
        title=result.title,
        description=result.description,
        completed=result.completed,
    )


@router.get(
    "",
    response_model=list[TaskResponse],
    responses=SERVER_ERROR,
    summary="List tasks",
    description="Return every stored task ordered by id.",
)
def list_tasks(
    service: TaskService = Depends(get_task_service),
) -> list[TaskResponse]:
    """List all tasks."""
    logger.info("GET /tasks")
    return [_to_response(r) for r in service.list_tasks()]


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**BAD_REQUEST, **SERVER_ERROR},
    summary="Create a task",
    description="Validate and store a new task. The id is assigned by the server.",
)
def create_task(
    request: TaskRequest,
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    """Create a task."""
    logger.info("POST /tasks")
    return _to_response(service.create(_to_command(request)))


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
    summary="Get a task",
)
def get_task(
    task_id: int,
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    """Return a single task by id."""
    logger.info("GET /tasks/%d", task_id)
    return _to_response(service.get(task_id))


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
    summary="Update a task",
    description="Replace title, description and completed flag of a task.",
)
def update_task(
    task_id: int,
    request: TaskRequest,
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    """Update a task."""
    logger.info("PUT /tasks/%d", task_id)
    return _to_response(service.update(task_id, _to_command(request)))


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR},
    summary="Delete a task",
)
def delete_task(
    task_id: int,
    service: TaskService = Depends(get_task_service),
) -> Response:
    """Delete a task."""
    logger.info("DELETE /tasks/%d", task_id)
    service.delete(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
