from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from database import get_session
from models import User
from schemas import TaskCreate, TaskFilter, TaskStatusUpdate, TaskResponse, ApiResponse
from middleware.auth import verify_jwt_middleware
from services.tasks import TaskService
from stores.tasks import TaskStore

router = APIRouter()


def get_task_service(
    user: User = Depends(verify_jwt_middleware),
    session: Session = Depends(get_session)
) -> TaskService:
    """Task service bound to the authenticated user"""
    return TaskService(TaskStore(session), user)


@router.get("/tasks")
async def list_tasks(
    filters: TaskFilter = Depends(),
    service: TaskService = Depends(get_task_service)
) -> ApiResponse:
    """
    Get the authenticated user's tasks

    Args:
        filters: Optional status and search filters
        service: Task service for the authenticated user

    Returns:
        ApiResponse with list of tasks
    """
    tasks = service.list_tasks(status=filters.status, search=filters.search)

    return ApiResponse(
        success=True,
        data=[TaskResponse.model_validate(task).model_dump(mode="json") for task in tasks]
    )


@router.post("/tasks", status_code=status.HTTP_201_CREATED)
async def create_task(
    task_data: TaskCreate,
    service: TaskService = Depends(get_task_service)
) -> ApiResponse:
    """
    Create a new task

    Args:
        task_data: Task creation data
        service: Task service for the authenticated user

    Returns:
        ApiResponse with created task
    """
    task = service.create_task(task_data.title, task_data.description)

    return ApiResponse(
        success=True,
        data=TaskResponse.model_validate(task).model_dump(mode="json")
    )


@router.get("/tasks/{task_id}")
async def get_task(
    task_id: str,
    service: TaskService = Depends(get_task_service)
) -> ApiResponse:
    """
    Get task details

    Args:
        task_id: Task ID
        service: Task service for the authenticated user

    Returns:
        ApiResponse with task details
    """
    task = service.get_task(task_id)

    return ApiResponse(
        success=True,
        data=TaskResponse.model_validate(task).model_dump(mode="json")
    )


@router.patch("/tasks/{task_id}/status")
async def update_task_status(
    task_id: str,
    task_data: TaskStatusUpdate,
    service: TaskService = Depends(get_task_service)
) -> ApiResponse:
    """
    Update the status of a task

    Args:
        task_id: Task ID
        task_data: New status
        service: Task service for the authenticated user

    Returns:
        ApiResponse with updated task
    """
    task = service.update_task_status(task_id, task_data.status)

    return ApiResponse(
        success=True,
        data=TaskResponse.model_validate(task).model_dump(mode="json")
    )


@router.delete("/tasks/{task_id}")
async def delete_task(
    task_id: str,
    service: TaskService = Depends(get_task_service)
) -> ApiResponse:
    """
    Delete a task

    Args:
        task_id: Task ID
        service: Task service for the authenticated user

    Returns:
        ApiResponse with no data
    """
    service.delete_task(task_id)

    return ApiResponse(success=True)
