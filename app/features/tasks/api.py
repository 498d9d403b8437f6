"""Task API endpoints"""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_db
from app.exceptions import BadRequestError, TaskNotFoundError
from app.features.tasks.domain import Task, TaskCreate, TaskStatus, TaskUpdate
from app.features.tasks.service import TaskService
from app.features.tasks.validators import CREATE_TASK_RULES, TASK_ID_RULES, UPDATE_TASK_RULES
from app.middleware.validation import validate_request

logger = logging.getLogger(__name__)


router = APIRouter(prefix="/api/exercises/tasks", tags=["tasks"])


@router.get("", response_model=List[Task])
async def list_tasks(
    status: Optional[str] = Query(None, description="Optional status filter"),
    db: AsyncSession = Depends(get_db)
):
    """
    List tasks ordered by creation time (oldest first).

    An unrecognized status value is ignored and all tasks are returned.
    """
    service = TaskService(db)
    return await service.list_tasks(TaskStatus.parse(status))


@router.get(
    "/{task_id}",
    response_model=Task,
    dependencies=[Depends(validate_request(TASK_ID_RULES))],
)
async def get_task(task_id: str, db: AsyncSession = Depends(get_db)):
    """Get a single task by ID"""
    service = TaskService(db)
    task = await service.get_task(UUID(task_id))

    if task is None:
        raise TaskNotFoundError(task_id)

    return task


@router.post("", response_model=Task, status_code=201)
async def create_task(
    data: Dict[str, Any] = Depends(validate_request(CREATE_TASK_RULES)),
    db: AsyncSession = Depends(get_db)
):
    """Create a new task; status defaults to UPCOMING and priority to MEDIUM"""
    service = TaskService(db)
    return await service.create_task(TaskCreate.model_validate(data))


@router.put("/{task_id}", response_model=Task)
async def update_task(
    task_id: str,
    data: Dict[str, Any] = Depends(validate_request(TASK_ID_RULES, UPDATE_TASK_RULES)),
    db: AsyncSession = Depends(get_db)
):
    """
    Partially update an existing task.

    Raises:
        400: No recognized fields in the body
        404: Task not found
    """
    if not data:
        raise BadRequestError("No update data provided")

    service = TaskService(db)
    return await service.update_task(UUID(task_id), TaskUpdate.model_validate(data))


@router.delete(
    "/{task_id}",
    status_code=204,
    response_class=Response,
    dependencies=[Depends(validate_request(TASK_ID_RULES))],
)
async def delete_task(task_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a task permanently"""
    service = TaskService(db)
    await service.delete_task(UUID(task_id))
    logger.info(f"Task {task_id} deleted")
    return Response(status_code=204)
