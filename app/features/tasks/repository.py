"""SQLAlchemy repository for Tasks"""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.task import ExampleTask as ExampleTaskORM
from app.exceptions import TaskNotFoundError
from app.features.tasks.domain import Task, TaskCreate, TaskPriority, TaskStatus, TaskUpdate

logger = logging.getLogger(__name__)


def _column_value(value):
    return value.value if isinstance(value, Enum) else value


class TaskRepository:
    """Repository for Task operations using SQLAlchemy"""

    def __init__(self, db: AsyncSession):
        """
        Initialize the repository with a database session.

        Args:
            db: SQLAlchemy async database session
        """
        self.db = db

    async def find_many(self, status: Optional[TaskStatus] = None) -> List[Task]:
        """
        Find tasks, optionally filtered by status.

        Args:
            status: Only return tasks with this status; no filter when None

        Returns:
            List of Task domain models, ordered by created_at (oldest first)
        """
        stmt = select(ExampleTaskORM).order_by(ExampleTaskORM.created_at.asc())
        if status is not None:
            stmt = stmt.where(ExampleTaskORM.status == status.value)

        result = await self.db.execute(stmt)
        return [self._to_domain_model(row) for row in result.scalars().all()]

    async def find_by_id(self, task_id: UUID) -> Optional[Task]:
        """Find a single task by ID, or None if it does not exist"""
        orm_task = await self.db.get(ExampleTaskORM, task_id)
        if orm_task is None:
            return None
        return self._to_domain_model(orm_task)

    async def create(self, data: TaskCreate) -> Task:
        """
        Create a new task.

        Status defaults to UPCOMING and priority to MEDIUM when not supplied.
        """
        values = {key: _column_value(value) for key, value in data.model_dump().items()}
        values["status"] = values["status"] or TaskStatus.UPCOMING.value
        values["priority"] = values["priority"] or TaskPriority.MEDIUM.value

        orm_task = ExampleTaskORM(**values)
        self.db.add(orm_task)
        await self.db.commit()
        await self.db.refresh(orm_task)

        logger.debug(f"Created task {orm_task.id}")
        return self._to_domain_model(orm_task)

    async def update(self, task_id: UUID, data: TaskUpdate) -> Task:
        """
        Apply a partial update to a task.

        Only fields explicitly set on `data` are changed.

        Raises:
            TaskNotFoundError: If no task has the given ID
        """
        orm_task = await self._get_orm_or_raise(task_id)

        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(orm_task, key, _column_value(value))
        # onupdate does not fire when every value is unchanged
        orm_task.updated_at = datetime.now(timezone.utc)

        await self.db.commit()
        await self.db.refresh(orm_task)
        return self._to_domain_model(orm_task)

    async def delete(self, task_id: UUID) -> Task:
        """
        Delete a task permanently.

        Returns:
            The task as it was before deletion

        Raises:
            TaskNotFoundError: If no task has the given ID
        """
        orm_task = await self._get_orm_or_raise(task_id)
        task = self._to_domain_model(orm_task)

        await self.db.delete(orm_task)
        await self.db.commit()

        logger.debug(f"Deleted task {task_id}")
        return task

    async def _get_orm_or_raise(self, task_id: UUID) -> ExampleTaskORM:
        orm_task = await self.db.get(ExampleTaskORM, task_id)
        if orm_task is None:
            raise TaskNotFoundError(task_id)
        return orm_task

    def _to_domain_model(self, orm_task: ExampleTaskORM) -> Task:
        """Convert SQLAlchemy ORM model to Pydantic domain model"""
        return Task.model_validate(orm_task)
