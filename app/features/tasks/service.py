"""Business logic for Tasks"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.features.tasks.domain import Task, TaskCreate, TaskStatus, TaskUpdate
from app.features.tasks.repository import TaskRepository


class TaskService:
    """
    Service layer for Task business logic.

    Currently delegates straight to the repository; rules such as
    permission checks belong here rather than in the API or repository.
    Only TaskNotFoundError is meaningful to callers.
    """

    def __init__(self, db: AsyncSession):
        self.repository = TaskRepository(db)

    async def list_tasks(self, status: Optional[TaskStatus] = None) -> List[Task]:
        return await self.repository.find_many(status)

    async def get_task(self, task_id: UUID) -> Optional[Task]:
        return await self.repository.find_by_id(task_id)

    async def create_task(self, data: TaskCreate) -> Task:
        return await self.repository.create(data)

    async def update_task(self, task_id: UUID, data: TaskUpdate) -> Task:
        """
        Raises:
            TaskNotFoundError: If the task does not exist
        """
        return await self.repository.update(task_id, data)

    async def delete_task(self, task_id: UUID) -> Task:
        """
        Raises:
            TaskNotFoundError: If the task does not exist
        """
        return await self.repository.delete(task_id)
