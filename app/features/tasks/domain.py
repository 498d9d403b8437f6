"""Domain models for Tasks feature"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from uuid import UUID

from app.models import CamelModel


class TaskStatus(str, Enum):
    """Task status enum"""
    UPCOMING = "UPCOMING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"

    @classmethod
    def parse(cls, value: Any) -> Optional["TaskStatus"]:
        """Return the member for an external string, or None if unrecognized"""
        try:
            return cls(value)
        except ValueError:
            return None


class TaskPriority(str, Enum):
    """Task priority enum"""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class TaskCreate(CamelModel):
    """Task creation model; status and priority fall back to store defaults"""
    name: str
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    assigned_to_name: Optional[str] = None
    assigned_to_avatar: Optional[str] = None
    due_date: Optional[datetime] = None


class TaskUpdate(CamelModel):
    """Task update model - only fields that were set are applied"""
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    assigned_to_name: Optional[str] = None
    assigned_to_avatar: Optional[str] = None
    due_date: Optional[datetime] = None


class Task(CamelModel):
    """Complete task model from database"""
    id: UUID
    name: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    assigned_to_name: Optional[str] = None
    assigned_to_avatar: Optional[str] = None
    due_date: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
