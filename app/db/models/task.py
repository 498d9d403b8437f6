"""SQLAlchemy ORM model for example_tasks table"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, Text, Uuid

from app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ExampleTask(Base):
    """
    SQLAlchemy ORM model for the example_tasks table.
    Timestamps are assigned on the Python side so ordering by created_at
    keeps sub-second resolution on every backend.
    """
    __tablename__ = "example_tasks"

    # Primary key
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    # Task information
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)

    # Status and priority (using String instead of Enum to avoid conversion issues)
    status = Column(String, nullable=False, default="UPCOMING", index=True)
    priority = Column(String, nullable=False, default="MEDIUM")

    # Assignment
    assigned_to_name = Column(String, nullable=True)
    assigned_to_avatar = Column(String, nullable=True)
    due_date = Column(DateTime(timezone=True), nullable=True)

    # Timestamps
    created_at = Column(
        DateTime(timezone=True),
        default=_utcnow,
        nullable=False,
        index=True
    )
    updated_at = Column(
        DateTime(timezone=True),
        default=_utcnow,
        onupdate=_utcnow,
        nullable=False
    )

    def __repr__(self) -> str:
        return f"<ExampleTask(id={self.id}, name='{self.name}', status='{self.status}')>"
