"""SQLAlchemy ORM models"""

from app.db.models.task import ExampleTask
from app.db.models.monthly_analytics import MonthlyAnalytics

__all__ = ["ExampleTask", "MonthlyAnalytics"]
