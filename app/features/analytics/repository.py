"""SQLAlchemy repository for Analytics"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.monthly_analytics import MonthlyAnalytics as MonthlyAnalyticsORM
from app.features.analytics.domain import MonthlyAnalytics


class AnalyticsRepository:
    """Read-only repository for analytics snapshots"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_monthly(self) -> List[MonthlyAnalytics]:
        """Return every monthly snapshot ordered by (year, month) ascending"""
        stmt = select(MonthlyAnalyticsORM).order_by(
            MonthlyAnalyticsORM.year.asc(),
            MonthlyAnalyticsORM.month.asc(),
        )
        result = await self.db.execute(stmt)
        return [MonthlyAnalytics.model_validate(row) for row in result.scalars().all()]
