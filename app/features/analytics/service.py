"""Business logic for Analytics"""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import StoreUnavailableError
from app.features.analytics.domain import MonthlyAnalytics
from app.features.analytics.repository import AnalyticsRepository

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Service layer for analytics queries"""

    def __init__(self, db: AsyncSession):
        self.repository = AnalyticsRepository(db)

    async def get_monthly_analytics(self) -> List[MonthlyAnalytics]:
        """
        Get monthly analytics sorted by (year, month).

        Raises:
            StoreUnavailableError: If the store query fails
        """
        try:
            return await self.repository.list_monthly()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching monthly analytics: {e}", exc_info=True)
            raise StoreUnavailableError("Failed to fetch monthly analytics data") from e
