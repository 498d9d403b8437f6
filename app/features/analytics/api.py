"""Analytics API endpoints"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_db
from app.exceptions import StoreUnavailableError
from app.features.analytics.domain import MonthlyAnalytics
from app.features.analytics.service import AnalyticsService

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("/monthly", response_model=List[MonthlyAnalytics])
async def get_monthly_analytics(db: AsyncSession = Depends(get_db)):
    """Get monthly analytics ordered by year, then month"""
    service = AnalyticsService(db)
    try:
        return await service.get_monthly_analytics()
    except StoreUnavailableError as e:
        raise StoreUnavailableError("Error fetching monthly analytics", error=e.message) from e
