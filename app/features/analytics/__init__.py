"""Analytics feature module"""

from app.features.analytics.api import router
from app.features.analytics.repository import AnalyticsRepository
from app.features.analytics.service import AnalyticsService
from app.features.analytics.domain import MonthlyAnalytics

__all__ = [
    "router",
    "AnalyticsRepository",
    "AnalyticsService",
    "MonthlyAnalytics",
]
