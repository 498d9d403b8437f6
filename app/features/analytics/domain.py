"""Domain models for Analytics feature"""

from app.models import CamelModel


class MonthlyAnalytics(CamelModel):
    """Monthly metrics snapshot keyed by (month, year)"""
    id: int
    month: int
    year: int
    session_duration: float
    page_views: int
    total_visits: int
