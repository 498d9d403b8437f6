"""SQLAlchemy ORM model for monthly_analytics table"""

from sqlalchemy import CheckConstraint, Column, Integer, Float, UniqueConstraint

from app.db.base import Base


class MonthlyAnalytics(Base):
    """
    Monthly metrics snapshot, one row per (month, year).
    Populated by the seed script; read-only for the API.
    """
    __tablename__ = "monthly_analytics"
    __table_args__ = (
        UniqueConstraint("month", "year", name="monthly_analytics_month_year_key"),
        CheckConstraint("month BETWEEN 1 AND 12", name="monthly_analytics_month_range"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)

    month = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)

    # Measures
    session_duration = Column(Float, nullable=False, default=0)
    page_views = Column(Integer, nullable=False, default=0)
    total_visits = Column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<MonthlyAnalytics(year={self.year}, month={self.month})>"
