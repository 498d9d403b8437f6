"""
Seed the database with example tasks and monthly analytics.

Usage:
    python -m app.db.seed
"""
import asyncio
import logging
from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import ExampleTask, MonthlyAnalytics
from app.db.session import SessionLocal, init_models

logger = logging.getLogger(__name__)


def _date(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


SEED_TASKS = [
    # Upcoming
    {"name": "Improve email marketing strategy", "assigned_to_name": "Ashley Briggs",
     "assigned_to_avatar": "/assets/img/avatars/avatar-5.jpg", "due_date": _date(2024, 8, 1),
     "priority": "MEDIUM", "status": "UPCOMING"},
    {"name": "Develop new product video", "assigned_to_name": "Carl Jenkins",
     "assigned_to_avatar": "/assets/img/avatars/avatar-2.jpg", "due_date": _date(2024, 7, 15),
     "priority": "HIGH", "status": "UPCOMING"},
    {"name": "Conduct user interviews for new feature", "assigned_to_name": "Bertha Martin",
     "assigned_to_avatar": "/assets/img/avatars/avatar-3.jpg", "due_date": _date(2024, 6, 20),
     "priority": "LOW", "status": "UPCOMING"},
    # In progress
    {"name": "Implement new analytics tracking", "assigned_to_name": "Carl Jenkins",
     "assigned_to_avatar": "/assets/img/avatars/avatar-2.jpg", "due_date": _date(2024, 7, 1),
     "priority": "LOW", "status": "IN_PROGRESS"},
    {"name": "Design new marketing campaign", "assigned_to_name": "Bertha Martin",
     "assigned_to_avatar": "/assets/img/avatars/avatar-3.jpg", "due_date": _date(2024, 8, 15),
     "priority": "HIGH", "status": "IN_PROGRESS"},
    {"name": "Conduct A/B testing on landing page", "assigned_to_name": "Ashley Briggs",
     "assigned_to_avatar": "/assets/img/avatars/avatar-5.jpg", "due_date": _date(2024, 6, 30),
     "priority": "LOW", "status": "IN_PROGRESS"},
    # Completed
    {"name": "Optimize website performance", "assigned_to_name": "Bertha Martin",
     "assigned_to_avatar": "/assets/img/avatars/avatar-3.jpg", "due_date": _date(2024, 6, 15),
     "priority": "LOW", "status": "COMPLETED"},
    {"name": "Develop mobile app prototype", "assigned_to_name": "Ashley Briggs",
     "assigned_to_avatar": "/assets/img/avatars/avatar-5.jpg", "due_date": _date(2024, 8, 10),
     "priority": "MEDIUM", "status": "COMPLETED"},
    {"name": "Conduct user research interviews", "assigned_to_name": "Ashley Briggs",
     "assigned_to_avatar": "/assets/img/avatars/avatar-5.jpg", "due_date": _date(2024, 7, 20),
     "priority": "LOW", "status": "COMPLETED"},
]

# (month, session_duration, page_views, total_visits) for 2024
SEED_ANALYTICS_2024 = [
    (1, 10, 5000, 2000),
    (2, 11, 4550, 2250),
    (3, 9, 4980, 2400),
    (4, 10, 5520, 2750),
    (5, 12, 5100, 2500),
    (6, 11, 4750, 2800),
    (7, 13, 5300, 3100),
    (8, 12, 5900, 3500),
    (9, 10, 5200, 3000),
    (10, 11, 5800, 3300),
    (11, 13, 6200, 3800),
    (12, 12, 5600, 3500),
]


async def upsert_monthly_analytics(db: AsyncSession, **values) -> MonthlyAnalytics:
    """Insert or update the snapshot for values['month'] / values['year']"""
    stmt = select(MonthlyAnalytics).where(
        MonthlyAnalytics.month == values["month"],
        MonthlyAnalytics.year == values["year"],
    )
    existing = (await db.execute(stmt)).scalar_one_or_none()
    if existing is None:
        existing = MonthlyAnalytics(**values)
        db.add(existing)
    else:
        for key, value in values.items():
            setattr(existing, key, value)
    return existing


async def seed(db: AsyncSession) -> None:
    """Replace all tasks and analytics with the example data set"""
    logger.info("Deleting existing tasks...")
    await db.execute(delete(ExampleTask))

    logger.info("Creating seed tasks...")
    db.add_all([ExampleTask(**task) for task in SEED_TASKS])
    logger.info(f"Created {len(SEED_TASKS)} tasks.")

    logger.info("Deleting existing monthly analytics data...")
    await db.execute(delete(MonthlyAnalytics))

    for month, session_duration, page_views, total_visits in SEED_ANALYTICS_2024:
        await upsert_monthly_analytics(
            db,
            month=month,
            year=2024,
            session_duration=session_duration,
            page_views=page_views,
            total_visits=total_visits,
        )
    await db.commit()
    logger.info(f"Monthly analytics data seeded for {len(SEED_ANALYTICS_2024)} months.")


async def main() -> None:
    logger.info("Start seeding ...")
    await init_models()
    async with SessionLocal() as session:
        await seed(session)
    logger.info("Seeding finished.")


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    asyncio.run(main())
