from fastapi import APIRouter
from app.api import health
from app.features import analytics, tasks

api_router = APIRouter()

# Include all sub-routers
api_router.include_router(health.router)
api_router.include_router(tasks.router)
api_router.include_router(analytics.router)
