"""Top-level API router."""

from fastapi import APIRouter

from budget_tracker.api.routes.budget import router as budget_router
from budget_tracker.api.routes.health import router as health_router
from budget_tracker.api.routes.projects import router as projects_router

api_router = APIRouter()
api_router.include_router(health_router, tags=["health"])
api_router.include_router(budget_router)
api_router.include_router(projects_router)
