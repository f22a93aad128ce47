"""Liveness probe for the stateless calculation service."""

from fastapi import APIRouter, Depends

from budget_tracker.core.config import Settings, get_settings

router = APIRouter()


@router.get("/health")
def health(settings: Settings = Depends(get_settings)) -> dict[str, str]:
    return {"status": "ok", "environment": settings.app_env}
