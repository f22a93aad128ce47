"""Service dependencies for FastAPI endpoints."""

from fastapi import Depends

from budget_tracker.core.config import Settings, get_settings
from budget_tracker.services.report_service import ReportService


def get_report_service(settings: Settings = Depends(get_settings)) -> ReportService:
    """Build a report service bound to the current settings."""

    return ReportService(settings)
