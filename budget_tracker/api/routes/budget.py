"""Budget endpoints: summary, planned-vs-actual comparison, entry totals."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from budget_tracker.api.dependencies import get_report_service
from budget_tracker.api.payloads import BudgetInputPayload, TimeEntrySummaryPayload
from budget_tracker.services.budget_service import (
    serialize_budget_comparison,
    serialize_time_entry_summary,
)
from budget_tracker.services.report_service import ReportService

router = APIRouter(tags=["budget"])


@router.post("/budget/summary")
def post_budget_summary(
    payload: BudgetInputPayload,
    display: bool = False,
    service: ReportService = Depends(get_report_service),
) -> dict[str, object]:
    result = service.budget_summary(
        payload.project.to_domain(service.settings.default_currency),
        [entry.to_domain() for entry in payload.time_entries],
        [member.to_domain() for member in payload.members],
    )
    return service.serialize_budget_summary(result, display=display)


@router.post("/budget/comparison")
def post_budget_comparison(
    payload: BudgetInputPayload,
    service: ReportService = Depends(get_report_service),
) -> dict[str, object]:
    comparison = service.budget_comparison(
        payload.project.to_domain(service.settings.default_currency),
        [entry.to_domain() for entry in payload.time_entries],
        [member.to_domain() for member in payload.members],
    )
    return serialize_budget_comparison(comparison)


@router.post("/time-entries/summary")
def post_time_entry_summary(
    payload: TimeEntrySummaryPayload,
    service: ReportService = Depends(get_report_service),
) -> dict[str, float]:
    summary = service.time_entry_summary(
        [entry.to_domain() for entry in payload.time_entries],
        [member.to_domain() for member in payload.members],
    )
    return serialize_time_entry_summary(summary)
