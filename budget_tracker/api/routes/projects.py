"""Task variance and project summary/report endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from budget_tracker.api.dependencies import get_report_service
from budget_tracker.api.payloads import ProjectReportPayload, ProjectSummaryPayload, TaskPayload
from budget_tracker.services.report_service import ReportService
from budget_tracker.services.task_service import compute_project_summary, serialize_task

router = APIRouter(tags=["projects"])


@router.post("/tasks/variance")
def post_task_variance(payload: TaskPayload) -> dict[str, object]:
    return serialize_task(payload.to_domain())


@router.post("/projects/summary")
def post_project_summary(payload: ProjectSummaryPayload, display: bool = False) -> dict[str, object]:
    summary = compute_project_summary([task.to_domain() for task in payload.tasks])
    return ReportService.serialize_project_summary(
        summary,
        project_id=payload.project_id,
        display=display,
    )


@router.post("/projects/report")
def post_project_report(
    payload: ProjectReportPayload,
    display: bool = False,
    service: ReportService = Depends(get_report_service),
) -> dict[str, object]:
    report = service.project_report(
        payload.project.to_domain(service.settings.default_currency),
        [task.to_domain() for task in payload.tasks],
        [entry.to_domain() for entry in payload.time_entries],
        [member.to_domain() for member in payload.members],
    )
    return service.serialize_report(report, display=display)
