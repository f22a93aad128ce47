"""Report service combining budget, cost and variance calculators."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from uuid import UUID

from budget_tracker.core.config import Settings, get_settings
from budget_tracker.models.entities import Member, Project, Task, TimeEntry
from budget_tracker.services.budget_service import (
    BudgetComparison,
    BudgetSummaryResult,
    TaskCost,
    TimeEntrySummary,
    compute_budget_comparison,
    compute_budget_summary,
    compute_task_costs,
    serialize_budget_comparison,
    serialize_budget_summary,
    serialize_task_cost,
    summarize_time_entries,
)
from budget_tracker.services.formatting import budget_summary_display, project_summary_display
from budget_tracker.services.task_service import (
    ProjectSummary,
    compute_project_summary,
    derive_actual_hours,
    serialize_project_summary,
    serialize_task,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProjectReport:
    project: Project
    tasks: tuple[Task, ...]
    task_costs: tuple[TaskCost, ...]
    project_summary: ProjectSummary
    budget_summary: BudgetSummaryResult
    budget_comparison: BudgetComparison


class ReportService:
    """Runs the calculators with runtime settings applied.

    Holds no per-request state; one instance may serve concurrent callers.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def budget_summary(
        self,
        project: Project,
        time_entries: Sequence[TimeEntry],
        members: Sequence[Member],
    ) -> BudgetSummaryResult:
        result = compute_budget_summary(
            project,
            time_entries,
            members,
            max_hours=self.settings.max_entry_hours,
            deficit_warning=self.settings.deficit_warning_message,
        )
        logger.debug(
            "Budget summary for project %s: revenue=%s total_cost=%s members=%d",
            project.id,
            result.budget.revenue,
            result.budget.total_cost,
            len(result.member_costs),
        )
        if result.budget.is_deficit:
            logger.info("Project %s is in deficit: profit=%s", project.id, result.budget.profit)
        return result

    def time_entry_summary(
        self,
        time_entries: Sequence[TimeEntry],
        members: Sequence[Member],
    ) -> TimeEntrySummary:
        return summarize_time_entries(time_entries, members, max_hours=self.settings.max_entry_hours)

    def budget_comparison(
        self,
        project: Project,
        time_entries: Sequence[TimeEntry],
        members: Sequence[Member],
    ) -> BudgetComparison:
        summary = self.time_entry_summary(time_entries, members)
        return compute_budget_comparison(project, summary.total_cost)

    def project_report(
        self,
        project: Project,
        tasks: Sequence[Task],
        time_entries: Sequence[TimeEntry],
        members: Sequence[Member],
    ) -> ProjectReport:
        """Build the full project report from one consistent input bundle.

        Task actual hours are re-derived from ``time_entries``; any actual
        hours sent by the caller are ignored.
        """

        derived_tasks = derive_actual_hours(tasks, time_entries)
        budget_summary = self.budget_summary(project, time_entries, members)
        task_costs = compute_task_costs(
            derived_tasks,
            time_entries,
            members,
            max_hours=self.settings.max_entry_hours,
        )
        project_summary = compute_project_summary(derived_tasks)
        if project_summary.is_over_budget:
            logger.info(
                "Project %s exceeds planned hours by %s",
                project.id,
                project_summary.variance_hours,
            )
        return ProjectReport(
            project=project,
            tasks=tuple(derived_tasks),
            task_costs=tuple(task_costs),
            project_summary=project_summary,
            budget_summary=budget_summary,
            budget_comparison=compute_budget_comparison(project, budget_summary.budget.total_cost),
        )

    # ---------- Serialization ----------
    @staticmethod
    def serialize_budget_summary(result: BudgetSummaryResult, *, display: bool = False) -> dict[str, object]:
        payload = serialize_budget_summary(result)
        if display:
            payload["display"] = budget_summary_display(result)
        return payload

    @staticmethod
    def serialize_project_summary(
        summary: ProjectSummary,
        *,
        project_id: UUID | None = None,
        display: bool = False,
    ) -> dict[str, object]:
        payload = serialize_project_summary(summary, project_id)
        if display:
            payload["display"] = project_summary_display(summary)
        return payload

    @classmethod
    def serialize_report(cls, report: ProjectReport, *, display: bool = False) -> dict[str, object]:
        return {
            "project_id": str(report.project.id),
            "project_name": report.project.name,
            "project_status": report.project.status.value,
            "tasks": [serialize_task(task) for task in report.tasks],
            "task_costs": [serialize_task_cost(row) for row in report.task_costs],
            "summary": cls.serialize_project_summary(
                report.project_summary,
                project_id=report.project.id,
                display=display,
            ),
            "budget": cls.serialize_budget_summary(report.budget_summary, display=display),
            "budget_comparison": serialize_budget_comparison(report.budget_comparison),
        }
