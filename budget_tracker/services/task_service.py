"""Planned vs. actual hours: task variance and project task summary."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from uuid import UUID

from budget_tracker.core.errors import NotFoundError
from budget_tracker.models.entities import Task, TaskStatus, TimeEntry


@dataclass(frozen=True, slots=True)
class TaskVariance:
    variance_hours: float
    variance_percentage: float


@dataclass(frozen=True, slots=True)
class ProjectSummary:
    total_tasks: int
    todo_tasks: int
    in_progress_tasks: int
    completed_tasks: int
    blocked_tasks: int
    total_planned_hours: float
    total_actual_hours: float
    variance_hours: float
    variance_percentage: float
    completion_rate: float
    is_over_budget: bool


def hours_variance(planned_hours: float, actual_hours: float) -> TaskVariance:
    variance = actual_hours - planned_hours
    if planned_hours == 0:
        return TaskVariance(variance_hours=variance, variance_percentage=0.0)
    return TaskVariance(variance_hours=variance, variance_percentage=variance / planned_hours * 100)


def compute_task_variance(task: Task) -> TaskVariance:
    return hours_variance(task.planned_hours, task.actual_hours)


def compute_project_summary(tasks: Sequence[Task]) -> ProjectSummary:
    """Tally task statuses and compare total planned with total actual hours."""

    counts = {status: 0 for status in TaskStatus}
    total_planned = 0.0
    total_actual = 0.0
    for task in tasks:
        counts[TaskStatus(task.status)] += 1
        total_planned += task.planned_hours
        total_actual += task.actual_hours

    total_tasks = len(tasks)
    variance = hours_variance(total_planned, total_actual)
    completed = counts[TaskStatus.COMPLETED]

    return ProjectSummary(
        total_tasks=total_tasks,
        todo_tasks=counts[TaskStatus.TODO],
        in_progress_tasks=counts[TaskStatus.IN_PROGRESS],
        completed_tasks=completed,
        blocked_tasks=counts[TaskStatus.BLOCKED],
        total_planned_hours=total_planned,
        total_actual_hours=total_actual,
        variance_hours=variance.variance_hours,
        variance_percentage=variance.variance_percentage,
        completion_rate=completed / total_tasks * 100 if total_tasks > 0 else 0.0,
        is_over_budget=variance.variance_hours > 0,
    )


def derive_actual_hours(tasks: Sequence[Task], time_entries: Sequence[TimeEntry]) -> list[Task]:
    """Return task copies whose actual hours are the sum of their time entries.

    Raises ``NotFoundError`` when an entry references a task not in ``tasks``.
    """

    hours_by_task: dict[UUID, float] = {task.id: 0.0 for task in tasks}
    for entry in time_entries:
        if entry.task_id not in hours_by_task:
            raise NotFoundError("Task", entry.task_id)
        hours_by_task[entry.task_id] += entry.hours
    return [replace(task, actual_hours=hours_by_task[task.id]) for task in tasks]


# ---------- Serialization ----------
def serialize_task(task: Task) -> dict[str, object]:
    variance = compute_task_variance(task)
    return {
        "id": str(task.id),
        "name": task.name,
        "status": TaskStatus(task.status).value,
        "planned_hours": task.planned_hours,
        "actual_hours": task.actual_hours,
        "variance_hours": variance.variance_hours,
        "variance_percentage": variance.variance_percentage,
    }


def serialize_project_summary(summary: ProjectSummary, project_id: UUID | None = None) -> dict[str, object]:
    return {
        "project_id": str(project_id) if project_id is not None else None,
        "total_tasks": summary.total_tasks,
        "total_planned_hours": summary.total_planned_hours,
        "total_actual_hours": summary.total_actual_hours,
        "variance_hours": summary.variance_hours,
        "variance_percentage": summary.variance_percentage,
        "is_over_budget": summary.is_over_budget,
        "completed_tasks": summary.completed_tasks,
        "in_progress_tasks": summary.in_progress_tasks,
        "todo_tasks": summary.todo_tasks,
        "blocked_tasks": summary.blocked_tasks,
        "completion_rate": summary.completion_rate,
    }
