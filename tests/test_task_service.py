from __future__ import annotations

import uuid

import pytest

from budget_tracker.core.errors import NotFoundError
from budget_tracker.models.entities import Member, Task, TaskStatus
from budget_tracker.services.task_service import (
    compute_project_summary,
    compute_task_variance,
    derive_actual_hours,
    serialize_task,
)
from conftest import make_entry


def _task(planned: float, actual: float, status: TaskStatus = TaskStatus.TODO) -> Task:
    return Task(id=uuid.uuid4(), name="Task", planned_hours=planned, actual_hours=actual, status=status)


def test_task_over_plan_variance() -> None:
    variance = compute_task_variance(_task(10, 15))

    assert variance.variance_hours == 5
    assert variance.variance_percentage == 50


def test_task_under_plan_variance() -> None:
    variance = compute_task_variance(_task(8, 6))

    assert variance.variance_hours == -2
    assert variance.variance_percentage == -25


def test_unplanned_task_percentage_is_zero() -> None:
    variance = compute_task_variance(_task(0, 5))

    assert variance.variance_hours == 5
    assert variance.variance_percentage == 0


def test_project_summary_counts_statuses_and_totals() -> None:
    tasks = [
        _task(10, 12, TaskStatus.COMPLETED),
        _task(5, 5, TaskStatus.COMPLETED),
        _task(8, 3, TaskStatus.IN_PROGRESS),
        _task(4, 0, TaskStatus.TODO),
        _task(3, 1, TaskStatus.BLOCKED),
    ]

    summary = compute_project_summary(tasks)

    assert summary.total_tasks == 5
    assert (summary.todo_tasks, summary.in_progress_tasks, summary.completed_tasks, summary.blocked_tasks) == (
        1,
        1,
        2,
        1,
    )
    assert summary.total_planned_hours == 30
    assert summary.total_actual_hours == 21
    assert summary.variance_hours == -9
    assert summary.variance_percentage == pytest.approx(-30.0)
    assert summary.completion_rate == pytest.approx(40.0)
    assert summary.is_over_budget is False


def test_project_summary_over_budget() -> None:
    summary = compute_project_summary([_task(2, 3, TaskStatus.IN_PROGRESS)])

    assert summary.is_over_budget is True
    assert summary.variance_percentage == pytest.approx(50.0)
    assert summary.completion_rate == 0


def test_project_summary_without_tasks() -> None:
    summary = compute_project_summary([])

    assert summary.total_tasks == 0
    assert summary.completion_rate == 0
    assert summary.variance_hours == 0
    assert summary.variance_percentage == 0
    assert summary.is_over_budget is False


def test_project_summary_accepts_status_values() -> None:
    task = Task(id=uuid.uuid4(), name="Raw", planned_hours=1, actual_hours=1, status="completed")

    summary = compute_project_summary([task])

    assert summary.completed_tasks == 1


def test_derive_actual_hours_sums_entries_per_task() -> None:
    member = Member(id=uuid.uuid4(), name="Dev", hourly_rate=1)
    first = _task(10, 99)
    second = _task(4, 0)
    entries = [
        make_entry(member, 3, task_id=first.id),
        make_entry(member, 2.5, task_id=first.id),
    ]

    derived = derive_actual_hours([first, second], entries)

    assert [task.actual_hours for task in derived] == [5.5, 0.0]
    assert first.actual_hours == 99


def test_derive_actual_hours_rejects_unknown_task() -> None:
    member = Member(id=uuid.uuid4(), name="Dev", hourly_rate=1)

    with pytest.raises(NotFoundError) as exc_info:
        derive_actual_hours([_task(1, 0)], [make_entry(member, 1)])

    assert exc_info.value.resource == "Task"
    assert exc_info.value.code == "NOT_FOUND"


def test_serialized_task_includes_variance() -> None:
    task = _task(10, 15, TaskStatus.IN_PROGRESS)

    payload = serialize_task(task)

    assert payload["status"] == "in_progress"
    assert payload["variance_hours"] == 5
    assert payload["variance_percentage"] == 50
