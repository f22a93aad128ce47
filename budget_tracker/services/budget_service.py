"""Budget aggregation: labor cost, profit and per-member cost breakdown."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from uuid import UUID

from budget_tracker.core.config import DEFICIT_WARNING_MESSAGE, MAX_ENTRY_HOURS
from budget_tracker.core.errors import InvalidInputError
from budget_tracker.models.entities import Member, Project, Task, TimeEntry


@dataclass(frozen=True, slots=True)
class MemberCost:
    member_id: UUID
    member_name: str
    hours: float
    hourly_rate: float
    cost: float
    percentage: float


@dataclass(frozen=True, slots=True)
class CostBreakdown:
    labor_cost: float
    total_hours: float
    average_rate: float


@dataclass(frozen=True, slots=True)
class BudgetFigures:
    revenue: float
    total_cost: float
    profit: float
    profit_rate: float
    currency: str
    is_deficit: bool


@dataclass(frozen=True, slots=True)
class BudgetSummaryResult:
    project_id: UUID
    project_name: str
    budget: BudgetFigures
    cost_breakdown: CostBreakdown
    member_costs: tuple[MemberCost, ...]
    warning_message: str | None = None


@dataclass(frozen=True, slots=True)
class TaskCost:
    task_id: UUID
    task_name: str
    hours: float
    cost: float


@dataclass(frozen=True, slots=True)
class TimeEntrySummary:
    total_hours: float
    total_cost: float


@dataclass(frozen=True, slots=True)
class BudgetComparison:
    project_id: UUID
    planned_budget: float
    actual_cost: float
    variance: float
    variance_rate: float
    is_over_budget: bool


def _safe_div(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return 0.0
    return numerator / denominator


def _percent_of(part: float, whole: float) -> float:
    if whole > 0:
        return part / whole * 100
    return 0.0


def validate_revenue(revenue: float) -> None:
    if not math.isfinite(revenue) or revenue < 0:
        raise InvalidInputError("revenue must be greater or equal zero.")


def validate_entry_hours(entry: TimeEntry, *, max_hours: float = MAX_ENTRY_HOURS) -> None:
    if not math.isfinite(entry.hours) or entry.hours < 0 or entry.hours > max_hours:
        raise InvalidInputError(
            f"Time entry hours must be between 0 and {max_hours:g}; got {entry.hours} "
            f"for member {entry.member_id} on {entry.work_date.isoformat()}."
        )
    snapshot = entry.hourly_rate_snapshot
    if snapshot is not None and (not math.isfinite(snapshot) or snapshot < 0):
        raise InvalidInputError("hourly_rate_snapshot must be a finite number greater or equal zero.")


def index_members(members: Sequence[Member]) -> dict[UUID, Member]:
    """Map members by id, rejecting duplicate ids and negative rates."""

    lookup: dict[UUID, Member] = {}
    for member in members:
        if member.id in lookup:
            raise InvalidInputError(f"Duplicate member id {member.id} in members list.")
        if not math.isfinite(member.hourly_rate) or member.hourly_rate < 0:
            raise InvalidInputError(f"hourly_rate of member {member.id} must be greater or equal zero.")
        lookup[member.id] = member
    return lookup


def _require_finite(value: float, label: str) -> float:
    if not math.isfinite(value):
        raise InvalidInputError(f"{label} is out of range; check hours and hourly rates.")
    return value


def _resolve_member(lookup: dict[UUID, Member], entry: TimeEntry) -> Member:
    member = lookup.get(entry.member_id)
    if member is None:
        raise InvalidInputError(f"Time entry references unknown member_id {entry.member_id}.")
    return member


def _costed_entries(
    time_entries: Sequence[TimeEntry],
    members: Sequence[Member],
    *,
    max_hours: float,
) -> list[tuple[TimeEntry, Member, float]]:
    lookup = index_members(members)
    costed: list[tuple[TimeEntry, Member, float]] = []
    for entry in time_entries:
        validate_entry_hours(entry, max_hours=max_hours)
        member = _resolve_member(lookup, entry)
        costed.append((entry, member, _require_finite(entry.cost(member), "Time entry cost")))
    return costed


def compute_budget_summary(
    project: Project,
    time_entries: Sequence[TimeEntry],
    members: Sequence[Member],
    *,
    max_hours: float = MAX_ENTRY_HOURS,
    deficit_warning: str = DEFICIT_WARNING_MESSAGE,
) -> BudgetSummaryResult:
    """Aggregate a project's time entries into a budget summary.

    Each entry is costed with its own rate snapshot, falling back to the
    member's current rate, so historical rates survive later rate changes.
    Members whose summed hours are zero are left out of ``member_costs``.
    Figures are not rounded.
    """

    validate_revenue(project.revenue)
    costed = _costed_entries(time_entries, members, max_hours=max_hours)

    hours_by_member: dict[UUID, float] = {}
    cost_by_member: dict[UUID, float] = {}
    member_by_id: dict[UUID, Member] = {}
    for entry, member, cost in costed:
        hours_by_member[member.id] = hours_by_member.get(member.id, 0.0) + entry.hours
        cost_by_member[member.id] = cost_by_member.get(member.id, 0.0) + cost
        member_by_id[member.id] = member

    total_hours = sum(hours_by_member.values())
    total_cost = _require_finite(sum(cost_by_member.values()), "Total cost")

    member_costs = [
        MemberCost(
            member_id=member_id,
            member_name=member_by_id[member_id].name,
            hours=hours,
            hourly_rate=_safe_div(cost_by_member[member_id], hours),
            cost=cost_by_member[member_id],
            percentage=_percent_of(cost_by_member[member_id], total_cost),
        )
        for member_id, hours in hours_by_member.items()
        if hours > 0
    ]
    member_costs.sort(key=lambda row: (-row.cost, row.member_name, str(row.member_id)))

    profit = project.revenue - total_cost
    is_deficit = profit < 0

    return BudgetSummaryResult(
        project_id=project.id,
        project_name=project.name,
        budget=BudgetFigures(
            revenue=project.revenue,
            total_cost=total_cost,
            profit=profit,
            profit_rate=_require_finite(_percent_of(profit, project.revenue), "Profit rate"),
            currency=project.currency,
            is_deficit=is_deficit,
        ),
        cost_breakdown=CostBreakdown(
            labor_cost=total_cost,
            total_hours=total_hours,
            average_rate=_safe_div(total_cost, total_hours),
        ),
        member_costs=tuple(member_costs),
        warning_message=deficit_warning if is_deficit else None,
    )


def summarize_time_entries(
    time_entries: Sequence[TimeEntry],
    members: Sequence[Member],
    *,
    max_hours: float = MAX_ENTRY_HOURS,
) -> TimeEntrySummary:
    costed = _costed_entries(time_entries, members, max_hours=max_hours)
    return TimeEntrySummary(
        total_hours=sum(entry.hours for entry, _, _ in costed),
        total_cost=_require_finite(sum(cost for _, _, cost in costed), "Total cost"),
    )


def compute_task_costs(
    tasks: Sequence[Task],
    time_entries: Sequence[TimeEntry],
    members: Sequence[Member],
    *,
    max_hours: float = MAX_ENTRY_HOURS,
) -> list[TaskCost]:
    """Hours and labor cost per task, in the order tasks are supplied.

    Entries for tasks outside ``tasks`` are ignored here; callers that need
    referential checks run ``derive_actual_hours`` first.
    """

    costed = _costed_entries(time_entries, members, max_hours=max_hours)
    hours_by_task: dict[UUID, float] = {}
    cost_by_task: dict[UUID, float] = {}
    for entry, _, cost in costed:
        hours_by_task[entry.task_id] = hours_by_task.get(entry.task_id, 0.0) + entry.hours
        cost_by_task[entry.task_id] = cost_by_task.get(entry.task_id, 0.0) + cost

    return [
        TaskCost(
            task_id=task.id,
            task_name=task.name,
            hours=hours_by_task.get(task.id, 0.0),
            cost=cost_by_task.get(task.id, 0.0),
        )
        for task in tasks
    ]


def compute_budget_comparison(project: Project, actual_cost: float) -> BudgetComparison:
    """Compare the project's planned budget with its actual labor cost."""

    planned = project.budget_amount or 0.0
    if planned < 0:
        raise InvalidInputError("budget_amount must be greater or equal zero.")
    variance = actual_cost - planned
    return BudgetComparison(
        project_id=project.id,
        planned_budget=planned,
        actual_cost=actual_cost,
        variance=variance,
        variance_rate=_percent_of(variance, planned),
        is_over_budget=variance > 0,
    )


# ---------- Serialization ----------
def serialize_member_cost(row: MemberCost) -> dict[str, object]:
    return {
        "member_id": str(row.member_id),
        "member_name": row.member_name,
        "hours": row.hours,
        "hourly_rate": row.hourly_rate,
        "cost": row.cost,
        "percentage": row.percentage,
    }


def serialize_budget_summary(result: BudgetSummaryResult) -> dict[str, object]:
    payload: dict[str, object] = {
        "project_id": str(result.project_id),
        "project_name": result.project_name,
        "budget": {
            "revenue": result.budget.revenue,
            "total_cost": result.budget.total_cost,
            "profit": result.budget.profit,
            "profit_rate": result.budget.profit_rate,
            "currency": result.budget.currency,
            "is_deficit": result.budget.is_deficit,
        },
        "cost_breakdown": {
            "labor_cost": result.cost_breakdown.labor_cost,
            "total_hours": result.cost_breakdown.total_hours,
            "average_rate": result.cost_breakdown.average_rate,
        },
        "member_costs": [serialize_member_cost(row) for row in result.member_costs],
    }
    if result.warning_message:
        payload["warning_message"] = result.warning_message
    return payload


def serialize_task_cost(row: TaskCost) -> dict[str, object]:
    return {
        "task_id": str(row.task_id),
        "task_name": row.task_name,
        "hours": row.hours,
        "cost": row.cost,
    }


def serialize_time_entry_summary(summary: TimeEntrySummary) -> dict[str, float]:
    return {"total_hours": summary.total_hours, "total_cost": summary.total_cost}


def serialize_budget_comparison(row: BudgetComparison) -> dict[str, object]:
    return {
        "project_id": str(row.project_id),
        "planned_budget": row.planned_budget,
        "actual_cost": row.actual_cost,
        "variance": row.variance,
        "variance_rate": row.variance_rate,
        "is_over_budget": row.is_over_budget,
    }
