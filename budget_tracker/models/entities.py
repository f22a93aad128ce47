"""Domain values consumed by the budget and variance calculators."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import date
from uuid import UUID

DEFAULT_CURRENCY = "JPY"


class TaskStatus(str, enum.Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    BLOCKED = "blocked"


class ProjectStatus(str, enum.Enum):
    PLANNING = "planning"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ON_HOLD = "on_hold"


@dataclass(frozen=True, slots=True)
class Project:
    id: UUID
    name: str
    revenue: float = 0.0
    currency: str = DEFAULT_CURRENCY
    status: ProjectStatus = ProjectStatus.PLANNING
    budget_amount: float | None = None


@dataclass(frozen=True, slots=True)
class Member:
    id: UUID
    name: str
    hourly_rate: float = 0.0


@dataclass(frozen=True, slots=True)
class Task:
    id: UUID
    name: str
    planned_hours: float = 0.0
    actual_hours: float = 0.0
    status: TaskStatus = TaskStatus.TODO


@dataclass(frozen=True, slots=True)
class TimeEntry:
    """Recorded effort of one member on one task for one work date.

    ``hourly_rate_snapshot`` is the member rate captured when the entry was
    recorded. When absent, the member's current rate applies.
    """

    task_id: UUID
    member_id: UUID
    work_date: date
    hours: float
    hourly_rate_snapshot: float | None = None
    comment: str | None = None

    def effective_rate(self, member: Member) -> float:
        if self.hourly_rate_snapshot is not None:
            return self.hourly_rate_snapshot
        return member.hourly_rate

    def cost(self, member: Member) -> float:
        return self.hours * self.effective_rate(member)
