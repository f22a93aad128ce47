"""Request payloads shared by computation endpoints."""

from __future__ import annotations

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from budget_tracker.models.entities import (
    DEFAULT_CURRENCY,
    Member,
    Project,
    ProjectStatus,
    Task,
    TaskStatus,
    TimeEntry,
)


class ProjectPayload(BaseModel):
    id: UUID
    name: str = Field(min_length=1, max_length=200)
    revenue: float = Field(default=0.0, ge=0)
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    status: ProjectStatus = ProjectStatus.PLANNING
    budget_amount: float | None = Field(default=None, ge=0)

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, value: str | None) -> str | None:
        return value.upper() if value is not None else None

    def to_domain(self, default_currency: str = DEFAULT_CURRENCY) -> Project:
        return Project(
            id=self.id,
            name=self.name,
            revenue=self.revenue,
            currency=self.currency or default_currency,
            status=self.status,
            budget_amount=self.budget_amount,
        )


class MemberPayload(BaseModel):
    id: UUID
    name: str = Field(min_length=1, max_length=100)
    hourly_rate: float = Field(default=0.0, ge=0)

    def to_domain(self) -> Member:
        return Member(id=self.id, name=self.name, hourly_rate=self.hourly_rate)


class TaskPayload(BaseModel):
    id: UUID
    name: str = Field(min_length=1, max_length=200)
    planned_hours: float = Field(default=0.0, ge=0)
    actual_hours: float = Field(default=0.0, ge=0)
    status: TaskStatus = TaskStatus.TODO

    def to_domain(self) -> Task:
        return Task(
            id=self.id,
            name=self.name,
            planned_hours=self.planned_hours,
            actual_hours=self.actual_hours,
            status=self.status,
        )


class TimeEntryPayload(BaseModel):
    task_id: UUID
    member_id: UUID
    work_date: date
    # Upper bound is enforced by the calculators against settings.max_entry_hours.
    hours: float = Field(ge=0)
    hourly_rate_snapshot: float | None = Field(default=None, ge=0)
    comment: str | None = None

    def to_domain(self) -> TimeEntry:
        return TimeEntry(
            task_id=self.task_id,
            member_id=self.member_id,
            work_date=self.work_date,
            hours=self.hours,
            hourly_rate_snapshot=self.hourly_rate_snapshot,
            comment=self.comment,
        )


class BudgetInputPayload(BaseModel):
    project: ProjectPayload
    time_entries: list[TimeEntryPayload] = Field(default_factory=list)
    members: list[MemberPayload] = Field(default_factory=list)


class TimeEntrySummaryPayload(BaseModel):
    time_entries: list[TimeEntryPayload] = Field(default_factory=list)
    members: list[MemberPayload] = Field(default_factory=list)


class ProjectSummaryPayload(BaseModel):
    project_id: UUID | None = None
    tasks: list[TaskPayload] = Field(default_factory=list)


class ProjectReportPayload(BaseModel):
    project: ProjectPayload
    tasks: list[TaskPayload] = Field(default_factory=list)
    time_entries: list[TimeEntryPayload] = Field(default_factory=list)
    members: list[MemberPayload] = Field(default_factory=list)
