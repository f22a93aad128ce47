"""Domain model package."""

from budget_tracker.models.entities import (
    DEFAULT_CURRENCY,
    Member,
    Project,
    ProjectStatus,
    Task,
    TaskStatus,
    TimeEntry,
)

__all__ = [
    "DEFAULT_CURRENCY",
    "Member",
    "Project",
    "ProjectStatus",
    "Task",
    "TaskStatus",
    "TimeEntry",
]
