from __future__ import annotations

import uuid
from collections.abc import Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient

from budget_tracker.core.config import get_settings
from budget_tracker.main import create_app
from budget_tracker.models.entities import Member, Project, TimeEntry


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    get_settings.cache_clear()
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    get_settings.cache_clear()


def make_entry(
    member: Member,
    hours: float,
    *,
    task_id: uuid.UUID | None = None,
    snapshot: float | None = None,
    work_date: date = date(2026, 1, 15),
) -> TimeEntry:
    return TimeEntry(
        task_id=task_id or uuid.uuid4(),
        member_id=member.id,
        work_date=work_date,
        hours=hours,
        hourly_rate_snapshot=snapshot,
    )


@pytest.fixture()
def scenario_a() -> tuple[Project, list[TimeEntry], list[Member]]:
    """Revenue 1,000,000; M1 100h at 5,000, M2 50h at 3,000."""

    project = Project(id=uuid.uuid4(), name="Scenario A", revenue=1_000_000)
    m1 = Member(id=uuid.uuid4(), name="M1", hourly_rate=5_000)
    m2 = Member(id=uuid.uuid4(), name="M2", hourly_rate=3_000)
    task_id = uuid.uuid4()
    entries = [make_entry(m1, 8, task_id=task_id) for _ in range(12)]
    entries.append(make_entry(m1, 4, task_id=task_id))
    entries += [make_entry(m2, 5, task_id=task_id) for _ in range(10)]
    return project, entries, [m1, m2]
