"""Shared fixtures: a two-week sprint, 2024-06-03 (Mon) to 2024-06-14 (Fri)."""

import pytest

from sprint_capacity.models.entities import Holiday, Project, Task, TeamMember
from sprint_capacity.utils.datetime_utils import CalendarCache

SPRINT_START = "2024-06-03"
SPRINT_END = "2024-06-14"


@pytest.fixture
def cache():
    """Fresh memo tables so tests never see each other's entries."""
    return CalendarCache()


@pytest.fixture
def project():
    return Project(name="Sprint 24", start_date=SPRINT_START, end_date=SPRINT_END)


@pytest.fixture
def alice():
    return TeamMember(id="alice", name="Alice", bandwidth_hours=40)


@pytest.fixture
def bob():
    return TeamMember(id="bob", name="Bob", bandwidth_hours=40)


@pytest.fixture
def members(alice, bob):
    return [alice, bob]


@pytest.fixture
def holidays():
    return [Holiday(date="2024-06-10", name="Company offsite")]


def make_task(task_id, owner="alice", start=None, end=None, hours=None, **kwargs):
    """Build a Task with terse positional dates."""
    return Task(
        id=task_id,
        name=kwargs.pop("name", f"Task {task_id}"),
        owner=owner,
        start_date=start,
        end_date=end,
        estimated_hours=hours,
        **kwargs,
    )
