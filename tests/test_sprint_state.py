"""Sprint phase classification and working-day counters."""

import pytest

from sprint_capacity.engine import sprint_state
from sprint_capacity.engine.sprint_state import get_sprint_time_state
from sprint_capacity.models.entities import Project
from sprint_capacity.models.sprint import SprintPhase
from sprint_capacity.utils.datetime_utils import date_range


class TestActiveSprint:
    def test_first_day(self, project, cache):
        state = get_sprint_time_state(project, "2024-06-03", cache)
        assert state.is_valid
        assert state.phase is SprintPhase.ACTIVE
        assert state.total_working_days == 10
        assert state.elapsed_working_days == 1
        assert state.remaining_working_days == 9
        assert state.current_day == 1
        assert state.progress_percent == 10

    def test_today_counts_as_elapsed(self, project, cache):
        state = get_sprint_time_state(project, "2024-06-05", cache)
        assert state.elapsed_working_days == 3
        assert state.remaining_working_days == 7

    def test_weekend_inside_sprint(self, project, cache):
        state = get_sprint_time_state(project, "2024-06-08", cache)
        assert state.is_active
        assert state.elapsed_working_days == 5
        assert state.remaining_working_days == 5
        assert state.progress_percent == 50

    def test_last_day_has_nothing_remaining(self, project, cache):
        state = get_sprint_time_state(project, "2024-06-14", cache)
        assert state.is_active
        assert state.elapsed_working_days == 10
        assert state.remaining_working_days == 0
        assert state.progress_percent == 100


class TestBoundaryPhases:
    def test_not_started(self, project, cache):
        state = get_sprint_time_state(project, "2024-06-01", cache)
        assert state.phase is SprintPhase.NOT_STARTED
        assert state.is_not_started
        assert state.remaining_working_days == 10
        assert state.elapsed_working_days == 0
        assert state.current_day == 0
        assert state.progress_percent == 0

    def test_complete(self, project, cache):
        state = get_sprint_time_state(project, "2024-06-15", cache)
        assert state.phase is SprintPhase.COMPLETE
        assert state.is_complete
        assert state.elapsed_working_days == 10
        assert state.remaining_working_days == 0
        assert state.current_day == 10
        assert state.progress_percent == 100

    def test_weekend_only_sprint_has_zero_progress(self, cache):
        weekend = Project(name="Hack weekend", start_date="2024-06-08", end_date="2024-06-09")
        state = get_sprint_time_state(weekend, "2024-06-08", cache)
        assert state.total_working_days == 0
        assert state.progress_percent == 0


class TestNotConfigured:
    @pytest.mark.parametrize("project", [
        None,
        Project(name="No dates"),
        Project(name="No end", start_date="2024-06-03"),
        Project(name="No start", end_date="2024-06-14"),
    ])
    def test_missing_dates(self, project, cache):
        state = get_sprint_time_state(project, "2024-06-05", cache)
        assert not state.is_valid
        assert state.phase is SprintPhase.NOT_CONFIGURED
        assert state.total_working_days == 0
        assert state.elapsed_working_days == 0
        assert state.remaining_working_days == 0
        assert state.progress_percent == 0
        assert state.error == "Sprint dates not configured"
        assert not (state.is_not_started or state.is_active or state.is_complete)

    def test_malformed_dates(self, cache):
        state = get_sprint_time_state(
            Project(name="Typo", start_date="2024-06-03", end_date="next friday"), "2024-06-05", cache)
        assert not state.is_valid
        assert state.error == "Invalid sprint dates"

    def test_start_after_end(self, cache):
        state = get_sprint_time_state(
            Project(name="Backwards", start_date="2024-06-14", end_date="2024-06-03"), "2024-06-05", cache)
        assert not state.is_valid
        assert state.total_working_days == 0


class TestInvariants:
    def test_phases_are_exclusive_and_counts_bounded(self, project, cache):
        for today in date_range("2024-05-25", "2024-06-23"):
            state = get_sprint_time_state(project, today, cache)
            flags = [state.is_not_started, state.is_active, state.is_complete]
            assert flags.count(True) == 1, today
            assert state.elapsed_working_days >= 0
            assert state.remaining_working_days >= 0
            assert state.elapsed_working_days + state.remaining_working_days <= state.total_working_days

    def test_uses_local_today_by_default(self, project, cache, monkeypatch):
        monkeypatch.setattr(sprint_state, "local_today", lambda: "2024-06-05")
        state = get_sprint_time_state(project, cache=cache)
        assert state.today == "2024-06-05"
        assert state.elapsed_working_days == 3

    def test_does_not_mutate_project(self, project, cache):
        before = (project.name, project.start_date, project.end_date)
        get_sprint_time_state(project, "2024-06-05", cache)
        assert (project.name, project.start_date, project.end_date) == before
