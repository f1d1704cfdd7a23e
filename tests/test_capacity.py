"""Capacity model: sprint hours, remaining hours, team totals, utilization."""

import pytest

from sprint_capacity.engine.capacity import (
    AVAILABLE,
    NEAR_CAPACITY,
    OVER_CAPACITY,
    allocated_hours_by_member,
    capacity_status,
    capped_utilization_percent,
    clamped_utilization_percent,
    remaining_capacity,
    sprint_capacity,
    team_capacity,
    team_remaining_capacity,
    utilization_percent,
)
from sprint_capacity.engine.sprint_state import get_sprint_time_state
from sprint_capacity.models.entities import Project, TeamMember
from sprint_capacity.utils.rounding import round1

from conftest import make_task


class TestSprintCapacity:
    def test_full_time_member(self, cache):
        capacity = sprint_capacity(40, "2024-06-03", "2024-06-14", cache)
        assert capacity.working_days == 10
        assert capacity.hours_per_day == 8
        assert capacity.total_hours == 80.0

    def test_part_time_member(self, cache):
        capacity = sprint_capacity(36, "2024-06-03", "2024-06-14", cache)
        assert capacity.hours_per_day == pytest.approx(7.2)
        assert capacity.total_hours == pytest.approx(72.0)

    def test_total_is_rounded_to_one_decimal(self, cache):
        capacity = sprint_capacity(0.26, "2024-06-03", "2024-06-03", cache)
        assert capacity.total_hours == pytest.approx(0.1)


class TestMemberBandwidth:
    def test_missing_bandwidth_defaults_to_40(self):
        assert TeamMember(id="x", name="X").weekly_hours() == 40

    def test_zero_bandwidth_is_not_missing(self, cache):
        member = TeamMember(id="x", name="X", bandwidth_hours=0)
        assert member.weekly_hours() == 0
        assert sprint_capacity(member.weekly_hours(), "2024-06-03", "2024-06-14", cache).total_hours == 0

    def test_negative_bandwidth_rejected(self):
        with pytest.raises(ValueError):
            TeamMember(id="x", name="X", bandwidth_hours=-1)


class TestRemainingCapacity:
    def test_active_sprint_counts_from_tomorrow(self, project, alice, cache):
        state = get_sprint_time_state(project, "2024-06-03", cache)
        assert remaining_capacity(alice, state) == pytest.approx(72.0)

    def test_not_started_has_full_sprint(self, project, alice, cache):
        state = get_sprint_time_state(project, "2024-05-31", cache)
        assert remaining_capacity(alice, state) == pytest.approx(80.0)

    def test_complete_sprint_has_nothing(self, project, alice, cache):
        state = get_sprint_time_state(project, "2024-06-17", cache)
        assert remaining_capacity(alice, state) == 0

    def test_unconfigured_sprint_has_nothing(self, alice, cache):
        state = get_sprint_time_state(Project(name="TBD"), "2024-06-03", cache)
        assert remaining_capacity(alice, state) == 0


class TestTeamCapacity:
    def test_members_and_total(self, project, members, cache):
        state = get_sprint_time_state(project, "2024-06-03", cache)
        team = team_capacity(members, project, cache=cache, state=state)
        assert team.total_hours == pytest.approx(160.0)
        assert team.working_days == 10
        assert [m.member_id for m in team.members] == ["alice", "bob"]
        assert team.members[0].hours_per_day == 8

    def test_default_bandwidth_applies_to_missing_values(self, project, cache):
        state = get_sprint_time_state(project, "2024-06-03", cache)
        team = team_capacity([TeamMember(id="x", name="X")], project, default_hours=20,
                             cache=cache, state=state)
        assert team.total_hours == pytest.approx(40.0)

    def test_sum_of_rounded_member_totals(self, cache):
        one_day = Project(name="Day", start_date="2024-06-03", end_date="2024-06-03")
        members = [TeamMember(id=str(i), name=str(i), bandwidth_hours=0.26) for i in range(3)]
        state = get_sprint_time_state(one_day, "2024-06-03", cache)

        team = team_capacity(members, one_day, cache=cache, state=state)

        # Each member rounds 0.052h up to 0.1h before summing.
        assert [m.total_hours for m in team.members] == [pytest.approx(0.1)] * 3
        assert team.total_hours == pytest.approx(0.3)
        assert round1(3 * 0.26 / 5) == pytest.approx(0.2)

    def test_remaining_uses_two_stage_rounding(self, cache):
        two_days = Project(name="Days", start_date="2024-06-03", end_date="2024-06-04")
        members = [TeamMember(id=str(i), name=str(i), bandwidth_hours=0.26) for i in range(3)]
        state = get_sprint_time_state(two_days, "2024-06-03", cache)
        assert team_remaining_capacity(members, state) == pytest.approx(0.3)

    def test_unconfigured_project(self, members, cache):
        team = team_capacity(members, Project(name="TBD"), cache=cache)
        assert team.total_hours == 0
        assert team.members == ()


class TestAllocation:
    def test_sums_estimates_per_owner(self):
        tasks = [
            make_task("1", owner="alice", hours=10),
            make_task("2", owner="alice", hours=None),
            make_task("3", owner="bob", hours=5),
            make_task("4", owner="", hours=3),
            make_task("5", owner="both", hours=2),
        ]
        assert allocated_hours_by_member(tasks) == {
            "alice": 10, "bob": 5, "unassigned": 3, "both": 2,
        }


class TestUtilization:
    def test_raw_ratio(self):
        assert utilization_percent(50, 80) == pytest.approx(62.5)

    def test_no_capacity_is_zero(self):
        assert utilization_percent(50, 0) == 0
        assert capped_utilization_percent(50, 0) == 0
        assert clamped_utilization_percent(50, 0) == 0

    def test_capped_policy_reports_overload(self):
        assert capped_utilization_percent(50, 80) == 63
        assert capped_utilization_percent(120, 80) == 150
        assert capped_utilization_percent(900, 80) == 999

    def test_clamped_policy_fills_bar(self):
        assert clamped_utilization_percent(50, 80) == pytest.approx(62.5)
        assert clamped_utilization_percent(120, 80) == 100
        assert clamped_utilization_percent(-10, 80) == 0

    def test_status_thresholds(self):
        assert capacity_status(100) == OVER_CAPACITY
        assert capacity_status(80) == NEAR_CAPACITY
        assert capacity_status(79) == AVAILABLE
        assert capacity_status(70, near=70, over=90) == NEAR_CAPACITY
