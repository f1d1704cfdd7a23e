"""Dashboard summaries built on the calendar and capacity engine."""

from typing import Any, Dict, Iterable, List, Optional

from ..models.entities import Project, Task, TeamMember
from ..models.report import ExecutiveSummary, MemberBandwidth, StatusCount, TeamBandwidth
from ..models.sprint import SprintTimeState
from ..utils.config import get_default_config
from ..utils.datetime_utils import CalendarCache, to_date
from ..utils.rounding import round_half_up
from .capacity import (
    allocated_hours_by_member,
    capacity_status,
    capped_utilization_percent,
    clamped_utilization_percent,
    member_sprint_hours,
    remaining_capacity,
    team_capacity,
    team_remaining_capacity,
    utilization_percent,
)
from .scheduler import get_next_available_day

HIGH = "High"
MEDIUM = "Medium"
LOW = "Low"


def _section(config: Optional[Dict[str, Any]], name: str) -> Dict[str, Any]:
    defaults = get_default_config()[name]
    return {**defaults, **((config or {}).get(name) or {})}


def status_breakdown(tasks: Iterable[Task]) -> List[StatusCount]:
    """Task counts per display status, most common first."""
    tasks = list(tasks)
    counts: Dict[str, int] = {}
    for task in tasks:
        status = "Completed" if task.completed else (task.status or "Not Started")
        counts[status] = counts.get(status, 0) + 1

    total = len(tasks)
    ordered = sorted(counts.items(), key=lambda item: -item[1])
    return [
        StatusCount(status, count, round_half_up(count / total * 100) if total else 0)
        for status, count in ordered
    ]


def is_blocked(task: Task) -> bool:
    return 'blocked' in (task.status or '').lower() or bool(task.blockers.strip())


def is_delayed(task: Task) -> bool:
    return 'delayed' in (task.status or '').lower()


def is_overdue(task: Task, today: str) -> bool:
    """Past its end date and not completed."""
    if not task.end_date or (task.status or '').lower() == 'completed':
        return False
    try:
        return to_date(task.end_date) < to_date(today)
    except ValueError:
        return False


def executive_summary(
    tasks: Iterable[Task],
    members: Iterable[TeamMember],
    state: SprintTimeState,
    config: Optional[Dict[str, Any]] = None,
    cache: CalendarCache = None,
) -> ExecutiveSummary:
    """Headline progress, utilization and risk figures."""
    tasks = list(tasks)
    capacity_config = _section(config, 'capacity')
    risk_config = _section(config, 'risk')
    default_hours = capacity_config['default_bandwidth_hours']

    total = len(tasks)
    completed = sum(1 for t in tasks if t.completed)
    allocated = sum(t.hours() for t in tasks)
    team_hours = team_capacity(members, None, default_hours, cache, state).total_hours
    utilization = capped_utilization_percent(
        allocated, team_hours, capacity_config['utilization_display_cap'])

    blocked = sum(1 for t in tasks if is_blocked(t))
    delayed = sum(1 for t in tasks if is_delayed(t))
    overdue = sum(1 for t in tasks if is_overdue(t, state.today))
    over_utilized = utilization > capacity_config['over_capacity_percent']

    if (blocked > risk_config['high_blocked_tasks']
            or delayed > risk_config['high_delayed_tasks']
            or over_utilized):
        risk_level = HIGH
    elif blocked > 0 or delayed > 0 or utilization > risk_config['medium_utilization_percent']:
        risk_level = MEDIUM
    else:
        risk_level = LOW

    factors = []
    if blocked > 0:
        factors.append(f"{blocked} blocked")
    if delayed > 0:
        factors.append(f"{delayed} delayed")
    if over_utilized:
        factors.append("over capacity")

    return ExecutiveSummary(
        total_tasks=total,
        completed_tasks=completed,
        progress_percent=round_half_up(completed / total * 100) if total else 0,
        allocated_hours=allocated,
        team_sprint_hours=team_hours,
        utilization_percent=utilization,
        blocked_tasks=blocked,
        delayed_tasks=delayed,
        overdue_tasks=overdue,
        risk_level=risk_level,
        risk_factors=tuple(factors),
    )


def bandwidth_overview(
    members: Iterable[TeamMember],
    tasks: Iterable[Task],
    project: Optional[Project],
    state: SprintTimeState,
    config: Optional[Dict[str, Any]] = None,
    cache: CalendarCache = None,
    min_free_hours: Optional[float] = None,
) -> List[MemberBandwidth]:
    """Per-member sprint hours, allocation and next free slot."""
    if not state.is_valid:
        return []

    tasks = list(tasks)
    capacity_config = _section(config, 'capacity')
    default_hours = capacity_config['default_bandwidth_hours']
    if min_free_hours is None:
        min_free_hours = _section(config, 'scheduling')['min_free_hours']
    allocated_by_owner = allocated_hours_by_member(tasks)

    rows = []
    for member in members:
        sprint_hours = member_sprint_hours(member, state, default_hours, cache)
        allocated = allocated_by_owner.get(member.id, 0)
        utilization = round_half_up(utilization_percent(allocated, sprint_hours))
        rows.append(MemberBandwidth(
            member_id=member.id,
            name=member.name,
            sprint_hours=sprint_hours,
            remaining_hours=remaining_capacity(member, state, default_hours),
            allocated_hours=allocated,
            utilization_percent=utilization,
            available_hours=max(0, sprint_hours - allocated),
            status=capacity_status(
                utilization,
                near=capacity_config['near_capacity_percent'],
                over=capacity_config['over_capacity_percent'],
            ),
            next_available=get_next_available_day(
                member, tasks, project, min_free_hours,
                cache=cache, default_hours=default_hours, state=state,
            ),
        ))
    return rows


def team_bandwidth(
    members: Iterable[TeamMember],
    tasks: Iterable[Task],
    project: Optional[Project],
    state: SprintTimeState,
    config: Optional[Dict[str, Any]] = None,
    cache: CalendarCache = None,
) -> TeamBandwidth:
    """Team capacity ring: raw utilization for labels, clamped fill for the bar."""
    members = list(members)
    default_hours = _section(config, 'capacity')['default_bandwidth_hours']
    total = team_capacity(members, project, default_hours, cache, state).total_hours
    allocated = sum(t.hours() for t in tasks)

    return TeamBandwidth(
        total_sprint_hours=total,
        allocated_hours=allocated,
        utilization_percent=utilization_percent(allocated, total),
        fill_percent=clamped_utilization_percent(allocated, total),
        available_hours=max(0, total - allocated),
        remaining_hours=team_remaining_capacity(members, state, default_hours),
        over_hours=max(0, allocated - total),
    )
