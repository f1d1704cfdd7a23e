"""Sprint capacity model.

Weekly bandwidth is converted to a per-working-day rate assuming a five-day
week, then multiplied by the working days in the sprint:

    hours_per_day = weekly_hours / 5
    total_hours   = round1(hours_per_day * working_days)

Team totals add the per-member figures *after* each is rounded to one decimal,
and round the sum again.
"""

import logging
from typing import Dict, Iterable, Optional

from ..models.entities import DEFAULT_BANDWIDTH_HOURS, OWNER_UNASSIGNED, Project, Task, TeamMember
from ..models.sprint import MemberCapacity, SprintCapacity, SprintTimeState, TeamCapacity
from ..utils.datetime_utils import CalendarCache, DateLike, count_working_days
from ..utils.rounding import round1, round_half_up
from .sprint_state import get_sprint_time_state

logger = logging.getLogger(__name__)

WORK_DAYS_PER_WEEK = 5

AVAILABLE = "Available"
NEAR_CAPACITY = "Near capacity"
OVER_CAPACITY = "Over capacity"


def hours_per_day(weekly_hours: float) -> float:
    return weekly_hours / WORK_DAYS_PER_WEEK


def sprint_capacity(
    weekly_hours: float,
    start: DateLike,
    end: DateLike,
    cache: CalendarCache = None,
) -> SprintCapacity:
    """Hour budget for a weekly bandwidth over ``[start, end]``."""
    working_days = count_working_days(start, end, cache)
    per_day = hours_per_day(weekly_hours)
    return SprintCapacity(
        working_days=working_days,
        hours_per_day=per_day,
        total_hours=round1(per_day * working_days),
    )


def member_sprint_hours(
    member: TeamMember,
    state: SprintTimeState,
    default_hours: float = DEFAULT_BANDWIDTH_HOURS,
    cache: CalendarCache = None,
) -> float:
    """Total sprint hours for one member; 0 when the sprint is not configured."""
    if not state.is_valid:
        return 0
    weekly = member.weekly_hours(default_hours)
    return sprint_capacity(weekly, state.sprint_start, state.sprint_end, cache).total_hours


def remaining_capacity(
    member: TeamMember,
    state: SprintTimeState,
    default_hours: float = DEFAULT_BANDWIDTH_HOURS,
) -> float:
    """Hours a member still has for new work from tomorrow to sprint end."""
    if not state.is_valid or state.is_complete:
        return 0
    return round1(hours_per_day(member.weekly_hours(default_hours)) * state.remaining_working_days)


def team_capacity(
    members: Iterable[TeamMember],
    project: Optional[Project],
    default_hours: float = DEFAULT_BANDWIDTH_HOURS,
    cache: CalendarCache = None,
    state: Optional[SprintTimeState] = None,
) -> TeamCapacity:
    """Per-member and team sprint hours."""
    state = state or get_sprint_time_state(project, cache=cache)
    if not state.is_valid:
        return TeamCapacity(total_hours=0, working_days=0)

    records = []
    for member in members:
        weekly = member.weekly_hours(default_hours)
        capacity = sprint_capacity(weekly, state.sprint_start, state.sprint_end, cache)
        records.append(MemberCapacity(
            member_id=member.id,
            name=member.name,
            weekly_hours=weekly,
            working_days=capacity.working_days,
            hours_per_day=capacity.hours_per_day,
            total_hours=capacity.total_hours,
        ))

    total = round1(sum(m.total_hours for m in records))
    logger.debug("Team capacity: %sh across %d members, %d working days",
                 total, len(records), state.total_working_days)
    return TeamCapacity(
        total_hours=total,
        working_days=state.total_working_days,
        members=tuple(records),
    )


def team_remaining_capacity(
    members: Iterable[TeamMember],
    state: SprintTimeState,
    default_hours: float = DEFAULT_BANDWIDTH_HOURS,
) -> float:
    """Sum of per-member remaining hours (each rounded), rounded again."""
    return round1(sum(remaining_capacity(m, state, default_hours) for m in members))


def allocated_hours_by_member(tasks: Iterable[Task]) -> Dict[str, float]:
    """Map owner -> total estimated hours; ownerless tasks group as unassigned."""
    allocation: Dict[str, float] = {}
    for task in tasks:
        owner = task.owner or OWNER_UNASSIGNED
        allocation[owner] = allocation.get(owner, 0) + task.hours()
    return allocation


def utilization_percent(allocated_hours: float, capacity_hours: float) -> float:
    """Raw allocated/capacity ratio as a percentage; 0 without capacity."""
    if capacity_hours <= 0:
        return 0
    return allocated_hours / capacity_hours * 100


def capped_utilization_percent(
    allocated_hours: float,
    capacity_hours: float,
    cap: int = 999,
) -> int:
    """Rounded utilization for "are we over capacity"; may exceed 100, never ``cap``."""
    return min(round_half_up(utilization_percent(allocated_hours, capacity_hours)), cap)


def clamped_utilization_percent(allocated_hours: float, capacity_hours: float) -> float:
    """Utilization for "how full is the bar", clamped into ``[0, 100]``."""
    return min(100, max(0, utilization_percent(allocated_hours, capacity_hours)))


def capacity_status(percent: float, near: float = 80, over: float = 100) -> str:
    if percent >= over:
        return OVER_CAPACITY
    if percent >= near:
        return NEAR_CAPACITY
    return AVAILABLE
