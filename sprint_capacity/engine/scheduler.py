"""Next-available-slot scheduler."""

import logging
from datetime import timedelta
from typing import Dict, Iterable, Optional

from ..models.entities import DEFAULT_BANDWIDTH_HOURS, Project, Task, TeamMember
from ..models.sprint import AvailableSlot, SprintTimeState
from ..utils.datetime_utils import (
    CalendarCache,
    DateLike,
    count_working_days,
    date_key,
    date_range,
    is_weekend,
    to_date,
)
from ..utils.rounding import round1
from .capacity import hours_per_day
from .sprint_state import get_sprint_time_state

logger = logging.getLogger(__name__)

DEFAULT_MIN_FREE_HOURS = 4


def build_daily_allocation(
    tasks: Iterable[Task],
    member_id: str,
    cache: CalendarCache = None,
) -> Dict[str, float]:
    """Spread each of a member's scheduled tasks evenly over its working days.

    Only tasks owned by exactly ``member_id`` with both dates count. Weekend
    days inside a task's span receive nothing.
    """
    allocation: Dict[str, float] = {}

    for task in tasks:
        if task.owner != member_id or not task.is_scheduled:
            continue
        try:
            task_days = count_working_days(task.start_date, task.end_date, cache)
        except ValueError as exc:
            logger.warning("Skipping task %s with invalid dates: %s", task.id, exc)
            continue
        if task_days <= 0:
            continue

        hours_per_task_day = task.hours() / task_days
        for day in date_range(task.start_date, task.end_date):
            if not is_weekend(day):
                allocation[day] = allocation.get(day, 0) + hours_per_task_day

    return allocation


def get_next_available_day(
    member: TeamMember,
    tasks: Iterable[Task],
    project: Optional[Project],
    min_free_hours: float = DEFAULT_MIN_FREE_HOURS,
    today: Optional[DateLike] = None,
    cache: CalendarCache = None,
    default_hours: float = DEFAULT_BANDWIDTH_HOURS,
    state: Optional[SprintTimeState] = None,
) -> Optional[AvailableSlot]:
    """Find the first working day from today with ``min_free_hours`` unallocated.

    Greedy forward scan up to the sprint end; the first qualifying day wins.
    Returns None when the sprint is not configured, already complete, or the
    member is fully booked for the rest of it.
    """
    state = state or get_sprint_time_state(project, today, cache)
    if not state.is_valid or state.is_complete:
        return None

    per_day = hours_per_day(member.weekly_hours(default_hours))
    allocation = build_daily_allocation(tasks, member.id, cache)

    current = to_date(state.today)
    sprint_end = to_date(state.sprint_end)

    while current <= sprint_end:
        day = date_key(current)
        current += timedelta(days=1)
        if is_weekend(day):
            continue

        free_hours = max(0, per_day - allocation.get(day, 0))
        if free_hours >= min_free_hours:
            logger.debug("Next slot for %s: %s (%.1fh free)", member.id, day, free_hours)
            return AvailableSlot(date=day, free_hours=round1(free_hours))

    logger.debug("No %sh slot for %s before %s", min_free_hours, member.id, state.sprint_end)
    return None
