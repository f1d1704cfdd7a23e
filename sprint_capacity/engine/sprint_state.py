"""Sprint time-state: phase and elapsed/remaining working days."""

import logging
from typing import Optional

from ..models.entities import Project
from ..models.sprint import SprintPhase, SprintTimeState
from ..utils.datetime_utils import (
    CalendarCache,
    DateLike,
    add_days,
    count_working_days,
    date_key,
    local_today,
    to_date,
)
from ..utils.rounding import round_half_up

logger = logging.getLogger(__name__)


def _not_configured(today: str, error: str, project: Optional[Project] = None) -> SprintTimeState:
    return SprintTimeState(
        is_valid=False,
        phase=SprintPhase.NOT_CONFIGURED,
        today=today,
        sprint_start=project.start_date if project else None,
        sprint_end=project.end_date if project else None,
        error=error,
    )


def get_sprint_time_state(
    project: Optional[Project],
    today: Optional[DateLike] = None,
    cache: CalendarCache = None,
) -> SprintTimeState:
    """Compute the sprint phase and working-day counters for ``today``.

    Nothing is stored between calls. "Today" counts as elapsed in an active
    sprint, so ``remaining_working_days`` starts from tomorrow.
    """
    today_key = date_key(today) if today is not None else local_today()

    if project is None or not project.has_dates:
        return _not_configured(today_key, "Sprint dates not configured", project)

    try:
        start = to_date(project.start_date)
        end = to_date(project.end_date)
    except ValueError as exc:
        logger.warning("Invalid sprint dates for %r: %s", project.name, exc)
        return _not_configured(today_key, "Invalid sprint dates", project)

    if start > end:
        return _not_configured(today_key, "Sprint start date is after end date", project)

    start_key, end_key = date_key(start), date_key(end)
    current = to_date(today_key)
    total = count_working_days(start_key, end_key, cache)

    elapsed = 0
    remaining = 0
    current_day = 0

    if current < start:
        phase = SprintPhase.NOT_STARTED
        remaining = total
    elif current > end:
        phase = SprintPhase.COMPLETE
        elapsed = total
        current_day = total
    else:
        phase = SprintPhase.ACTIVE
        elapsed = count_working_days(start_key, today_key, cache)
        tomorrow = add_days(today_key, 1)
        if to_date(tomorrow) <= end:
            remaining = count_working_days(tomorrow, end_key, cache)
        current_day = elapsed

    return SprintTimeState(
        is_valid=True,
        phase=phase,
        today=today_key,
        sprint_start=start_key,
        sprint_end=end_key,
        total_working_days=total,
        elapsed_working_days=elapsed,
        remaining_working_days=remaining,
        current_day=current_day,
        progress_percent=round_half_up(elapsed / total * 100) if total > 0 else 0,
    )
