"""Timeline projection: Gantt bar geometry over the sprint's day columns."""

import logging
from typing import Iterable, List, Optional, Sequence

from ..models.entities import Project, Task
from ..models.timeline import BarKind, TaskBar, TimelineCell
from ..utils.datetime_utils import (
    CalendarCache,
    DateLike,
    count_working_days,
    date_key,
    date_range,
    format_date,
    is_holiday,
    is_weekend,
    local_today,
    to_date,
    weekday_initial,
)
from .status import get_status_info

logger = logging.getLogger(__name__)


def sprint_dates(project: Optional[Project]) -> List[str]:
    """Day columns of the sprint; empty when the sprint has no usable window."""
    if project is None or not project.has_dates:
        return []
    try:
        return date_range(project.start_date, project.end_date)
    except ValueError as exc:
        logger.warning("Invalid sprint dates for %r: %s", project.name, exc)
        return []


def build_timeline_cells(
    project: Optional[Project],
    holidays: Iterable = (),
    today: Optional[DateLike] = None,
    cache: CalendarCache = None,
) -> List[TimelineCell]:
    """Tag each sprint day as weekend, holiday and/or today."""
    today_key = date_key(today) if today is not None else local_today()
    holidays = list(holidays or ())

    cells = []
    for index, day in enumerate(sprint_dates(project)):
        cells.append(TimelineCell(
            date=day,
            index=index,
            day_of_month=to_date(day).day,
            weekday=weekday_initial(day),
            label=format_date(day, cache),
            is_weekend=is_weekend(day),
            is_holiday=is_holiday(day, holidays),
            is_today=day == today_key,
        ))
    return cells


def _hidden(task: Task) -> TaskBar:
    return TaskBar(task_id=task.id, kind=BarKind.HIDDEN)


def project_task(
    task: Task,
    project: Optional[Project],
    dates: Optional[Sequence[str]] = None,
    cache: CalendarCache = None,
) -> TaskBar:
    """Clip a task's ``[start, end]`` to the sprint window and locate its columns.

    A task missing either date becomes a single status marker in the first
    column rather than a zero-length bar. Overflow flags record which edges
    were cut off so the renderer can show the task continuing past the
    timeline.
    """
    dates = list(dates) if dates is not None else sprint_dates(project)
    if not dates:
        return _hidden(task)

    if not task.is_scheduled:
        return TaskBar(
            task_id=task.id,
            kind=BarKind.MARKER,
            visible_start=dates[0],
            visible_end=dates[0],
            visible_start_index=0,
            visible_end_index=0,
            span_days=1,
            label=get_status_info(task.status, task.completed).label,
        )

    try:
        task_start = to_date(task.start_date)
        task_end = to_date(task.end_date)
    except ValueError as exc:
        logger.warning("Task %s has invalid dates: %s", task.id, exc)
        return _hidden(task)

    sprint_start = to_date(dates[0])
    sprint_end = to_date(dates[-1])
    visible_start = max(task_start, sprint_start)
    visible_end = min(task_end, sprint_end)

    if visible_start > visible_end:
        logger.debug("Task %s falls outside %s..%s", task.id, dates[0], dates[-1])
        return _hidden(task)

    start_key, end_key = date_key(visible_start), date_key(visible_end)
    start_index = dates.index(start_key)
    end_index = dates.index(end_key)
    working_days = count_working_days(task_start, task_end, cache)

    return TaskBar(
        task_id=task.id,
        kind=BarKind.BAR,
        visible_start=start_key,
        visible_end=end_key,
        visible_start_index=start_index,
        visible_end_index=end_index,
        span_days=end_index - start_index + 1,
        overflow_left=task_start < sprint_start,
        overflow_right=task_end > sprint_end,
        working_days=working_days,
        label=f"{working_days}d" if working_days > 0 else "1d",
    )


def project_tasks(
    tasks: Iterable[Task],
    project: Optional[Project],
    cache: CalendarCache = None,
) -> List[TaskBar]:
    """Bar geometry for every task, sharing one day-column sequence."""
    dates = sprint_dates(project)
    return [project_task(task, project, dates, cache) for task in tasks]
