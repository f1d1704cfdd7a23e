"""Sprint calendar and capacity engine."""

from .capacity import (
    allocated_hours_by_member,
    capped_utilization_percent,
    clamped_utilization_percent,
    remaining_capacity,
    sprint_capacity,
    team_capacity,
    team_remaining_capacity,
    utilization_percent,
)
from .scheduler import build_daily_allocation, get_next_available_day
from .sprint_engine import SprintEngine
from .sprint_state import get_sprint_time_state
from .status import get_status_info
from .timeline import build_timeline_cells, project_task, project_tasks, sprint_dates

__all__ = [
    'SprintEngine',
    'get_sprint_time_state',
    'sprint_capacity', 'remaining_capacity', 'team_capacity', 'team_remaining_capacity',
    'allocated_hours_by_member', 'utilization_percent',
    'capped_utilization_percent', 'clamped_utilization_percent',
    'build_daily_allocation', 'get_next_available_day',
    'get_status_info',
    'sprint_dates', 'build_timeline_cells', 'project_task', 'project_tasks',
]
