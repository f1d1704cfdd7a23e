"""Sprint calendar and capacity engine for team bandwidth dashboards."""

__version__ = "1.0.0"

from .engine import SprintEngine, get_next_available_day, get_sprint_time_state, project_task
from .models import Holiday, Project, SprintPhase, Task, TeamMember
from .utils import CalendarCache, count_working_days, date_range, local_today

__all__ = [
    '__version__',
    'SprintEngine', 'get_sprint_time_state', 'get_next_available_day', 'project_task',
    'Holiday', 'Project', 'SprintPhase', 'Task', 'TeamMember',
    'CalendarCache', 'count_working_days', 'date_range', 'local_today',
]
