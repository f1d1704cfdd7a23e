"""Input records and derived result models."""

from .entities import Holiday, Project, Task, TeamMember
from .report import ExecutiveSummary, MemberBandwidth, SprintReport, StatusCount, TeamBandwidth
from .sprint import (
    AvailableSlot,
    MemberCapacity,
    SprintCapacity,
    SprintPhase,
    SprintTimeState,
    TeamCapacity,
)
from .timeline import BarKind, StatusInfo, TaskBar, TimelineCell

__all__ = [
    'Holiday', 'Project', 'Task', 'TeamMember',
    'AvailableSlot', 'MemberCapacity', 'SprintCapacity', 'SprintPhase',
    'SprintTimeState', 'TeamCapacity',
    'BarKind', 'StatusInfo', 'TaskBar', 'TimelineCell',
    'ExecutiveSummary', 'MemberBandwidth', 'SprintReport', 'StatusCount', 'TeamBandwidth',
]
