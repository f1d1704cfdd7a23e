"""Gantt timeline geometry records."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class BarKind(str, Enum):
    BAR = "bar"            # duration bar clipped to the sprint
    MARKER = "marker"      # unscheduled task, status label in the first column
    HIDDEN = "hidden"      # nothing to draw


@dataclass(frozen=True)
class StatusInfo:
    css_class: str
    label: str
    color: str


@dataclass(frozen=True)
class TaskBar:
    """Placement of one task on the sprint's day columns."""

    task_id: str
    kind: BarKind
    visible_start: Optional[str] = None
    visible_end: Optional[str] = None
    visible_start_index: int = -1
    visible_end_index: int = -1
    span_days: int = 0
    overflow_left: bool = False
    overflow_right: bool = False
    working_days: int = 0
    label: str = ""

    @property
    def is_drawn(self) -> bool:
        return self.kind is not BarKind.HIDDEN

    @property
    def continues_beyond_timeline(self) -> bool:
        return self.overflow_left or self.overflow_right


@dataclass(frozen=True)
class TimelineCell:
    """One day column of the sprint timeline."""

    date: str
    index: int
    day_of_month: int
    weekday: str
    label: str
    is_weekend: bool
    is_holiday: bool
    is_today: bool

    @property
    def is_shaded(self) -> bool:
        """Weekend and holiday columns share the same shading."""
        return self.is_weekend or self.is_holiday
