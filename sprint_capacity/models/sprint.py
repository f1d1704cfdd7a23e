"""Derived sprint calendar and capacity records."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class SprintPhase(str, Enum):
    """Where today falls relative to the sprint window."""

    NOT_CONFIGURED = "not_configured"
    NOT_STARTED = "not_started"
    ACTIVE = "active"
    COMPLETE = "complete"


@dataclass(frozen=True)
class SprintTimeState:
    """Elapsed/remaining working days for the sprint as seen from ``today``."""

    is_valid: bool
    phase: SprintPhase
    today: str
    sprint_start: Optional[str] = None
    sprint_end: Optional[str] = None
    total_working_days: int = 0
    elapsed_working_days: int = 0
    remaining_working_days: int = 0
    current_day: int = 0
    progress_percent: int = 0
    error: Optional[str] = None

    @property
    def is_not_started(self) -> bool:
        return self.phase is SprintPhase.NOT_STARTED

    @property
    def is_active(self) -> bool:
        return self.phase is SprintPhase.ACTIVE

    @property
    def is_complete(self) -> bool:
        return self.phase is SprintPhase.COMPLETE


@dataclass(frozen=True)
class SprintCapacity:
    """Hour budget for one weekly bandwidth over a date range."""

    working_days: int
    hours_per_day: float
    total_hours: float


@dataclass(frozen=True)
class MemberCapacity:
    member_id: str
    name: str
    weekly_hours: float
    working_days: int
    hours_per_day: float
    total_hours: float


@dataclass(frozen=True)
class TeamCapacity:
    """Team sprint hours; ``total_hours`` sums the already-rounded member totals."""

    total_hours: float
    working_days: int
    members: Tuple[MemberCapacity, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class AvailableSlot:
    """First day a member has enough free hours."""

    date: str
    free_hours: float
