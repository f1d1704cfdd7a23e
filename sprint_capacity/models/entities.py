"""Project, team and task records read by the engine."""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional

from ..utils.datetime_utils import date_key

DEFAULT_BANDWIDTH_HOURS = 40
OWNER_BOTH = "both"
OWNER_UNASSIGNED = "unassigned"


def _optional_date(value: Any, context: str) -> Optional[str]:
    """Normalize a date field from a data file; blank means unscheduled."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if not isinstance(value, (str, date)):
        raise ValueError(f"Cannot parse date ({context}): {value!r}")
    try:
        return date_key(value)
    except ValueError as exc:
        raise ValueError(f"{exc} ({context})") from None


@dataclass
class Project:
    """Sprint configuration: a named ``[start_date, end_date]`` window."""

    name: str = ""
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    prepared_by: Optional[str] = None

    @property
    def has_dates(self) -> bool:
        return bool(self.start_date) and bool(self.end_date)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Project":
        return cls(
            name=str(data.get('name') or ''),
            start_date=_optional_date(data.get('start_date'), 'project start_date'),
            end_date=_optional_date(data.get('end_date'), 'project end_date'),
            prepared_by=data.get('prepared_by'),
        )


@dataclass
class TeamMember:
    """A team member with a nominal weekly bandwidth in hours."""

    id: str
    name: str
    bandwidth_hours: Optional[float] = None
    role: str = "Team Member"

    def __post_init__(self):
        if self.bandwidth_hours is not None and self.bandwidth_hours < 0:
            raise ValueError(
                f"bandwidth_hours must be >= 0 for member {self.id!r}, got {self.bandwidth_hours}"
            )

    def weekly_hours(self, default: float = DEFAULT_BANDWIDTH_HOURS) -> float:
        """Weekly bandwidth; only a missing value falls back to ``default``."""
        return self.bandwidth_hours if self.bandwidth_hours is not None else default

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TeamMember":
        bandwidth = data.get('bandwidth_hours')
        return cls(
            id=str(data['id']),
            name=str(data.get('name') or data['id']),
            bandwidth_hours=float(bandwidth) if bandwidth is not None else None,
            role=str(data.get('role') or 'Team Member'),
        )


@dataclass
class Task:
    """A unit of sprint work. Dates are optional; unscheduled work is allowed."""

    id: str
    name: str = ""
    owner: str = OWNER_UNASSIGNED
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    estimated_hours: Optional[float] = None
    status: str = "todo"
    priority: str = "normal"
    completed: bool = False
    blockers: str = ""

    @property
    def is_scheduled(self) -> bool:
        """True when both start and end dates are present."""
        return bool(self.start_date) and bool(self.end_date)

    def hours(self) -> float:
        """Estimated hours, with a missing estimate counting as zero."""
        return self.estimated_hours or 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        task_id = str(data['id'])
        hours = data.get('estimated_hours')
        return cls(
            id=task_id,
            name=str(data.get('name') or data.get('title') or task_id),
            owner=str(data.get('owner') or OWNER_UNASSIGNED),
            start_date=_optional_date(data.get('start_date'), f'task {task_id} start_date'),
            end_date=_optional_date(data.get('end_date'), f'task {task_id} end_date'),
            estimated_hours=float(hours) if hours is not None else None,
            status=str(data.get('status') or 'todo'),
            priority=str(data.get('priority') or 'normal'),
            completed=bool(data.get('completed', False)),
            blockers=str(data.get('blockers') or ''),
        )


@dataclass
class Holiday:
    """A display-only day tag; holidays do not reduce capacity."""

    date: str
    name: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Holiday":
        holiday_date = _optional_date(data.get('date'), 'holiday date')
        if holiday_date is None:
            raise ValueError(f"Holiday is missing a date: {data!r}")
        return cls(date=holiday_date, name=str(data.get('name') or ''))
