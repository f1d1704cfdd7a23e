"""Dashboard summary and report models."""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Tuple

from .sprint import AvailableSlot, SprintTimeState, TeamCapacity
from .timeline import TaskBar


@dataclass(frozen=True)
class StatusCount:
    status: str
    count: int
    percent: int


@dataclass(frozen=True)
class MemberBandwidth:
    """One row of the bandwidth overview table."""

    member_id: str
    name: str
    sprint_hours: float
    remaining_hours: float
    allocated_hours: float
    utilization_percent: int
    available_hours: float
    status: str
    next_available: Optional[AvailableSlot] = None

    @property
    def is_overloaded(self) -> bool:
        return self.allocated_hours > self.sprint_hours


@dataclass(frozen=True)
class TeamBandwidth:
    """Team-level capacity ring: raw utilization plus the clamped bar fill."""

    total_sprint_hours: float
    allocated_hours: float
    utilization_percent: float
    fill_percent: float
    available_hours: float
    remaining_hours: float
    over_hours: float


@dataclass(frozen=True)
class ExecutiveSummary:
    total_tasks: int
    completed_tasks: int
    progress_percent: int
    allocated_hours: float
    team_sprint_hours: float
    utilization_percent: int
    blocked_tasks: int
    delayed_tasks: int
    overdue_tasks: int
    risk_level: str
    risk_factors: Tuple[str, ...] = field(default_factory=tuple)


@dataclass
class SprintReport:
    """Everything the dashboard derives for one sprint snapshot."""

    project_name: str
    state: SprintTimeState
    capacity: TeamCapacity
    team_remaining_hours: float
    team_bandwidth: TeamBandwidth
    bandwidth: List[MemberBandwidth]
    summary: ExecutiveSummary
    status_breakdown: List[StatusCount]
    task_bars: List[TaskBar]

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary for JSON export."""
        return asdict(self)

    def to_human_readable(self) -> str:
        """Generate human-readable report."""
        state = self.state
        lines = [
            f"=== Sprint: {self.project_name or 'Unnamed'} ===",
            f"Today: {state.today}",
        ]

        if not state.is_valid:
            lines.append(f"Sprint not configured: {state.error}")
            lines.append("=" * 50)
            return "\n".join(lines)

        lines.extend([
            f"Window: {state.sprint_start} -> {state.sprint_end}",
            f"Phase: {state.phase.value}",
            f"Working days: {state.elapsed_working_days} elapsed, "
            f"{state.remaining_working_days} remaining of {state.total_working_days} "
            f"({state.progress_percent}%)",
            "",
            "Capacity:",
            f"  Team sprint hours: {self.capacity.total_hours}h",
            f"  Team remaining hours: {self.team_remaining_hours}h",
            f"  Allocated: {self.team_bandwidth.allocated_hours}h "
            f"({self.team_bandwidth.utilization_percent:.0f}%)",
        ])
        if self.team_bandwidth.over_hours > 0:
            lines.append(f"  Over capacity by {self.team_bandwidth.over_hours:.0f}h")

        lines.extend(["", "Bandwidth:"])
        for row in self.bandwidth:
            lines.append(f"  {row.name}: {row.allocated_hours}h / {row.sprint_hours}h "
                         f"({row.utilization_percent}%) - {row.status}")
            if state.is_complete:
                lines.append("    Sprint completed")
            elif row.next_available:
                lines.append(f"    Next free: {row.next_available.date} "
                             f"({row.next_available.free_hours}h)")
            else:
                lines.append("    No capacity this sprint")

        summary = self.summary
        lines.extend([
            "",
            "Summary:",
            f"  Tasks: {summary.completed_tasks} of {summary.total_tasks} completed "
            f"({summary.progress_percent}%)",
            f"  Team utilization: {summary.utilization_percent}%",
            f"  Risk: {summary.risk_level}"
            + (f" ({', '.join(summary.risk_factors)})" if summary.risk_factors else ""),
        ])

        for item in self.status_breakdown:
            lines.append(f"    {item.status}: {item.count} ({item.percent}%)")

        lines.append("=" * 50)

        return "\n".join(lines)
