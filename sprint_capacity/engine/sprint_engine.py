"""Sprint engine: one read-only view over a sprint's records."""

from typing import Any, Dict, Iterable, List, Optional

from ..models.entities import Holiday, Project, Task, TeamMember
from ..models.report import ExecutiveSummary, MemberBandwidth, SprintReport, TeamBandwidth
from ..models.sprint import AvailableSlot, SprintTimeState, TeamCapacity
from ..models.timeline import TaskBar, TimelineCell
from ..utils.config import get_default_config, merge_config
from ..utils.datetime_utils import DEFAULT_CACHE, CalendarCache, DateLike, date_key, local_today
from . import capacity, scheduler, summary, timeline
from .sprint_state import get_sprint_time_state


class SprintEngine:
    """Derives calendar, capacity and timeline figures for one sprint.

    The engine only reads the records it is given. "Today" is fixed when the
    engine is built so every figure in one render agrees on the date.
    """

    def __init__(
        self,
        project: Optional[Project],
        members: Iterable[TeamMember] = (),
        tasks: Iterable[Task] = (),
        holidays: Iterable[Holiday] = (),
        config: Optional[Dict[str, Any]] = None,
        cache: Optional[CalendarCache] = None,
        today: Optional[DateLike] = None,
    ):
        """Initialize engine with sprint records and configuration."""
        self.project = project
        self.members = list(members)
        self.tasks = list(tasks)
        self.holidays = list(holidays)
        self.config = merge_config(config) if config else get_default_config()
        self.cache = cache if cache is not None else DEFAULT_CACHE
        self.today = date_key(today) if today is not None else local_today()

        self.capacity_config = self.config['capacity']
        self.default_hours = self.capacity_config['default_bandwidth_hours']
        self.min_free_hours = self.config['scheduling']['min_free_hours']

    def time_state(self) -> SprintTimeState:
        return get_sprint_time_state(self.project, self.today, self.cache)

    def team_capacity(self) -> TeamCapacity:
        return capacity.team_capacity(
            self.members, self.project, self.default_hours, self.cache, self.time_state())

    def remaining_capacity(self, member: TeamMember) -> float:
        return capacity.remaining_capacity(member, self.time_state(), self.default_hours)

    def team_remaining_capacity(self) -> float:
        return capacity.team_remaining_capacity(self.members, self.time_state(), self.default_hours)

    def get_member(self, member_id: str) -> Optional[TeamMember]:
        for member in self.members:
            if member.id == member_id:
                return member
        return None

    def next_available_day(
        self,
        member: TeamMember,
        min_free_hours: Optional[float] = None,
    ) -> Optional[AvailableSlot]:
        """First working day from today with enough free hours for ``member``."""
        if min_free_hours is None:
            min_free_hours = self.min_free_hours
        return scheduler.get_next_available_day(
            member, self.tasks, self.project, min_free_hours,
            cache=self.cache, default_hours=self.default_hours, state=self.time_state(),
        )

    def timeline(self) -> List[TimelineCell]:
        return timeline.build_timeline_cells(self.project, self.holidays, self.today, self.cache)

    def task_bars(self) -> List[TaskBar]:
        return timeline.project_tasks(self.tasks, self.project, self.cache)

    def bandwidth_overview(self) -> List[MemberBandwidth]:
        return summary.bandwidth_overview(
            self.members, self.tasks, self.project, self.time_state(),
            self.config, self.cache, self.min_free_hours,
        )

    def team_bandwidth(self) -> TeamBandwidth:
        return summary.team_bandwidth(
            self.members, self.tasks, self.project, self.time_state(), self.config, self.cache)

    def executive_summary(self) -> ExecutiveSummary:
        return summary.executive_summary(
            self.tasks, self.members, self.time_state(), self.config, self.cache)

    def report(self) -> SprintReport:
        """Build the full sprint snapshot."""
        return SprintReport(
            project_name=self.project.name if self.project else "",
            state=self.time_state(),
            capacity=self.team_capacity(),
            team_remaining_hours=self.team_remaining_capacity(),
            team_bandwidth=self.team_bandwidth(),
            bandwidth=self.bandwidth_overview(),
            summary=self.executive_summary(),
            status_breakdown=summary.status_breakdown(self.tasks),
            task_bars=self.task_bars(),
        )
