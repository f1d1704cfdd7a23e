"""Sprint data files: already-normalized project, team and task records."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..models.entities import Holiday, Project, Task, TeamMember
from .config import read_structured_file


@dataclass
class SprintData:
    """Records for one sprint, as handed to the engine."""

    project: Project
    members: List[TeamMember] = field(default_factory=list)
    tasks: List[Task] = field(default_factory=list)
    holidays: List[Holiday] = field(default_factory=list)


def _records(data: Dict[str, Any], section: str) -> List[Dict[str, Any]]:
    rows = data.get(section) or []
    if not isinstance(rows, list):
        raise ValueError(f"'{section}' must be a list, got {type(rows).__name__}")
    for index, row in enumerate(rows):
        if not isinstance(row, dict):
            raise ValueError(f"'{section}' entry {index + 1} must be a mapping")
        if section != 'holidays' and 'id' not in row:
            raise ValueError(f"'{section}' entry {index + 1} is missing 'id'")
    return rows


def parse_sprint_data(data: Dict[str, Any]) -> SprintData:
    """Build model records from a plain mapping."""
    return SprintData(
        project=Project.from_dict(data.get('project') or {}),
        members=[TeamMember.from_dict(row) for row in _records(data, 'members')],
        tasks=[Task.from_dict(row) for row in _records(data, 'tasks')],
        holidays=[Holiday.from_dict(row) for row in _records(data, 'holidays')],
    )


def load_sprint_file(data_path: str) -> SprintData:
    """Load sprint records from a YAML or JSON file."""
    return parse_sprint_data(read_structured_file(data_path, kind="Sprint data"))
