"""Configuration management."""

import copy
import json
import yaml
from pathlib import Path
from typing import Dict, Any


def read_structured_file(file_path: str, kind: str = "Config") -> Dict[str, Any]:
    """Read a YAML or JSON file into a dictionary."""
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"{kind} file not found: {file_path}")

    with open(path, 'r') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        elif path.suffix.lower() == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported {kind.lower()} file format: {path.suffix}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{kind} file must contain a mapping at the top level: {file_path}")
    return data


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML or JSON file, layered over the defaults."""
    return merge_config(read_structured_file(config_path))


def merge_config(overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay a partial configuration on the defaults, section by section."""
    config = get_default_config()
    for section, values in (overrides or {}).items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = copy.deepcopy(values)
    return config


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        'capacity': {
            'default_bandwidth_hours': 40,
            'near_capacity_percent': 80,
            'over_capacity_percent': 100,
            'utilization_display_cap': 999,
        },
        'scheduling': {
            'min_free_hours': 4,
        },
        'risk': {
            'high_blocked_tasks': 2,
            'high_delayed_tasks': 1,
            'medium_utilization_percent': 90,
        },
    }
