"""Utility functions."""

from .config import get_default_config, load_config, merge_config
from .datetime_utils import (
    DEFAULT_CACHE,
    CalendarCache,
    count_working_days,
    date_range,
    is_working_day,
    local_today,
)
from .rounding import round1, round_half_up

__all__ = [
    'load_config', 'get_default_config', 'merge_config',
    'CalendarCache', 'DEFAULT_CACHE', 'count_working_days', 'date_range',
    'is_working_day', 'local_today',
    'round1', 'round_half_up',
]
