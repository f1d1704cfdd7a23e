"""Date and time utilities.

Calendar dates travel through the engine as zero-padded ``YYYY-MM-DD`` strings
in the observer's local calendar. Nothing here touches UTC: a civil date is
parsed straight into ``datetime.date`` and rendered back with ``isoformat``.
"""

from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Union

DateLike = Union[str, date]

DATE_FORMAT = "%Y-%m-%d"

_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_WEEKDAY_INITIALS = ("M", "T", "W", "T", "F", "S", "S")


class CalendarCache:
    """Memo tables for formatted date labels and working-day counts.

    Both tables are append-only: a key always maps to the same derived value, so
    entries are never invalidated. Pass a fresh instance to isolate callers.
    """

    def __init__(self):
        self.format_date: Dict[str, str] = {}
        self.working_days: Dict[str, int] = {}

    @staticmethod
    def range_key(start: str, end: str) -> str:
        """Key for a ``[start, end]`` pair."""
        return f"{start}-{end}"

    def __len__(self) -> int:
        return len(self.format_date) + len(self.working_days)


DEFAULT_CACHE = CalendarCache()


def local_today() -> str:
    """Today's date in the host's local time zone as ``YYYY-MM-DD``.

    This is the only place the engine reads the clock.
    """
    return date.today().strftime(DATE_FORMAT)


def to_date(value: DateLike) -> date:
    """Parse a ``YYYY-MM-DD`` string (or pass a date through) as a civil date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return datetime.strptime(text, DATE_FORMAT).date()
        except ValueError:
            raise ValueError(f"Cannot parse date: {value!r}. Expected YYYY-MM-DD") from None
    raise ValueError(f"Cannot parse date: {value!r}")


def date_key(value: DateLike) -> str:
    """Canonical ``YYYY-MM-DD`` key for a date."""
    d = to_date(value)
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def add_days(value: DateLike, days: int) -> str:
    """Shift a date by a number of calendar days."""
    return date_key(to_date(value) + timedelta(days=days))


def is_weekend(value: DateLike) -> bool:
    """Check if a date falls on Saturday or Sunday."""
    return to_date(value).weekday() >= 5


def is_working_day(value: DateLike) -> bool:
    """Check if a date is a working day. Holidays are not excluded."""
    return not is_weekend(value)


def is_holiday(value: DateLike, holidays: Iterable) -> bool:
    """Check if a date is one of the given holidays (records or dates)."""
    key = date_key(value)
    for holiday in holidays or ():
        holiday_date = getattr(holiday, "date", holiday)
        if holiday_date and date_key(holiday_date) == key:
            return True
    return False


def weekday_initial(value: DateLike) -> str:
    """Single-letter weekday label (``M`` .. ``S``)."""
    return _WEEKDAY_INITIALS[to_date(value).weekday()]


def date_range(start: DateLike, end: DateLike) -> List[str]:
    """Get every calendar date in ``[start, end]`` as ``YYYY-MM-DD`` strings."""
    days = []
    current = to_date(start)
    last = to_date(end)

    while current <= last:
        days.append(date_key(current))
        current += timedelta(days=1)

    return days


def count_working_days(start: DateLike, end: DateLike, cache: CalendarCache = None) -> int:
    """Count working days between start and end (inclusive).

    Returns 0 when ``end`` is before ``start``. Results are memoized in
    ``cache`` under the ``"start-end"`` key.
    """
    cache = cache if cache is not None else DEFAULT_CACHE
    start_key, end_key = date_key(start), date_key(end)
    cache_key = cache.range_key(start_key, end_key)
    if cache_key in cache.working_days:
        return cache.working_days[cache_key]

    count = 0
    current = to_date(start_key)
    last = to_date(end_key)
    while current <= last:
        if current.weekday() < 5:
            count += 1
        current += timedelta(days=1)

    cache.working_days[cache_key] = count
    return count


def format_date(value, cache: CalendarCache = None) -> str:
    """Short display label such as ``Jun 3``; memoized by input string."""
    if not value:
        return ""
    cache = cache if cache is not None else DEFAULT_CACHE
    key = value if isinstance(value, str) else date_key(value)
    if key in cache.format_date:
        return cache.format_date[key]

    d = to_date(key)
    formatted = f"{_MONTH_ABBR[d.month - 1]} {d.day}"
    cache.format_date[key] = formatted
    return formatted
