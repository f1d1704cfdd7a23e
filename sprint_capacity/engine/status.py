"""Task status vocabulary shared by the timeline and summaries."""

from ..models.timeline import StatusInfo

DONE = StatusInfo('status-completed', 'Done', 'success')
BLOCKED = StatusInfo('status-blocked', 'Blocked', 'danger')
ACTIVE = StatusInfo('status-in-progress', 'Active', 'warning')
REVIEW = StatusInfo('status-review', 'Review', 'info')
PENDING = StatusInfo('status-pending', 'Pending', 'secondary')
TODO = StatusInfo('status-not-started', 'To Do', 'secondary')
DELAYED = StatusInfo('status-delayed', 'Delayed', 'danger')
CANCELLED = StatusInfo('status-cancelled', 'Cancelled', 'muted')
NOT_STARTED = StatusInfo('status-not-started', 'Not Started', 'secondary')

_EXACT = {
    'completed': DONE,
    'blocked': BLOCKED,
    'in-progress': ACTIVE,
    'review': REVIEW,
    'pending': PENDING,
    'todo': TODO,
}

# Checked in order after exact matches fail.
_KEYWORDS = (
    (('blocked', 'stuck'), BLOCKED),
    (('progress', 'active'), ACTIVE),
    (('review', 'qa'), REVIEW),
    (('delayed', 'behind'), DELAYED),
    (('cancelled', 'abandoned'), CANCELLED),
)


def get_status_info(status: str, completed: bool = False) -> StatusInfo:
    """Map a free-form task status onto the dashboard's status labels."""
    if completed:
        return DONE

    normalized = str(status or '').lower().strip()
    if normalized in _EXACT:
        return _EXACT[normalized]

    for keywords, info in _KEYWORDS:
        if any(word in normalized for word in keywords):
            return info
    return NOT_STARTED
