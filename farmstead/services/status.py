"""
Derived status rules for tasks and inventory.

Both statuses are pure functions of a record's current field values (plus the
current calendar day for tasks). Storage backends call these on create and on
any update touching an input field; nothing else writes ``status``.

"Today" is always an explicit input. ``local_today`` resolves it for a named
IANA zone, falling back to ``settings.TIMEZONE`` when the user has none.
"""
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

from farmstead.core.config import settings

TASK_COMPLETED = "completed"
TASK_OVERDUE = "overdue"
TASK_TODAY = "today"
TASK_UPCOMING = "upcoming"

INVENTORY_LOW = "low"
INVENTORY_GOOD = "good"


def local_today(tz_name: Optional[str] = None) -> date:
    """Current calendar date in ``tz_name`` (or the configured default zone)."""
    return datetime.now(ZoneInfo(tz_name or settings.TIMEZONE)).date()


def _as_date(value: date) -> date:
    # datetime is a subclass of date; drop the time-of-day before comparing
    return value.date() if isinstance(value, datetime) else value


def derive_task_status(due_date: date, completed: bool, today: date) -> str:
    if completed:
        return TASK_COMPLETED

    due = _as_date(due_date)
    today = _as_date(today)
    if due < today:
        return TASK_OVERDUE
    if due == today:
        return TASK_TODAY
    return TASK_UPCOMING


def derive_inventory_status(quantity: float, threshold: float) -> str:
    return INVENTORY_LOW if quantity < threshold else INVENTORY_GOOD
