"""
Due date helpers.

Due dates are calendar dates with no time component. When compared with
an instant ("now") a due date stands for midnight UTC at the start of
that day, so the comparisons below are expressed as date bounds that the
store can apply to a DATE column.
"""

import re
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Union

DUE_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_due_date(value: Union[str, date, None]) -> Optional[date]:
    """
    Parse a `YYYY-MM-DD` string into a date.

    None and the empty string mean "no due date".

    Raises:
        ValueError: If the string is not a valid `YYYY-MM-DD` date
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        raise ValueError("dueDate must be YYYY-MM-DD")
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError("dueDate must be YYYY-MM-DD")

    value = value.strip()
    if value == "":
        return None
    if not DUE_DATE_PATTERN.match(value):
        raise ValueError("dueDate must be YYYY-MM-DD")
    return date.fromisoformat(value)


def due_date_anchor(due_date: date) -> datetime:
    """The instant a due date stands for: midnight UTC."""
    return datetime.combine(due_date, time.min, tzinfo=timezone.utc)


def first_due_date_not_before(moment: datetime) -> date:
    """
    Smallest date whose midnight UTC is at or after `moment`.

    A due date `d` is before `moment` exactly when `d` is less than this.
    """
    moment = moment.astimezone(timezone.utc)
    day = moment.date()
    if moment == due_date_anchor(day):
        return day
    return day + timedelta(days=1)


def last_due_date_not_after(moment: datetime) -> date:
    """Largest date whose midnight UTC is at or before `moment`."""
    return moment.astimezone(timezone.utc).date()


def upcoming_window(now: datetime, days: int) -> tuple[date, date]:
    """
    Date bounds (inclusive) of due dates falling in `[now, now + days]`.

    The window is empty (start after end) when `days` is negative. Very
    large values saturate at the latest representable date.
    """
    start = first_due_date_not_before(now)
    try:
        end = last_due_date_not_after(now + timedelta(days=days))
    except OverflowError:
        end = date.max if days > 0 else date.min
    return start, end
