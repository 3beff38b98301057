"""Named date ranges for the `date:` filter.

Ranges are computed on local wall-clock dates and rendered as UTC
ISO 8601 strings with millisecond precision, e.g. 2026-10-17T22:00:00.000Z.
Each boundary resolves its own UTC offset, so a range spanning a DST
switch still starts and ends at local midnight.
"""

from datetime import date, datetime, time, timedelta, timezone

_END_OF_DAY = time(23, 59, 59, 999000)


def to_iso(value: datetime) -> str:
    """Render a datetime as a UTC ISO string with a Z suffix. Naive values are local time."""
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _local_date(now: datetime) -> date:
    if now.tzinfo is None:
        return now.date()
    return now.astimezone().date()


def _start_of(day: date) -> datetime:
    return datetime.combine(day, time.min).astimezone()


def _end_of(day: date) -> datetime:
    return datetime.combine(day, _END_OF_DAY).astimezone()


def named_date_range(name: str, now: datetime) -> tuple[datetime, datetime | None] | None:
    """Resolve a named range to (start, end).

    An end of None means "up to now". Unknown names return None.

    Args:
        name: Range name (today, yesterday, this-week, last-week, this-month)
        now: Current time; naive values are taken as local time

    Returns:
        Tuple of aware (start, end) or None if the name is not recognized
    """
    today = _local_date(now)

    if name == "today":
        return _start_of(today), None
    if name == "yesterday":
        yesterday = today - timedelta(days=1)
        return _start_of(yesterday), _end_of(yesterday)
    if name == "this-week":
        return _start_of(today - timedelta(days=today.weekday())), None
    if name == "last-week":
        this_monday = today - timedelta(days=today.weekday())
        return _start_of(this_monday - timedelta(days=7)), _end_of(this_monday - timedelta(days=1))
    if name == "this-month":
        return _start_of(today.replace(day=1)), None
    return None
