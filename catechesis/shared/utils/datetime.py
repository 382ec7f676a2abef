"""
Date and datetime helpers.

Timestamps stored by the system are timezone-aware UTC. Attendance is keyed
by calendar day, so anything that arrives as a datetime is reduced to its
date before it reaches a repository.
"""

import re
from datetime import UTC, date, datetime

_PERIOD_RE = re.compile(r"^(\d{4})(?:-(\d{4}))?$")


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def today_utc() -> date:
    """Return today's calendar date in UTC."""
    return utc_now().date()


def as_utc(dt: datetime) -> datetime:
    """
    Ensure a datetime is UTC-aware.

    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def to_calendar_day(value: date | datetime) -> date:
    """Reduce a date or datetime to the calendar day it falls on (UTC)."""
    if isinstance(value, datetime):
        return as_utc(value).date()
    return value


def age_in_years(birth_date: date, on: date) -> int:
    """Whole years between birth_date and on, counting a birthday only once reached."""
    years = on.year - birth_date.year
    if (on.month, on.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def parse_period(period: str) -> tuple[int, int]:
    """
    Parse a group period into an inclusive (start_year, end_year) range.

    Accepts ``YYYY`` or ``YYYY-YYYY``.

    Raises:
        ValueError: When the format is wrong or the range is reversed.
    """
    match = _PERIOD_RE.match(period.strip())
    if not match:
        raise ValueError(f"Invalid period format: {period!r} (expected YYYY or YYYY-YYYY)")
    start = int(match.group(1))
    end = int(match.group(2)) if match.group(2) else start
    if end < start:
        raise ValueError(f"Invalid period range: {period!r}")
    return start, end


def period_contains_year(period: str, year: int) -> bool:
    """Return True if the period covers the given year; malformed periods never match."""
    try:
        start, end = parse_period(period)
    except ValueError:
        return False
    return start <= year <= end
