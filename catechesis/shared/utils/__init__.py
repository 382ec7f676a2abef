"""Shared utilities (dates, ID generation)."""

from catechesis.shared.utils.datetime import (
    age_in_years,
    as_utc,
    parse_period,
    period_contains_year,
    to_calendar_day,
    today_utc,
    utc_now,
)
from catechesis.shared.utils.generators import generate_cuid

__all__ = [
    "age_in_years",
    "as_utc",
    "generate_cuid",
    "parse_period",
    "period_contains_year",
    "to_calendar_day",
    "today_utc",
    "utc_now",
]
