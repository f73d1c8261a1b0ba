"""Date utilities for spendr.

Pure functions for week numbering, month prefixes and display formatting.
"""

import re
from datetime import date, datetime, timedelta

from spendr.domain.models import IsoDate, Month

MONTH_PATTERN = re.compile(r"\d{4}-(0[1-9]|1[0-2])", re.ASCII)

# Zero-padded only, so stored dates sort and prefix-match as strings
ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def parse_iso_date(value: str) -> date:
    """Parse a zero-padded YYYY-MM-DD string.

    Raises:
        ValueError: If the string isn't a valid ISO calendar date.
    """
    if not isinstance(value, str) or not ISO_DATE_PATTERN.fullmatch(value):
        raise ValueError(f"Not an ISO date: {value!r}")
    return datetime.strptime(value, "%Y-%m-%d").date()


def is_iso_date(value: str) -> bool:
    try:
        parse_iso_date(value)
    except (TypeError, ValueError):
        return False
    return True


def is_month(value: str) -> bool:
    """Check for a well-formed YYYY-MM month."""
    return bool(MONTH_PATTERN.fullmatch(value))


def format_iso(day: date) -> IsoDate:
    return IsoDate(day.strftime("%Y-%m-%d"))


def month_of(day: date) -> Month:
    """Get the YYYY-MM prefix for a date."""
    return Month(day.strftime("%Y-%m"))


def subtract_days(day: date, days: int) -> date:
    return day - timedelta(days=days)


def week_number(day: date) -> int:
    """Calculate the week-of-year bucket for a date.

    Buckets run Saturday through Friday. Days before the first Saturday of
    the year are week 0.

    Args:
        day: Calendar date.

    Returns:
        floor((day_of_year + weekday_of_jan1) / 7), with day_of_year 1-based
        and Sunday as weekday 0.
    """
    jan1 = date(day.year, 1, 1)
    day_of_year = day.timetuple().tm_yday
    # date.weekday() has Monday=0, shift so Sunday=0
    jan1_weekday = (jan1.weekday() + 1) % 7
    return (day_of_year + jan1_weekday) // 7


def format_display_date(value: str) -> str:
    """Format an ISO date for the table, e.g. "Jan 3".

    Unparseable dates are shown as stored.
    """
    try:
        day = parse_iso_date(value)
    except ValueError:
        return value
    return f"{day.strftime('%b')} {day.day}"
