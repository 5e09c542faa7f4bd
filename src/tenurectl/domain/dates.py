"""Calendar date parsing, formatting, and month arithmetic.

All dates are naive calendar dates. Text is never routed through a
timestamp, so the calendar day a caller names is the day that gets used.
"""

from __future__ import annotations

import calendar
import re
from datetime import date, datetime

DISPLAY_FORMAT = "%d/%m/%Y"

# Formats tried after ISO 8601, in order.
FALLBACK_FORMATS: tuple[str, ...] = (DISPLAY_FORMAT, "%d-%m-%Y")

_YEAR_DIRECTIVE = re.compile(r"%%|%Y")

DateInput = str | date | None


def parse_calendar_date(value: DateInput) -> date | None:
    """Parse *value* into a calendar date, or return None.

    Accepts ``date`` objects, ``datetime`` objects (their calendar date,
    no timezone conversion), ISO 8601 text (``2024-03-01``, or a
    date-time whose date part is taken verbatim), and ``DD/MM/YYYY``.

    Examples:
        >>> parse_calendar_date("2024-02-29")
        datetime.date(2024, 2, 29)
        >>> parse_calendar_date("29/02/2024")
        datetime.date(2024, 2, 29)
        >>> parse_calendar_date("2023-02-29") is None
        True
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    for fmt in FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def days_in_month(year: int, month: int) -> int:
    """Number of days in *month* of *year* (leap years included)."""
    return calendar.monthrange(year, month)[1]


def previous_month(year: int, month: int) -> tuple[int, int]:
    """Return ``(year, month)`` of the month before *month*."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_day(day: date) -> tuple[int, int, int]:
    """Return ``(year, month, day)`` of the day after *day*.

    Works on components so ``date.max`` has a successor too.
    """
    if day.day < days_in_month(day.year, day.month):
        return day.year, day.month, day.day + 1
    if day.month < 12:
        return day.year, day.month + 1, 1
    return day.year + 1, 1, 1


def format_display_date(value: DateInput, fmt: str = DISPLAY_FORMAT) -> str:
    """Format *value* for display; blank or unparseable input gives ``""``."""
    parsed = parse_calendar_date(value)
    if parsed is None:
        return ""
    # strftime does not zero-pad years below 1000 on every platform; an
    # escaped "%%" must survive untouched.
    year = f"{parsed.year:04d}"
    fmt = _YEAR_DIRECTIVE.sub(lambda m: year if m.group() == "%Y" else m.group(), fmt)
    return parsed.strftime(fmt)
