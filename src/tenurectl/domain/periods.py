"""Experience periods and the explicit validity check for a date pair.

:func:`check_period` is the explicit counterpart of the zero-duration
fallback in :func:`tenurectl.domain.duration.calculate_duration`: it names
the reason a pair would collapse to zero.
"""

from __future__ import annotations

import re
import uuid
from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator

from tenurectl.domain.dates import DateInput, parse_calendar_date

PERIOD_ID_PREFIX = "per_"
PERIOD_ID_PATTERN = re.compile(r"^per_[0-9a-f]{12}$")


class PeriodIssue(StrEnum):
    """Reasons a date pair cannot be measured."""

    MISSING_DATE = "missing_date"
    INVALID_DATE = "invalid_date"
    INVERTED_RANGE = "inverted_range"


def new_period_id() -> str:
    """Generate an opaque period identifier (``per_`` + 12 hex chars)."""
    return f"{PERIOD_ID_PREFIX}{uuid.uuid4().hex[:12]}"


class ExperiencePeriod(BaseModel):
    """One work period as supplied by the caller.

    Dates are kept in the form they were given; the ``id`` is never
    inspected by the calculation.
    """

    model_config = {"frozen": True}

    id: str = Field(default_factory=new_period_id)
    start_date: str | date | None = None
    end_date: str | date | None = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def drop_time_of_day(cls, value: object) -> object:
        # Date-times keep their calendar date; time of day never counts.
        if isinstance(value, datetime):
            return value.date()
        return value

    @classmethod
    def create(cls, start_date: DateInput, end_date: DateInput) -> ExperiencePeriod:
        return cls(start_date=start_date, end_date=end_date)


def _is_blank(value: DateInput) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def check_period(start: DateInput, end: DateInput) -> PeriodIssue | None:
    """Return the issue with a date pair, or None when it can be measured.

    Issues are checked in order: a missing date, then an unparseable one,
    then a start after the end. Equal dates are valid (one day).
    """
    if _is_blank(start) or _is_blank(end):
        return PeriodIssue.MISSING_DATE

    start_date = parse_calendar_date(start)
    end_date = parse_calendar_date(end)
    if start_date is None or end_date is None:
        return PeriodIssue.INVALID_DATE
    if start_date > end_date:
        return PeriodIssue.INVERTED_RANGE
    return None
