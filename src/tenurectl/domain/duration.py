"""Duration value type, calendar difference, and aggregation.

Two operations form the core:

- :func:`calculate_duration` — calendar-accurate elapsed time between two
  dates, inclusive of the end date.
- :func:`sum_durations` — normalized sum of many durations.

INVARIANT: Both are pure. Invalid input collapses to the zero duration;
nothing here raises for bad dates or logs.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import Any

from pydantic import BaseModel, NonNegativeInt

from tenurectl.domain.dates import (
    DateInput,
    days_in_month,
    next_day,
    parse_calendar_date,
    previous_month,
)

# Fixed month length used when normalizing an aggregate. An aggregate has
# no calendar position, so no actual month length applies.
AGGREGATE_DAYS_PER_MONTH = 30
MONTHS_PER_YEAR = 12


class Duration(BaseModel):
    """Elapsed calendar time as years, months, and days.

    Months and days are unbounded at the type level: a raw sum may exceed
    11 months or 29 days until :func:`sum_durations` normalizes it.
    """

    model_config = {"frozen": True}

    years: NonNegativeInt = 0
    months: NonNegativeInt = 0
    days: NonNegativeInt = 0

    @classmethod
    def zero(cls) -> Duration:
        return cls()

    @property
    def is_zero(self) -> bool:
        return self.years == 0 and self.months == 0 and self.days == 0

    def as_dict(self) -> dict[str, Any]:
        return {"years": self.years, "months": self.months, "days": self.days}


def calendar_difference(start: date, end: date) -> Duration:
    """Elapsed time from *start* through the end of *end*.

    Caller guarantees ``start <= end``. The end is advanced one day, then
    the difference is taken component-wise, borrowing the actual length of
    the month preceding the advanced end when days go negative.
    """
    end_year, end_month, end_day = next_day(end)

    years = end_year - start.year
    months = end_month - start.month
    days = end_day - start.day

    # A start day longer than the borrowed month (Jan 31 vs a 29-day Feb)
    # needs a second borrow from the month before it.
    borrow_year, borrow_month = end_year, end_month
    while days < 0:
        borrow_year, borrow_month = previous_month(borrow_year, borrow_month)
        months -= 1
        days += days_in_month(borrow_year, borrow_month)

    if months < 0:
        years -= 1
        months += MONTHS_PER_YEAR

    return Duration(years=years, months=months, days=days)


def calculate_duration(start: DateInput, end: DateInput) -> Duration:
    """Inclusive calendar duration between two dates.

    Returns the zero duration when either date fails to parse or *start*
    is after *end*. Use :func:`tenurectl.domain.periods.check_period` to
    find out why a pair was rejected.

    Examples:
        >>> calculate_duration("2023-01-15", "2023-03-10")
        Duration(years=0, months=1, days=24)
        >>> calculate_duration("2024-05-01", "2024-05-01")
        Duration(years=0, months=0, days=1)
        >>> calculate_duration("2024-05-02", "2024-05-01")
        Duration(years=0, months=0, days=0)
    """
    start_date = parse_calendar_date(start)
    end_date = parse_calendar_date(end)
    if start_date is None or end_date is None or start_date > end_date:
        return Duration.zero()
    return calendar_difference(start_date, end_date)


def sum_durations(durations: Iterable[Duration]) -> Duration:
    """Sum *durations* and normalize the total.

    Days carry into months using a fixed 30-day month, then months carry
    into years. The order matters: a day carry can push months past 11.
    The 30-day month is an approximation; summed durations have lost the
    dates that would give a real month length.

    Examples:
        >>> sum_durations([Duration(months=11, days=25), Duration(months=2, days=10)])
        Duration(years=1, months=2, days=5)
        >>> sum_durations([])
        Duration(years=0, months=0, days=0)
    """
    total_years = 0
    total_months = 0
    total_days = 0
    for duration in durations:
        total_years += duration.years
        total_months += duration.months
        total_days += duration.days

    carried_months, total_days = divmod(total_days, AGGREGATE_DAYS_PER_MONTH)
    total_months += carried_months
    carried_years, total_months = divmod(total_months, MONTHS_PER_YEAR)
    total_years += carried_years

    return Duration(years=total_years, months=total_months, days=total_days)
