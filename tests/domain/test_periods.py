"""Tests for experience periods and explicit period checks."""

from datetime import date, datetime

import pytest

from tenurectl.domain.periods import (
    PERIOD_ID_PATTERN,
    ExperiencePeriod,
    PeriodIssue,
    check_period,
    new_period_id,
)


class TestCheckPeriod:
    def test_valid(self) -> None:
        assert check_period("2023-01-01", "2023-12-31") is None

    def test_same_day_valid(self) -> None:
        assert check_period("2023-01-01", "2023-01-01") is None

    @pytest.mark.parametrize(
        "start,end",
        [("", "2023-01-01"), ("2023-01-01", "  "), (None, None)],
    )
    def test_missing(self, start: str | None, end: str | None) -> None:
        assert check_period(start, end) is PeriodIssue.MISSING_DATE

    def test_invalid(self) -> None:
        assert check_period("2023-02-30", "2023-03-01") is PeriodIssue.INVALID_DATE

    def test_inverted(self) -> None:
        assert check_period("2023-03-02", "2023-03-01") is PeriodIssue.INVERTED_RANGE

    def test_missing_checked_before_invalid(self) -> None:
        assert check_period("garbage", "") is PeriodIssue.MISSING_DATE

    def test_date_objects(self) -> None:
        assert check_period(date(2023, 3, 2), date(2023, 3, 1)) is PeriodIssue.INVERTED_RANGE


class TestPeriodIssue:
    def test_values(self) -> None:
        assert {i.value for i in PeriodIssue} == {
            "missing_date",
            "invalid_date",
            "inverted_range",
        }


class TestExperiencePeriod:
    def test_datetime_keeps_calendar_date(self) -> None:
        period = ExperiencePeriod.create("2024-01-01", datetime(2024, 3, 1, 12, 30))
        assert period.end_date == date(2024, 3, 1)
        assert type(period.end_date) is date

    def test_create_assigns_id(self) -> None:
        period = ExperiencePeriod.create("2023-01-01", "2023-06-30")
        assert PERIOD_ID_PATTERN.match(period.id)
        assert period.start_date == "2023-01-01"
        assert period.end_date == "2023-06-30"

    def test_ids_unique(self) -> None:
        ids = {new_period_id() for _ in range(50)}
        assert len(ids) == 50

    def test_explicit_id(self) -> None:
        period = ExperiencePeriod(id="job-1", start_date=date(2020, 1, 1), end_date="2020-12-31")
        assert period.id == "job-1"
        assert period.start_date == date(2020, 1, 1)

    def test_frozen(self) -> None:
        period = ExperiencePeriod.create("2023-01-01", "2023-06-30")
        with pytest.raises(Exception):
            period.end_date = "2024-01-01"  # type: ignore[misc]
