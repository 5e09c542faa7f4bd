"""ExperienceService — measure work periods and total them.

Wraps the pure domain functions in ServiceResult payloads. A single
period that cannot be measured is an error; inside a total it counts as
the zero duration and is reported as a warning.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Iterable, Sequence
from datetime import date, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from tenurectl.domain.dates import DateInput, format_display_date, parse_calendar_date
from tenurectl.domain.duration import Duration, calculate_duration, sum_durations
from tenurectl.domain.labels import duration_label
from tenurectl.domain.periods import ExperiencePeriod, PeriodIssue, check_period
from tenurectl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from tenurectl.config.settings import TenureSettings

logger = logging.getLogger(__name__)

ISSUE_MESSAGES: dict[PeriodIssue, str] = {
    PeriodIssue.MISSING_DATE: "Both a start date and an end date are required.",
    PeriodIssue.INVALID_DATE: "Dates must be calendar dates such as 2024-03-01.",
    PeriodIssue.INVERTED_RANGE: "The end date must not be before the start date.",
}

PeriodInput = ExperiencePeriod | tuple[DateInput, DateInput]


def _date_text(value: DateInput) -> str:
    """ISO text for a parseable date, otherwise the raw value as given."""
    parsed = parse_calendar_date(value)
    if parsed is not None:
        return parsed.isoformat()
    return "" if value is None else str(value)


class ExperienceService:
    """Operations over experience periods.

    Display concerns (locale, date format) come from the settings so the
    payloads carry ready-to-print labels alongside the raw numbers.
    """

    def __init__(self, settings: TenureSettings) -> None:
        self._settings = settings

    @property
    def _locale(self) -> str:
        return self._settings.display.locale

    @property
    def _date_format(self) -> str:
        return self._settings.display.date_format

    # ── Operations ──────────────────────────────────────────────────

    def measure_period(self, start: DateInput, end: DateInput) -> ServiceResult:
        """Measure one period, end date inclusive."""
        op = "measure_period"
        issue = check_period(start, end)
        if issue is not None:
            logger.debug("Rejected period %r..%r: %s", start, end, issue)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=issue.name,
                    message=ISSUE_MESSAGES[issue],
                    detail={"start": _date_text(start), "end": _date_text(end)},
                ),
            )

        duration = calculate_duration(start, end)
        logger.debug("Measured period %s..%s: %s", start, end, duration)
        return ServiceResult(ok=True, op=op, data=self._period_row(start, end, duration))

    def total_experience(self, periods: Iterable[PeriodInput]) -> ServiceResult:
        """Measure every period and return the normalized total.

        Periods that cannot be measured contribute zero and add a warning.
        """
        op = "total_experience"
        rows: list[dict[str, Any]] = []
        durations: list[Duration] = []
        warnings: list[str] = []

        for item in periods:
            period = self._coerce(item)
            issue = check_period(period.start_date, period.end_date)
            duration = calculate_duration(period.start_date, period.end_date)
            if issue is not None:
                warnings.append(
                    f"Period {period.id} ({_date_text(period.start_date)} to "
                    f"{_date_text(period.end_date)}) counted as zero: {ISSUE_MESSAGES[issue]}"
                )
            row = self._period_row(period.start_date, period.end_date, duration)
            rows.append({"id": period.id, **row, "issue": issue.value if issue else None})
            durations.append(duration)

        total = sum_durations(durations)
        logger.debug("Totalled %d periods: %s", len(rows), total)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "count": len(rows),
                "periods": rows,
                "total": total.as_dict(),
                "total_label": duration_label(total, self._locale),
            },
            warnings=warnings,
        )

    def load_periods(self, path: Path) -> ServiceResult:
        """Read ``[[period]]`` tables with ``start``/``end`` keys from a TOML file."""
        op = "load_periods"
        if not path.is_file():
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="FILE_NOT_FOUND",
                    message=f"Period file not found: {path}",
                    detail={"path": str(path)},
                ),
            )

        try:
            raw = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            return self._invalid_file(op, path, f"Invalid TOML in {path}: {exc}")
        except (UnicodeDecodeError, OSError) as exc:
            return self._invalid_file(op, path, f"Cannot read {path}: {exc}")

        tables = raw.get("period", [])
        if not isinstance(tables, list):
            return self._invalid_file(op, path, "Expected [[period]] tables.")

        periods: list[ExperiencePeriod] = []
        for index, table in enumerate(tables, start=1):
            if not isinstance(table, dict) or "start" not in table or "end" not in table:
                return self._invalid_file(
                    op, path, f"Period #{index} needs both 'start' and 'end'."
                )
            start = _toml_date(table["start"])
            end = _toml_date(table["end"])
            if start is None or end is None:
                return self._invalid_file(
                    op, path, f"Period #{index} dates must be strings or TOML dates."
                )
            fields: dict[str, Any] = {"start_date": start, "end_date": end}
            if "id" in table:
                fields["id"] = str(table["id"])
            periods.append(ExperiencePeriod(**fields))

        logger.debug("Loaded %d periods from %s", len(periods), path)
        return ServiceResult(
            ok=True,
            op=op,
            data={"path": str(path), "periods": [p.model_dump() for p in periods]},
        )

    # ── Helpers ─────────────────────────────────────────────────────

    @staticmethod
    def _coerce(item: PeriodInput) -> ExperiencePeriod:
        if isinstance(item, ExperiencePeriod):
            return item
        start, end = item
        return ExperiencePeriod.create(start, end)

    def _period_row(self, start: DateInput, end: DateInput, duration: Duration) -> dict[str, Any]:
        return {
            "start": _date_text(start),
            "end": _date_text(end),
            "start_display": format_display_date(start, self._date_format),
            "end_display": format_display_date(end, self._date_format),
            "duration": duration.as_dict(),
            "label": duration_label(duration, self._locale),
        }

    @staticmethod
    def _invalid_file(op: str, path: Path, message: str) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code="INVALID_FILE", message=message, detail={"path": str(path)}),
        )


def _toml_date(value: Any) -> str | date | None:
    """Accept TOML strings and dates; TOML date-times keep their calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, (str, date)):
        return value
    return None


def periods_from_pairs(pairs: Sequence[tuple[str, str]]) -> list[ExperiencePeriod]:
    """Build periods from ``(start, end)`` pairs, e.g. repeated CLI options."""
    return [ExperiencePeriod.create(start, end) for start, end in pairs]
