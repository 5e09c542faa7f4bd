"""Textual labels for durations, per display locale."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tenurectl.domain.duration import Duration

DEFAULT_LOCALE = "en"

UNIT_LABELS: dict[str, dict[str, str]] = {
    "en": {"years": "years", "months": "months", "days": "days"},
    "ar": {"years": "سنوات", "months": "أشهر", "days": "أيام"},
}

HEADINGS: dict[str, dict[str, str]] = {
    "en": {
        "total": "Total professional experience",
        "periods": "Work periods",
        "from": "From",
        "to": "To",
        "duration": "Duration",
        "empty": "No work periods added yet.",
    },
    "ar": {
        "total": "الخبرة المهنية الإجمالية",
        "periods": "قائمة فترات العمل",
        "from": "من",
        "to": "إلى",
        "duration": "المدة",
        "empty": "لم يتم إضافة أي فترة عمل حتى الآن.",
    },
}


def unit_labels(locale: str) -> dict[str, str]:
    """Unit labels for *locale*, falling back to English."""
    return UNIT_LABELS.get(locale, UNIT_LABELS[DEFAULT_LOCALE])


def heading(key: str, locale: str) -> str:
    """A heading string for *locale*, falling back to English."""
    return HEADINGS.get(locale, HEADINGS[DEFAULT_LOCALE])[key]


def duration_label(duration: Duration, locale: str = DEFAULT_LOCALE) -> str:
    """Render a duration as ``"1 years, 2 months, 5 days"``.

    Unit words are not pluralized; the label mirrors a fixed form layout.
    """
    units = unit_labels(locale)
    return (
        f"{duration.years} {units['years']}, "
        f"{duration.months} {units['months']}, "
        f"{duration.days} {units['days']}"
    )
