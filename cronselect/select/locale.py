"""Locale string table consumed by index.

Only the strings the selection core needs: week day and month names
(full for option labels, short for the display text) and the per-unit
placeholders shown when nothing is selected.
"""

from pydantic import BaseModel, ConfigDict


class Locale(BaseModel):
    """Localized strings. Missing placeholders fall back to English."""

    model_config = ConfigDict(frozen=True)

    week_days: list[str] | None = None  # Sunday first
    alt_week_days: list[str] | None = None
    months: list[str] | None = None  # January first
    alt_months: list[str] | None = None

    empty_minutes: str | None = None
    empty_hours: str | None = None
    empty_month_days: str | None = None
    empty_months: str | None = None
    empty_week_days: str | None = None
    select_text: str | None = None

    def empty_text(self, kind: str) -> str:
        """Placeholder for an empty selection of the given unit kind."""
        field_name = _EMPTY_FIELDS.get(kind)
        if field_name is not None:
            text = getattr(self, field_name) or getattr(DEFAULT_LOCALE_EN, field_name)
            if text:
                return text
        return self.select_text or DEFAULT_LOCALE_EN.select_text or ""


_EMPTY_FIELDS: dict[str, str] = {
    "minutes": "empty_minutes",
    "hours": "empty_hours",
    "monthDays": "empty_month_days",
    "months": "empty_months",
    "weekDays": "empty_week_days",
}


def lookup(names: list[str] | None, index: int) -> str | None:
    """Best-effort lookup; None when the table or index is missing."""
    if not names or index < 0 or index >= len(names):
        return None
    return names[index] or None


DEFAULT_LOCALE_EN = Locale(
    week_days=["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"],
    alt_week_days=["SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT"],
    months=[
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    ],
    alt_months=["JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC"],
    empty_minutes="every minute",
    empty_hours="every hour",
    empty_month_days="every day of the month",
    empty_months="every month",
    empty_week_days="every day of the week",
    select_text="Select",
)
