"""Standard unit descriptors for the five cron fields."""

from cronselect.select.types import UnitDescriptor

MINUTES = UnitDescriptor(kind="minutes", min=0, max=59)
HOURS = UnitDescriptor(kind="hours", min=0, max=23)
MONTH_DAYS = UnitDescriptor(kind="monthDays", min=1, max=31)
MONTHS = UnitDescriptor(kind="months", min=1, max=12)
WEEK_DAYS = UnitDescriptor(kind="weekDays", min=0, max=6)

UNITS: dict[str, UnitDescriptor] = {
    "minutes": MINUTES,
    "hours": HOURS,
    "monthDays": MONTH_DAYS,
    "months": MONTHS,
    "weekDays": WEEK_DAYS,
}


def get_unit(kind: str) -> UnitDescriptor:
    """Get the standard descriptor for a unit kind.

    Raises:
        ValueError: If kind is not a known unit kind
    """
    if kind not in UNITS:
        raise ValueError(f"Unknown unit kind: {kind}. Valid kinds: {list(UNITS.keys())}")
    return UNITS[kind]
