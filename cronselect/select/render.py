"""Value labels - the ONE place a tick value becomes text.

Both the option catalog and the display formatter go through
render_value(), so option labels and the summary text never diverge.
"""

from cronselect.select.config import SelectConfig
from cronselect.select.locale import lookup
from cronselect.select.types import UnitDescriptor

LEADING_ZERO_KINDS: tuple[str, ...] = ("monthDays", "hours", "minutes")
CLOCK_KINDS: tuple[str, ...] = ("hours", "minutes")


def should_add_leading_zero(kind: str, config: SelectConfig) -> bool:
    """Check whether values of this unit kind are padded to two digits."""
    if kind not in LEADING_ZERO_KINDS:
        return False
    leading_zero = config.leading_zero
    if leading_zero is True:
        return True
    if isinstance(leading_zero, list) and kind in leading_zero:
        return True
    return config.clock_format == "24" and kind in CLOCK_KINDS


def _explicit_leading_zero(kind: str, config: SelectConfig) -> bool:
    leading_zero = config.leading_zero
    return leading_zero is True or (isinstance(leading_zero, list) and kind in leading_zero)


def _pad(value: int, pad: bool) -> str:
    if pad and 0 <= value < 10:
        return f"0{value}"
    return str(value)


def to_12_hour(value: int) -> tuple[int, str]:
    """Convert a 0-23 hour to (hour, "AM"/"PM")."""
    hour = 12 if value == 0 else value - 12 if value > 12 else value
    return hour, "AM" if value < 12 else "PM"


def render_value(value: int, unit: UnitDescriptor, config: SelectConfig, *, short: bool = False) -> str:
    """Render one tick value as a label.

    Args:
        value: Tick value (out-of-range values are rendered best-effort)
        unit: Unit the value belongs to
        config: Control configuration
        short: Use short locale names (display text) instead of full names (option labels)

    Returns:
        Label text
    """
    if config.humanize_labels:
        locale = config.locale
        if unit.kind == "weekDays":
            names = locale.alt_week_days if short else locale.week_days
            name = lookup(names, 0 if value == 7 else value)
            if name is not None:
                return name
        elif unit.kind == "months":
            names = locale.alt_months if short else locale.months
            name = lookup(names, value - 1)
            if name is not None:
                return name
        elif unit.kind == "hours" and config.clock_format == "12":
            hour, suffix = to_12_hour(value)
            return f"{_pad(hour, _explicit_leading_zero(unit.kind, config))}{suffix}"

    return _pad(value, should_add_leading_zero(unit.kind, config))


def render_step(step: int, unit: UnitDescriptor, config: SelectConfig) -> str:
    """Render a periodic step: digits only, never calendar names or clock suffixes."""
    return _pad(step, should_add_leading_zero(unit.kind, config))
