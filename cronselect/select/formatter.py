"""Value-set formatter - selection <-> compact cron-like notation.

format_selection() turns a selection into the canonical display text:
    {}                      -> unit placeholder ("every minute")
    */15                    -> "every 15"
    {5} (minutes/hours)     -> "every 05"
    {1, 6, 11, ..., 31}     -> "1-31/5"
    {1, 2, 3, 7, 8, 10}     -> "1-3,7-8,10"

parse_selection() is the inverse. Neither raises on bad input: formatting is
best-effort, parsing returns None for text it cannot read.
"""

import re

from loguru import logger

from cronselect.select.config import SelectConfig
from cronselect.select.locale import Locale
from cronselect.select.render import render_step, render_value
from cronselect.select.types import (
    EMPTY_SELECTION,
    DiscreteSelection,
    PeriodicSelection,
    Selection,
    UnitDescriptor,
)

# Interval-2 progressions on these kinds read as "every 2"
EVERY_TWO_KINDS: tuple[str, ...] = ("hours", "weekDays")

EVERY_PREFIX = "every "
PERIODIC_PREFIX = "*/"

_PART_RE = re.compile(r"^(?P<start>[^-/]+)(?:-(?P<end>[^-/]+))?(?:/(?P<step>[0-9]+))?$")
_CLOCK_RE = re.compile(r"^(?P<hour>[0-9]{1,2})\s*(?P<suffix>AM|PM)$", re.IGNORECASE)
_DIGITS_RE = re.compile(r"^[0-9]+$")


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def expand(selection: Selection, unit: UnitDescriptor) -> tuple[int, ...]:
    """Discrete values a selection stands for.

    A periodic selection expands to {min, min+step, ...} within [min, max],
    anchored at the unit minimum rather than 0.
    """
    if isinstance(selection, PeriodicSelection):
        return tuple(range(unit.min, unit.max + 1, selection.step))
    return selection.values


def full_domain(unit: UnitDescriptor) -> tuple[int, ...]:
    return tuple(range(unit.min, unit.max + 1))


def normalize(selection: Selection, unit: UnitDescriptor) -> Selection:
    """Collapse a selection that covers the whole domain to the empty selection."""
    if isinstance(selection, DiscreteSelection) and selection.values == full_domain(unit):
        return EMPTY_SELECTION
    return selection


def _progression_step(values: tuple[int, ...]) -> int | None:
    """Common difference when values are exactly {first, first+d, ..., last} with d > 1."""
    if len(values) < 3:
        return None
    step = values[1] - values[0]
    if step <= 1:
        return None
    if values != tuple(range(values[0], values[-1] + 1, step)):
        return None
    return step


def _consecutive_runs(values: tuple[int, ...]) -> list[tuple[int, int]]:
    """Split sorted values into maximal (first, last) runs of consecutive integers."""
    runs: list[tuple[int, int]] = []
    start = prev = values[0]
    for value in values[1:]:
        if value == prev + 1:
            prev = value
            continue
        runs.append((start, prev))
        start = prev = value
    runs.append((start, prev))
    return runs


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def format_selection(selection: Selection, unit: UnitDescriptor, config: SelectConfig | None = None) -> str:
    """Format a selection as canonical display text.

    Rules, first match wins:
    1. Empty -> the unit's placeholder
    2. Periodic token -> "every {step}" (digits only)
    3. Single value > 1 on minutes/hours -> "every {value}"
    4. Single value -> "{value}"
    5. >= 3 values in exact arithmetic progression, d > 1 -> "{first}-{last}/{d}"
       ("every 2" for hours and week days when d == 2)
    6. Consecutive runs -> "a-b" / "a", comma-joined

    Args:
        selection: Selection to format
        unit: Unit the selection belongs to
        config: Control configuration (defaults apply when None)

    Returns:
        Display text
    """
    config = config or SelectConfig()

    if selection.is_empty:
        return config.locale.empty_text(unit.kind)

    if isinstance(selection, PeriodicSelection):
        return f"{EVERY_PREFIX}{render_step(selection.step, unit, config)}"

    values = selection.values

    def label(value: int) -> str:
        return render_value(value, unit, config, short=True)

    if len(values) == 1:
        value = values[0]
        if value > 1 and unit.supports_periodicity:
            return f"{EVERY_PREFIX}{label(value)}"
        return label(value)

    step = _progression_step(values)
    if step is not None:
        if step == 2 and unit.kind in EVERY_TWO_KINDS:
            return f"{EVERY_PREFIX}2"
        return f"{label(values[0])}-{label(values[-1])}/{step}"

    parts = [label(first) if first == last else f"{label(first)}-{label(last)}" for first, last in _consecutive_runs(values)]
    return ",".join(parts)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def is_digits(text: str) -> bool:
    """ASCII digits only; str.isdigit() also accepts superscripts that int() rejects."""
    return _DIGITS_RE.match(text) is not None


def parse_token(token: str) -> int | None:
    """Numeric meaning of an option token.

    "15" -> 15, "*/15" -> 15, anything else -> None.
    """
    text = token.strip()
    if text.startswith(PERIODIC_PREFIX):
        text = text[len(PERIODIC_PREFIX):]
    if not is_digits(text):
        return None
    return int(text)


def _name_index(text: str, *tables: list[str] | None) -> int | None:
    folded = text.casefold()
    for names in tables:
        if not names:
            continue
        for index, name in enumerate(names):
            if name and name.casefold() == folded:
                return index
    return None


def parse_value(text: str, unit: UnitDescriptor, config: SelectConfig | None = None) -> int | None:
    """Inverse of render_value for a single label.

    Accepts digits (with leading zeros), 12-hour labels ("3PM"), and full or
    short locale names for week days and months.
    """
    config = config or SelectConfig()
    text = text.strip()
    if not text:
        return None
    if is_digits(text):
        return int(text)

    clock = _CLOCK_RE.match(text)
    if clock is not None:
        hour = int(clock.group("hour"))
        if not 1 <= hour <= 12:
            return None
        if clock.group("suffix").upper() == "AM":
            return 0 if hour == 12 else hour
        return 12 if hour == 12 else hour + 12

    locale: Locale = config.locale
    if unit.kind == "weekDays":
        return _name_index(text, locale.week_days, locale.alt_week_days)
    if unit.kind == "months":
        index = _name_index(text, locale.months, locale.alt_months)
        return None if index is None else index + 1
    return None


def _parse_part(part: str, unit: UnitDescriptor, config: SelectConfig) -> list[int] | None:
    match = _PART_RE.match(part.strip())
    if match is None:
        return None

    start = parse_value(match.group("start"), unit, config)
    if start is None:
        return None

    end_text = match.group("end")
    step_text = match.group("step")
    if end_text is None and step_text is None:
        return [start]

    if end_text is not None:
        end = parse_value(end_text, unit, config)
    else:
        # "a/d" runs to the end of the domain
        end = unit.max
    if end is None or end < start:
        return None

    step = int(step_text) if step_text is not None else 1
    if step < 1:
        return None
    return list(range(start, end + 1, step))


def parse_selection(text: str, unit: UnitDescriptor, config: SelectConfig | None = None) -> Selection | None:
    """Parse display text or a cron field back into a selection.

    Args:
        text: Display text ("1-3,7-8,10", "every 5", "MON-FRI") or cron field ("*/5")
        unit: Unit the text belongs to
        config: Control configuration (locale and names)

    Returns:
        Normalized selection, or None if the text cannot be read
    """
    config = config or SelectConfig()
    stripped = text.strip()

    if not stripped or stripped == "*" or stripped == config.locale.empty_text(unit.kind):
        return EMPTY_SELECTION

    periodic_text = None
    if stripped.startswith(EVERY_PREFIX):
        periodic_text = stripped[len(EVERY_PREFIX):]
    elif stripped.startswith(PERIODIC_PREFIX):
        periodic_text = stripped[len(PERIODIC_PREFIX):]
    if periodic_text is not None:
        step = parse_value(periodic_text, unit, config)
        if step is None or step < 1:
            logger.debug(f"Unreadable periodic value for {unit.kind}: {text!r}")
            return None
        return PeriodicSelection(step=step)

    values: list[int] = []
    for part in stripped.split(","):
        parsed = _parse_part(part, unit, config)
        if parsed is None:
            logger.debug(f"Unreadable part {part!r} for {unit.kind} in {text!r}")
            return None
        values.extend(parsed)

    return normalize(DiscreteSelection(values=values), unit)
