"""Option catalog - the ordered list of selectable options for a unit.

The catalog is a pure function of (unit, config). It is not cached: every
iteration regenerates the options, so a changed locale, clock format or
leading-zero flag is always reflected.
"""

from collections.abc import Iterator

from cronselect.select.config import SelectConfig
from cronselect.select.formatter import EVERY_PREFIX, PERIODIC_PREFIX, expand, parse_token
from cronselect.select.render import render_step, render_value
from cronselect.select.types import Option, PeriodicSelection, Selection, UnitDescriptor

# Largest "every N" pseudo-option offered
MAX_PERIODIC_STEP = 30


class OptionCatalog:
    """Lazy, finite, restartable sequence of options."""

    def __init__(self, unit: UnitDescriptor, config: SelectConfig):
        self.unit = unit
        self.config = config

    def __iter__(self) -> Iterator[Option]:
        accept = self.config.filter_option
        for option in self._generate():
            if accept is None or accept(option):
                yield option

    def _generate(self) -> Iterator[Option]:
        unit = self.unit
        for value in range(unit.min, unit.max + 1):
            yield Option(token=str(value), label=render_value(value, unit, self.config))

        if unit.supports_periodicity:
            for step in range(2, min(MAX_PERIODIC_STEP, unit.max) + 1):
                yield Option(
                    token=f"{PERIODIC_PREFIX}{step}",
                    label=f"{EVERY_PREFIX}{render_value(step, unit, self.config)}",
                    is_periodic=True,
                )

    def tokens(self) -> list[str]:
        return [option.token for option in self]

    def get(self, token: str) -> Option | None:
        for option in self:
            if option.token == token:
                return option
        return None


def build_options(unit: UnitDescriptor, config: SelectConfig | None = None) -> OptionCatalog:
    """Build the option catalog for a unit.

    Args:
        unit: Unit to enumerate
        config: Control configuration (labels and filter)

    Returns:
        OptionCatalog yielding discrete options, then periodic "*/N" options for minutes/hours
    """
    return OptionCatalog(unit, config or SelectConfig())


def is_option_selected(option: Option, selection: Selection, unit: UnitDescriptor) -> bool:
    """Check whether an option should be highlighted for the current selection."""
    value = parse_token(option.token)
    if value is None:
        return False
    if option.is_periodic:
        if isinstance(selection, PeriodicSelection):
            return selection.step == value
        return not selection.is_empty and selection.values == expand(PeriodicSelection(step=value), unit)
    return value in expand(selection, unit)


def tag_label(token: str, unit: UnitDescriptor, config: SelectConfig | None = None) -> str:
    """Render a single token as a tag label.

    Periodic tokens read "every N" as the display text does; values use the
    short display names. Unreadable tokens are returned verbatim.
    """
    config = config or SelectConfig()
    value = parse_token(token)
    if value is None:
        return token
    if token.strip().startswith(PERIODIC_PREFIX):
        return f"{EVERY_PREFIX}{render_step(value, unit, config)}"
    return render_value(value, unit, config, short=True)
