"""Host-facing configuration of one selection control."""

from collections.abc import Callable
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field

from cronselect.select.locale import DEFAULT_LOCALE_EN, Locale
from cronselect.select.types import Option

if TYPE_CHECKING:
    from cronselect.config.settings import Settings

LeadingZeroKind = Literal["minutes", "hours", "monthDays"]
ClockFormat = Literal["12", "24"]
SelectMode = Literal["single", "multiple"]

DEFAULT_CLICK_WINDOW_MS = 300


class SelectConfig(BaseModel):
    """Configuration of a selection control.

    Attributes:
        humanize_labels: Render week days / months as names and hours on a 12-hour clock
        leading_zero: True for every eligible kind, or the list of kinds to pad
        clock_format: "12" or "24" (24-hour pads hours and minutes)
        mode: "single" keeps at most one value, "multiple" toggles membership
        allow_clear: Whether clear() may reset the selection
        periodicity_on_double_click: Double-click selects "every N"
        filter_option: Predicate applied last to the option catalog
        disabled: Suppresses all clicks
        read_only: Suppresses all clicks and clear()
        locale: String table for names and placeholders
        click_window_ms: Debounce window for gesture disambiguation
    """

    model_config = ConfigDict(frozen=True)

    humanize_labels: bool = False
    leading_zero: bool | list[LeadingZeroKind] = False
    clock_format: ClockFormat = "24"
    mode: SelectMode = "multiple"
    allow_clear: bool = True
    periodicity_on_double_click: bool = False
    filter_option: Callable[[Option], bool] | None = None
    disabled: bool = False
    read_only: bool = False
    locale: Locale = DEFAULT_LOCALE_EN
    click_window_ms: int = Field(default=DEFAULT_CLICK_WINDOW_MS, gt=0)

    @classmethod
    def from_settings(cls, settings: "Settings", **overrides: object) -> "SelectConfig":
        """Seed a config from environment settings, then apply overrides."""
        values: dict[str, object] = {
            "humanize_labels": settings.humanize_labels,
            "leading_zero": settings.leading_zero,
            "clock_format": settings.clock_format,
            "periodicity_on_double_click": settings.periodicity_on_double_click,
            "click_window_ms": settings.click_window_ms,
        }
        values.update(overrides)
        return cls(**values)
