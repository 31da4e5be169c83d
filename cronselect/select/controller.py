"""CronSelect - host-facing control for one cron field.

Wires the click disambiguator to the mutator and hands every resolved
gesture's result to the host's commit() callback. The host owns the
selection; the control only keeps the last value it was given or committed.
"""

from collections.abc import Callable

from loguru import logger

from cronselect.select.clicks import ClickDisambiguator, Scheduler, ThreadingScheduler
from cronselect.select.config import SelectConfig
from cronselect.select.formatter import format_selection
from cronselect.select.mutator import apply_action
from cronselect.select.options import OptionCatalog, build_options, is_option_selected, tag_label
from cronselect.select.types import EMPTY_SELECTION, Option, Selection, SemanticAction, UnitDescriptor


class CronSelect:
    """Selection control for one unit.

    Example:
        >>> scheduler = ManualScheduler()
        >>> select = CronSelect(MINUTES, commit=print, scheduler=scheduler)
        >>> select.click("5", now_ms=0)
        >>> scheduler.advance(300)
        kind='discrete' values=(5,)
    """

    def __init__(
        self,
        unit: UnitDescriptor,
        commit: Callable[[Selection], None],
        *,
        value: Selection = EMPTY_SELECTION,
        config: SelectConfig | None = None,
        scheduler: Scheduler | None = None,
    ):
        self.unit = unit
        self.commit = commit
        self.config = config or SelectConfig()
        self._value: Selection = value
        self._engine = ClickDisambiguator(
            self._on_action,
            scheduler or ThreadingScheduler(),
            window_ms=self.config.click_window_ms,
            periodicity_on_double_click=self.config.periodicity_on_double_click,
        )
        self._engine.enabled = self.accepts_clicks

    @property
    def value(self) -> Selection:
        return self._value

    @property
    def accepts_clicks(self) -> bool:
        return not (self.config.disabled or self.config.read_only)

    @property
    def display_text(self) -> str:
        return format_selection(self._value, self.unit, self.config)

    @property
    def options(self) -> OptionCatalog:
        return build_options(self.unit, self.config)

    def is_selected(self, option: Option) -> bool:
        return is_option_selected(option, self._value, self.unit)

    def tag_label(self, token: str) -> str:
        return tag_label(token, self.unit, self.config)

    def click(self, token: str, now_ms: int | None = None) -> None:
        """Handle a click on an option. No-op when disabled or read-only."""
        if not self.accepts_clicks:
            logger.debug(f"Click on {token!r} ignored for {self.unit.kind}: control is disabled or read-only")
            return
        self._engine.on_click(token, now_ms)

    def set_value(self, value: Selection) -> None:
        """Replace the value from the host side. Clearing drops pending clicks."""
        self._value = value
        if value.is_empty:
            self._engine.reset()

    def clear(self) -> None:
        """Clear the selection (when allowed) and commit the empty value, unless already empty."""
        if self.config.read_only or not self.config.allow_clear:
            return
        self._engine.reset()
        if self._value.is_empty:
            return
        self._commit(EMPTY_SELECTION)

    def set_disabled(self, disabled: bool) -> None:
        self._reconfigure(disabled=disabled)

    def set_read_only(self, read_only: bool) -> None:
        self._reconfigure(read_only=read_only)

    def _reconfigure(self, **changes: bool) -> None:
        self.config = self.config.model_copy(update=changes)
        self._engine.enabled = self.accepts_clicks
        if not self.accepts_clicks:
            self._engine.reset()

    def _on_action(self, action: SemanticAction) -> None:
        self._commit(apply_action(self._value, action, self.config.mode, self.unit))

    def _commit(self, value: Selection) -> None:
        self._value = value
        self.commit(value)
