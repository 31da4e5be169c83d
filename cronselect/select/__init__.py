"""Cron field selection core.

This module provides:
- The selection data model (discrete set or periodic token)
- Bidirectional formatting between selections and cron-like notation
- The option catalog for a unit
- Click disambiguation (toggle / range toggle / periodic replace)
- The selection mutator and the host-facing CronSelect control
"""

from cronselect.select.clicks import (
    AsyncioScheduler,
    ClickDisambiguator,
    ManualScheduler,
    ThreadingScheduler,
    resolve_gesture,
)
from cronselect.select.config import SelectConfig
from cronselect.select.controller import CronSelect
from cronselect.select.formatter import expand, format_selection, normalize, parse_selection, parse_token
from cronselect.select.locale import DEFAULT_LOCALE_EN, Locale
from cronselect.select.mutator import apply_action
from cronselect.select.options import OptionCatalog, build_options, is_option_selected, tag_label
from cronselect.select.render import render_value
from cronselect.select.types import (
    EMPTY_SELECTION,
    ClickEvent,
    DiscreteSelection,
    Option,
    PeriodicReplace,
    PeriodicSelection,
    RangeToggle,
    Selection,
    SemanticAction,
    Toggle,
    UnitDescriptor,
    UnitKind,
    discrete,
)
from cronselect.select.units import HOURS, MINUTES, MONTH_DAYS, MONTHS, UNITS, WEEK_DAYS, get_unit

__all__ = [
    "DEFAULT_LOCALE_EN",
    "EMPTY_SELECTION",
    "HOURS",
    "MINUTES",
    "MONTHS",
    "MONTH_DAYS",
    "UNITS",
    "WEEK_DAYS",
    "AsyncioScheduler",
    "ClickDisambiguator",
    "ClickEvent",
    "CronSelect",
    "DiscreteSelection",
    "Locale",
    "ManualScheduler",
    "Option",
    "OptionCatalog",
    "PeriodicReplace",
    "PeriodicSelection",
    "RangeToggle",
    "SelectConfig",
    "Selection",
    "SemanticAction",
    "ThreadingScheduler",
    "Toggle",
    "UnitDescriptor",
    "UnitKind",
    "apply_action",
    "build_options",
    "discrete",
    "expand",
    "format_selection",
    "get_unit",
    "is_option_selected",
    "normalize",
    "parse_selection",
    "parse_token",
    "render_value",
    "resolve_gesture",
    "tag_label",
]
