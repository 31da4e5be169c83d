"""Selection mutator - applies one semantic action to a selection.

apply_action() is pure: it returns a new selection and never raises for
business reasons. Malformed or out-of-range tokens leave the
selection unchanged.

Post-condition for every action: a set covering the whole unit domain is
normalized to the empty selection ("any").
"""

from loguru import logger

from cronselect.select.config import SelectMode
from cronselect.select.formatter import expand, full_domain, normalize, parse_token
from cronselect.select.types import (
    EMPTY_SELECTION,
    DiscreteSelection,
    PeriodicReplace,
    PeriodicSelection,
    RangeToggle,
    Selection,
    SemanticAction,
    Toggle,
    UnitDescriptor,
)


def _toggle(selection: Selection, token: str, mode: SelectMode, unit: UnitDescriptor) -> Selection:
    value = parse_token(token)
    if value is None:
        logger.warning(f"Ignoring toggle of malformed token {token!r} for {unit.kind}")
        return selection
    if not unit.contains(value):
        logger.warning(f"Ignoring toggle of out-of-range token {token!r} for {unit.kind} [{unit.min}, {unit.max}]")
        return selection

    current = expand(selection, unit)

    if mode == "single":
        if current == (value,) and isinstance(selection, DiscreteSelection):
            return selection
        return DiscreteSelection(values=(value,))

    if value in current:
        return DiscreteSelection(values=[v for v in current if v != value])
    return DiscreteSelection(values=[*current, value])


def _periodic_replace(selection: Selection, step: int, unit: UnitDescriptor) -> Selection:
    if step < 1:
        logger.warning(f"Ignoring periodic replace with step={step} for {unit.kind}")
        return selection

    computed = expand(PeriodicSelection(step=step), unit)
    if computed == expand(selection, unit) or computed == full_domain(unit):
        return EMPTY_SELECTION
    return DiscreteSelection(values=computed)


def apply_action(
    selection: Selection,
    action: SemanticAction,
    mode: SelectMode,
    unit: UnitDescriptor,
) -> Selection:
    """Apply a semantic action to a selection.

    Args:
        selection: Current selection (never mutated)
        action: Toggle, RangeToggle or PeriodicReplace
        mode: "single" or "multiple"
        unit: Unit the selection belongs to

    Returns:
        New, normalized selection
    """
    if isinstance(action, Toggle):
        result = _toggle(selection, action.token, mode, unit)
    elif isinstance(action, RangeToggle):
        # Each value toggled independently against the running result
        result = _toggle(selection, action.token_a, mode, unit)
        result = _toggle(result, action.token_b, mode, unit)
    elif isinstance(action, PeriodicReplace):
        result = _periodic_replace(selection, action.step, unit)
    else:
        logger.warning(f"Ignoring unknown action: {action!r}")
        return selection

    result = normalize(result, unit)
    logger.debug(f"Applied {action.kind} to {unit.kind}: {expand(selection, unit)} -> {expand(result, unit)}")
    return result
