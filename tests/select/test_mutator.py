"""Tests for the selection mutator."""

from cronselect.select.formatter import format_selection
from cronselect.select.mutator import apply_action
from cronselect.select.types import (
    EMPTY_SELECTION,
    PeriodicReplace,
    PeriodicSelection,
    RangeToggle,
    Toggle,
    UnitDescriptor,
    discrete,
)
from cronselect.select.units import MINUTES, MONTH_DAYS, WEEK_DAYS


class TestToggleMultiple:
    def test_toggle_adds_value(self):
        assert apply_action(EMPTY_SELECTION, Toggle(token="5"), "multiple", MINUTES) == discrete(5)

    def test_toggle_inserts_sorted(self):
        assert apply_action(discrete(7), Toggle(token="3"), "multiple", MINUTES).values == (3, 7)

    def test_toggle_removes_value(self):
        assert apply_action(discrete(3, 7), Toggle(token="7"), "multiple", MINUTES) == discrete(3)

    def test_toggle_twice_is_identity(self):
        original = discrete(1, 10, 30)
        once = apply_action(original, Toggle(token="20"), "multiple", MINUTES)
        twice = apply_action(once, Toggle(token="20"), "multiple", MINUTES)
        assert once != original
        assert twice == original

    def test_periodic_token_toggles_its_step(self):
        assert apply_action(EMPTY_SELECTION, Toggle(token="*/5"), "multiple", MINUTES) == discrete(5)

    def test_toggle_expands_periodic_selection(self):
        result = apply_action(PeriodicSelection(step=20), Toggle(token="20"), "multiple", MINUTES)
        assert result == discrete(0, 40)

    def test_malformed_token_is_noop(self):
        selection = discrete(1, 2)
        assert apply_action(selection, Toggle(token="L"), "multiple", MINUTES) is selection

    def test_superscript_digit_token_is_noop(self):
        selection = discrete(1, 2)
        assert apply_action(selection, Toggle(token="\u00b2"), "multiple", MINUTES) is selection

    def test_out_of_range_token_is_noop(self):
        selection = discrete(1, 2)
        assert apply_action(selection, Toggle(token="75"), "multiple", MINUTES) is selection
        assert apply_action(selection, Toggle(token="0"), "multiple", MONTH_DAYS) is selection
        assert apply_action(EMPTY_SELECTION, Toggle(token="60"), "single", MINUTES) is EMPTY_SELECTION

    def test_range_toggle_skips_out_of_range_side(self):
        result = apply_action(discrete(1), RangeToggle(token_a="5", token_b="99"), "multiple", MINUTES)
        assert result == discrete(1, 5)

    def test_selecting_every_week_day_normalizes_to_empty(self):
        selection = EMPTY_SELECTION
        for day in range(7):
            selection = apply_action(selection, Toggle(token=str(day)), "multiple", WEEK_DAYS)
        assert selection == EMPTY_SELECTION
        assert format_selection(selection, WEEK_DAYS) == "every day of the week"


class TestToggleSingle:
    def test_single_mode_replaces(self):
        selection = apply_action(EMPTY_SELECTION, Toggle(token="3"), "single", MINUTES)
        selection = apply_action(selection, Toggle(token="7"), "single", MINUTES)
        assert selection == discrete(7)

    def test_reclicking_active_value_is_noop(self):
        selection = discrete(7)
        assert apply_action(selection, Toggle(token="7"), "single", MINUTES) is selection

    def test_single_mode_on_single_value_domain_normalizes(self):
        unit = UnitDescriptor(kind="hours", min=4, max=4)
        assert apply_action(EMPTY_SELECTION, Toggle(token="4"), "single", unit) == EMPTY_SELECTION


class TestRangeToggle:
    def test_both_values_toggled_independently(self):
        result = apply_action(discrete(3), RangeToggle(token_a="1", token_b="3"), "multiple", MINUTES)
        assert result == discrete(1)

    def test_values_between_are_untouched(self):
        result = apply_action(EMPTY_SELECTION, RangeToggle(token_a="10", token_b="20"), "multiple", MINUTES)
        assert result == discrete(10, 20)

    def test_malformed_token_only_skips_that_value(self):
        result = apply_action(EMPTY_SELECTION, RangeToggle(token_a="x", token_b="2"), "multiple", MINUTES)
        assert result == discrete(2)


class TestPeriodicReplace:
    def test_anchors_at_unit_min(self):
        result = apply_action(EMPTY_SELECTION, PeriodicReplace(step=5), "multiple", MONTH_DAYS)
        assert result == discrete(1, 6, 11, 16, 21, 26, 31)
        assert format_selection(result, MONTH_DAYS) == "1-31/5"

    def test_replaces_previous_selection(self):
        result = apply_action(discrete(2, 3), PeriodicReplace(step=20), "multiple", MINUTES)
        assert result == discrete(0, 20, 40)

    def test_same_periodic_set_toggles_off(self):
        current = discrete(0, 20, 40)
        assert apply_action(current, PeriodicReplace(step=20), "multiple", MINUTES) == EMPTY_SELECTION
        assert apply_action(PeriodicSelection(step=20), PeriodicReplace(step=20), "multiple", MINUTES) == EMPTY_SELECTION

    def test_full_domain_step_normalizes_to_empty(self):
        assert apply_action(discrete(3), PeriodicReplace(step=1), "multiple", MINUTES) == EMPTY_SELECTION

    def test_single_mode_still_replaces(self):
        result = apply_action(discrete(3), PeriodicReplace(step=30), "single", MINUTES)
        assert result == discrete(0, 30)

    def test_non_positive_step_is_noop(self):
        selection = discrete(3)
        assert apply_action(selection, PeriodicReplace(step=0), "multiple", MINUTES) is selection
