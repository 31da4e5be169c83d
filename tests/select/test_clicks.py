"""Tests for click disambiguation.

All timing runs on a ManualScheduler: callbacks fire only when the test
advances the virtual clock.
"""

import asyncio
import threading

import pytest

from cronselect.select.clicks import (
    AsyncioScheduler,
    ClickDisambiguator,
    ManualScheduler,
    ThreadingScheduler,
    resolve_gesture,
)
from cronselect.select.types import ClickEvent, PeriodicReplace, RangeToggle, SemanticAction, Toggle


def _clicks(*pairs: tuple[str, int]) -> list[ClickEvent]:
    return [ClickEvent(token=token, timestamp_ms=stamp) for token, stamp in pairs]


class TestResolveGesture:
    def test_no_clicks(self):
        assert resolve_gesture([]) is None

    def test_single_click_toggles(self):
        assert resolve_gesture(_clicks(("5", 0))) == Toggle(token="5")

    def test_double_click_with_periodicity(self):
        action = resolve_gesture(_clicks(("5", 0), ("5", 100)), periodicity_on_double_click=True)
        assert action == PeriodicReplace(step=5)

    def test_double_click_on_periodic_token(self):
        action = resolve_gesture(_clicks(("*/15", 0), ("*/15", 100)), periodicity_on_double_click=True)
        assert action == PeriodicReplace(step=15)

    @pytest.mark.parametrize("token", ["0", "1"])
    def test_double_click_on_zero_or_one_toggles(self, token):
        action = resolve_gesture(_clicks((token, 0), (token, 100)), periodicity_on_double_click=True)
        assert action == Toggle(token=token)

    def test_double_click_without_periodicity_toggles_once(self):
        assert resolve_gesture(_clicks(("5", 0), ("5", 100))) == Toggle(token="5")

    def test_two_different_tokens(self):
        assert resolve_gesture(_clicks(("2", 0), ("9", 50))) == RangeToggle(token_a="2", token_b="9")


class TestClickDisambiguator:
    @pytest.fixture
    def actions(self) -> list[SemanticAction]:
        return []

    @pytest.fixture
    def engine(self, scheduler, actions) -> ClickDisambiguator:
        return ClickDisambiguator(actions.append, scheduler, periodicity_on_double_click=True)

    def test_single_click_resolves_after_window(self, engine, scheduler, actions):
        engine.on_click("5", now_ms=0)
        scheduler.advance(299)
        assert actions == []
        scheduler.advance(1)
        assert actions == [Toggle(token="5")]
        assert engine.pending == ()

    def test_double_click_emits_one_periodic_replace(self, engine, scheduler, actions):
        engine.on_click("5", now_ms=0)
        scheduler.advance(100)
        engine.on_click("5", now_ms=100)
        scheduler.advance(1000)
        assert actions == [PeriodicReplace(step=5)]

    def test_first_timer_is_superseded(self, engine, scheduler, actions):
        engine.on_click("5", now_ms=0)
        scheduler.advance(250)
        engine.on_click("7", now_ms=250)
        # The first click's window has elapsed but its timer was replaced
        scheduler.advance(100)
        assert actions == []
        scheduler.advance(200)
        assert actions == [RangeToggle(token_a="5", token_b="7")]

    def test_clicks_outside_window_are_separate_gestures(self, engine, scheduler, actions):
        engine.on_click("5", now_ms=0)
        scheduler.advance(400)
        engine.on_click("5", now_ms=400)
        scheduler.advance(300)
        assert actions == [Toggle(token="5"), Toggle(token="5")]

    def test_late_click_flushes_stale_buffer(self, engine, scheduler, actions):
        # Timer has not fired yet (clock not advanced) but timestamps are 400ms apart
        engine.on_click("5", now_ms=0)
        engine.on_click("5", now_ms=400)
        assert actions == [Toggle(token="5")]
        scheduler.advance(300)
        assert actions == [Toggle(token="5"), Toggle(token="5")]

    def test_third_click_resolves_pair_first(self, engine, scheduler, actions):
        engine.on_click("5", now_ms=0)
        engine.on_click("5", now_ms=50)
        engine.on_click("8", now_ms=100)
        assert actions == [PeriodicReplace(step=5)]
        scheduler.advance(300)
        assert actions == [PeriodicReplace(step=5), Toggle(token="8")]

    def test_reset_discards_pending(self, engine, scheduler, actions):
        engine.on_click("5", now_ms=0)
        engine.reset()
        scheduler.advance(1000)
        assert actions == []
        assert engine.pending == ()
        assert scheduler.pending_timers == 0

    def test_disabled_engine_records_nothing(self, engine, scheduler, actions):
        engine.enabled = False
        engine.on_click("5", now_ms=0)
        scheduler.advance(1000)
        assert actions == []
        assert engine.pending == ()

    def test_now_defaults_to_scheduler_clock(self, engine, scheduler):
        scheduler.advance(1234)
        engine.on_click("5")
        assert engine.pending == (ClickEvent(token="5", timestamp_ms=1234),)

    def test_custom_window(self, scheduler, actions):
        engine = ClickDisambiguator(actions.append, scheduler, window_ms=50)
        engine.on_click("5", now_ms=0)
        scheduler.advance(50)
        assert actions == [Toggle(token="5")]


class TestManualScheduler:
    def test_callbacks_fire_in_due_order(self):
        scheduler = ManualScheduler()
        fired: list[str] = []
        scheduler.call_later(200, lambda: fired.append("late"))
        scheduler.call_later(100, lambda: fired.append("early"))
        scheduler.advance(500)
        assert fired == ["early", "late"]
        assert scheduler.now_ms() == 500

    def test_cancelled_callback_never_fires(self):
        scheduler = ManualScheduler()
        fired: list[str] = []
        handle = scheduler.call_later(100, lambda: fired.append("x"))
        handle.cancel()
        scheduler.advance(500)
        assert fired == []


class TestAsyncioScheduler:
    @pytest.mark.asyncio
    async def test_resolves_on_event_loop(self):
        actions: list[SemanticAction] = []
        engine = ClickDisambiguator(actions.append, AsyncioScheduler(), window_ms=20)
        engine.on_click("3")
        await asyncio.sleep(0.1)
        assert actions == [Toggle(token="3")]


class TestThreadingScheduler:
    def test_resolves_on_timer_thread(self):
        resolved = threading.Event()
        actions: list[SemanticAction] = []

        def on_action(action: SemanticAction) -> None:
            actions.append(action)
            resolved.set()

        engine = ClickDisambiguator(on_action, ThreadingScheduler(), window_ms=20)
        engine.on_click("4")
        assert resolved.wait(timeout=2)
        assert actions == [Toggle(token="4")]
