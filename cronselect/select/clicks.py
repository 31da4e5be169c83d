"""Click disambiguation - one semantic action per user gesture.

Clicks on options are buffered for a short debounce window. When the
window after the LAST click elapses, the buffer resolves to exactly one
action:
- one click                     -> Toggle(token)
- same token twice              -> PeriodicReplace(step) when periodicity on
                                   double-click is enabled (and step is not 0/1),
                                   otherwise Toggle(token)
- two different tokens          -> RangeToggle(token_a, token_b)

No action fires before the window elapses: a second click supersedes the
outcome of the first. The timer is the only suspension point; it is a
deferred callback supplied by a Scheduler, never a blocking wait.
"""

import asyncio
import threading
import time
from collections.abc import Callable
from typing import Protocol

from loguru import logger

from cronselect.select.config import DEFAULT_CLICK_WINDOW_MS
from cronselect.select.formatter import parse_token
from cronselect.select.types import ClickEvent, PeriodicReplace, RangeToggle, SemanticAction, Toggle

# Live clicks kept per gesture; a further click resolves the buffered pair first
MAX_PENDING_CLICKS = 2


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Source of time and deferred callbacks for the disambiguator."""

    def now_ms(self) -> int: ...

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle: ...


class _ManualTimer:
    def __init__(self, due_ms: int, seq: int, callback: Callable[[], None]):
        self.due_ms = due_ms
        self.seq = seq
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Virtual clock. Callbacks run only when advance() moves time past them.

    Used for deterministic replay of click streams (tests, CLI).
    """

    def __init__(self, start_ms: int = 0):
        self._now_ms = start_ms
        self._seq = 0
        self._timers: list[_ManualTimer] = []

    def now_ms(self) -> int:
        return self._now_ms

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> _ManualTimer:
        self._seq += 1
        timer = _ManualTimer(self._now_ms + delay_ms, self._seq, callback)
        self._timers.append(timer)
        return timer

    @property
    def pending_timers(self) -> int:
        return sum(1 for timer in self._timers if not timer.cancelled)

    def advance(self, delay_ms: int) -> None:
        """Move the clock forward, firing due callbacks in order."""
        target = self._now_ms + delay_ms
        while True:
            due = [t for t in self._timers if not t.cancelled and t.due_ms <= target]
            if not due:
                break
            timer = min(due, key=lambda t: (t.due_ms, t.seq))
            self._timers.remove(timer)
            self._now_ms = max(self._now_ms, timer.due_ms)
            timer.callback()
        self._timers = [t for t in self._timers if not t.cancelled]
        self._now_ms = target

    def advance_to(self, now_ms: int) -> None:
        if now_ms > self._now_ms:
            self.advance(now_ms - self._now_ms)


class AsyncioScheduler:
    """Deferred callbacks on an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def now_ms(self) -> int:
        return int(self.loop.time() * 1000)

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(delay_ms / 1000, callback)


class ThreadingScheduler:
    """Deferred callbacks on threading.Timer, for hosts without an event loop."""

    def now_ms(self) -> int:
        return int(time.monotonic() * 1000)

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay_ms / 1000, callback)
        timer.daemon = True
        timer.start()
        return timer


def resolve_gesture(
    pending: list[ClickEvent],
    *,
    periodicity_on_double_click: bool = False,
) -> SemanticAction | None:
    """Resolve the clicks of one gesture into a semantic action.

    Args:
        pending: Clicks accumulated during the window, oldest first
        periodicity_on_double_click: Whether a double click selects "every N"

    Returns:
        The action, or None when there were no clicks
    """
    if not pending:
        return None
    if len(pending) == 1:
        return Toggle(token=pending[0].token)

    first, second = pending[-2], pending[-1]
    if first.token != second.token:
        return RangeToggle(token_a=first.token, token_b=second.token)

    if periodicity_on_double_click:
        step = parse_token(first.token)
        if step is not None and step > 1:
            return PeriodicReplace(step=step)
    return Toggle(token=first.token)


class ClickDisambiguator:
    """Debounces option clicks into semantic actions.

    Holds a single pending buffer guarded by one active timer. Each click
    cancels the previous timer and schedules a fresh one; a timer that fires
    after being superseded is a no-op.
    """

    def __init__(
        self,
        on_action: Callable[[SemanticAction], None],
        scheduler: Scheduler,
        *,
        window_ms: int = DEFAULT_CLICK_WINDOW_MS,
        periodicity_on_double_click: bool = False,
    ):
        """Initialize the disambiguator.

        Args:
            on_action: Called once per resolved gesture
            scheduler: Clock and timer source
            window_ms: Debounce window in milliseconds
            periodicity_on_double_click: Whether a double click selects "every N"
        """
        self.on_action = on_action
        self.scheduler = scheduler
        self.window_ms = window_ms
        self.periodicity_on_double_click = periodicity_on_double_click
        self.enabled = True

        self._pending: list[ClickEvent] = []
        self._timer: TimerHandle | None = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def pending(self) -> tuple[ClickEvent, ...]:
        with self._lock:
            return tuple(self._pending)

    def on_click(self, token: str, now_ms: int | None = None) -> None:
        """Record a click and (re)start the debounce timer.

        Args:
            token: Token of the clicked option
            now_ms: Click timestamp; defaults to the scheduler clock
        """
        if not self.enabled:
            logger.debug(f"Click on {token!r} ignored: disambiguator disabled")
            return

        if now_ms is None:
            now_ms = self.scheduler.now_ms()

        flushed: SemanticAction | None = None
        with self._lock:
            if self._pending:
                last = self._pending[-1]
                if now_ms - last.timestamp_ms >= self.window_ms or len(self._pending) >= MAX_PENDING_CLICKS:
                    # Previous gesture is over; its timer has not fired yet
                    flushed = self._take_locked()

            self._pending.append(ClickEvent(token=token, timestamp_ms=now_ms))
            self._generation += 1
            generation = self._generation
            self._cancel_timer_locked()
            self._timer = self.scheduler.call_later(self.window_ms, lambda: self._on_timer(generation))

        if flushed is not None:
            self._emit(flushed)

    def reset(self) -> None:
        """Discard pending clicks without emitting an action."""
        with self._lock:
            self._generation += 1
            self._cancel_timer_locked()
            if self._pending:
                logger.debug(f"Discarding {len(self._pending)} pending click(s)")
            self._pending = []

    def _on_timer(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._timer = None
            action = self._take_locked()
        if action is not None:
            self._emit(action)

    def _take_locked(self) -> SemanticAction | None:
        action = resolve_gesture(self._pending, periodicity_on_double_click=self.periodicity_on_double_click)
        self._pending = []
        return action

    def _cancel_timer_locked(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _emit(self, action: SemanticAction) -> None:
        logger.debug(f"Resolved gesture: {action!r}")
        self.on_action(action)
