"""
Deferred callbacks.

The controller only needs ``call_later(delay, callback, *args)`` returning a
handle with ``cancel()``. Any asyncio event loop satisfies this; for
renderers that drive their own frame loop, and for tests, ``ManualScheduler``
keeps a virtual clock that advances only when told to.
"""

from __future__ import annotations
import heapq
import itertools
from typing import Any, Callable, List, Protocol, Tuple


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle: ...


class ManualTimer:
    """Handle for a callback scheduled on a ManualScheduler."""
    __slots__ = ('when', 'callback', 'args', 'cancelled')

    def __init__(self, when: float, callback: Callable[..., Any], args: Tuple[Any, ...]) -> None:
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "pending"
        return f"ManualTimer(when={self.when!r}, {state})"


class ManualScheduler:
    """
    Single-threaded scheduler on a virtual clock.

    Callbacks run to completion in (due time, scheduling order) order.
    Callbacks scheduled while advancing run in the same ``advance`` call
    when they fall due inside its window.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._queue: List[Tuple[float, int, ManualTimer]] = []
        self._sequence = itertools.count()

    def time(self) -> float:
        return self._now

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> ManualTimer:
        timer = ManualTimer(self._now + max(0.0, delay), callback, args)
        heapq.heappush(self._queue, (timer.when, next(self._sequence), timer))
        return timer

    @property
    def pending(self) -> int:
        """Number of scheduled callbacks that have not been cancelled."""
        return sum(1 for _, _, timer in self._queue if not timer.cancelled)

    def _run_next(self, until: float) -> bool:
        while self._queue:
            when, _, timer = self._queue[0]
            if when > until:
                return False
            heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self._now = when
            timer.callback(*timer.args)
            return True
        return False

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward, running every callback that falls due.

        Returns:
            Number of callbacks run.
        """
        if seconds < 0:
            raise ValueError(f"Cannot advance by a negative duration: {seconds}")
        until = self._now + seconds
        ran = 0
        while self._run_next(until):
            ran += 1
        self._now = until
        return ran

    def run_all(self, limit: int = 10_000) -> int:
        """Run callbacks until none are pending, at most ``limit`` of them."""
        ran = 0
        while ran < limit and self._run_next(float("inf")):
            ran += 1
        return ran
