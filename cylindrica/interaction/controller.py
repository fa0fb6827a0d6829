"""
Press-and-hold control of a barrel's offset.

Life of a gesture::

    Idle --press--> Pressed --smooth step done, still held--> AutoRepeating
      ^                |                                          |
      |                +--smooth step done, released------------->+--release--> Idle

A press scrolls one whole item, spread over ``Timing.sub_steps`` eased
increments. Holding the press over the same control then repeats whole
steps, each delay shorter than the last down to ``Timing.min_delay``.

Only one gesture owns the offset at a time: a press while a gesture is
still running (busy) is ignored, so a double click cannot start two
smooth steps that would leave the offset between whole items.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional
from .events import ReleaseHub
from .scheduler import Scheduler, TimerHandle
from .timing import Timing
from ..types.gesture_types import EDGES, RELEASE_FOR_PRESS, Edge, Highlight, PressKind, edge_direction
from ..utils import round_half_up, value_or_default

OffsetListener = Callable[[float], None]


@dataclass
class GestureState:
    """
    One press, from press-start until it is released and its smooth step is done.

    The scheduled continuations receive this record itself, so every
    timer callback sees the same evolving state.
    """
    edge: str
    direction: int
    release_kind: str
    started_at: Optional[float] = None
    pressed: bool = True
    stepping: bool = True
    sub_step: int = 0
    origin: float = 0.0
    rate: float = 0.0
    repeats: int = 0
    step_timer: Optional[TimerHandle] = field(default=None, repr=False)
    repeat_timer: Optional[TimerHandle] = field(default=None, repr=False)

    @property
    def busy(self) -> bool:
        return self.pressed or self.stepping

    def cancel_timers(self) -> None:
        for timer in (self.step_timer, self.repeat_timer):
            if timer is not None:
                timer.cancel()
        self.step_timer = None
        self.repeat_timer = None


class InteractionController:
    """
    Turns press, release and hover events on a barrel's top and bottom
    controls into offset updates over time.

    Args:
        scheduler: Anything with ``call_later(delay, callback, *args)``
        offset: Starting offset
        timing: Press-and-hold tuning
        sign: Multiplier applied to every step; -1 makes a band spin backwards
        on_change: Called with the new offset after every change
        release_hub: Document-wide release events; the controller subscribes
                     on press and unsubscribes when the press ends
    """

    def __init__(
        self,
        scheduler: Scheduler,
        *,
        offset: float = 0.0,
        timing: Optional[Timing] = None,
        sign: int = 1,
        on_change: Optional[OffsetListener] = None,
        release_hub: Optional[ReleaseHub] = None,
    ) -> None:
        self._scheduler = scheduler
        self._offset = float(offset)
        self.timing = value_or_default(timing, Timing())
        self.sign = -1 if sign < 0 else 1
        self.on_change = on_change
        self.release_hub = release_hub
        self._hover: Dict[str, bool] = {edge: False for edge in EDGES}
        self._gesture: Optional[GestureState] = None

    # ------------------ STATE ------------------
    @property
    def offset(self) -> float:
        return self._offset

    @property
    def busy(self) -> bool:
        return self._gesture is not None

    @property
    def gesture(self) -> Optional[GestureState]:
        return self._gesture

    def hovering(self, edge: Edge) -> bool:
        edge_direction(edge)
        return self._hover[edge]

    def pressed(self, edge: Edge) -> bool:
        gesture = self._gesture
        return gesture is not None and gesture.pressed and gesture.edge == edge

    def highlight(self, edge: Edge) -> Optional[Highlight]:
        """Which highlight ramp the edge shows: "press", "hover" or None."""
        if not self.hovering(edge):
            return None
        return "press" if self.pressed(edge) else "hover"

    def set_offset(self, offset: float) -> bool:
        """Replace the offset from outside; refused while a gesture owns it."""
        if self.busy:
            return False
        self._emit(float(offset))
        return True

    # ------------------ EVENTS ------------------
    def hover_enter(self, edge: Edge) -> None:
        edge_direction(edge)
        self._hover[edge] = True

    def hover_leave(self, edge: Edge) -> None:
        edge_direction(edge)
        self._hover[edge] = False

    def press(self, edge: Edge, kind: PressKind = "mouse", timestamp: Optional[float] = None) -> bool:
        """
        Start a gesture on the "top" (scroll back) or "bottom" (scroll forward) control.

        Returns:
            False when ignored because another gesture is still busy.
        """
        direction = edge_direction(edge) * self.sign
        try:
            release_kind = RELEASE_FOR_PRESS[kind]
        except KeyError:
            raise ValueError(f"Unknown press kind {kind!r}") from None

        if self._gesture is not None:
            return False

        gesture = GestureState(
            edge=edge,
            direction=direction,
            release_kind=release_kind,
            started_at=timestamp,
            origin=self._offset,
            rate=self.timing.start_rate,
        )
        self._gesture = gesture
        if self.release_hub is not None:
            self.release_hub.subscribe(release_kind, self.release)

        self._smooth_step(gesture)
        return True

    def release(self) -> bool:
        """
        End the current press wherever it happened.

        Future auto-repeat steps are cancelled; a smooth step already in
        flight still completes, after which the controller is idle.
        """
        gesture = self._gesture
        if gesture is None or not gesture.pressed:
            return False

        gesture.pressed = False
        if gesture.repeat_timer is not None:
            gesture.repeat_timer.cancel()
            gesture.repeat_timer = None
        self._unsubscribe(gesture)

        if not gesture.stepping:
            self._finish(gesture)
        return True

    def cancel(self) -> None:
        """Drop the current gesture immediately, smooth step included."""
        gesture = self._gesture
        if gesture is None:
            return
        gesture.pressed = False
        gesture.stepping = False
        self._finish(gesture)

    # ------------------ SEQUENCES ------------------
    def _smooth_step(self, gesture: GestureState) -> None:
        if gesture is not self._gesture:
            return

        gesture.sub_step += 1
        sub_steps = self.timing.sub_steps
        progress = self.timing.ease(gesture.sub_step / sub_steps)
        self._emit(gesture.origin + gesture.direction * progress)

        if gesture.sub_step < sub_steps:
            gesture.step_timer = self._scheduler.call_later(
                self.timing.sub_step_interval, self._smooth_step, gesture
            )
            return

        # Remove floating-point drift
        gesture.step_timer = None
        snapped = float(round_half_up(self._offset))
        if snapped != self._offset:
            self._emit(snapped)
        gesture.stepping = False

        if gesture.pressed:
            gesture.repeat_timer = self._scheduler.call_later(
                self.timing.repeat_lead, self._auto_repeat, gesture
            )
        else:
            self._finish(gesture)

    def _auto_repeat(self, gesture: GestureState) -> None:
        if gesture is not self._gesture:
            return

        gesture.repeat_timer = None
        if not (gesture.pressed and self._hover[gesture.edge]):
            return

        gesture.repeats += 1
        self._emit(self._offset + gesture.direction)
        gesture.rate = self.timing.next_rate(gesture.rate)
        gesture.repeat_timer = self._scheduler.call_later(gesture.rate, self._auto_repeat, gesture)

    def _finish(self, gesture: GestureState) -> None:
        gesture.cancel_timers()
        self._unsubscribe(gesture)
        if self._gesture is gesture:
            self._gesture = None

    def _unsubscribe(self, gesture: GestureState) -> None:
        if self.release_hub is not None:
            self.release_hub.unsubscribe(gesture.release_kind, self.release)

    def _emit(self, offset: float) -> None:
        self._offset = offset
        if self.on_change is not None:
            self.on_change(offset)
