from __future__ import annotations
from typing import Callable, Optional
from .scheduler import Scheduler, TimerHandle
from ..constants import AMBIENT_INTERVAL, AMBIENT_STEP


class AmbientRotation:
    """
    Idle auto-rotation: adds ``step`` to an offset every ``interval`` seconds.

    Used to keep a picker slowly turning while nobody interacts with it.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        on_change: Callable[[float], None],
        *,
        step: float = AMBIENT_STEP,
        interval: float = AMBIENT_INTERVAL,
        offset: float = 0.0,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._scheduler = scheduler
        self.on_change = on_change
        self.step = step
        self.interval = interval
        self.offset = offset
        self._timer: Optional[TimerHandle] = None

    @property
    def running(self) -> bool:
        return self._timer is not None

    def start(self) -> None:
        if self._timer is None:
            self._timer = self._scheduler.call_later(self.interval, self._tick)

    def stop(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _tick(self) -> None:
        self.offset += self.step
        self._timer = self._scheduler.call_later(self.interval, self._tick)
        self.on_change(self.offset)
