"""
Cylindrica Interaction
======================

Gesture handling for a barrel's top and bottom controls.

>>> from cylindrica.interaction import InteractionController, ManualScheduler
>>> clock = ManualScheduler()
>>> controller = InteractionController(clock)
>>> controller.press("bottom")
True
>>> controller.release()
True
>>> clock.advance(1.0) > 0
True
>>> controller.offset
1.0

``ManualScheduler`` is a virtual clock; an asyncio event loop can be passed
instead, since only ``call_later`` is used.
"""

from .timing import Timing
from .scheduler import Scheduler, TimerHandle, ManualScheduler, ManualTimer
from .events import ReleaseHub
from .controller import InteractionController, GestureState
from .rotation import AmbientRotation

__all__ = [
    "Timing",
    "Scheduler",
    "TimerHandle",
    "ManualScheduler",
    "ManualTimer",
    "ReleaseHub",
    "InteractionController",
    "GestureState",
    "AmbientRotation",
]
