from __future__ import annotations
from collections import defaultdict
from typing import Callable, DefaultDict, List
from ..types.gesture_types import ReleaseKind


class ReleaseHub:
    """
    Document-wide release listeners.

    A press may end anywhere, outside the control that started it or even
    outside the window, so the controller listens here instead of on the
    control. Hosts forward every ``"mouseup"`` / ``"touchend"`` they see.
    """

    def __init__(self) -> None:
        self._listeners: DefaultDict[str, List[Callable[[], None]]] = defaultdict(list)

    def subscribe(self, kind: ReleaseKind, callback: Callable[[], None]) -> None:
        self._listeners[kind].append(callback)

    def unsubscribe(self, kind: ReleaseKind, callback: Callable[[], None]) -> None:
        listeners = self._listeners.get(kind)
        if listeners and callback in listeners:
            listeners.remove(callback)

    def listeners(self, kind: str) -> int:
        return len(self._listeners.get(kind, ()))

    def dispatch(self, kind: str) -> int:
        """Call every listener for ``kind``; listeners may unsubscribe themselves."""
        snapshot = list(self._listeners.get(kind, ()))
        for callback in snapshot:
            callback()
        return len(snapshot)
