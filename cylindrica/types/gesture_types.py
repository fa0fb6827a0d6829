from __future__ import annotations
from typing import Dict, Literal

Edge = Literal["top", "bottom"]
PressKind = Literal["mouse", "touch"]
ReleaseKind = Literal["mouseup", "touchend"]
Highlight = Literal["hover", "press"]

EDGES = ("top", "bottom")

# Top edge scrolls back, bottom edge scrolls forward
EDGE_DIRECTIONS: Dict[str, int] = {
    "top": -1,
    "bottom": 1,
}

RELEASE_FOR_PRESS: Dict[str, str] = {
    "mouse": "mouseup",
    "touch": "touchend",
}


def edge_direction(edge: str) -> int:
    """Return -1 for the top edge and +1 for the bottom edge."""
    try:
        return EDGE_DIRECTIONS[edge]
    except KeyError:
        raise ValueError(f"Unknown edge {edge!r}, expected one of {EDGES}") from None
