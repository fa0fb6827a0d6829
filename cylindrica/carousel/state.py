from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Sequence, Tuple


def normalize_offset(offset: float, length: int) -> float:
    """
    Bring an offset into the form the window expects.

    A single item never rotates (0). NaN and infinities become 0. Negative offsets are
    wrapped upward by whole multiples of ``length``; positive offsets are
    never wrapped down, so forward scrolling stays continuous.
    """
    if length <= 1:
        return 0.0
    if not math.isfinite(offset):
        return 0.0
    if offset < 0:
        offset += length * math.ceil(-offset / length)
        if offset < 0:
            offset += length
    return offset


@dataclass(frozen=True)
class CarouselState:
    """
    Everything the window needs to place a band's items.

    Attributes:
        items: Cyclically wrapping display strings (at least one)
        offset: How many items have scrolled past, any real
        spacing: Item slots per half revolution (>= 2, clamped by the caller)
    """
    items: Tuple[str, ...]
    offset: float = 0.0
    spacing: float = 8.5

    def __post_init__(self) -> None:
        items = tuple(self.items)
        if not items:
            raise ValueError("CarouselState requires at least one item")
        object.__setattr__(self, "items", items)

    @property
    def length(self) -> int:
        return len(self.items)

    @property
    def normalized_offset(self) -> float:
        return normalize_offset(self.offset, len(self.items))

    def with_offset(self, offset: float) -> "CarouselState":
        return CarouselState(self.items, offset, self.spacing)

    @classmethod
    def of(cls, items: Sequence[str], offset: float = 0.0, spacing: float = 8.5) -> "CarouselState":
        return cls(tuple(items), float(offset), float(spacing))
