"""
Windowed cyclic layout.

Only the items that can currently be seen on the barrel are placed. For a
band with ``spacing`` item slots per half revolution that is
``ceil(spacing / 2) + 1`` items, centred on the anchor item the offset
points at. Each gets a rotation angle around the barrel's axis and a
``hidden`` flag for items rotated onto the back half (renderers cannot
always be trusted to cull back faces).
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Sequence, Tuple
from .state import CarouselState
from ..constants import PHASE_SCALE, TAU


class VisibleEntry(NamedTuple):
    item: str
    angle: float
    hidden: bool


@dataclass(frozen=True)
class VisibleSlice:
    """
    Items in the potentially-visible arc, in rotation order.

    ``entries[0]`` is the topmost item before the anchor; renderers map
    array order to sequential rotation positions.
    """
    entries: Tuple[VisibleEntry, ...]
    before: int
    offset: float

    def __iter__(self) -> Iterator[VisibleEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> VisibleEntry:
        return self.entries[index]

    @property
    def anchor(self) -> VisibleEntry:
        """The entry the offset currently points at."""
        return self.entries[self.before]

    @property
    def items(self) -> Tuple[str, ...]:
        return tuple(entry.item for entry in self.entries)

    @property
    def hidden_count(self) -> int:
        return sum(1 for entry in self.entries if entry.hidden)


def window_size(spacing: float) -> Tuple[int, int]:
    """Return ``(total, before)``: window length and items placed before the anchor."""
    total = math.ceil(spacing / 2) + 1
    return total, total // 2


def anchor_phase(offset: float, length: int, spacing: float) -> Tuple[int, float]:
    """
    Split a normalized offset into the anchor index and a rotation phase.

    The sub-item remainder is scaled by ``PHASE_SCALE / spacing`` rather than
    used as is: the plain remainder makes a position repeat when the anchor
    index steps over.
    """
    fraction = math.fmod(offset + 0.5, length) - 0.5
    counter = math.floor(fraction)
    return counter, (fraction - counter) * PHASE_SCALE / spacing


def cyclic_window(items: Sequence[str], start: int, total: int) -> List[str]:
    """Take ``total`` items from ``start`` (may be negative), wrapping at both ends."""
    length = len(items)
    return [items[(start + index) % length] for index in range(total)]


def is_back_facing(angle: float) -> bool:
    """True when an item at ``angle`` radians sits on the back half of the barrel."""
    return math.fmod(angle / math.pi + 0.5, 2) > 1


def layout(state: CarouselState) -> VisibleSlice:
    """
    Place the visible items of a band.

    Args:
        state: Items, offset and spacing. Spacing is used as given; clamp it
               with ``sanitize_band`` first.

    Returns:
        VisibleSlice with exactly ``ceil(spacing / 2) + 1`` entries.
    """
    items = state.items
    length = len(items)
    offset = state.normalized_offset
    spacing = state.spacing

    angle = TAU / spacing
    counter, phase = anchor_phase(offset, length, spacing)

    total, before = window_size(spacing)
    # Centres the window on the forward-facing position
    slice_of_pi = TAU - before * TAU / spacing

    seen = cyclic_window(items, counter - before, total)

    entries = []
    for index, item in enumerate(seen):
        radians = angle * index - phase + slice_of_pi
        entries.append(VisibleEntry(item, radians, is_back_facing(radians)))

    return VisibleSlice(tuple(entries), before, offset)
