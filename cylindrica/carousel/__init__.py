"""
Cylindrica Carousel
===================

Windowed cyclic layout for a rotating band of items.

>>> from cylindrica.carousel import CarouselState, layout
>>> days = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
>>> window = layout(CarouselState(tuple(days), offset=0, spacing=7))
>>> window.items
('Sat', 'Sun', 'Mon', 'Tue', 'Wed')
>>> window.anchor.item
'Mon'
>>> [entry.hidden for entry in window]
[True, False, False, False, True]

Band settings coming from a host are clamped with ``sanitize_band`` before
they reach ``layout``, which uses its inputs exactly as given.
"""

from .state import CarouselState, normalize_offset
from .window import (
    VisibleEntry,
    VisibleSlice,
    layout,
    window_size,
    anchor_phase,
    cyclic_window,
    is_back_facing,
)
from .band import (
    BandSettings,
    sanitize_band,
    sanitize_spacing,
    sanitize_radius,
    sanitize_font_size,
    is_valid_css_length,
)

__all__ = [
    "CarouselState",
    "normalize_offset",
    "VisibleEntry",
    "VisibleSlice",
    "layout",
    "window_size",
    "anchor_phase",
    "cyclic_window",
    "is_back_facing",
    "BandSettings",
    "sanitize_band",
    "sanitize_spacing",
    "sanitize_radius",
    "sanitize_font_size",
    "is_valid_css_length",
]
