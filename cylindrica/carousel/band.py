"""
Band settings sanitization.

The window itself never clamps its inputs. Hosts run raw band settings
through ``sanitize_band`` first; every substitution is reported as a
CylindricaWarning and the result is always usable.
"""

from __future__ import annotations
import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional, Tuple
from boundednumbers import clamp
from .state import CarouselState
from ..constants import (
    CSS_LENGTH_UNITS,
    DEFAULT_FONT_SIZE,
    DEFAULT_RADIUS,
    DEFAULT_SPACING,
    DEFAULT_WIDTH,
    MIN_RADIUS,
    MIN_SPACING,
    PLACEHOLDER_ITEMS,
    PLACEHOLDER_SPACING,
    SINGLE_ITEM_SPACING,
)
from ..diagnostics import notice, default_notice
from ..utils import as_real

CSS_LENGTH = re.compile(rf"^([0-9.]+)({'|'.join(CSS_LENGTH_UNITS)})$", re.IGNORECASE)


def is_valid_css_length(value: Any) -> bool:
    """
    Check for a plain CSS length such as ``"4vmin"``, ``"1.5em"`` or ``"12px"``.

    A single decimal point at most, and at least one digit.
    """
    if not isinstance(value, str):
        return False
    match = CSS_LENGTH.match(value)
    if not match:
        return False
    number = match.group(1)
    return number.count(".") <= 1 and number != "."


@dataclass(frozen=True)
class BandSettings:
    """
    Sanitized settings for one barrel.

    Attributes:
        items: Non-empty display strings
        spacing: Item slots per half revolution
        radius: Barrel radius, in multiples of the font size
        font_size: CSS length
        text_align: "left", "right", "center" or None to inherit
        padding: CSS padding passed through to the renderer
        width: Host-measured width, or "auto"
    """
    items: Tuple[str, ...]
    spacing: float
    radius: float
    font_size: str = DEFAULT_FONT_SIZE
    text_align: Optional[str] = None
    padding: Optional[str] = None
    width: str = DEFAULT_WIDTH

    def state(self, offset: float = 0.0) -> CarouselState:
        return CarouselState(self.items, offset, self.spacing)


def _sanitize_items(items: Any) -> Optional[Tuple[str, ...]]:
    if isinstance(items, (str, bytes)) or not isinstance(items, Sequence) or not items:
        return None
    return tuple(str(item) for item in items)


def sanitize_spacing(spacing: Any, length: int) -> float:
    """
    Clamp spacing for a band of ``length`` items.

    Missing or NaN spacing defaults to ``max(2, min(8.5, 2 * length))``; a
    single item uses 2 (it never rotates); otherwise spacing is clamped
    into ``[3, 2 * length]``.
    """
    number = as_real(spacing)
    if number is None:
        number = max(SINGLE_ITEM_SPACING, min(DEFAULT_SPACING, length * 2))
        if spacing is not None:
            default_notice("Barrel", "spacing", number)
        return number
    if length == 1:
        return SINGLE_ITEM_SPACING
    return clamp(number, MIN_SPACING, length * 2)


def sanitize_radius(radius: Any) -> float:
    if radius is None:
        return DEFAULT_RADIUS
    number = as_real(radius)
    if number is None or number < MIN_RADIUS:
        default_notice("Barrel", "radius", DEFAULT_RADIUS)
        return DEFAULT_RADIUS
    return number


def sanitize_font_size(font_size: Any) -> str:
    if font_size is None:
        return DEFAULT_FONT_SIZE
    if not is_valid_css_length(font_size):
        default_notice("Barrel", "font size", DEFAULT_FONT_SIZE)
        return DEFAULT_FONT_SIZE
    return font_size


def sanitize_band(
    items: Any,
    spacing: Any = None,
    radius: Any = None,
    font_size: Any = None,
    *,
    text_align: Optional[str] = None,
    padding: Optional[str] = None,
    width: Optional[str] = None,
) -> BandSettings:
    """
    Turn raw band settings into BandSettings, substituting defaults where needed.

    Args:
        items: Sequence of display strings; placeholders are used when missing or empty
        spacing: Item slots per half revolution
        radius: Barrel radius in font-size units (>= 1)
        font_size: CSS length
        text_align: Optional alignment passed through
        padding: Optional CSS padding passed through
        width: Host-measured width, "auto" when not measured
    """
    clean_items = _sanitize_items(items)
    if clean_items is None:
        notice("Barrel", "items missing, using placeholder")
        clean_items = PLACEHOLDER_ITEMS
        clean_spacing: float = PLACEHOLDER_SPACING
    else:
        clean_spacing = sanitize_spacing(spacing, len(clean_items))

    return BandSettings(
        items=clean_items,
        spacing=clean_spacing,
        radius=sanitize_radius(radius),
        font_size=sanitize_font_size(font_size),
        text_align=text_align,
        padding=padding,
        width=width or DEFAULT_WIDTH,
    )
