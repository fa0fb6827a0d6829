"""
Color string parsing.

Three textual forms are understood, detected by the first three characters
(case-insensitive):

- ``rgb(...)`` / ``rgba(...)``: up to four decimal integers
- ``hsl(...)``: hue in degrees, saturation and lightness as ratios or percentages
- anything else is read as hexadecimal: ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa``

Parsing is total: any string that cannot be read yields ``ColorRGBA.ZERO``
(0, 0, 0, 0). Callers decide what a degenerate result should be replaced with.
"""

from __future__ import annotations
import re
from typing import Any, Optional
from boundednumbers import clamp
from .color_rgba import ColorRGBA
from ..conversions import hsl_to_unit_rgb
from ..types.color_types import color_format_of
from ..utils import round_half_up

HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")

RGB_PATTERN = re.compile(
    r"rgba?\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)(?:\s*,\s*(\d+))?\s*\)",
    re.IGNORECASE,
)

# "hsl(412.523,50%,40%)" (percentages) or "412.523, 0.5, 0.4" (ratios)
HSL_PATTERN = re.compile(
    r"(hsl\s*\(\s*)?([0-9.]+)\s*,\s*([0-9.]+)(%?)\s*,\s*([0-9.]+)(%?)\s*\)?",
    re.IGNORECASE,
)

LEADING_NUMBER = re.compile(r"\d*\.?\d*")


def hex_to_components(color_string: str) -> ColorRGBA:
    """
    Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa`` (the ``#`` is optional).

    Shorthand digits are doubled. Three and six digit forms carry no alpha.
    """
    digits = color_string[1:] if color_string.startswith("#") else color_string

    if len(digits) not in (3, 4, 6, 8):
        return ColorRGBA.ZERO
    if not HEX_DIGITS.fullmatch(digits):
        return ColorRGBA.ZERO

    if len(digits) in (3, 4):
        digits = "".join(digit * 2 for digit in digits)

    return ColorRGBA(tuple(bytes.fromhex(digits)))


def rgb_to_components(color_string: str) -> ColorRGBA:
    """
    Parse ``rgb(r, g, b)`` or ``rgba(r, g, b, a)`` with integer channels.

    Values above 255 are clamped; a missing alpha stays missing.
    """
    match = RGB_PATTERN.search(color_string)
    if not match:
        return ColorRGBA.ZERO

    channels = tuple(
        min(int(group), 255)
        for group in match.groups()
        if group is not None
    )
    return ColorRGBA(channels)


def _leading_float(text: str) -> Optional[float]:
    """Read the longest numeric prefix of ``text`` ("1.2.3" -> 1.2), None if there is none."""
    prefix = LEADING_NUMBER.match(text).group()
    if not any(char.isdigit() for char in prefix):
        return None
    return float(prefix)


def hsl_string_to_components(color_string: str) -> ColorRGBA:
    """
    Parse ``hsl(h, s, l)``; a trailing ``%`` on s or l means "divide by 100".

    Hue is wrapped into [0, 360); saturation and lightness are clamped to [0, 1].
    """
    match = HSL_PATTERN.search(color_string)
    if not match:
        return ColorRGBA.ZERO

    _, hue, saturation, s_percent, lightness, l_percent = match.groups()
    h = _leading_float(hue)
    s = _leading_float(saturation)
    l = _leading_float(lightness)
    if h is None or s is None or l is None:
        return ColorRGBA.ZERO

    if s_percent:
        s /= 100
    if l_percent:
        l /= 100

    rgb = hsl_to_unit_rgb(h, s, l)
    return ColorRGBA(tuple(clamp(round_half_up(channel * 255), 0, 255) for channel in rgb))


def parse_color(color_string: Any) -> ColorRGBA:
    """
    Parse any supported color string into a ColorRGBA.

    Args:
        color_string: "#f00", "#ff000080", "rgb(255, 0, 0)", "hsl(0, 100%, 50%)", ...

    Returns:
        The parsed color, or ``ColorRGBA.ZERO`` when the input is not a
        string or cannot be read. Never raises.
    """
    if not isinstance(color_string, str):
        return ColorRGBA.ZERO

    color_format = color_format_of(color_string)
    if color_format == "rgb":
        return rgb_to_components(color_string)
    if color_format == "hsl":
        return hsl_string_to_components(color_string)
    return hex_to_components(color_string)
