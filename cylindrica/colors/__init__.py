"""
Cylindrica Colors
=================

Immutable 8-bit colors (``ColorRGBA``) and the parser that produces them
from CSS-like strings.

Usage
-----
>>> from cylindrica.colors import parse_color
>>> parse_color("#f00").value
(255, 0, 0)
>>> parse_color("#ff000080").value
(255, 0, 0, 128)
>>> parse_color("rgba(300, 20, 10, 40)").value
(255, 20, 10, 40)
>>> parse_color("hsl(120, 100%, 50%)").value
(0, 255, 0)
>>> parse_color("not-a-color")
ColorRGBA((0, 0, 0, 0))

Notes
-----
- Channels are clamped into [0, 255] on construction
- A color parsed without alpha keeps three channels; ``alpha`` reads 255
- Malformed input never raises; it yields ``ColorRGBA.ZERO``
"""

from .color_rgba import ColorRGBA
from .parsing import (
    parse_color,
    hex_to_components,
    rgb_to_components,
    hsl_string_to_components,
)

__all__ = [
    "ColorRGBA",
    "parse_color",
    "hex_to_components",
    "rgb_to_components",
    "hsl_string_to_components",
]
