"""
HSL → RGB conversion used by the color parser.

>>> from cylindrica.conversions import hsl_to_unit_rgb
>>> hsl_to_unit_rgb(120, 1.0, 0.5)
(0.0, 1.0, 0.0)
"""

from .hsl import normalize_hue, hsl_to_unit_rgb

__all__ = [
    'normalize_hue',
    'hsl_to_unit_rgb',
]
