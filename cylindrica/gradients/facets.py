"""
Facet sampling for the lit-cylinder illusion.

A half revolution of the barrel is approximated by ``faces`` flat facets.
Facet ``i`` is lit by ``sin(turn_i)`` and placed on the ramp by
``|cos(turn_i)|``, which concentrates stops near the centre where the
curvature is sharpest.
"""

from __future__ import annotations
import math
from typing import List, Tuple
import numpy as np
from numpy.typing import NDArray
from ..constants import BYTE_MAX
from ..types.color_types import IntVector


def facet_turns(faces: float, count: int, divisor: float = 1.0) -> NDArray[np.float64]:
    """
    Rotation of each sampled facet, ``(pi / faces) * i / divisor`` for i in [0, count).

    Args:
        faces: Facet count defining the facet angle (may be fractional)
        count: Number of facets to sample
        divisor: Shrinks the turn; highlight rims use 4
    """
    angle = math.pi / faces
    index = np.arange(count, dtype=np.float64)
    if divisor == 1.0:
        return angle * index
    return angle * index / divisor


def shade_channels(sines: NDArray[np.float64], maxima: IntVector) -> NDArray[np.uint8]:
    """
    Per-facet channels ``floor(sin * channel_max)``, one row per facet.

    The fourth channel, when present, is inverted (``255 - value``) so a
    translucent overlay is lighter at the centre than at the edges. Results
    are clamped into a byte.
    """
    values = np.floor(sines[:, None] * np.asarray(maxima, dtype=np.float64)[None, :])
    if len(maxima) == 4:
        values[:, 3] = BYTE_MAX - values[:, 3]
    return np.clip(values, 0, BYTE_MAX).astype(np.uint8)


def stop_percents(cosines: NDArray[np.float64], faces: float) -> NDArray[np.float64]:
    """Stops at ``50 + 50*cos`` past the midpoint facet (``i > faces / 2``), else ``50 - 50*cos``."""
    index = np.arange(len(cosines))
    halfway = index > faces / 2
    return np.where(halfway, 50 + 50 * cosines, 50 - 50 * cosines)


def hex_colors(channels: NDArray[np.uint8]) -> List[str]:
    """Format each row of byte channels as ``#rrggbb`` or ``#rrggbbaa``."""
    return ["#" + "".join(f"{int(v):02x}" for v in row) for row in channels]


def sample_facets(
    maxima: IntVector,
    faces: float,
    count: int,
    midpoint_faces: float,
    divisor: float = 1.0,
) -> List[Tuple[str, float]]:
    """
    Sample ``count`` facets of a color into (hex color, percent) pairs.

    Args:
        maxima: Channel maxima (3 or 4 channels, may exceed 255)
        faces: Facet count defining the facet angle
        count: Number of facets to sample
        midpoint_faces: Facet count used for the midpoint rule
        divisor: Turn divisor (1 for the barrel, 4 for highlight rims)
    """
    turns = facet_turns(faces, count, divisor)
    sines = np.sin(turns)
    cosines = np.abs(np.cos(turns))

    colors = hex_colors(shade_channels(sines, maxima))
    percents = stop_percents(cosines, midpoint_faces)
    return [(color, float(percent)) for color, percent in zip(colors, percents)]
