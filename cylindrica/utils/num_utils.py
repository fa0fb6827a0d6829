import math
from typing import Any, Optional


def is_close_to_int(value: float, tol: float = 1e-9) -> bool:
    """Check if a float is close to an integer within a tolerance."""
    return abs(value - round(value)) <= tol


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (0.5 -> 1, -0.5 -> 0)."""
    return math.floor(value + 0.5)


def as_real(value: Any) -> Optional[float]:
    """
    Read a real number from an int, float or numeric string.

    Returns None for anything unreadable, NaN and booleans.
    """
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number
