import math
from boundednumbers import UnitFloat
from boundednumbers.functions import cyclic_wrap_float


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return cyclic_wrap_float(h, 0.0, 360.0)

## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB with the compact CSS Color 4 formulation.

    ``a = s * min(l, 1 - l)`` and each channel is
    ``f(n) = l - a * max(min(k - 3, 9 - k, 1), -1)`` with
    ``k = (n + h / 30) mod 12``, sampled at n = 0, 8, 4 for R, G, B.

    Args:
        h: Hue in degrees, any real (wrapped into [0, 360))
        s: Saturation in [0, 1] (clamped)
        l: Lightness in [0, 1] (clamped)

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    s = UnitFloat(s)
    l = UnitFloat(l)

    a = s * min(l, 1 - l)

    def channel(n: int) -> float:
        k = math.fmod(n + h / 30, 12)
        return l - a * max(min(k - 3, 9 - k, 1), -1)

    return channel(0), channel(8), channel(4)
