import pytest
from cylindrica.conversions import hsl_to_unit_rgb, normalize_hue


def test_normalize_hue():
    assert normalize_hue(0) == 0
    assert normalize_hue(360) == 0
    assert normalize_hue(480) == pytest.approx(120)
    assert normalize_hue(-90) == pytest.approx(270)


@pytest.mark.parametrize("h, expected", [
    (0, (1.0, 0.0, 0.0)),
    (60, (1.0, 1.0, 0.0)),
    (120, (0.0, 1.0, 0.0)),
    (180, (0.0, 1.0, 1.0)),
    (240, (0.0, 0.0, 1.0)),
    (300, (1.0, 0.0, 1.0)),
])
def test_primary_hues(h, expected):
    assert hsl_to_unit_rgb(h, 1.0, 0.5) == pytest.approx(expected)


def test_saturation_and_lightness_clamped():
    assert hsl_to_unit_rgb(0, 5.0, 0.5) == pytest.approx((1.0, 0.0, 0.0))
    assert hsl_to_unit_rgb(0, 1.0, -1.0) == pytest.approx((0.0, 0.0, 0.0))
    assert hsl_to_unit_rgb(0, 1.0, 2.0) == pytest.approx((1.0, 1.0, 1.0))


def test_desaturated_is_gray():
    r, g, b = hsl_to_unit_rgb(77, 0.0, 0.25)
    assert r == g == b == pytest.approx(0.25)
