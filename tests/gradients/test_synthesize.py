import warnings
import pytest
from cylindrica.diagnostics import CylindricaWarning
from cylindrica.gradients import GradientSpec, GradientRamp, synthesize, sanitize_faces, CSS_NAMES


@pytest.fixture(autouse=True)
def _fail_on_unexpected_notice():
    with warnings.catch_warnings():
        warnings.simplefilter("error", CylindricaWarning)
        yield


def test_default_barrel():
    spec = synthesize()
    assert spec.barrel.colors == ("#000000", "#808080", "#000000")
    assert spec.barrel.to_css() == "linear-gradient(0deg, #000000 0.0%, #808080 50.0%, #000000 100.0%)"


def test_red_barrel_four_faces():
    spec = synthesize("#ff0000", "#000000ff", faces=4)
    assert spec.barrel.colors == ("#000000", "#b40000", "#ff0000", "#b40000", "#000000")
    assert [round(p, 2) for p in spec.barrel.percents] == [0.0, 14.64, 50.0, 85.36, 100.0]


def test_shadow_alpha_inverted():
    spec = synthesize("#ff0000", "#000000ff", faces=4)
    assert spec.shadow.colors == ("#000000ff", "#0000004b", "#00000000", "#0000004b", "#000000ff")


def test_highlight_rims():
    spec = synthesize(faces=4)
    # max(2, round(4 / 4)) facets, a quarter of the turn
    assert spec.top_hover.colors == ("#000000ff", "#6363639c", "#000000")
    assert spec.bottom_hover.colors == ("#000000ff", "#6363639c", "#000000ff")
    assert spec.top_hover.percents[:2] == pytest.approx((0.0, 0.9607), abs=1e-4)


def test_terminators_and_angles():
    spec = synthesize(faces=7)
    for name in ("barrel", "top_hover", "top_press"):
        ramp = getattr(spec, name)
        assert ramp.stops[-1].color == "#000000"
        assert ramp.stops[-1].percent == 100.0
        assert ramp.angle == 0
    for name in ("shadow", "bottom_hover", "bottom_press"):
        assert getattr(spec, name).stops[-1].color == "#000000ff"
    assert spec.shadow.angle == 0
    assert spec.bottom_hover.angle == spec.bottom_press.angle == 180


def test_stop_count_follows_faces():
    assert len(synthesize(faces=5).barrel) == 6
    assert len(synthesize(faces=2.5).barrel) == 4
    assert len(synthesize(faces=16).top_press) == 4 + 1


def test_deterministic():
    first = synthesize("hsl(210, 60%, 40%)", "rgba(0, 0, 40, 200)", faces=9)
    second = synthesize("hsl(210, 60%, 40%)", "rgba(0, 0, 40, 200)", faces=9)
    assert first == second
    assert first.as_css() == second.as_css()


@pytest.mark.parametrize("faces, expected", [
    (None, 2), (0, 2), (float("nan"), 2), ("abc", 2),
    (1, 2), (-3, 2), (7, 7), (2.5, 2.5), ("12", 12), (999, 20),
])
def test_sanitize_faces(faces, expected):
    assert sanitize_faces(faces) == expected


def test_out_of_range_faces_match_bounds():
    assert synthesize(faces=0) == synthesize(faces=2)
    assert synthesize(faces=999) == synthesize(faces=20)


def test_as_css_names():
    css = synthesize().as_css()
    assert set(css) == set(CSS_NAMES.values())
    assert css["bottomPress"].startswith("linear-gradient(180deg, ")


def test_highlights_by_edge():
    spec = synthesize()
    assert spec.highlights("top") == (spec.top_hover, spec.top_press)
    assert spec.highlights("bottom") == (spec.bottom_hover, spec.bottom_press)
    with pytest.raises(ValueError):
        spec.highlights("left")


def test_ramps_skip_missing():
    ramp = GradientRamp(())
    spec = GradientSpec(barrel=ramp, shadow=ramp)
    assert list(spec.ramps()) == ["barrel", "shadow"]


class TestDegenerateColors:
    def test_black_base_defaults(self):
        with pytest.warns(CylindricaWarning, match="base color set by default"):
            spec = synthesize("#000")
        assert spec == synthesize()

    def test_unparseable_base_defaults(self):
        with pytest.warns(CylindricaWarning):
            assert synthesize("nonsense") == synthesize()

    def test_shadow_without_alpha_defaults(self):
        with pytest.warns(CylindricaWarning, match="shadow color"):
            spec = synthesize(shadow_color="#000000")
        assert spec.shadow == synthesize().shadow

    def test_transparent_highlight_defaults(self):
        with pytest.warns(CylindricaWarning, match="hover color"):
            spec = synthesize(hover_color="rgba(10, 20, 30, 0)")
        assert spec.top_hover == synthesize().top_hover

    def test_press_color_used_when_translucent(self):
        spec = synthesize(press_color="#ff000080", faces=8)
        assert spec.top_press != synthesize(faces=8).top_press
