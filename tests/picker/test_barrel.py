import warnings
import pytest
from cylindrica.diagnostics import CylindricaWarning
from cylindrica.interaction import ManualScheduler, ReleaseHub
from cylindrica.picker import Barrel, BarrelPropertyDescriptor

DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@pytest.fixture
def clock():
    return ManualScheduler()


def test_defaults(clock):
    with warnings.catch_warnings():
        warnings.simplefilter("error", CylindricaWarning)
        barrel = Barrel(DAYS, clock)
        assert barrel.settings.spacing == 8.5
        assert barrel.selected == "Mon"
        assert len(barrel.layout()) == 6


def test_missing_items(clock):
    with pytest.warns(CylindricaWarning):
        barrel = Barrel(None, clock)
        assert barrel.settings.spacing == 6


def test_press_selects_next(clock):
    seen = []
    barrel = Barrel(DAYS, clock, on_change=seen.append)
    barrel.press("bottom")
    barrel.release()
    clock.advance(1.0)
    assert barrel.selected == "Tue"
    assert seen[-1] == 1.0
    assert not barrel.busy


def test_gradients_cached_until_a_color_changes(clock):
    barrel = Barrel(DAYS, clock)
    first = barrel.gradients
    assert barrel.gradients is first

    barrel.faces = barrel.faces
    assert barrel.gradients is first

    barrel.base_color = "#ff0000"
    assert barrel.gradients is not first
    assert barrel.gradients.barrel.colors == ("#000000", "#ff0000", "#000000")


def test_shared_gradients_replaced_on_change(clock):
    shared = Barrel(DAYS, clock, faces=6).gradients
    barrel = Barrel(DAYS, clock, gradients=shared)
    assert barrel.gradients is shared
    barrel.faces = 3
    assert len(barrel.gradients.barrel) == 4


def test_settings_cached_until_geometry_changes(clock):
    barrel = Barrel(DAYS, clock)
    first = barrel.settings
    assert barrel.settings is first
    barrel.spacing = 5
    assert barrel.settings.spacing == 5
    assert len(barrel.layout()) == 4


def test_width_forgotten_when_content_changes(clock):
    barrel = Barrel(DAYS, clock, width="120px")
    assert not barrel.needs_measure
    barrel.spacing = 6
    assert barrel.settings.width == "120px"
    barrel.items = ["a", "b"]
    assert barrel.needs_measure
    barrel.width = "40px"
    barrel.font_size = "2em"
    assert barrel.width is None
    assert barrel.settings.font_size == "2em"


def test_highlight_ramps(clock):
    barrel = Barrel(DAYS, clock)
    assert barrel.highlight("bottom") is None
    barrel.hover_enter("bottom")
    assert barrel.highlight("bottom") is barrel.gradients.bottom_hover
    barrel.press("bottom")
    assert barrel.highlight("bottom") is barrel.gradients.bottom_press
    assert barrel.highlight("top") is None
    barrel.hover_leave("bottom")
    assert barrel.highlight("bottom") is None


def test_release_through_hub(clock):
    hub = ReleaseHub()
    barrel = Barrel(DAYS, clock, release_hub=hub)
    barrel.press("top")
    hub.dispatch("mouseup")
    clock.advance(1.0)
    assert barrel.offset == -1.0
    assert barrel.selected == "Sun"


def test_set_offset(clock):
    barrel = Barrel(DAYS, clock)
    assert barrel.set_offset(3)
    assert barrel.selected == "Thu"
    assert repr(barrel) == "Barrel(items=7, offset=3.00)"


def test_descriptor():
    class Owner:
        value = BarrelPropertyDescriptor('value', invalidates=('things',))
        fixed = BarrelPropertyDescriptor('fixed', readonly=True)

        def __init__(self):
            self.dropped = []
            self._fixed = 1
            self.value = 0

        def invalidate_cache(self, *names):
            self.dropped.append(names)

    owner = Owner()
    owner.value = 0
    owner.value = 2
    assert owner.dropped == [("things",), ("things",)]
    assert owner.fixed == 1
    with pytest.raises(AttributeError):
        owner.fixed = 2
    assert isinstance(Owner.value, BarrelPropertyDescriptor)
    assert repr(Owner.fixed) == "BarrelPropertyDescriptor('fixed', readonly)"
