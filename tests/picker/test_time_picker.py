from datetime import date
import pytest
from cylindrica.interaction import ManualScheduler
from cylindrica.picker import TimePicker

MONDAY = date(2024, 1, 1)


@pytest.fixture
def clock():
    return ManualScheduler()


def test_default_values(clock):
    picker = TimePicker(clock, today=MONDAY)
    assert len(picker) == 3
    assert picker.values() == {"weekdays": "Mon", "hours": "00", "minutes": "00"}
    assert picker["hours"].text_align == "right"


def test_barrels_share_gradients(clock):
    picker = TimePicker(clock, base_color="#204080", faces=5, today=MONDAY)
    assert all(barrel.gradients is picker.gradients for barrel in picker)


def test_minute_interval(clock):
    picker = TimePicker(clock, display=["minutes"], every_n_minutes=15)
    assert picker["minutes"].settings.items == ("00", "15", "30", "45")
    assert list(picker.layouts()) == ["minutes"]


def test_changes_reported_by_role(clock):
    seen = []
    picker = TimePicker(clock, today=MONDAY, on_change=lambda role, offset: seen.append(role))
    picker["minutes"].press("bottom")
    picker["minutes"].release()
    clock.advance(1.0)
    assert set(seen) == {"minutes"}
    assert picker.values()["minutes"] == "01"


def test_one_release_hub(clock):
    picker = TimePicker(clock, today=MONDAY)
    picker["hours"].press("bottom")
    picker.release_hub.dispatch("mouseup")
    clock.advance(1.0)
    assert picker.values()["hours"] == "01"
    assert not picker["hours"].busy


def test_ambient_rotation(clock):
    picker = TimePicker(clock, today=MONDAY, ambient=True)
    clock.advance(0.35)
    assert picker["weekdays"].offset == pytest.approx(0.3)
    assert picker["hours"].offset == pytest.approx(-0.3)
    assert picker["minutes"].offset == pytest.approx(0.3)
    picker.stop()
    clock.advance(1.0)
    assert picker["minutes"].offset == pytest.approx(0.3)
    assert not picker.rotation.running


def test_ambient_rotation_skips_busy_barrels(clock):
    picker = TimePicker(clock, today=MONDAY)
    picker["hours"].press("bottom")
    picker.start()
    clock.advance(0.35)
    assert picker["minutes"].offset == pytest.approx(0.3)
    assert picker["hours"].offset > 0


def test_stop_cancels_gestures(clock):
    picker = TimePicker(clock, today=MONDAY)
    picker["weekdays"].press("bottom")
    picker.stop()
    assert not picker["weekdays"].busy
    assert clock.pending == 0
