from datetime import date
import pytest
from cylindrica.constants import WEEKDAY_NAMES
from cylindrica.diagnostics import CylindricaWarning
from cylindrica.picker import hours, minutes, weekdays_from, valid_minute_interval, sanitize_display, BandRole


def test_hours():
    result = hours()
    assert len(result) == 24
    assert result[0] == "00"
    assert result[-1] == "23"


def test_minutes():
    assert len(minutes()) == 60
    assert minutes(15) == ("00", "15", "30", "45")
    assert minutes(60) == ("00",)
    assert minutes("20") == ("00", "20", "40")


@pytest.mark.parametrize("every_n", [7, 0, -5, 2.5, "x", 120, float("inf")])
def test_bad_minute_interval_defaults(every_n):
    assert valid_minute_interval(every_n) is None
    with pytest.warns(CylindricaWarning, match="every_n_minutes"):
        assert len(minutes(every_n)) == 60


def test_weekdays_start_today():
    # 2024-01-03 was a Wednesday
    assert weekdays_from(date(2024, 1, 3)) == ("Wed", "Thu", "Fri", "Sat", "Sun", "Mon", "Tue")
    assert weekdays_from(date(2024, 1, 7))[0] == "Sun"
    assert set(weekdays_from()) == set(WEEKDAY_NAMES)


def test_weekday_names():
    names = ("lu", "ma", "me", "je", "ve", "sa", "di")
    assert weekdays_from(date(2024, 1, 5), names)[:2] == ("ve", "sa")
    with pytest.warns(CylindricaWarning):
        assert weekdays_from(date(2024, 1, 1), ("a", "b")) == WEEKDAY_NAMES


def test_default_display():
    roles = sanitize_display()
    assert [band.role for band in roles] == ["weekdays", "hours", "minutes"]
    assert [band.text_align for band in roles] == ["center", "right", "left"]
    assert roles[2].every_n_minutes == 1
    assert [band.sign for band in roles] == [1, -1, 1]


def test_display_filters_entries():
    roles = sanitize_display([
        "Hours",
        {"role": "minutes", "every_n_minutes": 15, "text_align": "RIGHT", "bogus": 1},
        "seconds",
        {"role": "years"},
        5,
    ])
    assert roles == (
        BandRole("hours", "right"),
        BandRole("minutes", "right", 15),
    )


def test_display_fallbacks():
    assert sanitize_display("hours") == sanitize_display()
    assert sanitize_display(["nothing"]) == sanitize_display()
    roles = sanitize_display([], week_align="Left", every_n_minutes=5)
    assert roles[0].text_align == "left"
    assert roles[2].every_n_minutes == 5


def test_display_minute_interval_precedence():
    assert sanitize_display(["minutes"], every_n_minutes=10)[0].every_n_minutes == 10
    assert sanitize_display([{"role": "minutes", "every_n_minutes": 7}], every_n_minutes=10)[0].every_n_minutes == 10
    with pytest.warns(CylindricaWarning):
        band = sanitize_display([{"role": "minutes", "every_n_minutes": 7}])[0]
    assert band.every_n_minutes == 1


def test_display_keeps_padding_and_alignment():
    band = sanitize_display([{"role": "weekdays", "padding": "0 1em", "text_align": "sideways"}], week_align="right")[0]
    assert band == BandRole("weekdays", "right", None, "0 1em")
