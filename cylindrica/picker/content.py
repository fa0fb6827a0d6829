"""Contents of the standard time picker bands."""

from __future__ import annotations
from datetime import date
from typing import Any, Optional, Sequence, Tuple
from ..constants import DEFAULT_EVERY_N_MINUTES, WEEKDAY_NAMES
from ..diagnostics import default_notice, notice
from ..utils import as_real, is_close_to_int


def hours() -> Tuple[str, ...]:
    """``("00", "01", ..., "23")``"""
    return tuple(f"{hour:02d}" for hour in range(24))


def valid_minute_interval(every_n: Any) -> Optional[int]:
    """Return ``every_n`` as an int when it is a positive whole divisor of 60, else None."""
    number = as_real(every_n)
    if number is None or not 0 < number <= 60 or not is_close_to_int(number):
        return None
    number = round(number)
    if 60 % number:
        return None
    return number


def minutes(every_n: Any = DEFAULT_EVERY_N_MINUTES) -> Tuple[str, ...]:
    """
    Zero-padded minutes at ``every_n``-minute intervals: ``minutes(15) == ("00", "15", "30", "45")``.

    ``every_n`` must divide 60; anything else falls back to one-minute steps.
    """
    interval = valid_minute_interval(every_n)
    if interval is None:
        default_notice("TimePicker", "every_n_minutes", DEFAULT_EVERY_N_MINUTES)
        interval = DEFAULT_EVERY_N_MINUTES
    return tuple(f"{minute:02d}" for minute in range(0, 60, interval))


def weekdays_from(start: Optional[date] = None, names: Optional[Sequence[str]] = None) -> Tuple[str, ...]:
    """
    Weekday names starting with ``start``'s weekday (today by default).

    Args:
        start: Date whose weekday comes first
        names: Seven names, Monday first. Localized names are the host's
               business; short English names are used otherwise.
    """
    start = start or date.today()
    if names is None:
        names = WEEKDAY_NAMES
    elif len(names) != 7:
        notice("TimePicker", f"expected 7 weekday names, got {len(names)}; using defaults")
        names = WEEKDAY_NAMES
    first = start.weekday()
    return tuple(names[(first + index) % 7] for index in range(7))
