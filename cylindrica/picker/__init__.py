"""
Picker assembly: barrels with cached settings and gradients, and a
weekday / hour / minute time picker built from them.

Example:
    >>> from cylindrica.interaction import ManualScheduler
    >>> from datetime import date
    >>> picker = TimePicker(ManualScheduler(), today=date(2024, 1, 1))
    >>> picker.values()
    {'weekdays': 'Mon', 'hours': '00', 'minutes': '00'}
"""

from .barrel import Barrel
from .content import hours, minutes, weekdays_from, valid_minute_interval
from .display import BandRole, sanitize_display
from .time_picker import TimePicker
from ._descriptors import BarrelPropertyDescriptor

__all__ = [
    "Barrel",
    "TimePicker",
    "BandRole",
    "sanitize_display",
    "hours",
    "minutes",
    "weekdays_from",
    "valid_minute_interval",
    "BarrelPropertyDescriptor",
]
