"""Cylindrica: rotating-barrel pickers with cylinder shading and press-and-hold scrolling."""

from .colors import ColorRGBA, parse_color
from .gradients import GradientStop, GradientRamp, GradientSpec, synthesize, sanitize_faces
from .carousel import (
    CarouselState,
    VisibleEntry,
    VisibleSlice,
    BandSettings,
    layout,
    normalize_offset,
    sanitize_band,
)
from .interaction import (
    Timing,
    ManualScheduler,
    ReleaseHub,
    InteractionController,
    AmbientRotation,
)
from .picker import Barrel, TimePicker, BandRole, sanitize_display, hours, minutes, weekdays_from
from .diagnostics import CylindricaWarning

__version__ = "0.1.0"

__all__ = [
    # colors
    "ColorRGBA",
    "parse_color",
    # gradients
    "GradientStop",
    "GradientRamp",
    "GradientSpec",
    "synthesize",
    "sanitize_faces",
    # carousel
    "CarouselState",
    "VisibleEntry",
    "VisibleSlice",
    "BandSettings",
    "layout",
    "normalize_offset",
    "sanitize_band",
    # interaction
    "Timing",
    "ManualScheduler",
    "ReleaseHub",
    "InteractionController",
    "AmbientRotation",
    # picker
    "Barrel",
    "TimePicker",
    "BandRole",
    "sanitize_display",
    "hours",
    "minutes",
    "weekdays_from",
    # diagnostics
    "CylindricaWarning",
]
