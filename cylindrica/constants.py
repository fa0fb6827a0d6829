"""Documented defaults and tuned constants shared across cylindrica."""

import math

# ---- colors ----
# Channel maxima used when a color input is missing or degenerate.
# Hover and press maxima exceed a byte on purpose: sampled channels are
# clamped, which gives bright placeholder highlights.
DEFAULT_BASE = (128, 128, 128)
DEFAULT_SHADOW = (0, 0, 0, 255)
DEFAULT_HOVER = (512, 512, 512, 512)
DEFAULT_PRESS = (666, 666, 666, 444)
BYTE_MAX = 255

# ---- faces ----
MIN_FACES = 2
MAX_FACES = 20
DEFAULT_FACES = 2
HIGHLIGHT_FACE_DIVISOR = 4

# ---- ramps ----
RAMP_TERMINATOR = "#000000"
SHADOW_TERMINATOR = "#000000ff"
FORWARD_ANGLE = 0
REVERSE_ANGLE = 180

# ---- band ----
DEFAULT_SPACING = 8.5
PLACEHOLDER_SPACING = 6
MIN_SPACING = 3
SINGLE_ITEM_SPACING = 2
DEFAULT_RADIUS = 1.5
MIN_RADIUS = 1
DEFAULT_FONT_SIZE = "1em"
DEFAULT_WIDTH = "auto"
PLACEHOLDER_ITEMS = ("items", "array", "of", "strings", "- missing -")
CSS_LENGTH_UNITS = (
    "cm", "mm", "in", "pc", "pt", "px", "em", "ex", "ch", "rem", "vw", "vh", "vmin", "vmax",
)

# ---- window ----
TAU = 2 * math.pi
# Empirical: scaling the sub-item phase by 6.3 / spacing keeps a position
# from repeating when the anchor index changes. Do not "fix".
PHASE_SCALE = 6.3

# ---- timing (seconds) ----
AUTO_START = 1.0
ANIMATION = AUTO_START * 0.8
START_RATE = 0.5
MIN_DELAY = 0.1
REDUCE_BY = 0.8
SUB_STEPS = 20

# ---- ambient rotation ----
AMBIENT_STEP = 0.1
AMBIENT_INTERVAL = 0.1

# ---- display ----
DEFAULT_DISPLAY = ("weekdays", "hours", "minutes")
DEFAULT_EVERY_N_MINUTES = 1
DEFAULT_WEEK_ALIGN = "center"
ALIGNMENTS = ("left", "right", "center")
ROLE_ALIGNMENTS = {
    "hours": "right",
    "minutes": "left",
}
ROLE_SIGNS = {
    "weekdays": 1,
    "hours": -1,
    "minutes": 1,
}
DISPLAY_KEYS = ("role", "text_align", "every_n_minutes", "padding")
WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
