"""Which bands a time picker shows, and how each is aligned."""

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple
from .content import valid_minute_interval
from ..constants import (
    ALIGNMENTS,
    DEFAULT_DISPLAY,
    DEFAULT_EVERY_N_MINUTES,
    DEFAULT_WEEK_ALIGN,
    DISPLAY_KEYS,
    ROLE_ALIGNMENTS,
    ROLE_SIGNS,
)
from ..diagnostics import default_notice


@dataclass(frozen=True)
class BandRole:
    """
    One band of a time picker.

    Attributes:
        role: "weekdays", "hours" or "minutes"
        text_align: "left", "right" or "center"
        every_n_minutes: Minute interval, minutes band only
        padding: CSS padding passed to the renderer
    """
    role: str
    text_align: Optional[str] = None
    every_n_minutes: Optional[int] = None
    padding: Optional[str] = None

    @property
    def sign(self) -> int:
        """Direction of ambient rotation; the hours band turns backwards."""
        return ROLE_SIGNS[self.role]


def _alignment(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.lower() in ALIGNMENTS:
        return value.lower()
    return None


def _as_entry(item: Any) -> Optional[dict]:
    if isinstance(item, str):
        role = item.lower()
        return {"role": role} if role in DEFAULT_DISPLAY else None
    if isinstance(item, Mapping):
        return {key: value for key, value in item.items() if key in DISPLAY_KEYS}
    return None


def _band_role(entry: dict, week_align: Optional[str], every_n: Optional[int]) -> Optional[BandRole]:
    role = entry.get("role")
    if role not in DEFAULT_DISPLAY:
        return None

    text_align = _alignment(entry.get("text_align"))
    interval = None

    if role == "minutes":
        interval = valid_minute_interval(entry.get("every_n_minutes")) or every_n
        if interval is None:
            if entry.get("every_n_minutes") is not None:
                default_notice("TimePicker", "every_n_minutes", DEFAULT_EVERY_N_MINUTES)
            interval = DEFAULT_EVERY_N_MINUTES

    if text_align is None:
        if role == "weekdays":
            text_align = week_align or DEFAULT_WEEK_ALIGN
        else:
            text_align = ROLE_ALIGNMENTS[role]

    return BandRole(role, text_align, interval, entry.get("padding"))


def sanitize_display(
    display: Any = None,
    week_align: Any = None,
    every_n_minutes: Any = None,
) -> Tuple[BandRole, ...]:
    """
    Normalize a display description into BandRoles.

    Args:
        display: Sequence of role names ("weekdays", "hours", "minutes") or
                 mappings with a "role" key plus optional "text_align",
                 "every_n_minutes" and "padding". Unknown roles and keys are dropped.
        week_align: Default alignment for the weekdays band
        every_n_minutes: Default minute interval for the minutes band

    Returns:
        At least one BandRole; the default three bands when nothing usable remains.
    """
    if isinstance(display, (str, bytes)) or not isinstance(display, (list, tuple)):
        display = DEFAULT_DISPLAY

    align = _alignment(week_align)
    interval = valid_minute_interval(every_n_minutes)

    roles: List[BandRole] = []
    for item in display:
        entry = _as_entry(item)
        if entry is None:
            continue
        band = _band_role(entry, align, interval)
        if band is not None:
            roles.append(band)

    if not roles:
        return sanitize_display(DEFAULT_DISPLAY, week_align, every_n_minutes)
    return tuple(roles)
