"""
A clock-style picker: weekday, hour and minute barrels side by side.

All barrels share one gradient spec and one release hub. With ambient
rotation on, idle barrels keep turning slowly; the hours barrel turns
the other way.
"""

from __future__ import annotations
from datetime import date
from typing import Any, Callable, Dict, Optional, Sequence, Tuple
from .barrel import Barrel
from .content import hours, minutes, weekdays_from
from .display import BandRole, sanitize_display
from ..carousel import VisibleSlice
from ..gradients import GradientSpec, synthesize
from ..interaction import AmbientRotation, ReleaseHub, Scheduler, Timing
from ..utils import value_or_default


class TimePicker:
    """
    Args:
        scheduler: Timer source shared by every barrel
        display: Bands to show; see ``sanitize_display``
        week_align: Alignment of the weekdays band
        every_n_minutes: Minute interval of the minutes band
        today: First weekday shown (today by default)
        weekday_names: Seven names, Monday first
        base_color, shadow_color, hover_color, press_color, faces: Shading, shared by all barrels
        spacing, radius, font_size: Geometry, shared by all barrels
        timing: Press-and-hold tuning
        ambient: Start idle rotation right away
        on_change: Called with ``(role, offset)`` whenever a barrel moves
    """

    def __init__(
        self,
        scheduler: Scheduler,
        *,
        display: Any = None,
        week_align: Any = None,
        every_n_minutes: Any = None,
        today: Optional[date] = None,
        weekday_names: Optional[Sequence[str]] = None,
        base_color: Optional[str] = None,
        shadow_color: Optional[str] = None,
        hover_color: Optional[str] = None,
        press_color: Optional[str] = None,
        faces: Any = None,
        spacing: Any = None,
        radius: Any = None,
        font_size: Any = None,
        timing: Optional[Timing] = None,
        release_hub: Optional[ReleaseHub] = None,
        ambient: bool = False,
        on_change: Optional[Callable[[str, float], None]] = None,
    ) -> None:
        self.roles: Tuple[BandRole, ...] = sanitize_display(display, week_align, every_n_minutes)
        self.release_hub = value_or_default(release_hub, ReleaseHub())
        self.on_change = on_change
        self.gradients: GradientSpec = synthesize(
            base_color, shadow_color, hover_color, press_color, faces
        )

        self.barrels: Dict[str, Barrel] = {}
        for band in self.roles:
            self.barrels[band.role] = Barrel(
                self._contents(band, today, weekday_names),
                scheduler,
                spacing=spacing,
                radius=radius,
                font_size=font_size,
                base_color=base_color,
                shadow_color=shadow_color,
                hover_color=hover_color,
                press_color=press_color,
                faces=faces,
                text_align=band.text_align,
                padding=band.padding,
                timing=timing,
                release_hub=self.release_hub,
                on_change=self._forward(band.role),
                gradients=self.gradients,
            )

        self.rotation = AmbientRotation(scheduler, self._rotate)
        if ambient:
            self.rotation.start()

    @staticmethod
    def _contents(band: BandRole, today: Optional[date], names: Optional[Sequence[str]]) -> Tuple[str, ...]:
        if band.role == "weekdays":
            return weekdays_from(today, names)
        if band.role == "hours":
            return hours()
        return minutes(band.every_n_minutes)

    def _forward(self, role: str) -> Callable[[float], None]:
        def changed(offset: float) -> None:
            if self.on_change is not None:
                self.on_change(role, offset)
        return changed

    def _rotate(self, _: float) -> None:
        # Barrels under a gesture keep their own offset
        for band in self.roles:
            barrel = self.barrels[band.role]
            if not barrel.busy:
                barrel.set_offset(barrel.offset + self.rotation.step * band.sign)

    # ------------------ ACCESS ------------------
    def __getitem__(self, role: str) -> Barrel:
        return self.barrels[role]

    def __iter__(self):
        return iter(self.barrels.values())

    def __len__(self) -> int:
        return len(self.barrels)

    def layouts(self) -> Dict[str, VisibleSlice]:
        return {role: barrel.layout() for role, barrel in self.barrels.items()}

    def values(self) -> Dict[str, str]:
        """The item each barrel currently shows, by role."""
        return {role: barrel.selected for role, barrel in self.barrels.items()}

    def start(self) -> None:
        self.rotation.start()

    def stop(self) -> None:
        """Stop ambient rotation and drop every running gesture."""
        self.rotation.stop()
        for barrel in self.barrels.values():
            barrel.controller.cancel()

    def __repr__(self) -> str:
        return f"TimePicker(roles={[band.role for band in self.roles]})"
