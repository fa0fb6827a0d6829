"""
One rotating band: sanitized settings, cached gradients and a gesture controller.

Barrel is the host-facing unit. The host feeds it pointer events, reads
``layout()`` and ``gradients`` to draw, and re-renders whenever
``on_change`` fires. Derived values are cached and only recomputed when
the inputs they depend on change.
"""

from __future__ import annotations
from typing import Any, Callable, Optional, Sequence
from ._descriptors import BarrelPropertyDescriptor
from ..carousel import BandSettings, CarouselState, VisibleSlice, layout, sanitize_band
from ..constants import DEFAULT_WIDTH
from ..gradients import GradientRamp, GradientSpec, synthesize
from ..interaction import InteractionController, ReleaseHub, Scheduler, Timing

_GRADIENTS = ("gradients",)
_SETTINGS = ("settings",)
_MEASURED = ("settings", "width")


class Barrel:
    """
    A cylindrical band of cyclically wrapping items.

    Args:
        items: Display strings
        scheduler: Timer source for smooth steps and auto-repeat
        spacing: Item slots per half revolution
        radius: Barrel radius in font-size units
        font_size: CSS length
        base_color, shadow_color, hover_color, press_color: Color strings
        faces: Facets per half cylinder
        sign: -1 makes every step run backwards
        offset: Starting offset
        timing: Press-and-hold tuning
        release_hub: Document-wide release events
        on_change: Called with the new offset whenever it changes
        gradients: Precomputed GradientSpec to share between barrels;
                   replaced as soon as a color or ``faces`` changes
    """

    items = BarrelPropertyDescriptor('items', invalidates=_MEASURED)
    spacing = BarrelPropertyDescriptor('spacing', invalidates=_SETTINGS)
    radius = BarrelPropertyDescriptor('radius', invalidates=_SETTINGS)
    font_size = BarrelPropertyDescriptor('font_size', invalidates=_MEASURED)
    text_align = BarrelPropertyDescriptor('text_align', invalidates=_SETTINGS)
    padding = BarrelPropertyDescriptor('padding', invalidates=_MEASURED)
    width = BarrelPropertyDescriptor('width', invalidates=_SETTINGS)

    base_color = BarrelPropertyDescriptor('base_color', invalidates=_GRADIENTS)
    shadow_color = BarrelPropertyDescriptor('shadow_color', invalidates=_GRADIENTS)
    hover_color = BarrelPropertyDescriptor('hover_color', invalidates=_GRADIENTS)
    press_color = BarrelPropertyDescriptor('press_color', invalidates=_GRADIENTS)
    faces = BarrelPropertyDescriptor('faces', invalidates=_GRADIENTS)

    def __init__(
        self,
        items: Sequence[str],
        scheduler: Scheduler,
        *,
        spacing: Any = None,
        radius: Any = None,
        font_size: Any = None,
        base_color: Optional[str] = None,
        shadow_color: Optional[str] = None,
        hover_color: Optional[str] = None,
        press_color: Optional[str] = None,
        faces: Any = None,
        text_align: Optional[str] = None,
        padding: Optional[str] = None,
        width: Optional[str] = None,
        sign: int = 1,
        offset: float = 0.0,
        timing: Optional[Timing] = None,
        release_hub: Optional[ReleaseHub] = None,
        on_change: Optional[Callable[[float], None]] = None,
        gradients: Optional[GradientSpec] = None,
    ) -> None:
        self._settings: Optional[BandSettings] = None
        self._gradients: Optional[GradientSpec] = None

        self.items = items
        self.spacing = spacing
        self.radius = radius
        self.font_size = font_size
        self.text_align = text_align
        self.padding = padding
        self.width = width
        self.base_color = base_color
        self.shadow_color = shadow_color
        self.hover_color = hover_color
        self.press_color = press_color
        self.faces = faces

        self._gradients = gradients
        self.on_change = on_change
        self.controller = InteractionController(
            scheduler,
            offset=offset,
            timing=timing,
            sign=sign,
            on_change=self._offset_changed,
            release_hub=release_hub,
        )

    # ------------------ CACHES ------------------
    def invalidate_cache(self, *names: str) -> None:
        """Drop derived values; no names drops everything."""
        names = names or ("settings", "gradients")
        if "width" in names:
            # A host-measured width no longer matches the content
            self._width = None
        if "settings" in names:
            self._settings = None
        if "gradients" in names:
            self._gradients = None

    @property
    def settings(self) -> BandSettings:
        if self._settings is None:
            self._settings = sanitize_band(
                self._items,
                self._spacing,
                self._radius,
                self._font_size,
                text_align=self._text_align,
                padding=self._padding,
                width=self._width,
            )
        return self._settings

    @property
    def gradients(self) -> GradientSpec:
        if self._gradients is None:
            self._gradients = synthesize(
                self._base_color,
                self._shadow_color,
                self._hover_color,
                self._press_color,
                self._faces,
            )
        return self._gradients

    @property
    def needs_measure(self) -> bool:
        """True until the host reports a width for the current content."""
        return self.settings.width == DEFAULT_WIDTH

    # ------------------ LAYOUT ------------------
    @property
    def offset(self) -> float:
        return self.controller.offset

    @property
    def busy(self) -> bool:
        return self.controller.busy

    @property
    def state(self) -> CarouselState:
        return self.settings.state(self.controller.offset)

    def layout(self) -> VisibleSlice:
        return layout(self.state)

    @property
    def selected(self) -> str:
        """The item currently facing the viewer."""
        return self.layout().anchor.item

    def highlight(self, edge: str) -> Optional[GradientRamp]:
        """Ramp to draw over the "top" or "bottom" control, None when not hovered."""
        kind = self.controller.highlight(edge)
        if kind is None:
            return None
        hover, press = self.gradients.highlights(edge)
        return press if kind == "press" else hover

    # ------------------ EVENTS ------------------
    def press(self, edge: str, kind: str = "mouse", timestamp: Optional[float] = None) -> bool:
        return self.controller.press(edge, kind, timestamp)

    def release(self) -> bool:
        return self.controller.release()

    def hover_enter(self, edge: str) -> None:
        self.controller.hover_enter(edge)

    def hover_leave(self, edge: str) -> None:
        self.controller.hover_leave(edge)

    def set_offset(self, offset: float) -> bool:
        return self.controller.set_offset(offset)

    def _offset_changed(self, offset: float) -> None:
        if self.on_change is not None:
            self.on_change(offset)

    def __repr__(self) -> str:
        return f"Barrel(items={len(self.settings.items)}, offset={self.offset:.2f})"
