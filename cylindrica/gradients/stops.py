from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class GradientStop:
    """One color stop: ``#rrggbb``/``#rrggbbaa`` at ``percent`` along the ramp."""
    color: str
    percent: float

    def to_css(self) -> str:
        return f"{self.color} {self.percent:.1f}%"


@dataclass(frozen=True)
class GradientRamp:
    """
    Ordered color stops describing a one-dimensional shading ramp.

    Attributes:
        stops: Stops from 0% towards 100%, always ending with a 100% stop
        angle: Direction of the ramp in degrees (0 = bottom to top, 180 = top to bottom)
    """
    stops: Tuple[GradientStop, ...]
    angle: int = 0

    def __iter__(self) -> Iterator[GradientStop]:
        return iter(self.stops)

    def __len__(self) -> int:
        return len(self.stops)

    @property
    def colors(self) -> Tuple[str, ...]:
        return tuple(stop.color for stop in self.stops)

    @property
    def percents(self) -> Tuple[float, ...]:
        return tuple(stop.percent for stop in self.stops)

    def to_css(self) -> str:
        """Render as ``linear-gradient(<angle>deg, <color> <percent>%, ...)``."""
        stops = ", ".join(stop.to_css() for stop in self.stops)
        return f"linear-gradient({self.angle}deg, {stops})"
