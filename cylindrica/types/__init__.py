from .color_types import (
    IntVector,
    RGBTuple,
    RGBATuple,
    ChannelTuple,
    ColorFormat,
    RampName,
    color_format_of,
)
from .gesture_types import (
    Edge,
    PressKind,
    ReleaseKind,
    Highlight,
    EDGES,
    EDGE_DIRECTIONS,
    RELEASE_FOR_PRESS,
    edge_direction,
)

__all__ = [
    "IntVector",
    "RGBTuple",
    "RGBATuple",
    "ChannelTuple",
    "ColorFormat",
    "RampName",
    "color_format_of",
    "Edge",
    "PressKind",
    "ReleaseKind",
    "Highlight",
    "EDGES",
    "EDGE_DIRECTIONS",
    "RELEASE_FOR_PRESS",
    "edge_direction",
]
