from __future__ import annotations
from typing import Literal, Tuple, Union

IntVector = Tuple[int, ...]
RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, int]
ChannelTuple = Union[RGBTuple, RGBATuple]
ColorFormat = Literal["hex", "rgb", "hsl"]
RampName = Literal["barrel", "shadow", "top_hover", "top_press", "bottom_hover", "bottom_press"]


def color_format_of(color_string: str) -> ColorFormat:
    """
    Detect the textual format of a color string from its first three characters.

    Args:
        color_string: Any color string ("#rrggbb", "rgb(...)", "hsl(...)", ...)
    Returns:
        "rgb", "hsl", or "hex" for everything else
    """
    prefix = color_string[:3].lower()
    if prefix == "rgb":
        return "rgb"
    if prefix == "hsl":
        return "hsl"
    return "hex"
