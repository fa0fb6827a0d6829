from __future__ import annotations
from typing import Any, ClassVar, Iterator, Tuple, cast, Union
from boundednumbers import clamp
from ..types.color_types import ChannelTuple, IntVector, RGBATuple
from ..utils import get_dimension


class ColorRGBA:
    """
    Immutable 8-bit color with an optional alpha channel.

    ``value`` keeps the channels exactly as parsed: three channels when the
    source carried no alpha, four when it did. ``alpha`` reads as fully
    opaque when the channel is absent.
    """
    __slots__ = ('_value', '_is_frozen')  # no new attributes, immutable

    maxima:     ClassVar[int] = 255
    null_value: ClassVar[RGBATuple] = (0, 0, 0, 0)
    ZERO:       ClassVar["ColorRGBA"]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Union[ChannelTuple, IntVector, "ColorRGBA"]) -> None:
        if isinstance(value, ColorRGBA):
            value = value.value

        value_dim = get_dimension(value)
        if value_dim not in (3, 4):
            raise ValueError(f"{self.__class__.__name__} expects 3 or 4 channels, got {value!r}")

        # type enforcement, then clamp into a byte
        channels = tuple(int(v) for v in cast(Tuple[Any, ...], value))
        self._value = cast(ChannelTuple, tuple(clamp(v, 0, self.maxima) for v in channels))

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ChannelTuple:
        return self._value

    @property
    def red(self) -> int:
        return self._value[0]

    @property
    def green(self) -> int:
        return self._value[1]

    @property
    def blue(self) -> int:
        return self._value[2]

    @property
    def has_alpha(self) -> bool:
        """Check if the parsed color carried an alpha channel."""
        return len(self._value) == 4

    @property
    def alpha(self) -> int:
        """Alpha channel, or fully opaque when the color has none."""
        if self.has_alpha:
            return self._value[3]
        return self.maxima

    @property
    def rgba(self) -> RGBATuple:
        return (self.red, self.green, self.blue, self.alpha)

    @property
    def is_black(self) -> bool:
        """True when every stored channel (alpha included) is zero."""
        return not max(self._value)

    def to_hex(self) -> str:
        """Return ``#rrggbb`` or ``#rrggbbaa`` depending on the stored channels."""
        return "#" + "".join(f"{v:02x}" for v in self._value)

    def __iter__(self) -> Iterator[int]:
        return iter(self._value)

    def __len__(self) -> int:
        return len(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorRGBA):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"


ColorRGBA.ZERO = ColorRGBA(ColorRGBA.null_value)
