"""Property descriptors for barrel settings."""

from __future__ import annotations
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from typing import Any


class BarrelPropertyDescriptor:
    """Descriptor for barrel settings that drop derived caches when set.

    Args:
        attr_name: Name of the attribute (stored as _{attr_name})
        invalidates: Names of the caches to drop on set, passed to
                     ``obj.invalidate_cache(*names)``
        readonly: If True, raises AttributeError on set attempts

    Example:
        class Barrel:
            # Changing a color re-synthesizes the gradients
            base_color = BarrelPropertyDescriptor('base_color', invalidates=('gradients',))

            # Changing the items re-sanitizes and forgets the measured width
            items = BarrelPropertyDescriptor('items', invalidates=('settings', 'width'))
    """

    def __init__(
        self,
        attr_name: str,
        *,
        invalidates: Tuple[str, ...] = (),
        readonly: bool = False,
    ):
        self.attr_name = attr_name
        self.private_name = f"_{attr_name}"
        self.invalidates = tuple(invalidates)
        self.readonly = readonly
        self.public_name: str = attr_name  # May be overwritten by __set_name__

    def __set_name__(self, owner: type, name: str) -> None:
        self.public_name = name

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return getattr(obj, self.private_name)

    def __set__(self, obj: Any, value: Any) -> None:
        if self.readonly:
            raise AttributeError(
                f"'{self.public_name}' is read-only on {obj.__class__.__name__}"
            )

        unchanged = getattr(obj, self.private_name, object()) == value
        setattr(obj, self.private_name, value)

        if unchanged or not self.invalidates:
            return
        if hasattr(obj, 'invalidate_cache'):
            obj.invalidate_cache(*self.invalidates)

    def __repr__(self) -> str:
        if self.readonly:
            flags_str = "readonly"
        elif self.invalidates:
            flags_str = "invalidates " + ", ".join(self.invalidates)
        else:
            flags_str = "writable"
        return f"BarrelPropertyDescriptor({self.attr_name!r}, {flags_str})"
