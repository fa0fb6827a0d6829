"""
Diagnostic notices for recovered input.

Every substitution of a documented default (degenerate color, missing
items, out-of-range spacing, ...) is reported as a ``CylindricaWarning``.
Notices never change control flow; hosts decide whether to show them:

>>> import warnings
>>> from cylindrica.diagnostics import CylindricaWarning
>>> warnings.simplefilter("ignore", CylindricaWarning)
"""

import warnings


class CylindricaWarning(UserWarning):
    """A default value was substituted for degenerate input."""


def notice(component: str, message: str, *, stacklevel: int = 3) -> None:
    """Emit ``"<component>: <message>"`` as a CylindricaWarning."""
    warnings.warn(f"{component}: {message}", CylindricaWarning, stacklevel=stacklevel)


def default_notice(component: str, what: str, value: object, *, stacklevel: int = 4) -> None:
    """Emit the standard ``"<component>: <what> set by default to <value>"`` notice."""
    notice(component, f"{what} set by default to {value!r}", stacklevel=stacklevel)
