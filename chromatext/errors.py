"""Exceptions raised by chromatext.

Every error is a ``ValueError`` as well as a ``ChromatextError`` so callers can
catch either. All of them signal invalid input and are raised synchronously at
the point where that input is seen.
"""


class ChromatextError(ValueError):
    """Base class for all chromatext errors."""


class ConfigValidationError(ChromatextError):
    """A gradient configuration violates one of its invariants."""


class ColorParseError(ChromatextError):
    """A color string or component could not be turned into a color."""

    def __init__(self, value, reason: str = "Unrecognized color format") -> None:
        self.value = value
        super().__init__(f"{reason}: {value!r}")


class InvalidPaletteError(ChromatextError):
    """The sampler was given a palette it cannot sample from."""


__all__ = [
    "ChromatextError",
    "ConfigValidationError",
    "ColorParseError",
    "InvalidPaletteError",
]
