"""Color input exceptions.

This module defines exceptions for bad input to the color engine:
- ColorInputError: Base class for color input errors
- MalformedColorError: Hex string is not six hex digits
- InvalidRangeError: HSV component outside its documented range
"""

from typing import Any

from .base import PillColorError


class ColorInputError(PillColorError):
    """Input to the color engine is structurally or numerically invalid."""
    pass


class MalformedColorError(ColorInputError):
    """Hex color string is not exactly six hexadecimal digits."""

    def __init__(self, value: Any, reason: str = "expected 6 hex digits"):
        """
        Initialize malformed color error.

        Args:
            value: The rejected input
            reason: Why the input was rejected
        """
        super().__init__(
            user_message=f"Color detection failed: {value!r} is not a hex color",
            technical_message=f"Malformed hex color {value!r}: {reason}",
            recovery_hint="Use six hex digits with an optional '#', e.g. '#C2894E'",
        )
        self.value = value
        self.reason = reason


class InvalidRangeError(ColorInputError):
    """An HSV component is outside its documented range."""

    def __init__(self, component: str, value: Any, valid_range: str):
        """
        Initialize invalid range error.

        Args:
            component: Which component failed ('h', 's' or 'v')
            value: The rejected value
            valid_range: Human-readable description of the valid range
        """
        super().__init__(
            user_message=f"Invalid {component} value {value!r}: must be in {valid_range}",
            technical_message=f"HSV component {component}={value!r} outside {valid_range}",
            recovery_hint="Hue is in degrees [0, 360); saturation and value are percentages [0, 100]",
        )
        self.component = component
        self.value = value
        self.valid_range = valid_range
