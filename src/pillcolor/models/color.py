"""Color models: sRGB samples and their HSV decomposition."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from pillcolor.exceptions import MalformedColorError

_HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{6})")


class Color(BaseModel):
    """Standard 8-bit sRGB color model.

    The model is frozen so samples are hashable and can be used as dict keys.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def from_hex(cls, value: Any) -> "Color":
        """Parse a six-digit hex string, with or without a leading '#'.

        Raises:
            MalformedColorError: If the value is not a string of exactly six
                hex digits after stripping one optional '#'.

        Example:
            >>> Color.from_hex("#c2894e")
            Color(r=194, g=137, b=78)
        """
        if not isinstance(value, str):
            raise MalformedColorError(value, f"expected str, got {type(value).__name__}")

        match = _HEX_PATTERN.fullmatch(value)
        if match is None:
            raise MalformedColorError(value)

        digits = match.group(1)
        return cls(
            r=int(digits[0:2], 16),
            g=int(digits[2:4], 16),
            b=int(digits[4:6], 16),
        )

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_unit_rgb(self) -> tuple[float, float, float]:
        """Convert to channels normalized to [0, 1]."""
        return (self.r / 255, self.g / 255, self.b / 255)

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000').

        Example:
            >>> Color(r=255, g=0, b=0).to_hex()
            '#FF0000'
        """
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


class HsvTriple(BaseModel):
    """Hue/Saturation/Value decomposition of a color.

    Hue is a whole number of degrees; saturation and value are unrounded
    percentages.
    """

    model_config = ConfigDict(frozen=True)

    h: int = Field(ge=0, lt=360, description="Hue in degrees [0, 360)")
    s: float = Field(ge=0, le=100, description="Saturation percentage [0, 100]")
    v: float = Field(ge=0, le=100, description="Value (brightness) percentage [0, 100]")

    def as_tuple(self) -> tuple[int, float, float]:
        """Return (h, s, v)."""
        return (self.h, self.s, self.v)
