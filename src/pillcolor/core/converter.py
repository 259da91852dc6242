"""Hex to HSV conversion.

In the red sector the remainder keeps the sign of the dividend, so the
hue is rounded once (halves toward +infinity) and only then wrapped into
[0, 360). Rounding after wrapping could produce 360.
"""

import math

from pillcolor.models import Color, HsvTriple


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def rgb_to_hsv(color: Color) -> HsvTriple:
    """Decompose an sRGB color into hue degrees and S/V percentages."""
    r, g, b = color.to_unit_rgb()

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    h = 0
    if delta != 0:
        if max_c == r:
            sector = math.fmod((g - b) / delta, 6)
        elif max_c == g:
            sector = (b - r) / delta + 2
        else:
            sector = (r - g) / delta + 4
        h = _round_half_up(sector * 60)
        if h < 0:
            h += 360

    s = 0.0 if max_c == 0 else delta / max_c
    return HsvTriple(h=h, s=s * 100, v=max_c * 100)


def hex_to_hsv(value: str) -> HsvTriple:
    """Convert a hex color such as ``"#C2894E"`` or ``"c2894e"`` to HSV.

    Raises:
        MalformedColorError: If ``value`` is not six hex digits after an
            optional leading '#'.
    """
    return rgb_to_hsv(Color.from_hex(value))


class HexToHsvConverter:
    """Callable wrapper around :func:`hex_to_hsv` for injection into pipelines."""

    def convert(self, value: str) -> HsvTriple:
        return hex_to_hsv(value)

    __call__ = convert
