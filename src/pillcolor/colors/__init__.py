"""Reference swatches - one canonical color per label name.

Renderers that show a label next to the sampled color can use these as a
legend. Each swatch classifies back to its own name with the default
thresholds.

Example:
    ```python
    from pillcolor.colors import COLORS, swatch_for

    COLORS.ORANGE              # Color(r=255, g=128, b=0)
    swatch_for("Dark Blue")    # COLORS.BLUE, the modifier is ignored
    ```
"""

from pillcolor.exceptions import ColorInputError
from pillcolor.models import COLOR_LABELS, Color, ColorName, Shade


class COLORS:
    """Standard swatch constants - 8-bit RGB (0-255)."""

    # ============================================================================
    # HUES
    # ============================================================================

    RED: Color = Color(r=255, g=0, b=0)
    """Pure red - hue 0"""

    ORANGE: Color = Color(r=255, g=128, b=0)
    """Orange - hue 30"""

    YELLOW: Color = Color(r=255, g=255, b=0)
    """Pure yellow - hue 60"""

    GREEN: Color = Color(r=0, g=255, b=0)
    """Pure green - hue 120"""

    BLUE: Color = Color(r=0, g=0, b=255)
    """Pure blue - hue 240"""

    PURPLE: Color = Color(r=128, g=0, b=255)
    """Purple - hue 270"""

    PINK: Color = Color(r=255, g=0, b=128)
    """Pink - hue 330"""

    # ============================================================================
    # ACHROMATIC
    # ============================================================================

    WHITE: Color = Color(r=255, g=255, b=255)
    """Pure white"""

    BLACK: Color = Color(r=0, g=0, b=0)
    """Black"""

    GRAY: Color = Color(r=128, g=128, b=128)
    """Mid gray - 50% brightness"""


SWATCHES: dict[ColorName, Color] = {name: getattr(COLORS, name.name) for name in ColorName}


def base_name(label: str) -> ColorName:
    """Strip a Light/Dark modifier from a label and return its base name."""
    if label not in COLOR_LABELS:
        raise ColorInputError(
            user_message=f"Unknown color label: {label!r}",
            recovery_hint="Run 'pillcolor labels' to list valid labels",
        )
    for shade in Shade:
        prefix = f"{shade.value} "
        if label.startswith(prefix):
            label = label[len(prefix):]
    return ColorName(label)


def swatch_for(label: str) -> Color:
    """Return the reference swatch for a label."""
    return SWATCHES[base_name(label)]


__all__ = ["COLORS", "SWATCHES", "base_name", "swatch_for"]
