"""Enumerations for color labels."""

from enum import Enum


class ColorName(str, Enum):
    """Base names a color can be classified as."""

    RED = "Red"
    ORANGE = "Orange"
    YELLOW = "Yellow"
    GREEN = "Green"
    BLUE = "Blue"
    PURPLE = "Purple"
    PINK = "Pink"
    WHITE = "White"  # Achromatic, never shaded
    BLACK = "Black"  # Achromatic, never shaded
    GRAY = "Gray"  # Achromatic, never shaded

    @property
    def is_achromatic(self) -> bool:
        return self in (ColorName.WHITE, ColorName.BLACK, ColorName.GRAY)


class Shade(str, Enum):
    """Light/dark modifiers applied to chromatic names."""

    LIGHT = "Light"
    DARK = "Dark"

    def apply(self, name: ColorName) -> str:
        """Prefix a base name, e.g. ``Shade.DARK.apply(ColorName.BLUE) == "Dark Blue"``."""
        return f"{self.value} {name.value}"


# Closed label set: every base name bare, light and dark
COLOR_LABELS: frozenset[str] = frozenset(
    [name.value for name in ColorName]
    + [shade.apply(name) for shade in Shade for name in ColorName]
)
