"""Data models for pillcolor."""

from .color import Color, HsvTriple
from .config import DEFAULT_CONFIG_PATH, AppConfig, ClassifierThresholds
from .enums import COLOR_LABELS, ColorName, Shade
from .reading import ColorReading

__all__ = [
    "AppConfig",
    "ClassifierThresholds",
    "DEFAULT_CONFIG_PATH",
    # Models
    "Color",
    "ColorReading",
    "HsvTriple",
    # Enums
    "COLOR_LABELS",
    "ColorName",
    "Shade",
]
