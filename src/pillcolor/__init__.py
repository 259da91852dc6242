"""pillcolor: name the dominant color of a pill photo sample."""

__version__ = "0.1.0"

from .core import classify, describe_hex, describe_many, hex_to_hsv, name_hex
from .models import COLOR_LABELS, ClassifierThresholds, ColorReading, HsvTriple

__all__ = [
    "COLOR_LABELS",
    "ClassifierThresholds",
    "ColorReading",
    "HsvTriple",
    "classify",
    "describe_hex",
    "describe_many",
    "hex_to_hsv",
    "name_hex",
]
