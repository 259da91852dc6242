"""Color engine: hex -> HSV -> label."""

from .classifier import HUE_BANDS, HsvClassifier, classify, classify_hsv, hue_name
from .converter import HexToHsvConverter, hex_to_hsv, rgb_to_hsv
from .naming import describe_hex, describe_many, name_hex

__all__ = [
    "HUE_BANDS",
    "HexToHsvConverter",
    "HsvClassifier",
    "classify",
    "classify_hsv",
    "describe_hex",
    "describe_many",
    "hex_to_hsv",
    "hue_name",
    "name_hex",
    "rgb_to_hsv",
]
