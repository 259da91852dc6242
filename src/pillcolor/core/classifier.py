"""HSV to color label classification.

Rules are evaluated in order and the first match wins:

1. low saturation and high value  -> White
2. low value                      -> Black
3. low saturation                 -> Gray
4. hue band                       -> Red / Orange / ... / Pink
5. light/dark modifier on the hue name

Rules 1-3 pre-empt the modifier step, so a near-white sample is "White",
never "Light Blue".
"""

import math
from numbers import Real
from typing import Optional

from pillcolor.exceptions import InvalidRangeError
from pillcolor.models import ClassifierThresholds, ColorName, HsvTriple, Shade

DEFAULT_THRESHOLDS = ClassifierThresholds()

# (upper bound exclusive, name); bands start where the previous one ends
HUE_BANDS: tuple[tuple[float, ColorName], ...] = (
    (15, ColorName.RED),
    (45, ColorName.ORANGE),
    (70, ColorName.YELLOW),
    (170, ColorName.GREEN),
    (260, ColorName.BLUE),
    (300, ColorName.PURPLE),
    (345, ColorName.PINK),
    (360, ColorName.RED),  # wraps back to red
)


def _check_range(component: str, value, low: float, high: float, high_inclusive: bool) -> None:
    valid_range = f"[{low:g}, {high:g}{']' if high_inclusive else ')'}"
    if isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value):
        raise InvalidRangeError(component, value, valid_range)
    above = value > high if high_inclusive else value >= high
    if value < low or above:
        raise InvalidRangeError(component, value, valid_range)


def hue_name(h: float) -> ColorName:
    """Return the base hue name for ``h`` in [0, 360)."""
    for upper, name in HUE_BANDS:
        if h < upper:
            return name
    raise InvalidRangeError("h", h, "[0, 360)")


def classify(
    h: float,
    s: float,
    v: float,
    thresholds: Optional[ClassifierThresholds] = None,
) -> str:
    """Classify an HSV triple into a label such as ``"Orange"`` or ``"Light Blue"``.

    Args:
        h: Hue in degrees, [0, 360)
        s: Saturation percentage, [0, 100]
        v: Value percentage, [0, 100]
        thresholds: Cut-offs to use (defaults to ClassifierThresholds())

    Raises:
        InvalidRangeError: If any component is outside its range or not a number.
    """
    _check_range("h", h, 0, 360, high_inclusive=False)
    _check_range("s", s, 0, 100, high_inclusive=True)
    _check_range("v", v, 0, 100, high_inclusive=True)

    t = DEFAULT_THRESHOLDS if thresholds is None else thresholds

    if s < t.achromatic_saturation and v > t.white_value:
        return ColorName.WHITE.value
    if v < t.black_value:
        return ColorName.BLACK.value
    if s < t.achromatic_saturation:
        return ColorName.GRAY.value

    name = hue_name(h)

    if v > t.light_value and s < t.light_saturation:
        return Shade.LIGHT.apply(name)
    if v < t.dark_value:
        return Shade.DARK.apply(name)
    return name.value


def classify_hsv(hsv: HsvTriple, thresholds: Optional[ClassifierThresholds] = None) -> str:
    """Classify an :class:`HsvTriple`."""
    return classify(hsv.h, hsv.s, hsv.v, thresholds)


class HsvClassifier:
    """Classifier bound to one set of thresholds."""

    def __init__(self, thresholds: Optional[ClassifierThresholds] = None):
        self.thresholds = DEFAULT_THRESHOLDS if thresholds is None else thresholds

    def classify(self, h: float, s: float, v: float) -> str:
        return classify(h, s, v, self.thresholds)

    def __call__(self, hsv: HsvTriple) -> str:
        return classify_hsv(hsv, self.thresholds)
