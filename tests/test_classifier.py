"""Unit tests for HSV classification."""

import itertools
import math

import pytest

from pillcolor.core import HsvClassifier, classify, classify_hsv, hue_name
from pillcolor.exceptions import InvalidRangeError
from pillcolor.models import COLOR_LABELS, ClassifierThresholds, ColorName, HsvTriple


class TestAchromaticRules:
    """White, Black and Gray are decided before the hue is looked at."""

    @pytest.mark.unit
    def test_white(self):
        assert classify(0, 10, 90) == "White"

    @pytest.mark.unit
    def test_black(self):
        assert classify(120, 100, 10) == "Black"

    @pytest.mark.unit
    def test_gray(self):
        assert classify(0, 0, 50) == "Gray"

    @pytest.mark.unit
    def test_white_beats_light_modifier(self):
        """s=15, v=85 also satisfies the Light modifier but must be White."""
        assert classify(200, 15, 85) == "White"

    @pytest.mark.unit
    def test_black_beats_gray(self):
        assert classify(0, 5, 10) == "Black"

    @pytest.mark.unit
    def test_value_exactly_80_is_not_white(self):
        assert classify(0, 10, 80) == "Gray"

    @pytest.mark.unit
    def test_value_exactly_20_is_not_black(self):
        assert classify(0, 10, 20) == "Gray"

    @pytest.mark.unit
    def test_saturation_exactly_20_is_chromatic(self):
        assert classify(0, 20, 90) == "Light Red"


class TestHueBands:
    """Half-open hue intervals, with no modifier (s=100, v=70)."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "h, expected",
        [
            (0, "Red"),
            (14.999, "Red"),
            (15, "Orange"),
            (44.999, "Orange"),
            (45, "Yellow"),
            (69.999, "Yellow"),
            (70, "Green"),
            (169.999, "Green"),
            (170, "Blue"),
            (259.999, "Blue"),
            (260, "Purple"),
            (299.999, "Purple"),
            (300, "Pink"),
            (344.999, "Pink"),
            (345, "Red"),
            (359.999, "Red"),
        ],
    )
    def test_band_edges(self, h, expected):
        assert classify(h, 100, 70) == expected

    @pytest.mark.unit
    def test_wrap_around_is_capitalized(self):
        assert hue_name(350) is ColorName.RED
        assert classify(350, 100, 70) == "Red"


class TestModifiers:
    """Light/Dark prefixes on chromatic names."""

    @pytest.mark.unit
    def test_light(self):
        assert classify(120, 40, 90) == "Light Green"

    @pytest.mark.unit
    def test_high_value_but_saturated_is_plain(self):
        assert classify(120, 60, 90) == "Green"

    @pytest.mark.unit
    def test_dark(self):
        assert classify(240, 100, 30) == "Dark Blue"

    @pytest.mark.unit
    def test_dark_at_black_boundary(self):
        assert classify(240, 100, 20) == "Dark Blue"

    @pytest.mark.unit
    def test_value_exactly_40_is_plain(self):
        assert classify(240, 100, 40) == "Blue"

    @pytest.mark.unit
    def test_mid_range_has_no_modifier(self):
        assert classify(31, 59.79, 76.08) == "Orange"


class TestRangeContract:
    """Out-of-range components raise instead of being clamped."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "h, s, v, component",
        [
            (360, 50, 50, "h"),
            (-1, 50, 50, "h"),
            (0, 100.01, 50, "s"),
            (0, -0.1, 50, "s"),
            (0, 50, 101, "v"),
            (0, 50, -5, "v"),
            (math.nan, 50, 50, "h"),
            (0, math.inf, 50, "s"),
            ("10", 50, 50, "h"),
            (0, None, 50, "s"),
            (0, 50, True, "v"),
        ],
    )
    def test_rejected(self, h, s, v, component):
        with pytest.raises(InvalidRangeError) as exc_info:
            classify(h, s, v)
        assert exc_info.value.component == component

    @pytest.mark.unit
    def test_inclusive_upper_bounds(self):
        assert classify(359.999, 100, 100) == "Red"
        assert classify(0, 0, 100) == "White"

    @pytest.mark.unit
    def test_error_message(self):
        with pytest.raises(InvalidRangeError) as exc_info:
            classify(400, 50, 50)
        assert "[0, 360)" in exc_info.value.user_message
        assert exc_info.value.recovery_hint is not None


class TestThresholds:
    """Cut-offs come from ClassifierThresholds."""

    @pytest.mark.unit
    def test_defaults_match_builtin_rules(self):
        grid = itertools.product(range(0, 360, 15), range(0, 101, 10), range(0, 101, 10))
        thresholds = ClassifierThresholds()
        for h, s, v in grid:
            assert classify(h, s, v) == classify(h, s, v, thresholds)

    @pytest.mark.unit
    def test_custom_white_value(self):
        thresholds = ClassifierThresholds(white_value=90)
        assert classify(0, 10, 85) == "White"
        assert classify(0, 10, 85, thresholds) == "Gray"

    @pytest.mark.unit
    def test_bound_classifier(self):
        classifier = HsvClassifier(ClassifierThresholds(dark_value=50))
        assert classifier.classify(240, 100, 45) == "Dark Blue"
        assert classifier(HsvTriple(h=240, s=100, v=45)) == "Dark Blue"
        assert HsvClassifier().classify(240, 100, 45) == "Blue"


class TestClosedLabelSet:

    @pytest.mark.unit
    def test_every_output_is_a_known_label(self):
        seen = set()
        grid = itertools.product(range(0, 360, 5), range(0, 101, 5), range(0, 101, 5))
        for h, s, v in grid:
            label = classify(h, s, v)
            assert label in COLOR_LABELS
            seen.add(label)
        assert not {"Light White", "Dark Black", "Dark Gray"} & seen

    @pytest.mark.unit
    def test_classify_hsv(self):
        assert classify_hsv(HsvTriple(h=0, s=0, v=0)) == "Black"
