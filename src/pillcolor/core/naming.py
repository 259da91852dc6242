"""Hex sample to color name: conversion and classification in sequence."""

import logging
from collections.abc import Iterable
from typing import Optional

from pillcolor.exceptions import ErrorCollector, MalformedColorError, collect_errors
from pillcolor.models import ClassifierThresholds, Color, ColorReading

from .classifier import classify_hsv
from .converter import rgb_to_hsv

logger = logging.getLogger(__name__)


def describe_hex(value: str, thresholds: Optional[ClassifierThresholds] = None) -> ColorReading:
    """Convert and classify one hex sample.

    Raises:
        MalformedColorError: If ``value`` is not a hex color.
    """
    color = Color.from_hex(value)
    hsv = rgb_to_hsv(color)
    label = classify_hsv(hsv, thresholds)
    logger.debug(f"{value!r} -> h={hsv.h} s={hsv.s:.2f} v={hsv.v:.2f} -> {label}")
    return ColorReading(hex=color.to_hex(), hsv=hsv, label=label)


def name_hex(value: str, thresholds: Optional[ClassifierThresholds] = None) -> str:
    """Return the color label for a hex sample, e.g. ``name_hex("#C2894E") == "Orange"``."""
    return describe_hex(value, thresholds).label


def describe_many(
    values: Iterable[str],
    thresholds: Optional[ClassifierThresholds] = None,
) -> tuple[list[ColorReading], ErrorCollector]:
    """Name a batch of samples without stopping at the first malformed one.

    Args:
        values: Hex strings. A single ``str`` is not a batch and is rejected.

    Returns:
        The readings for every valid sample (input order) and the collector
        holding one error per rejected sample.

    Raises:
        MalformedColorError: If ``values`` is a single string.
    """
    if isinstance(values, str):
        raise MalformedColorError(values, "expected a sequence of hex strings, got a single str")

    collector = collect_errors("detect color")
    readings: list[ColorReading] = []

    for value in values:
        with collector.try_operation(repr(value)):
            readings.append(describe_hex(value, thresholds))

    logger.info(f"Named {collector.success_count} samples, rejected {collector.error_count}")
    return readings, collector
