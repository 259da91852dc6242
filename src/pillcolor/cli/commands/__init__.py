"""CLI commands for pillcolor."""

from .color import classify_command, hsv, labels, name_colors
from .config import config_group

__all__ = ["classify_command", "config_group", "hsv", "labels", "name_colors"]
