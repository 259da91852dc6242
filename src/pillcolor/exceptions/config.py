"""Errors raised while reading or editing the pillcolor config file."""

from typing import Any, Optional

from .base import PillColorError


class ConfigurationError(PillColorError):
    """The config file cannot be used."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """The config file is empty, unreadable or not JSON."""

    def __init__(self, file_path: str, detail: str):
        super().__init__(
            user_message=f"Cannot read pillcolor config {file_path}",
            technical_message=f"Unreadable config {file_path}: {detail}",
            recovery_hint=(
                "Fix the JSON by hand, or run 'pillcolor config reset --yes' "
                "to start again from the default thresholds"
            ),
        )
        self.file_path = file_path
        self.detail = detail


class ConfigValidationError(ConfigurationError):
    """A config field holds a value the classifier cannot use."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        if field.startswith("thresholds."):
            hint = "Classifier thresholds are percentages from 0 to 100"
        elif field in ("show_hsv", "uppercase_hex"):
            hint = f"'{field}' takes true or false"
        else:
            hint = "Run 'pillcolor config show' to list the known fields"

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"{file_path or '<config>'}: {field}={value!r} rejected ({error_msg})",
            recovery_hint=hint,
        )
        self.field = field
        self.value = value
        self.file_path = file_path
