"""Turning errors into something the CLI and batch callers can report.

- ``wrap_pydantic_error`` maps a pydantic ``ValidationError`` raised for the
  config file onto ``ConfigFileInvalidError`` / ``ConfigValidationError``.
- ``format_error_for_display`` splits any error into (message, hint).
- ``collect_errors`` records rejected samples in a batch so one bad hex
  value surfaces as "color detection failed" instead of aborting the run.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from .base import PillColorError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError

logger = logging.getLogger(__name__)


def wrap_pydantic_error(error: ValidationError, file_path: Optional[str] = None) -> ConfigurationError:
    """Convert a config ValidationError into a ConfigurationError."""
    details = error.errors()

    broken_json = [d for d in details if d["type"] == "json_invalid"]
    if broken_json:
        return ConfigFileInvalidError(file_path or "<config>", broken_json[0]["msg"])

    if len(details) == 1:
        detail = details[0]
        field = ".".join(str(part) for part in detail["loc"]) or "<root>"
        return ConfigValidationError(field, detail.get("input"), detail["msg"], file_path)

    # Several bad fields: name the first, list the rest in the message
    fields = [".".join(str(part) for part in d["loc"]) for d in details]
    listing = "; ".join(f"{name}: {d['msg']}" for name, d in zip(fields, details))
    return ConfigValidationError(
        fields[0], details[0].get("input"), f"{len(details)} problems ({listing})", file_path
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Return (message, recovery hint or None) for printing."""
    if isinstance(error, PillColorError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """
    Create a collector for a batch of samples.

    Example:
        ```python
        collector = collect_errors("detect color")
        for value in samples:
            with collector.try_operation(repr(value)):
                readings.append(describe_hex(value))
        ```
    """
    return ErrorCollector(operation)


class ErrorCollector:
    """Per-sample failures of one batch, in input order.

    Only PillColorError is recorded; any other exception is a bug and
    propagates out of ``try_operation``.
    """

    def __init__(self, operation: str):
        self.operation = operation
        self.errors: list[tuple[str, PillColorError]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def try_operation(self, sample: str) -> "_SampleAttempt":
        return _SampleAttempt(self, sample)

    def get_summary(self) -> str:
        total = self.success_count + self.error_count
        if not self.errors:
            return f"All operations completed successfully ({total} total)"

        lines = [f"Failed to {self.operation} for {self.error_count} of {total} inputs:"]
        lines.extend(f"  - {sample}: {error.user_message}" for sample, error in self.errors)
        return "\n".join(lines)


class _SampleAttempt:

    def __init__(self, collector: ErrorCollector, sample: str):
        self.collector = collector
        self.sample = sample

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.collector.success_count += 1
            return False
        if not isinstance(exc_val, PillColorError):
            return False

        self.collector.errors.append((self.sample, exc_val))
        # Reported to the user through get_summary()
        logger.debug(f"{self.collector.operation} failed for {self.sample}: {exc_val.technical_message}")
        return True
