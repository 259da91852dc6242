"""
Custom exception hierarchy for pillcolor.

```
PillColorError (base)
├── ColorInputError
│   ├── MalformedColorError
│   └── InvalidRangeError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

A malformed sample is the one failure callers are expected to recover from:

```python
try:
    hsv = hex_to_hsv(sample)
except MalformedColorError as e:
    show_status(e.user_message)  # "Color detection failed: '#12G456' is not a hex color"
```
"""

from .base import PillColorError
from .color import ColorInputError, InvalidRangeError, MalformedColorError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorCollector,
    collect_errors,
    format_error_for_display,
    wrap_pydantic_error,
)

__all__ = [
    "PillColorError",
    "ColorInputError",
    "InvalidRangeError",
    "MalformedColorError",
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    "ErrorCollector",
    "collect_errors",
    "format_error_for_display",
    "wrap_pydantic_error",
]
