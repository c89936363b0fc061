"""
Custom exception hierarchy for launchgrid.

## Exception Hierarchy

```
LaunchGridError (base)
├── DeviceConnectionError
│   ├── MidiBackendError
│   └── DevicePortNotFoundError
└── ProfileNotFoundError
```

All custom exceptions carry a `user_message` for display, a
`technical_message` for logs and an optional `recovery_hint`.
Connection errors are fatal at startup; everything that happens inside
the render loop is logged and absorbed instead of raised.
"""

from .base import LaunchGridError
from .device import (
    DeviceConnectionError,
    DevicePortNotFoundError,
    MidiBackendError,
    ProfileNotFoundError,
)
from .handlers import ErrorContext, format_error_for_display

__all__ = [
    # Base
    "LaunchGridError",
    # Device
    "DeviceConnectionError",
    "DevicePortNotFoundError",
    "MidiBackendError",
    "ProfileNotFoundError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
]
