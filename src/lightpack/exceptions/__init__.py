"""
Custom exception hierarchy for the Lightpack client.

## Exception Hierarchy

```
LightpackError (base)
├── DeviceConnectionError
│   ├── DeviceUnreachableError
│   └── ConnectionClosedError
├── DeviceIOError
├── ResponseError
│   ├── MalformedResponseError
│   └── ResponseFormatError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `LightpackError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

A failed `lock()` or `unlock()` is not an exception; those calls return
False instead.

### Example: Device Not Running

```python
from lightpack import LightpackClient
from lightpack.exceptions import DeviceUnreachableError

try:
    client = LightpackClient("127.0.0.1", 3636)
except DeviceUnreachableError as e:
    print(e.get_full_message())
```
"""

from .base import LightpackError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .connection import (
    ConnectionClosedError,
    DeviceConnectionError,
    DeviceIOError,
    DeviceUnreachableError,
)
from .handlers import (
    format_error_for_display,
    log_failures,
    wrap_pydantic_error,
    wrap_socket_error,
)
from .response import MalformedResponseError, ResponseError, ResponseFormatError

__all__ = [
    # Base
    "LightpackError",
    # Connection
    "ConnectionClosedError",
    "DeviceConnectionError",
    "DeviceIOError",
    "DeviceUnreachableError",
    # Response
    "MalformedResponseError",
    "ResponseError",
    "ResponseFormatError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    "format_error_for_display",
    "log_failures",
    "wrap_pydantic_error",
    "wrap_socket_error",
]
