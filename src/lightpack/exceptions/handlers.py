"""
Translation of low-level errors into Lightpack exceptions.

Errors are converted at the seam where they first appear:

```
socket OSError      --wrap_socket_error-->    DeviceUnreachableError / DeviceIOError
pydantic errors     --wrap_pydantic_error-->  ConfigFileInvalidError / ConfigValidationError
LightpackError      --format_error_for_display-->  (message, hint) for the CLI
```

Example:

```python
try:
    sock = socket.create_connection((host, port), timeout)
except OSError as e:
    raise wrap_socket_error(e, host, port, "connect") from e
```
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional

from pydantic import ValidationError

from .base import LightpackError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .connection import DeviceIOError, DeviceUnreachableError

logger = logging.getLogger(__name__)


@contextmanager
def log_failures(operation: str, log: Optional[logging.Logger] = None) -> Iterator[None]:
    """
    Log a LightpackError raised inside the block, then let it propagate.

    Only library errors are logged, with their technical message. Anything
    else passes through untouched for the caller to report.
    """
    log = log or logger
    log.debug(f"Starting: {operation}")
    try:
        yield
    except LightpackError as e:
        log.error(f"Failed to {operation}: {e.technical_message}")
        raise
    log.debug(f"Completed: {operation}")


def wrap_socket_error(
    error: OSError,
    host: Optional[str],
    port: Optional[int],
    operation: str,
) -> LightpackError:
    """
    Convert a socket-level OSError into a Lightpack exception.

    Args:
        error: The original exception from the socket module
        host: Host of the connection
        port: Port of the connection
        operation: "connect", "write" or "read"

    Returns:
        DeviceUnreachableError for connect failures, DeviceIOError otherwise
    """
    error_msg = str(error) or type(error).__name__

    if operation == "connect":
        return DeviceUnreachableError(host or "?", port or 0, original_error=error_msg)

    if isinstance(error, TimeoutError):
        error_msg = f"timed out ({error_msg})"

    return DeviceIOError(operation, original_error=error_msg)


def _location(error: dict) -> str:
    return ".".join(str(part) for part in error["loc"]) or "config"


def wrap_pydantic_error(error: ValidationError, source: str) -> ConfigurationError:
    """
    Convert a ClientConfig ValidationError into a ConfigurationError.

    Args:
        error: Raised by model_validate / model_validate_json
        source: Config file path, or "command line" for option overrides

    Returns:
        ConfigFileInvalidError if the JSON did not parse, otherwise a
        ConfigValidationError naming the offending field(s)
    """
    errors = error.errors()

    for err in errors:
        if err["type"] == "json_invalid":
            return ConfigFileInvalidError(source, err.get("ctx", {}).get("error", err["msg"]))

    if len(errors) == 1:
        err = errors[0]
        return ConfigValidationError(_location(err), err.get("input"), err["msg"], source)

    details = "; ".join(f"{_location(err)}: {err['msg']}" for err in errors)
    return ConfigValidationError(
        "multiple fields", None, f"{len(errors)} validation errors ({details})", source
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Return (message, recovery hint or None) for printing to the user."""
    if isinstance(error, LightpackError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None
