"""Transport-related exceptions.

This module defines exceptions for the TCP connection to the device:
- DeviceConnectionError: Base class for connection errors
- DeviceUnreachableError: Connection could not be established
- ConnectionClosedError: Operation attempted after close()
- DeviceIOError: Read or write failed on an established connection
"""

from typing import Optional

from .base import LightpackError


class DeviceConnectionError(LightpackError):
    """Connection to the device is missing or could not be made."""

    def __init__(
        self,
        user_message: str,
        host: Optional[str] = None,
        port: Optional[int] = None,
        **kwargs
    ):
        """
        Initialize device connection error.

        Args:
            user_message: User-friendly error message
            host: Host the client was talking to (if known)
            port: Port the client was talking to (if known)
        """
        super().__init__(user_message, **kwargs)
        self.host = host
        self.port = port


class DeviceUnreachableError(DeviceConnectionError):
    """TCP connection to the device could not be opened."""

    def __init__(self, host: str, port: int, original_error: Optional[str] = None):
        """
        Initialize device-unreachable error.

        Args:
            host: Host that could not be reached
            port: Port that could not be reached
            original_error: The original socket error message
        """
        user_msg = f"Could not connect to Lightpack at {host}:{port}."
        tech_msg = user_msg
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        recovery = (
            "Check that Prismatik is running with the server API enabled "
            f"and listening on port {port}."
        )

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            host=host,
            port=port,
            recoverable=True,
            recovery_hint=recovery,
        )


class ConnectionClosedError(DeviceConnectionError):
    """The client was closed; no further commands can be sent."""

    def __init__(self, host: Optional[str] = None, port: Optional[int] = None):
        """
        Initialize connection-closed error.

        Args:
            host: Host of the closed connection
            port: Port of the closed connection
        """
        super().__init__(
            user_message="Connection to the Lightpack is not open.",
            technical_message=f"Attempted exchange on closed connection to {host}:{port}",
            host=host,
            port=port,
            recovery_hint="Create a new client to reconnect.",
        )


class DeviceIOError(LightpackError):
    """A write or read on an open connection failed."""

    def __init__(self, operation: str, original_error: Optional[str] = None):
        """
        Initialize device I/O error.

        Args:
            operation: What was being done ("write" or "read")
            original_error: The original socket error message
        """
        user_msg = f"Communication with the Lightpack failed during {operation}."
        tech_msg = user_msg
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            recovery_hint="The connection may have been reset. Create a new client to reconnect.",
        )
        self.operation = operation
        self.original_error = original_error
