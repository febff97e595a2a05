"""Response parsing exceptions.

This module defines exceptions raised when a device reply does not have
the expected shape:
- ResponseError: Base class for response errors
- MalformedResponseError: Missing delimiter or too few fields
- ResponseFormatError: A numeric field does not parse
"""

from .base import LightpackError


class ResponseError(LightpackError):
    """A device response could not be interpreted."""

    def __init__(self, user_message: str, command: str, response: str, **kwargs):
        """
        Initialize response error.

        Args:
            user_message: User-friendly error message
            command: Command whose reply failed to parse (without newline)
            response: The raw response text
        """
        kwargs.setdefault(
            "technical_message", f"{user_message} Command: {command!r}, response: {response!r}"
        )
        super().__init__(user_message, **kwargs)
        self.command = command
        self.response = response


class MalformedResponseError(ResponseError):
    """Response does not match the expected `key:value` shape."""

    def __init__(self, command: str, response: str, expected: str = "key:value"):
        """
        Initialize malformed response error.

        Args:
            command: Command whose reply was malformed
            response: The raw response text
            expected: Description of the expected shape
        """
        super().__init__(
            user_message=f"Unexpected reply to '{command}' (expected {expected}).",
            command=command,
            response=response,
            recovery_hint="The reply may have been truncated or the device uses a different API version.",
        )
        self.expected = expected


class ResponseFormatError(ResponseError):
    """A response field expected to be a number is not."""

    def __init__(self, command: str, response: str, field: str):
        """
        Initialize response format error.

        Args:
            command: Command whose reply was invalid
            response: The raw response text
            field: The field text that failed to parse
        """
        super().__init__(
            user_message=f"Reply to '{command}' is not a number: {field.strip()!r}",
            command=command,
            response=response,
        )
        self.field = field
