"""Root of the Lightpack client's exception tree."""

from typing import Optional


class LightpackError(Exception):
    """
    Raised for every failure the client knows how to describe.

    ``str(error)`` is the short text for a person at a terminal. The
    surrounding detail (socket error, raw reply, file path) goes into
    ``technical_message`` for the log. ``recoverable`` marks failures the
    user can fix and retry, such as starting Prismatik or correcting a
    config value; ``recovery_hint`` says how.
    """

    def __init__(
        self,
        user_message: str,
        *,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
