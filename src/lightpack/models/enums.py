"""Enumerations for the Lightpack client."""

from enum import Enum


class LockState(str, Enum):
    """Client-side belief about the device's exclusive API lock."""

    UNKNOWN = "unknown"  # Last lock/unlock exchange failed mid-flight
    HELD = "held"  # Device answered lock:success
    NOT_HELD = "not_held"  # Initial state, or after unlock / failed lock
