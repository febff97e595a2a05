"""Data models for the Lightpack client."""

from .color import Color
from .config import DEFAULT_CONFIG_PATH, DEFAULT_HOST, DEFAULT_PORT, ClientConfig
from .enums import LockState

__all__ = [
    "ClientConfig",
    # Models
    "Color",
    # Enums
    "LockState",
    # Defaults
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
]
