"""CLI commands for lightpack."""

from .config import config
from .device import DEVICE_COMMANDS

__all__ = ["DEVICE_COMMANDS", "config"]
