"""Lightpack - client for the Prismatik ambient lighting text API."""

from .client import RESPONSE_BUFFER_SIZE, LightpackClient
from .connection import DeviceConnection
from .models import ClientConfig, Color, LockState

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "Color",
    "DeviceConnection",
    "LightpackClient",
    "LockState",
    "RESPONSE_BUFFER_SIZE",
]
