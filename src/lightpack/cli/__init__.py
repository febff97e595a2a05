"""CLI for the Lightpack client."""

from .main import cli

__all__ = ["cli"]
