"""Wire protocol for the Lightpack text API: command builders and reply parsers."""

from . import commands
from .parser import (
    is_lock_success,
    is_unlock_success,
    parse_field,
    parse_int_field,
    parse_profiles,
    split_fields,
)

__all__ = [
    "commands",
    "is_lock_success",
    "is_unlock_success",
    "parse_field",
    "parse_int_field",
    "parse_profiles",
    "split_fields",
]
