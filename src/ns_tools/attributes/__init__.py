"""Attribute mutation and formatting utilities."""

from .operations import (
    convert_ms_to_date,
    format_permission,
    set_pinned,
    set_ttl,
)

__all__ = [
    "convert_ms_to_date",
    "format_permission",
    "set_pinned",
    "set_ttl",
]
