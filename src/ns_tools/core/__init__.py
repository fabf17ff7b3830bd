"""Core utilities and shared components for ns-tools."""

from .config import settings
from .exceptions import FileSystemError, NSToolsError, ValidationError
from .observability import get_logger, get_tracer

__all__ = [
    "settings",
    "NSToolsError",
    "FileSystemError",
    "ValidationError",
    "get_logger",
    "get_tracer",
]
