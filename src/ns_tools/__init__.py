"""Client-side helpers for querying and modifying namespace metadata.

This package prepares the small option and attribute records a file system
client exchanges with a remote metadata service. It does not talk to the
service itself; callers pass in a client object that does.

Key Features:
    - Listing options with a projection onto the wire representation
    - TTL and pin state updates through any file system client
    - Permission mask and timestamp formatting for shell output
    - CLI interface

Recommended Usage:

    >>> from ns_tools import ListingOptions, LoadMetadataType
    >>> options = ListingOptions.defaults()
    >>> options.metadata_load_policy = LoadMetadataType.always
    >>> options.to_wire_options().load_direct_children
    True

    >>> from ns_tools import format_permission
    >>> format_permission(0o755, True)
    'drwxr-xr-x'
"""

__version__ = "0.1.0"

from .attributes import (
    convert_ms_to_date,
    format_permission,
    set_pinned,
    set_ttl,
)
from .client import FileSystemClient, list_status
from .options import ListingOptions
from .schemas import (
    NO_TTL,
    ListStatusWireOptions,
    LoadMetadataType,
    SetAttributeOptions,
)

__all__ = [
    # Schemas
    "NO_TTL",
    "ListStatusWireOptions",
    "LoadMetadataType",
    "SetAttributeOptions",
    # Options
    "ListingOptions",
    # Client boundary
    "FileSystemClient",
    "list_status",
    # Attributes
    "convert_ms_to_date",
    "format_permission",
    "set_pinned",
    "set_ttl",
]
