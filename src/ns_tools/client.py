"""Boundary with the file system client that talks to the metadata service."""

from typing import Any, Optional, Protocol

from ns_tools.core import get_logger
from ns_tools.options import ListingOptions
from ns_tools.schemas import ListStatusWireOptions, SetAttributeOptions

logger = get_logger(__name__)


class FileSystemClient(Protocol):
    """Protocol for clients that talk to the remote metadata service."""

    def set_attribute(self, path: str, options: SetAttributeOptions) -> None:
        """Apply the attribute changes in ``options`` to ``path``."""
        ...

    def list_status(self, path: str, options: ListStatusWireOptions) -> list[Any]:
        """Return the status of ``path`` or of its children."""
        ...


def list_status(
    client: FileSystemClient, path: str, options: Optional[ListingOptions] = None
) -> list[Any]:
    """List the status of a path through a file system client.

    Args:
        client: The file system client
        path: Path to list
        options: Listing options, defaults to ``ListingOptions.defaults()``

    Returns:
        Whatever status entries the client returns
    """
    if options is None:
        options = ListingOptions.defaults()

    wire_options = options.to_wire_options()
    logger.debug(
        "Listing status",
        path=path,
        load_metadata_type=wire_options.load_metadata_type.value,
        recursive=options.recursive,
    )
    return client.list_status(path, wire_options)
