"""Attribute operations shared by namespace commands.

Setting a TTL or a pin state is a single ``set_attribute`` call on the file
system client. Failures reported by the client are surfaced as ``OSError`` with
the client's message; nothing is retried.
"""

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional

from ns_tools.client import FileSystemClient
from ns_tools.core import get_logger, get_tracer
from ns_tools.core.exceptions import FileSystemError, ValidationError
from ns_tools.schemas import NO_TTL, SetAttributeOptions

logger = get_logger(__name__)
tracer = get_tracer(__name__)


def _set_attribute(
    client: FileSystemClient, path: str, options: SetAttributeOptions, operation: str
) -> None:
    """Send one attribute mutation and translate client failures.

    Raises:
        OSError: If the client raises a FileSystemError
    """
    with tracer.start_as_current_span(operation) as span:
        span.set_attribute("ns_tools.path", path)
        try:
            client.set_attribute(path, options)
        except FileSystemError as e:
            logger.error(
                "Failed to set attribute",
                operation=operation,
                path=path,
                error=str(e),
            )
            raise OSError(str(e)) from e


def set_ttl(client: FileSystemClient, path: str, ttl_ms: int) -> None:
    """Set a new TTL or unset the existing TTL of a path.

    Args:
        client: The file system client
        path: The path to update
        ttl_ms: Milliseconds after which the path is deleted, whether or not it
            is pinned; ``NO_TTL`` removes the TTL

    Raises:
        OSError: If the client fails to set or unset the TTL
    """
    if ttl_ms == NO_TTL:
        logger.info("Unsetting TTL", path=path)
    else:
        logger.info("Setting TTL", path=path, ttl_ms=ttl_ms)

    _set_attribute(client, path, SetAttributeOptions(ttl=ttl_ms), "set_ttl")


def set_pinned(client: FileSystemClient, path: str, pinned: bool) -> None:
    """Set the pin state of a path.

    Args:
        client: The file system client
        path: The path to update
        pinned: Whether the path is exempt from eviction

    Raises:
        OSError: If the client fails to change the pin state
    """
    logger.info("Setting pin state", path=path, pinned=pinned)
    _set_attribute(client, path, SetAttributeOptions(pinned=pinned), "set_pinned")


def format_permission(permission: int, is_directory: bool) -> str:
    """Render a permission mask as a string such as ``drwxr-xr-x``.

    The low three bits (other) are read first as x, w, r, then the mask is
    shifted right by three for the group and owner bits. The type character
    goes last and the whole string is reversed at the end, which puts the
    owner group first and each triple in r, w, x order. Bits above the ninth
    are ignored.

    Args:
        permission: Permission mask, e.g. ``0o755``
        is_directory: Whether the path is a directory

    Returns:
        Ten character permission string
    """
    chars = []
    for _ in range(3):
        chars.append("x" if permission & 0x01 else "-")
        chars.append("w" if permission & 0x02 else "-")
        chars.append("r" if permission & 0x04 else "-")
        permission >>= 3
    chars.append("d" if is_directory else "-")
    return "".join(reversed(chars))


def convert_ms_to_date(millis: int, tz: Optional[tzinfo] = None) -> str:
    """Format epoch milliseconds as ``MM-dd-yyyy HH:mm:ss:SSS``.

    Args:
        millis: Milliseconds since the epoch
        tz: Timezone to render in, the local timezone when omitted

    Returns:
        Formatted date string

    Raises:
        ValidationError: If the timestamp falls outside years 1 to 9999
    """
    seconds, ms = divmod(millis, 1000)
    try:
        moment = datetime.fromtimestamp(0, timezone.utc) + timedelta(
            seconds=seconds, milliseconds=ms
        )
        moment = moment.astimezone(tz)
    except (OverflowError, ValueError) as e:
        logger.warning("Timestamp out of range", millis=millis, error=str(e))
        raise ValidationError(f"Timestamp out of range: {millis}") from e
    return f"{moment:%m-%d-%Y %H:%M:%S}:{moment.microsecond // 1000:03d}"
