"""Method options for namespace requests."""

from .list_status import ListingOptions

__all__ = ["ListingOptions"]
