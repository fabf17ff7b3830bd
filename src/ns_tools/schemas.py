"""Request and wire schemas exchanged with the remote metadata service."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# TTL value that removes any TTL already set on a path
NO_TTL = -1


class LoadMetadataType(str, Enum):
    """When the direct children of a directory are loaded from under storage."""

    never = "never"
    once = "once"
    always = "always"


class ListStatusWireOptions(BaseModel):
    """Listing options as sent over the wire.

    ``load_direct_children`` predates ``load_metadata_type`` and is kept for
    older services. It is always derived from the load metadata type.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    load_direct_children: bool = Field(
        ..., description="Legacy flag: load children from under storage at all"
    )
    load_metadata_type: LoadMetadataType = Field(
        ..., description="When children are loaded from under storage"
    )


class SetAttributeOptions(BaseModel):
    """Attribute mutation request; unset fields are left untouched remotely."""

    model_config = ConfigDict(extra="forbid")

    ttl: Optional[int] = Field(
        default=None,
        description=f"Time to live in milliseconds, {NO_TTL} to remove the TTL",
    )
    pinned: Optional[bool] = Field(
        default=None, description="Whether the path is exempt from eviction"
    )

    @classmethod
    def defaults(cls) -> "SetAttributeOptions":
        """Return a request that changes nothing."""
        return cls()
