"""Options controlling a directory listing request.

A ``ListingOptions`` value is built from ``ListingOptions.defaults()``, adjusted
field by field, and then handed to a listing call which converts it with
``to_wire_options()``. Instances are not synchronized: use one per request, or
stop mutating a shared instance once it has been built.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ns_tools.schemas import ListStatusWireOptions, LoadMetadataType

_FIELDS = (
    "metadata_load_policy",
    "recursive",
    "force_metadata_reload",
    "treat_directories_as_files",
    "pinned_only",
)


class ListingOptions(BaseModel):
    """Method options for listing the status of a path.

    Attributes:
        metadata_load_policy: Whether and when direct children are loaded from
            under storage
        recursive: Whether subdirectories are listed as well
        force_metadata_reload: Whether cached metadata of the children is ignored
        treat_directories_as_files: Whether directories are reported as plain files
        pinned_only: Whether only pinned paths are listed
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    metadata_load_policy: LoadMetadataType = Field(
        default=LoadMetadataType.once,
        description="When direct children are loaded from under storage",
    )
    recursive: bool = Field(default=False, description="List subdirectories too")
    force_metadata_reload: bool = Field(
        default=False, description="Bypass cached metadata of the children"
    )
    treat_directories_as_files: bool = Field(
        default=False, description="Report directories as plain files"
    )
    pinned_only: bool = Field(default=False, description="Only list pinned paths")

    @classmethod
    def defaults(cls) -> "ListingOptions":
        """Return the default listing options."""
        return cls()

    def to_wire_options(self) -> ListStatusWireOptions:
        """Project these options onto the wire representation.

        Services that only know the boolean flag load children for both
        ``once`` and ``always``; the two differ only in when the service reloads.
        """
        return ListStatusWireOptions(
            load_direct_children=self.metadata_load_policy
            in (LoadMetadataType.once, LoadMetadataType.always),
            load_metadata_type=self.metadata_load_policy,
        )

    def _key(self) -> tuple:
        return tuple(getattr(self, name) for name in _FIELDS)

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, ListingOptions):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return f"ListingOptions(metadata_load_policy={self.metadata_load_policy.value})"
