"""Tests for request and wire schemas."""

import pytest
from pydantic import ValidationError

from ns_tools.schemas import (
    NO_TTL,
    ListStatusWireOptions,
    LoadMetadataType,
    SetAttributeOptions,
)


class TestLoadMetadataType:
    """Test LoadMetadataType enum."""

    def test_load_metadata_type_values(self):
        """Test load metadata type enum values."""
        assert LoadMetadataType.never == "never"
        assert LoadMetadataType.once == "once"
        assert LoadMetadataType.always == "always"
        assert len(LoadMetadataType) == 3


class TestListStatusWireOptions:
    """Test wire listing options."""

    def test_wire_options_creation(self):
        """Test wire options creation."""
        options = ListStatusWireOptions(
            load_direct_children=True, load_metadata_type=LoadMetadataType.always
        )
        assert options.load_direct_children is True
        assert options.load_metadata_type == LoadMetadataType.always

    def test_wire_options_are_frozen(self):
        """Test wire options cannot be modified after creation."""
        options = ListStatusWireOptions(
            load_direct_children=False, load_metadata_type=LoadMetadataType.never
        )
        with pytest.raises(ValidationError):
            options.load_direct_children = True

    def test_wire_options_missing_fields(self):
        """Test wire options validation with missing fields."""
        with pytest.raises(ValidationError):
            ListStatusWireOptions(load_direct_children=True)


class TestSetAttributeOptions:
    """Test attribute mutation requests."""

    def test_defaults_change_nothing(self):
        """Test default request carries no attribute."""
        options = SetAttributeOptions.defaults()
        assert options.ttl is None
        assert options.pinned is None

    def test_ttl_request(self):
        """Test request carrying only a TTL."""
        options = SetAttributeOptions(ttl=5000)
        assert options.ttl == 5000
        assert options.pinned is None

    def test_unset_ttl_request(self):
        """Test request removing the TTL."""
        options = SetAttributeOptions(ttl=NO_TTL)
        assert options.ttl == -1

    def test_unknown_field_rejected(self):
        """Test unknown attributes are rejected."""
        with pytest.raises(ValidationError):
            SetAttributeOptions(owner="alice")
