"""Tests for the file system client boundary."""

import pytest

from ns_tools.client import list_status
from ns_tools.core.exceptions import FileDoesNotExistError
from ns_tools.options import ListingOptions
from ns_tools.schemas import ListStatusWireOptions, LoadMetadataType


class TestListStatus:
    """Test listing through a file system client."""

    def test_list_status_with_defaults(self, mock_client):
        """Test default options are converted and forwarded."""
        mock_client.list_status.return_value = ["/data/a", "/data/b"]

        result = list_status(mock_client, "/data")

        assert result == ["/data/a", "/data/b"]
        mock_client.list_status.assert_called_once_with(
            "/data",
            ListStatusWireOptions(
                load_direct_children=True, load_metadata_type=LoadMetadataType.once
            ),
        )

    def test_list_status_never_loads_children(self, mock_client):
        """Test the never policy reaches the client as a wire record."""
        options = ListingOptions.defaults()
        options.metadata_load_policy = LoadMetadataType.never

        list_status(mock_client, "/data", options)

        _, wire = mock_client.list_status.call_args.args
        assert wire.load_direct_children is False
        assert wire.load_metadata_type == LoadMetadataType.never

    def test_list_status_errors_propagate(self, mock_client):
        """Test client failures are not translated for listing."""
        mock_client.list_status.side_effect = FileDoesNotExistError("missing")

        with pytest.raises(FileDoesNotExistError):
            list_status(mock_client, "/missing")
