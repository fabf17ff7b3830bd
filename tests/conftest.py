"""Test configuration and fixtures for ns-tools."""

from unittest.mock import Mock

import pytest

from ns_tools.client import FileSystemClient


@pytest.fixture
def mock_client():
    """Create a mock file system client."""
    client = Mock(spec=FileSystemClient)
    client.list_status.return_value = []
    return client
