"""Pytest fixtures for OpenSearchClient tests."""

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest
from botocore.credentials import Credentials


@pytest.fixture
def mock_credentials() -> Credentials:
    """Create mock AWS credentials."""
    return Credentials(
        access_key="test-access-key",
        secret_key="test-secret-key",
        token="test-token",
    )


@pytest.fixture
def mock_opensearch_class() -> Generator[MagicMock, None, None]:
    """Patch the OpenSearch class used by OpenSearchClient."""
    with patch("catalog.opensearch.client.OpenSearch") as mock_class:
        mock_client_instance = MagicMock()
        mock_class.return_value = mock_client_instance

        # Mock the info() call that happens during connection
        mock_client_instance.info.return_value = {"cluster_name": "test-cluster"}

        yield mock_class


@pytest.fixture
def mock_opensearch_client(mock_opensearch_class: MagicMock) -> MagicMock:
    """The mock OpenSearch instance handed to OpenSearchClient."""
    return mock_opensearch_class.return_value
