"""Pytest fixtures for catalog integration tests against a real cluster."""

import os
import uuid
from collections.abc import Generator

import pytest

from catalog.opensearch.client import OpenSearchClient
from catalog.utils import get_aws_credentials


@pytest.fixture(scope="session")
def opensearch_host() -> str:
    """Get OpenSearch host from environment."""
    host = os.getenv("OPENSEARCH_HOST")
    if not host:
        pytest.skip("OPENSEARCH_HOST environment variable is not set")
    return host


@pytest.fixture(scope="session")
def opensearch_port() -> int:
    """Get OpenSearch port from environment."""
    port_str = os.getenv("OPENSEARCH_PORT", "9200")
    try:
        return int(port_str)
    except ValueError:
        raise ValueError(f"OPENSEARCH_PORT must be a valid integer, got: {port_str}")


@pytest.fixture(scope="module")
def opensearch(opensearch_host: str, opensearch_port: int) -> Generator[OpenSearchClient, None, None]:
    """
    Create a real OpenSearchClient bound to a throwaway catalog index.

    The index is created before the module's tests and deleted after them.
    AWS credentials are only used for AWS domains.
    """
    credentials = (
        get_aws_credentials(
            profile=os.getenv("AWS_PROFILE"),
            assume_role=os.getenv("ASSUME_ROLE"),
            region=os.getenv("AWS_REGION", "us-east-1"),
            role_session_name="pytest-integration-test",
        )
        if "amazonaws.com" in opensearch_host
        else None
    )
    index = f"test-catalog-{uuid.uuid4().hex[:8]}"

    client = OpenSearchClient(
        host=opensearch_host,
        port=opensearch_port,
        credentials=credentials,
        region=os.getenv("AWS_REGION", "us-east-1"),
        index=index,
        refresh=True,
    )
    client._client.indices.create(index=index)

    yield client

    client._client.indices.delete(index=index, ignore=[400, 404])
    client.close()
