"""Base repository class for OpenSearch document repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalog.opensearch.services.search_service import SearchService

if TYPE_CHECKING:
    from opensearchpy import OpenSearch


class BaseRepository:
    """Base class for repositories storing documents in a single OpenSearch index.

    The OpenSearch client is shared and owned by the caller; a repository
    never closes it.
    """

    def __init__(self, *, client: OpenSearch, index: str) -> None:
        """Initialize the repository with an OpenSearch client and index name."""
        self._client = client
        self._index = index
        self._search = SearchService(client=client)

    @property
    def index(self) -> str:
        """Name of the index backing this repository."""
        return self._index
