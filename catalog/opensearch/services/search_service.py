"""Search service for OpenSearch queries."""

from opensearchpy import OpenSearch

from catalog.interfaces import ISearchService, SearchQuery, SearchResults
from catalog.utils import request_options


class SearchService(ISearchService):
    """Runs catalog searches on a shared OpenSearch client."""

    def __init__(self, *, client: OpenSearch) -> None:
        self._client = client

    def query(self, query: SearchQuery, *, timeout: float | None = None) -> SearchResults:
        """Execute a search query."""
        response = self._client.search(
            index=query.index,
            body=query.body,
            params=query.params,
            **request_options(timeout),
        )
        return SearchResults(
            hits=response["hits"]["hits"],
            count=response["hits"]["total"]["value"],
        )
