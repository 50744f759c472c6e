"""OpenSearch service classes for high-level operations."""

from catalog.opensearch.services.search_query_builder import SearchQuery, SearchQueryBuilder
from catalog.opensearch.services.search_service import SearchService

__all__ = [
    "SearchQuery",
    "SearchQueryBuilder",
    "SearchService",
]
