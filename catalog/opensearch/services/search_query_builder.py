"""Query builder for OpenSearch queries."""

from typing import Any, Self

from catalog.interfaces import SearchQuery


class SearchQueryBuilder:
    """Search query builder for OpenSearch."""

    def __init__(self, index: str) -> None:
        """Initialize SearchQueryBuilder with an index name."""
        self._index = index
        self._query: dict[str, Any] = {"match_all": {}}
        self._from: int | None = None
        self._size: int | None = None

    def match_all(self) -> Self:
        """Match every document in the index."""
        self._query = {"match_all": {}}
        return self

    def multi_match(self, *, fields: list[str], value: str) -> Self:
        """Match a full-text query against several fields."""
        if not fields:
            raise ValueError("multi_match() needs at least one field")
        self._query = {"multi_match": {"query": value, "fields": list(fields)}}
        return self

    def skip_results(self, count: int) -> Self:
        """Skip the first `count` results."""
        if count < 0:
            raise ValueError(f"Cannot skip a negative number of results: {count}")
        self._from = count
        return self

    def limit_results(self, size: int) -> Self:
        """Limit the number of results."""
        if size < 0:
            raise ValueError(f"Cannot limit results to a negative size: {size}")
        self._size = size
        return self

    def build(self) -> SearchQuery:
        """Build the query."""
        body: dict[str, Any] = {"query": self._query}

        if self._from is not None:
            body["from"] = self._from

        if self._size is not None:
            body["size"] = self._size

        return SearchQuery(index=self._index, body=body, params={})
