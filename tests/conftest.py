"""Shared fixtures: an in-process stand-in for the opensearch-py client.

The fake keeps documents in a dict per index and answers the handful of
calls the catalog makes with response shapes matching the real client.
"""

import copy
import re
from typing import Any

import pytest
from opensearchpy.exceptions import NotFoundError

TOKEN_PATTERN = re.compile(r"\w+")


def _tokens(value: Any) -> set[str]:
    if not isinstance(value, str):
        return set()
    return {token.lower() for token in TOKEN_PATTERN.findall(value)}


class FakeOpenSearch:
    """Dict-backed OpenSearch client."""

    def __init__(self) -> None:
        self.documents: dict[str, dict[str, Any]] = {}
        self.closed = False

    def info(self) -> dict[str, Any]:
        return {"cluster_name": "fake-cluster"}

    def index(self, *, index: str, body: Any, id: str, **_: Any) -> dict[str, Any]:  # noqa: A002
        documents = self.documents.setdefault(index, {})
        result = "updated" if id in documents else "created"
        documents[id] = copy.deepcopy(body)
        return {"_index": index, "_id": id, "result": result}

    def get(self, *, index: str, id: str, **_: Any) -> dict[str, Any]:  # noqa: A002
        if index not in self.documents:
            raise NotFoundError(
                404,
                "index_not_found_exception",
                {
                    "error": {
                        "root_cause": [{"type": "index_not_found_exception", "reason": "no such index"}],
                        "type": "index_not_found_exception",
                        "reason": "no such index",
                    },
                    "status": 404,
                },
            )
        if id not in self.documents[index]:
            raise NotFoundError(404, "", {"_index": index, "_id": id, "found": False})
        return {
            "_index": index,
            "_id": id,
            "found": True,
            "_source": copy.deepcopy(self.documents[index][id]),
        }

    def mget(self, *, index: str, body: dict[str, Any], **_: Any) -> dict[str, Any]:
        documents = self.documents.get(index, {})
        docs = []
        for doc_id in body["ids"]:
            if doc_id in documents:
                docs.append(
                    {
                        "_index": index,
                        "_id": doc_id,
                        "found": True,
                        "_source": copy.deepcopy(documents[doc_id]),
                    }
                )
            else:
                docs.append({"_index": index, "_id": doc_id, "found": False})
        return {"docs": docs}

    def search(self, *, index: str, body: dict[str, Any], **_: Any) -> dict[str, Any]:
        documents = self.documents.get(index, {})
        query = body["query"]
        if "multi_match" in query:
            query_tokens = _tokens(query["multi_match"]["query"])
            fields = query["multi_match"]["fields"]
            matches = [
                (doc_id, source)
                for doc_id, source in documents.items()
                if isinstance(source, dict)
                and any(query_tokens & _tokens(source.get(field)) for field in fields)
            ]
        else:
            matches = list(documents.items())

        start = body.get("from", 0)
        size = body.get("size", 10)
        return {
            "hits": {
                "total": {"value": len(matches), "relation": "eq"},
                "hits": [
                    {"_index": index, "_id": doc_id, "_score": 1.0, "_source": copy.deepcopy(source)}
                    for doc_id, source in matches[start : start + size]
                ],
            }
        }

    def count(self, *, index: str, **_: Any) -> dict[str, Any]:
        return {"count": len(self.documents.get(index, {}))}

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_opensearch() -> FakeOpenSearch:
    """Create an empty fake OpenSearch client."""
    return FakeOpenSearch()
