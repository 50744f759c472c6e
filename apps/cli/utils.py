"""
Utility functions for the catalog CLI.
"""

import json
from typing import Any

from opensearchpy.exceptions import TransportError

from catalog.entities import Product
from catalog.errors import CatalogError
from catalog.opensearch.client import OpenSearchClient
from catalog.settings import CatalogSettings
from catalog.utils import get_aws_credentials

# Errors a command reports as "Error: ..." with exit status 1
COMMAND_ERRORS = (CatalogError, TransportError, ValueError)

# Unset connection arguments (None) fall back to CATALOG_* variables, then built-in defaults
CONNECTION_ARGUMENTS: list[dict[str, Any]] = [
    {
        "name": "assume-role",
        "type": str,
        "required": False,
        "help": "AWS role to assume for OpenSearch operations",
    },
    {
        "name": "index",
        "type": str,
        "required": False,
        "help": "Catalog index name (default: $CATALOG_INDEX or catalog)",
    },
    {
        "name": "opensearch-host",
        "type": str,
        "required": False,
        "help": "OpenSearch host (default: $CATALOG_OPENSEARCH_HOST or localhost)",
    },
    {
        "name": "opensearch-port",
        "type": int,
        "required": False,
        "help": "OpenSearch port (default: $CATALOG_OPENSEARCH_PORT or 9200)",
    },
    {
        "name": "profile",
        "type": str,
        "required": False,
        "help": "AWS profile to use",
    },
    {
        "name": "region",
        "type": str,
        "required": False,
        "help": "AWS region (default: $AWS_REGION or us-east-1)",
    },
    {
        "name": "sniff",
        "action": "store_true",
        "default": None,
        "help": "Discover cluster nodes on start and on connection failure",
    },
]


def open_catalog(
    *,
    assume_role: str | None = None,
    index: str | None = None,
    opensearch_host: str | None = None,
    opensearch_port: int | None = None,
    profile: str | None = None,
    region: str | None = None,
    sniff: bool | None = None,
    refresh: bool | None = None,
) -> OpenSearchClient:
    """Connect to the catalog cluster.

    Arguments left as None take their value from the environment settings.
    AWS credentials are only looked up when a profile or a role is given.

    Raises:
        CatalogConfigurationError: If the environment settings are invalid
        CatalogConnectionError: If the cluster cannot be reached
    """
    overrides = {
        "opensearch_host": opensearch_host,
        "opensearch_port": opensearch_port,
        "region": region,
        "sniff": sniff,
        "index": index,
        "refresh": refresh,
    }
    settings = CatalogSettings.from_env().model_copy(
        update={field: value for field, value in overrides.items() if value is not None}
    )

    credentials = None
    if profile or assume_role:
        credentials = get_aws_credentials(
            assume_role=assume_role,
            profile=profile,
            region=settings.region,
        )

    return OpenSearchClient.from_settings(settings, credentials=credentials)


def format_product(product: Product) -> str:
    """Render a product as a single JSON line."""
    return json.dumps(product.model_dump(), ensure_ascii=False)
