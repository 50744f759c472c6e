import os
import re
from types import TracebackType
from typing import Self

from botocore.credentials import Credentials
from opensearchpy import AWSV4SignerAuth, OpenSearch, RequestsHttpConnection
from opensearchpy.exceptions import AuthorizationException

from catalog.errors import CatalogConnectionError
from catalog.logging import get_logger
from catalog.opensearch.repositories import ProductRepository
from catalog.opensearch.repositories.product import DEFAULT_INDEX
from catalog.settings import CatalogSettings

logger = get_logger(__name__)


class OpenSearchClient:
    """Connection handle for the catalog cluster.

    Constructed once and shared; repositories built on it do not own the
    connection. Release it with `close()` or by using the client as a
    context manager.
    """

    def __init__(
        self,
        *,
        credentials: Credentials | None = None,
        host: str,
        port: int = 9200,
        region: str = "us-east-1",
        sniff: bool = False,
        index: str = DEFAULT_INDEX,
        refresh: bool = False,
        timeout: float | None = None,
    ) -> None:
        """Initialize OpenSearch client.

        Args:
            credentials: AWS credentials used to sign requests to AWS OpenSearch domains
            host: Cluster host, with or without scheme
            port: Cluster port
            region: AWS region used for request signing
            sniff: Discover the other cluster nodes on start and on connection failure
            index: Name of the catalog index
            refresh: Refresh the index after each put
            timeout: Default request timeout in seconds
        """
        self._host = re.sub(r"^https?://", "", host)
        self._port = port
        self._region = region
        self._sniff = sniff
        self._timeout = timeout
        self._credentials = credentials
        self._client = self._connect()

        self.products = ProductRepository(client=self._client, index=index, refresh=refresh)

    @classmethod
    def from_settings(
        cls,
        settings: CatalogSettings,
        *,
        credentials: Credentials | None = None,
    ) -> Self:
        """Create a client from catalog settings."""
        return cls(
            credentials=credentials,
            host=settings.opensearch_host,
            port=settings.opensearch_port,
            region=settings.region,
            sniff=settings.sniff,
            index=settings.index,
            refresh=settings.refresh,
            timeout=settings.timeout,
        )

    def _connect(self) -> OpenSearch:
        is_aws_domain = ".es.amazonaws.com" in self._host or ".es.amazonaws.com.cn" in self._host

        # Sign requests only for AWS domains with credentials available
        if self._credentials is not None and is_aws_domain:
            http_auth = AWSV4SignerAuth(self._credentials, self._region)
            use_ssl = True
        else:
            http_auth = None
            use_ssl = False

        client = OpenSearch(
            hosts=[{"host": self._host, "port": self._port}],
            http_compress=True,
            http_auth=http_auth,
            use_ssl=use_ssl,
            verify_certs=use_ssl,
            ssl_assert_hostname=False,
            ssl_show_warn=False,
            connection_class=RequestsHttpConnection,
            sniff_on_start=self._sniff,
            sniff_on_connection_fail=self._sniff,
            timeout=self._timeout or 60,
        )

        try:
            info = client.info()
            logger.info("Connected to OpenSearch cluster: %s", info["cluster_name"])
        except AuthorizationException as e:
            if "AWS_EXECUTION_ENV" not in os.environ:
                raise CatalogConnectionError(
                    f"Authentication successful but access denied (403). "
                    f"Please check the OpenSearch domain's resource-based access policy. "
                    f"The user/role needs 'es:ESHttp*' permissions. "
                    f"Error details: {e.info if hasattr(e, 'info') else 'Access denied'}"
                ) from e
            logger.info("Skipping connection test")
        except Exception as e:
            raise CatalogConnectionError(
                f"Failed to connect to OpenSearch: {type(e).__name__}: {e}"
            ) from e

        return client

    def count_products(self) -> int:
        """Count the documents in the catalog index."""
        return self._client.count(index=self.products.index)["count"]

    def close(self) -> None:
        """Close the connections held by the client."""
        self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
