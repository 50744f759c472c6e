"""Catalog configuration."""

import os
from typing import Self

from pydantic import BaseModel, Field, ValidationError

from catalog.errors import CatalogConfigurationError

TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY


class CatalogSettings(BaseModel):
    """Connection and repository settings."""

    opensearch_host: str = "localhost"
    opensearch_port: int = Field(default=9200, gt=0)
    sniff: bool = False
    region: str = "us-east-1"
    index: str = "catalog"
    refresh: bool = False
    timeout: float | None = Field(default=None, gt=0)

    @classmethod
    def from_env(cls) -> Self:
        """Build settings from CATALOG_* environment variables.

        Unset variables keep their defaults.

        Raises:
            CatalogConfigurationError: If a variable holds an invalid value
        """
        values: dict[str, object] = {
            "sniff": _env_flag("CATALOG_SNIFF", False),
            "refresh": _env_flag("CATALOG_REFRESH", False),
        }
        env_fields = {
            "opensearch_host": "CATALOG_OPENSEARCH_HOST",
            "opensearch_port": "CATALOG_OPENSEARCH_PORT",
            "region": "AWS_REGION",
            "index": "CATALOG_INDEX",
            "timeout": "CATALOG_TIMEOUT",
        }
        for field, variable in env_fields.items():
            value = os.getenv(variable)
            if value:
                values[field] = value
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise CatalogConfigurationError(f"Invalid catalog settings in environment: {e}") from e
