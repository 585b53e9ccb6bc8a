"""
Configuration loader for the catalog client
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pyapi_catalog.integrations.policy.sanitizers import sanitize_text, sanitize_url

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "catalog_config.yml"

# Environment variable -> config field
ENV_OVERRIDES = {
    "CATALOG_API_URL": "base_url",
    "CATALOG_API_KEY": "api_key",
    "CATALOG_CACHE_TTL": "cache_ttl_seconds",
    "CATALOG_TIMEOUT_SECONDS": "timeout_seconds",
}


class CatalogConfig(BaseModel):
    """Catalog API connection settings, immutable once loaded"""

    model_config = ConfigDict(frozen=True)

    base_url: str = ""
    api_key: str = ""
    cache_ttl_seconds: int = Field(default=60, ge=0)
    timeout_seconds: float = Field(default=10.0, gt=0)

    @field_validator("base_url", mode="before")
    @classmethod
    def _clean_base_url(cls, value: Any) -> str:
        return sanitize_url(value)

    @field_validator("api_key", mode="before")
    @classmethod
    def _clean_api_key(cls, value: Any) -> str:
        return sanitize_text(value)


def load_catalog_config(config_path: Optional[Path] = None) -> CatalogConfig:
    """
    Load and validate catalog configuration

    Values come from the YAML file first, then CATALOG_* environment
    variables (including a local .env file) override them.

    Args:
        config_path: Path to config file. Defaults to config/catalog_config.yml

    Returns:
        Validated CatalogConfig object

    Raises:
        ValidationError: If the merged values don't match the schema
    """
    load_dotenv()

    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    data: Dict[str, Any] = {}
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f)
        data = loaded if isinstance(loaded, dict) else {}
    else:
        logger.debug("Catalog config file not found at %s, using environment only", config_path)

    for env_name, field_name in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value is not None and value.strip():
            data[field_name] = value.strip()

    try:
        config = CatalogConfig(**data)
        logger.info("Loaded catalog config (base_url=%s)", config.base_url or "<unset>")
        return config
    except ValidationError as e:
        logger.error(f"Catalog config validation failed: {e}")
        raise


def describe_config_error(error: ValidationError) -> str:
    """One-line summary of a config ValidationError naming the offending fields."""
    fields = sorted({str(err["loc"][0]) for err in error.errors() if err.get("loc")})
    if not fields:
        return "invalid catalog configuration"
    return f"invalid catalog configuration: {', '.join(fields)}"
