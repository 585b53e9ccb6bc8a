import hmac
import logging
import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, Header, HTTPException, status
from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError

from pyapi_catalog.database.cache import InMemoryProductCache
from pyapi_catalog.integrations.clients.mocks.local_catalog import MockCatalogClient
from pyapi_catalog.integrations.clients.real_http.catalog_api import CatalogAPIClient, UnconfiguredCatalogClient
from pyapi_catalog.integrations.contracts.errors import ConfigError
from pyapi_catalog.integrations.contracts.interfaces import CatalogClient, ProductCache
from pyapi_catalog.utils.config_loader import CatalogConfig, describe_config_error, load_catalog_config

load_dotenv()

logger = logging.getLogger(__name__)


def get_admin_keys():
    keys = os.getenv("ADMIN_API_KEYS", "")
    return [k.strip() for k in keys.split(",") if k.strip()]


async def admin_key_protection(
    x_api_key: str = Header(default=None, alias="X-API-KEY"),
):
    valid_keys = get_admin_keys()
    candidate = (x_api_key or "").strip()

    ok = bool(candidate) and any(hmac.compare_digest(candidate, k) for k in valid_keys)
    if not ok:
        logger.info("Admin key check failed (configured_keys=%d)", len(valid_keys))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing API Key",
        )


@lru_cache(maxsize=None)
def get_product_cache() -> ProductCache:
    """One cache per process: Redis when REDIS_URL is set, else in-memory."""
    if os.getenv("REDIS_URL"):
        from pyapi_catalog.database.redis_cache import RedisProductCache

        return RedisProductCache(url=os.environ["REDIS_URL"])
    return InMemoryProductCache()


@lru_cache(maxsize=None)
def get_mock_catalog_client() -> MockCatalogClient:
    seed = os.getenv("CATALOG_MOCK_DATA", "").strip()
    return MockCatalogClient(seed_path=Path(seed) if seed else None)


def get_catalog_config() -> CatalogConfig:
    """Configuration is read at request entry and stays fixed for the request."""
    try:
        return load_catalog_config()
    except PydanticValidationError as e:
        raise ConfigError(describe_config_error(e)) from e


def _should_use_mock() -> bool:
    return os.getenv("INTEGRATIONS_MODE", "").strip().lower() in {"mock", "test"}


def get_catalog_client(cache: ProductCache = Depends(get_product_cache)) -> CatalogClient:
    if _should_use_mock():
        return get_mock_catalog_client()
    try:
        config = get_catalog_config()
    except ConfigError as e:
        # Operations report the error so the listing page can render it.
        return UnconfiguredCatalogClient(e, cache=cache)
    return CatalogAPIClient(config, cache=cache)
