"""
Redis-backed product list cache for production when REDIS_URL is set.
Implements the same interface as pyapi_catalog.database.cache (in-memory).
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Optional, Sequence

import redis

from pyapi_catalog.integrations.contracts.interfaces import ProductCache
from pyapi_catalog.integrations.contracts.products import Product
from pyapi_catalog.integrations.policy.sanitizers import sanitize_product

logger = logging.getLogger(__name__)

PRODUCTS_CACHE_KEY = "catalog:products"


class RedisProductCache(ProductCache):
    """
    Stores the sanitized product list as one JSON document under a fixed key.
    SETEX replaces the whole value, so readers never see a partial list.
    """

    def __init__(self, url: Optional[str] = None, client: Any = None, key: str = PRODUCTS_CACHE_KEY) -> None:
        if client is None and not url:
            raise ValueError("RedisProductCache needs either a Redis URL or a client")
        self._client = client or redis.from_url(url, decode_responses=True)
        self._key = key

    def get_products(self) -> Optional[List[Product]]:
        try:
            raw = self._client.get(self._key)
        except redis.RedisError as e:
            logger.warning("Product cache read failed, treating as miss: %s", e)
            return None
        if not raw:
            return None
        try:
            items = json.loads(raw)
        except (json.JSONDecodeError, RecursionError):
            logger.warning("Discarding corrupt product cache entry under %s", self._key)
            return None
        if not isinstance(items, list):
            return None
        return [sanitize_product(item) for item in items if isinstance(item, dict)]

    def set_products(self, products: Sequence[Product], ttl_seconds: int) -> None:
        if ttl_seconds <= 0:
            return
        payload = json.dumps([p.to_payload() for p in products])
        try:
            self._client.setex(self._key, ttl_seconds, payload)
        except redis.RedisError as e:
            logger.warning("Product cache write failed: %s", e)

    def invalidate(self) -> None:
        try:
            self._client.delete(self._key)
        except redis.RedisError as e:
            logger.warning("Product cache invalidation failed: %s", e)

    def ping(self) -> bool:
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False
