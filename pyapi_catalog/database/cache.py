"""
In-memory product list cache for local development and single-process runs.

Implements the same interface as pyapi_catalog.database.redis_cache so the
FastAPI app can run without a real Redis instance.
"""

from __future__ import annotations

import threading
import time
from typing import Callable, List, Optional, Sequence, Tuple

from pyapi_catalog.integrations.contracts.interfaces import ProductCache
from pyapi_catalog.integrations.contracts.products import Product


class InMemoryProductCache(ProductCache):
    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        # Single slot: (expires_at, products)
        self._entry: Optional[Tuple[float, Tuple[Product, ...]]] = None

    def get_products(self) -> Optional[List[Product]]:
        with self._lock:
            entry = self._entry
            if entry is None:
                return None
            expires_at, products = entry
            if self._clock() >= expires_at:
                self._entry = None
                return None
        return list(products)

    def set_products(self, products: Sequence[Product], ttl_seconds: int) -> None:
        if ttl_seconds <= 0:
            return
        entry = (self._clock() + ttl_seconds, tuple(products))
        with self._lock:
            self._entry = entry

    def invalidate(self) -> None:
        with self._lock:
            self._entry = None

    def ping(self) -> bool:
        return True
