"""
Local Catalog Client: MOCK client.

⚠️  Development-time catalog source for when the Catalog API is not reachable.
    Keeps products in memory, optionally seeded from a local JSON file shaped
    like the Catalog API list response ({"products": [...]}).

Swap:
Use clients/real_http/catalog_api.py once CATALOG_API_URL is configured.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from pyapi_catalog.integrations.contracts.errors import CatalogResult, ValidationError
from pyapi_catalog.integrations.contracts.interfaces import CatalogClient
from pyapi_catalog.integrations.contracts.products import CreatedProduct, Product, ProductInput
from pyapi_catalog.integrations.policy.sanitizers import (
    sanitize_product,
    sanitize_product_input,
    validate_product_payload,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

_MOCK_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Espresso Machine Classic",
        "price_eur": 249.0,
        "description": "<p>15-bar pump espresso machine with a steam wand.</p>",
        "category": "Kitchen",
        "in_stock": True,
        "rating": 4.6,
    },
    {
        "id": "2",
        "name": "Ceramic Pour-Over Set",
        "price_eur": 39.9,
        "description": "<p>Dripper, server and <strong>40 filters</strong>.</p>",
        "category": "Kitchen",
        "in_stock": False,
        "rating": 4.2,
    },
]


def load_seed_file(path: Path) -> List[Dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    items = data.get("products") if isinstance(data, dict) else None
    return [item for item in items if isinstance(item, dict)] if isinstance(items, list) else []


# ---------------------------------------------------------------------------
# Mock client
# ---------------------------------------------------------------------------

class MockCatalogClient(CatalogClient):
    """
    In-memory catalog.

    Parameters
    ----------
    products : iterable of mappings, optional
        Raw product records to start with. Defaults to a small built-in catalog.
    seed_path : Path, optional
        JSON file to load records from instead; ignored when `products` is given.
    """

    def __init__(
        self,
        products: Optional[Iterable[Mapping[str, Any]]] = None,
        seed_path: Optional[Path] = None,
    ):
        if products is None:
            products = load_seed_file(seed_path) if seed_path else _MOCK_PRODUCTS

        # In-memory store (reset on restart)
        self._products: List[Product] = [sanitize_product(item) for item in products]
        self._next_id = 1 + max((int(p.id) for p in self._products if p.id.isdecimal()), default=0)
        self._lock = threading.Lock()

        logger.info("[CATALOG MOCK] Client initialised with %d products", len(self._products))

    def list_products(self) -> CatalogResult[List[Product]]:
        with self._lock:
            return CatalogResult.success(list(self._products))

    def add_product(self, product_input: Union[ProductInput, Mapping[str, Any]]) -> CatalogResult[CreatedProduct]:
        payload = sanitize_product_input(product_input)
        errors = validate_product_payload(payload)
        if errors:
            return CatalogResult.failure(ValidationError("Please provide valid name and price.", errors=errors))

        with self._lock:
            product_id = str(self._next_id)
            self._next_id += 1
            self._products.append(sanitize_product({"id": product_id, **payload}))

        logger.info("[CATALOG MOCK] Added product %s (%s)", product_id, payload["name"])
        return CatalogResult.success(CreatedProduct(product_id=product_id, record={"product_id": product_id, **payload}))

    def invalidate_cache(self) -> None:
        # Nothing is cached; the store is always current.
        return None
