"""
Contracts (data models).

This folder defines the shapes exchanged with the Catalog API and with the
presentation layers:
- Product / ProductInput / CreatedProduct
- the catalog error taxonomy and CatalogResult
- the CatalogClient and ProductCache interfaces

Both the mock and the real HTTP clients use these contracts, so callers rely
on stable models instead of ad-hoc dicts.
"""

from .errors import (
    CatalogError,
    CatalogResult,
    ConfigError,
    ParseError,
    TransportError,
    UpstreamError,
    ValidationError,
)
from .interfaces import CatalogClient, ProductCache
from .products import INPUT_FIELDS, PRODUCT_FIELDS, CreatedProduct, Product, ProductInput, extract_product_id

__all__ = [
    "CatalogError", "CatalogResult", "ConfigError", "ParseError",
    "TransportError", "UpstreamError", "ValidationError",
    "CatalogClient", "ProductCache",
    "CreatedProduct", "Product", "ProductInput",
    "INPUT_FIELDS", "PRODUCT_FIELDS", "extract_product_id",
]
