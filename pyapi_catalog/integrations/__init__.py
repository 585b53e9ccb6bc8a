"""
Integrations layer.
This package contains all code used to communicate with the remote Catalog API.

Key rule:
- Routes, renderers and scripts MUST NOT call the Catalog API directly.
- They call a catalog client (under pyapi_catalog/integrations/clients).
- The MOCK client is used during development; the REAL_HTTP client when the API is configured.

Switching implementations:
- The selection of mock vs real clients happens in ONE place (pyapi_catalog/api/dependencies.py).
"""

from .contracts import (
    CatalogClient,
    CatalogError,
    CatalogResult,
    ConfigError,
    CreatedProduct,
    ParseError,
    Product,
    ProductCache,
    ProductInput,
    TransportError,
    UpstreamError,
    ValidationError,
)

__all__ = [
    "CatalogClient", "CatalogError", "CatalogResult", "ConfigError",
    "CreatedProduct", "ParseError", "Product", "ProductCache", "ProductInput",
    "TransportError", "UpstreamError", "ValidationError",
]
