"""
Real HTTP integration clients.

These clients communicate with the remote Catalog API over HTTP.

Important:
- Must implement the same interface as the mock clients
- Must return data shaped according to pyapi_catalog/integrations/contracts/*

Switching:
The selection of mock vs real clients happens in pyapi_catalog/api/dependencies.py only.
"""

from .catalog_api import CatalogAPIClient, UnconfiguredCatalogClient

__all__ = ["CatalogAPIClient", "UnconfiguredCatalogClient"]
