"""
Mock integration clients.

These clients return fake (but realistic) catalog data without calling the
Catalog API. They are used when:
- the Catalog API is not configured or not reachable in development
- we want to exercise the listing/admin routes without external dependencies

Important:
- Mock clients must follow the SAME interface as real HTTP clients.
- Mock clients return data shaped according to pyapi_catalog/integrations/contracts/*
"""

from .local_catalog import MockCatalogClient

__all__ = ["MockCatalogClient"]
