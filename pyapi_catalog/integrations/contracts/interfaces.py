from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional, Sequence, Union

from .errors import CatalogResult
from .products import CreatedProduct, Product, ProductInput


# ---------------------------------------------------------------------------
# Abstract catalog interfaces
# ---------------------------------------------------------------------------

class ProductCache(ABC):
    """Stores the last fetched product list under a single fixed key."""

    @abstractmethod
    def get_products(self) -> Optional[List[Product]]:
        """Return the cached list, or None when missing or expired."""

    @abstractmethod
    def set_products(self, products: Sequence[Product], ttl_seconds: int) -> None:
        """Replace the cached list; last write wins."""

    @abstractmethod
    def invalidate(self) -> None:
        """Drop the cached list. No error when nothing is cached."""

    @abstractmethod
    def ping(self) -> bool:
        """True when the backing store is reachable."""


class CatalogClient(ABC):
    """Every catalog source (real HTTP or local mock) must implement this interface."""

    @abstractmethod
    def list_products(self) -> CatalogResult[List[Product]]:
        """Return all products in upstream order."""

    @abstractmethod
    def add_product(self, product_input: Union[ProductInput, Mapping[str, Any]]) -> CatalogResult[CreatedProduct]:
        """Create a product and return its identifier."""

    @abstractmethod
    def invalidate_cache(self) -> None:
        """Clear any cached product list."""
