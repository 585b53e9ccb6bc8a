"""
Catalog API HTTP Client.

Purpose:
- Fetches the product list from the remote Catalog API and normalizes every item
  into the Product contract
- Submits new products to the Catalog API

Usage:
- Built per request by pyapi_catalog.api.dependencies (or the CLI) from a CatalogConfig
- Called by the listing/admin routes via the CatalogClient interface

Implementation notes:
- The API key travels as the `token` query parameter on every call
- Every call is a single blocking request bounded by config.timeout_seconds, no retries
- Public operations return CatalogResult; taxonomy errors never escape

Important:
- This client should be the ONLY place that talks to the Catalog API.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

import httpx

from pyapi_catalog.integrations.contracts.errors import (
    CatalogError,
    CatalogResult,
    ConfigError,
    ParseError,
    TransportError,
    UpstreamError,
    ValidationError,
)
from pyapi_catalog.integrations.contracts.interfaces import CatalogClient, ProductCache
from pyapi_catalog.integrations.contracts.products import CreatedProduct, Product, ProductInput, extract_product_id
from pyapi_catalog.integrations.policy.sanitizers import (
    sanitize_product,
    sanitize_product_input,
    validate_product_payload,
)
from pyapi_catalog.utils.config_loader import CatalogConfig

logger = logging.getLogger(__name__)

LIST_PATH = "products"
ADD_PATH = "product/add"


class CatalogAPIClient(CatalogClient):
    def __init__(
        self,
        config: CatalogConfig,
        cache: Optional[ProductCache] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.config = config
        self.cache = cache
        self._http_client = http_client

    # -- Public operations --

    def list_products(self) -> CatalogResult[List[Product]]:
        try:
            return CatalogResult.success(self._fetch_products())
        except CatalogError as e:
            logger.warning("Listing products failed (%s): %s", type(e).__name__, e.message)
            return CatalogResult.failure(e)

    def add_product(self, product_input: Union[ProductInput, Mapping[str, Any]]) -> CatalogResult[CreatedProduct]:
        try:
            return CatalogResult.success(self._create_product(product_input))
        except CatalogError as e:
            logger.warning("Adding product failed (%s): %s", type(e).__name__, e.message)
            return CatalogResult.failure(e)

    def invalidate_cache(self) -> None:
        if self.cache is not None:
            self.cache.invalidate()

    # -- Operations --

    def _fetch_products(self) -> List[Product]:
        if not self.config.base_url:
            raise ConfigError("missing base URL")

        cached = self._read_cache()
        if cached is not None:
            logger.debug("Serving %d products from cache", len(cached))
            return cached

        response = self._send("GET", LIST_PATH)
        self._raise_for_status(response)
        products = self._sanitize_products(self._parse_json(response))

        if self.cache is not None and self.config.cache_ttl_seconds > 0:
            self.cache.set_products(products, self.config.cache_ttl_seconds)
        return products

    def _create_product(self, product_input: Union[ProductInput, Mapping[str, Any]]) -> CreatedProduct:
        if not self.config.base_url:
            raise ConfigError("missing base URL")
        if not self.config.api_key:
            raise ConfigError("missing API key")

        payload = sanitize_product_input(product_input)
        errors = validate_product_payload(payload)
        if errors:
            raise ValidationError("Please provide valid name and price.", errors=errors)

        response = self._send("POST", ADD_PATH, payload)
        self._raise_for_status(response)

        # The product exists upstream from here on, whatever the body looks like.
        self.invalidate_cache()

        record = self._parse_json(response)
        product_id = extract_product_id(record)
        if product_id is None:
            raise ParseError("API response did not include a product identifier.")

        logger.info("Created product %s", product_id)
        return CreatedProduct(product_id=product_id, record=record)

    # -- HTTP helpers --

    def _endpoint(self, path: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/{path}"

    def _send(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> httpx.Response:
        url = self._endpoint(path)
        params = {"token": self.config.api_key} if self.config.api_key else None
        headers = {"Content-Type": "application/json"} if payload is not None else None

        logger.info("%s %s", method, url)
        try:
            if self._http_client is not None:
                return self._http_client.request(
                    method, url, params=params, json=payload, headers=headers, timeout=self.config.timeout_seconds
                )
            with httpx.Client(timeout=self.config.timeout_seconds) as client:
                return client.request(method, url, params=params, json=payload, headers=headers)
        except httpx.InvalidURL as e:
            raise ConfigError(f"invalid base URL: {e}") from e
        except httpx.DecodingError as e:
            logger.error(f"Undecodable response body from Catalog API at {url}: {e!r}")
            raise ParseError("Unable to decode response from API.") from e
        except httpx.RequestError as e:
            logger.error(f"Request error connecting to Catalog API at {url}: {e!r}")
            raise TransportError(f"Could not reach the Catalog API: {e}", cause=e) from e

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if response.status_code == 200:
            return
        detail = _extract_detail(response)
        message = detail if detail is not None else f"API responded with HTTP code {response.status_code}."
        logger.warning("Catalog API returned HTTP %s: %s", response.status_code, message)
        raise UpstreamError(response.status_code, message, detail=detail)

    @staticmethod
    def _parse_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except (ValueError, RecursionError) as e:
            raise ParseError("Unable to parse JSON from API.") from e

    @staticmethod
    def _sanitize_products(data: Any) -> List[Product]:
        items = data.get("products") if isinstance(data, dict) else None
        if not isinstance(items, list):
            return []
        return [sanitize_product(item) for item in items if isinstance(item, dict)]

    def _read_cache(self) -> Optional[List[Product]]:
        if self.cache is None or self.config.cache_ttl_seconds <= 0:
            return None
        return self.cache.get_products()


def _extract_detail(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except (ValueError, RecursionError):
        return None
    if not isinstance(body, dict):
        return None
    detail = body.get("detail")
    if isinstance(detail, str) and detail.strip():
        return detail
    return None


class UnconfiguredCatalogClient(CatalogClient):
    """Stands in for CatalogAPIClient when the configuration could not be loaded."""

    def __init__(self, error: ConfigError, cache: Optional[ProductCache] = None) -> None:
        self.error = error
        self.cache = cache

    def list_products(self) -> CatalogResult[List[Product]]:
        return CatalogResult.failure(self.error)

    def add_product(self, product_input: Union[ProductInput, Mapping[str, Any]]) -> CatalogResult[CreatedProduct]:
        return CatalogResult.failure(self.error)

    def invalidate_cache(self) -> None:
        if self.cache is not None:
            self.cache.invalidate()
