"""Pytest fixtures for catalog client, cache and API tests."""

import json

import httpx
import pytest

from pyapi_catalog.database.cache import InMemoryProductCache
from pyapi_catalog.integrations.clients.real_http.catalog_api import CatalogAPIClient
from pyapi_catalog.utils.config_loader import CatalogConfig


class FakeCatalogAPI:
    """Stands in for the remote Catalog API behind httpx.MockTransport."""

    def __init__(self):
        self.requests = []
        self.products = []
        self.list_response = None
        self.add_response = None
        self.error = None
        self._next_id = 100

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if request.method == "GET" and request.url.path == "/products":
            if self.list_response is not None:
                return self.list_response
            return httpx.Response(200, json={"products": list(self.products)})
        if request.method == "POST" and request.url.path == "/product/add":
            if self.add_response is not None:
                return self.add_response
            body = json.loads(request.content)
            product_id = self._next_id
            self._next_id += 1
            self.products.append({"id": product_id, **body})
            return httpx.Response(200, json={"product_id": product_id, "message": "created"})
        return httpx.Response(404, json={"detail": "Not Found"})


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def fake_api():
    return FakeCatalogAPI()


@pytest.fixture
def http_client(fake_api):
    with httpx.Client(transport=httpx.MockTransport(fake_api)) as client:
        yield client


@pytest.fixture
def catalog_config():
    return CatalogConfig(base_url="http://x/", api_key="k123")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def product_cache(clock):
    return InMemoryProductCache(clock=clock)


@pytest.fixture
def catalog_client(catalog_config, product_cache, http_client):
    return CatalogAPIClient(catalog_config, cache=product_cache, http_client=http_client)


@pytest.fixture(autouse=True)
def _clean_catalog_env(monkeypatch):
    for name in (
        "CATALOG_API_URL",
        "CATALOG_API_KEY",
        "CATALOG_CACHE_TTL",
        "CATALOG_TIMEOUT_SECONDS",
        "INTEGRATIONS_MODE",
        "REDIS_URL",
        "CATALOG_MOCK_DATA",
    ):
        monkeypatch.delenv(name, raising=False)
