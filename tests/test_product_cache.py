import json

import pytest
import redis

from pyapi_catalog.database.cache import InMemoryProductCache
from pyapi_catalog.database.redis_cache import PRODUCTS_CACHE_KEY, RedisProductCache
from pyapi_catalog.integrations.contracts.products import Product

PRODUCTS = [
    Product(id="1", name="One", slug="one", price_eur=1.5),
    Product(id="2", name="Two", slug="two", in_stock=True, rating=4.0),
]


class FakeRedis:
    def __init__(self):
        self.store = {}
        self.ttls = {}

    def get(self, key):
        return self.store.get(key)

    def setex(self, key, ttl, value):
        self.store[key] = value
        self.ttls[key] = ttl

    def delete(self, key):
        self.store.pop(key, None)
        self.ttls.pop(key, None)

    def ping(self):
        return True


class BrokenRedis:
    def get(self, key):
        raise redis.ConnectionError("down")

    def setex(self, key, ttl, value):
        raise redis.ConnectionError("down")

    def delete(self, key):
        raise redis.ConnectionError("down")

    def ping(self):
        raise redis.ConnectionError("down")


# ---------------------------------------------------------------------------
# In-memory
# ---------------------------------------------------------------------------

def test_in_memory_cache_round_trip_and_expiry(product_cache, clock):
    assert product_cache.get_products() is None

    product_cache.set_products(PRODUCTS, ttl_seconds=60)
    assert product_cache.get_products() == PRODUCTS

    clock.now += 60
    assert product_cache.get_products() is None


def test_in_memory_cache_last_write_wins(product_cache):
    product_cache.set_products(PRODUCTS, ttl_seconds=60)
    product_cache.set_products(PRODUCTS[:1], ttl_seconds=60)

    assert product_cache.get_products() == PRODUCTS[:1]


def test_in_memory_cache_returns_copies(product_cache):
    product_cache.set_products(PRODUCTS, ttl_seconds=60)

    product_cache.get_products().clear()

    assert product_cache.get_products() == PRODUCTS


def test_in_memory_cache_ignores_non_positive_ttl(product_cache):
    product_cache.set_products(PRODUCTS, ttl_seconds=0)

    assert product_cache.get_products() is None


def test_in_memory_invalidate_is_idempotent():
    cache = InMemoryProductCache()
    cache.invalidate()
    cache.set_products(PRODUCTS, ttl_seconds=60)
    cache.invalidate()
    cache.invalidate()

    assert cache.get_products() is None


# ---------------------------------------------------------------------------
# Redis
# ---------------------------------------------------------------------------

def test_redis_cache_stores_json_with_ttl():
    fake = FakeRedis()
    cache = RedisProductCache(client=fake)

    cache.set_products(PRODUCTS, ttl_seconds=60)

    assert fake.ttls[PRODUCTS_CACHE_KEY] == 60
    assert json.loads(fake.store[PRODUCTS_CACHE_KEY])[0]["name"] == "One"
    assert cache.get_products() == PRODUCTS


def test_redis_cache_invalidate():
    fake = FakeRedis()
    cache = RedisProductCache(client=fake)
    cache.set_products(PRODUCTS, ttl_seconds=60)

    cache.invalidate()
    cache.invalidate()

    assert cache.get_products() is None


def test_redis_cache_corrupt_entry_is_a_miss():
    fake = FakeRedis()
    fake.store[PRODUCTS_CACHE_KEY] = "{not json"

    assert RedisProductCache(client=fake).get_products() is None


def test_redis_cache_errors_are_misses():
    cache = RedisProductCache(client=BrokenRedis())

    cache.set_products(PRODUCTS, ttl_seconds=60)
    cache.invalidate()

    assert cache.get_products() is None
    assert cache.ping() is False


def test_redis_cache_needs_url_or_client():
    with pytest.raises(ValueError):
        RedisProductCache()


def test_redis_cache_deeply_nested_entry_is_a_miss():
    fake = FakeRedis()
    fake.store[PRODUCTS_CACHE_KEY] = "[" * 100000 + "]" * 100000

    assert RedisProductCache(client=fake).get_products() is None
