"""Application cache – keys, stores, read-through loading and invalidation."""
from storefront.application.cache.invalidation import CacheInvalidator, InvalidationRequest, stale_keys
from storefront.application.cache.keys import CacheKey
from storefront.application.cache.read_through import ReadThroughCache
from storefront.application.cache.store import InMemoryResponseCache, ResponseCache

__all__ = [
    "CacheInvalidator",
    "CacheKey",
    "InMemoryResponseCache",
    "InvalidationRequest",
    "ReadThroughCache",
    "ResponseCache",
    "stale_keys",
]
