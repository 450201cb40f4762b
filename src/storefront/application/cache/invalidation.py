"""Application cache – InvalidationRequest and CacheInvalidator.

Every product or order mutation describes itself with an
:class:`InvalidationRequest`; the invalidator turns that into the exact set of
keys whose cached value may now be stale and deletes them. It never touches
the document store.
"""
from __future__ import annotations

import dataclasses
from typing import Sequence

from storefront.application.cache.keys import CacheKey
from storefront.application.cache.store import ResponseCache
from storefront.observability.logging import get_logger

__all__ = ["CacheInvalidator", "InvalidationRequest", "stale_keys"]

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class InvalidationRequest:
    """What kind of mutation happened, and to which records.

    ``product_id`` and ``order_id`` accept a single id or a sequence of ids.
    """

    product: bool = False
    admin: bool = False
    order: bool = False
    user_id: str | None = None
    order_id: str | Sequence[str] | None = None
    product_id: str | Sequence[str] | None = None

    @property
    def product_ids(self) -> tuple[str, ...]:
        return _ids(self.product_id)

    @property
    def order_ids(self) -> tuple[str, ...]:
        return _ids(self.order_id)


def _ids(value: str | Sequence[str] | None) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in value)


def stale_keys(request: InvalidationRequest) -> list[str]:
    """Return the keys *request* invalidates, in order and without duplicates."""
    keys: list[str] = []

    if request.product:
        keys += [CacheKey.LATEST_PRODUCTS, CacheKey.ALL_PRODUCTS, CacheKey.CATEGORIES]
        keys += [CacheKey.product(pid) for pid in request.product_ids]

    if request.order:
        keys.append(CacheKey.ALL_ORDERS)
        keys += [CacheKey.order(oid) for oid in request.order_ids]
        if request.user_id:
            keys.append(CacheKey.my_orders(request.user_id))

    if request.admin:
        keys += list(CacheKey.DASHBOARD)
        if request.product:
            keys.append(CacheKey.ALL_PRODUCTS)
        if request.order:
            keys.append(CacheKey.ALL_ORDERS)

    return list(dict.fromkeys(keys))


class CacheInvalidator:
    """Deletes every cache key an :class:`InvalidationRequest` may have made stale.

    Deletion is unconditional, so invoking it twice with the same request
    leaves the cache in the same state as invoking it once. Mutation handlers
    must await :meth:`invalidate` before producing their response.
    """

    def __init__(self, cache: ResponseCache) -> None:
        self._cache = cache

    async def invalidate(self, request: InvalidationRequest) -> list[str]:
        keys = stale_keys(request)
        for key in keys:
            try:
                await self._cache.delete(key)
            except Exception:  # noqa: BLE001
                logger.error("cache.delete_failed", key=key, exc_info=True)
        logger.info("cache.invalidated", keys=keys)
        return keys
