from __future__ import annotations

import json
from typing import Any, Awaitable, Callable, TypeVar

from storefront.application.cache.store import ResponseCache
from storefront.observability.logging import get_logger

__all__ = ["ReadThroughCache"]

T = TypeVar("T")

logger = get_logger(__name__)


class ReadThroughCache:
    """Cache-aside reads over a :class:`ResponseCache`.

    Values are stored as JSON strings, so loaders must return JSON-compatible
    data. Backend failures are logged and treated as a miss; they never reach
    the caller. Concurrent misses on one key may both hit the store, and the
    last ``set`` wins.
    """

    def __init__(self, cache: ResponseCache) -> None:
        self._cache = cache

    @property
    def cache(self) -> ResponseCache:
        return self._cache

    async def get_or_load(self, key: str, loader: Callable[[], Awaitable[T]]) -> T:
        cached = await self._lookup(key)
        if cached is not None:
            logger.debug("cache.hit", key=key)
            return cached  # type: ignore[return-value]

        logger.debug("cache.miss", key=key)
        # A loader that raises (e.g. NotFoundError) leaves the key unset.
        value = await loader()
        await self._store(key, value)
        return value

    async def _lookup(self, key: str) -> Any | None:
        try:
            if not await self._cache.has(key):
                return None
            raw = await self._cache.get(key)
            if raw is None:
                return None
            return json.loads(raw)
        except Exception:  # noqa: BLE001
            logger.warning("cache.read_failed", key=key, exc_info=True)
            return None

    async def _store(self, key: str, value: Any) -> None:
        try:
            await self._cache.set(key, json.dumps(value, default=str))
        except Exception:  # noqa: BLE001
            logger.warning("cache.write_failed", key=key, exc_info=True)
