"""Redis adapter – RedisResponseCache."""
from __future__ import annotations

from typing import Any


def _require_redis() -> Any:
    try:
        import redis.asyncio as aioredis
        return aioredis
    except ImportError as exc:
        raise ImportError("Install 'storefront[redis]' to use the Redis cache backend") from exc


class RedisResponseCache:
    """ResponseCache backed by Redis, shared across worker processes.

    Keys are namespaced with *key_prefix* and stored without expiry.
    """

    def __init__(self, url: str, key_prefix: str = "storefront:", **kwargs: Any) -> None:
        aioredis = _require_redis()
        self._client = aioredis.from_url(url, decode_responses=True, **kwargs)
        self._prefix = key_prefix

    def _k(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def has(self, key: str) -> bool:
        return bool(await self._client.exists(self._k(key)))

    async def get(self, key: str) -> str | None:
        return await self._client.get(self._k(key))

    async def set(self, key: str, value: str) -> None:
        await self._client.set(self._k(key), value)

    async def delete(self, key: str) -> None:
        await self._client.delete(self._k(key))

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["RedisResponseCache"]
