"""Application cache – ResponseCache port and in-memory implementation."""
from __future__ import annotations

from collections import OrderedDict
from typing import Protocol, runtime_checkable

__all__ = ["InMemoryResponseCache", "ResponseCache"]


@runtime_checkable
class ResponseCache(Protocol):
    """String key → serialized JSON string. No TTL."""

    async def has(self, key: str) -> bool: ...
    async def get(self, key: str) -> str | None: ...
    async def set(self, key: str, value: str) -> None: ...
    async def delete(self, key: str) -> None: ...
    async def close(self) -> None: ...


class InMemoryResponseCache:
    """Process-local ResponseCache.

    With ``max_entries=0`` (the default) entries are never evicted and memory
    grows with every distinct key. A positive ``max_entries`` evicts the least
    recently used entry once the bound is exceeded.
    """

    def __init__(self, max_entries: int = 0) -> None:
        if max_entries < 0:
            raise ValueError("max_entries must be >= 0")
        self._max_entries = max_entries
        self._data: OrderedDict[str, str] = OrderedDict()

    def __len__(self) -> int:
        return len(self._data)

    def keys(self) -> list[str]:
        return list(self._data)

    async def has(self, key: str) -> bool:
        return key in self._data

    async def get(self, key: str) -> str | None:
        value = self._data.get(key)
        if value is not None and self._max_entries:
            self._data.move_to_end(key)
        return value

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value
        if self._max_entries:
            self._data.move_to_end(key)
            while len(self._data) > self._max_entries:
                self._data.popitem(last=False)

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    async def close(self) -> None:
        self._data.clear()
