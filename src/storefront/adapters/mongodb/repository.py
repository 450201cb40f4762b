"""MongoDB adapter – MongoRepository generic base."""

from __future__ import annotations

import contextlib
from abc import abstractmethod
from typing import Any, AsyncIterator, Generic, TypeVar

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from storefront.kernel.ddd import Repository
from storefront.kernel.errors import UpstreamError

T = TypeVar("T")


def connect(uri: str) -> AsyncIOMotorClient:
    """Return a motor client for *uri*; the caller owns and closes it."""
    return AsyncIOMotorClient(uri, tz_aware=True)


class MongoRepository(Repository[T], Generic[T]):
    """Generic MongoDB repository.

    Subclasses implement :meth:`_to_document` and :meth:`_from_document`.
    The document ``"_id"`` is an ``ObjectId`` when :attr:`object_ids` is
    true (products, orders) and the raw string otherwise (users). An id
    that cannot be an ObjectId matches nothing.

    Driver failures surface as :class:`UpstreamError`.
    """

    object_ids: bool = True

    def __init__(self, collection: Any) -> None:
        self._col = collection

    # ------------------------------------------------------------------
    # Abstract serialisation hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def _to_document(self, entity: T) -> dict[str, Any]:
        """Return a BSON-compatible dict for *entity* (must include ``"_id"``)."""

    @abstractmethod
    def _from_document(self, doc: dict[str, Any]) -> T:
        """Reconstruct an entity from a MongoDB document."""

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _key(self, id: str) -> Any:  # noqa: A002
        if not self.object_ids:
            return id
        return ObjectId(id) if ObjectId.is_valid(id) else None

    @contextlib.asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except PyMongoError as exc:
            raise UpstreamError(
                "mongodb", f"{self.resource} {operation} failed: {exc}"
            ) from exc

    async def _find(self, query: dict[str, Any], **options: Any) -> list[T]:
        async with self._guard("find"):
            cursor = self._col.find(query, **options)
            return [self._from_document(doc) async for doc in cursor]

    # ------------------------------------------------------------------
    # Repository interface
    # ------------------------------------------------------------------

    async def get(self, id: str) -> T | None:  # noqa: A002
        key = self._key(id)
        if key is None:
            return None
        async with self._guard("get"):
            doc = await self._col.find_one({"_id": key})
        return self._from_document(doc) if doc is not None else None

    async def save(self, entity: T) -> None:
        """Upsert the entity document keyed by ``_id``."""
        doc = self._to_document(entity)
        async with self._guard("save"):
            await self._col.replace_one({"_id": doc["_id"]}, doc, upsert=True)

    async def delete(self, id: str) -> None:  # noqa: A002
        key = self._key(id)
        if key is None:
            return
        async with self._guard("delete"):
            await self._col.delete_one({"_id": key})

    async def find_all(self) -> list[T]:
        return await self._find({})


__all__ = ["MongoRepository", "connect"]
