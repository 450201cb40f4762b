"""MongoDB adapter – products collection."""

from __future__ import annotations

from typing import Any

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING

from storefront.adapters.mongodb.repository import MongoRepository
from storefront.domain import Product, ProductRepository, ProductSearch


class MongoProductRepository(MongoRepository[Product], ProductRepository):
    def _to_document(self, p: Product) -> dict[str, Any]:
        return {
            "_id": ObjectId(p.id),
            "name": p.name,
            "photo": p.photo,
            "price": p.price,
            "stock": p.stock,
            "category": p.category,
            "createdAt": p.created_at,
            "updatedAt": p.updated_at,
        }

    def _from_document(self, doc: dict[str, Any]) -> Product:
        return Product(
            id=str(doc["_id"]),
            name=doc["name"],
            photo=doc["photo"],
            price=doc["price"],
            stock=doc["stock"],
            category=doc["category"],
            created_at=doc["createdAt"],
            updated_at=doc["updatedAt"],
        )

    async def latest(self, limit: int) -> list[Product]:
        return await self._find({}, sort=[("createdAt", DESCENDING)], limit=limit)

    async def categories(self) -> list[str]:
        async with self._guard("distinct"):
            return list(await self._col.distinct("category"))

    async def search(self, criteria: ProductSearch, *, skip: int, limit: int) -> list[Product]:
        options: dict[str, Any] = {"skip": skip, "limit": limit}
        if criteria.sort:
            options["sort"] = [("price", ASCENDING if criteria.sort == "asc" else DESCENDING)]
        return await self._find(criteria.to_mongo_filter(), **options)

    async def count_matching(self, criteria: ProductSearch) -> int:
        async with self._guard("count"):
            return await self._col.count_documents(criteria.to_mongo_filter())


__all__ = ["MongoProductRepository"]
