"""Product entity, its write models and the repository port."""

from __future__ import annotations

import abc
import dataclasses
import re
from datetime import UTC, datetime
from typing import Any, Literal

from storefront.domain.ids import new_object_id
from storefront.kernel.ddd import Repository
from storefront.kernel.errors import ValidationError

SortOrder = Literal["asc", "desc"]


@dataclasses.dataclass
class Product:
    name: str
    photo: str
    price: float
    stock: int
    category: str
    id: str = dataclasses.field(default_factory=new_object_id)
    created_at: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        self.category = self.category.lower()

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation, as served over HTTP and cached."""
        return {
            "id": self.id,
            "name": self.name,
            "photo": self.photo,
            "price": self.price,
            "stock": self.stock,
            "category": self.category,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    def apply(self, changes: "ProductChanges") -> None:
        if changes.name:
            self.name = changes.name
        if changes.price is not None:
            self.price = changes.price
        if changes.stock is not None:
            self.stock = changes.stock
        if changes.category:
            self.category = changes.category.lower()
        self.updated_at = datetime.now(UTC)


@dataclasses.dataclass(frozen=True)
class NewProduct:
    name: str | None = None
    price: float | None = None
    stock: int | None = None
    category: str | None = None

    def validate(self) -> None:
        missing = [
            f.name
            for f in dataclasses.fields(self)
            if getattr(self, f.name) is None or getattr(self, f.name) == ""
        ]
        if missing:
            raise ValidationError("Please add all fields", fields=missing)

    def build(self, photo_url: str) -> Product:
        self.validate()
        return Product(
            name=self.name,  # type: ignore[arg-type]
            photo=photo_url,
            price=self.price,  # type: ignore[arg-type]
            stock=self.stock,  # type: ignore[arg-type]
            category=self.category,  # type: ignore[arg-type]
        )


@dataclasses.dataclass(frozen=True)
class ProductChanges:
    """Partial update; ``None`` (or an empty string) leaves a field untouched."""

    name: str | None = None
    price: float | None = None
    stock: int | None = None
    category: str | None = None


@dataclasses.dataclass(frozen=True)
class ProductSearch:
    """Filter for the paginated product search.

    ``search`` is a case-insensitive substring of the name, ``max_price`` an
    inclusive upper bound, ``sort`` orders by price.
    """

    search: str | None = None
    category: str | None = None
    max_price: float | None = None
    sort: SortOrder | None = None

    def to_mongo_filter(self) -> dict[str, Any]:
        query: dict[str, Any] = {}
        if self.search:
            query["name"] = {"$regex": re.escape(self.search), "$options": "i"}
        if self.max_price is not None:
            query["price"] = {"$lte": self.max_price}
        if self.category:
            query["category"] = self.category
        return query

    def is_satisfied_by(self, product: Product) -> bool:
        if self.search and self.search.lower() not in product.name.lower():
            return False
        if self.max_price is not None and product.price > self.max_price:
            return False
        if self.category and product.category != self.category:
            return False
        return True


class ProductRepository(Repository[Product]):
    resource = "Product"

    @abc.abstractmethod
    async def latest(self, limit: int) -> list[Product]:
        """Most recently created products first."""

    @abc.abstractmethod
    async def categories(self) -> list[str]:
        """Distinct category values."""

    @abc.abstractmethod
    async def search(self, criteria: ProductSearch, *, skip: int, limit: int) -> list[Product]: ...

    @abc.abstractmethod
    async def count_matching(self, criteria: ProductSearch) -> int: ...


__all__ = [
    "NewProduct",
    "Product",
    "ProductChanges",
    "ProductRepository",
    "ProductSearch",
    "SortOrder",
]
