"""Product use cases.

Reads go through :class:`ReadThroughCache`; every mutation awaits
:meth:`CacheInvalidator.invalidate` before returning, so a caller that sees
the result can never read a stale cached product list afterwards.
"""
from __future__ import annotations

import dataclasses
import math
from pathlib import Path
from typing import Any

from storefront.application.assets import AssetHost, public_id_from_url
from storefront.application.cache import CacheInvalidator, CacheKey, InvalidationRequest, ReadThroughCache
from storefront.domain import NewProduct, Product, ProductChanges, ProductRepository, ProductSearch
from storefront.kernel.errors import ValidationError
from storefront.observability.logging import get_logger

__all__ = ["ProductSearchResult", "ProductService"]

logger = get_logger(__name__)

LATEST_LIMIT = 5


@dataclasses.dataclass(frozen=True)
class ProductSearchResult:
    products: list[dict[str, Any]]
    total_page: int


class ProductService:
    def __init__(
        self,
        products: ProductRepository,
        cache: ReadThroughCache,
        invalidator: CacheInvalidator,
        assets: AssetHost,
        per_page: int = 8,
    ) -> None:
        self._products = products
        self._cache = cache
        self._invalidator = invalidator
        self._assets = assets
        self._per_page = per_page

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def latest(self) -> list[dict[str, Any]]:
        async def load() -> list[dict[str, Any]]:
            return [p.to_dict() for p in await self._products.latest(LATEST_LIMIT)]

        return await self._cache.get_or_load(CacheKey.LATEST_PRODUCTS, load)

    async def categories(self) -> list[str]:
        return await self._cache.get_or_load(CacheKey.CATEGORIES, self._products.categories)

    async def admin_products(self) -> list[dict[str, Any]]:
        async def load() -> list[dict[str, Any]]:
            return [p.to_dict() for p in await self._products.find_all()]

        return await self._cache.get_or_load(CacheKey.ALL_PRODUCTS, load)

    async def get(self, product_id: str) -> dict[str, Any]:
        async def load() -> dict[str, Any]:
            product = await self._products.get_or_raise(product_id)
            return product.to_dict()

        return await self._cache.get_or_load(CacheKey.product(product_id), load)

    async def search(self, criteria: ProductSearch, page: int = 1) -> ProductSearchResult:
        """Paginated, filtered search. Never cached."""
        page = max(page, 1)
        skip = self._per_page * (page - 1)
        products = await self._products.search(criteria, skip=skip, limit=self._per_page)
        total = await self._products.count_matching(criteria)
        return ProductSearchResult(
            products=[p.to_dict() for p in products],
            total_page=math.ceil(total / self._per_page),
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def create(self, fields: NewProduct, photo: Path | None) -> Product:
        if photo is None:
            raise ValidationError("Please add photo", fields=["photo"])
        fields.validate()

        photo_url = await self._assets.upload(photo)
        product = fields.build(photo_url)
        await self._products.save(product)

        await self._invalidator.invalidate(InvalidationRequest(product=True, admin=True))
        logger.info("product.created", product_id=product.id)
        return product

    async def update(self, product_id: str, changes: ProductChanges, photo: Path | None = None) -> Product:
        product = await self._products.get_or_raise(product_id)

        if photo is not None:
            new_url = await self._assets.upload(photo)
            await self._destroy_photo(product)
            product.photo = new_url

        product.apply(changes)
        await self._products.save(product)

        await self._invalidator.invalidate(
            InvalidationRequest(product=True, admin=True, product_id=product.id)
        )
        logger.info("product.updated", product_id=product.id)
        return product

    async def delete(self, product_id: str) -> None:
        product = await self._products.get_or_raise(product_id)
        await self._destroy_photo(product)
        await self._products.delete(product.id)

        await self._invalidator.invalidate(
            InvalidationRequest(product=True, admin=True, product_id=product.id)
        )
        logger.info("product.deleted", product_id=product.id)

    async def _destroy_photo(self, product: Product) -> None:
        if not product.photo:
            return
        public_id = public_id_from_url(product.photo)
        if public_id:
            await self._assets.destroy(public_id)
