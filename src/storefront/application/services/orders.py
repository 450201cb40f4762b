"""Order use cases: placement with stock reduction, processing, deletion."""
from __future__ import annotations

from typing import Any

from storefront.application.cache import CacheInvalidator, CacheKey, InvalidationRequest, ReadThroughCache
from storefront.domain import NewOrder, Order, OrderItem, OrderRepository, ProductRepository, UserRepository
from storefront.kernel.errors import ValidationError
from storefront.observability.logging import get_logger

__all__ = ["OrderService"]

logger = get_logger(__name__)


class OrderService:
    def __init__(
        self,
        orders: OrderRepository,
        products: ProductRepository,
        users: UserRepository,
        cache: ReadThroughCache,
        invalidator: CacheInvalidator,
    ) -> None:
        self._orders = orders
        self._products = products
        self._users = users
        self._cache = cache
        self._invalidator = invalidator

    async def my_orders(self, user_id: str) -> list[dict[str, Any]]:
        async def load() -> list[dict[str, Any]]:
            return [o.to_dict() for o in await self._orders.find_by_user(user_id)]

        return await self._cache.get_or_load(CacheKey.my_orders(user_id), load)

    async def all_orders(self) -> list[dict[str, Any]]:
        async def load() -> list[dict[str, Any]]:
            return [await self._with_user(o) for o in await self._orders.find_all()]

        return await self._cache.get_or_load(CacheKey.ALL_ORDERS, load)

    async def get(self, order_id: str) -> dict[str, Any]:
        async def load() -> dict[str, Any]:
            return await self._with_user(await self._orders.get_or_raise(order_id))

        return await self._cache.get_or_load(CacheKey.order(order_id), load)

    async def place(self, request: NewOrder) -> Order:
        order = request.build()
        await self._check_stock(order.order_items)

        await self._orders.save(order)
        await self._reduce_stock(order.order_items)

        await self._invalidator.invalidate(
            InvalidationRequest(
                product=True,
                admin=True,
                order=True,
                user_id=order.user,
                product_id=order.product_ids,
            )
        )
        logger.info("order.placed", order_id=order.id, user_id=order.user)
        return order

    async def process(self, order_id: str) -> Order:
        order = await self._orders.get_or_raise(order_id)
        order.advance_status()
        await self._orders.save(order)

        await self._invalidator.invalidate(
            InvalidationRequest(admin=True, order=True, user_id=order.user, order_id=order.id)
        )
        logger.info("order.processed", order_id=order.id, status=order.status.value)
        return order

    async def delete(self, order_id: str) -> None:
        order = await self._orders.get_or_raise(order_id)
        await self._orders.delete(order.id)

        await self._invalidator.invalidate(
            InvalidationRequest(admin=True, order=True, user_id=order.user, order_id=order.id)
        )
        logger.info("order.deleted", order_id=order.id)

    async def _check_stock(self, items: list[OrderItem]) -> None:
        for item in items:
            product = await self._products.get(item.product_id)
            if product is None or product.stock < item.quantity:
                raise ValidationError("Invalid product or insufficient stock", fields=["order_items"])

    async def _reduce_stock(self, items: list[OrderItem]) -> None:
        for item in items:
            product = await self._products.get_or_raise(item.product_id)
            product.stock -= item.quantity
            await self._products.save(product)

    async def _with_user(self, order: Order) -> dict[str, Any]:
        data = order.to_dict()
        user = await self._users.get(order.user)
        data["user"] = {"id": order.user, "name": user.name if user else None}
        return data
