"""Admin dashboard aggregates, cached under the admin keys."""
from __future__ import annotations

from collections import Counter
from typing import Any

from storefront.application.cache import CacheKey, ReadThroughCache
from storefront.domain import OrderRepository, OrderStatus, ProductRepository, UserRepository, UserRole

__all__ = ["DashboardService"]

LATEST_TRANSACTIONS = 4


class DashboardService:
    def __init__(
        self,
        products: ProductRepository,
        orders: OrderRepository,
        users: UserRepository,
        cache: ReadThroughCache,
    ) -> None:
        self._products = products
        self._orders = orders
        self._users = users
        self._cache = cache

    async def stats(self) -> dict[str, Any]:
        return await self._cache.get_or_load(CacheKey.ADMIN_STATS, self._load_stats)

    async def pie_charts(self) -> dict[str, Any]:
        return await self._cache.get_or_load(CacheKey.ADMIN_PIE_CHARTS, self._load_pie_charts)

    async def _load_stats(self) -> dict[str, Any]:
        products = await self._products.find_all()
        users = await self._users.find_all()
        orders = await self._orders.find_all()

        categories = Counter(p.category for p in products)
        genders = Counter(u.gender for u in users)
        latest = sorted(orders, key=lambda o: o.created_at, reverse=True)[:LATEST_TRANSACTIONS]

        return {
            "count": {"product": len(products), "user": len(users), "order": len(orders)},
            "revenue": sum(o.total for o in orders),
            "category_count": {
                category: round(count / len(products) * 100)
                for category, count in categories.items()
            },
            "user_ratio": {"male": genders.get("male", 0), "female": genders.get("female", 0)},
            "latest_transactions": [
                {
                    "id": o.id,
                    "discount": o.discount,
                    "amount": o.total,
                    "quantity": sum(item.quantity for item in o.order_items),
                    "status": o.status.value,
                }
                for o in latest
            ],
        }

    async def _load_pie_charts(self) -> dict[str, Any]:
        products = await self._products.find_all()
        users = await self._users.find_all()
        orders = await self._orders.find_all()

        statuses = Counter(o.status for o in orders)
        out_of_stock = sum(1 for p in products if p.stock <= 0)
        admins = sum(1 for u in users if u.role is UserRole.ADMIN)

        return {
            "order_fulfillment": {
                "processing": statuses.get(OrderStatus.PROCESSING, 0),
                "shipped": statuses.get(OrderStatus.SHIPPED, 0),
                "delivered": statuses.get(OrderStatus.DELIVERED, 0),
            },
            "product_categories": dict(Counter(p.category for p in products)),
            "stock_availability": {
                "in_stock": len(products) - out_of_stock,
                "out_of_stock": out_of_stock,
            },
            "admin_customer": {"admin": admins, "customer": len(users) - admins},
        }
