"""Application cache – CacheKey builder.

Every cache key the service reads or invalidates comes from here, so that
population and invalidation always agree on the exact key shape.
"""
from __future__ import annotations

__all__ = ["CacheKey"]


class CacheKey:
    """Factory for deterministic cache key strings."""

    ALL_PRODUCTS = "all-products"
    LATEST_PRODUCTS = "latest-products"
    CATEGORIES = "categories"
    ALL_ORDERS = "all-orders"
    ADMIN_STATS = "admin-stats"
    ADMIN_PIE_CHARTS = "admin-pie-charts"

    DASHBOARD: tuple[str, ...] = (ADMIN_STATS, ADMIN_PIE_CHARTS)

    @staticmethod
    def product(product_id: str) -> str:
        return f"product-{product_id}"

    @staticmethod
    def order(order_id: str) -> str:
        return f"order-{order_id}"

    @staticmethod
    def my_orders(user_id: str) -> str:
        return f"my-orders-{user_id}"
