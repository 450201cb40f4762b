"""Domain – users, products and orders."""
from storefront.domain.order import (
    NewOrder,
    Order,
    OrderItem,
    OrderRepository,
    OrderStatus,
    ShippingInfo,
)
from storefront.domain.product import NewProduct, Product, ProductChanges, ProductRepository, ProductSearch
from storefront.domain.user import NewUser, User, UserRepository, UserRole

__all__ = [
    "NewOrder",
    "NewProduct",
    "NewUser",
    "Order",
    "OrderItem",
    "OrderRepository",
    "OrderStatus",
    "Product",
    "ProductChanges",
    "ProductRepository",
    "ProductSearch",
    "ShippingInfo",
    "User",
    "UserRepository",
    "UserRole",
]
