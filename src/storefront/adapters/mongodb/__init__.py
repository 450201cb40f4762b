"""MongoDB adapter – motor-backed repositories."""

from storefront.adapters.mongodb.orders import MongoOrderRepository
from storefront.adapters.mongodb.products import MongoProductRepository
from storefront.adapters.mongodb.repository import MongoRepository, connect
from storefront.adapters.mongodb.users import MongoUserRepository

__all__ = [
    "MongoOrderRepository",
    "MongoProductRepository",
    "MongoRepository",
    "MongoUserRepository",
    "connect",
]
