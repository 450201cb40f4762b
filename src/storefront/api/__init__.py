"""HTTP API – resource routers mounted under ``/api/v1``."""
from fastapi import APIRouter

from storefront.api import dashboard, orders, products, users

api_router = APIRouter()
api_router.include_router(users.router)
api_router.include_router(products.router)
api_router.include_router(orders.router)
api_router.include_router(dashboard.router)

__all__ = ["api_router"]
