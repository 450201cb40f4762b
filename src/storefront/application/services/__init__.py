"""Application services – one per resource, driven by the HTTP routers."""
from storefront.application.services.dashboard import DashboardService
from storefront.application.services.orders import OrderService
from storefront.application.services.products import ProductSearchResult, ProductService
from storefront.application.services.users import UserService

__all__ = [
    "DashboardService",
    "OrderService",
    "ProductSearchResult",
    "ProductService",
    "UserService",
]
