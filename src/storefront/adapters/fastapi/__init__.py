"""FastAPI adapter – exception mapper, correlation middleware, health router, uploads."""
from storefront.adapters.fastapi.exception_mapper import StorefrontExceptionMapper
from storefront.adapters.fastapi.middleware import CorrelationIdMiddleware
from storefront.adapters.fastapi.routers import HealthRouter, ReadinessCheck
from storefront.adapters.fastapi.uploads import staged_upload

__all__ = [
    "CorrelationIdMiddleware",
    "HealthRouter",
    "ReadinessCheck",
    "StorefrontExceptionMapper",
    "staged_upload",
]
