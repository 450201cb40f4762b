"""
storefront – e-commerce REST backend.

Import path convention::

    from storefront.kernel.errors import NotFoundError
    from storefront.application.cache import CacheKey, CacheInvalidator, InvalidationRequest
    from storefront.app import create_app
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
