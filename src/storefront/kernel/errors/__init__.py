"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   └── NotFoundError
    └── InfrastructureError  (infrastructure.py)
        └── UpstreamError
"""

from storefront.kernel.errors.base import BaseError
from storefront.kernel.errors.domain import (
    DomainError,
    NotFoundError,
    ValidationError,
)
from storefront.kernel.errors.infrastructure import (
    InfrastructureError,
    UpstreamError,
)

__all__ = [
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "NotFoundError",
    "UpstreamError",
    "ValidationError",
]
