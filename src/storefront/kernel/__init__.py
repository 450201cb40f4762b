"""Kernel – framework-agnostic building blocks."""

from storefront.kernel.errors import (
    BaseError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)

__all__ = [
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "NotFoundError",
    "UpstreamError",
    "ValidationError",
]
