"""Kernel – repository port."""
from storefront.kernel.ddd.repository import Repository

__all__ = ["Repository"]
