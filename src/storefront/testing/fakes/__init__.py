"""Testing fakes – in-memory doubles for repositories, cache and asset host."""
from storefront.testing.fakes.asset_host import RecordingAssetHost
from storefront.testing.fakes.cache import FlakyResponseCache
from storefront.testing.fakes.repositories import (
    InMemoryOrderRepository,
    InMemoryProductRepository,
    InMemoryUserRepository,
    in_memory_repositories,
)

__all__ = [
    "FlakyResponseCache",
    "InMemoryOrderRepository",
    "InMemoryProductRepository",
    "InMemoryUserRepository",
    "RecordingAssetHost",
    "in_memory_repositories",
]
