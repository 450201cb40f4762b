"""Process-wide wiring: one cache, one asset host, one set of repositories.

Built when the app starts and closed when it stops; handlers receive it
through ``app.state`` rather than importing module globals.
"""
from __future__ import annotations

import dataclasses
from typing import Awaitable, Callable

from storefront.adapters.cloudinary import CloudinaryAssetHost
from storefront.adapters.fastapi import ReadinessCheck
from storefront.adapters.mongodb import (
    MongoOrderRepository,
    MongoProductRepository,
    MongoUserRepository,
    connect,
)
from storefront.adapters.redis import RedisResponseCache
from storefront.application.assets import AssetHost
from storefront.application.cache import (
    CacheInvalidator,
    InMemoryResponseCache,
    ReadThroughCache,
    ResponseCache,
)
from storefront.application.services import DashboardService, OrderService, ProductService, UserService
from storefront.config import MissingRequiredSettingError, StorefrontSettings
from storefront.domain import OrderRepository, ProductRepository, UserRepository
from storefront.observability.logging import get_logger

__all__ = ["Container", "Repositories", "build_cache", "build_container"]

logger = get_logger(__name__)


@dataclasses.dataclass
class Repositories:
    products: ProductRepository
    orders: OrderRepository
    users: UserRepository


@dataclasses.dataclass
class Container:
    settings: StorefrontSettings
    cache: ResponseCache
    invalidator: CacheInvalidator
    repositories: Repositories
    products: ProductService
    orders: OrderService
    users: UserService
    dashboard: DashboardService
    readiness_checks: list[ReadinessCheck] = dataclasses.field(default_factory=list)
    closers: list[Callable[[], Awaitable[None]]] = dataclasses.field(default_factory=list)

    async def ready(self) -> bool:
        for check in self.readiness_checks:
            if not await check():
                return False
        return True

    async def close(self) -> None:
        await _close_all(self.closers)


def build_cache(settings: StorefrontSettings) -> ResponseCache:
    if settings.cache_backend == "redis":
        return RedisResponseCache(settings.redis_url)
    return InMemoryResponseCache(max_entries=settings.cache_max_entries)


async def build_container(
    settings: StorefrontSettings,
    *,
    cache: ResponseCache | None = None,
    repositories: Repositories | None = None,
    asset_host: AssetHost | None = None,
) -> Container:
    """Assemble the services. Components passed in are used as-is and left
    open on :meth:`Container.close`; the ones built here are closed, including
    when assembly itself fails part-way."""
    if asset_host is None and not settings.cloudinary_configured:
        raise MissingRequiredSettingError(StorefrontSettings.env_key("cloudinary_cloud_name"))

    closers: list[Callable[[], Awaitable[None]]] = []
    checks: list[ReadinessCheck] = []
    try:
        if repositories is None:
            repositories = _mongo_repositories(settings, closers, checks)

        if cache is None:
            cache = build_cache(settings)
            closers.append(cache.close)

        if asset_host is None:
            asset_host = CloudinaryAssetHost(
                settings.cloudinary_cloud_name,
                settings.cloudinary_api_key,
                settings.cloudinary_api_secret,
            )
            closers.append(asset_host.close)
    except BaseException:
        await _close_all(closers)
        raise

    read_through = ReadThroughCache(cache)
    invalidator = CacheInvalidator(cache)
    logger.info("container.built", cache_backend=type(cache).__name__)

    return Container(
        settings=settings,
        cache=cache,
        invalidator=invalidator,
        repositories=repositories,
        products=ProductService(
            repositories.products,
            read_through,
            invalidator,
            asset_host,
            per_page=settings.product_per_page,
        ),
        orders=OrderService(
            repositories.orders,
            repositories.products,
            repositories.users,
            read_through,
            invalidator,
        ),
        users=UserService(repositories.users, repositories.orders, invalidator),
        dashboard=DashboardService(
            repositories.products,
            repositories.orders,
            repositories.users,
            read_through,
        ),
        readiness_checks=checks,
        closers=closers,
    )


def _mongo_repositories(
    settings: StorefrontSettings,
    closers: list[Callable[[], Awaitable[None]]],
    checks: list[ReadinessCheck],
) -> Repositories:
    client = connect(settings.mongo_uri)
    db = client[settings.mongo_database]

    async def mongodb() -> bool:
        await client.admin.command("ping")
        return True

    async def close_client() -> None:
        client.close()

    checks.append(mongodb)
    closers.append(close_client)
    return Repositories(
        products=MongoProductRepository(db["products"]),
        orders=MongoOrderRepository(db["orders"]),
        users=MongoUserRepository(db["users"]),
    )


async def _close_all(closers: list[Callable[[], Awaitable[None]]]) -> None:
    for closer in reversed(closers):
        await closer()
    closers.clear()
