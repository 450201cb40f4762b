"""User use cases. User reads are not cached.

Order reads embed the ordering user's name, so deleting a user also clears
that user's cached orders.
"""
from __future__ import annotations

from storefront.application.cache import CacheInvalidator, InvalidationRequest
from storefront.domain import NewUser, OrderRepository, User, UserRepository
from storefront.observability.logging import get_logger

__all__ = ["UserService"]

logger = get_logger(__name__)


class UserService:
    def __init__(self, users: UserRepository, orders: OrderRepository, invalidator: CacheInvalidator) -> None:
        self._users = users
        self._orders = orders
        self._invalidator = invalidator

    async def register(self, request: NewUser) -> tuple[User, bool]:
        """Create the user, or return the existing one.

        Returns ``(user, created)``.
        """
        if request.id:
            existing = await self._users.get(request.id)
            if existing is not None:
                return existing, False

        user = request.build()
        await self._users.save(user)
        # user counts feed the dashboard aggregates
        await self._invalidator.invalidate(InvalidationRequest(admin=True))
        logger.info("user.created", user_id=user.id)
        return user, True

    async def list(self) -> list[User]:
        return await self._users.find_all()

    async def get(self, user_id: str) -> User:
        return await self._users.get_or_raise(user_id)

    async def delete(self, user_id: str) -> None:
        user = await self._users.get_or_raise(user_id)
        orders = await self._orders.find_by_user(user.id)
        await self._users.delete(user.id)
        await self._invalidator.invalidate(
            InvalidationRequest(
                admin=True,
                order=True,
                user_id=user.id,
                order_id=[o.id for o in orders],
            )
        )
        logger.info("user.deleted", user_id=user.id)
