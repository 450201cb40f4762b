"""Repository port – generic async repository keyed by string ids."""

from __future__ import annotations

import abc
from typing import ClassVar, Generic, TypeVar

from storefront.kernel.errors import NotFoundError

T = TypeVar("T")


class Repository(abc.ABC, Generic[T]):
    """Port: generic repository.

    Lookups return ``None`` for a missing record; :meth:`get_or_raise` turns
    that into a :class:`NotFoundError` named after :attr:`resource`.
    Concrete implementations live in ``adapters/mongodb`` and
    ``testing/fakes``.
    """

    resource: ClassVar[str] = "Resource"

    @abc.abstractmethod
    async def get(self, id: str) -> T | None: ...  # noqa: A002

    @abc.abstractmethod
    async def save(self, entity: T) -> None: ...

    @abc.abstractmethod
    async def delete(self, id: str) -> None: ...  # noqa: A002

    @abc.abstractmethod
    async def find_all(self) -> list[T]: ...

    async def get_or_raise(self, id: str) -> T:  # noqa: A002
        entity = await self.get(id)
        if entity is None:
            raise NotFoundError(self.resource, id)
        return entity


__all__ = ["Repository"]
