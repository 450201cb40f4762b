"""Order entity, placement request and repository port."""

from __future__ import annotations

import abc
import dataclasses
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from storefront.domain.ids import new_object_id
from storefront.kernel.ddd import Repository
from storefront.kernel.errors import ValidationError


class OrderStatus(str, Enum):
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"


@dataclasses.dataclass(frozen=True)
class ShippingInfo:
    address: str
    city: str
    state: str
    country: str
    pin_code: int

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


@dataclasses.dataclass(frozen=True)
class OrderItem:
    name: str
    photo: str
    price: float
    quantity: int
    product_id: str

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


@dataclasses.dataclass
class Order:
    shipping_info: ShippingInfo
    user: str
    sub_total: float
    tax: float
    total: float
    order_items: list[OrderItem]
    shipping_charges: float = 0
    discount: float = 0
    status: OrderStatus = OrderStatus.PROCESSING
    id: str = dataclasses.field(default_factory=new_object_id)
    created_at: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))

    @property
    def product_ids(self) -> list[str]:
        return [item.product_id for item in self.order_items]

    def advance_status(self) -> OrderStatus:
        """Processing → Shipped → Delivered; anything else lands on Delivered."""
        if self.status is OrderStatus.PROCESSING:
            self.status = OrderStatus.SHIPPED
        else:
            self.status = OrderStatus.DELIVERED
        self.updated_at = datetime.now(UTC)
        return self.status

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "shipping_info": self.shipping_info.to_dict(),
            "user": self.user,
            "sub_total": self.sub_total,
            "tax": self.tax,
            "shipping_charges": self.shipping_charges,
            "discount": self.discount,
            "total": self.total,
            "status": self.status.value,
            "order_items": [item.to_dict() for item in self.order_items],
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


@dataclasses.dataclass(frozen=True)
class NewOrder:
    shipping_info: ShippingInfo | None = None
    order_items: list[OrderItem] | None = None
    user: str | None = None
    sub_total: float | None = None
    tax: float | None = None
    total: float | None = None
    shipping_charges: float = 0
    discount: float = 0

    _REQUIRED = ("shipping_info", "order_items", "user", "sub_total", "tax", "total")

    def validate(self) -> None:
        missing = [
            name
            for name in self._REQUIRED
            if getattr(self, name) is None or getattr(self, name) in ("", [])
        ]
        if missing:
            raise ValidationError("Please enter all fields", fields=missing)

    def build(self) -> Order:
        self.validate()
        return Order(
            shipping_info=self.shipping_info,  # type: ignore[arg-type]
            order_items=list(self.order_items or []),
            user=self.user,  # type: ignore[arg-type]
            sub_total=self.sub_total,  # type: ignore[arg-type]
            tax=self.tax,  # type: ignore[arg-type]
            total=self.total,  # type: ignore[arg-type]
            shipping_charges=self.shipping_charges,
            discount=self.discount,
        )


class OrderRepository(Repository[Order]):
    resource = "Order"

    @abc.abstractmethod
    async def find_by_user(self, user_id: str) -> list[Order]: ...


__all__ = [
    "NewOrder",
    "Order",
    "OrderItem",
    "OrderRepository",
    "OrderStatus",
    "ShippingInfo",
]
