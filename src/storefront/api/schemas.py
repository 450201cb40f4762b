"""HTTP API – request bodies.

Fields the use cases require are optional here so that a missing field
reaches the domain and fails with the service's own validation message.
"""
from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from storefront.domain import NewOrder, NewUser, OrderItem, ShippingInfo


class ShippingInfoBody(BaseModel):
    address: str
    city: str
    state: str
    country: str
    pin_code: int


class OrderItemBody(BaseModel):
    name: str
    photo: str
    price: float
    quantity: int = Field(ge=1)
    product_id: str


class NewOrderBody(BaseModel):
    shipping_info: ShippingInfoBody | None = None
    order_items: list[OrderItemBody] | None = None
    user: str | None = None
    sub_total: float | None = None
    tax: float | None = None
    total: float | None = None
    shipping_charges: float = 0
    discount: float = 0

    def to_domain(self) -> NewOrder:
        return NewOrder(
            shipping_info=ShippingInfo(**self.shipping_info.model_dump()) if self.shipping_info else None,
            order_items=(
                [OrderItem(**item.model_dump()) for item in self.order_items]
                if self.order_items is not None
                else None
            ),
            user=self.user,
            sub_total=self.sub_total,
            tax=self.tax,
            total=self.total,
            shipping_charges=self.shipping_charges,
            discount=self.discount,
        )


class NewUserBody(BaseModel):
    id: str | None = None
    name: str | None = None
    email: str | None = None
    photo: str | None = None
    gender: str | None = None
    dob: date | None = None

    def to_domain(self) -> NewUser:
        return NewUser(**self.model_dump())


__all__ = ["NewOrderBody", "NewUserBody", "OrderItemBody", "ShippingInfoBody"]
