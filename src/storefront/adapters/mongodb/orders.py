"""MongoDB adapter – orders collection."""

from __future__ import annotations

from typing import Any

from bson import ObjectId

from storefront.adapters.mongodb.repository import MongoRepository
from storefront.domain import Order, OrderItem, OrderRepository, OrderStatus, ShippingInfo


class MongoOrderRepository(MongoRepository[Order], OrderRepository):
    def _to_document(self, o: Order) -> dict[str, Any]:
        return {
            "_id": ObjectId(o.id),
            "shippingInfo": {
                "address": o.shipping_info.address,
                "city": o.shipping_info.city,
                "state": o.shipping_info.state,
                "country": o.shipping_info.country,
                "pinCode": o.shipping_info.pin_code,
            },
            "user": o.user,
            "subTotal": o.sub_total,
            "tax": o.tax,
            "shippingCharges": o.shipping_charges,
            "discount": o.discount,
            "total": o.total,
            "status": o.status.value,
            "orderItems": [
                {
                    "name": item.name,
                    "photo": item.photo,
                    "price": item.price,
                    "quantity": item.quantity,
                    "productId": ObjectId(item.product_id),
                }
                for item in o.order_items
            ],
            "createdAt": o.created_at,
            "updatedAt": o.updated_at,
        }

    def _from_document(self, doc: dict[str, Any]) -> Order:
        info = doc["shippingInfo"]
        return Order(
            id=str(doc["_id"]),
            shipping_info=ShippingInfo(
                address=info["address"],
                city=info["city"],
                state=info["state"],
                country=info["country"],
                pin_code=info["pinCode"],
            ),
            user=doc["user"],
            sub_total=doc["subTotal"],
            tax=doc["tax"],
            shipping_charges=doc.get("shippingCharges", 0),
            discount=doc.get("discount", 0),
            total=doc["total"],
            status=OrderStatus(doc.get("status", OrderStatus.PROCESSING.value)),
            order_items=[
                OrderItem(
                    name=item["name"],
                    photo=item["photo"],
                    price=item["price"],
                    quantity=item["quantity"],
                    product_id=str(item["productId"]),
                )
                for item in doc.get("orderItems", [])
            ],
            created_at=doc["createdAt"],
            updated_at=doc["updatedAt"],
        )

    async def find_by_user(self, user_id: str) -> list[Order]:
        return await self._find({"user": user_id})


__all__ = ["MongoOrderRepository"]
