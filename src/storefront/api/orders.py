"""HTTP API – /order routes."""
from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Query, status

from storefront.api.deps import ContainerDep
from storefront.api.schemas import NewOrderBody

router = APIRouter(prefix="/order", tags=["order"])


@router.post("/new", status_code=status.HTTP_201_CREATED)
async def new_order(body: NewOrderBody, container: ContainerDep) -> dict[str, Any]:
    await container.orders.place(body.to_domain())
    return {"success": True, "message": "Order placed successfully"}


@router.get("/my")
async def my_orders(container: ContainerDep, user_id: Annotated[str, Query(alias="id")]) -> dict[str, Any]:
    return {"success": True, "orders": await container.orders.my_orders(user_id)}


@router.get("/all")
async def all_orders(container: ContainerDep) -> dict[str, Any]:
    return {"success": True, "orders": await container.orders.all_orders()}


@router.get("/{order_id}")
async def get_order(order_id: str, container: ContainerDep) -> dict[str, Any]:
    return {"success": True, "order": await container.orders.get(order_id)}


@router.put("/{order_id}")
async def process_order(order_id: str, container: ContainerDep) -> dict[str, Any]:
    await container.orders.process(order_id)
    return {"success": True, "message": "Order processed successfully"}


@router.delete("/{order_id}")
async def delete_order(order_id: str, container: ContainerDep) -> dict[str, Any]:
    await container.orders.delete(order_id)
    return {"success": True, "message": "Order deleted successfully"}
