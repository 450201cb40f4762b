"""HTTP API – /user routes."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Response, status

from storefront.api.deps import ContainerDep
from storefront.api.schemas import NewUserBody

router = APIRouter(prefix="/user", tags=["user"])


@router.post("/new", status_code=status.HTTP_201_CREATED)
async def new_user(body: NewUserBody, container: ContainerDep, response: Response) -> dict[str, Any]:
    user, created = await container.users.register(body.to_domain())
    if not created:
        response.status_code = status.HTTP_200_OK
    return {"success": True, "message": f"Welcome, {user.name}"}


@router.get("/all")
async def all_users(container: ContainerDep) -> dict[str, Any]:
    users = await container.users.list()
    return {"success": True, "users": [u.to_dict() for u in users]}


@router.get("/{user_id}")
async def get_user(user_id: str, container: ContainerDep) -> dict[str, Any]:
    user = await container.users.get(user_id)
    return {"success": True, "user": user.to_dict()}


@router.delete("/{user_id}")
async def delete_user(user_id: str, container: ContainerDep) -> dict[str, Any]:
    await container.users.delete(user_id)
    return {"success": True, "message": "User deleted successfully"}
