"""HTTP API – /dashboard routes."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from storefront.api.deps import ContainerDep

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats")
async def stats(container: ContainerDep) -> dict[str, Any]:
    return {"success": True, "stats": await container.dashboard.stats()}


@router.get("/pie")
async def pie_charts(container: ContainerDep) -> dict[str, Any]:
    return {"success": True, "charts": await container.dashboard.pie_charts()}
