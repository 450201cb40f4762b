"""FastAPI adapter – health router."""
from __future__ import annotations

from typing import Awaitable, Callable

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from storefront.observability.logging import get_logger

logger = get_logger(__name__)

ReadinessCheck = Callable[[], Awaitable[bool]]


def HealthRouter(
    path: str = "/health",
    readiness_checks: list[ReadinessCheck] | None = None,
) -> APIRouter:
    """Return a liveness + readiness health-check router.

    Liveness is at ``{path}/live``, readiness at ``{path}/ready``. Every
    readiness check must return ``True`` for a 200; otherwise 503.
    """
    router = APIRouter(tags=["ops"])
    checks = readiness_checks or []

    @router.get(f"{path}/live")
    async def liveness() -> dict[str, str]:
        return {"status": "ok"}

    @router.get(f"{path}/ready")
    async def readiness() -> JSONResponse:
        results: dict[str, bool] = {}
        for check in checks:
            name = getattr(check, "__name__", repr(check))
            try:
                ok = await check()
            except Exception:  # noqa: BLE001
                logger.warning("readiness.check_failed", check=name, exc_info=True)
                ok = False
            results[name] = ok

        all_ok = all(results.values())
        return JSONResponse(
            status_code=200 if all_ok else 503,
            content={"status": "ok" if all_ok else "degraded", "checks": results},
        )

    return router


__all__ = ["HealthRouter", "ReadinessCheck"]
