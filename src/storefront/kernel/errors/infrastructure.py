"""Infrastructure errors – store and external-service failures."""

from __future__ import annotations

from typing import Any

from storefront.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"
    http_status = 503


class UpstreamError(InfrastructureError):
    """The document store or an external service call failed."""

    default_code = "upstream_error"
    http_status = 502

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Upstream service '{service}' failed", **kwargs)
        self.service = service
        self.status_code = status_code


__all__ = [
    "InfrastructureError",
    "UpstreamError",
]
