"""Root of the storefront error hierarchy."""

from __future__ import annotations

from typing import Any, ClassVar


class BaseError(Exception):
    """An error the API reports to its caller.

    ``code`` is a stable slug for clients; ``http_status`` is the status the
    FastAPI layer answers with. ``detail`` carries optional extra context and
    is included in the body only when non-empty.
    """

    default_code: ClassVar[str] = "error"
    http_status: ClassVar[int] = 500

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.detail:
            payload["detail"] = self.detail
        return payload

    def to_response(self, correlation_id: str | None) -> dict[str, Any]:
        """Error body: ``{"success": false, "code", "message", "correlation_id", ...}``."""
        return {"success": False, **self.to_dict(), "correlation_id": correlation_id}


__all__ = ["BaseError"]
