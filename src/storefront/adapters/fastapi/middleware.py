"""FastAPI adapter – CorrelationIdMiddleware."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any
from uuid import uuid4

from storefront.observability.correlation import correlation_scope

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Message, Receive, Scope, Send


class CorrelationIdMiddleware:
    """Serve each HTTP request inside a :func:`correlation_scope`.

    The id is taken from ``X-Correlation-ID``, then ``X-Request-ID``, else a
    new UUID4, and is echoed back in ``X-Correlation-ID``.
    """

    request_headers = (b"x-correlation-id", b"x-request-id")
    response_header = b"x-correlation-id"

    def __init__(self, app: "ASGIApp") -> None:
        self.app = app

    def _incoming_id(self, scope: "Scope") -> str | None:
        headers = dict(scope.get("headers", []))
        for name in self.request_headers:
            value = headers.get(name, b"").decode().strip()
            if value:
                return value
        return None

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        correlation_id = self._incoming_id(scope) or str(uuid4())
        encoded = correlation_id.encode()

        async def send_with_header(message: "Message") -> None:
            if message["type"] == "http.response.start":
                headers: list[Any] = [*message.get("headers", []), (self.response_header, encoded)]
                message = {**message, "headers": headers}
            await send(message)

        with correlation_scope(correlation_id):
            await self.app(scope, receive, send_with_header)


__all__ = ["CorrelationIdMiddleware"]
