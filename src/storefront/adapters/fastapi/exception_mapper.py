"""FastAPI adapter – StorefrontExceptionMapper."""
from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.kernel.errors import BaseError, ValidationError
from storefront.observability.correlation import current_correlation_id
from storefront.observability.logging import get_logger

logger = get_logger(__name__)

# request locations FastAPI prefixes onto each error ``loc``
_LOCATIONS = frozenset({"body", "query", "path", "header", "cookie"})


def validation_error_from(exc: RequestValidationError) -> ValidationError:
    """Fold FastAPI's request-parsing errors into one :class:`ValidationError`."""
    fields: list[str] = []
    problems: list[str] = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in _LOCATIONS]
        field = ".".join(loc) or "request"
        fields.append(field)
        problems.append(f"{field}: {error.get('msg', 'invalid')}")
    return ValidationError("Invalid request: " + "; ".join(problems), fields=fields)


class StorefrontExceptionMapper:
    """Answer every :class:`BaseError` with its ``http_status`` and the body::

        {"success": false, "code": "not_found", "message": "...", "correlation_id": "..."}

    ``ValidationError`` → 400, ``NotFoundError`` → 404, ``UpstreamError`` → 502,
    ``InfrastructureError`` → 503, other ``DomainError`` → 422. Malformed
    request bodies, forms and query strings become a ``ValidationError``.
    """

    def register(self, app: FastAPI) -> None:
        app.add_exception_handler(BaseError, self._handle)  # type: ignore[arg-type]
        app.add_exception_handler(RequestValidationError, self._handle_request_validation)  # type: ignore[arg-type]

    def _handle(self, request: Request, exc: BaseError) -> JSONResponse:
        status = exc.http_status
        log = logger.error if status >= 500 else logger.info
        log("request.failed", status=status, code=exc.code, path=request.url.path)
        return JSONResponse(status_code=status, content=exc.to_response(current_correlation_id()))

    def _handle_request_validation(self, request: Request, exc: RequestValidationError) -> JSONResponse:
        return self._handle(request, validation_error_from(exc))


__all__ = ["StorefrontExceptionMapper", "validation_error_from"]
