"""Observability – per-request correlation id."""
from __future__ import annotations

import contextlib
from contextvars import ContextVar
from typing import Iterator

import structlog

__all__ = ["correlation_scope", "current_correlation_id"]

_correlation_id: ContextVar[str | None] = ContextVar("storefront_correlation_id", default=None)


def current_correlation_id() -> str | None:
    """Id of the request being served, or ``None`` outside a request."""
    return _correlation_id.get()


@contextlib.contextmanager
def correlation_scope(correlation_id: str) -> Iterator[str]:
    """Make *correlation_id* current for the block and bind it into structlog's
    context vars; both are restored on exit."""
    token = _correlation_id.set(correlation_id)
    bound = structlog.contextvars.bind_contextvars(correlation_id=correlation_id)
    try:
        yield correlation_id
    finally:
        structlog.contextvars.reset_contextvars(**bound)
        _correlation_id.reset(token)
