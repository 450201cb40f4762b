"""Domain errors – bad input and missing records."""

from __future__ import annotations

from typing import Any

from storefront.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a business rule is violated."""

    default_code = "domain_error"
    http_status = 422


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``fields`` lists the names of the offending fields, when known.
    """

    default_code = "validation_error"
    http_status = 400

    def __init__(
        self,
        message: str,
        *,
        fields: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.fields: list[str] = fields or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        if self.fields:
            base["fields"] = self.fields
        return base


class NotFoundError(DomainError):
    """The requested resource does not exist."""

    default_code = "not_found"
    http_status = 404

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(f"{resource} not found", **kwargs)
        self.resource = resource
        self.identifier = identifier


__all__ = [
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
