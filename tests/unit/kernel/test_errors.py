"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

from storefront.kernel.errors import (
    BaseError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)


class TestBaseError:
    def test_defaults(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"
        assert str(err) == "something went wrong"
        assert err.code == "error"
        assert err.http_status == 500
        assert err.to_dict() == {"code": "error", "message": "something went wrong"}

    def test_detail_included_when_set(self) -> None:
        err = BaseError("m", code="custom", detail={"k": 1})
        assert err.to_dict() == {"code": "custom", "message": "m", "detail": {"k": 1}}

    def test_response_body(self) -> None:
        body = NotFoundError("Product").to_response("req-1")
        assert body == {
            "success": False,
            "code": "not_found",
            "message": "Product not found",
            "correlation_id": "req-1",
        }

    def test_http_status_per_class(self) -> None:
        assert ValidationError("m").http_status == 400
        assert NotFoundError("Order").http_status == 404
        assert DomainError("m").http_status == 422
        assert UpstreamError("mongodb").http_status == 502
        assert InfrastructureError("m").http_status == 503


class TestDomainErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(ValidationError, DomainError)
        assert issubclass(NotFoundError, DomainError)
        assert not issubclass(UpstreamError, DomainError)

    def test_validation_fields(self) -> None:
        err = ValidationError("Please add all fields", fields=["name", "price"])
        assert err.to_dict() == {
            "code": "validation_error",
            "message": "Please add all fields",
            "fields": ["name", "price"],
        }

    def test_not_found_message(self) -> None:
        err = NotFoundError("Order", "abc")
        assert err.message == "Order not found"
        assert err.resource == "Order"
        assert err.identifier == "abc"
        assert err.code == "not_found"


class TestUpstreamError:
    def test_default_message(self) -> None:
        err = UpstreamError("mongodb")
        assert isinstance(err, InfrastructureError)
        assert err.message == "Upstream service 'mongodb' failed"
        assert err.status_code is None

    def test_status_code(self) -> None:
        err = UpstreamError("cloudinary", "HTTP 500", status_code=500)
        assert err.service == "cloudinary"
        assert err.status_code == 500
