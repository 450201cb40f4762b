"""Observability – structured logging helpers."""
from storefront.observability.logging.factory import JsonLoggerFactory
from storefront.observability.logging.processors import CorrelationProcessor, get_logger

__all__ = [
    "CorrelationProcessor",
    "JsonLoggerFactory",
    "get_logger",
]
