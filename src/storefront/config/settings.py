"""StorefrontSettings – runtime configuration of the storefront service."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from storefront.config.errors import InvalidSettingValueError

__all__ = ["StorefrontSettings"]

_CACHE_BACKENDS = ("memory", "redis")


@dataclasses.dataclass
class StorefrontSettings:
    """Every field ``name`` is read from ``STOREFRONT_<NAME>``.

    ``cache_max_entries`` of ``0`` keeps the response cache unbounded. The
    Cloudinary credentials are only required when no asset host is injected.
    """

    env_prefix: ClassVar[str] = "STOREFRONT"

    mongo_uri: str
    mongo_database: str = "storefront"
    port: int = 3000
    product_per_page: int = 8
    cache_backend: str = "memory"
    cache_max_entries: int = 0
    redis_url: str = ""
    upload_dir: str = "uploads"
    cloudinary_cloud_name: str = ""
    cloudinary_api_key: str = ""
    cloudinary_api_secret: str = ""
    log_level: str = "INFO"

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls.env_prefix}_{field_name.upper()}"

    def __post_init__(self) -> None:
        if self.product_per_page < 1:
            self._reject("product_per_page", "must be >= 1")
        if self.cache_max_entries < 0:
            self._reject("cache_max_entries", "must be >= 0")
        if self.cache_backend not in _CACHE_BACKENDS:
            self._reject("cache_backend", f"expected one of {_CACHE_BACKENDS}")
        if self.cache_backend == "redis" and not self.redis_url:
            self._reject("redis_url", "required when the cache backend is redis")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            self._reject("log_level", "unknown log level")

    def _reject(self, field_name: str, reason: str) -> None:
        raise InvalidSettingValueError(self.env_key(field_name), getattr(self, field_name), reason)

    @property
    def cloudinary_configured(self) -> bool:
        return bool(
            self.cloudinary_cloud_name and self.cloudinary_api_key and self.cloudinary_api_secret
        )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())
