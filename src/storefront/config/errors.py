"""Config errors, raised while reading ``STOREFRONT_*`` variables."""
from __future__ import annotations

from storefront.kernel.errors import BaseError

__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]


class ConfigError(BaseError):
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """*env_key* is unset and the service cannot start without it."""

    default_code = "missing_required_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(f"{env_key} must be set")
        self.setting_name = env_key


class InvalidSettingValueError(ConfigError):
    default_code = "invalid_setting_value"

    def __init__(self, env_key: str, value: object, reason: str) -> None:
        super().__init__(f"{env_key}={value!r} is invalid: {reason}", detail={"reason": reason})
        self.setting_name = env_key
        self.value = value
