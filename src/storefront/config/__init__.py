"""Config – ``STOREFRONT_*`` environment configuration."""
from storefront.config.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from storefront.config.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader, load_settings
from storefront.config.settings import StorefrontSettings

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SettingsLoader",
    "StorefrontSettings",
    "load_settings",
]
