"""Settings loaders – process environment and ``.env`` file."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any

from dotenv import load_dotenv

from storefront.config.errors import InvalidSettingValueError, MissingRequiredSettingError
from storefront.config.settings import StorefrontSettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "load_settings"]

_COERCERS = {"int": int, "float": float}


class SettingsLoader(abc.ABC):
    @abc.abstractmethod
    def load(self) -> StorefrontSettings: ...


class EnvSettingsLoader(SettingsLoader):
    """Build :class:`StorefrontSettings` from ``os.environ``.

    Unset variables fall back to the field default; ``int`` and ``float``
    fields are parsed, anything unparsable raises
    :class:`InvalidSettingValueError` naming the variable.
    """

    def load(self) -> StorefrontSettings:
        values: dict[str, Any] = {}
        for field in dataclasses.fields(StorefrontSettings):
            env_key = StorefrontSettings.env_key(field.name)
            raw = os.environ.get(env_key)
            if raw is None:
                if field.default is dataclasses.MISSING:
                    raise MissingRequiredSettingError(env_key)
                continue
            values[field.name] = self._parse(env_key, raw, field.type)
        return StorefrontSettings(**values)

    @staticmethod
    def _parse(env_key: str, raw: str, type_name: Any) -> Any:
        # annotations are strings under postponed evaluation
        coerce = _COERCERS.get(getattr(type_name, "__name__", type_name))
        if coerce is None:
            return raw
        try:
            return coerce(raw)
        except ValueError as exc:
            raise InvalidSettingValueError(env_key, raw, str(exc)) from exc


class DotenvSettingsLoader(SettingsLoader):
    """Read *env_file* into the environment, then load like :class:`EnvSettingsLoader`.

    Variables already set in the process win unless *override* is true.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self) -> StorefrontSettings:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load()


def load_settings(loader: SettingsLoader | None = None) -> StorefrontSettings:
    """Load settings, reading ``.env`` first by default."""
    return (loader or DotenvSettingsLoader()).load()
