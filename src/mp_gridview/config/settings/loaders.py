"""Config settings – MappingSettingsLoader, EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Mapping, TypeVar

from dotenv import load_dotenv

from mp_gridview.config.settings.base import Settings
from mp_gridview.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from mp_gridview.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})

_log = get_logger(__name__)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class MappingSettingsLoader(SettingsLoader):
    """Load settings from a flat ``KEY -> str`` mapping.

    A field ``page_param`` on a class with ``_prefix = "GRIDVIEW"`` is read
    from ``GRIDVIEW_PAGE_PARAM``.  Useful for handing over a framework's
    config dict without going through the process environment.
    """

    def __init__(self, source: Mapping[str, str]) -> None:
        self._source = source

    def load(self, settings_class: type[T]) -> T:
        prefix = getattr(settings_class, "_prefix", "")
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            key = self.key_for(prefix, field.name)
            raw = self._source.get(key)

            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(key)
                continue

            try:
                kwargs[field.name] = self._coerce(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(key, raw, str(exc)) from exc

        _log.debug("settings.loaded", settings=settings_class.__name__, keys=sorted(kwargs))
        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc

    @staticmethod
    def key_for(prefix: str, field_name: str) -> str:
        return f"{prefix}_{field_name}".upper().lstrip("_")

    def _coerce(self, value: str, type_hint: Any) -> Any:
        hint = type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", "")
        if hint == "bool":
            lowered = value.strip().lower()
            if lowered in _TRUE:
                return True
            if lowered in _FALSE:
                return False
            raise ValueError(f"expected one of {sorted(_TRUE | _FALSE)}")
        if hint == "int":
            return int(value)
        if hint == "float":
            return float(value)
        if hint.startswith("list"):
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


class EnvSettingsLoader(MappingSettingsLoader):
    """Load settings from OS environment variables."""

    def __init__(self) -> None:
        super().__init__(os.environ)


class DotenvSettingsLoader(SettingsLoader):
    """Load settings from a ``.env`` file then fall back to ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "MappingSettingsLoader", "SettingsLoader"]
