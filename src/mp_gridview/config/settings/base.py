"""Config settings – Settings base class for URL-facing configuration."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_gridview.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Fields listed in ``_query_params`` hold the names of URL query parameters.
    Every listed name must be non-empty and no two may collide, otherwise a
    generated link would overwrite one value with another.  That check runs
    before the subclass ``_validate`` hook.
    """

    _prefix: ClassVar[str] = ""
    _query_params: ClassVar[tuple[str, ...]] = ()

    def __post_init__(self) -> None:
        self._check_query_params()
        self._validate()

    def query_params(self) -> dict[str, str]:
        """Return ``field -> configured parameter name`` for ``_query_params``."""
        return {field: getattr(self, field) for field in self._query_params}

    def _check_query_params(self) -> None:
        claimed: dict[str, str] = {}
        for field, name in self.query_params().items():
            if not name:
                raise InvalidSettingValueError(field, name, "must not be empty")
            if name in claimed:
                raise InvalidSettingValueError(field, name, f"already used by {claimed[name]}")
            claimed[name] = field

    def _validate(self) -> None:
        """Override to add cross-field validation."""


__all__ = ["Settings"]
