"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    └── ApplicationError     (application.py)
        └── ConfigError      (mp_gridview.config.validation)
            ├── ConfigurationError
            ├── MissingRequiredSettingError
            └── InvalidSettingValueError
"""

from mp_gridview.kernel.errors.application import ApplicationError
from mp_gridview.kernel.errors.base import BaseError
from mp_gridview.kernel.errors.domain import DomainError, ValidationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ValidationError",
]
