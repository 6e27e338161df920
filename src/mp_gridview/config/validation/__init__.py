"""Config validation errors."""
from mp_gridview.config.validation.errors import (
    ConfigError,
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "ConfigurationError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
