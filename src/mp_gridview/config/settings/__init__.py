"""Config settings – 12-factor env-based configuration."""
from mp_gridview.config.settings.base import Settings
from mp_gridview.config.settings.gridview import GridViewSettings
from mp_gridview.config.settings.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    MappingSettingsLoader,
    SettingsLoader,
)

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "GridViewSettings",
    "MappingSettingsLoader",
    "Settings",
    "SettingsLoader",
]
