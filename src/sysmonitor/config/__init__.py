"""Configuration objects and helpers for the preferences application.

:mod:`schema` fixes the settings keys (types, defaults, enum choices),
:mod:`settings_store` keeps their values in ``settings.yaml`` and
:mod:`app_config` resolves where that file and the translations live.
The store is handed explicitly to every GUI component that edits settings.
"""

from .app_config import AppConfig, AppPaths
from .schema import SCHEMA, SECTIONS, SettingKey
from .settings_store import SettingsStore

__all__ = [
    "AppConfig",
    "AppPaths",
    "SCHEMA",
    "SECTIONS",
    "SettingKey",
    "SettingsStore",
]
