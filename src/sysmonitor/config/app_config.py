"""Default application paths and configuration helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..sensors.hwmon import HWMON_ROOT

SETTINGS_FILENAME = "settings.yaml"


def _default_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg).expanduser() if xdg else Path("~/.config").expanduser()
    return base / "sysmonitor"


@dataclass
class AppPaths:
    """
    Paths used by the preferences application.

    ``SYSMONITOR_CONFIG_DIR`` overrides where ``settings.yaml`` lives and
    ``SYSMONITOR_LOCALE_DIR`` where compiled translations are looked up.
    An explicit ``config_dir`` beats both.
    """

    config_dir: Optional[Path] = None
    locale_dir: Path = field(init=False)
    settings_file: Path = field(init=False)

    def __post_init__(self) -> None:
        if self.config_dir is not None:
            self.config_dir = Path(self.config_dir).expanduser()
        else:
            env_config = os.environ.get("SYSMONITOR_CONFIG_DIR")
            if env_config:
                self.config_dir = Path(env_config).expanduser()
            else:
                self.config_dir = _default_config_dir()

        env_locale = os.environ.get("SYSMONITOR_LOCALE_DIR")
        if env_locale:
            self.locale_dir = Path(env_locale).expanduser()
        else:
            self.locale_dir = Path(__file__).resolve().parents[1] / "locale"

        self.settings_file = self.config_dir / SETTINGS_FILENAME

    def ensure(self) -> None:
        """Create the config directory if it does not yet exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)


@dataclass
class AppConfig:
    """Runtime configuration for the preferences application."""

    hwmon_root: str = field(
        default_factory=lambda: os.environ.get("SYSMONITOR_HWMON_ROOT") or HWMON_ROOT
    )
    paths: AppPaths = field(default_factory=AppPaths)


__all__ = ["AppConfig", "AppPaths", "SETTINGS_FILENAME"]
