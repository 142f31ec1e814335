"""Qt application entry point for the SysMonitor preferences window.

This module wires up argument parsing and logging, opens the settings store,
installs translations, builds the
:class:`~sysmonitor.gui.prefs_window.PreferencesWindow` and starts the Qt
event loop. ``--list-sensors`` prints hwmon discovery results instead and
never touches Qt widgets.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO, Tuple

import yaml

from PySide6.QtCore import QLocale, QTranslator
from PySide6.QtWidgets import QApplication

from ..config.app_config import AppConfig, AppPaths
from ..config.settings_store import SettingsStore
from ..sensors.hwmon import SensorCategory, discover
from .layout import detect_capabilities
from .prefs_window import PreferencesWindow

logger = logging.getLogger(__name__)

TRANSLATION_DOMAIN = "sysmonitor"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SysMonitor preferences")
    parser.add_argument(
        "--config-dir",
        type=str,
        default=None,
        help="Directory holding settings.yaml (default: $SYSMONITOR_CONFIG_DIR "
        "or ~/.config/sysmonitor)",
    )
    parser.add_argument(
        "--hwmon-root",
        type=str,
        default=None,
        help="hwmon class directory to scan for sensors (default: /sys/class/hwmon)",
    )
    parser.add_argument(
        "--list-sensors",
        choices=[category.value for category in SensorCategory],
        default=None,
        help="Print the discovered sensors of this kind and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def _parse_cli_args(
    argv: list[str],
) -> tuple[argparse.Namespace, list[str]]:
    parser = _build_arg_parser()
    args, qt_args = parser.parse_known_args(argv[1:])
    qt_argv = [argv[0], *qt_args]
    return args, qt_argv


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


def install_translations(
    app: QApplication,
    locale_dir: Path,
    locale: Optional[str] = None,
) -> Optional[QTranslator]:
    """
    Load ``sysmonitor_<locale>.qm`` from ``locale_dir`` into ``app``.

    Returns the installed translator (keep a reference) or ``None`` when no
    catalogue matches.
    """
    locale_dir = Path(locale_dir)
    if not locale_dir.is_dir():
        logger.debug("No translations directory at %s", locale_dir)
        return None

    translator = QTranslator(app)
    qlocale = QLocale(locale) if locale else QLocale.system()
    if not translator.load(qlocale, TRANSLATION_DOMAIN, "_", str(locale_dir)):
        logger.debug("No %s translation for %s in %s", TRANSLATION_DOMAIN, qlocale.name(), locale_dir)
        return None
    app.installTranslator(translator)
    logger.info("Loaded translations for %s from %s", qlocale.name(), locale_dir)
    return translator


def list_sensors(category: str, root: str, out: Optional[TextIO] = None) -> int:
    """Print ``label<TAB>path`` per discovered sensor; return a process exit code."""
    out = out if out is not None else sys.stdout
    paths, labels = discover(category, root)
    if not paths:
        print("No sensors found. Please install lm-sensors.", file=sys.stderr)
        return 1
    for path, label in zip(paths, labels):
        print(f"{label}\t{path}", file=out)
    return 0


def open_store(app_config: AppConfig) -> SettingsStore:
    """Open the YAML-backed settings store for ``app_config``."""
    app_config.paths.ensure()
    return SettingsStore(app_config.paths.settings_file)


def create_app(
    argv: list[str] | None = None,
    *,
    app_config: AppConfig | None = None,
    store: SettingsStore | None = None,
) -> Tuple[QApplication, PreferencesWindow]:
    """
    Create the QApplication and the preferences window.

    Parameters
    ----------
    argv:
        Optional argument list to pass to :class:`QApplication`.
    app_config:
        Paths and hwmon root; defaults are resolved from the environment.
    store:
        Settings store to edit; opened from ``app_config`` when omitted.

    Returns
    -------
    app:
        The QApplication instance (owned by caller).
    window:
        The preferences window with every section tab built.
    """
    qt_args = argv if argv is not None else sys.argv
    app_config = app_config or AppConfig()
    app = QApplication.instance() or QApplication(qt_args)
    app.setApplicationName("SysMonitor Preferences")

    install_translations(app, app_config.paths.locale_dir)

    if store is None:
        store = open_store(app_config)

    hwmon_root = app_config.hwmon_root
    window = PreferencesWindow(
        store,
        capabilities=detect_capabilities(),
        sensor_lookup=lambda category: discover(category, hwmon_root),
    )
    return app, window


def main(argv: list[str] | None = None) -> None:
    raw_argv = argv if argv is not None else sys.argv
    args, qt_argv = _parse_cli_args(raw_argv)
    configure_logging(args.verbose)

    paths = AppPaths(config_dir=Path(args.config_dir) if args.config_dir else None)
    app_config = AppConfig(paths=paths)
    if args.hwmon_root:
        app_config.hwmon_root = args.hwmon_root

    if args.list_sensors:
        raise SystemExit(list_sensors(args.list_sensors, app_config.hwmon_root))

    try:
        store = open_store(app_config)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        logger.error("Cannot open settings %s: %s", app_config.paths.settings_file, exc)
        raise SystemExit(1)

    app, win = create_app(qt_argv, app_config=app_config, store=store)
    win.show()
    raise SystemExit(app.exec())


if __name__ == "__main__":
    main()
