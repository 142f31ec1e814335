"""Top-level preferences widget and window."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from PySide6.QtWidgets import QCheckBox, QMainWindow, QTabWidget, QWidget

from ..config.schema import SECTIONS
from ..config.settings_store import SettingsStore
from .binding import bind_check
from .colors import color_to_hex
from .layout import Box, BoxCapabilities, detect_capabilities
from .setting_frame import SensorLookup, SettingFrame
from .setting_kinds import GENERAL_BACKGROUND, GENERAL_CHECKS
from .widgets import ColorSelect


def _capitalize(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


class PreferencesWidget(Box):
    """
    General options on top, one tab per monitored resource below.

    Every key the store lists is routed either to the general row or to the
    :class:`SettingFrame` of its section; keys of unknown sections are ignored.
    """

    def __init__(
        self,
        store: SettingsStore,
        capabilities: Optional[BoxCapabilities] = None,
        sensor_lookup: Optional[SensorLookup] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        caps = capabilities or detect_capabilities()
        super().__init__(caps, horizontal=False, spacing=10, has_border=True, parent=parent)
        self._logger = logging.getLogger(__name__)
        self.store = store
        self.items: List[QWidget] = []

        self.settings: Dict[str, SettingFrame] = {
            section: SettingFrame(
                self.tr(_capitalize(section)),
                store,
                caps,
                sensor_lookup=sensor_lookup,
                parent=self,
            )
            for section in SECTIONS
        }

        self.hbox1 = Box(caps, horizontal=True, homogeneous=True, spacing=20, has_border=True)
        self.prepend(self.hbox1)

        for key in store.list_keys():
            if key in GENERAL_CHECKS:
                self._add_general_check(key)
            elif key == GENERAL_BACKGROUND:
                self._add_background(key)
            else:
                section = key.split("-", 1)[0]
                frame = self.settings.get(section)
                if frame is not None:
                    frame.add(key)
                else:
                    self._logger.debug("Settings key %s has no preferences section", key)

        self.notebook = QTabWidget(self)
        for section in SECTIONS:
            frame = self.settings[section]
            self.notebook.addTab(frame.frame, frame.name)
        self.add(self.notebook)

    def _add_general_check(self, key: str) -> None:
        item = QCheckBox(self.tr(GENERAL_CHECKS[key]))
        bind_check(self.store, key, item)
        self.items.append(item)
        self.hbox1.add(item)

    def _add_background(self, key: str) -> None:
        item = ColorSelect(self.tr("Background Color"))
        item.set_value(self.store.get_string(key))
        item.colorSet.connect(lambda color: self.store.set_string(key, color_to_hex(color)))
        self.items.append(item)
        self.hbox1.prepend(item)


class PreferencesWindow(QMainWindow):
    """Main window hosting :class:`PreferencesWidget`."""

    def __init__(
        self,
        store: SettingsStore,
        capabilities: Optional[BoxCapabilities] = None,
        sensor_lookup: Optional[SensorLookup] = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(self.tr("System Monitor Preferences"))
        self.store = store
        self.prefs = PreferencesWidget(
            store, capabilities=capabilities, sensor_lookup=sensor_lookup
        )
        self.setCentralWidget(self.prefs)


__all__ = ["PreferencesWidget", "PreferencesWindow"]
