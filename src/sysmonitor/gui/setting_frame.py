"""One preferences tab: the controls for a single monitored resource.

Controls are laid out in four rows:

* row 0 - visibility checkboxes (display / show text / show in menu)
* row 1 - refresh time, graph width, display style
* row 2 - colors and the sensor chooser
* row 3 - section-specific extras

Rows 0 and 1 are kept sorted by label as keys are added.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from PySide6.QtCore import QObject
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QCheckBox, QFrame, QLabel, QVBoxLayout, QWidget

from ..config.settings_store import SettingsStore
from ..sensors.hwmon import discover
from .binding import bind_check, bind_spin
from .colors import color_to_hex
from .layout import BORDER_WIDTH, Box, BoxCapabilities
from .setting_kinds import (
    WIDGET_CHECK,
    WIDGET_COLOR,
    WIDGET_HIDDEN,
    WIDGET_SELECT,
    WIDGET_SENSOR,
    WIDGET_SPIN,
    SettingKind,
    color_title,
    kind_for,
    label_key_for,
    sensor_category_for,
    split_key,
)
from .widgets import ColorSelect, IntSelect, Select

logger = logging.getLogger(__name__)

ROW_COUNT = 4

SensorLookup = Callable[[str], Tuple[Sequence[str], Sequence[str]]]


def label_of(widget: QWidget) -> str:
    """Text used to order a row's children."""
    label_text = getattr(widget, "label_text", None)
    if callable(label_text):
        return label_text()
    text = getattr(widget, "text", None)
    if callable(text):
        return text()
    return ""


class SettingFrame(QObject):
    """
    Builds and owns the widgets of one section tab.

    Parameters
    ----------
    name:
        Tab title.
    store:
        Settings store every control reads from and writes to.
    capabilities:
        Box capabilities detected at startup.
    sensor_lookup:
        ``category -> (paths, labels)``; defaults to hwmon discovery.
    """

    def __init__(
        self,
        name: str,
        store: SettingsStore,
        capabilities: BoxCapabilities,
        sensor_lookup: Optional[SensorLookup] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.name = name
        self.store = store
        self._sensor_lookup: SensorLookup = sensor_lookup or discover
        self.items: List[QWidget] = []

        self.vbox = Box(capabilities, horizontal=False, homogeneous=True, spacing=20)
        self.rows = [
            Box(capabilities, horizontal=True, homogeneous=True, spacing=20)
            for _ in range(ROW_COUNT)
        ]
        for row in self.rows:
            self.vbox.add(row)

        self.frame = QFrame()
        self.frame.setFrameShape(QFrame.Shape.StyledPanel)
        frame_layout = QVBoxLayout(self.frame)
        frame_layout.setContentsMargins(BORDER_WIDTH, BORDER_WIDTH, BORDER_WIDTH, BORDER_WIDTH)
        frame_layout.addWidget(self.vbox)
        frame_layout.addStretch(1)

    # ------------------------------------------------------------------
    # Row helpers
    # ------------------------------------------------------------------
    @property
    def hbox0(self) -> Box:
        return self.rows[0]

    @property
    def hbox1(self) -> Box:
        return self.rows[1]

    @property
    def hbox2(self) -> Box:
        return self.rows[2]

    @property
    def hbox3(self) -> Box:
        return self.rows[3]

    def _reorder(self) -> None:
        for row in (self.hbox0, self.hbox1):
            row.sort_children(label_of)

    def _place(self, row: int, widget: QWidget, *, prepend: bool = False) -> None:
        self.items.append(widget)
        if prepend:
            self.rows[row].prepend(widget)
        else:
            self.rows[row].add(widget)

    # ------------------------------------------------------------------
    # Building controls
    # ------------------------------------------------------------------
    def add(self, key: str) -> None:
        """Create the control for ``key`` (``<section>-<option>``)."""
        section, option = split_key(key)
        kind = kind_for(option)
        if kind is None:
            logger.debug("No control for settings key %s", key)
        else:
            builder = {
                WIDGET_CHECK: self._add_check,
                WIDGET_SPIN: self._add_spin,
                WIDGET_SELECT: self._add_select,
                WIDGET_COLOR: self._add_color,
                WIDGET_SENSOR: self._add_sensor,
                WIDGET_HIDDEN: None,
            }[kind.widget]
            if builder is not None:
                builder(key, section, option, kind)

        if "gpu" in section and option == "display":
            note = QLabel(self.tr("** Only Nvidia GPUs supported so far **"))
            self._place(3, note)
        self._reorder()

    def _add_check(self, key: str, section: str, option: str, kind: SettingKind) -> None:
        item = QCheckBox(self.tr(kind.label))
        bind_check(self.store, key, item)
        self._place(kind.row, item)

    def _add_spin(self, key: str, section: str, option: str, kind: SettingKind) -> None:
        item = IntSelect(self.tr(kind.label))
        if kind.spin_args is not None:
            item.set_args(*kind.spin_args)
        bind_spin(self.store, key, item.spin)
        self._place(kind.row, item)

    def _add_select(self, key: str, section: str, option: str, kind: SettingKind) -> None:
        item = Select(self.tr(kind.label))
        item.add(self.tr(text) for text in kind.items)
        item.set_value(self.store.get_enum(key))
        item.selector.currentIndexChanged.connect(
            lambda index: self._set_enum(key, index)
        )
        self._place(kind.row, item)

    def _set_enum(self, key: str, index: int) -> None:
        if index < 0:
            return
        try:
            self.store.set_enum(key, index)
        except ValueError:
            logger.exception("Failed to store %s", key)

    def _add_color(self, key: str, section: str, option: str, kind: SettingKind) -> None:
        item = ColorSelect(self.tr(color_title(option)))
        item.set_value(self.store.get_string(key))
        item.colorSet.connect(lambda color: self._set_color(key, color))
        self._place(kind.row, item)

    def _set_color(self, key: str, color: QColor) -> None:
        self.store.set_string(key, color_to_hex(color))

    def _add_sensor(self, key: str, section: str, option: str, kind: SettingKind) -> None:
        paths, labels = self._sensor_lookup(sensor_category_for(section))
        paths, labels = list(paths), list(labels)

        item = Select(self.tr(kind.label))
        if not paths:
            item.add([self.tr("Please install lm-sensors")])
        elif len(paths) == 1:
            self.store.set_string(key, paths[0])
        item.add(labels)

        current = self.store.get_string(key)
        item.set_value(paths.index(current) if current in paths else 0)

        item.selector.currentIndexChanged.connect(
            lambda index: self._set_sensor(key, index, paths, labels)
        )
        # fan sensors go after the colors, temperature sensors before them
        self._place(kind.row, item, prepend=section != "fan")

    def _set_sensor(
        self,
        key: str,
        index: int,
        paths: Sequence[str],
        labels: Sequence[str],
    ) -> None:
        if not 0 <= index < len(paths):
            return
        self.store.set_string(key, paths[index])
        self.store.set_string(label_key_for(key), labels[index])


__all__ = ["ROW_COUNT", "SettingFrame", "label_of"]
