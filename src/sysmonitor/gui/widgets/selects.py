from __future__ import annotations

from typing import Iterable, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor, QKeyEvent
from PySide6.QtWidgets import (
    QColorDialog,
    QComboBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QWidget,
)

from ..colors import color_to_hex, parse_color


class _LabelledControl(QWidget):
    """A ``"<name>:"`` label followed by one control."""

    def __init__(
        self,
        name: str,
        parent: Optional[QWidget] = None,
        *,
        homogeneous: bool = True,
        spacing: int = 5,
    ) -> None:
        super().__init__(parent)
        self._name = name
        self.label = QLabel(self.tr("{name}:").format(name=name), self)
        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(spacing)
        self._stretch = 1 if homogeneous else 0
        self._layout.addWidget(self.label, self._stretch)

    def _add_control(self, control: QWidget) -> None:
        self._layout.addWidget(control, self._stretch)

    def label_text(self) -> str:
        return self.label.text()


class ColorSelect(_LabelledControl):
    """Label plus a swatch button that opens a color chooser with alpha."""

    colorSet = Signal(QColor)

    def __init__(self, name: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(name, parent, homogeneous=False)
        self._color = QColor(0, 0, 0, 255)
        self.picker = QPushButton(self)
        self.picker.setFixedWidth(48)
        self.picker.clicked.connect(self._choose_color)
        self._add_control(self.picker)
        self._update_swatch()

    def color(self) -> QColor:
        return QColor(self._color)

    def set_color(self, color: QColor) -> None:
        self._color = QColor(color)
        self._update_swatch()

    def set_value(self, value: str) -> None:
        """Show the stored ``#rrggbbaa`` (or any Qt-parsable) color."""
        color = parse_color(value)
        if color.isValid():
            self.set_color(color)

    def hex_value(self) -> str:
        return color_to_hex(self._color)

    def _update_swatch(self) -> None:
        c = self._color
        self.picker.setStyleSheet(
            f"background: rgba({c.red()}, {c.green()}, {c.blue()}, {c.alpha()});"
        )
        self.picker.setToolTip(self.hex_value())

    def _choose_color(self) -> None:
        color = QColorDialog.getColor(
            self._color,
            self,
            self._name,
            QColorDialog.ColorDialogOption.ShowAlphaChannel,
        )
        if color.isValid():
            self.set_color(color)
            self.colorSet.emit(QColor(color))


class PagedSpinBox(QSpinBox):
    """Spin box whose PageUp/PageDown step is independent of the single step."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.page_step = 10

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() in (Qt.Key.Key_PageUp, Qt.Key.Key_PageDown):
            delta = self.page_step if event.key() == Qt.Key.Key_PageUp else -self.page_step
            self.setValue(self.value() + delta)
            event.accept()
            return
        super().keyPressEvent(event)


class IntSelect(_LabelledControl):
    """Label plus a numeric spin box."""

    def __init__(self, name: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(name, parent, spacing=0)
        self.spin = PagedSpinBox(self)
        self._add_control(self.spin)

    def set_args(self, minv: int, maxv: int, incre: int, page: int) -> None:
        self.spin.setRange(minv, maxv)
        self.spin.setSingleStep(incre)
        self.spin.page_step = page

    def set_value(self, value: int) -> None:
        self.spin.setValue(int(value))

    def value(self) -> int:
        return self.spin.value()


class Select(_LabelledControl):
    """Label plus a combo box of plain text items."""

    def __init__(self, name: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(name, parent)
        self.selector = QComboBox(self)
        self._add_control(self.selector)

    def add(self, items: Iterable[str]) -> None:
        for item in items:
            self.selector.addItem(item)

    def set_value(self, index: int) -> None:
        """Select item ``index``; out-of-range indices select the first item."""
        if not 0 <= index < self.selector.count():
            index = 0
        self.selector.setCurrentIndex(index)

    def active(self) -> int:
        return self.selector.currentIndex()

    def items(self) -> list[str]:
        return [self.selector.itemText(i) for i in range(self.selector.count())]
