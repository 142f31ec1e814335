"""Box containers used to lay out the preferences form.

Toolkit differences are resolved once: :func:`detect_capabilities` inspects
the running Qt and returns a :class:`BoxCapabilities` record that every
:class:`Box` consults, so no widget code branches on toolkit versions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from PySide6.QtCore import qVersion
from PySide6.QtWidgets import QBoxLayout, QHBoxLayout, QVBoxLayout, QWidget

BORDER_WIDTH = 10


@dataclass(frozen=True)
class BoxCapabilities:
    """What a box of the running toolkit can do natively."""

    can_prepend: bool = True
    supports_homogeneous: bool = True
    qt_major: int = 6


def detect_capabilities(version: Optional[str] = None) -> BoxCapabilities:
    """Build the capability record for Qt ``version`` (defaults to the running Qt)."""
    raw = version if version is not None else qVersion()
    try:
        major = int(str(raw).split(".", 1)[0])
    except ValueError:
        major = 6
    # Qt layouts have always supported insertion at index 0; homogeneous
    # spacing is emulated with equal stretch factors on every Qt release.
    return BoxCapabilities(can_prepend=True, supports_homogeneous=True, qt_major=major)


class Box(QWidget):
    """
    Horizontal or vertical container with ``add``/``prepend`` helpers.

    When ``homogeneous`` is set every child gets the same stretch so the
    available space is split evenly.
    """

    def __init__(
        self,
        capabilities: BoxCapabilities,
        *,
        horizontal: bool = False,
        spacing: Optional[int] = None,
        has_border: bool = False,
        homogeneous: bool = False,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._caps = capabilities
        self._homogeneous = homogeneous and capabilities.supports_homogeneous
        self.horizontal = horizontal

        layout: QBoxLayout = QHBoxLayout(self) if horizontal else QVBoxLayout(self)
        if spacing is not None:
            layout.setSpacing(spacing)
        if has_border:
            layout.setContentsMargins(BORDER_WIDTH, BORDER_WIDTH, BORDER_WIDTH, BORDER_WIDTH)
        else:
            layout.setContentsMargins(0, 0, 0, 0)
        self._layout = layout

    @property
    def homogeneous(self) -> bool:
        return self._homogeneous

    def _stretch(self) -> int:
        return 1 if self._homogeneous else 0

    def add(self, widget: QWidget) -> None:
        """Append ``widget`` after the existing children."""
        self._layout.addWidget(widget, self._stretch())

    append = add

    def prepend(self, widget: QWidget) -> None:
        """Insert ``widget`` before the existing children."""
        if self._caps.can_prepend:
            self._layout.insertWidget(0, widget, self._stretch())
        else:
            self.add(widget)

    def children_widgets(self) -> List[QWidget]:
        """Return the child widgets in layout order."""
        widgets = []
        for index in range(self._layout.count()):
            widget = self._layout.itemAt(index).widget()
            if widget is not None:
                widgets.append(widget)
        return widgets

    def sort_children(self, key: Callable[[QWidget], str]) -> None:
        """Re-insert children ordered by ``key`` (case-insensitive)."""
        widgets = self.children_widgets()
        ordered = sorted(widgets, key=lambda w: key(w).casefold())
        if ordered == widgets:
            return
        for widget in widgets:
            self._layout.removeWidget(widget)
        for widget in ordered:
            self._layout.addWidget(widget, self._stretch())


__all__ = ["BORDER_WIDTH", "Box", "BoxCapabilities", "detect_capabilities"]
