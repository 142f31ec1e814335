"""Conversions between stored color strings and :class:`QColor`.

Settings keep colors as ``#rrggbbaa``. Qt's own ``#aarrggbb`` parsing puts
alpha first, so the hex form is parsed here by hand; anything else
(``rgba(...)``, named colors) goes through Qt.
"""

from __future__ import annotations

import re
from typing import Tuple

from PySide6.QtGui import QColor

RGBA = Tuple[int, int, int, int]

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})([0-9a-fA-F]{2})?$")
_RGBA_RE = re.compile(
    r"^rgba?\(\s*([0-9.]+)\s*,\s*([0-9.]+)\s*,\s*([0-9.]+)\s*(?:,\s*([0-9.]+)\s*)?\)$"
)


def parse_hex_rgba(value: str) -> RGBA:
    """
    Parse ``#rrggbb`` or ``#rrggbbaa`` into an ``(r, g, b, a)`` tuple.

    Raises ``ValueError`` for anything else.
    """
    match = _HEX_RE.match(value.strip())
    if not match:
        raise ValueError(f"Not a hex color: {value!r}")
    rgb, alpha = match.groups()
    red, green, blue = (int(rgb[i:i + 2], 16) for i in (0, 2, 4))
    return red, green, blue, int(alpha, 16) if alpha else 255


def format_hex_rgba(rgba: RGBA) -> str:
    """``(r, g, b, a)`` -> ``#rrggbbaa`` with components clamped to 0..255."""
    return "#" + "".join(f"{max(0, min(255, int(c))):02x}" for c in rgba)


def parse_color(value: str) -> QColor:
    """Return a :class:`QColor` for a stored color string (invalid if unparsable)."""
    try:
        return QColor(*parse_hex_rgba(value))
    except ValueError:
        pass

    match = _RGBA_RE.match(value.strip())
    if match:
        red, green, blue, alpha = match.groups()
        color = QColor(int(float(red)), int(float(green)), int(float(blue)))
        if alpha is not None:
            # CSS alpha is 0..1
            color.setAlphaF(max(0.0, min(1.0, float(alpha))))
        return color

    return QColor(value.strip())


def color_to_hex(color: QColor) -> str:
    """:class:`QColor` -> ``#rrggbbaa``."""
    return format_hex_rgba((color.red(), color.green(), color.blue(), color.alpha()))


__all__ = ["color_to_hex", "format_hex_rgba", "parse_color", "parse_hex_rgba"]
