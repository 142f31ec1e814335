"""How each per-section option is edited.

Every key below a section is ``<section>-<option>``. Instead of matching the
option string in a long conditional, :data:`KINDS` maps each recognised
option to a :class:`SettingKind` record and :func:`kind_for` resolves the
pattern options (``*-color``, ``sensor-file``, ``sensor-label``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

WIDGET_CHECK = "check"
WIDGET_SPIN = "spin"
WIDGET_SELECT = "select"
WIDGET_COLOR = "color"
WIDGET_SENSOR = "sensor"
WIDGET_HIDDEN = "hidden"


@dataclass(frozen=True)
class SettingKind:
    """Widget type, row and presentation details for one option."""

    widget: str
    row: int
    label: str = ""
    # spin boxes: (minimum, maximum, step, page)
    spin_args: Optional[Tuple[int, int, int, int]] = None
    # select boxes: item labels in enum order
    items: Tuple[str, ...] = ()


KINDS: Dict[str, SettingKind] = {
    # row 0
    "display": SettingKind(WIDGET_CHECK, 0, "Display"),
    "show-text": SettingKind(WIDGET_CHECK, 0, "Show Text"),
    "show-menu": SettingKind(WIDGET_CHECK, 0, "Show In Menu"),
    # row 1
    "refresh-time": SettingKind(
        WIDGET_SPIN, 1, "Refresh Time", spin_args=(50, 100000, 1000, 5000)
    ),
    "graph-width": SettingKind(WIDGET_SPIN, 1, "Graph Width", spin_args=(1, 1000, 1, 10)),
    "style": SettingKind(WIDGET_SELECT, 1, "Display Style", items=("digit", "graph", "both")),
    # row 3
    "speed-in-bits": SettingKind(WIDGET_CHECK, 3, "Show network speed in bits"),
    "individual-cores": SettingKind(WIDGET_CHECK, 3, "Display Individual Cores"),
    "time": SettingKind(WIDGET_CHECK, 3, "Show Time Remaining"),
    "hidesystem": SettingKind(WIDGET_CHECK, 3, "Hide System Icon"),
    "usage-style": SettingKind(WIDGET_SELECT, 3, "Usage Style", items=("pie", "bar", "none")),
    "fahrenheit-unit": SettingKind(WIDGET_CHECK, 3, "Display temperature in Fahrenheit"),
    "threshold": SettingKind(
        WIDGET_SPIN, 3, "Temperature threshold (0 to disable)", spin_args=(0, 300, 5, 5)
    ),
}

COLOR_KIND = SettingKind(WIDGET_COLOR, 2)
SENSOR_FILE_KIND = SettingKind(WIDGET_SENSOR, 2, "Sensor")
SENSOR_LABEL_KIND = SettingKind(WIDGET_HIDDEN, 3)

# General (section-less) options shown above the tabs
GENERAL_CHECKS: Dict[str, str] = {
    "icon-display": "Display Icon",
    "center-display": "Display in the Middle",
    "compact-display": "Compact Display",
    "show-tooltip": "Show tooltip",
    "move-clock": "Move the clock",
}
GENERAL_BACKGROUND = "background"


def split_key(key: str) -> Tuple[str, str]:
    """Split ``cpu-refresh-time`` into ``("cpu", "refresh-time")``."""
    section, _, option = key.partition("-")
    return section, option


def kind_for(option: str) -> Optional[SettingKind]:
    """Return the :class:`SettingKind` for ``option`` or ``None`` if unsupported."""
    kind = KINDS.get(option)
    if kind is not None:
        return kind
    if option.endswith("-color"):
        return COLOR_KIND
    if "sensor-file" in option:
        return SENSOR_FILE_KIND
    if "sensor-label" in option:
        return SENSOR_LABEL_KIND
    return None


def color_title(option: str) -> str:
    """``"downerrors-color"`` -> ``"Downerrors"`` (first part, word-capitalised)."""
    first = option.split("-", 1)[0]
    return " ".join(word[:1].upper() + word[1:] for word in first.split(" "))


def sensor_category_for(section: str) -> str:
    """Sensor discovery category used to populate a section's sensor select."""
    return "fan" if section == "fan" else "temp"


def label_key_for(file_key: str) -> str:
    """``thermal-sensor-file`` -> ``thermal-sensor-label``."""
    return file_key.replace("file", "label")


__all__ = [
    "COLOR_KIND",
    "GENERAL_BACKGROUND",
    "GENERAL_CHECKS",
    "KINDS",
    "SENSOR_FILE_KIND",
    "SENSOR_LABEL_KIND",
    "SettingKind",
    "WIDGET_CHECK",
    "WIDGET_COLOR",
    "WIDGET_HIDDEN",
    "WIDGET_SELECT",
    "WIDGET_SENSOR",
    "WIDGET_SPIN",
    "color_title",
    "kind_for",
    "label_key_for",
    "sensor_category_for",
    "split_key",
]
