"""Settings keys edited by the preferences window.

Keys are dashed: general options use a plain name (``icon-display``) and
per-resource options are prefixed with their section (``cpu-refresh-time``).
The schema fixes each key's type and default so the store can validate values
read back from disk.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

VALUE_TYPES = ("bool", "int", "str", "enum")

SECTIONS: Tuple[str, ...] = (
    "cpu",
    "memory",
    "swap",
    "net",
    "disk",
    "gpu",
    "thermal",
    "fan",
    "freq",
    "battery",
)

DISPLAY_STYLES: Tuple[str, ...] = ("digit", "graph", "both")
USAGE_STYLES: Tuple[str, ...] = ("pie", "bar", "none")


@dataclass(frozen=True)
class SettingKey:
    """Type and default for a single settings key."""

    name: str
    value_type: str
    default: Any
    choices: Tuple[str, ...] = ()
    minimum: Optional[int] = None
    maximum: Optional[int] = None

    def __post_init__(self) -> None:
        if self.value_type not in VALUE_TYPES:
            raise ValueError(f"Unknown value type {self.value_type!r} for {self.name}")
        if self.value_type == "enum" and self.default not in self.choices:
            raise ValueError(f"Default {self.default!r} is not a choice of {self.name}")

    @property
    def section(self) -> Optional[str]:
        """Section prefix of the key, or ``None`` for general options."""
        prefix = self.name.split("-", 1)[0]
        return prefix if prefix in SECTIONS else None

    def accepts(self, value: Any) -> bool:
        """Return True when ``value`` is a valid value for this key."""
        if self.value_type == "bool":
            return isinstance(value, bool)
        if self.value_type == "int":
            # bool is an int subclass but never a valid spin value
            if isinstance(value, bool) or not isinstance(value, int):
                return False
            if self.minimum is not None and value < self.minimum:
                return False
            if self.maximum is not None and value > self.maximum:
                return False
            return True
        if self.value_type == "enum":
            return value in self.choices
        return isinstance(value, str)


def _bool(name: str, default: bool) -> SettingKey:
    return SettingKey(name, "bool", default)


def _int(name: str, default: int, minimum: int, maximum: int) -> SettingKey:
    return SettingKey(name, "int", default, minimum=minimum, maximum=maximum)


def _str(name: str, default: str) -> SettingKey:
    return SettingKey(name, "str", default)


def _enum(name: str, default: str, choices: Tuple[str, ...]) -> SettingKey:
    return SettingKey(name, "enum", default, choices=choices)


def _section_keys(
    section: str,
    colors: Dict[str, str],
    *,
    display: bool = True,
    refresh_ms: int = 1500,
    style: str = "graph",
) -> List[SettingKey]:
    keys = [
        _bool(f"{section}-display", display),
        _bool(f"{section}-show-text", True),
        _bool(f"{section}-show-menu", True),
        _int(f"{section}-refresh-time", refresh_ms, 50, 100000),
        _int(f"{section}-graph-width", 100, 1, 1000),
        _enum(f"{section}-style", style, DISPLAY_STYLES),
    ]
    keys.extend(_str(f"{section}-{part}-color", value) for part, value in colors.items())
    return keys


def _build_schema() -> List[SettingKey]:
    keys: List[SettingKey] = [
        _bool("icon-display", True),
        _bool("center-display", False),
        _bool("compact-display", False),
        _bool("show-tooltip", True),
        _bool("move-clock", False),
        _str("background", "#ffffff1a"),
    ]

    keys += _section_keys(
        "cpu",
        {
            "user": "#0072b3ff",
            "system": "#0092e6ff",
            "nice": "#00a3ffff",
            "iowait": "#002f3dff",
            "other": "#001d26ff",
        },
    )
    keys.append(_bool("cpu-individual-cores", False))

    keys += _section_keys(
        "memory",
        {
            "program": "#00b35bff",
            "buffer": "#00ff82ff",
            "cache": "#aaf5d0ff",
        },
        refresh_ms=5000,
    )
    keys += _section_keys("swap", {"used": "#8b00c3ff"}, display=False, refresh_ms=5000)

    keys += _section_keys(
        "net",
        {
            "down": "#fce94fff",
            "up": "#fb74fbff",
            "downerrors": "#ff6e00ff",
            "uperrors": "#e0006eff",
            "collisions": "#ff0000ff",
        },
        style="both",
    )
    keys.append(_bool("net-speed-in-bits", False))

    keys += _section_keys(
        "disk",
        {"read": "#c65000ff", "write": "#ff6700ff"},
        display=False,
        refresh_ms=2000,
    )
    keys.append(_enum("disk-usage-style", "pie", USAGE_STYLES))

    keys += _section_keys(
        "gpu",
        {"used": "#00b35bff", "memory": "#00ff82ff"},
        display=False,
        refresh_ms=5000,
    )

    keys += _section_keys(
        "thermal",
        {"tz0": "#ff0000ff"},
        display=False,
        refresh_ms=5000,
        style="digit",
    )
    keys += [
        _int("thermal-threshold", 0, 0, 300),
        _bool("thermal-fahrenheit-unit", False),
        _str("thermal-sensor-file", ""),
        _str("thermal-sensor-label", ""),
    ]

    keys += _section_keys(
        "fan",
        {"fan0": "#f2002eff"},
        display=False,
        refresh_ms=5000,
        style="digit",
    )
    keys += [
        _str("fan-sensor-file", ""),
        _str("fan-sensor-label", ""),
    ]

    keys += _section_keys("freq", {"freq": "#001d26ff"}, display=False, style="digit")

    keys += _section_keys(
        "battery",
        {"batt0": "#f2002eff"},
        display=False,
        refresh_ms=5000,
        style="digit",
    )
    keys += [
        _bool("battery-time", False),
        _bool("battery-hidesystem", False),
    ]
    return keys


SCHEMA: Dict[str, SettingKey] = {key.name: key for key in _build_schema()}


def list_keys(schema: Optional[Dict[str, SettingKey]] = None) -> List[str]:
    """Return key names in schema order."""
    return list((schema if schema is not None else SCHEMA).keys())


def section_keys(section: str, keys: Iterable[str] | None = None) -> List[str]:
    """Return the keys belonging to ``section`` (in the given/schema order)."""
    names = list(keys) if keys is not None else list_keys()
    return [name for name in names if name.split("-", 1)[0] == section]


def defaults(schema: Optional[Mapping[str, SettingKey]] = None) -> Dict[str, Any]:
    """Return a fresh ``{key: default}`` mapping."""
    return {name: key.default for name, key in (schema if schema is not None else SCHEMA).items()}


__all__ = [
    "DISPLAY_STYLES",
    "SCHEMA",
    "SECTIONS",
    "SettingKey",
    "USAGE_STYLES",
    "defaults",
    "list_keys",
    "section_keys",
]
