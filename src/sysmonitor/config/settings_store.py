"""YAML-backed key/value store the preferences widgets bind to.

The store holds one value per schema key. Values start from the schema
defaults and are overlaid with whatever ``settings.yaml`` contains; anything
unknown or of the wrong type in the file is ignored so a hand-edited file can
never stop the preferences window from opening.

Widgets never talk to each other: they write through :meth:`SettingsStore.set`
and listen through :meth:`SettingsStore.connect`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional

import yaml

from .schema import SCHEMA, SettingKey, defaults

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[str, Any], None]


class SettingsStore:
    """
    In-memory settings snapshot with optional write-through to YAML.

    Parameters
    ----------
    path:
        YAML file to load from and save to. ``None`` keeps the store purely
        in memory (handy for tests and ``--list-sensors``).
    schema:
        Mapping of key name to :class:`SettingKey`.
    autosave:
        Write the whole mapping back to ``path`` after every change.
    """

    def __init__(
        self,
        path: str | Path | None = None,
        schema: Optional[Mapping[str, SettingKey]] = None,
        *,
        autosave: bool = True,
    ) -> None:
        self._schema: Dict[str, SettingKey] = dict(schema if schema is not None else SCHEMA)
        self._path = Path(path).expanduser() if path is not None else None
        self._autosave = autosave
        self._values: Dict[str, Any] = defaults(self._schema)
        self._callbacks: List[ChangeCallback] = []

        if self._path is not None and self._path.exists():
            self._load(self._path)

    # ------------------------------------------------------------------
    # Loading / saving
    # ------------------------------------------------------------------
    @property
    def path(self) -> Optional[Path]:
        return self._path

    def _load(self, path: Path) -> None:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh) or {}
        if not isinstance(raw, Mapping):
            raise ValueError(f"Expected mapping in {path}, got {type(raw).__name__}")

        for name, value in raw.items():
            key = self._schema.get(str(name))
            if key is None:
                logger.debug("Ignoring unknown settings key %r in %s", name, path)
                continue
            if not key.accepts(value):
                logger.warning(
                    "Invalid value %r for %s in %s; using default %r",
                    value,
                    key.name,
                    path,
                    key.default,
                )
                continue
            self._values[key.name] = value

    def save(self) -> None:
        """Write every value back to the YAML file (no-op without a path)."""
        if self._path is None:
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8") as fh:
            yaml.safe_dump(
                dict(self._values),
                fh,
                default_flow_style=False,
                sort_keys=False,
            )

    # ------------------------------------------------------------------
    # Schema access
    # ------------------------------------------------------------------
    def list_keys(self) -> List[str]:
        """Return every key name in schema order."""
        return list(self._schema.keys())

    def key(self, name: str) -> SettingKey:
        try:
            return self._schema[name]
        except KeyError:
            raise KeyError(f"Unknown settings key: {name}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._schema

    # ------------------------------------------------------------------
    # Getters / setters
    # ------------------------------------------------------------------
    def get(self, name: str) -> Any:
        self.key(name)
        return self._values[name]

    def get_boolean(self, name: str) -> bool:
        return bool(self.get(name))

    def get_int(self, name: str) -> int:
        return int(self.get(name))

    def get_string(self, name: str) -> str:
        return str(self.get(name))

    def get_enum(self, name: str) -> int:
        """Return the index of the current value in the key's choices."""
        key = self.key(name)
        if key.value_type != "enum":
            raise ValueError(f"{name} is not an enum key")
        return key.choices.index(self._values[name])

    def set(self, name: str, value: Any) -> None:
        """
        Validate and store ``value`` for ``name``.

        Raises ``KeyError`` for unknown keys and ``ValueError`` for values the
        schema rejects. Setting the current value again is a no-op.
        """
        key = self.key(name)
        if not key.accepts(value):
            raise ValueError(f"Invalid value {value!r} for settings key {name}")
        if self._values[name] == value and type(self._values[name]) is type(value):
            return
        self._values[name] = value
        if self._autosave:
            self.save()
        self._notify(name, value)

    def set_boolean(self, name: str, value: bool) -> None:
        self.set(name, bool(value))

    def set_int(self, name: str, value: int) -> None:
        self.set(name, int(value))

    def set_string(self, name: str, value: str) -> None:
        self.set(name, str(value))

    def set_enum(self, name: str, index: int) -> None:
        """Store the enum choice at position ``index``."""
        key = self.key(name)
        if key.value_type != "enum":
            raise ValueError(f"{name} is not an enum key")
        if not 0 <= index < len(key.choices):
            raise ValueError(f"Enum index {index} out of range for {name}")
        self.set(name, key.choices[index])

    def reset(self, name: str) -> None:
        """Restore the schema default for ``name``."""
        self.set(name, self.key(name).default)

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------
    def connect(self, callback: ChangeCallback) -> None:
        """Call ``callback(key, value)`` after every change."""
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def disconnect(self, callback: ChangeCallback) -> None:
        try:
            self._callbacks.remove(callback)
        except ValueError:
            pass

    def _notify(self, name: str, value: Any) -> None:
        for callback in list(self._callbacks):
            try:
                callback(name, value)
            except Exception:
                logger.exception("Settings change callback failed for %s", name)


__all__ = ["ChangeCallback", "SettingsStore"]
