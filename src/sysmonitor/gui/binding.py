"""Two-way bindings between settings keys and Qt controls."""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import QSignalBlocker
from PySide6.QtWidgets import QAbstractButton, QSpinBox

from ..config.settings_store import SettingsStore


def _follow_store(store: SettingsStore, key: str, widget, apply) -> None:
    """Push store changes for ``key`` into ``widget`` until it is destroyed."""

    def on_changed(changed_key: str, value: Any) -> None:
        if changed_key != key:
            return
        with QSignalBlocker(widget):
            apply(value)

    store.connect(on_changed)
    widget.destroyed.connect(lambda *_: store.disconnect(on_changed))


def bind_check(store: SettingsStore, key: str, button: QAbstractButton) -> None:
    """Keep a checkable button and a boolean key in sync."""
    button.setChecked(store.get_boolean(key))
    button.toggled.connect(lambda checked: store.set_boolean(key, checked))
    _follow_store(store, key, button, lambda value: button.setChecked(bool(value)))


def bind_spin(store: SettingsStore, key: str, spin: QSpinBox) -> None:
    """Keep a spin box and an int key in sync."""
    spin.setValue(store.get_int(key))
    spin.valueChanged.connect(lambda value: store.set_int(key, value))
    _follow_store(store, key, spin, lambda value: spin.setValue(int(value)))


__all__ = ["bind_check", "bind_spin"]
