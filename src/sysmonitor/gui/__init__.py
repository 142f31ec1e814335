"""Desktop preferences GUI built with PySide6/Qt.

:mod:`prefs_window` assembles the general options and one
:class:`~sysmonitor.gui.setting_frame.SettingFrame` tab per monitored
resource; :mod:`setting_kinds` decides which control edits each key and
:mod:`layout` hides toolkit differences behind a capability record.
The settings store is always passed in explicitly.
"""
