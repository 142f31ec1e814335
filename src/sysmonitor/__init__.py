"""Preferences application and sensor discovery for the SysMonitor panel indicator."""

__version__ = "0.1.0"
