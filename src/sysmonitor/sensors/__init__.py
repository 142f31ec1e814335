"""Hardware sensor discovery.

:mod:`hwmon` walks the kernel's ``/sys/class/hwmon`` tree and returns the
sensor files (and display labels) the preferences surface offers for the
temperature and fan indicators. Reading the values is left to the indicator.
"""

from .hwmon import HWMON_ROOT, SensorCategory, SensorInput, discover, read_label, scan

__all__ = [
    "HWMON_ROOT",
    "SensorCategory",
    "SensorInput",
    "discover",
    "read_label",
    "scan",
]
