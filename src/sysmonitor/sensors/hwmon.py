"""Hardware sensor discovery from the kernel hwmon tree.

Walks ``/sys/class/hwmon/hwmon*/`` looking for ``<category><N>_input`` files
and pairs each one with a human readable label built from the chip ``name``
file and the optional ``<category><N>_label`` file next to the input.

Discovery never raises: a missing tree, an unreadable chip or a broken label
file only means fewer results (and a log line). Sensor availability varies a
lot between machines and kernels, so "no sensors" is a normal outcome.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

HWMON_ROOT = "/sys/class/hwmon"

_CHIP_DIR_RE = re.compile(r"^hwmon\d+$", re.ASCII)


class SensorCategory(str, Enum):
    """Sensor kinds the preferences surface knows how to pick from."""

    TEMP = "temp"
    FAN = "fan"


CategoryLike = Union[SensorCategory, str]


@dataclass(frozen=True)
class SensorInput:
    """One numbered input channel of a hwmon chip."""

    path: str
    chip_label: str
    ordinal: str
    label: Optional[str] = None

    @property
    def display_label(self) -> str:
        """``"<chip label> - <input label or ordinal>"``."""
        return f"{self.chip_label} - {self.label or self.ordinal}"


def _category_value(category: CategoryLike) -> str:
    if isinstance(category, SensorCategory):
        return category.value
    return str(category)


def _input_pattern(category: CategoryLike) -> re.Pattern[str]:
    return re.compile(
        "^" + _category_value(category) + r"(\d+)_input$", re.ASCII
    )


def read_label(path: Union[str, Path]) -> Optional[str]:
    """
    Return the first line of ``path`` or ``None`` when there is no usable label.

    Some hwmon label files exist but fail to read (``EINVAL`` on certain
    drivers); those are logged and reported as missing.
    """
    path = Path(path)
    try:
        if not path.exists():
            return None
        contents = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Error loading label from file %s: %s", path, exc)
        return None
    return contents.split("\n", 1)[0]


def _scan_directory(
    directory: Path,
    chip_label: str,
    pattern: re.Pattern[str],
    category: str,
) -> List[SensorInput]:
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        logger.warning("Error enumerating children of chip %s: %s", directory, exc)
        return []

    found: List[SensorInput] = []
    for entry in entries:
        match = pattern.match(entry.name)
        if not match:
            continue
        try:
            if not entry.is_file():
                continue
        except OSError as exc:
            logger.warning("Error inspecting %s: %s", entry, exc)
            continue
        ordinal = match.group(1)
        label = read_label(directory / f"{category}{ordinal}_label")
        found.append(
            SensorInput(
                path=str(entry),
                chip_label=chip_label,
                ordinal=ordinal,
                label=label,
            )
        )
    return found


def _scan_chip(chip: Path, pattern: re.Pattern[str], category: str) -> List[SensorInput]:
    if not chip.is_dir():
        return []
    chip_label = read_label(chip / "name") or chip.name

    found = _scan_directory(chip, chip_label, pattern, category)
    if not found:
        # Older drivers were believed to expose inputs one level deeper.
        # Kept for compatibility until confirmed against real trees.
        device = chip / "device"
        if device.exists():
            found = _scan_directory(device, chip_label, pattern, category)
    return found


def scan(category: CategoryLike, root: Union[str, Path] = HWMON_ROOT) -> List[SensorInput]:
    """
    Discover every ``category`` input below ``root``.

    Order follows filesystem enumeration order of chips and then of their
    entries; nothing is sorted and nothing is cached.
    """
    root = Path(os.path.abspath(root))
    value = _category_value(category)
    try:
        pattern = _input_pattern(value)
    except re.error as exc:
        logger.warning("Category %r does not form a valid input pattern: %s", value, exc)
        return []

    try:
        chips = list(root.iterdir())
    except OSError as exc:
        logger.warning("Error enumerating hwmon children of %s: %s", root, exc)
        return []

    sensors: List[SensorInput] = []
    for chip in chips:
        if not _CHIP_DIR_RE.match(chip.name):
            continue
        try:
            found = _scan_chip(chip, pattern, value)
        except OSError as exc:
            logger.warning("Error reading chip %s: %s", chip, exc)
            continue
        sensors.extend(found)

    logger.debug("Discovered %d %s sensor(s) under %s", len(sensors), value, root)
    return sensors


def discover(
    category: CategoryLike,
    root: Union[str, Path] = HWMON_ROOT,
) -> Tuple[List[str], List[str]]:
    """
    Return index-aligned ``(paths, labels)`` for every ``category`` sensor.

    ``paths[i]`` is the absolute path of an ``*_input`` file and ``labels[i]``
    its display label. Both lists are empty when nothing is found.
    """
    sensors = scan(category, root)
    paths = [sensor.path for sensor in sensors]
    labels = [sensor.display_label for sensor in sensors]
    return paths, labels


__all__ = [
    "HWMON_ROOT",
    "SensorCategory",
    "SensorInput",
    "discover",
    "read_label",
    "scan",
]
