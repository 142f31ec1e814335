import os
import pathlib
import sys

import pytest

# Ensure src/ is on path for direct test execution
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


def _make_chip(root: pathlib.Path, chip: str, name=None, **files: str) -> pathlib.Path:
    """Create ``root/chip`` with an optional ``name`` file and extra files.

    Keyword names map to file names (``temp1_input="42000"``); a ``device__``
    prefix places the file in the ``device`` subdirectory.
    """
    chip_dir = root / chip
    chip_dir.mkdir(parents=True, exist_ok=True)
    if name is not None:
        (chip_dir / "name").write_text(name + "\n", encoding="utf-8")
    for filename, content in files.items():
        target = chip_dir
        if filename.startswith("device__"):
            target = chip_dir / "device"
            filename = filename[len("device__"):]
        target.mkdir(parents=True, exist_ok=True)
        (target / filename).write_text(content, encoding="utf-8")
    return chip_dir


@pytest.fixture
def hwmon_root(tmp_path):
    root = tmp_path / "hwmon"
    root.mkdir()
    return root


@pytest.fixture
def make_chip(hwmon_root):
    def factory(chip, name=None, **files):
        return _make_chip(hwmon_root, chip, name, **files)

    return factory
