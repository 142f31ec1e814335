import logging
import os
import pathlib

from sysmonitor.sensors.hwmon import SensorCategory, discover, read_label, scan


def test_discover_missing_root_returns_empty(tmp_path) -> None:
    assert discover("temp", tmp_path / "does-not-exist") == ([], [])
    assert discover("fan", tmp_path / "does-not-exist") == ([], [])


def test_discover_root_that_is_a_file_returns_empty(tmp_path) -> None:
    bogus = tmp_path / "hwmon"
    bogus.write_text("", encoding="utf-8")
    assert discover("temp", bogus) == ([], [])


def test_discover_uses_chip_name_and_input_label(hwmon_root, make_chip) -> None:
    make_chip("hwmon0", "coretemp", temp1_input="42000\n", temp1_label="Core 0\n")

    paths, labels = discover("temp", hwmon_root)

    assert paths == [os.path.join(str(hwmon_root), "hwmon0", "temp1_input")]
    assert labels == ["coretemp - Core 0"]


def test_missing_input_label_falls_back_to_ordinal(hwmon_root, make_chip) -> None:
    make_chip("hwmon0", "coretemp", temp1_input="42000\n")

    _, labels = discover("temp", hwmon_root)

    assert labels == ["coretemp - 1"]


def test_missing_name_falls_back_to_chip_directory(hwmon_root, make_chip) -> None:
    make_chip("hwmon0", temp3_input="1", temp3_label="Tctl")

    _, labels = discover("temp", hwmon_root)

    assert labels == ["hwmon0 - Tctl"]


def test_empty_name_falls_back_to_chip_directory(hwmon_root, make_chip) -> None:
    make_chip("hwmon4", "", temp1_input="1")

    _, labels = discover("temp", hwmon_root)

    assert labels == ["hwmon4 - 1"]


def test_only_first_line_of_label_is_used(hwmon_root, make_chip) -> None:
    make_chip("hwmon0", "nct6775", fan2_input="900", fan2_label="CPU Fan\nsecond line\n")

    _, labels = discover(SensorCategory.FAN, hwmon_root)

    assert labels == ["nct6775 - CPU Fan"]


def test_device_subdirectory_fallback(hwmon_root, make_chip) -> None:
    make_chip("hwmon1", "it87", device__temp2_input="30000", device__temp2_label="SYSTIN")

    paths, labels = discover("temp", hwmon_root)

    assert paths == [os.path.join(str(hwmon_root), "hwmon1", "device", "temp2_input")]
    assert labels == ["it87 - SYSTIN"]


def test_device_subdirectory_ignored_when_chip_has_inputs(hwmon_root, make_chip) -> None:
    make_chip(
        "hwmon1",
        "it87",
        temp1_input="1",
        device__temp2_input="2",
    )

    paths, _ = discover("temp", hwmon_root)

    assert paths == [os.path.join(str(hwmon_root), "hwmon1", "temp1_input")]


def test_non_matching_entries_are_skipped(hwmon_root, make_chip) -> None:
    make_chip("hwmon0", "acpitz", temp1_input="1", temp1_max="2", temp_input="3")
    make_chip("notachip", "other", temp1_input="1")
    make_chip("hwmonX", "other", temp1_input="1")
    (hwmon_root / "hwmon9").write_text("not a directory", encoding="utf-8")
    # a directory named like an input is not a sensor file
    (hwmon_root / "hwmon0" / "temp5_input").mkdir()

    paths, labels = discover("temp", hwmon_root)

    assert paths == [os.path.join(str(hwmon_root), "hwmon0", "temp1_input")]
    assert labels == ["acpitz - 1"]


def test_category_selects_matching_inputs(hwmon_root, make_chip) -> None:
    make_chip("hwmon0", "nct6775", temp1_input="1", fan1_input="2", fan2_input="3")

    fan_paths, fan_labels = discover("fan", hwmon_root)
    temp_paths, _ = discover("temp", hwmon_root)

    assert sorted(os.path.basename(p) for p in fan_paths) == ["fan1_input", "fan2_input"]
    assert sorted(fan_labels) == ["nct6775 - 1", "nct6775 - 2"]
    assert [os.path.basename(p) for p in temp_paths] == ["temp1_input"]


def test_unknown_category_yields_nothing(hwmon_root, make_chip) -> None:
    make_chip("hwmon0", "coretemp", temp1_input="1")

    assert discover("volt", hwmon_root) == ([], [])


def test_category_is_used_as_a_pattern(hwmon_root, make_chip) -> None:
    make_chip("hwmon0", "nct6775", temp1_input="1", fan1_input="2")

    paths, _ = discover("(?:temp|fan)", hwmon_root)

    assert sorted(os.path.basename(p) for p in paths) == ["fan1_input", "temp1_input"]
    assert discover("te.p", hwmon_root)[0] == [os.path.join(str(hwmon_root), "hwmon0", "temp1_input")]


def test_invalid_category_pattern_yields_nothing(hwmon_root, make_chip, caplog) -> None:
    make_chip("hwmon0", "coretemp", temp1_input="1")

    with caplog.at_level(logging.WARNING, logger="sysmonitor.sensors.hwmon"):
        assert discover("temp(", hwmon_root) == ([], [])
    assert "temp(" in caplog.text


def test_paths_and_labels_stay_aligned(hwmon_root, make_chip) -> None:
    make_chip("hwmon0", "coretemp", temp1_input="1", temp1_label="Package", temp2_input="1")
    make_chip("hwmon1", "amdgpu", temp1_input="1", temp1_label="edge")
    make_chip("hwmon2", None, device__temp7_input="1")

    paths, labels = discover("temp", hwmon_root)
    by_path = dict(zip(paths, labels))

    assert len(paths) == len(labels) == 4
    assert by_path[os.path.join(str(hwmon_root), "hwmon0", "temp1_input")] == "coretemp - Package"
    assert by_path[os.path.join(str(hwmon_root), "hwmon0", "temp2_input")] == "coretemp - 2"
    assert by_path[os.path.join(str(hwmon_root), "hwmon1", "temp1_input")] == "amdgpu - edge"
    assert by_path[os.path.join(str(hwmon_root), "hwmon2", "device", "temp7_input")] == "hwmon2 - 7"


def test_discover_is_repeatable(hwmon_root, make_chip) -> None:
    make_chip("hwmon0", "coretemp", temp1_input="1", temp2_input="1")
    make_chip("hwmon1", "nvme", temp1_input="1", temp1_label="Composite")

    assert discover("temp", hwmon_root) == discover("temp", hwmon_root)


def test_discover_reflects_live_tree(hwmon_root, make_chip) -> None:
    assert discover("temp", hwmon_root) == ([], [])
    make_chip("hwmon0", "coretemp", temp1_input="1")
    assert len(discover("temp", hwmon_root)[0]) == 1


def test_unreadable_label_is_treated_as_missing(hwmon_root, make_chip, caplog) -> None:
    chip = make_chip("hwmon0", "coretemp", temp1_input="1", temp2_input="1", temp2_label="Core 1")
    # a directory where the label file should be cannot be read as text
    (chip / "temp1_label").mkdir()

    with caplog.at_level(logging.WARNING, logger="sysmonitor.sensors.hwmon"):
        paths, labels = discover("temp", hwmon_root)

    assert sorted(labels) == ["coretemp - 1", "coretemp - Core 1"]
    assert len(paths) == 2
    assert "temp1_label" in caplog.text


def test_undecodable_label_is_treated_as_missing(hwmon_root, make_chip) -> None:
    chip = make_chip("hwmon0", None, temp1_input="1")
    (chip / "temp1_label").write_bytes(b"\xff\xfe\xfa")
    (chip / "name").write_bytes(b"\xff\xff")

    _, labels = discover("temp", hwmon_root)

    assert labels == ["hwmon0 - 1"]


def test_read_label(tmp_path) -> None:
    label = tmp_path / "label"
    assert read_label(label) is None

    label.write_text("", encoding="utf-8")
    assert read_label(label) == ""

    label.write_text("fan1\nextra", encoding="utf-8")
    assert read_label(label) == "fan1"


def test_scan_returns_sensor_inputs(hwmon_root, make_chip) -> None:
    make_chip("hwmon0", "k10temp", temp1_input="1", temp1_label="Tctl")

    (sensor,) = scan("temp", hwmon_root)

    assert sensor.chip_label == "k10temp"
    assert sensor.ordinal == "1"
    assert sensor.label == "Tctl"
    assert sensor.display_label == "k10temp - Tctl"


def test_symlinked_chips_are_followed(tmp_path, hwmon_root) -> None:
    devices = tmp_path / "devices" / "platform" / "coretemp.0" / "hwmon" / "hwmon0"
    devices.mkdir(parents=True)
    (devices / "name").write_text("coretemp\n", encoding="utf-8")
    (devices / "temp1_input").write_text("1", encoding="utf-8")
    (hwmon_root / "hwmon0").symlink_to(devices, target_is_directory=True)

    paths, labels = discover("temp", hwmon_root)

    assert paths == [os.path.join(str(hwmon_root), "hwmon0", "temp1_input")]
    assert labels == ["coretemp - 1"]


def test_unreadable_chip_is_skipped(hwmon_root, make_chip, monkeypatch, caplog) -> None:
    make_chip("hwmon0", "coretemp", temp1_input="1")
    blocked = make_chip("hwmon1", "nct6775", temp1_input="1", temp1_label="SYSTIN")

    real_iterdir = pathlib.Path.iterdir
    real_stat = pathlib.Path.stat

    def iterdir(self):
        if self == blocked:
            raise PermissionError(13, "Permission denied", str(self))
        return real_iterdir(self)

    def stat(self, *args, **kwargs):
        if self.parent == blocked:
            raise PermissionError(13, "Permission denied", str(self))
        return real_stat(self, *args, **kwargs)

    monkeypatch.setattr(pathlib.Path, "iterdir", iterdir)
    monkeypatch.setattr(pathlib.Path, "stat", stat)

    with caplog.at_level(logging.WARNING, logger="sysmonitor.sensors.hwmon"):
        paths, labels = discover("temp", hwmon_root)

    assert paths == [os.path.join(str(hwmon_root), "hwmon0", "temp1_input")]
    assert labels == ["coretemp - 1"]
    assert "hwmon1" in caplog.text


def test_read_label_permission_error_is_missing(tmp_path, monkeypatch, caplog) -> None:
    label = tmp_path / "temp1_label"
    label.write_text("Core 0\n", encoding="utf-8")

    def exists(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(pathlib.Path, "exists", exists)

    with caplog.at_level(logging.WARNING, logger="sysmonitor.sensors.hwmon"):
        assert read_label(label) is None
    assert "temp1_label" in caplog.text
