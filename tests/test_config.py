# SPDX-License-Identifier: Apache-2.0
# Copyright © 2025 Rejeb Ben Rejeb

"""Loading device_config.yaml."""

import pytest
import yaml

from usb35_lcd_control.device_controller.config import SerialConfig, load_serial_config


def write_yaml(path, content):
    with open(path, "w") as f:
        yaml.safe_dump(content, f)


def test_defaults():
    config = SerialConfig()
    assert config.serial_number == "USB35INCHIPSV2"
    assert config.port is None
    assert config.baudrate == 115200
    assert config.timeout == 1.0


def test_load_full_config(tmp_path):
    write_yaml(tmp_path / "device_config.yaml", {
        "device": {"serial_number": "ABC", "port": "/dev/ttyACM3", "baudrate": 9600, "timeout": 0.5}
    })
    config = load_serial_config(str(tmp_path))
    assert config == SerialConfig("ABC", "/dev/ttyACM3", 9600, 0.5)


def test_missing_keys_keep_defaults(tmp_path):
    write_yaml(tmp_path / "device_config.yaml", {"device": {"baudrate": 57600}})
    config = load_serial_config(str(tmp_path))
    assert config == SerialConfig(baudrate=57600)


def test_empty_file(tmp_path):
    (tmp_path / "device_config.yaml").write_text("")
    assert load_serial_config(str(tmp_path)) == SerialConfig()


def test_port_falls_back_to_device_info(tmp_path):
    write_yaml(tmp_path / "device_config.yaml", {"device": {"port": None}})
    write_yaml(tmp_path / "device_info.yaml", {"port": "/dev/ttyACM0", "serial_number": "USB35INCHIPSV2"})
    assert load_serial_config(str(tmp_path)).port == "/dev/ttyACM0"


def test_configured_port_wins_over_device_info(tmp_path):
    write_yaml(tmp_path / "device_config.yaml", {"device": {"port": "/dev/ttyUSB1"}})
    write_yaml(tmp_path / "device_info.yaml", {"port": "/dev/ttyACM0"})
    assert load_serial_config(str(tmp_path)).port == "/dev/ttyUSB1"


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="device_config.yaml"):
        load_serial_config(str(tmp_path))
