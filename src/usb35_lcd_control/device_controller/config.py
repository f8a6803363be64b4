# SPDX-License-Identifier: Apache-2.0
# Copyright © 2025 Rejeb Ben Rejeb

import os
from dataclasses import dataclass
from typing import Optional

import yaml

from ..common.supported_devices import DEFAULT_SERIAL_NUMBER

DEVICE_CONFIG_FILE = "device_config.yaml"
DEVICE_INFO_FILE = "device_info.yaml"


@dataclass(frozen=True)
class SerialConfig:
    serial_number: str = DEFAULT_SERIAL_NUMBER
    port: Optional[str] = None
    baudrate: int = 115_200
    timeout: float = 1.0


def _detected_port(config_dir: str) -> Optional[str]:
    info_path = os.path.join(config_dir, DEVICE_INFO_FILE)
    if not os.path.exists(info_path):
        return None
    with open(info_path, "r", encoding="utf-8") as f:
        info = yaml.safe_load(f) or {}
    return info.get("port") or None


def load_serial_config(config_dir: str) -> SerialConfig:
    """
    Load the `device` section of <config_dir>/device_config.yaml.
    Missing keys keep their defaults, an empty port falls back to the one
    saved in device_info.yaml by the init command.
    """
    config_path = os.path.join(config_dir, DEVICE_CONFIG_FILE)
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Missing config: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    device_cfg = config.get("device") or {}
    defaults = SerialConfig()
    return SerialConfig(
        serial_number=str(device_cfg.get("serial_number", defaults.serial_number)),
        port=device_cfg.get("port") or _detected_port(config_dir),
        baudrate=int(device_cfg.get("baudrate", defaults.baudrate)),
        timeout=float(device_cfg.get("timeout", defaults.timeout)),
    )
