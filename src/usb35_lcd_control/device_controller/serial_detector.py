# SPDX-License-Identifier: Apache-2.0
# Copyright © 2025 Rejeb Ben Rejeb

from typing import Optional

from serial.tools import list_ports

from ..common.logging_config import get_service_logger
from ..common.supported_devices import DEFAULT_SERIAL_NUMBER, find_supported_device


def find_port(serial_number: str = DEFAULT_SERIAL_NUMBER) -> Optional[str]:
    """
    Return the serial port whose USB serial number matches, None if the screen is not plugged.
    Ports that report no serial number are ignored.
    """
    logger = get_service_logger()
    logger.debug(f"Searching for serial port with serial number {serial_number}")

    port_name = None
    for port in list_ports.comports():
        logger.debug(f"Found port: {port.device} (serial number: {port.serial_number})")
        if port.serial_number is not None and port.serial_number == serial_number:
            port_name = port.device

    if port_name is None:
        logger.warning(f"No serial port found for serial number {serial_number}")
    return port_name


def find_ports() -> list[dict]:
    """List every plugged supported screen with its port and geometry"""
    devices = []
    for port in list_ports.comports():
        if port.serial_number is None:
            continue
        supported = find_supported_device(port.serial_number)
        if supported is not None:
            devices.append({**supported, "port": port.device})
    return devices
