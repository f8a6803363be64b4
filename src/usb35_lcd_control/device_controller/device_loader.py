# SPDX-License-Identifier: Apache-2.0
# Copyright © 2025 Rejeb Ben Rejeb

from typing import Optional

from .config import SerialConfig, load_serial_config
from .display.display_device import DisplayDevice
from .display.errors import ScreenNotFoundError
from .display.transport import MockTransport, SerialTransport
from .serial_detector import find_port
from ..common.logging_config import get_service_logger


def load_device(config_dir: Optional[str] = None, mock: bool = False) -> DisplayDevice:
    """
    Open the screen described by <config_dir>/device_config.yaml.
    Without a config dir the defaults are used and the port is discovered.
    """
    logger = get_service_logger()

    if mock:
        logger.info("Using mock transport, nothing will be sent to the screen")
        return DisplayDevice(MockTransport())

    config = load_serial_config(config_dir) if config_dir else SerialConfig()

    port_name = config.port
    if port_name:
        logger.info(f"Using configured port {port_name}")
    else:
        logger.info(f"Looking for screen with serial number {config.serial_number}")
        port_name = find_port(config.serial_number)
        if port_name is None:
            raise ScreenNotFoundError(f"No screen found with serial number {config.serial_number}")

    device = DisplayDevice(SerialTransport.open(port_name, config))
    logger.info(f"{device} initialized")
    return device
