# SPDX-License-Identifier: Apache-2.0
# Copyright © 2025 Rejeb Ben Rejeb

from usb35_lcd_control.device_controller.device_loader import load_device
from usb35_lcd_control.device_controller.serial_detector import find_port, find_ports

__all__ = [
    'load_device',
    'find_port',
    'find_ports',
]
