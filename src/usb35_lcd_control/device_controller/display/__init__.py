# SPDX-License-Identifier: Apache-2.0
# Copyright © 2025 Rejeb Ben Rejeb

from usb35_lcd_control.device_controller.display.commands import ScreenCommand, Orientation, WIDTH, HEIGHT
from usb35_lcd_control.device_controller.display.display_device import DisplayDevice
from usb35_lcd_control.device_controller.display.errors import ScreenError, WriteError, WrongImageSize
from usb35_lcd_control.device_controller.display.transport import Transport, SerialTransport, MockTransport

__all__ = [
    'ScreenCommand',
    'Orientation',
    'WIDTH',
    'HEIGHT',
    'DisplayDevice',
    'ScreenError',
    'WriteError',
    'WrongImageSize',
    'Transport',
    'SerialTransport',
    'MockTransport',
]
