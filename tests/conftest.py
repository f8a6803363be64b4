# SPDX-License-Identifier: Apache-2.0
# Copyright © 2025 Rejeb Ben Rejeb

import pytest

from usb35_lcd_control.device_controller.display.display_device import DisplayDevice
from usb35_lcd_control.device_controller.display.transport import MockTransport


@pytest.fixture
def transport():
    return MockTransport()


@pytest.fixture
def device(transport):
    return DisplayDevice(transport)
