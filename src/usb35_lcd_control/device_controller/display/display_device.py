# SPDX-License-Identifier: Apache-2.0
# Copyright © 2025 Rejeb Ben Rejeb

import serial
from PIL import Image

from .bitmap import PixelBuffer, is_valid_size, iter_chunks, to_pixel_array
from .commands import (WIDTH, HEIGHT, Orientation, ScreenCommand, encode_orientation_command,
                       encode_region_command)
from .errors import WriteError, WrongImageSize
from .transport import Transport
from ...common.logging_config import get_service_logger


class DisplayDevice:
    """
    3.5" 320x480 screen driven over a serial port.
    The protocol is write only: every method returns once its bytes are written.
    Not thread safe, callers sharing a device must serialize access.
    """

    def __init__(self, transport: Transport):
        self.transport = transport
        self.width = WIDTH
        self.height = HEIGHT
        self.logger = get_service_logger()

    def __str__(self):
        return f"DisplayDevice(transport={self.transport}, size={self.width}x{self.height})"

    def __enter__(self) -> "DisplayDevice":
        return self

    def __exit__(self, exc_type, exc_value, tb) -> None:
        self.close()

    def close(self):
        self.transport.close()

    def write(self, packet: bytes):
        try:
            bytes_written = self.transport.write(packet)
        except (serial.SerialException, OSError) as e:
            raise WriteError(f"Error writing data to screen: {e}") from e
        if bytes_written != len(packet):
            raise WriteError(f"Short write {bytes_written}/{len(packet)}")

    def send_command(self, x: int, y: int, ex: int, ey: int, command: ScreenCommand):
        command = ScreenCommand(command)
        self.logger.debug(f"Sending {command.name} ({x}, {y}, {ex}, {ey})")
        self.write(encode_region_command(x, y, ex, ey, command))

    def set_orientation(self, orientation: Orientation):
        orientation = Orientation(orientation)
        self.logger.debug(f"Setting orientation {orientation.name}")
        self.write(encode_orientation_command(orientation))

    def clear(self):
        """
        Clears the screen to white.
        Does not work correctly in landscape mode, switch to portrait first.
        """
        self.send_command(0, 0, 0, 0, ScreenCommand.CLEAR)

    def to_black(self):
        """
        Clears the screen to black.
        Does not work correctly in landscape mode, switch to portrait first.
        """
        self.send_command(0, 0, 0, 0, ScreenCommand.TO_BLACK)

    def set_brightness(self, level: int):
        """
        Sets the backlight level, 0 is the darkest and 255 the brightest.
        The controller expects the inverted value.
        """
        if not 0 <= level <= 255:
            raise ValueError(f"Brightness must be between 0 and 255, got {level}")
        self.send_command(255 - level, 0, 0, 0, ScreenCommand.SET_BRIGHTNESS)

    def screen_off(self):
        """Blanks the screen, the current image is retained."""
        self.send_command(0, 0, 0, 0, ScreenCommand.SCREEN_OFF)

    def screen_on(self):
        """Shows the last drawn image again."""
        self.send_command(0, 0, 0, 0, ScreenCommand.SCREEN_ON)

    def reset(self):
        # The screen drops off the bus after a reset, reopening the port is up to the caller
        self.send_command(0, 0, 0, 0, ScreenCommand.RESET)

    def draw(self, image: PixelBuffer):
        """
        Draws an image on the whole screen.
        The image must be 320x480 or 480x320 and should match the current orientation,
        otherwise the controller wraps the rows and part of the image is cut off.
        A failed write leaves the screen partially updated.
        """
        pixels = to_pixel_array(image)
        height, width = pixels.shape[:2]
        if not is_valid_size(width, height):
            raise WrongImageSize(width, height)

        self.send_command(0, 0, width - 1, height - 1, ScreenCommand.DISPLAY_BITMAP)

        sent = 0
        for chunk in iter_chunks(pixels):
            self.write(chunk)
            sent += len(chunk)
        self.logger.debug(f"Drew {width}x{height} image ({sent} bytes)")

    def draw_file(self, path: str):
        with Image.open(path) as img:
            self.draw(img)
