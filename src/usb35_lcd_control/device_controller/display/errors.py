# SPDX-License-Identifier: Apache-2.0
# Copyright © 2025 Rejeb Ben Rejeb


class ScreenError(Exception):
    """Base class for every error raised while driving the screen"""


class WriteError(ScreenError):
    def __init__(self, message: str = "Error writing data to screen"):
        super().__init__(message)


class WrongImageSize(ScreenError):
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        super().__init__(f"Wrong image size {width}x{height}; must be 320x480 or 480x320")


class ScreenConnectionError(ScreenError):
    """Raised when the serial port cannot be opened or closed."""


class ScreenNotFoundError(ScreenError):
    """Raised when no serial port matches the configured screen."""
