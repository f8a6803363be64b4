# SPDX-License-Identifier: Apache-2.0
# Copyright © 2025 Rejeb Ben Rejeb

"""
Command frames understood by the 3.5" USB screen controller.

Region command (6 bytes), coordinates are packed across byte boundaries:
  0x00 : x >> 2
  0x01 : (x & 3) << 6  | y >> 4
  0x02 : (y & 15) << 4 | ex >> 6
  0x03 : (ex & 63) << 2 | ey >> 8
  0x04 : ey & 0xFF
  0x05 : command

Orientation command (11 bytes):
  00 00 00 00 00 79 (0x64 + orientation) 03 C8 04 00
"""

from enum import IntEnum
from typing import NamedTuple

WIDTH = 320
HEIGHT = 480

REGION_FRAME_SIZE = 6
ORIENTATION_FRAME_SIZE = 11


class ScreenCommand(IntEnum):
    RESET = 101
    CLEAR = 102
    TO_BLACK = 103
    SCREEN_OFF = 108
    SCREEN_ON = 109
    SET_BRIGHTNESS = 110
    SET_ORIENTATION = 121
    DISPLAY_BITMAP = 197


class Orientation(IntEnum):
    PORTRAIT = 0
    REVERSE_PORTRAIT = 1
    LANDSCAPE = 2
    REVERSE_LANDSCAPE = 3


class RegionCommand(NamedTuple):
    x: int
    y: int
    ex: int
    ey: int
    command: int


def encode_region_command(x: int, y: int, ex: int, ey: int, command: int) -> bytes:
    """
    Pack the rectangle (x, y) - (ex, ey) and a command into a 6 byte frame.
    Coordinates are not range checked, extra bits are dropped by the masks.
    """
    return bytes((
        (x >> 2) & 0xFF,
        (((x & 3) << 6) | (y >> 4)) & 0xFF,
        (((y & 15) << 4) | (ex >> 6)) & 0xFF,
        (((ex & 63) << 2) | (ey >> 8)) & 0xFF,
        ey & 0xFF,
        int(command) & 0xFF,
    ))


def encode_orientation_command(orientation: int) -> bytes:
    # 3, 200, 4, 0 trailer is required by the firmware
    return bytes((0, 0, 0, 0, 0, int(ScreenCommand.SET_ORIENTATION), 100 + int(orientation), 3, 200, 4, 0))


def decode_region_command(frame: bytes) -> RegionCommand:
    """Unpack a region frame, exact for coordinates below 1024"""
    if len(frame) != REGION_FRAME_SIZE:
        raise ValueError(f"Region frame must be {REGION_FRAME_SIZE} bytes, got {len(frame)}")
    b0, b1, b2, b3, b4, command = frame
    x = (b0 << 2) | (b1 >> 6)
    y = ((b1 & 0x3F) << 4) | (b2 >> 4)
    ex = ((b2 & 0x0F) << 6) | (b3 >> 2)
    ey = ((b3 & 0x03) << 8) | b4
    return RegionCommand(x, y, ex, ey, command)
