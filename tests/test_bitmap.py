# SPDX-License-Identifier: Apache-2.0
# Copyright © 2025 Rejeb Ben Rejeb

"""RGB565 conversion, size check and chunking of the pixel stream."""

import numpy as np
import pytest
from PIL import Image

from usb35_lcd_control.device_controller.display.bitmap import (
    encode_rgb565,
    is_valid_size,
    iter_chunks,
    rgb565,
    to_pixel_array,
)


@pytest.mark.parametrize("r, g, b", [
    (0, 0, 0),
    (255, 255, 255),
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (17, 130, 201),
    (200, 3, 64),
])
def test_rgb565_bit_fields(r, g, b):
    value = rgb565(r, g, b)
    assert value >> 11 == r >> 3
    assert (value >> 5) & 0x3F == g >> 2
    assert value & 0x1F == b >> 3


def test_rgb565_primaries():
    assert rgb565(255, 255, 255) == 0xFFFF
    assert rgb565(255, 0, 0) == 0xF800
    assert rgb565(0, 255, 0) == 0x07E0
    assert rgb565(0, 0, 255) == 0x001F


def test_rgb565_is_lossy():
    assert rgb565(0, 0, 0) == rgb565(4, 0, 0)
    assert rgb565(0, 0, 0) == rgb565(0, 3, 0)
    assert rgb565(8, 0, 0) != rgb565(0, 0, 0)


def test_encode_is_little_endian():
    pixels = np.array([[255, 0, 0], [0, 255, 0], [0, 0, 255]], dtype=np.uint8)
    assert encode_rgb565(pixels) == bytes([0x00, 0xF8, 0xE0, 0x07, 0x1F, 0x00])


def test_encode_matches_scalar_conversion():
    rng = np.random.default_rng(7)
    pixels = rng.integers(0, 256, size=(4, 5, 3), dtype=np.uint8)
    expected = b"".join(
        rgb565(int(r), int(g), int(b)).to_bytes(2, "little")
        for r, g, b in pixels.reshape(-1, 3)
    )
    assert encode_rgb565(pixels) == expected


@pytest.mark.parametrize("width, height", [(320, 480), (480, 320)])
def test_panel_sizes_are_valid(width, height):
    assert is_valid_size(width, height)


@pytest.mark.parametrize("width, height", [(100, 100), (321, 479), (0, 480), (320, 0)])
def test_other_sizes_are_rejected(width, height):
    assert not is_valid_size(width, height)


@pytest.mark.parametrize("width, height", [(320, 320), (320, 100), (50, 480)])
def test_single_matching_dimension_is_accepted(width, height):
    assert is_valid_size(width, height)


def test_to_pixel_array_from_image():
    img = Image.new("RGBA", (320, 480), (10, 20, 30, 255))
    pixels = to_pixel_array(img)
    assert pixels.shape == (480, 320, 3)
    assert pixels.dtype == np.uint8
    assert tuple(pixels[0, 0]) == (10, 20, 30)


def test_to_pixel_array_rejects_bad_shape():
    with pytest.raises(ValueError, match="shape"):
        to_pixel_array(np.zeros((480, 320), dtype=np.uint8))


def test_chunks_are_eight_rows():
    pixels = np.zeros((480, 320, 3), dtype=np.uint8)
    chunks = list(iter_chunks(pixels))
    assert len(chunks) == 60
    assert all(len(c) == 320 * 8 * 2 for c in chunks)


def test_remainder_chunk_is_shorter():
    pixels = np.zeros((100, 320, 3), dtype=np.uint8)
    chunks = list(iter_chunks(pixels))
    assert len(chunks) == 13
    assert all(len(c) == 320 * 8 * 2 for c in chunks[:-1])
    assert len(chunks[-1]) == 2 * 320 * 4


def test_chunks_follow_row_major_order():
    pixels = np.zeros((16, 320, 3), dtype=np.uint8)
    pixels[0, 0] = (255, 0, 0)
    pixels[7, 319] = (0, 0, 255)
    pixels[8, 0] = (0, 255, 0)
    first, second = iter_chunks(pixels)
    assert first[:2] == bytes([0x00, 0xF8])
    assert first[-2:] == bytes([0x1F, 0x00])
    assert second[:2] == bytes([0xE0, 0x07])


def test_to_pixel_array_converts_in_range_integers():
    pixels = to_pixel_array(np.full((2, 2, 3), 200, dtype=np.int64))
    assert pixels.dtype == np.uint8
    assert pixels[0, 0, 0] == 200


@pytest.mark.parametrize("pixels", [
    np.full((2, 2, 3), 300, dtype=np.int32),
    np.full((2, 2, 3), -1, dtype=np.int16),
    np.full((2, 2, 3), 0.5, dtype=np.float32),
])
def test_to_pixel_array_rejects_non_8bit_data(pixels):
    with pytest.raises(ValueError, match="8-bit"):
        to_pixel_array(pixels)
