# SPDX-License-Identifier: Apache-2.0
# Copyright © 2025 Rejeb Ben Rejeb

from typing import Iterator, Union

import numpy as np
from PIL import Image

from .commands import WIDTH, HEIGHT

ROWS_PER_CHUNK = 8

PixelBuffer = Union[Image.Image, np.ndarray]


def to_pixel_array(image: PixelBuffer) -> np.ndarray:
    """Return the image as a (height, width, 3) uint8 array"""
    if isinstance(image, Image.Image):
        return np.asarray(image.convert("RGB"), dtype=np.uint8)

    pixels = np.asarray(image)
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Pixel buffer must have shape (height, width, 3), got {pixels.shape}")
    if pixels.dtype != np.uint8:
        if not np.issubdtype(pixels.dtype, np.integer) or (pixels.size and (pixels.min() < 0 or pixels.max() > 255)):
            raise ValueError(f"Pixel buffer must hold 8-bit channels, got {pixels.dtype} data")
        pixels = pixels.astype(np.uint8)
    return pixels


def is_valid_size(width: int, height: int) -> bool:
    # Either dimension matching is enough, so 320x320 passes as well
    if width == 0 or height == 0:
        return False
    return (width == WIDTH or height == HEIGHT) or (width == HEIGHT or height == WIDTH)


def rgb565(r: int, g: int, b: int) -> int:
    return ((r >> 3) << 11) | ((g >> 2) << 5) | (b >> 3)


def encode_rgb565(pixels: np.ndarray) -> bytes:
    """
    Convert RGB888 pixels to RGB565, two bytes per pixel, LSB first.
    Accepts any array whose last axis holds the three channels.
    """
    r = pixels[..., 0].astype(np.uint16)
    g = pixels[..., 1].astype(np.uint16)
    b = pixels[..., 2].astype(np.uint16)
    v = rgb565(r, g, b)
    lo = (v & 0xFF).astype(np.uint8)
    hi = (v >> 8).astype(np.uint8)
    out = np.empty(v.size * 2, dtype=np.uint8)
    out[0::2] = lo.ravel()  # LE
    out[1::2] = hi.ravel()
    return out.tobytes()


def iter_chunks(pixels: np.ndarray) -> Iterator[bytes]:
    """
    Yield the encoded pixel stream in chunks of 8 full rows.
    The last chunk is shorter when the height is not a multiple of 8.
    """
    height, width = pixels.shape[:2]
    flat = pixels.reshape(height * width, 3)
    chunk_pixels = width * ROWS_PER_CHUNK
    for start in range(0, len(flat), chunk_pixels):
        yield encode_rgb565(flat[start:start + chunk_pixels])
