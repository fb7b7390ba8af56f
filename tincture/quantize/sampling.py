from __future__ import annotations
from typing import Sequence, Union

import numpy as np
from numpy import ndarray as NDArray

from ..defaults import ALPHA_THRESHOLD, SAMPLES_PER_COLOR
from ..errors import RangeError

PixelBuffer = Union[bytes, bytearray, memoryview, Sequence[int], NDArray]

CHANNELS_PER_PIXEL = 4


def as_byte_array(data: PixelBuffer) -> NDArray:
    """Flat uint8 view of an interleaved RGBA buffer."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        return np.frombuffer(data, dtype=np.uint8)
    arr = np.asarray(data)
    if arr.size and (arr.min() < 0 or arr.max() > 255):
        raise RangeError("pixel buffer values must be bytes in [0, 255]")
    return arr.astype(np.uint8, copy=False).reshape(-1)


def sample_stride(length: int, palette_size: int) -> int:
    """Stride in pixels, aiming at ``SAMPLES_PER_COLOR`` samples per palette entry."""
    return max(1, length // (palette_size * SAMPLES_PER_COLOR * CHANNELS_PER_PIXEL))


def sample_pixels(data: PixelBuffer, palette_size: int) -> NDArray:
    """
    Take every s-th pixel of an RGBA buffer and keep the opaque ones.

    Args:
        data: Interleaved R, G, B, A bytes. A trailing partial pixel is ignored.
        palette_size: Target palette size, used for the stride

    Returns:
        (n, 3) int64 array of RGB samples whose alpha byte is above 128
    """
    if palette_size < 1:
        raise RangeError(f"palette size must be at least 1, got {palette_size}")
    flat = as_byte_array(data)
    n_pixels = flat.size // CHANNELS_PER_PIXEL
    pixels = flat[: n_pixels * CHANNELS_PER_PIXEL].reshape(n_pixels, CHANNELS_PER_PIXEL)

    sampled = pixels[:: sample_stride(flat.size, palette_size)]
    opaque = sampled[sampled[:, 3] > ALPHA_THRESHOLD]
    return opaque[:, :3].astype(np.int64)
