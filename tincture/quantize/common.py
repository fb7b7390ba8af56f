from __future__ import annotations
from typing import Sequence, Union

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Pixel

PixelInput = Union[Sequence[Sequence[int]], NDArray]


def as_pixel_array(pixels: PixelInput) -> NDArray:
    """(n, 3) int64 array from Pixels, tuples or an array."""
    arr = np.asarray(pixels, dtype=np.int64)
    if arr.size == 0:
        return arr.reshape(0, 3)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"expected an (n, 3) pixel array, got shape {arr.shape}")
    return arr


def distinct_in_order(pixels: NDArray) -> NDArray:
    """Unique rows in first-seen order."""
    _, first = np.unique(pixels, axis=0, return_index=True)
    return pixels[np.sort(first)]


def to_pixels(arr: NDArray) -> list[Pixel]:
    return [Pixel(int(r), int(g), int(b)) for r, g, b in arr]
