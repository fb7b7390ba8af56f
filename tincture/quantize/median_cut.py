from __future__ import annotations

import numpy as np
from numpy import ndarray as NDArray

from .common import PixelInput, as_pixel_array, distinct_in_order, to_pixels
from ..errors import RangeError
from ..types.color_types import Pixel
from ..utils.num_utils import np_round_half_up

R, G, B = 0, 1, 2


def channel_ranges(box: NDArray) -> NDArray:
    """max - min for r, g and b."""
    return box.max(axis=0) - box.min(axis=0)


def split_axis(ranges: NDArray) -> int:
    """
    Axis to sort a box along.

    G wins whenever its range is at least R's and B's, then B against R and G,
    R otherwise.
    """
    r, g, b = ranges
    if g >= r and g >= b:
        return G
    if b >= r and b >= g:
        return B
    return R


def median_cut(pixels: PixelInput, k: int) -> list[Pixel]:
    """
    Reduce pixels to at most ``k`` colors by median cut.

    The box with the largest single-channel range is split at its median
    along that channel (first box wins ties) until there are ``k`` boxes.
    Each box is then reduced to its rounded mean.

    Args:
        pixels: (n, 3) RGB values
        k: Number of colors, at least 1

    Returns:
        ``min(k, distinct pixels)`` colors; ``[Pixel(0, 0, 0)]`` for empty input

    Raises:
        RangeError: if k < 1
    """
    if k < 1:
        raise RangeError(f"median cut needs k >= 1, got {k}")
    arr = as_pixel_array(pixels)
    if len(arr) == 0:
        return [Pixel(0, 0, 0)]

    distinct = distinct_in_order(arr)
    if len(distinct) <= k:
        return to_pixels(distinct)

    boxes: list[NDArray] = [arr]
    while len(boxes) < k:
        widest = [int(channel_ranges(box).max()) for box in boxes]
        index = int(np.argmax(widest))
        box = boxes[index]

        axis = split_axis(channel_ranges(box))
        box = box[np.argsort(box[:, axis], kind="stable")]
        mid = len(box) // 2
        boxes[index:index + 1] = [box[:mid], box[mid:]]

    means = np.array([box.mean(axis=0) for box in boxes])
    return to_pixels(np_round_half_up(means))
