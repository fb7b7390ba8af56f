from __future__ import annotations
from types import MappingProxyType
from typing import Iterable, Optional

import numpy as np

from .kmeans import kmeans
from .median_cut import median_cut
from .sampling import PixelBuffer, sample_pixels
from ..colors.color_base import Color
from ..defaults import DEFAULT_MAX_ITERATIONS
from ..errors import RangeError, UnsupportedMethodError
from ..types.color_types import Pixel
from ..types.format_type import ColorFormat

PALETTE_METHODS = ("kmeans", "median-cut")


def extract_palette(
    data: PixelBuffer,
    palette_size: int,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    rng: Optional[np.random.Generator] = None,
    method: str = "kmeans",
) -> list[Pixel]:
    """
    Dominant colors of an RGBA pixel buffer.

    Args:
        data: Interleaved R, G, B, A bytes
        palette_size: Number of colors wanted
        max_iterations: k-means iteration cap, unused by median cut
        rng: Random source for k-means seeding
        method: "kmeans" or "median-cut"

    Returns:
        Up to ``palette_size`` Pixels; ``[Pixel(0, 0, 0)]`` when no pixel is
        opaque enough to sample

    Raises:
        RangeError: if palette_size < 1
        UnsupportedMethodError: for an unknown method
    """
    if method not in _QUANTIZERS:
        raise UnsupportedMethodError(
            f"palette method {method!r} is not supported; available: {', '.join(PALETTE_METHODS)}"
        )
    if palette_size < 1:
        raise RangeError(f"palette size must be at least 1, got {palette_size}")

    samples = sample_pixels(data, palette_size)
    if len(samples) == 0:
        return [Pixel(0, 0, 0)]
    return _QUANTIZERS[method](samples, palette_size, max_iterations, rng)


def palette_to_colors(pixels: Iterable[Pixel]) -> list[Color]:
    return [Color(tuple(p), ColorFormat.HEX) for p in pixels]


_QUANTIZERS = MappingProxyType({
    "kmeans": lambda samples, k, iterations, rng: kmeans(samples, k, iterations, rng),
    "median-cut": lambda samples, k, iterations, rng: median_cut(samples, k),
})
