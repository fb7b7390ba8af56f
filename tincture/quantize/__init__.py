"""
Palette quantisers over RGBA pixel buffers.

- :func:`extract_palette`: sample an RGBA buffer and cluster the samples
- :func:`kmeans`: k-means++ seeding followed by Lloyd iterations
- :func:`median_cut`: recursive box splitting along the widest channel

Both quantisers take an injected ``numpy.random.Generator`` where randomness
is involved, so a fixed seed gives a fixed palette.

>>> import numpy as np
>>> from tincture.quantize import extract_palette
>>> data = bytes([255, 0, 0, 255] * 50 + [0, 0, 255, 255] * 50)
>>> extract_palette(data, 2, rng=np.random.default_rng(0))
[Pixel(r=255, g=0, b=0), Pixel(r=0, g=0, b=255)]
"""

from .sampling import sample_pixels, sample_stride
from .median_cut import median_cut
from .kmeans import kmeans, kmeans_plus_plus
from .palette import extract_palette, palette_to_colors, PALETTE_METHODS

__all__ = [
    "sample_pixels",
    "sample_stride",
    "median_cut",
    "kmeans",
    "kmeans_plus_plus",
    "extract_palette",
    "palette_to_colors",
    "PALETTE_METHODS",
]
