from ..types.color_types import CMYK
from ..utils.num_utils import round_half_up


def rgb_to_cmyk(r: float, g: float, b: float) -> CMYK:
    """
    Convert 8-bit RGB to CMYK integer percentages.

    Pure black short-circuits to (0, 0, 0, 100) since c, m and y are undefined there.
    """
    r, g, b = r / 255, g / 255, b / 255

    k = 1 - max(r, g, b)
    if k == 1:
        return CMYK(0, 0, 0, 100)

    c = (1 - r - k) / (1 - k)
    m = (1 - g - k) / (1 - k)
    y = (1 - b - k) / (1 - k)

    return CMYK(*(round_half_up(v * 100) for v in (c, m, y, k)))
