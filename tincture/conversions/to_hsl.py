from ..types.color_types import HSL
from ..utils.num_utils import round_half_up

## RGB to HSL conversions

def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL without rounding.

    The hue comes from whichever channel is the maximum; when red is the
    maximum and green is below blue, 6 is added before scaling by 60.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        return 0.0, 0.0, lightness

    if lightness > 0.5:
        saturation = delta / (2 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    if max_c == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif max_c == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4

    return hue * 60, saturation, lightness

def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """
    Convert 8-bit RGB to integer HSL.

    Args:
        r, g, b: Channels in [0, 255]

    Returns:
        HSL with h in [0, 360), s and l in [0, 100]
    """
    h, s, l = unit_rgb_to_hsl(r / 255, g / 255, b / 255)
    return HSL(round_half_up(h) % 360, round_half_up(s * 100), round_half_up(l * 100))
