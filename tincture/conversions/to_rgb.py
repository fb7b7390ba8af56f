import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import clamp
from .linear import linear_to_srgb, np_linear_to_srgb
from .matrices import XYZ_TO_RGB, D65_WHITE, mat_vec, as_np_matrix
from .to_xyz import lab_to_xyz, np_lab_to_xyz
from ..types.color_types import Pixel
from ..utils.num_utils import round_channel

def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range, negative hues included."""
    return h % 360

## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB using chroma and 60 degree sectors.

    Args:
        h: Hue in degrees, any real value
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    s = float(clamp(s, 0.0, 1.0))
    l = float(clamp(l, 0.0, 1.0))

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    hue_section = int(h // 60)

    if hue_section == 0:
        r, g, b = c, x, 0.0
    elif hue_section == 1:
        r, g, b = x, c, 0.0
    elif hue_section == 2:
        r, g, b = 0.0, c, x
    elif hue_section == 3:
        r, g, b = 0.0, x, c
    elif hue_section == 4:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return r + m, g + m, b + m

def hsl_to_rgb(h: float, s: float, l: float) -> Pixel:
    """
    Convert HSL with percentage saturation and lightness to 8-bit RGB.

    Args:
        h: Hue in degrees, normalised into [0, 360)
        s: Saturation in [0, 100]
        l: Lightness in [0, 100]

    Returns:
        Pixel with rounded channels in [0, 255]
    """
    r, g, b = hsl_to_unit_rgb(h, s / 100, l / 100)
    return Pixel(round_channel(r * 255), round_channel(g * 255), round_channel(b * 255))

## XYZ / LAB to RGB

def xyz_to_rgb(x: float, y: float, z: float) -> Pixel:
    """Convert XYZ (D65) to 8-bit sRGB, clipping out-of-gamut values."""
    lr, lg, lb = mat_vec(XYZ_TO_RGB, x, y, z)
    return Pixel(*(
        round_channel(linear_to_srgb(float(clamp(v, 0.0, 1.0))) * 255)
        for v in (lr, lg, lb)
    ))

def lab_to_rgb(l: float, a: float, b: float, white=D65_WHITE) -> Pixel:
    """Convert Lab to 8-bit sRGB through XYZ."""
    return xyz_to_rgb(*lab_to_xyz(l, a, b, white))

def np_xyz_to_rgb(xyz: NDArray) -> NDArray:
    """
    Vectorized: convert XYZ to sRGB.

    Args:
        xyz: array of shape (..., 3)

    Returns:
        rgb: float array of shape (..., 3) with channels in [0, 255]
    """
    linear = np.asarray(xyz, dtype=float) @ as_np_matrix(XYZ_TO_RGB).T
    return np_linear_to_srgb(linear) * 255.0

def np_lab_to_rgb(lab: NDArray, white=D65_WHITE) -> NDArray:
    """Vectorized: convert Lab arrays of shape (..., 3) to sRGB in [0, 255]."""
    return np_xyz_to_rgb(np_lab_to_xyz(lab, white))

## CMYK to RGB

def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> Pixel:
    """
    Convert CMYK percentages to 8-bit RGB.

    Args:
        c, m, y, k: Percentages in [0, 100]

    Returns:
        Pixel with rounded channels
    """
    c, m, y, k = (float(clamp(v, 0, 100)) / 100 for v in (c, m, y, k))
    return Pixel(
        round_channel(255 * (1 - c) * (1 - k)),
        round_channel(255 * (1 - m) * (1 - k)),
        round_channel(255 * (1 - y) * (1 - k)),
    )
