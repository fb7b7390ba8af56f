import numpy as np
from numpy import ndarray as NDArray
from .matrices import D65_WHITE, LAB_EPSILON, LAB_KAPPA
from .to_xyz import rgb_to_xyz, np_rgb_to_xyz
from ..types.color_types import Lab

## XYZ to LAB

def _f(t: float) -> float:
    return t ** (1 / 3) if t > LAB_EPSILON else (LAB_KAPPA * t + 16) / 116

def xyz_to_lab(x: float, y: float, z: float, white=D65_WHITE) -> Lab:
    """
    Convert XYZ to CIE L*a*b*.

    Args:
        x, y, z: Tristimulus values (Y of white = 1)
        white: Reference white (Xn, Yn, Zn), D65 by default

    Returns:
        Lab with L in [0, 100]
    """
    fx = _f(x / white[0])
    fy = _f(y / white[1])
    fz = _f(z / white[2])
    return Lab(116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz))

def rgb_to_lab(r: float, g: float, b: float) -> Lab:
    """Convert 8-bit sRGB to Lab through XYZ."""
    return xyz_to_lab(*rgb_to_xyz(r, g, b))

def np_xyz_to_lab(xyz: NDArray, white=D65_WHITE) -> NDArray:
    """
    Vectorized: convert XYZ to Lab.

    Args:
        xyz: array of shape (..., 3)

    Returns:
        lab: array of shape (..., 3)
    """
    norm = np.asarray(xyz, dtype=float) / np.asarray(white, dtype=float)
    f = np.where(norm > LAB_EPSILON, np.cbrt(norm), (LAB_KAPPA * norm + 16) / 116)

    l = 116 * f[..., 1] - 16
    a = 500 * (f[..., 0] - f[..., 1])
    b = 200 * (f[..., 1] - f[..., 2])
    return np.stack([l, a, b], axis=-1)

def np_rgb_to_lab(rgb: NDArray) -> NDArray:
    """Vectorized: convert 8-bit sRGB arrays of shape (..., 3) to Lab."""
    return np_xyz_to_lab(np_rgb_to_xyz(rgb))
