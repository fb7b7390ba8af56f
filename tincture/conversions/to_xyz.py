import numpy as np
from numpy import ndarray as NDArray
from .linear import srgb_to_linear, np_srgb_to_linear
from .matrices import RGB_TO_XYZ, D65_WHITE, LAB_EPSILON, LAB_KAPPA, mat_vec, as_np_matrix
from ..types.color_types import XYZ

## RGB to XYZ

def rgb_to_xyz(r: float, g: float, b: float) -> XYZ:
    """
    Convert 8-bit sRGB to CIE XYZ (D65, Y of white = 1).

    Args:
        r, g, b: Channels in [0, 255]

    Returns:
        XYZ tristimulus values
    """
    lr = srgb_to_linear(r / 255)
    lg = srgb_to_linear(g / 255)
    lb = srgb_to_linear(b / 255)
    return XYZ(*mat_vec(RGB_TO_XYZ, lr, lg, lb))

def np_rgb_to_xyz(rgb: NDArray) -> NDArray:
    """
    Vectorized: convert 8-bit sRGB to XYZ.

    Args:
        rgb: array of shape (..., 3) with channels in [0, 255]

    Returns:
        xyz: array of shape (..., 3)
    """
    linear = np_srgb_to_linear(np.asarray(rgb, dtype=float) / 255.0)
    return linear @ as_np_matrix(RGB_TO_XYZ).T

## LAB to XYZ

def _f_inv(t: float) -> float:
    cube = t ** 3
    return cube if cube > LAB_EPSILON else (116 * t - 16) / LAB_KAPPA

def lab_to_xyz(l: float, a: float, b: float, white=D65_WHITE) -> XYZ:
    """
    Convert CIE L*a*b* back to XYZ.

    Args:
        l, a, b: Lab coordinates
        white: Reference white (Xn, Yn, Zn)

    Returns:
        XYZ tristimulus values
    """
    fy = (l + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    x = _f_inv(fx)
    y = fy ** 3 if l > LAB_KAPPA * LAB_EPSILON else l / LAB_KAPPA
    z = _f_inv(fz)
    return XYZ(x * white[0], y * white[1], z * white[2])

def np_lab_to_xyz(lab: NDArray, white=D65_WHITE) -> NDArray:
    """Vectorized: convert Lab arrays of shape (..., 3) to XYZ."""
    lab = np.asarray(lab, dtype=float)
    l, a, b = lab[..., 0], lab[..., 1], lab[..., 2]

    fy = (l + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    x = np.where(fx ** 3 > LAB_EPSILON, fx ** 3, (116 * fx - 16) / LAB_KAPPA)
    y = np.where(l > LAB_KAPPA * LAB_EPSILON, fy ** 3, l / LAB_KAPPA)
    z = np.where(fz ** 3 > LAB_EPSILON, fz ** 3, (116 * fz - 16) / LAB_KAPPA)

    return np.stack([x, y, z], axis=-1) * np.asarray(white, dtype=float)
