import numpy as np
from numpy import ndarray as NDArray

## sRGB companding

def srgb_to_linear(value: float) -> float:
    """
    Undo the sRGB transfer curve.

    Args:
        value: Companded channel in [0, 1]

    Returns:
        Linear-light channel in [0, 1]
    """
    if value <= 0.04045:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4

def linear_to_srgb(value: float) -> float:
    """
    Apply the sRGB transfer curve.

    Args:
        value: Linear-light channel in [0, 1]

    Returns:
        Companded channel in [0, 1]
    """
    if value <= 0.0031308:
        return 12.92 * value
    return 1.055 * value ** (1 / 2.4) - 0.055

def np_srgb_to_linear(values: NDArray) -> NDArray:
    """Vectorized: undo the sRGB transfer curve on values in [0, 1]."""
    v = np.clip(np.asarray(values, dtype=float), 0.0, 1.0)
    return np.where(v <= 0.04045, v / 12.92, ((v + 0.055) / 1.055) ** 2.4)

def np_linear_to_srgb(values: NDArray) -> NDArray:
    """Vectorized: apply the sRGB transfer curve on values in [0, 1]."""
    v = np.clip(np.asarray(values, dtype=float), 0.0, 1.0)
    return np.where(v <= 0.0031308, 12.92 * v, 1.055 * v ** (1 / 2.4) - 0.055)
