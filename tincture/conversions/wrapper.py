import numpy as np
from typing import Callable, cast

from .to_hsl import rgb_to_hsl
from .to_xyz import rgb_to_xyz, np_rgb_to_xyz
from .to_lab import xyz_to_lab, np_xyz_to_lab
from .to_xyz import lab_to_xyz, np_lab_to_xyz
from .to_rgb import hsl_to_rgb, xyz_to_rgb, cmyk_to_rgb, np_xyz_to_rgb
from .to_cmyk import rgb_to_cmyk

from ..types.color_types import ColorSpace, ScalarVector, ARRAY_SPACES, element_to_array

SPACES = ("rgb", "hsl", "xyz", "lab", "cmyk")

# Every space knows how to reach RGB and how to leave it
TO_RGB: dict[str, Callable[..., ScalarVector]] = {
    "hsl": hsl_to_rgb,
    "xyz": xyz_to_rgb,
    "lab": lambda l, a, b: xyz_to_rgb(*lab_to_xyz(l, a, b)),
    "cmyk": cmyk_to_rgb,
}

FROM_RGB: dict[str, Callable[..., ScalarVector]] = {
    "hsl": rgb_to_hsl,
    "xyz": rgb_to_xyz,
    "lab": lambda r, g, b: xyz_to_lab(*rgb_to_xyz(r, g, b)),
    "cmyk": rgb_to_cmyk,
}

# Direct edges that skip the RGB hop (and its rounding)
CONVERT_DIRECT: dict[tuple[str, str], Callable[..., ScalarVector]] = {
    ("xyz", "lab"): xyz_to_lab,
    ("lab", "xyz"): lab_to_xyz,
}

CONVERT_NUMPY: dict[tuple[str, str], Callable[[np.ndarray], np.ndarray]] = {
    ("rgb", "xyz"): np_rgb_to_xyz,
    ("xyz", "rgb"): np_xyz_to_rgb,
    ("xyz", "lab"): np_xyz_to_lab,
    ("lab", "xyz"): np_lab_to_xyz,
    ("rgb", "lab"): lambda arr: np_xyz_to_lab(np_rgb_to_xyz(arr)),
    ("lab", "rgb"): lambda arr: np_xyz_to_rgb(np_lab_to_xyz(arr)),
}

def _check_space(space: str, allowed) -> str:
    space = space.lower()
    if space not in allowed:
        raise ValueError(f"Unknown space: {space}")
    return space

def convert(
    color: ScalarVector,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> ScalarVector:
    """
    Convert a single color between rgb, hsl, xyz, lab and cmyk.

    Conversions not covered by a direct edge go through 8-bit RGB.

    Args:
        color: Channel tuple in the source space (rgb in [0, 255])
        from_space: Source space
        to_space: Target space

    Returns:
        Channel tuple in the target space
    """
    fs = _check_space(from_space, SPACES)
    ts = _check_space(to_space, SPACES)
    if fs == ts:
        return tuple(color)

    key = (fs, ts)
    if key in CONVERT_DIRECT:
        return CONVERT_DIRECT[key](*color)

    rgb = tuple(color) if fs == "rgb" else TO_RGB[fs](*color)
    if ts == "rgb":
        return rgb
    return FROM_RGB[ts](*rgb)

def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> np.ndarray:
    """
    Vectorized converter for arrays of shape (..., 3) between rgb, xyz and lab.

    RGB output is float in [0, 255]; round it if bytes are needed.
    """
    fs = _check_space(from_space, ARRAY_SPACES)
    ts = _check_space(to_space, ARRAY_SPACES)
    arr = element_to_array(cast(np.ndarray, color))
    if arr.shape[-1] != 3:
        raise ValueError(f"expected last dimension to be 3, got shape {arr.shape}")
    if fs == ts:
        return arr
    return CONVERT_NUMPY[(fs, ts)](arr)
