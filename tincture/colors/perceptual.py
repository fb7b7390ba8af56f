"""
Perceptual measurements: relative luminance, WCAG contrast, ΔE and CCT.

WCAG thresholds
---------------
- AA normal text: 4.5
- AA large text: 3.0
- AAA normal text: 7.0
- AAA large text: 4.5
"""
from __future__ import annotations
import math
from types import MappingProxyType
from typing import Any

import numpy as np
from numpy import ndarray as NDArray

from .color_base import as_color
from ..conversions.linear import srgb_to_linear, np_srgb_to_linear
from ..conversions.matrices import D65_WHITE, LUMINANCE_WEIGHTS
from ..defaults import DEFAULT_DELTA_E_METHOD
from ..errors import RangeError, UnsupportedMethodError
from ..utils.num_utils import round_half_up

WCAG_AA_NORMAL = 4.5
WCAG_AA_LARGE = 3.0
WCAG_AAA_NORMAL = 7.0
WCAG_AAA_LARGE = 4.5

WCAG_CONTRAST = MappingProxyType({
    ("AA", False): WCAG_AA_NORMAL,
    ("AA", True): WCAG_AA_LARGE,
    ("AAA", False): WCAG_AAA_NORMAL,
    ("AAA", True): WCAG_AAA_LARGE,
})

DELTA_E_METHODS = ("76",)

# McCamy's cubic around the epicentre (0.3320, 0.1858)
_MCCAMY_XE = 0.3320
_MCCAMY_YE = 0.1858


def relative_luminance(color: Any) -> float:
    """
    WCAG relative luminance in [0, 1].

    Each byte channel is divided by 255 and linearised before weighting with
    0.2126, 0.7152 and 0.0722.
    """
    color = as_color(color)
    wr, wg, wb = LUMINANCE_WEIGHTS
    return (
        wr * srgb_to_linear(color.r / 255)
        + wg * srgb_to_linear(color.g / 255)
        + wb * srgb_to_linear(color.b / 255)
    )


def np_relative_luminance(rgb: NDArray) -> NDArray:
    """Vectorized: relative luminance of (..., 3) byte arrays."""
    linear = np_srgb_to_linear(np.asarray(rgb, dtype=float) / 255.0)
    return linear @ np.asarray(LUMINANCE_WEIGHTS)


def contrast_ratio(first: Any, second: Any) -> float:
    """
    WCAG 2.x contrast ratio, (Lmax + 0.05) / (Lmin + 0.05).

    Symmetric in its arguments; ranges from 1 (same luminance) to 21.
    """
    l1 = relative_luminance(first)
    l2 = relative_luminance(second)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def meets_wcag(first: Any, second: Any, level: str = "AA", large_text: bool = False) -> bool:
    """Check a color pair against the WCAG AA or AAA threshold."""
    key = (level.upper(), bool(large_text))
    if key not in WCAG_CONTRAST:
        raise ValueError(f"Unknown WCAG level: {level!r}")
    return contrast_ratio(first, second) >= WCAG_CONTRAST[key]


def delta_e(first: Any, second: Any, method: str = DEFAULT_DELTA_E_METHOD) -> float:
    """
    Color difference between two colors.

    Only CIE76 (Euclidean distance in L*a*b*) is implemented.

    Raises:
        UnsupportedMethodError: for any method other than "76"
    """
    method = str(method)
    if method not in DELTA_E_METHODS:
        raise UnsupportedMethodError(
            f"delta E method {method!r} is not supported; available: {', '.join(DELTA_E_METHODS)}"
        )
    lab1 = as_color(first).lab
    lab2 = as_color(second).lab
    return math.sqrt(
        (lab1.l - lab2.l) ** 2 + (lab1.a - lab2.a) ** 2 + (lab1.b - lab2.b) ** 2
    )


def color_temperature(color: Any) -> int:
    """
    Correlated color temperature in Kelvin (McCamy's approximation).

    Black has no chromaticity and is treated as achromatic, i.e. as the D65
    white point.

    Raises:
        RangeError: when the chromaticity sits on the approximation's pole (y = 0.1858)
    """
    x_, y_, z_ = as_color(color).xyz
    total = x_ + y_ + z_
    if total == 0:
        x_, y_, z_ = D65_WHITE
        total = x_ + y_ + z_

    x = x_ / total
    y = y_ / total
    if y == _MCCAMY_YE:
        raise RangeError("chromaticity y = 0.1858 has no McCamy temperature")

    n = (x - _MCCAMY_XE) / (_MCCAMY_YE - y)
    cct = 437 * n ** 3 + 3601 * n ** 2 + 6861 * n + 5517
    return round_half_up(cct)


__all__ = [
    "WCAG_AA_NORMAL",
    "WCAG_AA_LARGE",
    "WCAG_AAA_NORMAL",
    "WCAG_AAA_LARGE",
    "WCAG_CONTRAST",
    "relative_luminance",
    "np_relative_luminance",
    "contrast_ratio",
    "meets_wcag",
    "delta_e",
    "color_temperature",
]
