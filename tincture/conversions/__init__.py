"""
Tincture Color Space Conversions
================================

This module provides color space conversion utilities between sRGB, linear RGB,
CIE XYZ, CIE L*a*b*, HSL and CMYK, with scalar and vectorized (numpy)
implementations.

Features
--------
- sRGB companding in both directions
- RGB → XYZ → LAB with the D65 matrix and reference white
- RGB ↔ HSL with integer rounding for display, unrounded variants for math
- RGB ↔ CMYK as integer percentages
- Vectorized numpy functions for batch processing of pixel arrays

Conversion Functions
-------------------

sRGB ↔ linear:
    srgb_to_linear(v), linear_to_srgb(v)
    np_srgb_to_linear(arr), np_linear_to_srgb(arr)

RGB ↔ XYZ ↔ LAB:
    rgb_to_xyz(r, g, b), xyz_to_lab(x, y, z), rgb_to_lab(r, g, b)
    lab_to_xyz(l, a, b), xyz_to_rgb(x, y, z), lab_to_rgb(l, a, b)
    np_rgb_to_xyz, np_xyz_to_lab, np_rgb_to_lab
    np_lab_to_xyz, np_xyz_to_rgb, np_lab_to_rgb

RGB ↔ HSL:
    unit_rgb_to_hsl(r, g, b)   floats, channels in [0, 1]
    rgb_to_hsl(r, g, b)        integer HSL from bytes
    hsl_to_unit_rgb(h, s, l)   floats, s and l in [0, 1]
    hsl_to_rgb(h, s, l)        bytes from percentage s and l

RGB ↔ CMYK:
    rgb_to_cmyk(r, g, b), cmyk_to_rgb(c, m, y, k)

High-Level API
-------------
    convert(color, from_space, to_space)
        Any pair of rgb/hsl/xyz/lab/cmyk
    np_convert(array, from_space, to_space)
        Arrays between rgb/xyz/lab

Examples
--------
>>> from tincture.conversions import rgb_to_hsl, hsl_to_rgb
>>> rgb_to_hsl(255, 0, 0)
HSL(h=0, s=100, l=50)
>>> hsl_to_rgb(240, 100, 50)
Pixel(r=0, g=0, b=255)
"""

from .linear import (
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
)

from .to_xyz import rgb_to_xyz, np_rgb_to_xyz, lab_to_xyz, np_lab_to_xyz
from .to_lab import xyz_to_lab, rgb_to_lab, np_xyz_to_lab, np_rgb_to_lab
from .to_hsl import unit_rgb_to_hsl, rgb_to_hsl
from .to_rgb import (
    normalize_hue,
    hsl_to_unit_rgb,
    hsl_to_rgb,
    xyz_to_rgb,
    lab_to_rgb,
    cmyk_to_rgb,
    np_xyz_to_rgb,
    np_lab_to_rgb,
)
from .to_cmyk import rgb_to_cmyk

from .matrices import RGB_TO_XYZ, XYZ_TO_RGB, D65_WHITE

from .wrapper import convert, np_convert

__all__ = [
    # companding
    'srgb_to_linear',
    'linear_to_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',

    # XYZ / LAB
    'rgb_to_xyz',
    'xyz_to_lab',
    'rgb_to_lab',
    'lab_to_xyz',
    'xyz_to_rgb',
    'lab_to_rgb',
    'np_rgb_to_xyz',
    'np_xyz_to_lab',
    'np_rgb_to_lab',
    'np_lab_to_xyz',
    'np_xyz_to_rgb',
    'np_lab_to_rgb',

    # HSL
    'normalize_hue',
    'unit_rgb_to_hsl',
    'rgb_to_hsl',
    'hsl_to_unit_rgb',
    'hsl_to_rgb',

    # CMYK
    'rgb_to_cmyk',
    'cmyk_to_rgb',

    # constants
    'RGB_TO_XYZ',
    'XYZ_TO_RGB',
    'D65_WHITE',

    # High-level API
    'convert',
    'np_convert',
]
