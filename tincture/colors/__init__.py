"""
Tincture Color
==============

The :class:`Color` class: a single sRGB color with alpha, parsed from CSS-like
literals and rendered back in the notation it came from.

Features
--------
- Parsing of hex (3, 4, 6 and 8 digits), rgb(), rgba(), hsl(), hsla() and
  16 named colors
- Lenient construction that warns and falls back to opaque black, or strict
  construction through :meth:`Color.parse`
- Frozen channels; only ``alpha`` may be assigned after construction
- Cached HSL and Lab views
- HSL adjustments: darken, lighten, saturate, desaturate, complement
- Mixing, inversion and luminance-preserving grayscale
- WCAG contrast checks, CIE76 ΔE and McCamy color temperature
- Per-channel arithmetic with clamping or bouncing overflow

Usage
-----
>>> from tincture.colors import Color
>>>
>>> red = Color("#FF0000")
>>> print(red.hsl)  # HSL(h=0, s=100, l=50)
>>> print(red.darken(20))  # #990000
>>>
>>> # Contrast between two colors
>>> round(Color("white").contrast_ratio("black"), 2)  # 21.0
>>> Color("#777").meets_wcag("white", level="AA")  # False
>>>
>>> # Arithmetic keeps channels in range
>>> (Color("#808080") + Color("#A0A0A0")).to_rgb()  # 'rgb(255, 255, 255)'
>>>
>>> # Lenient vs strict construction
>>> Color("not a color")  # ParseWarning, opaque black
>>> Color.parse("not a color")  # raises ParseError

Notes
-----
- Channels are stored as floats and rounded only when rendered
- The format tag of derived colors is hex, or hexa when alpha < 1
- Equality compares channels with a small absolute tolerance and ignores the
  format tag; colors are unhashable because alpha is assignable
"""

from .color_base import Color, as_color, hex_format_for
from . import color  # noqa: F401  binds the operations onto Color
from .adjust import darken, lighten, saturate, desaturate, mix, complement, invert, grayscale
from .perceptual import (
    WCAG_AA_NORMAL,
    WCAG_AA_LARGE,
    WCAG_AAA_NORMAL,
    WCAG_AAA_LARGE,
    WCAG_CONTRAST,
    relative_luminance,
    np_relative_luminance,
    contrast_ratio,
    meets_wcag,
    delta_e,
    color_temperature,
)
from .arithmetic import make_arithmetic


__all__ = [
    "Color",
    "as_color",
    "hex_format_for",
    "darken",
    "lighten",
    "saturate",
    "desaturate",
    "mix",
    "complement",
    "invert",
    "grayscale",
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
    "make_arithmetic",
]
