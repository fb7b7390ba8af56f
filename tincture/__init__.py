"""Tincture: CSS-style color parsing, perceptual metrics and palette extraction."""

from .colors import (
    Color,
    as_color,
    make_arithmetic,
    mix,
    WCAG_AA_NORMAL,
    WCAG_AA_LARGE,
    WCAG_AAA_NORMAL,
    WCAG_AAA_LARGE,
    relative_luminance,
    contrast_ratio,
    meets_wcag,
    delta_e,
    color_temperature,
)
from .parsing import (
    classify,
    parse,
    is_valid,
    NAMED_COLORS,
    format_color,
)
from .conversions import (
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_xyz,
    xyz_to_rgb,
    rgb_to_lab,
    lab_to_rgb,
    xyz_to_lab,
    lab_to_xyz,
    rgb_to_cmyk,
    cmyk_to_rgb,
    np_rgb_to_lab,
    np_lab_to_rgb,
    convert,
    np_convert,
)
from .quantize import extract_palette, palette_to_colors, kmeans, median_cut, sample_pixels
from .types import ColorFormat, Pixel, RGBA, HSL, XYZ, Lab, CMYK
from .errors import TinctureError, ParseError, RangeError, UnsupportedMethodError, ParseWarning

__all__ = [
    # colors
    "Color",
    "as_color",
    "make_arithmetic",
    "mix",
    "WCAG_AA_NORMAL",
    "WCAG_AA_LARGE",
    "WCAG_AAA_NORMAL",
    "WCAG_AAA_LARGE",
    "relative_luminance",
    "contrast_ratio",
    "meets_wcag",
    "delta_e",
    "color_temperature",

    # parsing
    "classify",
    "parse",
    "is_valid",
    "NAMED_COLORS",
    "format_color",

    # conversions
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_xyz",
    "xyz_to_rgb",
    "rgb_to_lab",
    "lab_to_rgb",
    "xyz_to_lab",
    "lab_to_xyz",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    "np_rgb_to_lab",
    "np_lab_to_rgb",
    "convert",
    "np_convert",

    # quantize
    "extract_palette",
    "palette_to_colors",
    "kmeans",
    "median_cut",
    "sample_pixels",

    # types
    "ColorFormat",
    "Pixel",
    "RGBA",
    "HSL",
    "XYZ",
    "Lab",
    "CMYK",

    # errors
    "TinctureError",
    "ParseError",
    "RangeError",
    "UnsupportedMethodError",
    "ParseWarning",
]
