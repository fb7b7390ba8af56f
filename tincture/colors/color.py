from __future__ import annotations
from .color_base import Color
from .adjust import darken, lighten, saturate, desaturate, mix, complement, invert, grayscale
from .perceptual import (
    relative_luminance,
    contrast_ratio,
    delta_e,
    meets_wcag,
    color_temperature,
)
from . import arithmetic  # noqa: F401  installs the operators on Color


Color.darken = darken
Color.lighten = lighten
Color.saturate = saturate
Color.desaturate = desaturate
Color.mix = mix
Color.complement = complement
Color.invert = invert
Color.grayscale = grayscale

Color.contrast_ratio = contrast_ratio
Color.delta_e = delta_e
Color.meets_wcag = meets_wcag
Color.luminance = property(relative_luminance)
Color.temperature = property(color_temperature)
