"""HSL and per-channel adjustments. Every function returns a new Color."""
from __future__ import annotations
from typing import Any

from boundednumbers import clamp

from .color_base import Color, as_color, hex_format_for
from .perceptual import relative_luminance
from ..conversions.to_hsl import unit_rgb_to_hsl
from ..conversions.to_rgb import hsl_to_rgb, hsl_to_unit_rgb
from ..types.color_types import Scalar
from ..types.format_type import MAX_CHANNEL, MAX_PERCENT
from ..utils.num_utils import finite_or_raise, round_channel


def _derived(r: Scalar, g: Scalar, b: Scalar, alpha: float) -> Color:
    return Color((r, g, b, alpha), hex_format_for(alpha))


def _with_hsl(color: Color, h: Scalar, s: Scalar, l: Scalar) -> Color:
    r, g, b = hsl_to_rgb(h, s, l)
    return _derived(r, g, b, color.alpha)


def darken(color: Color, amount: Scalar) -> Color:
    """Lower HSL lightness by ``amount`` percentage points, stopping at 0."""
    h, s, l = color.hsl
    return _with_hsl(color, h, s, max(0, l - finite_or_raise(amount, "amount")))


def lighten(color: Color, amount: Scalar) -> Color:
    """Raise HSL lightness by ``amount`` percentage points, stopping at 100."""
    h, s, l = color.hsl
    return _with_hsl(color, h, s, min(MAX_PERCENT, l + finite_or_raise(amount, "amount")))


def saturate(color: Color, amount: Scalar) -> Color:
    """Shift HSL saturation by ``amount`` points; negative amounts desaturate."""
    h, s, l = color.hsl
    return _with_hsl(color, h, float(clamp(s + finite_or_raise(amount, "amount"), 0, MAX_PERCENT)), l)


def desaturate(color: Color, amount: Scalar) -> Color:
    return saturate(color, -finite_or_raise(amount, "amount"))


def mix(color: Color, other: Any, weight: Scalar = 0.5) -> Color:
    """
    Linear interpolation between two colors, alpha included.

    Args:
        color: First color, weighted by ``weight``
        other: Second color (Color or literal), weighted by ``1 - weight``
        weight: Clamped to [0, 1]

    Returns:
        Mixed color with rounded RGB channels
    """
    color = as_color(color)
    other = as_color(other)
    w = float(clamp(finite_or_raise(weight, "weight"), 0.0, 1.0))
    w2 = 1 - w

    r = round_channel(color.r * w + other.r * w2)
    g = round_channel(color.g * w + other.g * w2)
    b = round_channel(color.b * w + other.b * w2)
    a = color.alpha * w + other.alpha * w2
    return _derived(r, g, b, a)


def complement(color: Color) -> Color:
    """Rotate the hue by 180 degrees, keeping saturation and lightness."""
    h, s, l = unit_rgb_to_hsl(color.r / MAX_CHANNEL, color.g / MAX_CHANNEL, color.b / MAX_CHANNEL)
    r, g, b = hsl_to_unit_rgb((h + 180) % 360, s, l)
    return _derived(
        round_channel(r * MAX_CHANNEL),
        round_channel(g * MAX_CHANNEL),
        round_channel(b * MAX_CHANNEL),
        color.alpha,
    )


def invert(color: Color) -> Color:
    return _derived(MAX_CHANNEL - color.r, MAX_CHANNEL - color.g, MAX_CHANNEL - color.b, color.alpha)


def grayscale(color: Color) -> Color:
    """Gray with the same relative luminance."""
    gray = round_channel(relative_luminance(color) * MAX_CHANNEL)
    return _derived(gray, gray, gray, color.alpha)
