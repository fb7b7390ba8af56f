from typing import Callable

import numpy as np

from ..types.color_types import HSL, RGBA
from ..types.format_type import ColorFormat
from ..utils.num_utils import round_channel


def format_alpha(alpha: float) -> str:
    """
    Shortest positional form of ``alpha``: ``"1"``, ``"0.5"``, ``"0.00001"``.

    Never uses exponent notation, which the rgba/hsla grammar rejects.
    """
    return np.format_float_positional(float(alpha), trim="-")


def to_hex(rgba: RGBA, include_alpha: bool = False) -> str:
    r, g, b = (round_channel(v) for v in rgba[:3])
    out = f"#{r:02x}{g:02x}{b:02x}"
    if include_alpha and rgba.a < 1:
        out += f"{round_channel(rgba.a * 255):02x}"
    return out


def to_hexa(rgba: RGBA) -> str:
    """``#rrggbbaa`` when alpha is below 1, plain hex otherwise."""
    return to_hex(rgba, include_alpha=True)


def to_rgb_string(rgba: RGBA) -> str:
    r, g, b = (round_channel(v) for v in rgba[:3])
    return f"rgb({r}, {g}, {b})"


def to_rgba_string(rgba: RGBA) -> str:
    r, g, b = (round_channel(v) for v in rgba[:3])
    return f"rgba({r}, {g}, {b}, {format_alpha(rgba.a)})"


def to_hsl_string(hsl: HSL) -> str:
    return f"hsl({hsl.h}, {hsl.s}%, {hsl.l}%)"


def to_hsla_string(hsl: HSL, alpha: float) -> str:
    return f"hsla({hsl.h}, {hsl.s}%, {hsl.l}%, {format_alpha(alpha)})"


FORMATTERS: dict[ColorFormat, Callable[[RGBA, HSL], str]] = {
    ColorFormat.HEX: lambda rgba, hsl: to_hex(rgba),
    ColorFormat.HEXA: lambda rgba, hsl: to_hexa(rgba),
    ColorFormat.RGB: lambda rgba, hsl: to_rgb_string(rgba),
    ColorFormat.RGBA: lambda rgba, hsl: to_rgba_string(rgba),
    ColorFormat.HSL: lambda rgba, hsl: to_hsl_string(hsl),
    ColorFormat.HSLA: lambda rgba, hsl: to_hsla_string(hsl, rgba.a),
}


def format_color(rgba: RGBA, hsl: HSL, fmt: ColorFormat) -> str:
    """Render in the given notation; NAMED and CMYK fall back to hex."""
    formatter = FORMATTERS.get(fmt)
    if formatter is None:
        return to_hex(rgba)
    return formatter(rgba, hsl)
