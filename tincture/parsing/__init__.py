from .parser import classify, parse, parse_rgba, parse_literal, is_valid, DECODERS
from .named import NAMED_COLORS, is_named_color, lookup_named
from .patterns import PATTERNS
from .formatting import (
    format_alpha,
    format_color,
    to_hex,
    to_hexa,
    to_rgb_string,
    to_rgba_string,
    to_hsl_string,
    to_hsla_string,
)

__all__ = [
    "classify",
    "parse",
    "parse_rgba",
    "parse_literal",
    "is_valid",
    "DECODERS",
    "NAMED_COLORS",
    "is_named_color",
    "lookup_named",
    "PATTERNS",
    "format_alpha",
    "format_color",
    "to_hex",
    "to_hexa",
    "to_rgb_string",
    "to_rgba_string",
    "to_hsl_string",
    "to_hsla_string",
]
