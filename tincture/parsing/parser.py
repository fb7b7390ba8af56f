from __future__ import annotations
from typing import Callable, Optional, Sequence, Tuple, TYPE_CHECKING

from .named import lookup_named
from .patterns import PATTERNS
from ..conversions.to_rgb import hsl_to_rgb
from ..defaults import DEFAULT_ALPHA
from ..errors import ParseError
from ..types.color_types import RGBA
from ..types.format_type import ColorFormat, PARSE_ORDER, MAX_CHANNEL, MAX_PERCENT

if TYPE_CHECKING:
    from ..colors.color_base import Color

Captures = Tuple[str, ...]


def classify(text: str) -> Tuple[ColorFormat, Captures]:
    """
    Find which notation a literal is written in.

    The literal is trimmed and lowercased, then matched against the named
    colors and each notation in ``PARSE_ORDER``. Named colors capture their
    hex digits.

    Returns:
        (format, captures) for the first notation that matches

    Raises:
        ParseError: if the input is not a string or matches nothing
    """
    if not isinstance(text, str):
        raise ParseError("color literal must be a string", text)
    trimmed = text.strip().lower()
    if not trimmed:
        raise ParseError("empty color literal", text)

    for fmt in PARSE_ORDER:
        if fmt is ColorFormat.NAMED:
            hex_value = lookup_named(trimmed)
            if hex_value is not None:
                return fmt, (hex_value.lstrip("#").lower(),)
            continue
        match = PATTERNS[fmt].match(trimmed)
        if match:
            return fmt, match.groups()

    raise ParseError("unrecognised color notation", text)


def _alpha(captures: Sequence[str], index: int) -> float:
    return float(captures[index]) if len(captures) > index else DEFAULT_ALPHA


def _decode_hex(captures: Captures) -> RGBA:
    digits = captures[0]
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    a = int(digits[6:8], 16) / 255 if len(digits) == 8 else DEFAULT_ALPHA
    return RGBA(r, g, b, a)


def _decode_rgb(captures: Captures) -> RGBA:
    r, g, b = (min(int(c), MAX_CHANNEL) for c in captures[:3])
    return RGBA(r, g, b, _alpha(captures, 3))


def _decode_hsl(captures: Captures) -> RGBA:
    h, s, l = (int(c) for c in captures[:3])
    r, g, b = hsl_to_rgb(h, min(s, MAX_PERCENT), min(l, MAX_PERCENT))
    return RGBA(r, g, b, _alpha(captures, 3))


DECODERS: dict[ColorFormat, Callable[[Captures], RGBA]] = {
    ColorFormat.NAMED: _decode_hex,
    ColorFormat.HEX: _decode_hex,
    ColorFormat.HEXA: _decode_hex,
    ColorFormat.RGB: _decode_rgb,
    ColorFormat.RGBA: _decode_rgb,
    ColorFormat.HSL: _decode_hsl,
    ColorFormat.HSLA: _decode_hsl,
}


def parse_literal(text: str) -> Tuple[RGBA, ColorFormat]:
    """Decode a literal into canonical RGBA plus the notation it was written in."""
    fmt, captures = classify(text)
    return DECODERS[fmt](captures), fmt


def parse_rgba(text: str) -> RGBA:
    """Decode a literal into canonical RGBA."""
    return parse_literal(text)[0]


def parse(text: str) -> "Color":
    """Parse a literal into a Color, raising ParseError when nothing matches."""
    from ..colors.color_base import Color  # local import to avoid cycles
    return Color.parse(text)


def is_valid(text: str, format: Optional[ColorFormat | str] = None) -> bool:
    """
    Check whether ``text`` is a color literal, optionally of a given notation.
    """
    try:
        fmt, _ = classify(text)
    except ParseError:
        return False
    if format is None:
        return True
    return fmt == ColorFormat(format)
