import re
from ..types.format_type import ColorFormat

# Applied to trimmed input, case-insensitive
PATTERNS: dict[ColorFormat, re.Pattern] = {
    ColorFormat.HEX: re.compile(r"^#?([0-9a-f]{6}|[0-9a-f]{3})$", re.IGNORECASE),
    ColorFormat.HEXA: re.compile(r"^#?([0-9a-f]{8}|[0-9a-f]{4})$", re.IGNORECASE),
    ColorFormat.RGB: re.compile(
        r"^rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$",
        re.IGNORECASE,
    ),
    ColorFormat.RGBA: re.compile(
        r"^rgba\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(0|1|0?\.\d+)\s*\)$",
        re.IGNORECASE,
    ),
    ColorFormat.HSL: re.compile(
        r"^hsl\(\s*(\d{1,3})\s*,\s*(\d{1,3})%\s*,\s*(\d{1,3})%\s*\)$",
        re.IGNORECASE,
    ),
    ColorFormat.HSLA: re.compile(
        r"^hsla\(\s*(\d{1,3})\s*,\s*(\d{1,3})%\s*,\s*(\d{1,3})%\s*,\s*(0|1|0?\.\d+)\s*\)$",
        re.IGNORECASE,
    ),
}
