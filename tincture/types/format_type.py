# No dependencies
from enum import Enum


class ColorFormat(str, Enum):
    HEX = "hex"
    HEXA = "hexa"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    NAMED = "named"
    CMYK = "cmyk"


# Order in which literals are tried by the parser
PARSE_ORDER = (
    ColorFormat.NAMED,
    ColorFormat.HEX,
    ColorFormat.HEXA,
    ColorFormat.RGB,
    ColorFormat.RGBA,
    ColorFormat.HSL,
    ColorFormat.HSLA,
)

MAX_CHANNEL = 255
MAX_PERCENT = 100
