from tincture.parsing.formatting import (
    format_alpha,
    format_color,
    to_hex,
    to_hexa,
    to_rgb_string,
    to_rgba_string,
    to_hsl_string,
    to_hsla_string,
)
from tincture.types import RGBA, HSL, ColorFormat

red = RGBA(255, 0, 0, 1.0)
half_red = RGBA(255, 0, 0, 0.5)
red_hsl = HSL(0, 100, 50)

def test_format_alpha():
    assert format_alpha(1.0) == "1"
    assert format_alpha(0) == "0"
    assert format_alpha(0.5) == "0.5"
    assert format_alpha(0.25) == "0.25"

def test_format_alpha_never_uses_exponent():
    assert format_alpha(0.00001) == "0.00001"
    assert format_alpha(1e-7) == "0.0000001"
    assert format_alpha(0.123456789) == "0.123456789"
    assert "e" not in format_alpha(128 / 255)

def test_hex():
    assert to_hex(red) == "#ff0000"
    assert to_hex(RGBA(1.4, 15.6, 254.5, 1.0)) == "#0110ff"
    assert to_hex(half_red) == "#ff0000"
    assert to_hex(half_red, include_alpha=True) == "#ff000080"

def test_hexa_drops_opaque_alpha():
    assert to_hexa(red) == "#ff0000"
    assert to_hexa(half_red) == "#ff000080"

def test_rgb_strings():
    assert to_rgb_string(red) == "rgb(255, 0, 0)"
    assert to_rgba_string(half_red) == "rgba(255, 0, 0, 0.5)"
    assert to_rgba_string(red) == "rgba(255, 0, 0, 1)"
    assert to_rgba_string(RGBA(0, 0, 0, 0.00001)) == "rgba(0, 0, 0, 0.00001)"

def test_hsl_strings():
    assert to_hsl_string(red_hsl) == "hsl(0, 100%, 50%)"
    assert to_hsla_string(red_hsl, 0.25) == "hsla(0, 100%, 50%, 0.25)"

def test_format_color_dispatch():
    assert format_color(red, red_hsl, ColorFormat.HEX) == "#ff0000"
    assert format_color(half_red, red_hsl, ColorFormat.HEXA) == "#ff000080"
    assert format_color(red, red_hsl, ColorFormat.RGB) == "rgb(255, 0, 0)"
    assert format_color(half_red, red_hsl, ColorFormat.HSLA) == "hsla(0, 100%, 50%, 0.5)"

def test_format_color_falls_back_to_hex():
    assert format_color(red, red_hsl, ColorFormat.NAMED) == "#ff0000"
    assert format_color(red, red_hsl, ColorFormat.CMYK) == "#ff0000"
