from tincture.conversions.to_rgb import hsl_to_rgb, normalize_hue, cmyk_to_rgb
from tincture.conversions.to_cmyk import rgb_to_cmyk
from ..samples import samples_hsl_rgb, samples_rgb_cmyk

def test_hsl_to_rgb():
    for hsl, expected in samples_hsl_rgb.items():
        assert tuple(hsl_to_rgb(*hsl)) == expected, hsl

def test_hue_is_normalised():
    assert normalize_hue(-120) == 240
    assert normalize_hue(480) == 120
    assert tuple(hsl_to_rgb(-120, 100, 50)) == (0, 0, 255)
    assert tuple(hsl_to_rgb(480, 100, 50)) == (0, 255, 0)

def test_hsl_saturation_and_lightness_clamped():
    assert tuple(hsl_to_rgb(0, 150, 50)) == (255, 0, 0)
    assert tuple(hsl_to_rgb(0, 100, 120)) == (255, 255, 255)

def test_rgb_to_cmyk():
    for rgb, expected in samples_rgb_cmyk.items():
        assert tuple(rgb_to_cmyk(*rgb)) == expected, rgb

def test_black_is_pure_key():
    assert tuple(rgb_to_cmyk(0, 0, 0)) == (0, 0, 0, 100)

def test_cmyk_to_rgb():
    assert tuple(cmyk_to_rgb(0, 100, 100, 0)) == (255, 0, 0)
    assert tuple(cmyk_to_rgb(0, 0, 0, 100)) == (0, 0, 0)
    assert tuple(cmyk_to_rgb(0, 0, 0, 50)) == (128, 128, 128)

def test_cmyk_round_trip():
    for rgb in samples_rgb_cmyk:
        out = cmyk_to_rgb(*rgb_to_cmyk(*rgb))
        assert all(abs(a - b) <= 2 for a, b in zip(out, rgb))
