from tincture.colors import Color
from tincture.colors.perceptual import (
    WCAG_AA_NORMAL,
    WCAG_AA_LARGE,
    WCAG_AAA_NORMAL,
    WCAG_AAA_LARGE,
    relative_luminance,
    np_relative_luminance,
    contrast_ratio,
    meets_wcag,
    delta_e,
    color_temperature,
)
from tincture.errors import UnsupportedMethodError
import numpy as np
import pytest

palette = ["#000000", "#ffffff", "#ff0000", "#00ff00", "#0000ff", "#123456", "#767676", "#8a2be2"]

def test_constants():
    assert WCAG_AA_NORMAL == 4.5
    assert WCAG_AA_LARGE == 3.0
    assert WCAG_AAA_NORMAL == 7.0
    assert WCAG_AAA_LARGE == 4.5

def test_luminance_bounds():
    assert relative_luminance("#000") == 0
    assert relative_luminance("#fff") == pytest.approx(1.0)
    for literal in palette:
        assert 0 <= Color(literal).luminance <= 1

def test_luminance_numpy_matches_scalar():
    rgb = np.array([Color(p).rgb for p in palette])
    expected = [relative_luminance(p) for p in palette]
    assert np.allclose(np_relative_luminance(rgb), expected, atol=1e-12)

def test_contrast_black_white():
    assert contrast_ratio("#FFFFFF", "#000000") == pytest.approx(21.0)
    assert Color("white").contrast_ratio("black") > 20

def test_contrast_properties():
    for a in palette:
        assert contrast_ratio(a, a) == pytest.approx(1.0)
        for b in palette:
            assert contrast_ratio(a, b) == pytest.approx(contrast_ratio(b, a))
            assert 1 <= contrast_ratio(a, b) <= 21 + 1e-9

def test_meets_wcag():
    assert meets_wcag("#767676", "#ffffff")
    assert not meets_wcag("#777777", "#ffffff")
    assert meets_wcag("#777777", "#ffffff", large_text=True)
    assert not Color("#767676").meets_wcag("#ffffff", level="AAA")
    assert Color("#000").meets_wcag("#fff", level="aaa")

def test_meets_wcag_unknown_level():
    with pytest.raises(ValueError):
        meets_wcag("#000", "#fff", level="AAAA")

def test_delta_e():
    assert delta_e("#123456", "#123456") == 0
    assert abs(delta_e("#000000", "#ffffff") - 100) < 1e-3
    assert Color("#ff0000").delta_e("#ff0001") < 1
    assert delta_e("#ff0000", "#00ff00", method=76) == delta_e("#ff0000", "#00ff00")

def test_delta_e_other_methods_unsupported():
    for method in ("94", "2000", "cmc"):
        with pytest.raises(UnsupportedMethodError):
            delta_e("#000", "#fff", method=method)

def test_color_temperature():
    white = color_temperature("#ffffff")
    assert 6400 < white < 6600
    assert abs(color_temperature("#000000") - white) <= 1
    assert Color("#ffffff").temperature == white
    assert isinstance(Color("#ff8800").temperature, int)
