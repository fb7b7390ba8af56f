from tincture.conversions.to_lab import rgb_to_lab, xyz_to_lab, np_rgb_to_lab
from tincture.conversions.to_xyz import rgb_to_xyz, lab_to_xyz
from tincture.conversions.to_rgb import lab_to_rgb, np_lab_to_rgb
from tincture.conversions.linear import srgb_to_linear, linear_to_srgb, np_srgb_to_linear
from tincture.conversions.matrices import D65_WHITE
from ..samples import samples_rgb_lab
import numpy as np

lab_tolerance = 0.1

def test_rgb_to_lab():
    for rgb, expected in samples_rgb_lab.items():
        lab = rgb_to_lab(*rgb)
        for got, exp in zip(lab, expected):
            assert abs(got - exp) < lab_tolerance, rgb

def test_white_maps_to_reference_white():
    x, y, z = rgb_to_xyz(255, 255, 255)
    assert np.allclose((x, y, z), D65_WHITE, atol=1e-4)

def test_xyz_lab_round_trip():
    for rgb in samples_rgb_lab:
        xyz = rgb_to_xyz(*rgb)
        back = lab_to_xyz(*xyz_to_lab(*xyz))
        assert np.allclose(xyz, back, atol=1e-9)

def test_lab_to_rgb_round_trip():
    for rgb in list(samples_rgb_lab) + [(12, 34, 56), (200, 150, 100)]:
        out = lab_to_rgb(*rgb_to_lab(*rgb))
        assert all(abs(a - b) <= 1 for a, b in zip(out, rgb)), rgb

def test_companding_round_trip():
    for v in (0.0, 0.02, 0.04045, 0.5, 1.0):
        assert abs(linear_to_srgb(srgb_to_linear(v)) - v) < 1e-7

def test_numpy_matches_scalar():
    rgb = np.array(list(samples_rgb_lab.keys()), dtype=float)
    expected = np.array([rgb_to_lab(*row) for row in rgb])
    assert np.allclose(np_rgb_to_lab(rgb), expected, atol=1e-9)

    linear = np_srgb_to_linear(rgb / 255)
    assert np.allclose(linear, [[srgb_to_linear(v / 255) for v in row] for row in rgb])

def test_numpy_lab_to_rgb_round_trip():
    rgb = np.array([[255, 0, 0], [12, 34, 56], [200, 150, 100]], dtype=float)
    assert np.allclose(np_lab_to_rgb(np_rgb_to_lab(rgb)), rgb, atol=0.5)
