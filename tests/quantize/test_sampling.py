from tincture.quantize.sampling import sample_pixels, sample_stride
from tincture.errors import RangeError
import numpy as np
import pytest

rgba = bytes([
    255, 0, 0, 255,
    0, 255, 0, 100,
    0, 0, 255, 200,
    9, 9, 9, 128,
])

def test_keeps_opaque_pixels():
    samples = sample_pixels(rgba, 1)
    assert samples.shape == (2, 3)
    assert samples.tolist() == [[255, 0, 0], [0, 0, 255]]

def test_alpha_threshold_is_exclusive():
    assert sample_pixels(bytes([9, 9, 9, 128]), 1).shape == (0, 3)
    assert sample_pixels(bytes([9, 9, 9, 129]), 1).tolist() == [[9, 9, 9]]

def test_trailing_partial_pixel_ignored():
    assert sample_pixels(rgba + bytes([1, 2]), 1).tolist() == [[255, 0, 0], [0, 0, 255]]

def test_buffer_types_agree():
    expected = sample_pixels(rgba, 1).tolist()
    assert sample_pixels(bytearray(rgba), 1).tolist() == expected
    assert sample_pixels(memoryview(rgba), 1).tolist() == expected
    assert sample_pixels(list(rgba), 1).tolist() == expected
    assert sample_pixels(np.frombuffer(rgba, dtype=np.uint8), 1).tolist() == expected
    assert sample_pixels(np.frombuffer(rgba, dtype=np.uint8).reshape(2, 2, 4), 1).tolist() == expected

def test_empty_buffer():
    assert sample_pixels(b"", 3).shape == (0, 3)

def test_stride():
    assert sample_stride(10, 3) == 1
    assert sample_stride(4000 * 8, 1) == 8
    assert sample_stride(4000 * 8, 2) == 4

def test_stride_applied():
    pixels = np.tile(np.array([1, 2, 3, 255], dtype=np.uint8), 8000)
    samples = sample_pixels(pixels.tobytes(), 1)
    assert len(samples) == 1000

def test_rejects_bad_input():
    with pytest.raises(RangeError):
        sample_pixels(rgba, 0)
    with pytest.raises(RangeError):
        sample_pixels([300, 0, 0, 255], 1)
