from tincture.utils import (
    value_or_default,
    finite_or_raise,
    resolve_rng,
    round_channel,
    round_half_up,
    np_round_half_up,
)
import numpy as np
from tincture.errors import RangeError, TinctureError
import pytest

def test_value_or_default():
    assert value_or_default(None, 3) == 3
    assert value_or_default(0, 3) == 0

def test_finite_or_raise():
    assert finite_or_raise(3) == 3.0
    assert finite_or_raise("2.5") == 2.5
    for bad in (float("nan"), float("inf"), None, "abc"):
        with pytest.raises(RangeError):
            finite_or_raise(bad)

def test_range_error_hierarchy():
    with pytest.raises(TinctureError):
        finite_or_raise(float("-inf"))
    with pytest.raises(ValueError):
        finite_or_raise(float("-inf"))

def test_round_channel():
    assert round_channel(127.4) == 127
    assert round_channel(-3) == 0
    assert round_channel(300) == 255
    assert round_channel(150, maximum=100) == 100
    assert round_channel(126.5) == 127
    assert round_channel(254.5) == 255

def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4999) == 2
    assert round_half_up(-0.5) == 0
    assert np_round_half_up(np.array([0.5, 1.5, 2.5, 3.49])).tolist() == [1, 2, 3, 3]

def test_resolve_rng():
    rng = np.random.default_rng(0)
    assert resolve_rng(rng) is rng
    assert isinstance(resolve_rng(None), np.random.Generator)
