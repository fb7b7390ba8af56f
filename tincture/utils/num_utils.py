import math

import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import clamp

from ..errors import RangeError


def finite_or_raise(value, name: str = "value") -> float:
    """Return ``value`` as a float, rejecting NaN, infinities and non-numbers."""
    try:
        v = float(value)
    except (TypeError, ValueError) as e:
        raise RangeError(f"{name} must be a real number, got {value!r}") from e
    if not math.isfinite(v):
        raise RangeError(f"{name} must be finite, got {value!r}")
    return v


def round_half_up(value: float) -> int:
    """Nearest integer, with .5 going toward positive infinity (127.5 -> 128)."""
    return int(math.floor(value + 0.5))


def np_round_half_up(values: NDArray) -> NDArray:
    return np.floor(values + 0.5).astype(np.int64)


def round_channel(value: float, maximum: int = 255) -> int:
    """Round a channel half up to an integer inside ``[0, maximum]``."""
    return round_half_up(float(clamp(value, 0, maximum)))
