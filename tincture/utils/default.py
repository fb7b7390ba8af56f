from typing import Optional, TypeVar

import numpy as np

T = TypeVar('T')


def value_or_default(value: Optional[T], default: T) -> T:
    """``default`` when ``value`` is None; falsy values such as 0 are kept."""
    return default if value is None else value


def resolve_rng(rng: Optional[np.random.Generator] = None) -> np.random.Generator:
    """The injected generator, or a fresh unseeded ``default_rng()``."""
    if rng is None:
        return np.random.default_rng()
    return rng
