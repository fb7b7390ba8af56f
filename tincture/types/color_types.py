from __future__ import annotations
from typing import Literal, NamedTuple, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ColorSpace = Literal["rgb", "hsl", "xyz", "lab", "cmyk"]
ARRAY_SPACES = {"rgb", "xyz", "lab"}


class Pixel(NamedTuple):
    r: int
    g: int
    b: int


class RGBA(NamedTuple):
    r: float
    g: float
    b: float
    a: float


class HSL(NamedTuple):
    h: int
    s: int
    l: int


class XYZ(NamedTuple):
    x: float
    y: float
    z: float


class Lab(NamedTuple):
    l: float
    a: float
    b: float


class CMYK(NamedTuple):
    c: int
    m: int
    y: int
    k: int


def element_to_array(element: Union[ScalarVector, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: Scalar, tuple, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    if isinstance(element, (int, float)):
        return np.array([element], dtype=float)
    return np.array(element, dtype=float)
