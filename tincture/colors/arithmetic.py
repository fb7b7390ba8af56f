from __future__ import annotations
from typing import Any, Callable

import numpy as np
from boundednumbers import clamp, bounce

from .color_base import Color
from ..types.format_type import MAX_CHANNEL

__all__ = ["make_arithmetic", "ChannelArithmetic", "clamp", "bounce"]

OverflowFunction = Callable[[Any, float, float], Any]


def _operand_channels(operand: Any) -> np.ndarray:
    """RGB of a Color, literal or wrapped color; numbers broadcast to all three channels."""
    if isinstance(operand, ChannelArithmetic):
        operand = operand.unwrap()
    if isinstance(operand, (int, float, np.number)):
        return np.full(3, float(operand))
    if not isinstance(operand, Color):
        operand = Color(operand)
    return np.array(operand.rgb, dtype=float)


class ChannelArithmetic:
    """
    Per-channel arithmetic on the RGB bytes of a Color.

    Results outside [0, 255] are passed through ``overflow`` (``clamp`` by
    default, ``bounce`` reflects off the bounds). The left operand's alpha and
    format tag carry over, and every result is wrapped again so chains keep
    the same overflow policy. Other attributes are read from the wrapped color.
    """

    __slots__ = ("_color", "_overflow")

    def __init__(self, color: Color, overflow: OverflowFunction = clamp) -> None:
        self._color = color
        self._overflow = overflow

    def __getattr__(self, name: str) -> Any:
        return getattr(self._color, name)

    def unwrap(self) -> Color:
        return self._color

    def _apply(self, operand: Any, ufunc: np.ufunc) -> ChannelArithmetic:
        left = np.array(self._color.rgb, dtype=float)
        raw = ufunc(left, _operand_channels(operand))
        # boundednumbers works on one number at a time
        r, g, b = (float(self._overflow(float(v), 0, MAX_CHANNEL)) for v in raw)
        result = type(self._color)((r, g, b, self._color.alpha), self._color.format)
        return ChannelArithmetic(result, self._overflow)

    def __add__(self, operand: Any) -> ChannelArithmetic:
        return self._apply(operand, np.add)

    __radd__ = __add__

    def __sub__(self, operand: Any) -> ChannelArithmetic:
        return self._apply(operand, np.subtract)

    def __mul__(self, operand: Any) -> ChannelArithmetic:
        return self._apply(operand, np.multiply)

    __rmul__ = __mul__

    def __truediv__(self, operand: Any) -> ChannelArithmetic:
        return self._apply(operand, np.divide)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ChannelArithmetic):
            other = other.unwrap()
        return self._color == other

    __hash__ = None

    def __str__(self) -> str:
        return str(self._color)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._color!r}, overflow={getattr(self._overflow, '__name__', self._overflow)})"


def make_arithmetic(color: Color, overflow_function: OverflowFunction = clamp) -> ChannelArithmetic:
    """
    Wrap ``color`` for channel arithmetic with a chosen overflow policy,
    e.g. ``make_arithmetic(c, overflow_function=bounce) + other``.
    """
    return ChannelArithmetic(color, overflow_function)


def _forward(dunder: str) -> Callable[[Color, Any], ChannelArithmetic]:
    def operator(self: Color, operand: Any) -> ChannelArithmetic:
        return getattr(ChannelArithmetic(self), dunder)(operand)
    operator.__name__ = dunder
    return operator


# Plain colors use the clamping policy
for _dunder in ("__add__", "__radd__", "__sub__", "__mul__", "__rmul__", "__truediv__"):
    setattr(Color, _dunder, _forward(_dunder))
del _dunder
