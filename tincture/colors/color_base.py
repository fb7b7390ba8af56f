from __future__ import annotations
import math
import warnings
from collections.abc import Mapping, Sequence
from typing import Any, Callable, ClassVar, Optional, Self, Union

import numpy as np
from boundednumbers import clamp
from numpy import ndarray

from ..conversions.to_cmyk import rgb_to_cmyk
from ..conversions.to_hsl import rgb_to_hsl
from ..conversions.to_lab import rgb_to_lab
from ..conversions.to_rgb import hsl_to_rgb, cmyk_to_rgb, normalize_hue
from ..conversions.to_xyz import rgb_to_xyz
from ..defaults import DEFAULT_ALPHA, DEFAULT_FORMAT, FALLBACK_RGBA, CHANNEL_TOLERANCE
from ..errors import ParseError, ParseWarning
from ..parsing.formatting import (
    format_color,
    to_hex,
    to_hexa,
    to_rgb_string,
    to_rgba_string,
    to_hsl_string,
    to_hsla_string,
)
from ..parsing.parser import parse_literal
from ..types.color_types import CMYK, HSL, Lab, RGBA, XYZ, Scalar
from ..types.format_type import ColorFormat, MAX_CHANNEL, MAX_PERCENT
from ..utils.default import value_or_default, resolve_rng
from ..utils.num_utils import finite_or_raise

ColorInput = Union[str, "Color", Mapping, Sequence, ndarray, None]


def hex_format_for(alpha: float) -> ColorFormat:
    """Format tag for colors produced by operations."""
    return ColorFormat.HEXA if alpha < 1 else ColorFormat.HEX


class Color:
    """
    An sRGB color with alpha.

    Channels ``r``, ``g`` and ``b`` live in [0, 255] and ``alpha`` in [0, 1];
    values outside those ranges are clamped on construction. The format tag
    only decides how ``str()`` renders the color, equality ignores it.

    Instances are frozen except for ``alpha``. Assigning alpha clamps the
    value and drops the cached HSL and Lab views. Use :meth:`with_alpha` to get
    a new color instead when instances are shared.

    >>> c = Color("#FF0000")
    >>> c.to_rgb()
    'rgb(255, 0, 0)'
    >>> c.hsl
    HSL(h=0, s=100, l=50)
    """

    __slots__ = ('_r', '_g', '_b', '_alpha', '_format', '_hsl', '_lab', '_is_frozen')

    # Bound in .color once the operation modules are loaded
    darken:     Callable[[Color, Scalar], Color]
    lighten:    Callable[[Color, Scalar], Color]
    saturate:   Callable[[Color, Scalar], Color]
    desaturate: Callable[[Color, Scalar], Color]
    mix:        Callable[..., Color]
    complement: Callable[[Color], Color]
    invert:     Callable[[Color], Color]
    grayscale:  Callable[[Color], Color]
    contrast_ratio: Callable[[Color, Any], float]
    delta_e:    Callable[..., float]
    meets_wcag: Callable[..., bool]
    luminance:  ClassVar[property]
    temperature: ClassVar[property]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes, alpha excepted."""
        if getattr(self, '_is_frozen', False) and name != 'alpha':
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        value: ColorInput = None,
        format: Optional[ColorFormat | str] = None,
        *,
        strict: bool = False,
    ) -> None:
        try:
            rgba, detected = self._coerce(value)
        except ParseError as e:
            if strict:
                raise
            warnings.warn(f"{e}; falling back to opaque black", ParseWarning, stacklevel=2)
            rgba, detected, format = FALLBACK_RGBA, DEFAULT_FORMAT, None

        r, g, b, a = (finite_or_raise(v, name) for v, name in zip(rgba, "rgba"))
        fmt = ColorFormat(format) if format is not None else value_or_default(detected, DEFAULT_FORMAT)

        super().__setattr__('_r', float(clamp(r, 0, MAX_CHANNEL)))
        super().__setattr__('_g', float(clamp(g, 0, MAX_CHANNEL)))
        super().__setattr__('_b', float(clamp(b, 0, MAX_CHANNEL)))
        super().__setattr__('_alpha', float(clamp(a, 0.0, 1.0)))
        super().__setattr__('_format', fmt)
        super().__setattr__('_hsl', None)
        super().__setattr__('_lab', None)

        # freeze instance; only alpha may change from here on
        super().__setattr__('_is_frozen', True)

    @staticmethod
    def _coerce(value: ColorInput) -> tuple[tuple, Optional[ColorFormat]]:
        """
        Turn any accepted input into an RGBA tuple.

        The second item is the detected format, or None when there is nothing
        to detect it from.

        Raises:
            ParseError: for strings that match no notation
        """
        if value is None:
            return FALLBACK_RGBA, None

        if isinstance(value, Color):
            return tuple(value.rgba), value.format

        if isinstance(value, str):
            rgba, fmt = parse_literal(value)
            return tuple(rgba), fmt

        if isinstance(value, Mapping):
            try:
                channels = (value["r"], value["g"], value["b"])
            except KeyError as e:
                raise ValueError(f"Color mapping is missing channel {e.args[0]!r}") from e
            return channels + (value.get("a", DEFAULT_ALPHA),), None

        if isinstance(value, ndarray):
            value = value.tolist()

        if isinstance(value, Sequence):
            if len(value) == 3:
                return tuple(value) + (DEFAULT_ALPHA,), None
            if len(value) == 4:
                return tuple(value), None
            raise ValueError(f"Color expects 3 or 4 channels, got {len(value)}")

        raise TypeError(f"Cannot build a Color from {type(value).__name__}")

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def r(self) -> float:
        return self._r

    @property
    def g(self) -> float:
        return self._g

    @property
    def b(self) -> float:
        return self._b

    @property
    def format(self) -> ColorFormat:
        return self._format

    @property
    def rgb(self) -> tuple[float, float, float]:
        return (self._r, self._g, self._b)

    @property
    def rgba(self) -> RGBA:
        return RGBA(self._r, self._g, self._b, self._alpha)

    @property
    def hsl(self) -> HSL:
        """Integer HSL, computed on first access."""
        if self._hsl is None:
            super().__setattr__('_hsl', rgb_to_hsl(self._r, self._g, self._b))
        return self._hsl

    @property
    def lab(self) -> Lab:
        """CIE L*a*b* (D65), computed on first access."""
        if self._lab is None:
            super().__setattr__('_lab', rgb_to_lab(self._r, self._g, self._b))
        return self._lab

    @property
    def xyz(self) -> XYZ:
        return rgb_to_xyz(self._r, self._g, self._b)

    # ------------------ ALPHA ------------------
    @property
    def alpha(self) -> float:
        return self._alpha

    @alpha.setter
    def alpha(self, value: Scalar) -> None:
        a = finite_or_raise(value, "alpha")
        super().__setattr__('_alpha', float(clamp(a, 0.0, 1.0)))
        self._invalidate_cached_values()

    def _invalidate_cached_values(self) -> None:
        super().__setattr__('_hsl', None)
        super().__setattr__('_lab', None)

    def with_alpha(self, alpha: Scalar) -> Self:
        """Return a new color with the given alpha; this one is left untouched."""
        return self.__class__((self._r, self._g, self._b, alpha), self._format)

    def copy(self) -> Self:
        return self.__class__(self, self._format)

    # ------------------ FORMATTING ------------------
    def to_hex(self, include_alpha: bool = False) -> str:
        return to_hex(self.rgba, include_alpha)

    def to_hexa(self) -> str:
        return to_hexa(self.rgba)

    def to_rgb(self) -> str:
        return to_rgb_string(self.rgba)

    def to_rgba(self) -> str:
        return to_rgba_string(self.rgba)

    def to_hsl(self) -> str:
        return to_hsl_string(self.hsl)

    def to_hsla(self) -> str:
        return to_hsla_string(self.hsl, self._alpha)

    def to_cmyk(self) -> CMYK:
        return rgb_to_cmyk(self._r, self._g, self._b)

    def __str__(self) -> str:
        return format_color(self.rgba, self.hsl, self._format)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)!r}, format={self._format.value!r})"

    # ------------------ EQUALITY ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return all(
            math.isclose(x, y, rel_tol=0.0, abs_tol=CHANNEL_TOLERANCE)
            for x, y in zip(self.rgba, other.rgba)
        )

    __hash__ = None  # alpha is assignable

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def parse(cls, text: str) -> Self:
        """Strict parse: raises ParseError instead of falling back to black."""
        return cls(text, strict=True)

    @classmethod
    def from_rgb(cls, r: Scalar, g: Scalar, b: Scalar, a: Scalar = DEFAULT_ALPHA) -> Self:
        return cls((r, g, b, a), ColorFormat.RGBA)

    @classmethod
    def from_hsl(cls, h: Scalar, s: Scalar, l: Scalar, a: Scalar = DEFAULT_ALPHA) -> Self:
        """
        Build a color from HSL with s and l as percentages.

        The hue is normalised into [0, 360), s, l and a are clamped.
        """
        h = normalize_hue(finite_or_raise(h, "h"))
        s = float(clamp(finite_or_raise(s, "s"), 0, MAX_PERCENT))
        l = float(clamp(finite_or_raise(l, "l"), 0, MAX_PERCENT))
        r, g, b = hsl_to_rgb(h, s, l)
        return cls((r, g, b, a), ColorFormat.HSLA)

    @classmethod
    def from_cmyk(cls, c: Scalar, m: Scalar, y: Scalar, k: Scalar, a: Scalar = DEFAULT_ALPHA) -> Self:
        c, m, y, k = (finite_or_raise(v, name) for v, name in zip((c, m, y, k), "cmyk"))
        r, g, b = cmyk_to_rgb(c, m, y, k)
        return cls((r, g, b, a), ColorFormat.CMYK)

    @classmethod
    def random(cls, alpha: Scalar = DEFAULT_ALPHA, rng: Optional[np.random.Generator] = None) -> Self:
        rng = resolve_rng(rng)
        r, g, b = (int(v) for v in rng.integers(0, 256, size=3))
        return cls((r, g, b, alpha), hex_format_for(alpha))

    # ------------------ SERIALISATION ------------------
    def to_dict(self) -> dict:
        return {
            "value": str(self),
            "format": self._format.value,
            "rgba": self.rgba._asdict(),
            "hsl": self.hsl._asdict(),
            "temperature": self.temperature,
        }

    @classmethod
    def from_dict(cls, data: Mapping) -> Self:
        color = cls.parse(data["value"])
        color = cls(color, data.get("format", color.format.value))
        # hex/rgb/hsl strings drop alpha, the rgba record keeps it
        rgba = data.get("rgba")
        if rgba is not None and "a" in rgba:
            return color.with_alpha(rgba["a"])
        return color


def as_color(value: Any) -> Color:
    """Accept a Color or anything the Color constructor takes."""
    return value if isinstance(value, Color) else Color(value)
