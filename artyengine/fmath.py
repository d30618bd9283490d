"""Scalar math helpers shared by the engine."""

from __future__ import annotations

import math
import random
from typing import Any

PI = 3.14159265
SMALL_NUMBER = 1.0e-8
KINDA_SMALL_NUMBER = 1.0e-4
BIG_NUMBER = 3.4e38
EULERS_NUMBER = 2.71828183
GOLDEN_RATIO = 1.61803399

_rng = random.Random()

# Minimax polynomial coefficients for the arctangent approximation.
_ATAN_COEFFICIENTS = (
    7.2128853633444123e-03,
    -3.5059680836411644e-02,
    8.1675882859940430e-02,
    -1.3374657325451267e-01,
    1.9856563505717162e-01,
    -3.3324998579202170e-01,
    1.0,
)


def rand_int(lower: int, upper: int) -> int:
    """Return a random integer in the closed range between the two bounds."""
    if lower > upper:
        lower, upper = upper, lower
    return _rng.randint(lower, upper)


def rand_real(lower: float, upper: float) -> float:
    """Return a random real number between the two bounds."""
    if lower > upper:
        lower, upper = upper, lower
    return _rng.uniform(lower, upper)


def rand_perc() -> float:
    """Return a random number in [0, 1)."""
    return _rng.random()


def clamp(value: Any, lower: Any, upper: Any) -> Any:
    """Limit ``value`` to the range spanned by ``lower`` and ``upper`` (in any order)."""
    return min(max(value, min(lower, upper)), max(lower, upper))


def mid(a: Any, b: Any, c: Any) -> Any:
    """Return the median of three values."""
    return sorted((a, b, c))[1]


def inv_sqrt(value: float) -> float:
    """Return 1/sqrt(value), or 0 for 0."""
    if value == 0:
        return 0.0
    return 1.0 / math.sqrt(value)


def is_small_number(value: float) -> bool:
    """Whether ``value`` is within the small-number tolerance of zero."""
    return abs(value) <= SMALL_NUMBER


def fmod(a: float, b: float) -> float:
    """Floating point remainder; 0 when the divisor is negligibly small."""
    if is_small_number(b):
        return 0.0
    return math.fmod(a, b)


def radian_to_degree(radian: float) -> float:
    return radian * 180 / PI


def degree_to_radian(degree: float) -> float:
    return degree * PI / 180


def normalize_degree(angle: float) -> float:
    """Bring an angle into the range [0, 360)."""
    ang = fmod(angle, 360.0)
    return ang if ang >= 0 else ang + 360


def lerp(a: Any, b: Any, alpha: float) -> Any:
    """Linear interpolation from ``a`` to ``b``."""
    return a + alpha * (b - a)


def smooth_step(a: float, b: float, x: float) -> float:
    """Hermite interpolation of ``x`` between ``a`` and ``b``, in [0, 1]."""
    if x < a:
        return 0.0
    if x >= b:
        return 1.0
    fraction = (x - a) / (b - a)
    return fraction * fraction * (3.0 - 2.0 * fraction)


def atan2(y: float, x: float) -> float:
    """Arctangent of y/x by minimax approximation; never returns NaN for finite input."""
    abs_x = abs(x)
    abs_y = abs(y)
    y_bigger = abs_y > abs_x
    t0 = abs_y if y_bigger else abs_x
    t1 = abs_x if y_bigger else abs_y
    if t0 == 0.0:
        return 0.0

    t3 = t1 / t0
    t4 = t3 * t3
    poly = 0.0
    for coefficient in _ATAN_COEFFICIENTS:
        poly = poly * t4 + coefficient
    t3 = poly * t3

    if y_bigger:
        t3 = 0.5 * PI - t3
    if x < 0.0:
        t3 = PI - t3
    if y < 0.0:
        t3 = -t3
    return t3