"""
Directed Rounding Primitives

Endpoint arithmetic for float and Fraction elements.

Python floats have no controllable rounding mode, so every primitive uses
the software fallback: compute the round-to-nearest result, compare it
exactly against the true value (via fractions.Fraction), and step one ulp
in the requested direction when it lies on the wrong side. The rounding
mode is an argument of each call; there is no rounding state to leak.

Fraction operands are exact and ignore the mode. Operands of one call must
share an element kind; the interval layer promotes before calling.
"""

import math
from enum import Enum
from fractions import Fraction
from typing import Union

import numpy as np

Number = Union[float, Fraction]

INF = float('inf')
MAX_FLOAT = float(np.finfo(np.float64).max)


class RoundingMode(Enum):
    """Rounding direction for a single primitive operation."""
    NEAREST = "nearest"
    DOWN = "down"
    UP = "up"

    @property
    def opposite(self) -> 'RoundingMode':
        if self is RoundingMode.DOWN:
            return RoundingMode.UP
        if self is RoundingMode.UP:
            return RoundingMode.DOWN
        return self


DOWN = RoundingMode.DOWN
UP = RoundingMode.UP
NEAREST = RoundingMode.NEAREST


def next_up(x: float) -> float:
    """Smallest float strictly greater than x."""
    return float(np.nextafter(x, INF))


def next_down(x: float) -> float:
    """Largest float strictly less than x."""
    return float(np.nextafter(x, -INF))


def step(x: float, mode: RoundingMode) -> float:
    """Move x one ulp in the direction of mode (NEAREST leaves it alone)."""
    if mode is DOWN:
        return next_down(x)
    if mode is UP:
        return next_up(x)
    return x


def _both_rational(a, b) -> bool:
    return isinstance(a, Fraction) and isinstance(b, Fraction)


def _correct(r: float, exact: Fraction, mode: RoundingMode) -> float:
    """
    Turn r, the round-to-nearest image of exact, into the directed result.

    r is within one ulp of exact, so at most one step is needed. An
    overflow to infinity is pulled back to the largest finite float when
    the requested direction points back toward zero.
    """
    if mode is NEAREST:
        return r
    if math.isinf(r):
        if mode is DOWN and r > 0:
            return MAX_FLOAT
        if mode is UP and r < 0:
            return -MAX_FLOAT
        return r
    fr = Fraction(r)
    if mode is DOWN:
        return r if fr <= exact else next_down(r)
    return r if fr >= exact else next_up(r)


def to_float(value, mode: RoundingMode = NEAREST) -> float:
    """
    Convert an int, Fraction or float to a float, rounding in direction mode.
    """
    if isinstance(value, float):
        return value
    if isinstance(value, np.floating):
        return float(value)
    exact = Fraction(value)
    try:
        r = float(exact)
    except OverflowError:
        r = INF if exact > 0 else -INF
    return _correct(r, exact, mode)


def add(a: Number, b: Number, mode: RoundingMode = NEAREST) -> Number:
    """a + b rounded in direction mode."""
    if _both_rational(a, b):
        return a + b
    r = a + b
    if math.isinf(a) or math.isinf(b):
        return r
    return _correct(r, Fraction(a) + Fraction(b), mode)


def sub(a: Number, b: Number, mode: RoundingMode = NEAREST) -> Number:
    """a - b rounded in direction mode."""
    if _both_rational(a, b):
        return a - b
    r = a - b
    if math.isinf(a) or math.isinf(b):
        return r
    return _correct(r, Fraction(a) - Fraction(b), mode)


def mul(a: Number, b: Number, mode: RoundingMode = NEAREST) -> Number:
    """
    a * b rounded in direction mode.

    A zero factor gives zero even when the other factor is infinite.
    """
    if _both_rational(a, b):
        return a * b
    if a == 0 or b == 0:
        return 0.0
    r = a * b
    if math.isinf(a) or math.isinf(b):
        return r
    return _correct(r, Fraction(a) * Fraction(b), mode)


def div(a: Number, b: Number, mode: RoundingMode = NEAREST) -> Number:
    """a / b rounded in direction mode (b must be non-zero)."""
    if _both_rational(a, b):
        return a / b
    if a == 0:
        return 0.0
    r = a / b
    if math.isinf(a) or math.isinf(b):
        return r
    return _correct(r, Fraction(a) / Fraction(b), mode)


def sqrt(a: Number, mode: RoundingMode = NEAREST) -> float:
    """Square root of a non-negative a, rounded in direction mode."""
    if a < 0:
        raise ValueError(f"sqrt of negative value {a}")
    if isinstance(a, Fraction):
        exact = a
        a = to_float(a, mode)
    else:
        if math.isinf(a):
            return a
        exact = Fraction(a)
    r = math.sqrt(a)
    if mode is NEAREST:
        return r
    # The argument may itself have been rounded, so loop until bracketed.
    if mode is DOWN:
        while Fraction(r) ** 2 > exact:
            r = next_down(r)
    else:
        while Fraction(r) ** 2 < exact:
            r = next_up(r)
    return r


def pow_int(a: Number, n: int, mode: RoundingMode = NEAREST) -> Number:
    """
    a ** n for a non-negative integer n, rounded in direction mode.

    Computed by repeated squaring with every product rounded the same way,
    which is monotone for non-negative factors. A negative base of odd
    power rounds its magnitude in the opposite direction.
    """
    if n < 0:
        raise ValueError(f"pow_int needs a non-negative exponent, got {n}")
    if isinstance(a, Fraction):
        return a ** n
    if n == 0:
        return 1.0
    if a == 0 or math.isinf(a) or abs(a) == 1:
        return a ** n

    negative = a < 0 and n % 2 == 1
    magnitude_mode = mode.opposite if negative else mode

    base = abs(a)
    result = 1.0
    while n > 0:
        if n & 1:
            result = mul(result, base, magnitude_mode)
        n >>= 1
        if n:
            base = mul(base, base, magnitude_mode)

    return -result if negative else result
