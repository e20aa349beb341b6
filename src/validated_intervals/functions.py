"""
Elementary Functions over Intervals

Two evaluation policies:

- Monotone functions are evaluated at the endpoints and each result is
  widened outward by one ulp, unless the value is known to be exact
  (exp(0) = 1, log2(8) = 3, ...).
- sin, cos and tan locate their critical points k*pi/2 inside the argument
  through a rigorous enclosure of pi; the result is the hull of the
  endpoint values and the extrema crossed.

Domain-restricted functions intersect the argument with their domain
first. An argument entirely outside the domain is handled by the configured
domain policy (empty result, warning, or DomainError).

Results are clamped to the function's mathematical range, so widening
never pushes sin past 1 or exp below 0.
"""

import math
from typing import Callable, Dict, Optional

import numpy as np

from .arithmetic import domain_violation
from .interval import Interval, construct_unchecked
from .rounding import (
    DOWN,
    INF,
    UP,
    RoundingMode,
    div as _div,
    next_down,
    next_up,
    sqrt as _sqrt,
    sub as _sub,
)


# Enclosure of pi: math.pi is the float just below pi.
PI_LO = math.pi
PI_HI = next_up(math.pi)
HALF_PI_LO = PI_LO / 2
HALF_PI_HI = PI_HI / 2
TWO_PI_LO = 2 * PI_LO

ExactTable = Dict[float, float]
ExactRule = Callable[[float], Optional[float]]


def _evaluate(fn, v: float, mode: RoundingMode,
              exact: Optional[ExactTable] = None,
              rule: Optional[ExactRule] = None) -> float:
    """fn(v) rounded one ulp in direction mode unless known exactly."""
    if exact is not None and v in exact:
        return exact[v]
    if rule is not None:
        known = rule(v)
        if known is not None:
            return known
    with np.errstate(all='ignore'):
        r = float(fn(v))
    if mode is DOWN:
        return next_down(r)
    return next_up(r)


def _clamp(lo: float, hi: float, range_lo: float, range_hi: float):
    return max(lo, range_lo), min(hi, range_hi)


def _monotone(x: Interval, fn, exact=None, rule=None,
              range_lo: float = -INF, range_hi: float = INF,
              increasing: bool = True, name: str = "function") -> Interval:
    if x.is_empty:
        return x
    x = x.to_float()
    if increasing:
        lo = _evaluate(fn, x.lo, DOWN, exact, rule)
        hi = _evaluate(fn, x.hi, UP, exact, rule)
    else:
        lo = _evaluate(fn, x.hi, DOWN, exact, rule)
        hi = _evaluate(fn, x.lo, UP, exact, rule)
    if lo == INF or hi == -INF:
        # x only touches a pole, e.g. log([0, 0])
        return domain_violation(x, name)
    lo, hi = _clamp(lo, hi, range_lo, range_hi)
    return construct_unchecked(lo, hi, x.flavor)


def _restrict(x: Interval, domain_lo: float, domain_hi: float, name: str) -> Interval:
    """Intersect x with [domain_lo, domain_hi]; apply the domain policy if nothing is left."""
    if x.is_empty:
        return x
    x = x.to_float()
    restricted = x.intersect(construct_unchecked(domain_lo, domain_hi, x.flavor))
    if restricted.is_empty:
        return domain_violation(x, name)
    return restricted


# Exactness rules

def _exp2_exact(v: float) -> Optional[float]:
    if v.is_integer() and -1074 <= v <= 1023:
        return math.ldexp(1.0, int(v))
    return None


def _exp10_exact(v: float) -> Optional[float]:
    if v.is_integer() and 0 <= v <= 22:
        return float(10 ** int(v))
    return None


def _log2_exact(v: float) -> Optional[float]:
    if 0 < v < INF:
        mantissa, exponent = math.frexp(v)
        if mantissa == 0.5:
            return float(exponent - 1)
    return None


def _log10_exact(v: float) -> Optional[float]:
    if v.is_integer() and 1 <= v <= 1e22:
        k = round(math.log10(v))
        if 10 ** k == int(v):
            return float(k)
    return None


# Square root, exponentials, logarithms

def sqrt(x: Interval) -> Interval:
    """Square root on [0, inf], correctly rounded at both ends."""
    x = _restrict(x, 0.0, INF, "sqrt")
    if x.is_empty:
        return x
    return construct_unchecked(_sqrt(x.lo, DOWN), _sqrt(x.hi, UP), x.flavor)


def exp(x: Interval) -> Interval:
    return _monotone(x, np.exp, exact={0.0: 1.0, -INF: 0.0, INF: INF}, range_lo=0.0)


def exp2(x: Interval) -> Interval:
    return _monotone(x, np.exp2, exact={-INF: 0.0, INF: INF},
                     rule=_exp2_exact, range_lo=0.0)


def exp10(x: Interval) -> Interval:
    return _monotone(x, lambda v: np.power(10.0, v), exact={-INF: 0.0, INF: INF},
                     rule=_exp10_exact, range_lo=0.0)


def log(x: Interval) -> Interval:
    """Natural logarithm; the argument is restricted to [0, inf]."""
    x = _restrict(x, 0.0, INF, "log")
    return _monotone(x, np.log, exact={0.0: -INF, 1.0: 0.0, INF: INF}, name="log")


def log2(x: Interval) -> Interval:
    x = _restrict(x, 0.0, INF, "log2")
    return _monotone(x, np.log2, exact={0.0: -INF, INF: INF}, rule=_log2_exact, name="log2")


def log10(x: Interval) -> Interval:
    x = _restrict(x, 0.0, INF, "log10")
    return _monotone(x, np.log10, exact={0.0: -INF, INF: INF}, rule=_log10_exact, name="log10")


# Trigonometric functions

def _quadrants(v: float):
    """
    Range (k_min, k_max) of the quadrant index floor(v / (pi/2)).

    Both ends are computed against the enclosure of pi/2, so the true
    quadrant is always inside the range.
    """
    if v >= 0:
        q_lo = _div(v, HALF_PI_HI, DOWN)
        q_hi = _div(v, HALF_PI_LO, UP)
    else:
        q_lo = _div(v, HALF_PI_LO, DOWN)
        q_hi = _div(v, HALF_PI_HI, UP)
    return math.floor(q_lo), math.floor(q_hi)


def _crossed_boundaries(x: Interval):
    """
    Residues mod 4 of the quadrant boundaries k*pi/2 that may lie in x,
    or None when x may span a full period.
    """
    k_lo, _ = _quadrants(x.lo)
    _, k_hi = _quadrants(x.hi)
    if k_hi - k_lo >= 4:
        return None
    return {k % 4 for k in range(k_lo + 1, k_hi + 1)}


def _full_period(x: Interval, period: float) -> bool:
    return math.isinf(x.lo) or math.isinf(x.hi) or _sub(x.hi, x.lo, UP) >= period


def _periodic(x: Interval, fn, exact: ExactTable, max_residue: int, min_residue: int) -> Interval:
    if x.is_empty:
        return x
    x = x.to_float()
    if _full_period(x, TWO_PI_LO):
        return construct_unchecked(-1.0, 1.0, x.flavor)
    crossed = _crossed_boundaries(x)
    if crossed is None:
        return construct_unchecked(-1.0, 1.0, x.flavor)

    lo = min(_evaluate(fn, x.lo, DOWN, exact), _evaluate(fn, x.hi, DOWN, exact))
    hi = max(_evaluate(fn, x.lo, UP, exact), _evaluate(fn, x.hi, UP, exact))
    if max_residue in crossed:
        hi = 1.0
    if min_residue in crossed:
        lo = -1.0
    lo, hi = _clamp(lo, hi, -1.0, 1.0)
    return construct_unchecked(lo, hi, x.flavor)


def sin(x: Interval) -> Interval:
    """Sine; maxima at pi/2 + 2k*pi, minima at 3*pi/2 + 2k*pi."""
    return _periodic(x, np.sin, {0.0: 0.0}, max_residue=1, min_residue=3)


def cos(x: Interval) -> Interval:
    """Cosine; maxima at 2k*pi, minima at pi + 2k*pi."""
    return _periodic(x, np.cos, {0.0: 1.0}, max_residue=0, min_residue=2)


def tan(x: Interval) -> Interval:
    """Tangent; the entire line when a pole k*pi + pi/2 may lie in x."""
    if x.is_empty:
        return x
    x = x.to_float()
    if _full_period(x, PI_LO):
        return Interval.entire(x.flavor)
    crossed = _crossed_boundaries(x)
    if crossed is None or 1 in crossed or 3 in crossed:
        return Interval.entire(x.flavor)
    return construct_unchecked(
        _evaluate(np.tan, x.lo, DOWN, {0.0: 0.0}),
        _evaluate(np.tan, x.hi, UP, {0.0: 0.0}),
        x.flavor,
    )


def asin(x: Interval) -> Interval:
    x = _restrict(x, -1.0, 1.0, "asin")
    return _monotone(x, np.arcsin, exact={0.0: 0.0},
                     range_lo=-HALF_PI_HI, range_hi=HALF_PI_HI)


def acos(x: Interval) -> Interval:
    x = _restrict(x, -1.0, 1.0, "acos")
    return _monotone(x, np.arccos, exact={1.0: 0.0},
                     range_lo=0.0, range_hi=PI_HI, increasing=False)


def atan(x: Interval) -> Interval:
    return _monotone(x, np.arctan, exact={0.0: 0.0},
                     range_lo=-HALF_PI_HI, range_hi=HALF_PI_HI)


# Hyperbolic functions

def sinh(x: Interval) -> Interval:
    return _monotone(x, np.sinh, exact={0.0: 0.0, -INF: -INF, INF: INF})


def cosh(x: Interval) -> Interval:
    """Hyperbolic cosine; minimum 1 at 0."""
    if x.is_empty:
        return x
    x = x.to_float()
    exact = {0.0: 1.0, -INF: INF, INF: INF}
    if x.lo >= 0:
        return _monotone(x, np.cosh, exact=exact, range_lo=1.0)
    if x.hi <= 0:
        return _monotone(x, np.cosh, exact=exact, range_lo=1.0, increasing=False)
    hi = max(_evaluate(np.cosh, x.lo, UP, exact), _evaluate(np.cosh, x.hi, UP, exact))
    return construct_unchecked(1.0, hi, x.flavor)


def tanh(x: Interval) -> Interval:
    return _monotone(x, np.tanh, exact={0.0: 0.0, -INF: -1.0, INF: 1.0},
                     range_lo=-1.0, range_hi=1.0)


def asinh(x: Interval) -> Interval:
    return _monotone(x, np.arcsinh, exact={0.0: 0.0, -INF: -INF, INF: INF})


def acosh(x: Interval) -> Interval:
    x = _restrict(x, 1.0, INF, "acosh")
    return _monotone(x, np.arccosh, exact={1.0: 0.0, INF: INF}, range_lo=0.0)


def atanh(x: Interval) -> Interval:
    x = _restrict(x, -1.0, 1.0, "atanh")
    return _monotone(x, np.arctanh, exact={0.0: 0.0, -1.0: -INF, 1.0: INF}, name="atanh")
