"""
Interval Arithmetic Operators

Every operator returns an enclosure: lower bounds are rounded toward -inf,
upper bounds toward +inf. Multiplication and division branch on the signs
of the operands so that only the relevant corner products are computed and
0 * inf never turns into NaN.

Division by an interval with zero strictly inside returns [-inf, +inf]
rather than a two-piece result.
"""

import builtins
import logging
import math
import numbers
import warnings
from fractions import Fraction

import numpy as np

from .config import DomainPolicy, get_config
from .errors import DomainError, DomainWarning
from .interval import (
    Interval,
    _is_number,
    _promote_pair,
    construct,
    construct_unchecked,
)
from .rounding import (
    DOWN,
    INF,
    UP,
    add as _add,
    div as _div,
    mul as _mul,
    next_down,
    next_up,
    pow_int as _pow_int,
    sub as _sub,
)

logger = logging.getLogger(__name__)


def _zero(x: Interval):
    return Fraction(0) if x.is_rational else 0.0


def _one(x: Interval):
    return Fraction(1) if x.is_rational else 1.0


def _empty(x: Interval) -> Interval:
    return Interval.empty(x.flavor)


def _entire(x: Interval) -> Interval:
    return Interval.entire(x.flavor)


def _is_zero(x: Interval) -> bool:
    return x.lo == 0 and x.hi == 0


def domain_violation(x: Interval, name: str) -> Interval:
    """
    Handle an argument lying entirely outside the domain of `name`.

    Returns the empty interval, after warning under the 'warn' policy.

    Raises:
        DomainError: under the 'raise' policy
    """
    policy = get_config().domain_policy
    message = f"{name} is undefined on {x}"
    if policy is DomainPolicy.RAISE:
        raise DomainError(message)
    if policy is DomainPolicy.WARN:
        warnings.warn(message, DomainWarning, stacklevel=3)
    logger.debug("%s; returning the empty interval", message)
    return _empty(x)


def neg(x: Interval) -> Interval:
    """[-hi, -lo]; exact."""
    if x.is_empty:
        return x
    return construct_unchecked(-x.hi, -x.lo, x.flavor)


def add(x: Interval, y: Interval) -> Interval:
    x, y = _promote_pair(x, y)
    if x.is_empty or y.is_empty:
        return _empty(x)
    return construct_unchecked(
        _add(x.lo, y.lo, DOWN),
        _add(x.hi, y.hi, UP),
        x.flavor,
    )


def sub(x: Interval, y: Interval) -> Interval:
    x, y = _promote_pair(x, y)
    if x.is_empty or y.is_empty:
        return _empty(x)
    return construct_unchecked(
        _sub(x.lo, y.hi, DOWN),
        _sub(x.hi, y.lo, UP),
        x.flavor,
    )


def _rounded(x: Interval, lo_a, lo_b, hi_a, hi_b, op) -> Interval:
    """[op(lo_a, lo_b) rounded down, op(hi_a, hi_b) rounded up]."""
    return construct_unchecked(op(lo_a, lo_b, DOWN), op(hi_a, hi_b, UP), x.flavor)


def mul(x: Interval, y: Interval) -> Interval:
    """
    Product by sign analysis of both operands.

    A zero operand absorbs everything, infinite bounds included.
    """
    x, y = _promote_pair(x, y)
    if x.is_empty or y.is_empty:
        return _empty(x)
    if _is_zero(x) or _is_zero(y):
        return construct_unchecked(_zero(x), _zero(x), x.flavor)

    a, b = x, y
    if b.lo >= 0:
        if a.lo >= 0:
            return _rounded(a, a.lo, b.lo, a.hi, b.hi, _mul)
        if a.hi <= 0:
            return _rounded(a, a.lo, b.hi, a.hi, b.lo, _mul)
        return _rounded(a, a.lo, b.hi, a.hi, b.hi, _mul)  # 0 in a
    if b.hi <= 0:
        if a.lo >= 0:
            return _rounded(a, a.hi, b.lo, a.lo, b.hi, _mul)
        if a.hi <= 0:
            return _rounded(a, a.hi, b.hi, a.lo, b.lo, _mul)
        return _rounded(a, a.hi, b.lo, a.lo, b.lo, _mul)  # 0 in a

    # 0 strictly inside b
    if a.lo > 0:
        return _rounded(a, a.hi, b.lo, a.hi, b.hi, _mul)
    if a.hi < 0:
        return _rounded(a, a.lo, b.hi, a.lo, b.lo, _mul)
    return construct_unchecked(
        min(_mul(a.lo, b.hi, DOWN), _mul(a.hi, b.lo, DOWN)),
        max(_mul(a.lo, b.lo, UP), _mul(a.hi, b.hi, UP)),
        a.flavor,
    )


def div(x: Interval, y: Interval) -> Interval:
    """
    Quotient by sign analysis.

    - y = [0, 0]: empty
    - x = [0, 0], 0 in y: [0, 0]
    - 0 an endpoint of y: half-infinite result (or entire if 0 in x)
    - 0 strictly inside y: [-inf, +inf]
    """
    x, y = _promote_pair(x, y)
    if x.is_empty or y.is_empty:
        return _empty(x)
    if _is_zero(y):
        return _empty(x)

    a, b = x, y
    if b.lo > 0:
        if a.lo >= 0:
            return _rounded(a, a.lo, b.hi, a.hi, b.lo, _div)
        if a.hi <= 0:
            return _rounded(a, a.lo, b.lo, a.hi, b.hi, _div)
        return _rounded(a, a.lo, b.lo, a.hi, b.lo, _div)  # 0 in a
    if b.hi < 0:
        if a.lo >= 0:
            return _rounded(a, a.hi, b.hi, a.lo, b.lo, _div)
        if a.hi <= 0:
            return _rounded(a, a.hi, b.lo, a.lo, b.hi, _div)
        return _rounded(a, a.hi, b.hi, a.lo, b.hi, _div)  # 0 in a

    # 0 in b, b not [0, 0]
    if _is_zero(a):
        return construct_unchecked(_zero(a), _zero(a), a.flavor)
    a, b = a.to_float(), b.to_float()
    if b.lo == 0:
        if a.lo >= 0:
            return construct_unchecked(_div(a.lo, b.hi, DOWN), INF, a.flavor)
        if a.hi <= 0:
            return construct_unchecked(-INF, _div(a.hi, b.hi, UP), a.flavor)
        return _entire(a)
    if b.hi == 0:
        if a.lo >= 0:
            return construct_unchecked(-INF, _div(a.lo, b.lo, UP), a.flavor)
        if a.hi <= 0:
            return construct_unchecked(_div(a.hi, b.lo, DOWN), INF, a.flavor)
        return _entire(a)
    return _entire(a)


def inv(x: Interval) -> Interval:
    """Reciprocal 1 / x."""
    return div(construct_unchecked(_one(x), _one(x), x.flavor), x)


def abs(x: Interval) -> Interval:
    """Absolute value."""
    if x.is_empty:
        return x
    if x.lo >= 0:
        return x
    if x.hi <= 0:
        return neg(x)
    return construct_unchecked(_zero(x), builtins.max(-x.lo, x.hi), x.flavor)


def sqr(x: Interval) -> Interval:
    """x^2, with lower bound 0 when x straddles zero."""
    return _pow_interval_int(x, 2)


def _pow_interval_int(x: Interval, n: int) -> Interval:
    """Integer power."""
    if x.is_empty:
        return x
    if n == 0:
        return construct_unchecked(_one(x), _one(x), x.flavor)
    if n < 0:
        return inv(_pow_interval_int(x, -n))
    if n % 2 == 1:
        return construct_unchecked(_pow_int(x.lo, n, DOWN), _pow_int(x.hi, n, UP), x.flavor)

    # Even power
    if x.lo >= 0:
        return construct_unchecked(_pow_int(x.lo, n, DOWN), _pow_int(x.hi, n, UP), x.flavor)
    if x.hi <= 0:
        return construct_unchecked(_pow_int(x.hi, n, DOWN), _pow_int(x.lo, n, UP), x.flavor)
    return construct_unchecked(
        _zero(x),
        builtins.max(_pow_int(x.lo, n, UP), _pow_int(x.hi, n, UP)),
        x.flavor,
    )


def _real_pow(a: float, y: float, mode) -> float:
    """a ** y for a >= 0, widened one ulp in direction mode unless trivially exact."""
    if a == 1 or y == 0:
        return 1.0
    if a == 0:
        return 0.0 if y > 0 else INF
    if math.isinf(a):
        return INF if y > 0 else 0.0
    with np.errstate(all='ignore'):
        r = float(np.power(a, y))
    if mode is DOWN:
        return builtins.max(next_down(r), 0.0)
    return next_up(r)


def _pow_real_scalar(x: Interval, y: float) -> Interval:
    """x ** y for a float exponent y; x already restricted to [0, inf]."""
    if y > 0:
        return construct_unchecked(_real_pow(x.lo, y, DOWN), _real_pow(x.hi, y, UP), x.flavor)
    if y < 0:
        return construct_unchecked(_real_pow(x.hi, y, DOWN), _real_pow(x.lo, y, UP), x.flavor)
    return construct_unchecked(1.0, 1.0, x.flavor)


def _restrict_nonnegative(x: Interval, name: str) -> Interval:
    x = x.to_float()
    restricted = x.intersect(construct_unchecked(0.0, INF, x.flavor))
    if restricted.is_empty:
        return domain_violation(x, name)
    if restricted.lo != x.lo:
        logger.debug("%s: restricting base %s to its non-negative part", name, x)
    return restricted


def pow(x: Interval, y) -> Interval:
    """
    x ** y.

    Integer exponents (including integer-valued floats and thin intervals)
    use the sign-aware integer power. Any other exponent restricts the base
    to [0, inf] and takes the hull over the exponent's endpoints.
    """
    if isinstance(y, numbers.Integral) and not isinstance(y, bool):
        return _pow_interval_int(x, int(y))

    if isinstance(y, Interval):
        _, exponent = _promote_pair(x, y)
    elif _is_number(y):
        exponent = construct(y, y, x.flavor)
    else:
        raise TypeError(f"Unsupported exponent type {type(y).__name__}")

    if exponent.is_empty or x.is_empty:
        return _empty(x)
    if exponent.is_thin and not math.isinf(exponent.lo) and exponent.lo == math.floor(exponent.lo):
        return _pow_interval_int(x, int(exponent.lo))

    base = _restrict_nonnegative(x, "pow")
    if base.is_empty:
        return base
    exponent = exponent.to_float()

    if base.hi == 0:
        # 0 ** y is 0 for y > 0, 1 for y == 0 and undefined for y < 0
        if exponent.hi < 0:
            return domain_violation(base, "pow")
        lo = 0.0 if exponent.hi > 0 else 1.0
        hi = 1.0 if exponent.contains_zero() else 0.0
        return construct_unchecked(lo, hi, x.flavor)

    if exponent.is_thin:
        return _pow_real_scalar(base, exponent.lo)

    low = _pow_real_scalar(base, exponent.lo)
    high = _pow_real_scalar(base, exponent.hi)
    return low.hull(high)
