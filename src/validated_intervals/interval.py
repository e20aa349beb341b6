"""
Interval Type

A closed interval [lo, hi] of floats or Fractions, with validated
construction, relational and set operations, and operator overloads.

The empty set is encoded by the sentinel [+inf, -inf]. Invariants
(checked when the configuration is strict):
- neither bound is NaN
- lo <= hi, except for the empty sentinel
- lo != +inf and hi != -inf for non-empty intervals

Intervals are immutable; every operation builds a new value. Arithmetic
lives in .arithmetic and the operators here delegate to it.
"""

import math
import numbers
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Dict, Optional, Tuple, Union

import numpy as np

from .config import get_config
from .errors import InvalidInterval
from .flavors import Flavor
from .rounding import (
    DOWN,
    INF,
    MAX_FLOAT,
    UP,
    add as _add,
    div as _div,
    sub as _sub,
    to_float,
)

Bound = Union[float, Fraction]


def _isnan(v) -> bool:
    return v != v


def is_valid(lo, hi) -> bool:
    """
    Check whether (lo, hi) describes an interval.

    [+inf, -inf] is valid and denotes the empty set.
    """
    if _isnan(lo) or _isnan(hi):
        return False
    if lo > hi:
        return lo == INF and hi == -INF
    if lo == INF or hi == -INF:
        return False
    return True


def _scalar(value):
    """Normalise numpy and integer scalars; reject non-numbers."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, np.floating):
        return float(value)
    if isinstance(value, (float, Fraction, int)):
        return value
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, numbers.Rational):
        return Fraction(value)
    if isinstance(value, numbers.Real):
        return float(value)
    raise TypeError(f"Cannot use {type(value).__name__} as an interval bound")


def _promote_bounds(lo, hi) -> Tuple[Bound, Bound]:
    """
    Bring both bounds to one element type.

    Two integers become floats, a Fraction with a Fraction or an integer
    stays rational, anything with a float becomes float. Conversions round
    lo down and hi up.
    """
    lo = _scalar(lo)
    hi = _scalar(hi)

    if isinstance(lo, float) or isinstance(hi, float):
        return to_float(lo, DOWN), to_float(hi, UP)
    if isinstance(lo, Fraction) or isinstance(hi, Fraction):
        return Fraction(lo), Fraction(hi)
    return to_float(lo, DOWN), to_float(hi, UP)


@dataclass(frozen=True, eq=False)
class Interval:
    """
    A closed interval [lo, hi] with outward-rounded arithmetic.

    Building an Interval directly goes through validation (when strict);
    the flavor defaults to the configured one.
    """
    lo: Bound
    hi: Bound
    flavor: Optional[Flavor] = field(default=None)

    def __post_init__(self):
        config = get_config()
        lo, hi = _promote_bounds(self.lo, self.hi)
        if config.strict and not is_valid(lo, hi):
            raise InvalidInterval(lo, hi)
        object.__setattr__(self, 'lo', lo)
        object.__setattr__(self, 'hi', hi)
        if self.flavor is None:
            object.__setattr__(self, 'flavor', config.flavor)

    @classmethod
    def point(cls, x) -> 'Interval':
        """Create a point interval [x, x]."""
        return cls(x, x)

    @classmethod
    def empty(cls, flavor: Optional[Flavor] = None) -> 'Interval':
        """The empty interval."""
        return construct_unchecked(INF, -INF, flavor or get_config().flavor)

    @classmethod
    def entire(cls, flavor: Optional[Flavor] = None) -> 'Interval':
        """The whole real line."""
        return construct_unchecked(-INF, INF, flavor or get_config().flavor)

    # Element properties

    @property
    def element_type(self) -> type:
        return type(self.lo)

    @property
    def is_rational(self) -> bool:
        return isinstance(self.lo, Fraction)

    @property
    def is_empty(self) -> bool:
        return self.lo == INF and self.hi == -INF

    @property
    def is_entire(self) -> bool:
        return self.lo == -INF and self.hi == INF

    @property
    def is_thin(self) -> bool:
        """True for a singleton [a, a]."""
        return self.lo == self.hi

    @property
    def is_bounded(self) -> bool:
        return self.is_empty or (self.lo != -INF and self.hi != INF)

    @property
    def width(self) -> Bound:
        """hi - lo, rounded up (NaN when empty)."""
        if self.is_empty:
            return math.nan
        return _sub(self.hi, self.lo, UP)

    @property
    def mid(self) -> Bound:
        """
        Midpoint.

        Half-infinite intervals have the largest finite float of the
        matching sign as their midpoint; the entire line has 0.
        """
        if self.is_empty:
            return math.nan
        if self.is_entire:
            return 0.0
        if self.lo == -INF:
            return -MAX_FLOAT
        if self.hi == INF:
            return MAX_FLOAT
        if self.is_rational:
            return (self.lo + self.hi) / 2
        m = 0.5 * (self.lo + self.hi)
        if math.isinf(m):
            m = 0.5 * self.lo + 0.5 * self.hi
        return m

    @property
    def radius(self) -> Bound:
        """(hi - lo) / 2, rounded up (NaN when empty)."""
        if self.is_empty:
            return math.nan
        return _div(_sub(self.hi, self.lo, UP), Fraction(2) if self.is_rational else 2.0, UP)

    @property
    def mag(self) -> Bound:
        """Largest absolute value of an element."""
        if self.is_empty:
            return math.nan
        return max(abs(self.lo), abs(self.hi))

    @property
    def mig(self) -> Bound:
        """Smallest absolute value of an element."""
        if self.is_empty:
            return math.nan
        if self.contains_zero():
            return Fraction(0) if self.is_rational else 0.0
        return min(abs(self.lo), abs(self.hi))

    # Relations

    def contains(self, x) -> bool:
        return self.lo <= x <= self.hi

    def contains_zero(self) -> bool:
        return self.lo <= 0 <= self.hi

    def subset(self, other: 'Interval') -> bool:
        """True if every element of self lies in other."""
        _check_flavor(self, other)
        if self.is_empty:
            return True
        return other.lo <= self.lo and self.hi <= other.hi

    def interior(self, other: 'Interval') -> bool:
        """True if self lies in the interior of other."""
        _check_flavor(self, other)
        if self.is_empty:
            return True
        return _interior_le(other.lo, self.lo) and _interior_le(self.hi, other.hi)

    def disjoint(self, other: 'Interval') -> bool:
        _check_flavor(self, other)
        if self.is_empty or other.is_empty:
            return True
        return self.hi < other.lo or other.hi < self.lo

    def equal(self, other: 'Interval') -> bool:
        """Component-wise equality of the bounds."""
        _check_flavor(self, other)
        return self.lo == other.lo and self.hi == other.hi

    def less(self, other: 'Interval') -> bool:
        """Weakly less: lo <= other.lo and hi <= other.hi."""
        _check_flavor(self, other)
        if self.is_empty and other.is_empty:
            return True
        if self.is_empty or other.is_empty:
            return False
        return self.lo <= other.lo and self.hi <= other.hi

    def strictly_less(self, other: 'Interval') -> bool:
        """Strictly less in both bounds (infinite bounds compare as equal)."""
        _check_flavor(self, other)
        if self.is_empty and other.is_empty:
            return True
        if self.is_empty or other.is_empty:
            return False
        return _interior_le(self.lo, other.lo) and _interior_le(self.hi, other.hi)

    def precedes(self, other: 'Interval') -> bool:
        """Every element of self is <= every element of other."""
        _check_flavor(self, other)
        if self.is_empty or other.is_empty:
            return True
        return self.hi <= other.lo

    def strictly_precedes(self, other: 'Interval') -> bool:
        """Every element of self is < every element of other."""
        _check_flavor(self, other)
        if self.is_empty or other.is_empty:
            return True
        return self.hi < other.lo

    # Set operations

    def intersect(self, other: 'Interval') -> 'Interval':
        """Intersection; the empty interval when disjoint."""
        x, y = _promote_pair(self, other)
        new_lo = max(x.lo, y.lo)
        new_hi = min(x.hi, y.hi)
        if new_lo > new_hi:
            return Interval.empty(x.flavor)
        return construct_unchecked(new_lo, new_hi, x.flavor)

    def hull(self, other: 'Interval') -> 'Interval':
        """Smallest interval containing both."""
        x, y = _promote_pair(self, other)
        if x.is_empty:
            return y
        if y.is_empty:
            return x
        return construct_unchecked(min(x.lo, y.lo), max(x.hi, y.hi), x.flavor)

    def with_flavor(self, flavor: Flavor) -> 'Interval':
        """The same set as an interval of another flavor."""
        return construct_unchecked(self.lo, self.hi, flavor)

    def to_float(self) -> 'Interval':
        """Float enclosure of a rational interval (floats are returned as is)."""
        if not self.is_rational:
            return self
        return construct_unchecked(to_float(self.lo, DOWN), to_float(self.hi, UP), self.flavor)

    def to_canonical(self) -> Dict[str, Any]:
        from .display import to_canonical
        return to_canonical(self)

    # Operators available to every flavor

    def __contains__(self, x) -> bool:
        if isinstance(x, Interval):
            return x.subset(self)
        return self.contains(x)

    def __hash__(self) -> int:
        if self.is_thin:
            # [a, a] == a under scalar equality
            return hash(self.lo)
        return hash((self.lo, self.hi))

    def __eq__(self, other) -> bool:
        if isinstance(other, Interval):
            if other.flavor is not self.flavor:
                return NotImplemented
            return self.equal(other)
        if self.flavor.capabilities.scalar_equality and _is_number(other):
            return self.lo == other and self.hi == other
        return NotImplemented

    def __ne__(self, other) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __neg__(self) -> 'Interval':
        return _arith.neg(self)

    def __pos__(self) -> 'Interval':
        return self

    def __abs__(self) -> 'Interval':
        return _arith.abs(self)

    def __add__(self, other) -> 'Interval':
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return _arith.add(self, other)

    def __radd__(self, other) -> 'Interval':
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return _arith.add(other, self)

    def __sub__(self, other) -> 'Interval':
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return _arith.sub(self, other)

    def __rsub__(self, other) -> 'Interval':
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return _arith.sub(other, self)

    def __mul__(self, other) -> 'Interval':
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return _arith.mul(self, other)

    def __rmul__(self, other) -> 'Interval':
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return _arith.mul(other, self)

    def __truediv__(self, other) -> 'Interval':
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return _arith.div(self, other)

    def __rtruediv__(self, other) -> 'Interval':
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return _arith.div(other, self)

    def __pow__(self, exponent) -> 'Interval':
        if not isinstance(exponent, Interval) and not _is_number(exponent):
            return NotImplemented
        return _arith.pow(self, exponent)

    def __rpow__(self, base) -> 'Interval':
        base = self._coerce(base)
        if base is NotImplemented:
            return base
        return _arith.pow(base, self)

    # REAL flavor surface

    def __lt__(self, other) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        caps = self.flavor.capabilities
        if caps.real_ordering:
            return self.strictly_less(other)
        if caps.set_ordering:
            return self.subset(other) and not self.equal(other)
        return NotImplemented

    def __le__(self, other) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        caps = self.flavor.capabilities
        if caps.real_ordering:
            return self.less(other)
        if caps.set_ordering:
            return self.subset(other)
        return NotImplemented

    def __gt__(self, other) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other.__lt__(self)

    def __ge__(self, other) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other.__le__(self)

    def __float__(self) -> float:
        if not self.flavor.capabilities.float_conversion:
            raise TypeError(f"{self.flavor.value} intervals do not convert to float")
        if not self.is_thin:
            raise TypeError(f"Only thin intervals convert to float, got {self}")
        return float(self.lo)

    # SET flavor surface

    def __and__(self, other) -> 'Interval':
        if not isinstance(other, Interval) or not self.flavor.capabilities.set_operators:
            return NotImplemented
        return self.intersect(other)

    def __or__(self, other) -> 'Interval':
        if not isinstance(other, Interval) or not self.flavor.capabilities.set_operators:
            return NotImplemented
        return self.hull(other)

    # Display

    def __str__(self) -> str:
        from .display import format_interval
        return format_interval(self)

    def __repr__(self) -> str:
        return f"Interval({self.lo!r}, {self.hi!r}, flavor={self.flavor.name})"

    def _coerce(self, other):
        """Promote a scalar to a singleton of this interval's flavor."""
        if isinstance(other, Interval):
            return other
        if _is_number(other):
            return construct(other, other, self.flavor)
        return NotImplemented


def _interior_le(a, b) -> bool:
    """a < b, except that equal infinities also count."""
    return a < b or (a == b and math.isinf(a))


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _check_flavor(x: Interval, y: Interval) -> None:
    if x.flavor is not y.flavor:
        raise TypeError(
            f"Cannot combine {x.flavor.value} and {y.flavor.value} intervals"
        )


def _promote_pair(x: Interval, y: Interval) -> Tuple[Interval, Interval]:
    """Check flavors agree and bring both intervals to one element type."""
    _check_flavor(x, y)
    if x.is_rational != y.is_rational:
        return x.to_float(), y.to_float()
    return x, y


# Construction


def construct_unchecked(lo: Bound, hi: Bound, flavor: Flavor) -> Interval:
    """
    Build an interval without promotion or validation.

    Only for callers that already guarantee lo and hi satisfy the interval
    invariants and share an element type.
    """
    x = object.__new__(Interval)
    object.__setattr__(x, 'lo', lo)
    object.__setattr__(x, 'hi', hi)
    object.__setattr__(x, 'flavor', flavor)
    return x


def construct(lo, hi, flavor: Optional[Flavor] = None) -> Interval:
    """
    Build a validated interval.

    Raises:
        InvalidInterval: when strict and (lo, hi) is not a valid pair
    """
    return Interval(lo, hi, flavor)


def singleton(a, flavor: Optional[Flavor] = None) -> Interval:
    """The thin interval [a, a]."""
    return construct(a, a, flavor)


def hull_unordered(a, b, flavor: Optional[Flavor] = None) -> Interval:
    """Interval between a and b, whichever order they come in."""
    if a > b:
        a, b = b, a
    return construct(a, b, flavor)


def empty_interval(flavor: Optional[Flavor] = None) -> Interval:
    return Interval.empty(flavor)


def entire_interval(flavor: Optional[Flavor] = None) -> Interval:
    return Interval.entire(flavor)


def interval(a, b=None) -> Interval:
    """
    Public constructor for intervals of the default flavor.

    interval(a) is [a, a], interval(a, b) is [a, b]; a 2-tuple is unpacked
    and an existing interval is carried over to the default flavor.

    Raises:
        InvalidInterval: when strict and a > b (other than the empty sentinel)
    """
    if b is None:
        if isinstance(a, Interval):
            flavor = get_config().flavor
            return a if a.flavor is flavor else a.with_flavor(flavor)
        if isinstance(a, tuple):
            return construct(*a)
        return singleton(a)
    return construct(a, b)


def pm(center, radius) -> Interval:
    """[center - radius, center + radius], rounded outward."""
    c, r = _promote_pair(singleton(center), singleton(radius))
    lo = _sub(c.lo, r.hi, DOWN)
    hi = _add(c.hi, r.hi, UP)
    if not is_valid(lo, hi):
        raise InvalidInterval(lo, hi)
    return construct_unchecked(lo, hi, c.flavor)


# Operators are implemented in arithmetic, which imports this module.
from . import arithmetic as _arith  # noqa: E402
