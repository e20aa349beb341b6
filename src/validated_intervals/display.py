"""
Interval Display

Renders intervals as "∅" or "[lo, hi]" with "∞" for infinite bounds.
When a number of significant digits is requested, the lower bound is
rounded toward -inf and the upper bound toward +inf, so the printed
interval still encloses the stored one.
"""

import decimal
from fractions import Fraction
from typing import Any, Dict, Optional

from .interval import Interval
from .rounding import INF

EMPTY_GLYPH = "∅"
INFINITY_GLYPH = "∞"


def _directed_decimal(value, digits: int, rounding: str) -> str:
    context = decimal.Context(prec=digits, rounding=rounding)
    if isinstance(value, Fraction):
        d = context.divide(decimal.Decimal(value.numerator), decimal.Decimal(value.denominator))
    else:
        d = context.plus(decimal.Decimal(value))
    return str(d)


def format_bound(value, digits: Optional[int] = None, rounding: str = decimal.ROUND_HALF_EVEN) -> str:
    """Format one bound, substituting the infinity glyph."""
    if value == INF:
        return INFINITY_GLYPH
    if value == -INF:
        return "-" + INFINITY_GLYPH
    if digits is not None:
        return _directed_decimal(value, digits, rounding)
    return str(value)


def format_interval(x: Interval, digits: Optional[int] = None) -> str:
    """
    Render an interval.

    Args:
        x: Interval to render
        digits: Significant digits per bound (None for the exact value)

    Returns:
        "∅" for the empty interval, otherwise "[lo, hi]"
    """
    if x.is_empty:
        return EMPTY_GLYPH
    lo = format_bound(x.lo, digits, decimal.ROUND_FLOOR)
    hi = format_bound(x.hi, digits, decimal.ROUND_CEILING)
    return f"[{lo}, {hi}]"


def _canonical_bound(value) -> Any:
    if value == INF:
        return "inf"
    if value == -INF:
        return "-inf"
    if isinstance(value, Fraction):
        return str(value)
    return value


def to_canonical(x: Interval) -> Dict[str, Any]:
    """JSON-safe dictionary form; infinities and fractions become strings."""
    if x.is_empty:
        return {"empty": True, "flavor": x.flavor.value}
    return {
        "empty": False,
        "flavor": x.flavor.value,
        "lo": _canonical_bound(x.lo),
        "hi": _canonical_bound(x.hi),
    }
