"""
Interval Literal Parsing

Reads textual interval literals into rigorous enclosures. Decimal numbers
are read exactly as rationals and then rounded outward, so "[0.1, 0.2]"
contains both 1/10 and 2/10 even though neither is a float.

Accepted forms:
- "[a, b]", "[a]", "a"
- "a..b"
- "a ± r", "a+/-r"
- "[]", "∅", "[empty]"      (empty interval)
- "[entire]", "[,]"         (whole real line)

Numbers may be integers, decimals, scientific notation, fractions ("1/3"),
or signed infinities ("inf", "-Inf", "∞", "-∞").
"""

import re
from fractions import Fraction
from typing import Optional, Tuple, Union

from .errors import ParseError
from .flavors import Flavor
from .interval import Interval, construct_unchecked, is_valid
from .config import get_config
from .rounding import DOWN, INF, UP, add, sub, to_float

_EMPTY_FORMS = {"[]", "∅", "[empty]", "empty"}
_ENTIRE_FORMS = {"[entire]", "[,]", "entire"}

_INFINITY_WORDS = {"inf", "infinity", "∞"}

_NUMBER_RE = re.compile(
    r"""
    ^[+-]?(
        \d+(\.\d*)?([eE][+-]?\d+)?      # 12, 12., 12.5, 1e3
      | \.\d+([eE][+-]?\d+)?            # .5
      | \d+\s*/\s*\d+                   # 1/3
    )$
    """,
    re.VERBOSE,
)

_PM_RE = re.compile(r"^(?P<center>.+?)\s*(±|\+/-)\s*(?P<radius>.+)$")

Exact = Union[Fraction, float]


def parse_number(text: str) -> Exact:
    """
    Read a number exactly.

    Returns a Fraction for finite numbers and a float for infinities.

    Raises:
        ParseError: if text is not a number
    """
    token = text.strip()
    unsigned = token.lstrip("+-").strip().lower()
    if unsigned in _INFINITY_WORDS:
        return -INF if token.startswith("-") else INF
    if not _NUMBER_RE.match(token):
        raise ParseError(f"Not a number: '{text}'")
    try:
        return Fraction(token.replace(" ", ""))
    except (ValueError, ZeroDivisionError) as e:
        raise ParseError(f"Not a number: '{text}'") from e


def _enclose(value: Exact) -> Tuple[float, float]:
    """Tightest floats below and above an exact value."""
    if isinstance(value, float):
        return value, value
    return to_float(value, DOWN), to_float(value, UP)


def _bounds_from_text(body: str) -> Tuple[Exact, Exact]:
    text = body.strip()

    if text.startswith("[") and text.endswith("]"):
        inner = text[1:-1]
        parts = inner.split(",")
        if len(parts) == 1:
            value = parse_number(parts[0])
            return value, value
        if len(parts) == 2:
            lo_text, hi_text = parts
            lo = parse_number(lo_text) if lo_text.strip() else -INF
            hi = parse_number(hi_text) if hi_text.strip() else INF
            return lo, hi
        raise ParseError(f"Expected '[lo, hi]', got '{body}'")

    if ".." in text:
        lo_text, _, hi_text = text.partition("..")
        return parse_number(lo_text), parse_number(hi_text)

    value = parse_number(text)
    return value, value


def parse_interval(text: str, flavor: Optional[Flavor] = None) -> Interval:
    """
    Parse an interval literal into an outward-rounded float interval.

    Args:
        text: The literal, e.g. "[0.1, 0.2]" or "3 ± 0.5"
        flavor: Flavor of the result (defaults to the configured one)

    Returns:
        An interval containing every real number the literal denotes

    Raises:
        ParseError: on malformed text or lo > hi
    """
    if not isinstance(text, str):
        raise ParseError(f"Expected a string, got {type(text).__name__}")
    flavor = flavor or get_config().flavor
    stripped = text.strip()
    compact = stripped.replace(" ", "").lower()

    if compact in _EMPTY_FORMS:
        return Interval.empty(flavor)
    if compact in _ENTIRE_FORMS:
        return Interval.entire(flavor)

    match = _PM_RE.match(stripped)
    if match:
        center_lo, center_hi = _enclose(parse_number(match.group("center")))
        radius = parse_number(match.group("radius"))
        if radius < 0:
            raise ParseError(f"Negative radius in '{text}'")
        _, radius_hi = _enclose(radius)
        lo = sub(center_lo, radius_hi, DOWN)
        hi = add(center_hi, radius_hi, UP)
    else:
        lo_exact, hi_exact = _bounds_from_text(stripped)
        if lo_exact > hi_exact:
            raise ParseError(f"Lower bound exceeds upper bound in '{text}'")
        lo, _ = _enclose(lo_exact)
        _, hi = _enclose(hi_exact)

    if not is_valid(lo, hi):
        raise ParseError(f"'{text}' does not describe an interval")
    return construct_unchecked(lo, hi, flavor)
