"""
validated_intervals - Validated Interval Arithmetic

A closed real interval type whose arithmetic, set operations and
elementary functions always return enclosures of the true result.

Key Features:
- Outward (directed) rounding for every endpoint operation
- Sign-aware multiplication and division, total over all inputs
- Empty interval sentinel [+inf, -inf] absorbed by every operation
- Rigorous sin/cos/tan via an enclosure of pi
- Two flavors (REAL, SET) selecting the operator surface
- Exact decimal literal parsing
"""

from .config import (
    Config,
    DomainPolicy,
    configure,
    get_config,
)
from .errors import (
    IntervalError,
    InvalidInterval,
    DomainError,
    DomainWarning,
    ParseError,
    ConfigurationError,
)
from .flavors import Flavor, Capabilities
from .rounding import RoundingMode
from .interval import (
    Interval,
    is_valid,
    construct,
    construct_unchecked,
    singleton,
    hull_unordered,
    empty_interval,
    entire_interval,
    interval,
    pm,
)
from .arithmetic import (
    add,
    sub,
    neg,
    mul,
    div,
    inv,
    sqr,
    pow,
)
from .functions import (
    sqrt,
    exp,
    exp2,
    exp10,
    log,
    log2,
    log10,
    sin,
    cos,
    tan,
    asin,
    acos,
    atan,
    sinh,
    cosh,
    tanh,
    asinh,
    acosh,
    atanh,
)
from .parsing import parse_interval
from .display import format_interval, to_canonical

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "Config",
    "DomainPolicy",
    "configure",
    "get_config",
    # Errors
    "IntervalError",
    "InvalidInterval",
    "DomainError",
    "DomainWarning",
    "ParseError",
    "ConfigurationError",
    # Flavors
    "Flavor",
    "Capabilities",
    # Rounding
    "RoundingMode",
    # Construction
    "Interval",
    "is_valid",
    "construct",
    "construct_unchecked",
    "singleton",
    "hull_unordered",
    "empty_interval",
    "entire_interval",
    "interval",
    "pm",
    # Arithmetic
    "add",
    "sub",
    "neg",
    "mul",
    "div",
    "inv",
    "sqr",
    "pow",
    # Elementary functions
    "sqrt",
    "exp",
    "exp2",
    "exp10",
    "log",
    "log2",
    "log10",
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "sinh",
    "cosh",
    "tanh",
    "asinh",
    "acosh",
    "atanh",
    # Parsing and display
    "parse_interval",
    "format_interval",
    "to_canonical",
]
