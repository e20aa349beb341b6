"""
Interval Flavors

A flavor is a tag on the single Interval type that selects which operator
surface is visible:

- REAL: behaves like a real number (orderings, scalar equality, float())
- SET: behaves like a set (subset orderings, & and |)

Both flavors share the same data layout, invariants, arithmetic and
elementary functions.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Capabilities:
    """Operator capabilities exposed by a flavor."""
    real_ordering: bool
    set_ordering: bool
    scalar_equality: bool
    set_operators: bool
    float_conversion: bool


_REAL_CAPABILITIES = Capabilities(
    real_ordering=True,
    set_ordering=False,
    scalar_equality=True,
    set_operators=False,
    float_conversion=True,
)

_SET_CAPABILITIES = Capabilities(
    real_ordering=False,
    set_ordering=True,
    scalar_equality=False,
    set_operators=True,
    float_conversion=False,
)


class Flavor(Enum):
    """Interval families."""
    REAL = "real"
    SET = "set"

    @property
    def capabilities(self) -> Capabilities:
        if self is Flavor.REAL:
            return _REAL_CAPABILITIES
        return _SET_CAPABILITIES

    @classmethod
    def from_name(cls, name: str) -> 'Flavor':
        """Look up a flavor by its (case-insensitive) name."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise ValueError(f"Unknown flavor '{name}' (expected one of: {choices})")
