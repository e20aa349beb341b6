"""
Exception Taxonomy

Construction and parsing failures abort the call. Arithmetic edge cases
(0 * inf, division by an interval containing zero) are never errors: they
always produce an enclosure.
"""


class IntervalError(Exception):
    """Base class for all errors raised by validated_intervals."""


class InvalidInterval(IntervalError, ValueError):
    """Raised by the validated constructor for an ill-formed (lo, hi) pair."""

    def __init__(self, lo, hi):
        self.lo = lo
        self.hi = hi
        super().__init__(f"Must have lo <= hi to construct Interval({lo}, {hi})")


class DomainError(IntervalError, ValueError):
    """An argument lies entirely outside a function's domain."""


class DomainWarning(UserWarning):
    """Issued instead of DomainError under the 'warn' domain policy."""


class ParseError(IntervalError, ValueError):
    """A string could not be read as an interval literal."""


class ConfigurationError(IntervalError, RuntimeError):
    """Bad configuration value, or reconfiguration after first use."""
