"""
Randomized enclosure checks: for points sampled from random intervals, the
exact result of an operation must lie in the interval result.
"""

import math
from fractions import Fraction

import numpy as np
import pytest
from validated_intervals import functions as fn
from validated_intervals.arithmetic import add, div, mul, sub
from validated_intervals.interval import Interval

INF = float('inf')
N_TRIALS = 200


def encloses(x: Interval, exact) -> bool:
    lo_ok = x.lo == -INF or Fraction(x.lo) <= exact
    hi_ok = x.hi == INF or exact <= Fraction(x.hi)
    return lo_ok and hi_ok


def random_interval(rng, scale=10.0) -> Interval:
    a, b = sorted(rng.uniform(-scale, scale, size=2))
    return Interval(float(a), float(b))


def sample_points(rng, x: Interval, n=3):
    inner = [float(v) for v in rng.uniform(x.lo, x.hi, size=n)]
    return [x.lo, x.hi] + [min(max(v, x.lo), x.hi) for v in inner]


class TestArithmeticSoundness:
    """Exact rational checks of the four operations."""

    @pytest.mark.parametrize("op,exact", [
        (add, lambda a, b: a + b),
        (sub, lambda a, b: a - b),
        (mul, lambda a, b: a * b),
    ])
    def test_binary(self, op, exact):
        rng = np.random.default_rng(42)
        for _ in range(N_TRIALS):
            x = random_interval(rng)
            y = random_interval(rng)
            z = op(x, y)
            for a in sample_points(rng, x):
                for b in sample_points(rng, y):
                    assert encloses(z, exact(Fraction(a), Fraction(b)))

    def test_div(self):
        rng = np.random.default_rng(7)
        for _ in range(N_TRIALS):
            x = random_interval(rng)
            y = random_interval(rng)
            z = div(x, y)
            for a in sample_points(rng, x):
                for b in sample_points(rng, y):
                    if b == 0:
                        continue
                    assert encloses(z, Fraction(a) / Fraction(b))

    def test_integer_powers(self):
        rng = np.random.default_rng(11)
        for _ in range(N_TRIALS):
            x = random_interval(rng, scale=3.0)
            n = int(rng.integers(1, 8))
            z = x ** n
            for a in sample_points(rng, x):
                assert encloses(z, Fraction(a) ** n)


class TestFunctionSoundness:
    """Point values of elementary functions lie in the interval result."""

    @pytest.mark.parametrize("interval_fn,point_fn,scale", [
        (fn.sin, math.sin, 20.0),
        (fn.cos, math.cos, 20.0),
        (fn.exp, math.exp, 20.0),
        (fn.atan, math.atan, 20.0),
        (fn.sinh, math.sinh, 5.0),
        (fn.cosh, math.cosh, 5.0),
        (fn.tanh, math.tanh, 5.0),
    ])
    def test_total_functions(self, interval_fn, point_fn, scale):
        rng = np.random.default_rng(3)
        for _ in range(N_TRIALS):
            x = random_interval(rng, scale)
            z = interval_fn(x)
            for v in sample_points(rng, x):
                assert z.contains(point_fn(v))

    def test_log_and_sqrt(self):
        rng = np.random.default_rng(5)
        for _ in range(N_TRIALS):
            a, b = sorted(rng.uniform(1e-3, 100.0, size=2))
            x = Interval(float(a), float(b))
            for v in sample_points(rng, x):
                assert fn.log(x).contains(math.log(v))
                assert fn.sqrt(x).contains(math.sqrt(v))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
