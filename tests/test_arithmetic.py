"""
Tests for interval arithmetic: sign cases, division, powers and
empty-interval absorption.
"""

from fractions import Fraction

import pytest
from validated_intervals.arithmetic import add, div, inv, mul, neg, pow, sqr, sub
from validated_intervals.config import DomainPolicy
from validated_intervals.errors import DomainError, DomainWarning
from validated_intervals.interval import Interval, empty_interval, entire_interval
from validated_intervals.rounding import next_up

INF = float('inf')


def encloses(x: Interval, exact) -> bool:
    """Exact membership test that tolerates infinite bounds."""
    lo_ok = x.lo == -INF or Fraction(x.lo) <= exact
    hi_ok = x.hi == INF or exact <= Fraction(x.hi)
    return lo_ok and hi_ok


class TestAddition:
    """Test addition, subtraction and negation."""

    def test_add(self):
        c = Interval(1.0, 2.0) + Interval(3.0, 4.0)
        assert c.equal(Interval(4.0, 6.0))

    def test_add_rounds_outward(self):
        c = Interval(0.1, 0.1) + Interval(0.2, 0.2)
        assert encloses(c, Fraction(0.1) + Fraction(0.2))
        assert c.hi == next_up(c.lo)

    def test_sub(self):
        c = Interval(3.0, 5.0) - Interval(1.0, 2.0)
        assert c.equal(Interval(1.0, 4.0))

    def test_neg(self):
        assert (-Interval(1.0, 2.0)).equal(Interval(-2.0, -1.0))
        assert neg(empty_interval()).is_empty

    def test_scalar_operands(self):
        x = Interval(1.0, 2.0)
        assert (x + 1).equal(Interval(2.0, 3.0))
        assert (1 + x).equal(Interval(2.0, 3.0))
        assert (5 - x).equal(Interval(3.0, 4.0))
        assert (x - 0.5).equal(Interval(0.5, 1.5))

    def test_unbounded(self):
        c = Interval(-INF, 1.0) + Interval(2.0, 3.0)
        assert c.equal(Interval(-INF, 4.0))
        d = Interval(-INF, 1.0) - Interval(-INF, 1.0)
        assert d.is_entire

    def test_rational_stays_exact(self):
        c = Interval(Fraction(1, 3), Fraction(1, 2)) + Interval(Fraction(1, 6), Fraction(1, 6))
        assert c.is_rational
        assert c.equal(Interval(Fraction(1, 2), Fraction(2, 3)))

    def test_rational_with_float(self):
        c = Interval(Fraction(1, 3), Fraction(1, 3)) + Interval(1.0, 1.0)
        assert not c.is_rational
        assert encloses(c, Fraction(4, 3))


class TestMultiplication:
    """Test the sign cases of multiplication."""

    def test_positive_positive(self):
        c = Interval(2.0, 3.0) * Interval(4.0, 5.0)
        assert c.equal(Interval(8.0, 15.0))

    def test_negative_positive(self):
        c = Interval(-3.0, -2.0) * Interval(4.0, 5.0)
        assert c.equal(Interval(-15.0, -8.0))

    def test_negative_negative(self):
        c = Interval(-3.0, -2.0) * Interval(-5.0, -4.0)
        assert c.equal(Interval(8.0, 15.0))

    def test_mixed_positive(self):
        c = Interval(-1.0, 2.0) * Interval(3.0, 4.0)
        assert c.equal(Interval(-4.0, 8.0))

    def test_both_straddle_zero(self):
        c = Interval(-1.0, 2.0) * Interval(-3.0, 4.0)
        assert c.equal(Interval(-6.0, 8.0))

    def test_positive_times_straddling(self):
        c = Interval(2.0, 3.0) * Interval(-1.0, 4.0)
        assert c.equal(Interval(-3.0, 12.0))

    def test_zero_absorbs_infinity(self):
        c = Interval(0.0, 0.0) * entire_interval()
        assert c.equal(Interval(0.0, 0.0))

    def test_zero_endpoint_times_infinity(self):
        c = Interval(0.0, 1.0) * Interval(2.0, INF)
        assert c.equal(Interval(0.0, INF))

    def test_scalar(self):
        assert (2 * Interval(1.0, 2.0)).equal(Interval(2.0, 4.0))
        assert (Interval(1.0, 2.0) * -1).equal(Interval(-2.0, -1.0))

    def test_rational(self):
        c = Interval(Fraction(-1, 2), Fraction(1, 3)) * Interval(Fraction(3), Fraction(6))
        assert c.is_rational
        assert c.equal(Interval(Fraction(-3), Fraction(2)))

    def test_sqr(self):
        assert sqr(Interval(-2.0, 3.0)).equal(Interval(0.0, 9.0))
        assert sqr(Interval(-3.0, -2.0)).equal(Interval(4.0, 9.0))


class TestDivision:
    """Test the division cases."""

    def test_positive_divisor(self):
        c = Interval(1.0, 2.0) / Interval(4.0, 8.0)
        assert c.equal(Interval(0.125, 0.5))

    def test_negative_divisor(self):
        c = Interval(1.0, 2.0) / Interval(-2.0, -1.0)
        assert c.equal(Interval(-2.0, -0.5))

    def test_divisor_straddles_zero(self):
        c = Interval(1.0, 2.0) / Interval(-1.0, 1.0)
        assert c.is_entire

    def test_zero_lower_endpoint(self):
        assert (Interval(1.0, 2.0) / Interval(0.0, 1.0)).equal(Interval(1.0, INF))
        assert (Interval(-2.0, -1.0) / Interval(0.0, 1.0)).equal(Interval(-INF, -1.0))

    def test_zero_upper_endpoint(self):
        assert (Interval(1.0, 2.0) / Interval(-1.0, 0.0)).equal(Interval(-INF, -1.0))
        assert (Interval(-2.0, -1.0) / Interval(-1.0, 0.0)).equal(Interval(1.0, INF))

    def test_dividend_straddles_zero_divisor_endpoint(self):
        assert (Interval(-1.0, 1.0) / Interval(0.0, 1.0)).is_entire

    def test_zero_dividend(self):
        c = Interval(0.0, 0.0) / Interval(-1.0, 1.0)
        assert c.equal(Interval(0.0, 0.0))

    def test_zero_divisor(self):
        assert (Interval(1.0, 2.0) / Interval(0.0, 0.0)).is_empty

    def test_rounds_outward(self):
        c = Interval(1.0, 1.0) / Interval(3.0, 3.0)
        assert encloses(c, Fraction(1, 3))
        assert c.lo < c.hi

    def test_scalar(self):
        assert (1 / Interval(2.0, 4.0)).equal(Interval(0.25, 0.5))
        assert (Interval(2.0, 4.0) / 2).equal(Interval(1.0, 2.0))

    def test_rational(self):
        c = Interval(Fraction(1), Fraction(2)) / Interval(Fraction(3), Fraction(3))
        assert c.equal(Interval(Fraction(1, 3), Fraction(2, 3)))

    def test_rational_by_zero_endpoint(self):
        c = Interval(Fraction(1), Fraction(2)) / Interval(Fraction(0), Fraction(1))
        assert c.lo == 1.0
        assert c.hi == INF

    def test_inv(self):
        assert inv(Interval(2.0, 4.0)).equal(Interval(0.25, 0.5))
        assert inv(Interval(-1.0, 1.0)).is_entire


class TestPower:
    """Test integer and real powers."""

    def test_even_power_straddling_zero(self):
        assert (Interval(-2.0, 3.0) ** 2).equal(Interval(0.0, 9.0))

    def test_odd_power(self):
        assert (Interval(-2.0, 3.0) ** 3).equal(Interval(-8.0, 27.0))

    def test_zero_power(self):
        assert (Interval(-2.0, 3.0) ** 0).equal(Interval(1.0, 1.0))

    def test_integer_valued_float_exponent(self):
        assert (Interval(-2.0, 3.0) ** 2.0).equal(Interval(0.0, 9.0))

    def test_thin_interval_exponent(self):
        assert (Interval(-2.0, 3.0) ** Interval(3.0, 3.0)).equal(Interval(-8.0, 27.0))

    def test_negative_power(self):
        assert (Interval(2.0, 4.0) ** -1).equal(Interval(0.25, 0.5))
        assert (Interval(-1.0, 1.0) ** -1).is_entire

    def test_negative_even_power(self):
        c = Interval(-2.0, 3.0) ** -2
        assert c.hi == INF
        assert 0 < c.lo <= 1 / 9

    def test_rational_power(self):
        c = Interval(Fraction(-1, 2), Fraction(1, 3)) ** 3
        assert c.equal(Interval(Fraction(-1, 8), Fraction(1, 27)))

    def test_real_exponent(self):
        c = Interval(4.0, 9.0) ** 0.5
        assert c.lo <= 2.0 <= c.hi
        assert c.lo <= 3.0 <= c.hi
        assert c.width < 1.0 + 1e-12

    def test_real_exponent_restricts_base(self):
        c = Interval(-4.0, 9.0) ** 0.5
        assert c.lo == 0.0
        assert c.hi >= 3.0

    def test_interval_exponent(self):
        c = Interval(2.0, 2.0) ** Interval(0.5, 2.0)
        assert c.contains(2.0 ** 0.5)
        assert c.contains(4.0)

    def test_scalar_base(self):
        c = 2 ** Interval(1.0, 3.0)
        assert c.contains(2.0)
        assert c.contains(8.0)

    def test_zero_base(self):
        assert (Interval(0.0, 0.0) ** Interval(0.5, 2.0)).equal(Interval(0.0, 0.0))
        assert (Interval(0.0, 0.0) ** Interval(0.0, 2.0)).equal(Interval(0.0, 1.0))

    def test_negative_base_with_real_exponent(self):
        assert (Interval(-4.0, -1.0) ** 0.5).is_empty

    def test_unsupported_exponent(self):
        with pytest.raises(TypeError):
            pow(Interval(1.0, 2.0), "2")


class TestDomainPolicy:
    """Test how arguments outside a domain are reported."""

    def test_empty_policy(self):
        assert pow(Interval(-4.0, -1.0), 0.5).is_empty

    def test_warn_policy(self, use_config):
        use_config(domain_policy=DomainPolicy.WARN)
        with pytest.warns(DomainWarning):
            result = pow(Interval(-4.0, -1.0), 0.5)
        assert result.is_empty

    def test_raise_policy(self, use_config):
        use_config(domain_policy=DomainPolicy.RAISE)
        with pytest.raises(DomainError):
            pow(Interval(-4.0, -1.0), 0.5)


class TestEmptyAbsorption:
    """Test that the empty interval propagates through every operator."""

    @pytest.mark.parametrize("op", [add, sub, mul, div])
    def test_binary(self, op):
        x = Interval(1.0, 2.0)
        assert op(empty_interval(), x).is_empty
        assert op(x, empty_interval()).is_empty

    def test_unary(self):
        e = empty_interval()
        assert neg(e).is_empty
        assert abs(e).is_empty
        assert sqr(e).is_empty
        assert inv(e).is_empty
        assert (e ** 3).is_empty
        assert (e ** 0.5).is_empty


class TestAbs:
    """Test absolute value."""

    def test_abs(self):
        assert abs(Interval(-3.0, 2.0)).equal(Interval(0.0, 3.0))
        assert abs(Interval(-3.0, -2.0)).equal(Interval(2.0, 3.0))
        assert abs(Interval(2.0, 3.0)).equal(Interval(2.0, 3.0))


class TestMonotonicity:
    """Subintervals map to subintervals."""

    def test_inclusion_isotone(self):
        outer_x = Interval(-2.0, 3.0)
        outer_y = Interval(0.5, 4.0)
        inner_x = Interval(-1.0, 1.5)
        inner_y = Interval(1.0, 2.0)
        for op in (add, sub, mul, div):
            assert op(inner_x, inner_y).subset(op(outer_x, outer_y))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
