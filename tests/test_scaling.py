"""Scalar multiply/divide, duration ratio and modulus."""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from pyaeon import Duration, DurationOverflowError, InvalidArgumentError
from pyaeon._constants import PLANCK_TIME_PER_AEON


class TestMultiply:
    @pytest.mark.parametrize(
        "factor, expected",
        [
            (3, Duration.from_seconds(3)),
            (0.5, Duration.from_milliseconds(500)),
            (Decimal("2.5"), Duration.from_milliseconds(2500)),
            (Fraction(1, 4), Duration.from_milliseconds(250)),
            (-2, Duration.from_seconds(-2)),
        ],
    )
    def test_factor(self, factor, expected):
        assert Duration.ONE_SECOND * factor == expected

    def test_reflected(self):
        assert 3 * Duration.ONE_SECOND == Duration.from_seconds(3)

    def test_negative_times_negative(self):
        assert -Duration.ONE_SECOND * -2 == Duration.from_seconds(2)

    def test_exact_at_scale(self):
        assert Duration(aeons=10**100) * 2 == Duration(aeons=2 * 10**100)

    def test_exact_thirds(self):
        assert Duration.ONE_SECOND * Fraction(1, 3) == Duration.from_components(
            seconds=Fraction(1, 3)
        )

    def test_day_halves(self):
        assert Duration.ONE_DAY.multiply(0.5) == Duration.from_hours(12)

    @pytest.mark.parametrize("factor", [float("nan"), Decimal("NaN")])
    def test_nan(self, factor):
        with pytest.raises(InvalidArgumentError):
            Duration.ONE_SECOND * factor

    @pytest.mark.parametrize(
        "duration, factor, expected",
        [
            (Duration.POSITIVE_INFINITY, 0, Duration.POSITIVE_INFINITY),
            (Duration.NEGATIVE_INFINITY, 0, Duration.NEGATIVE_INFINITY),
            (Duration.POSITIVE_INFINITY, -1, Duration.NEGATIVE_INFINITY),
            (Duration.NEGATIVE_INFINITY, -2.5, Duration.POSITIVE_INFINITY),
            (Duration.ZERO, math.inf, Duration.POSITIVE_INFINITY),
            (Duration.ZERO, -math.inf, Duration.NEGATIVE_INFINITY),
            (Duration.ZERO, 0, Duration.ZERO),
            (Duration.ONE_SECOND, 0, Duration.ZERO),
            (Duration.ONE_SECOND, math.inf, Duration.POSITIVE_INFINITY),
            (Duration.ONE_SECOND, -math.inf, Duration.NEGATIVE_INFINITY),
            (-Duration.ONE_SECOND, math.inf, Duration.NEGATIVE_INFINITY),
        ],
    )
    def test_special_values(self, duration, factor, expected):
        assert duration * factor == expected

    def test_huge_decimal_exponent(self):
        with pytest.raises(DurationOverflowError):
            Duration.ONE_SECOND * Decimal("1E+100000")

    def test_vanishing_decimal_exponent(self):
        assert Duration.ONE_AEON * Decimal("1E-9000") == Duration.ZERO

    def test_huge_decimal_exponent_on_zero(self):
        assert Duration.ZERO * Decimal("1E+100000") == Duration.ZERO

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            Duration.ONE_SECOND * "2"


class TestDivide:
    def test_scalar(self):
        assert Duration.from_seconds(3) / 3 == Duration.ONE_SECOND

    def test_float_divisor(self):
        assert Duration.ONE_SECOND / 0.5 == Duration.from_seconds(2)

    @pytest.mark.parametrize(
        "duration, divisor, expected",
        [
            (Duration.ONE_SECOND, 0, Duration.POSITIVE_INFINITY),
            (-Duration.ONE_SECOND, 0, Duration.NEGATIVE_INFINITY),
            (Duration.ONE_SECOND, math.inf, Duration.ZERO),
            (Duration.ZERO, 0, Duration.ZERO),
            (Duration.POSITIVE_INFINITY, -2, Duration.NEGATIVE_INFINITY),
            (Duration.NEGATIVE_INFINITY, 0, Duration.NEGATIVE_INFINITY),
        ],
    )
    def test_special_values(self, duration, divisor, expected):
        assert duration.divide(divisor) == expected

    def test_nan(self):
        with pytest.raises(InvalidArgumentError):
            Duration.ONE_SECOND / float("nan")

    def test_vanishing_decimal_divisor_overflows(self):
        with pytest.raises(DurationOverflowError):
            Duration.ONE_PLANCK_TIME / Decimal("1E-9000")

    def test_huge_decimal_divisor(self):
        assert Duration.ONE_AEON / Decimal("-1E+9000") == Duration.ZERO


class TestRatio:
    def test_hours_per_day(self):
        assert Duration.ONE_DAY / Duration.ONE_HOUR == pytest.approx(24.0)

    def test_negative(self):
        assert Duration.from_seconds(-90).ratio(Duration.ONE_MINUTE) == pytest.approx(-1.5)

    def test_zero_by_zero(self):
        assert math.isnan(Duration.ZERO / Duration.ZERO)

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (Duration.ZERO, Duration.ONE_SECOND, 0.0),
            (Duration.ONE_SECOND, Duration.ZERO, math.inf),
            (-Duration.ONE_SECOND, Duration.ZERO, -math.inf),
            (Duration.POSITIVE_INFINITY, Duration.ONE_SECOND, math.inf),
            (Duration.POSITIVE_INFINITY, -Duration.ONE_SECOND, -math.inf),
            (Duration.ONE_SECOND, Duration.POSITIVE_INFINITY, 0.0),
        ],
    )
    def test_special_values(self, a, b, expected):
        assert a / b == expected

    def test_beyond_float_range_in_planck_time(self):
        a = Duration(aeons=10**250)
        b = Duration(aeons=10**249)
        assert a / b == pytest.approx(10.0)

    def test_tiny_ratio(self):
        ratio = Duration.ONE_PLANCK_TIME / Duration.ONE_AEON
        assert ratio == pytest.approx(1 / PLANCK_TIME_PER_AEON)

    def test_beyond_float_range_in_aeons(self):
        assert Duration.from_aeons(10**400) / Duration.ONE_PLANCK_TIME == math.inf
        assert -Duration.from_aeons(10**400) / Duration.ONE_SECOND == -math.inf

    def test_vanishing_against_float_range_in_aeons(self):
        ratio = Duration.ONE_PLANCK_TIME / Duration.from_aeons(10**400)
        assert ratio == 0.0
        assert not math.isnan(ratio)


class TestModulus:
    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (Duration.from_seconds(7), Duration.from_seconds(3), Duration.ONE_SECOND),
            (Duration.from_seconds(-7), Duration.from_seconds(3), -Duration.ONE_SECOND),
            (Duration.from_seconds(7), Duration.from_seconds(-3), Duration.ONE_SECOND),
            (Duration.from_seconds(6), Duration.from_seconds(3), Duration.ZERO),
            (Duration.ZERO, Duration.ONE_SECOND, Duration.ZERO),
            (Duration.ONE_SECOND, Duration.POSITIVE_INFINITY, Duration.ONE_SECOND),
        ],
    )
    def test_remainder(self, a, b, expected):
        assert a % b == expected

    @pytest.mark.parametrize(
        "a, b",
        [
            (Duration.ONE_AEON + Duration.ONE_PLANCK_TIME, Duration.ONE_SECOND),
            (Duration.from_days(1000), Duration.from_components(hours=7, planck_time=3)),
            (-Duration.ONE_YEAR, Duration.from_components(seconds=Fraction(1, 7))),
        ],
    )
    def test_remainder_smaller_than_divisor(self, a, b):
        remainder = a.modulus(b)
        assert abs(remainder) < abs(b)
        assert remainder.is_zero or remainder.is_negative == a.is_negative

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (Duration.POSITIVE_INFINITY, Duration.ONE_SECOND, Duration.ZERO),
            (Duration.NEGATIVE_INFINITY, Duration.ONE_SECOND, Duration.ZERO),
            (Duration.POSITIVE_INFINITY, Duration.NEGATIVE_INFINITY, Duration.ZERO),
            (Duration.POSITIVE_INFINITY, Duration.ZERO, Duration.ZERO),
            (Duration.ONE_SECOND, Duration.ZERO, Duration.NEGATIVE_INFINITY),
            (-Duration.ONE_SECOND, Duration.ZERO, Duration.POSITIVE_INFINITY),
            (Duration.ZERO, Duration.ZERO, Duration.ZERO),
        ],
    )
    def test_degenerate_operands(self, a, b, expected):
        assert a % b == expected
