"""Exact addition, subtraction, negation and ordering."""

import pytest

from pyaeon import Duration, DurationOverflowError, InvalidArgumentError
from pyaeon._constants import (
    NANOSECONDS_PER_YEAR,
    PLANCK_TIME_PER_YOCTOSECOND,
    YOCTOSECONDS_PER_NANOSECOND,
)


def make_sample():
    return Duration.from_components(
        years=1, days=2, hours=3, seconds=5, nanoseconds=8, yoctoseconds=13, planck_time=14
    )


PAIRS = [
    (Duration.ONE_SECOND, Duration.ONE_DAY),
    (Duration.ONE_PLANCK_TIME, Duration.ONE_AEON),
    (-Duration.ONE_HOUR, Duration.ONE_MINUTE),
    (make_sample(), -Duration.ONE_YEAR),
    (-make_sample(), -Duration.ONE_YOCTOSECOND),
    (Duration(aeons=10**40, years=999_999_999), Duration.from_days(400)),
]


class TestAdd:
    def test_carry_from_planck_time(self):
        value = (
            Duration(planck_time=PLANCK_TIME_PER_YOCTOSECOND - 1)
            + Duration.ONE_PLANCK_TIME
        )
        assert value == Duration.ONE_YOCTOSECOND

    def test_carry_into_aeons(self):
        assert Duration(years=999_999_999) + Duration.ONE_YEAR == Duration.ONE_AEON

    def test_carry_through_whole_chain(self):
        almost = Duration.ONE_AEON - Duration.ONE_PLANCK_TIME
        assert almost + Duration.ONE_PLANCK_TIME == Duration.ONE_AEON

    def test_inverse(self, sample):
        assert sample + (-sample) == Duration.ZERO

    def test_zero_is_identity(self, sample):
        assert sample + Duration.ZERO == sample
        assert Duration.ZERO + sample == sample

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_commutative(self, a, b):
        assert a + b == b + a

    def test_mixed_signs(self):
        assert -Duration.from_seconds(3) + Duration.from_seconds(2) == -Duration.ONE_SECOND
        assert Duration.from_seconds(3) + -Duration.from_seconds(2) == Duration.ONE_SECOND

    def test_named_method(self):
        assert Duration.ONE_HOUR.add(Duration.ONE_HOUR) == Duration.from_hours(2)

    def test_overflow(self):
        largest = Duration(aeons=10**4096 - 1)
        with pytest.raises(DurationOverflowError):
            largest + Duration.ONE_AEON

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            Duration.ONE_SECOND + 1


class TestSubtract:
    def test_borrow_through_whole_chain(self):
        value = Duration.ONE_AEON - Duration.ONE_PLANCK_TIME
        assert value.aeons == 0
        assert value.years == 999_999_999
        assert value.total_nanoseconds == NANOSECONDS_PER_YEAR - 1
        assert value.total_yoctoseconds == YOCTOSECONDS_PER_NANOSECOND - 1
        assert value.planck_time == PLANCK_TIME_PER_YOCTOSECOND - 1

    def test_smaller_minus_larger(self):
        value = Duration.ONE_SECOND - Duration.ONE_DAY
        assert value.is_negative
        assert value == -(Duration.ONE_DAY - Duration.ONE_SECOND)

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_inverse_of_add(self, a, b):
        assert (a - b) + b == a

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (-Duration.ONE_SECOND, Duration.ONE_SECOND, Duration.from_seconds(-2)),
            (Duration.ONE_SECOND, -Duration.ONE_SECOND, Duration.from_seconds(2)),
            (-Duration.ONE_DAY, -Duration.ONE_SECOND, Duration.from_seconds(-86_399)),
            (Duration.ZERO, Duration.ONE_SECOND, -Duration.ONE_SECOND),
            (Duration.ONE_SECOND, Duration.ZERO, Duration.ONE_SECOND),
        ],
    )
    def test_signs(self, a, b, expected):
        assert a - b == expected

    def test_self_is_zero(self, sample):
        assert sample - sample == Duration.ZERO
        assert not (sample - sample).is_negative


class TestPerpetual:
    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (Duration.POSITIVE_INFINITY, Duration.ONE_SECOND, Duration.POSITIVE_INFINITY),
            (Duration.ONE_SECOND, Duration.NEGATIVE_INFINITY, Duration.NEGATIVE_INFINITY),
            (Duration.POSITIVE_INFINITY, Duration.POSITIVE_INFINITY, Duration.POSITIVE_INFINITY),
            (Duration.POSITIVE_INFINITY, Duration.NEGATIVE_INFINITY, Duration.ZERO),
        ],
    )
    def test_add(self, a, b, expected):
        assert a + b == expected

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (Duration.POSITIVE_INFINITY, Duration.POSITIVE_INFINITY, Duration.ZERO),
            (Duration.NEGATIVE_INFINITY, Duration.NEGATIVE_INFINITY, Duration.ZERO),
            (Duration.POSITIVE_INFINITY, Duration.NEGATIVE_INFINITY, Duration.POSITIVE_INFINITY),
            (Duration.NEGATIVE_INFINITY, Duration.ONE_SECOND, Duration.NEGATIVE_INFINITY),
            (Duration.ONE_SECOND, Duration.POSITIVE_INFINITY, Duration.NEGATIVE_INFINITY),
            (Duration.ONE_SECOND, Duration.NEGATIVE_INFINITY, Duration.POSITIVE_INFINITY),
        ],
    )
    def test_subtract(self, a, b, expected):
        assert a - b == expected

    def test_negate(self):
        assert -Duration.POSITIVE_INFINITY == Duration.NEGATIVE_INFINITY
        assert abs(Duration.NEGATIVE_INFINITY) == Duration.POSITIVE_INFINITY


class TestNegateAndAbs:
    def test_double_negation(self, sample):
        assert -(-sample) == sample

    def test_negated_zero_is_zero(self):
        assert -Duration.ZERO == Duration.ZERO
        assert not (-Duration.ZERO).is_negative

    def test_abs(self, sample):
        assert abs(-sample) == sample
        assert (-sample).abs() == sample
        assert sample.negate() == -sample

    def test_unary_plus(self, sample):
        assert +sample is sample


class TestCompare:
    ORDERED = [
        Duration.NEGATIVE_INFINITY,
        -Duration.ONE_AEON,
        -Duration.ONE_SECOND,
        Duration(is_negative=True, planck_time=2),
        Duration(is_negative=True, planck_time=1),
        Duration.ZERO,
        Duration.ONE_PLANCK_TIME,
        Duration.ONE_PICOSECOND,
        Duration.ONE_SECOND,
        Duration.ONE_YEAR,
        Duration.ONE_AEON,
        Duration.POSITIVE_INFINITY,
    ]

    def test_total_order(self):
        assert sorted(reversed(self.ORDERED)) == self.ORDERED

    @pytest.mark.parametrize("index", range(len(ORDERED) - 1))
    def test_antisymmetric(self, index):
        a, b = self.ORDERED[index], self.ORDERED[index + 1]
        assert a.compare(b) == -1
        assert b.compare(a) == 1
        assert a < b
        assert b > a
        assert a <= b
        assert b >= a

    def test_equal(self, sample):
        assert sample.compare(Duration.from_canonical_fields(**sample.canonical_fields())) == 0
        assert Duration.POSITIVE_INFINITY.compare(Duration.POSITIVE_INFINITY) == 0

    def test_max_and_min(self):
        assert Duration.max(Duration.ONE_SECOND, Duration.ONE_DAY) == Duration.ONE_DAY
        assert Duration.min(Duration.ONE_SECOND, -Duration.ONE_DAY) == -Duration.ONE_DAY

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            Duration.ONE_SECOND < 1


class TestOperandTypes:
    @pytest.mark.parametrize("method", ["add", "subtract", "compare", "ratio", "modulus"])
    def test_non_duration_operand_raises(self, method):
        with pytest.raises(InvalidArgumentError):
            getattr(Duration.ONE_DAY, method)(5)
