"""Exact arithmetic over the radix chain.

Every function here is pure: operands are never mutated and results are
built through the trusted (non-normalizing) constructor once the carry or
borrow has been propagated by hand.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pyaeon._constants import (
    MAX_AEON_DIGITS,
    NANOSECONDS_PER_YEAR,
    PLANCK_TIME_PER_YOCTOSECOND,
    YEARS_PER_AEON,
    YOCTOSECONDS_PER_NANOSECOND,
)
from pyaeon._errors import ERR_MSG_OVERFLOW, DurationOverflowError

if TYPE_CHECKING:
    from pyaeon.duration import Duration

_AEON_LIMIT = 10**MAX_AEON_DIGITS


def check_aeons(aeons: int) -> int:
    """Return aeons unchanged, or raise if it needs more than MAX_AEON_DIGITS digits."""
    if aeons >= _AEON_LIMIT:
        raise DurationOverflowError(
            ERR_MSG_OVERFLOW,
            f"aeon count exceeds {MAX_AEON_DIGITS} decimal digits",
        )
    return aeons


def decompose(planck_time: int) -> tuple[int, int, int, int, int]:
    """Split a non-negative Planck-time count into canonical fields.

    Returns (aeons, years, total_nanoseconds, total_yoctoseconds, planck_time).
    """
    rest, planck_time = divmod(planck_time, PLANCK_TIME_PER_YOCTOSECOND)
    rest, yoctoseconds = divmod(rest, YOCTOSECONDS_PER_NANOSECOND)
    rest, nanoseconds = divmod(rest, NANOSECONDS_PER_YEAR)
    aeons, years = divmod(rest, YEARS_PER_AEON)
    return check_aeons(aeons), years, nanoseconds, yoctoseconds, planck_time


def _borrow(difference: int, radix: int) -> tuple[int, int]:
    if difference < 0:
        return difference + radix, 1
    return difference, 0


def negate(duration: Duration) -> Duration:
    return type(duration)(
        not duration.is_negative,
        duration.is_perpetual,
        duration.planck_time,
        duration.total_yoctoseconds,
        duration.total_nanoseconds,
        duration.years,
        duration.aeons,
    )


def absolute(duration: Duration) -> Duration:
    if not duration.is_negative:
        return duration
    return negate(duration)


def add(first: Duration, second: Duration) -> Duration:
    """Add two durations, carrying bottom-up from Planck time to aeons."""
    cls = type(first)
    if first.is_perpetual or second.is_perpetual:
        if first.is_perpetual and second.is_perpetual:
            # Opposite infinities cancel out.
            return first if first.is_negative == second.is_negative else cls.ZERO
        return first if first.is_perpetual else second
    if first.is_zero:
        return second
    if second.is_zero:
        return first

    if first.is_negative != second.is_negative:
        if first.is_negative:
            return subtract(second, negate(first))
        return subtract(first, negate(second))

    carry, planck_time = divmod(
        first.planck_time + second.planck_time, PLANCK_TIME_PER_YOCTOSECOND
    )
    carry, yoctoseconds = divmod(
        first.total_yoctoseconds + second.total_yoctoseconds + carry,
        YOCTOSECONDS_PER_NANOSECOND,
    )
    carry, nanoseconds = divmod(
        first.total_nanoseconds + second.total_nanoseconds + carry,
        NANOSECONDS_PER_YEAR,
    )
    carry, years = divmod(first.years + second.years + carry, YEARS_PER_AEON)
    aeons = check_aeons(first.aeons + second.aeons + carry)

    return cls(
        first.is_negative,
        False,
        planck_time,
        yoctoseconds,
        nanoseconds,
        years,
        aeons,
    )


def subtract(first: Duration, second: Duration) -> Duration:
    """Subtract second from first."""
    cls = type(first)
    if first.is_perpetual:
        if second.is_perpetual and second.is_negative == first.is_negative:
            return cls.ZERO
        return first
    if second.is_perpetual:
        return cls.POSITIVE_INFINITY if second.is_negative else cls.NEGATIVE_INFINITY
    if second.is_zero:
        return first
    if first.is_zero:
        return negate(second)
    if second.is_negative:
        return add(first, negate(second))
    if first.is_negative:
        return negate(add(negate(first), second))
    if compare(second, first) > 0:
        return negate(subtract(second, first))

    # Both positive and first >= second: the aeon difference cannot go negative.
    planck_time, borrow = _borrow(
        first.planck_time - second.planck_time, PLANCK_TIME_PER_YOCTOSECOND
    )
    yoctoseconds, borrow = _borrow(
        first.total_yoctoseconds - second.total_yoctoseconds - borrow,
        YOCTOSECONDS_PER_NANOSECOND,
    )
    nanoseconds, borrow = _borrow(
        first.total_nanoseconds - second.total_nanoseconds - borrow,
        NANOSECONDS_PER_YEAR,
    )
    years, borrow = _borrow(first.years - second.years - borrow, YEARS_PER_AEON)
    aeons = first.aeons - second.aeons - borrow

    return cls(False, False, planck_time, yoctoseconds, nanoseconds, years, aeons)


def compare(first: Duration, second: Duration) -> int:
    """Return -1, 0 or 1 as first is less than, equal to or greater than second."""
    first_sign = first.sign
    second_sign = second.sign
    if first_sign != second_sign:
        return -1 if first_sign < second_sign else 1
    if first_sign == 0:
        return 0

    if first.is_perpetual or second.is_perpetual:
        if first.is_perpetual and second.is_perpetual:
            return 0
        return first_sign if first.is_perpetual else -first_sign

    for mine, theirs in zip(first.magnitude_fields(), second.magnitude_fields()):
        if mine != theirs:
            return first_sign if mine > theirs else -first_sign
    return 0
