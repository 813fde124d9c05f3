"""Scalar multiply and divide, duration ratio and modulus."""

from __future__ import annotations

import math
import sys
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING

from pyaeon import _arithmetic
from pyaeon._constants import (
    MAX_SCALAR_EXPONENT,
    NANOSECONDS_PER_SECOND,
    PLANCK_TIME_PER_AEON,
    PLANCK_TIME_PER_NANOSECOND,
    PLANCK_TIME_PER_YEAR,
    PLANCK_TIME_PER_YOCTOSECOND,
)
from pyaeon._errors import (
    ERR_MSG_NAN_FACTOR,
    ERR_MSG_UNSUPPORTED_OPERAND,
    InvalidArgumentError,
)

if TYPE_CHECKING:
    from pyaeon.duration import Duration

Scalar = int | float | Decimal | Fraction

# Units tried by ratio(), finest first; the coarser ones survive float overflow.
_RATIO_UNITS = (
    1,
    PLANCK_TIME_PER_YOCTOSECOND,
    PLANCK_TIME_PER_NANOSECOND,
    NANOSECONDS_PER_SECOND * PLANCK_TIME_PER_NANOSECOND,
    PLANCK_TIME_PER_YEAR,
    PLANCK_TIME_PER_AEON,
)


def exact_scalar(value: Scalar) -> Fraction | float:
    """Convert a scalar to an exact Fraction.

    Infinite inputs come back as ``math.inf`` or ``-math.inf``. Floats are
    taken at their shortest decimal representation, so ``0.1`` means one tenth.
    Decimals with an exponent beyond MAX_SCALAR_EXPONENT are clamped.
    """
    if isinstance(value, (int, Fraction)):
        return Fraction(value)
    if isinstance(value, float):
        if math.isnan(value):
            raise InvalidArgumentError(ERR_MSG_NAN_FACTOR, "float scalar is NaN")
        if math.isinf(value):
            return value
        return Fraction(Decimal(repr(value)))
    if isinstance(value, Decimal):
        if value.is_nan():
            raise InvalidArgumentError(ERR_MSG_NAN_FACTOR, "Decimal scalar is NaN")
        if value.is_infinite():
            return -math.inf if value.is_signed() else math.inf
        if value and abs(value.adjusted()) > MAX_SCALAR_EXPONENT:
            # Any duration scaled by the bound overflows or truncates to zero.
            bound = Fraction(10) ** (MAX_SCALAR_EXPONENT + 1)
            clamped = bound if value.adjusted() > 0 else 1 / bound
            return -clamped if value.is_signed() else clamped
        return Fraction(value)
    raise InvalidArgumentError(
        ERR_MSG_UNSUPPORTED_OPERAND,
        f"unsupported scalar type: {type(value).__name__}",
    )


def _signed_infinity(cls: type[Duration], negative: bool) -> Duration:
    return cls.NEGATIVE_INFINITY if negative else cls.POSITIVE_INFINITY


def multiply(duration: Duration, factor: Scalar) -> Duration:
    """Scale a duration by a real factor.

    The exact product of every field is re-normalized through
    ``from_components``; digits below one Planck time are truncated.
    """
    cls = type(duration)
    scalar = exact_scalar(factor)
    negative = duration.is_negative != (scalar < 0)

    if duration.is_perpetual:
        return _signed_infinity(cls, negative)
    if scalar == 0:
        return cls.ZERO
    if isinstance(scalar, float):
        return _signed_infinity(cls, negative)
    if duration.is_zero:
        return cls.ZERO

    scalar = abs(scalar)
    return cls.from_components(
        is_negative=negative,
        aeons=duration.aeons * scalar,
        years=duration.years * scalar,
        nanoseconds=duration.total_nanoseconds * scalar,
        yoctoseconds=duration.total_yoctoseconds * scalar,
        planck_time=duration.planck_time * scalar,
    )


def divide(duration: Duration, divisor: Scalar) -> Duration:
    """Divide a duration by a real divisor.

    Division by zero yields the infinity carrying the dividend's sign, and
    an infinite divisor yields zero.
    """
    cls = type(duration)
    scalar = exact_scalar(divisor)
    negative = duration.is_negative != (scalar < 0)

    if duration.is_perpetual:
        return _signed_infinity(cls, negative)
    if duration.is_zero:
        return cls.ZERO
    if scalar == 0:
        return _signed_infinity(cls, duration.is_negative)
    if isinstance(scalar, float):
        return cls.ZERO
    return multiply(duration, 1 / scalar)


def _is_usable(result: float) -> bool:
    return not math.isinf(result) and abs(result) > sys.float_info.min


def _quotient(numerator: float, denominator: float, negative: bool) -> float:
    if math.isinf(numerator) or denominator == 0.0:
        return -math.inf if negative else math.inf
    if math.isinf(denominator):
        return -0.0 if negative else 0.0
    return numerator / denominator


def ratio(dividend: Duration, divisor: Duration) -> float:
    """Return dividend / divisor as a float.

    Each operand is converted at progressively coarser units until the
    quotient is finite and not vanishingly small. Failing that, the
    quotient in aeons is returned as is, zero or infinite.
    """
    negative = dividend.is_negative != divisor.is_negative
    if dividend.is_zero:
        return math.nan if divisor.is_zero else 0.0
    if divisor.is_zero:
        return -math.inf if dividend.is_negative else math.inf
    if dividend.is_perpetual:
        return -math.inf if negative else math.inf
    if divisor.is_perpetual:
        return 0.0

    for planck_per_unit in _RATIO_UNITS:
        result = _quotient(
            dividend.to_unit(planck_per_unit),
            divisor.to_unit(planck_per_unit),
            negative,
        )
        if _is_usable(result):
            break
    return result


def modulus(dividend: Duration, divisor: Duration) -> Duration:
    """Return the remainder of dividend / divisor; it takes the dividend's sign.

    Degenerate operands give the sentinels of ``|a| - |b| * floor(|a| / |b|)``:
    a perpetual dividend leaves zero (infinity minus infinity) and a zero
    divisor leaves the infinity opposite to the dividend's sign.
    """
    cls = type(dividend)
    if dividend.is_zero or dividend.is_perpetual:
        return cls.ZERO
    if divisor.is_perpetual:
        return dividend
    if divisor.is_zero:
        return _signed_infinity(cls, not dividend.is_negative)

    magnitude = _arithmetic.absolute(dividend)
    step = _arithmetic.absolute(divisor)
    quotient = magnitude.planck_time_magnitude() // step.planck_time_magnitude()
    remainder = _arithmetic.subtract(magnitude, multiply(step, quotient))
    if dividend.is_negative:
        return _arithmetic.negate(remainder)
    return remainder
