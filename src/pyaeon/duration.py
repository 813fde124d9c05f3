"""Duration value type spanning aeons down to Planck time."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal
from fractions import Fraction
from typing import TYPE_CHECKING, Any, ClassVar

from pyaeon import _arithmetic, _scaling
from pyaeon._constants import (
    NANOSECONDS_PER_DAY,
    NANOSECONDS_PER_HOUR,
    NANOSECONDS_PER_MICROSECOND,
    NANOSECONDS_PER_MILLISECOND,
    NANOSECONDS_PER_MINUTE,
    NANOSECONDS_PER_SECOND,
    NANOSECONDS_PER_YEAR,
    PLANCK_TIME_PER_AEON,
    PLANCK_TIME_PER_NANOSECOND,
    PLANCK_TIME_PER_YEAR,
    PLANCK_TIME_PER_YOCTOSECOND,
    YEARS_PER_AEON,
    YOCTOSECONDS_PER_ATTOSECOND,
    YOCTOSECONDS_PER_FEMTOSECOND,
    YOCTOSECONDS_PER_NANOSECOND,
    YOCTOSECONDS_PER_PICOSECOND,
    YOCTOSECONDS_PER_ZEPTOSECOND,
)
from pyaeon._errors import (
    ERR_MSG_OVERFLOW,
    ERR_MSG_UNSUPPORTED_OPERAND,
    DurationOverflowError,
    InvalidArgumentError,
)

if TYPE_CHECKING:
    from pyaeon.culture import Culture

Scalar = int | float | Decimal | Fraction

# from_components keyword -> size of one unit in Planck time
PLANCK_TIME_PER_COMPONENT: dict[str, int] = {
    "aeons": PLANCK_TIME_PER_AEON,
    "years": PLANCK_TIME_PER_YEAR,
    "days": NANOSECONDS_PER_DAY * PLANCK_TIME_PER_NANOSECOND,
    "hours": NANOSECONDS_PER_HOUR * PLANCK_TIME_PER_NANOSECOND,
    "minutes": NANOSECONDS_PER_MINUTE * PLANCK_TIME_PER_NANOSECOND,
    "seconds": NANOSECONDS_PER_SECOND * PLANCK_TIME_PER_NANOSECOND,
    "milliseconds": NANOSECONDS_PER_MILLISECOND * PLANCK_TIME_PER_NANOSECOND,
    "microseconds": NANOSECONDS_PER_MICROSECOND * PLANCK_TIME_PER_NANOSECOND,
    "nanoseconds": PLANCK_TIME_PER_NANOSECOND,
    "picoseconds": YOCTOSECONDS_PER_PICOSECOND * PLANCK_TIME_PER_YOCTOSECOND,
    "femtoseconds": YOCTOSECONDS_PER_FEMTOSECOND * PLANCK_TIME_PER_YOCTOSECOND,
    "attoseconds": YOCTOSECONDS_PER_ATTOSECOND * PLANCK_TIME_PER_YOCTOSECOND,
    "zeptoseconds": YOCTOSECONDS_PER_ZEPTOSECOND * PLANCK_TIME_PER_YOCTOSECOND,
    "yoctoseconds": PLANCK_TIME_PER_YOCTOSECOND,
    "planck_time": 1,
}

_PLANCK_TIME_PER_MICROSECOND = PLANCK_TIME_PER_COMPONENT["microseconds"]

_SCALAR_TYPES = (int, float, Decimal, Fraction)


def _require_duration(value: object) -> Duration:
    if not isinstance(value, Duration):
        raise InvalidArgumentError(
            ERR_MSG_UNSUPPORTED_OPERAND,
            f"expected a Duration, got {type(value).__name__}",
        )
    return value


@dataclass(frozen=True, slots=True)
class Duration:
    """A signed span of time, possibly perpetual (infinite).

    The magnitude is held as a radix chain::

        aeons | years < 10**9 | total_nanoseconds < one year
              | total_yoctoseconds < 10**15 | planck_time < 1.854861e19

    Constructing a Duration directly is the trusted path: the fields are
    taken as given. ``from_components`` accepts arbitrary, possibly
    fractional, unit amounts and normalizes them.
    """

    is_negative: bool = False
    is_perpetual: bool = False
    planck_time: int = 0
    total_yoctoseconds: int = 0
    total_nanoseconds: int = 0
    years: int = 0
    aeons: int = 0

    ZERO: ClassVar[Duration]
    POSITIVE_INFINITY: ClassVar[Duration]
    NEGATIVE_INFINITY: ClassVar[Duration]
    ONE_AEON: ClassVar[Duration]
    ONE_YEAR: ClassVar[Duration]
    ONE_DAY: ClassVar[Duration]
    ONE_HOUR: ClassVar[Duration]
    ONE_MINUTE: ClassVar[Duration]
    ONE_SECOND: ClassVar[Duration]
    ONE_MILLISECOND: ClassVar[Duration]
    ONE_MICROSECOND: ClassVar[Duration]
    ONE_NANOSECOND: ClassVar[Duration]
    ONE_PICOSECOND: ClassVar[Duration]
    ONE_FEMTOSECOND: ClassVar[Duration]
    ONE_ATTOSECOND: ClassVar[Duration]
    ONE_ZEPTOSECOND: ClassVar[Duration]
    ONE_YOCTOSECOND: ClassVar[Duration]
    ONE_PLANCK_TIME: ClassVar[Duration]

    def __post_init__(self) -> None:
        if self.aeons is None:
            object.__setattr__(self, "aeons", 0)
        if self.planck_time is None:
            object.__setattr__(self, "planck_time", 0)
        if self.is_perpetual:
            for name in (
                "planck_time",
                "total_yoctoseconds",
                "total_nanoseconds",
                "years",
                "aeons",
            ):
                object.__setattr__(self, name, 0)
        elif self.is_negative and not any(self.magnitude_fields()):
            # There is no negative zero.
            object.__setattr__(self, "is_negative", False)

    # --- Construction ---

    @classmethod
    def from_canonical_fields(
        cls,
        *,
        is_negative: bool = False,
        is_perpetual: bool = False,
        planck_time: int | None = None,
        total_yoctoseconds: int = 0,
        total_nanoseconds: int = 0,
        years: int = 0,
        aeons: int | None = None,
    ) -> Duration:
        """Build a duration from already-normalized fields (no validation)."""
        return cls(
            is_negative,
            is_perpetual,
            planck_time,
            total_yoctoseconds,
            total_nanoseconds,
            years,
            aeons,
        )

    @classmethod
    def from_components(
        cls,
        *,
        is_negative: bool = False,
        aeons: Scalar = 0,
        years: Scalar = 0,
        days: Scalar = 0,
        hours: Scalar = 0,
        minutes: Scalar = 0,
        seconds: Scalar = 0,
        milliseconds: Scalar = 0,
        microseconds: Scalar = 0,
        nanoseconds: Scalar = 0,
        picoseconds: Scalar = 0,
        femtoseconds: Scalar = 0,
        attoseconds: Scalar = 0,
        zeptoseconds: Scalar = 0,
        yoctoseconds: Scalar = 0,
        planck_time: Scalar = 0,
    ) -> Duration:
        """Build a normalized duration from arbitrary unit amounts.

        Components may be negative, fractional or out of range: the exact
        signed sum is computed in Planck time, then split back into the
        radix chain. A negative sum flips ``is_negative``. Digits below one
        Planck time are truncated toward zero. Any infinite component makes
        the result perpetual.

        Raises:
            InvalidArgumentError: If a component is NaN.
            DurationOverflowError: If the aeon field would exceed MAX_AEON_DIGITS.
        """
        components = {
            "aeons": aeons,
            "years": years,
            "days": days,
            "hours": hours,
            "minutes": minutes,
            "seconds": seconds,
            "milliseconds": milliseconds,
            "microseconds": microseconds,
            "nanoseconds": nanoseconds,
            "picoseconds": picoseconds,
            "femtoseconds": femtoseconds,
            "attoseconds": attoseconds,
            "zeptoseconds": zeptoseconds,
            "yoctoseconds": yoctoseconds,
            "planck_time": planck_time,
        }
        total = Fraction(0)
        for name, value in components.items():
            if isinstance(value, int) and value == 0:
                continue
            amount = _scaling.exact_scalar(value)
            if isinstance(amount, float):
                negative = is_negative != (amount < 0)
                return cls.NEGATIVE_INFINITY if negative else cls.POSITIVE_INFINITY
            total += amount * PLANCK_TIME_PER_COMPONENT[name]
        return cls._from_planck_time(total, is_negative)

    @classmethod
    def _from_planck_time(cls, total: Fraction | int, is_negative: bool) -> Duration:
        if total < 0:
            total = -total
            is_negative = not is_negative
        aeons, years, nanoseconds, yoctoseconds, planck_time = _arithmetic.decompose(
            math.floor(total)
        )
        return cls(
            is_negative,
            False,
            planck_time,
            yoctoseconds,
            nanoseconds,
            years,
            aeons,
        )

    @classmethod
    def from_aeons(cls, value: Scalar) -> Duration:
        return cls.from_components(aeons=value)

    @classmethod
    def from_years(cls, value: Scalar) -> Duration:
        return cls.from_components(years=value)

    @classmethod
    def from_days(cls, value: Scalar) -> Duration:
        return cls.from_components(days=value)

    @classmethod
    def from_hours(cls, value: Scalar) -> Duration:
        return cls.from_components(hours=value)

    @classmethod
    def from_minutes(cls, value: Scalar) -> Duration:
        return cls.from_components(minutes=value)

    @classmethod
    def from_seconds(cls, value: Scalar) -> Duration:
        return cls.from_components(seconds=value)

    @classmethod
    def from_milliseconds(cls, value: Scalar) -> Duration:
        return cls.from_components(milliseconds=value)

    @classmethod
    def from_microseconds(cls, value: Scalar) -> Duration:
        return cls.from_components(microseconds=value)

    @classmethod
    def from_nanoseconds(cls, value: Scalar) -> Duration:
        return cls.from_components(nanoseconds=value)

    @classmethod
    def from_picoseconds(cls, value: Scalar) -> Duration:
        return cls.from_components(picoseconds=value)

    @classmethod
    def from_femtoseconds(cls, value: Scalar) -> Duration:
        return cls.from_components(femtoseconds=value)

    @classmethod
    def from_attoseconds(cls, value: Scalar) -> Duration:
        return cls.from_components(attoseconds=value)

    @classmethod
    def from_zeptoseconds(cls, value: Scalar) -> Duration:
        return cls.from_components(zeptoseconds=value)

    @classmethod
    def from_yoctoseconds(cls, value: Scalar) -> Duration:
        return cls.from_components(yoctoseconds=value)

    @classmethod
    def from_planck_time(cls, value: Scalar) -> Duration:
        return cls.from_components(planck_time=value)

    @classmethod
    def from_timedelta(cls, value: timedelta) -> Duration:
        return cls.from_components(
            days=value.days,
            seconds=value.seconds,
            microseconds=value.microseconds,
        )

    # --- Field access ---

    def canonical_fields(self) -> dict[str, Any]:
        """Return the canonical fields; zero aeons and Planck time map to None."""
        return {
            "is_negative": self.is_negative,
            "is_perpetual": self.is_perpetual,
            "planck_time": self.planck_time or None,
            "total_yoctoseconds": self.total_yoctoseconds,
            "total_nanoseconds": self.total_nanoseconds,
            "years": self.years,
            "aeons": self.aeons or None,
        }

    def magnitude_fields(self) -> tuple[int, int, int, int, int]:
        """Magnitude fields, most significant first."""
        return (
            self.aeons,
            self.years,
            self.total_nanoseconds,
            self.total_yoctoseconds,
            self.planck_time,
        )

    def planck_time_magnitude(self) -> int:
        """Exact unsigned magnitude in Planck time (0 when perpetual)."""
        total = self.aeons * YEARS_PER_AEON + self.years
        total = total * NANOSECONDS_PER_YEAR + self.total_nanoseconds
        total = total * YOCTOSECONDS_PER_NANOSECOND + self.total_yoctoseconds
        return total * PLANCK_TIME_PER_YOCTOSECOND + self.planck_time

    @property
    def is_zero(self) -> bool:
        return not self.is_perpetual and not any(self.magnitude_fields())

    @property
    def is_positive_infinity(self) -> bool:
        return self.is_perpetual and not self.is_negative

    @property
    def is_negative_infinity(self) -> bool:
        return self.is_perpetual and self.is_negative

    @property
    def sign(self) -> int:
        if self.is_negative:
            return -1
        return 0 if self.is_zero else 1

    @property
    def total_years(self) -> int:
        return self.aeons * YEARS_PER_AEON + self.years

    @property
    def days(self) -> int:
        return self.total_nanoseconds // NANOSECONDS_PER_DAY

    @property
    def hours(self) -> int:
        return self.total_nanoseconds // NANOSECONDS_PER_HOUR % 24

    @property
    def minutes(self) -> int:
        return self.total_nanoseconds // NANOSECONDS_PER_MINUTE % 60

    @property
    def seconds(self) -> int:
        return self.total_nanoseconds // NANOSECONDS_PER_SECOND % 60

    @property
    def milliseconds(self) -> int:
        return self.total_nanoseconds // NANOSECONDS_PER_MILLISECOND % 1000

    @property
    def microseconds(self) -> int:
        return self.total_nanoseconds // NANOSECONDS_PER_MICROSECOND % 1000

    @property
    def nanoseconds(self) -> int:
        return self.total_nanoseconds % 1000

    @property
    def picoseconds(self) -> int:
        return self.total_yoctoseconds // YOCTOSECONDS_PER_PICOSECOND

    @property
    def femtoseconds(self) -> int:
        return self.total_yoctoseconds // YOCTOSECONDS_PER_FEMTOSECOND % 1000

    @property
    def attoseconds(self) -> int:
        return self.total_yoctoseconds // YOCTOSECONDS_PER_ATTOSECOND % 1000

    @property
    def zeptoseconds(self) -> int:
        return self.total_yoctoseconds // YOCTOSECONDS_PER_ZEPTOSECOND % 1000

    @property
    def yoctoseconds(self) -> int:
        return self.total_yoctoseconds % 1000

    # --- Conversion to floating-point totals ---

    def to_unit(self, planck_time_per_unit: int) -> float:
        """Signed total in a unit of the given size, as a float.

        Totals beyond float range, and perpetual durations, give an infinity.
        """
        if self.is_perpetual:
            return -math.inf if self.is_negative else math.inf
        try:
            result = float(Fraction(self.planck_time_magnitude(), planck_time_per_unit))
        except OverflowError:
            result = math.inf
        return -result if self.is_negative else result

    def to_aeons(self) -> float:
        return self.to_unit(PLANCK_TIME_PER_COMPONENT["aeons"])

    def to_years(self) -> float:
        return self.to_unit(PLANCK_TIME_PER_COMPONENT["years"])

    def to_days(self) -> float:
        return self.to_unit(PLANCK_TIME_PER_COMPONENT["days"])

    def to_hours(self) -> float:
        return self.to_unit(PLANCK_TIME_PER_COMPONENT["hours"])

    def to_minutes(self) -> float:
        return self.to_unit(PLANCK_TIME_PER_COMPONENT["minutes"])

    def to_seconds(self) -> float:
        return self.to_unit(PLANCK_TIME_PER_COMPONENT["seconds"])

    def to_milliseconds(self) -> float:
        return self.to_unit(PLANCK_TIME_PER_COMPONENT["milliseconds"])

    def to_microseconds(self) -> float:
        return self.to_unit(PLANCK_TIME_PER_COMPONENT["microseconds"])

    def to_nanoseconds(self) -> float:
        return self.to_unit(PLANCK_TIME_PER_COMPONENT["nanoseconds"])

    def to_picoseconds(self) -> float:
        return self.to_unit(PLANCK_TIME_PER_COMPONENT["picoseconds"])

    def to_femtoseconds(self) -> float:
        return self.to_unit(PLANCK_TIME_PER_COMPONENT["femtoseconds"])

    def to_attoseconds(self) -> float:
        return self.to_unit(PLANCK_TIME_PER_COMPONENT["attoseconds"])

    def to_zeptoseconds(self) -> float:
        return self.to_unit(PLANCK_TIME_PER_COMPONENT["zeptoseconds"])

    def to_yoctoseconds(self) -> float:
        return self.to_unit(PLANCK_TIME_PER_COMPONENT["yoctoseconds"])

    def to_planck_time(self) -> float:
        return self.to_unit(1)

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta, truncating below one microsecond.

        Raises:
            DurationOverflowError: If the duration is perpetual or out of timedelta range.
        """
        if self.is_perpetual:
            raise DurationOverflowError(
                ERR_MSG_OVERFLOW, "perpetual duration has no timedelta equivalent"
            )
        microseconds = self.planck_time_magnitude() // _PLANCK_TIME_PER_MICROSECOND
        if self.is_negative:
            microseconds = -microseconds
        try:
            return timedelta(microseconds=microseconds)
        except OverflowError as e:
            raise DurationOverflowError(
                ERR_MSG_OVERFLOW,
                f"{microseconds} microseconds out of timedelta range",
                wrapped=e,
            ) from e

    # --- Arithmetic ---

    def add(self, other: Duration) -> Duration:
        return _arithmetic.add(self, _require_duration(other))

    def subtract(self, other: Duration) -> Duration:
        return _arithmetic.subtract(self, _require_duration(other))

    def negate(self) -> Duration:
        return _arithmetic.negate(self)

    def abs(self) -> Duration:
        return _arithmetic.absolute(self)

    def compare(self, other: Duration) -> int:
        return _arithmetic.compare(self, _require_duration(other))

    def multiply(self, factor: Scalar) -> Duration:
        return _scaling.multiply(self, factor)

    def divide(self, divisor: Scalar) -> Duration:
        return _scaling.divide(self, divisor)

    def ratio(self, other: Duration) -> float:
        return _scaling.ratio(self, _require_duration(other))

    def modulus(self, other: Duration) -> Duration:
        return _scaling.modulus(self, _require_duration(other))

    @staticmethod
    def max(first: Duration, second: Duration) -> Duration:
        return first if _arithmetic.compare(first, second) >= 0 else second

    @staticmethod
    def min(first: Duration, second: Duration) -> Duration:
        return first if _arithmetic.compare(first, second) <= 0 else second

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return _arithmetic.add(self, other)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return _arithmetic.subtract(self, other)

    def __neg__(self) -> Duration:
        return _arithmetic.negate(self)

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        return _arithmetic.absolute(self)

    def __mul__(self, other: object) -> Duration:
        if isinstance(other, bool) or not isinstance(other, _SCALAR_TYPES):
            return NotImplemented
        return _scaling.multiply(self, other)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> Duration | float:
        if isinstance(other, Duration):
            return _scaling.ratio(self, other)
        if isinstance(other, bool) or not isinstance(other, _SCALAR_TYPES):
            return NotImplemented
        return _scaling.divide(self, other)

    def __mod__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return _scaling.modulus(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return _arithmetic.compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return _arithmetic.compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return _arithmetic.compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return _arithmetic.compare(self, other) >= 0

    def __bool__(self) -> bool:
        return not self.is_zero

    # --- Text ---

    def format(
        self,
        pattern: str | None = None,
        *,
        culture: Culture | str | None = None,
    ) -> str:
        """Render the duration under a standard or custom pattern.

        Args:
            pattern: One of the single-letter standard patterns or a custom
                pattern. Defaults to ``G``.
            culture: Culture object or registered culture name. Defaults to
                the invariant culture.
        """
        from pyaeon._formatter import write_duration

        return write_duration(self, pattern, culture=culture)

    def __str__(self) -> str:
        return self.format()

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec or None)

    @classmethod
    def parse(cls, text: str, *, culture: Culture | str | None = None) -> Duration:
        """Parse text trying every standard pattern in turn.

        Raises:
            DurationFormatError: If no standard pattern matches.
        """
        from pyaeon._parser import read_any

        return read_any(text, culture=culture)

    @classmethod
    def parse_exact(
        cls,
        text: str,
        pattern: str | None,
        *,
        culture: Culture | str | None = None,
    ) -> Duration:
        from pyaeon._parser import read_exact

        return read_exact(text, pattern, culture=culture)

    @classmethod
    def try_parse(
        cls, text: str | None, *, culture: Culture | str | None = None
    ) -> Duration | None:
        from pyaeon._parser import try_read_any

        return try_read_any(text, culture=culture)

    @classmethod
    def try_parse_exact(
        cls,
        text: str | None,
        pattern: str | None,
        *,
        culture: Culture | str | None = None,
    ) -> Duration | None:
        from pyaeon._parser import try_read_exact

        return try_read_exact(text, pattern, culture=culture)


Duration.ZERO = Duration()
Duration.POSITIVE_INFINITY = Duration(is_perpetual=True)
Duration.NEGATIVE_INFINITY = Duration(is_negative=True, is_perpetual=True)
Duration.ONE_AEON = Duration(aeons=1)
Duration.ONE_YEAR = Duration(years=1)
Duration.ONE_DAY = Duration.from_days(1)
Duration.ONE_HOUR = Duration.from_hours(1)
Duration.ONE_MINUTE = Duration.from_minutes(1)
Duration.ONE_SECOND = Duration.from_seconds(1)
Duration.ONE_MILLISECOND = Duration.from_milliseconds(1)
Duration.ONE_MICROSECOND = Duration.from_microseconds(1)
Duration.ONE_NANOSECOND = Duration(total_nanoseconds=1)
Duration.ONE_PICOSECOND = Duration.from_picoseconds(1)
Duration.ONE_FEMTOSECOND = Duration.from_femtoseconds(1)
Duration.ONE_ATTOSECOND = Duration.from_attoseconds(1)
Duration.ONE_ZEPTOSECOND = Duration.from_zeptoseconds(1)
Duration.ONE_YOCTOSECOND = Duration(total_yoctoseconds=1)
Duration.ONE_PLANCK_TIME = Duration(planck_time=1)
