"""Relative durations: an absolute duration or a proportion of a local day or year."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import ClassVar

from pyaeon._errors import ERR_MSG_INVALID_FORMAT, DurationFormatError
from pyaeon._formatter import write_duration
from pyaeon._parser import _check_input, read_any, read_exact
from pyaeon._scaling import Scalar, exact_scalar
from pyaeon.culture import Culture, resolve_culture
from pyaeon.duration import Duration

logger = logging.getLogger(__name__)


class RelativeDurationType(enum.Enum):
    ABSOLUTE = "absolute"
    PROPORTION_OF_DAY = "proportion_of_day"
    PROPORTION_OF_YEAR = "proportion_of_year"


_PREFIXES: dict[RelativeDurationType, str] = {
    RelativeDurationType.PROPORTION_OF_DAY: "Dx",
    RelativeDurationType.PROPORTION_OF_YEAR: "Yx",
}


def _to_decimal(value: Scalar) -> Decimal:
    scalar = exact_scalar(value)
    if isinstance(scalar, float):
        return Decimal(scalar)
    return Decimal(scalar.numerator) / Decimal(scalar.denominator)


@dataclass(frozen=True, eq=False)
class RelativeDuration:
    """A duration that may depend on the length of a local day or year.

    Absolute values wrap a Duration. Relative values carry a non-negative
    proportion, resolved against concrete day and year lengths by
    ``to_universal_duration``.
    """

    duration: Duration = Duration.ZERO
    proportion: Decimal = Decimal(0)
    relativity: RelativeDurationType = RelativeDurationType.ABSOLUTE

    ZERO: ClassVar[RelativeDuration]
    POSITIVE_INFINITY: ClassVar[RelativeDuration]
    NEGATIVE_INFINITY: ClassVar[RelativeDuration]

    def __post_init__(self) -> None:
        if self.relativity is RelativeDurationType.ABSOLUTE:
            object.__setattr__(self, "proportion", Decimal(0))
        else:
            object.__setattr__(self, "duration", Duration.ZERO)
            object.__setattr__(
                self, "proportion", max(Decimal(0), _to_decimal(self.proportion))
            )

    @classmethod
    def from_duration(cls, duration: Duration) -> RelativeDuration:
        return cls(duration=duration)

    @classmethod
    def from_proportion_of_day(cls, proportion: Scalar) -> RelativeDuration:
        return cls(
            proportion=proportion, relativity=RelativeDurationType.PROPORTION_OF_DAY
        )

    @classmethod
    def from_proportion_of_year(cls, proportion: Scalar) -> RelativeDuration:
        return cls(
            proportion=proportion, relativity=RelativeDurationType.PROPORTION_OF_YEAR
        )

    @property
    def is_absolute(self) -> bool:
        return self.relativity is RelativeDurationType.ABSOLUTE

    @property
    def is_perpetual(self) -> bool:
        return self.is_absolute and self.duration.is_perpetual

    @property
    def is_zero(self) -> bool:
        if self.is_absolute:
            return self.duration.is_zero
        return self.proportion == 0

    def to_universal_duration(
        self,
        local_year: Duration | None = None,
        local_day: Duration | None = None,
    ) -> Duration:
        """Resolve to an absolute duration.

        Args:
            local_year: Length of the local year. Defaults to one Julian year.
            local_day: Length of the local day. Defaults to 86 400 seconds.
        """
        if self.relativity is RelativeDurationType.PROPORTION_OF_DAY:
            day = Duration.ONE_DAY if local_day is None else local_day
            return day.multiply(self.proportion)
        if self.relativity is RelativeDurationType.PROPORTION_OF_YEAR:
            year = Duration.ONE_YEAR if local_year is None else local_year
            return year.multiply(self.proportion)
        return self.duration

    # --- Arithmetic ---

    def multiply(self, factor: Scalar) -> RelativeDuration:
        if self.is_absolute:
            return RelativeDuration(duration=self.duration.multiply(factor))
        scalar = exact_scalar(factor)
        if scalar == 0 or self.proportion == 0:
            return RelativeDuration(relativity=self.relativity)
        if isinstance(scalar, float):
            return RelativeDuration.POSITIVE_INFINITY if scalar > 0 else RelativeDuration.ZERO
        return RelativeDuration(
            proportion=self.proportion * _to_decimal(scalar),
            relativity=self.relativity,
        )

    def divide(self, divisor: Scalar) -> RelativeDuration:
        if self.is_absolute:
            return RelativeDuration(duration=self.duration.divide(divisor))
        scalar = exact_scalar(divisor)
        if self.proportion == 0 or isinstance(scalar, float):
            return RelativeDuration(relativity=self.relativity)
        if scalar == 0:
            return RelativeDuration.POSITIVE_INFINITY
        return RelativeDuration(
            proportion=self.proportion / _to_decimal(scalar),
            relativity=self.relativity,
        )

    def __mul__(self, other: object) -> RelativeDuration:
        if isinstance(other, bool) or not isinstance(
            other, (int, float, Decimal, Fraction)
        ):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> RelativeDuration:
        if isinstance(other, bool) or not isinstance(
            other, (int, float, Decimal, Fraction)
        ):
            return NotImplemented
        return self.divide(other)

    # --- Equality ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Duration):
            return self.is_absolute and self.duration == other
        if not isinstance(other, RelativeDuration):
            return NotImplemented
        return (
            self.relativity is other.relativity
            and self.duration == other.duration
            and self.proportion == other.proportion
        )

    def __hash__(self) -> int:
        if self.is_absolute:
            return hash(self.duration)
        return hash((self.relativity, self.proportion))

    # --- Text ---

    def format(
        self,
        pattern: str | None = None,
        *,
        culture: Culture | str | None = None,
    ) -> str:
        """Render as ``Dx<proportion>``, ``Yx<proportion>`` or as the wrapped duration."""
        culture = resolve_culture(culture)
        if self.is_absolute:
            return write_duration(self.duration, pattern, culture=culture)
        text = format(self.proportion.normalize(), "f")
        return _PREFIXES[self.relativity] + text.replace(
            ".", culture.number_decimal_separator
        )

    def __str__(self) -> str:
        return self.format()

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec or None)

    @classmethod
    def _read_proportion(cls, text: str, culture: Culture) -> RelativeDuration | None:
        for relativity, prefix in _PREFIXES.items():
            if not text.startswith(prefix):
                continue
            number = text[len(prefix) :].replace(culture.number_decimal_separator, ".")
            try:
                proportion = Decimal(number)
            except InvalidOperation as e:
                raise DurationFormatError(
                    ERR_MSG_INVALID_FORMAT, f"invalid proportion {number!r}", wrapped=e
                ) from e
            if not proportion.is_finite() or proportion < 0:
                raise DurationFormatError(
                    ERR_MSG_INVALID_FORMAT, f"proportion {number!r} out of range"
                )
            return cls(proportion=proportion, relativity=relativity)
        return None

    @classmethod
    def parse(
        cls, text: str, *, culture: Culture | str | None = None
    ) -> RelativeDuration:
        culture = resolve_culture(culture)
        _check_input(text)
        relative = cls._read_proportion(text, culture)
        if relative is not None:
            return relative
        return cls(duration=read_any(text, culture=culture))

    @classmethod
    def parse_exact(
        cls,
        text: str,
        pattern: str | None,
        *,
        culture: Culture | str | None = None,
    ) -> RelativeDuration:
        culture = resolve_culture(culture)
        _check_input(text)
        relative = cls._read_proportion(text, culture)
        if relative is not None:
            return relative
        return cls(duration=read_exact(text, pattern, culture=culture))

    @classmethod
    def try_parse(
        cls, text: str | None, *, culture: Culture | str | None = None
    ) -> RelativeDuration | None:
        try:
            return cls.parse(text, culture=culture)
        except DurationFormatError as e:
            logger.debug("relative duration text not recognised: %s", e.internal())
            return None

    @classmethod
    def try_parse_exact(
        cls,
        text: str | None,
        pattern: str | None,
        *,
        culture: Culture | str | None = None,
    ) -> RelativeDuration | None:
        try:
            return cls.parse_exact(text, pattern, culture=culture)
        except DurationFormatError as e:
            logger.debug(
                "relative duration does not match pattern %r: %s", pattern, e.internal()
            )
            return None


RelativeDuration.ZERO = RelativeDuration()
RelativeDuration.POSITIVE_INFINITY = RelativeDuration(duration=Duration.POSITIVE_INFINITY)
RelativeDuration.NEGATIVE_INFINITY = RelativeDuration(duration=Duration.NEGATIVE_INFINITY)
