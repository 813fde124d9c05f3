"""Duration writer: renders a duration under a standard or custom pattern."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from pyaeon._constants import (
    DEFAULT_SIGNIFICANT_DIGITS,
    NANOSECONDS_PER_SECOND,
    PLANCK_TIME_PER_NANOSECOND,
    PLANCK_TIME_PER_YOCTOSECOND,
    YOCTOSECONDS_PER_NANOSECOND,
)
from pyaeon._pattern import UnitRun, expand, resolve, tokenize
from pyaeon._units import (
    EXTENSIBLE_SYMBOLS,
    SUPER_NANOSECOND_UNITS,
    SUPER_YOCTOSECOND_UNITS,
    FormatUnit,
    StandardPattern,
)
from pyaeon.culture import Culture, resolve_culture

if TYPE_CHECKING:
    from pyaeon.duration import Duration

_PLANCK_TIME_PER_SECOND = NANOSECONDS_PER_SECOND * PLANCK_TIME_PER_NANOSECOND

# Unit -> Duration attribute holding its value for padded rendering
_VIEWS: dict[FormatUnit, str] = {
    FormatUnit.YEARS: "years",
    FormatUnit.DAYS: "days",
    FormatUnit.HOURS: "hours",
    FormatUnit.MINUTES: "minutes",
    FormatUnit.SECONDS: "seconds",
    FormatUnit.MILLISECONDS: "milliseconds",
    FormatUnit.MICROSECONDS: "microseconds",
    FormatUnit.NANOSECONDS: "nanoseconds",
    FormatUnit.PICOSECONDS: "picoseconds",
    FormatUnit.FEMTOSECONDS: "femtoseconds",
    FormatUnit.ATTOSECONDS: "attoseconds",
    FormatUnit.ZEPTOSECONDS: "zeptoseconds",
    FormatUnit.YOCTOSECONDS: "yoctoseconds",
    FormatUnit.PLANCK_TIME: "planck_time",
    FormatUnit.TOTAL_YEARS: "total_years",
}


def significant_digits(value: int, digits: int, culture: Culture) -> str:
    """Render a non-negative integer with at most ``digits`` significant digits.

    ``digits`` of 1 means all digits. Longer values switch to scientific
    notation (``1.23E+45``), truncating the excess digits.
    """
    text = str(value)
    if digits <= 1 or len(text) <= digits:
        return text
    mantissa = text[1:digits].rstrip("0")
    exponent = len(text) - 1
    if mantissa:
        return f"{text[0]}{culture.number_decimal_separator}{mantissa}E+{exponent:02d}"
    return f"{text[0]}E+{exponent:02d}"


def second_fraction(duration: Duration, digits: int) -> str:
    """Sub-second part of the duration truncated to ``digits`` decimal places."""
    planck_time = (
        (duration.total_nanoseconds % NANOSECONDS_PER_SECOND)
        * YOCTOSECONDS_PER_NANOSECOND
        + duration.total_yoctoseconds
    ) * PLANCK_TIME_PER_YOCTOSECOND + duration.planck_time
    scaled = planck_time * 10**digits // _PLANCK_TIME_PER_SECOND
    return str(scaled).zfill(digits)


class _Writer:
    """Writes one duration into a StringIO buffer."""

    def __init__(self, duration: Duration, culture: Culture) -> None:
        self._w = StringIO()
        self._duration = duration
        self._culture = culture

    @property
    def text(self) -> str:
        return self._w.getvalue()

    def write_sign(self) -> None:
        if self._duration.is_negative:
            self._w.write(self._culture.negative_sign)

    def write_pattern(self, tokens: tuple[UnitRun | str, ...]) -> None:
        units = {token.unit for token in tokens if isinstance(token, UnitRun)}
        # n and Y shrink to remainders when a coarser neighbour is also shown.
        nanosecond_remainder = not units.isdisjoint(SUPER_NANOSECOND_UNITS)
        yoctosecond_remainder = not units.isdisjoint(SUPER_YOCTOSECOND_UNITS)

        self.write_sign()
        for token in tokens:
            if isinstance(token, str):
                self._w.write(token)
            elif token.unit is FormatUnit.NANOSECONDS and not nanosecond_remainder:
                self._w.write(str(self._duration.total_nanoseconds).zfill(token.count))
            elif token.unit is FormatUnit.YOCTOSECONDS and not yoctosecond_remainder:
                self._w.write(str(self._duration.total_yoctoseconds).zfill(token.count))
            else:
                self._write_unit(token)

    def _write_unit(self, run: UnitRun) -> None:
        if run.unit is FormatUnit.SECOND_FRACTION:
            self._w.write(second_fraction(self._duration, run.count))
            return
        value = getattr(self._duration, _VIEWS[run.unit])
        if run.unit in (FormatUnit.TOTAL_YEARS, FormatUnit.PLANCK_TIME):
            self._w.write(significant_digits(value, run.count, self._culture))
        else:
            self._w.write(str(value).zfill(run.count))

    def write_extensible(self) -> None:
        parts = []
        for unit, symbol in EXTENSIBLE_SYMBOLS.items():
            value = getattr(self._duration, _VIEWS[unit])
            if not value:
                continue
            if unit is FormatUnit.TOTAL_YEARS:
                number = significant_digits(
                    value, DEFAULT_SIGNIFICANT_DIGITS, self._culture
                )
            else:
                number = str(value)
            parts.append(f"{number} {symbol}")
        if not parts:
            self._w.write("0")
            return
        self.write_sign()
        self._w.write(" ".join(parts))


def write_duration(
    duration: Duration,
    pattern: str | None = None,
    *,
    culture: Culture | str | None = None,
) -> str:
    """Render a duration as text.

    Perpetual durations render as the culture's infinity symbols whatever
    the pattern. ``X`` lists every non-zero unit with its symbol; other
    patterns are expanded to custom form and written token by token.
    """
    culture = resolve_culture(culture)
    if duration.is_perpetual:
        if duration.is_negative:
            return culture.negative_infinity_symbol
        return culture.positive_infinity_symbol

    writer = _Writer(duration, culture)
    if pattern == StandardPattern.EXTENSIBLE:
        writer.write_extensible()
    else:
        writer.write_pattern(resolve(tokenize(expand(pattern)), culture))
    return writer.text
