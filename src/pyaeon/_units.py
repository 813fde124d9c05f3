"""Format-unit definitions and the lookup tables shared by writer and reader."""

from __future__ import annotations

import enum


class FormatUnit(enum.Enum):
    """Units addressable from a format pattern."""

    TOTAL_YEARS = "total_years"
    YEARS = "years"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    SECOND_FRACTION = "second_fraction"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"
    NANOSECONDS = "nanoseconds"
    PICOSECONDS = "picoseconds"
    FEMTOSECONDS = "femtoseconds"
    ATTOSECONDS = "attoseconds"
    ZEPTOSECONDS = "zeptoseconds"
    YOCTOSECONDS = "yoctoseconds"
    PLANCK_TIME = "planck_time"


# Pattern letter -> unit
FORMAT_LETTERS: dict[str, FormatUnit] = {
    "a": FormatUnit.ATTOSECONDS,
    "d": FormatUnit.DAYS,
    "e": FormatUnit.TOTAL_YEARS,
    "f": FormatUnit.FEMTOSECONDS,
    "F": FormatUnit.SECOND_FRACTION,
    "h": FormatUnit.HOURS,
    "H": FormatUnit.HOURS,
    "m": FormatUnit.MINUTES,
    "M": FormatUnit.MILLISECONDS,
    "n": FormatUnit.NANOSECONDS,
    "p": FormatUnit.PICOSECONDS,
    "P": FormatUnit.PLANCK_TIME,
    "s": FormatUnit.SECONDS,
    "u": FormatUnit.MICROSECONDS,
    "y": FormatUnit.YEARS,
    "Y": FormatUnit.YOCTOSECONDS,
    "z": FormatUnit.ZEPTOSECONDS,
}

# Units whose repeat count selects significant digits instead of padding
PRECISION_UNITS = frozenset({FormatUnit.TOTAL_YEARS, FormatUnit.PLANCK_TIME})

# Units read as arbitrary-precision integers (scientific notation allowed)
UNBOUNDED_UNITS = PRECISION_UNITS

# Presence of any of these in a pattern makes ``n`` render only the
# sub-microsecond remainder instead of the whole nanosecond field.
SUPER_NANOSECOND_UNITS = frozenset({
    FormatUnit.DAYS,
    FormatUnit.HOURS,
    FormatUnit.MINUTES,
    FormatUnit.SECONDS,
    FormatUnit.MILLISECONDS,
    FormatUnit.MICROSECONDS,
})

# Same for ``Y`` and the sub-nanosecond units.
SUPER_YOCTOSECOND_UNITS = frozenset({
    FormatUnit.PICOSECONDS,
    FormatUnit.FEMTOSECONDS,
    FormatUnit.ATTOSECONDS,
    FormatUnit.ZEPTOSECONDS,
})

# Unit -> Duration.from_components keyword receiving the parsed value
COMPONENT_FOR_UNIT: dict[FormatUnit, str] = {
    FormatUnit.TOTAL_YEARS: "years",
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
}

# Extensible (X) pattern: unit -> symbol written, in output order
EXTENSIBLE_SYMBOLS: dict[FormatUnit, str] = {
    FormatUnit.TOTAL_YEARS: "y",
    FormatUnit.DAYS: "d",
    FormatUnit.HOURS: "h",
    FormatUnit.MINUTES: "min",
    FormatUnit.SECONDS: "s",
    FormatUnit.MILLISECONDS: "ms",
    FormatUnit.MICROSECONDS: "μs",
    FormatUnit.NANOSECONDS: "ns",
    FormatUnit.PICOSECONDS: "ps",
    FormatUnit.FEMTOSECONDS: "fs",
    FormatUnit.ATTOSECONDS: "as",
    FormatUnit.ZEPTOSECONDS: "zs",
    FormatUnit.YOCTOSECONDS: "ys",
    FormatUnit.PLANCK_TIME: "tP",
}

# Extensible (X) pattern: symbol read -> unit
EXTENSIBLE_UNITS: dict[str, FormatUnit] = {
    symbol: unit for unit, symbol in EXTENSIBLE_SYMBOLS.items()
}
EXTENSIBLE_UNITS["a"] = FormatUnit.TOTAL_YEARS


class StandardPattern(enum.StrEnum):
    """Single-letter standard patterns."""

    SHORT_DATE = "d"
    LONG_DATE = "D"
    EXTENDED = "E"
    FULL_DATE_SHORT_TIME = "f"
    FULL_DATE_LONG_TIME = "F"
    GENERAL_SHORT_TIME = "g"
    GENERAL_LONG_TIME = "G"
    ROUND_TRIP = "o"
    ROUND_TRIP_UPPER = "O"
    SHORT_TIME = "t"
    LONG_TIME = "T"
    EXTENSIBLE = "X"


GENERAL_LONG_TIME_PATTERN = "y d HH:mm:ss"
ROUND_TRIP_PATTERN = "e'-'n':'Y':'P"

# Standard letter -> equivalent custom pattern (X has none: it is an algorithm)
STANDARD_PATTERNS: dict[str, str] = {
    StandardPattern.SHORT_DATE: "y d",
    StandardPattern.LONG_DATE: "e d",
    StandardPattern.EXTENDED: "y d HH:mm:ss:MMM:uuu:nnn:ppp:fff:aaa:zzz:YYY:PPP",
    StandardPattern.FULL_DATE_SHORT_TIME: "e d HH:mm",
    StandardPattern.FULL_DATE_LONG_TIME: "e d HH:mm:ss",
    StandardPattern.GENERAL_SHORT_TIME: "y d HH:mm",
    StandardPattern.GENERAL_LONG_TIME: GENERAL_LONG_TIME_PATTERN,
    StandardPattern.ROUND_TRIP: ROUND_TRIP_PATTERN,
    StandardPattern.ROUND_TRIP_UPPER: ROUND_TRIP_PATTERN,
    StandardPattern.SHORT_TIME: "HH:mm",
    StandardPattern.LONG_TIME: "HH:mm:ss",
}

# Order in which try_parse attempts the standard patterns
PARSE_ORDER: tuple[str, ...] = (
    StandardPattern.ROUND_TRIP,
    StandardPattern.EXTENDED,
    StandardPattern.FULL_DATE_LONG_TIME,
    StandardPattern.GENERAL_LONG_TIME,
    StandardPattern.FULL_DATE_SHORT_TIME,
    StandardPattern.GENERAL_SHORT_TIME,
    StandardPattern.LONG_DATE,
    StandardPattern.SHORT_DATE,
    StandardPattern.LONG_TIME,
    StandardPattern.SHORT_TIME,
    StandardPattern.EXTENSIBLE,
)
