"""Radix constants and resource limits for duration arithmetic and text handling."""

# --- Radix chain ---

YEARS_PER_AEON = 1_000_000_000
"""Radix of the ``years`` field (1 aeon = 10**9 years)."""

NANOSECONDS_PER_YEAR = 31_557_600_000_000_000
"""Radix of the ``total_nanoseconds`` field (Julian year of 365.25 SI days)."""

YOCTOSECONDS_PER_NANOSECOND = 1_000_000_000_000_000
"""Radix of the ``total_yoctoseconds`` field."""

PLANCK_TIME_PER_YOCTOSECOND = 18_548_610_000_000_000_000
"""Radix of the ``planck_time`` field, to 7 significant digits."""

# --- Calendar-free unit sizes ---

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
SECONDS_PER_DAY = 86_400
SECONDS_PER_YEAR = 31_557_600
MILLISECONDS_PER_SECOND = 1_000
MICROSECONDS_PER_MILLISECOND = 1_000
NANOSECONDS_PER_MICROSECOND = 1_000

NANOSECONDS_PER_MILLISECOND = 1_000_000
NANOSECONDS_PER_SECOND = 1_000_000_000
NANOSECONDS_PER_MINUTE = 60_000_000_000
NANOSECONDS_PER_HOUR = 3_600_000_000_000
NANOSECONDS_PER_DAY = 86_400_000_000_000

PICOSECONDS_PER_NANOSECOND = 1_000
FEMTOSECONDS_PER_PICOSECOND = 1_000
ATTOSECONDS_PER_FEMTOSECOND = 1_000
ZEPTOSECONDS_PER_ATTOSECOND = 1_000

YOCTOSECONDS_PER_ZEPTOSECOND = 1_000
YOCTOSECONDS_PER_ATTOSECOND = 1_000_000
YOCTOSECONDS_PER_FEMTOSECOND = 1_000_000_000
YOCTOSECONDS_PER_PICOSECOND = 1_000_000_000_000

# Whole chain expressed in the finest unit.
PLANCK_TIME_PER_NANOSECOND = YOCTOSECONDS_PER_NANOSECOND * PLANCK_TIME_PER_YOCTOSECOND
PLANCK_TIME_PER_YEAR = NANOSECONDS_PER_YEAR * PLANCK_TIME_PER_NANOSECOND
PLANCK_TIME_PER_AEON = YEARS_PER_AEON * PLANCK_TIME_PER_YEAR

# --- Resource limits ---

MAX_AEON_DIGITS = 4096
"""Maximum decimal digits of the ``aeons`` field before an overflow is reported.

Stays below the interpreter's default int/str conversion limit (4300 digits)
so that every representable value can also be rendered as text.
"""

MAX_SCALAR_EXPONENT = 2 * MAX_AEON_DIGITS
"""Largest decimal exponent (either sign) taken exactly from a Decimal scalar.

Beyond it the scalar is clamped to ``10 ** +-(MAX_SCALAR_EXPONENT + 1)``. Every
non-zero duration scaled by the upper bound overflows the aeon field, and every
representable duration scaled by the lower bound is below one Planck time.
"""

MAX_PATTERN_LENGTH = 256
"""Maximum length of a custom format pattern (CWE-400 prevention)."""

MAX_INPUT_LENGTH = 8192
"""Maximum length of text accepted by the readers (CWE-400 prevention)."""

DEFAULT_SIGNIFICANT_DIGITS = 29
"""Significant digits used for total years by the extensible (``X``) pattern."""
