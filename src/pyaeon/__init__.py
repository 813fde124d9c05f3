"""pyaeon - Exact durations from aeons down to Planck time."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyaeon")
except PackageNotFoundError:  # running from a source tree
    __version__ = "0.0.0.dev0"

from pyaeon._errors import (
    DurationError,
    DurationFormatError,
    DurationOverflowError,
    InvalidArgumentError,
    InvalidPatternError,
    MaxInputLengthExceededError,
)
from pyaeon._formatter import write_duration
from pyaeon._parser import read_any, read_exact, try_read_any, try_read_exact
from pyaeon._units import FormatUnit, StandardPattern
from pyaeon.culture import Culture, CultureName, get_culture
from pyaeon.duration import Duration
from pyaeon.relative import RelativeDuration, RelativeDurationType

__all__ = [
    "format_duration",
    "parse",
    "parse_exact",
    "try_parse",
    "try_parse_exact",
    "get_culture",
    "Culture",
    "CultureName",
    "Duration",
    "FormatUnit",
    "RelativeDuration",
    "RelativeDurationType",
    "StandardPattern",
    "DurationError",
    "DurationFormatError",
    "DurationOverflowError",
    "InvalidArgumentError",
    "InvalidPatternError",
    "MaxInputLengthExceededError",
]


def format_duration(
    value: Duration | RelativeDuration,
    pattern: str | None = None,
    *,
    culture: Culture | str | None = None,
) -> str:
    """Render a duration as text.

    Args:
        value: The Duration or RelativeDuration to render.
        pattern: Standard single-letter pattern or custom pattern. Defaults to ``G``.
        culture: Culture object or registered name. Defaults to the invariant culture.

    Returns:
        The rendered text. Perpetual values render as the culture's infinity symbols.

    Raises:
        InvalidPatternError: If a custom pattern is too long.
    """
    if isinstance(value, RelativeDuration):
        return value.format(pattern, culture=culture)
    return write_duration(value, pattern, culture=culture)


def parse(text: str, *, culture: Culture | str | None = None) -> Duration:
    """Parse text, trying every standard pattern in a fixed order.

    Raises:
        DurationFormatError: If no standard pattern matches.
        DurationOverflowError: If the value does not fit the aeon field.
    """
    return read_any(text, culture=culture)


def parse_exact(
    text: str,
    pattern: str | None,
    *,
    culture: Culture | str | None = None,
) -> Duration:
    """Parse text under one standard or custom pattern.

    Raises:
        DurationFormatError: If the text does not match the pattern.
        DurationOverflowError: If the value does not fit the aeon field.
    """
    return read_exact(text, pattern, culture=culture)


def try_parse(
    text: str | None, *, culture: Culture | str | None = None
) -> Duration | None:
    """Like parse, but return None when no pattern matches."""
    return try_read_any(text, culture=culture)


def try_parse_exact(
    text: str | None,
    pattern: str | None,
    *,
    culture: Culture | str | None = None,
) -> Duration | None:
    return try_read_exact(text, pattern, culture=culture)
