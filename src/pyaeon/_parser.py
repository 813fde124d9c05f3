"""Duration reader: parses text under a standard or custom pattern."""

from __future__ import annotations

import functools
import logging
import re
from collections import defaultdict
from decimal import Decimal, InvalidOperation
from fractions import Fraction

from pyaeon._constants import (
    MAX_INPUT_LENGTH,
    NANOSECONDS_PER_SECOND,
    PLANCK_TIME_PER_YOCTOSECOND,
    YOCTOSECONDS_PER_NANOSECOND,
)
from pyaeon._errors import (
    ERR_MSG_EMPTY_INPUT,
    ERR_MSG_INPUT_TOO_LONG,
    ERR_MSG_INVALID_FORMAT,
    DurationFormatError,
    MaxInputLengthExceededError,
)
from pyaeon._pattern import UnitRun, expand, resolve, tokenize
from pyaeon._scaling import exact_scalar
from pyaeon._units import (
    COMPONENT_FOR_UNIT,
    EXTENSIBLE_UNITS,
    PARSE_ORDER,
    UNBOUNDED_UNITS,
    FormatUnit,
    StandardPattern,
)
from pyaeon.culture import Culture, resolve_culture
from pyaeon.duration import Duration

logger = logging.getLogger(__name__)

_DIGITS_RE = re.compile(r"[0-9]+")

_NANOSECOND_DIGITS = len(str(NANOSECONDS_PER_SECOND)) - 1
_YOCTOSECOND_DIGITS = len(str(YOCTOSECONDS_PER_NANOSECOND)) - 1


def _mismatch(detail: str) -> DurationFormatError:
    return DurationFormatError(ERR_MSG_INVALID_FORMAT, detail)


def _check_input(text: str | None) -> str:
    if not text or text.isspace():
        raise DurationFormatError(ERR_MSG_EMPTY_INPUT, "input is empty or whitespace")
    if len(text) > MAX_INPUT_LENGTH:
        raise MaxInputLengthExceededError(
            ERR_MSG_INPUT_TOO_LONG,
            f"input length {len(text)} exceeds limit of {MAX_INPUT_LENGTH}",
        )
    return text


def _infinity(text: str, culture: Culture) -> Duration | None:
    if text == culture.positive_infinity_symbol:
        return Duration.POSITIVE_INFINITY
    if text == culture.negative_infinity_symbol:
        return Duration.NEGATIVE_INFINITY
    return None


@functools.lru_cache(maxsize=32)
def _scientific_re(culture: Culture) -> re.Pattern[str]:
    decimal = re.escape(culture.number_decimal_separator)
    return re.compile(rf"[0-9]+(?:{decimal}[0-9]+)?[eE]\+?[0-9]+")


@functools.lru_cache(maxsize=32)
def _extensible_re(culture: Culture) -> re.Pattern[str]:
    group = re.escape(culture.number_group_separator)
    decimal = re.escape(culture.number_decimal_separator)
    number = rf"[0-9](?:[0-9]|{group}(?=[0-9]))*(?:{decimal}[0-9]+)?(?:[eE][+-]?[0-9]+)?"
    symbols = "|".join(
        re.escape(symbol) for symbol in sorted(EXTENSIBLE_UNITS, key=len, reverse=True)
    )
    return re.compile(
        rf"\s*(?P<number>{number})\s*(?P<symbol>{symbols})(?=\s|[0-9]|$)\s*"
    )


def _decimal(text: str, culture: Culture) -> Fraction:
    normalized = text.replace(culture.number_group_separator, "").replace(
        culture.number_decimal_separator, "."
    )
    try:
        value = Decimal(normalized)
    except InvalidOperation as e:
        raise DurationFormatError(
            ERR_MSG_INVALID_FORMAT, f"invalid number {text!r}", wrapped=e
        ) from e
    return exact_scalar(value)


class _Reader:
    """Reads one duration from text against resolved pattern tokens.

    Each unit run consumes either everything up to the next literal, the
    rest of the input (last run), or exactly one or two characters when
    another unit run follows directly.
    """

    def __init__(self, culture: Culture) -> None:
        self._culture = culture
        self._components: defaultdict[str, Fraction | int] = defaultdict(int)

    def read(self, text: str, tokens: tuple[UnitRun | str, ...]) -> Duration:
        is_negative = False
        pos = 0
        sign = self._culture.negative_sign
        leading_literal = tokens[0] if tokens and isinstance(tokens[0], str) else ""
        if text.startswith(sign) and not leading_literal.startswith(sign):
            is_negative = True
            pos = len(sign)

        last_run = max(
            (i for i, token in enumerate(tokens) if isinstance(token, UnitRun)),
            default=-1,
        )
        for index, token in enumerate(tokens):
            if isinstance(token, str):
                if not text.startswith(token, pos):
                    raise _mismatch(f"expected {token!r} at position {pos}")
                pos += len(token)
                continue
            end = self._slice_end(text, pos, tokens, index, last_run)
            self._fold(token, text[pos:end])
            pos = end

        if pos != len(text):
            raise _mismatch(f"unexpected trailing text at position {pos}")
        return Duration.from_components(is_negative=is_negative, **self._components)

    @staticmethod
    def _slice_end(
        text: str,
        pos: int,
        tokens: tuple[UnitRun | str, ...],
        index: int,
        last_run: int,
    ) -> int:
        if index == last_run:
            tail = "".join(tokens[index + 1 :])
            end = len(text) - len(tail)
            if end < pos or not text.endswith(tail):
                raise _mismatch(f"expected trailing {tail!r}")
            return end

        following = tokens[index + 1]
        if isinstance(following, str):
            end = text.find(following, pos)
            if end < 0:
                raise _mismatch(f"separator {following!r} not found after position {pos}")
            return end

        count = tokens[index].count
        if count not in (1, 2):
            raise _mismatch("adjacent unit runs need a fixed width of 1 or 2")
        if pos + count > len(text):
            raise _mismatch(f"input ends before position {pos + count}")
        return pos + count

    def _fold(self, run: UnitRun, digits: str) -> None:
        if run.unit is FormatUnit.SECOND_FRACTION:
            self._fold_second_fraction(digits)
            return
        self._components[COMPONENT_FOR_UNIT[run.unit]] += self._integer(
            digits, scientific=run.unit in UNBOUNDED_UNITS
        )

    def _integer(self, digits: str, *, scientific: bool) -> int | Fraction:
        if _DIGITS_RE.fullmatch(digits):
            try:
                return int(digits)
            except ValueError as e:
                raise DurationFormatError(
                    ERR_MSG_INVALID_FORMAT, f"{len(digits)}-digit number too long", wrapped=e
                ) from e
        if scientific and _scientific_re(self._culture).fullmatch(digits):
            return _decimal(digits, self._culture)
        raise _mismatch(f"{digits!r} is not a number")

    def _fold_second_fraction(self, digits: str) -> None:
        if not _DIGITS_RE.fullmatch(digits):
            raise _mismatch(f"{digits!r} is not a fraction of a second")
        nanoseconds = digits[:_NANOSECOND_DIGITS]
        yoctoseconds = digits[_NANOSECOND_DIGITS : _NANOSECOND_DIGITS + _YOCTOSECOND_DIGITS]
        rest = digits[_NANOSECOND_DIGITS + _YOCTOSECOND_DIGITS :]
        self._components["nanoseconds"] += int(nanoseconds.ljust(_NANOSECOND_DIGITS, "0"))
        if yoctoseconds:
            self._components["yoctoseconds"] += int(
                yoctoseconds.ljust(_YOCTOSECOND_DIGITS, "0")
            )
        if rest:
            self._components["planck_time"] += (
                Fraction(int(rest), 10 ** len(rest)) * PLANCK_TIME_PER_YOCTOSECOND
            )


def _read_extensible(text: str, culture: Culture) -> Duration:
    body = text.strip()
    if body == "0":
        return Duration.ZERO
    is_negative = body.startswith(culture.negative_sign)
    if is_negative:
        body = body[len(culture.negative_sign) :]

    components: defaultdict[str, Fraction] = defaultdict(Fraction)
    pos = 0
    for match in _extensible_re(culture).finditer(body):
        if match.start() != pos:
            break
        unit = EXTENSIBLE_UNITS[match.group("symbol")]
        components[COMPONENT_FOR_UNIT[unit]] += _decimal(match.group("number"), culture)
        pos = match.end()
    if not components or pos != len(body):
        raise _mismatch(f"unreadable unit list at position {pos}")
    return Duration.from_components(is_negative=is_negative, **components)


def read_exact(
    text: str,
    pattern: str | None,
    *,
    culture: Culture | str | None = None,
) -> Duration:
    """Parse text under exactly one pattern.

    Raises:
        DurationFormatError: If the text does not match the pattern.
    """
    culture = resolve_culture(culture)
    _check_input(text)
    perpetual = _infinity(text, culture)
    if perpetual is not None:
        return perpetual
    if pattern == StandardPattern.EXTENSIBLE:
        return _read_extensible(text, culture)
    tokens = resolve(tokenize(expand(pattern)), culture)
    return _Reader(culture).read(text, tokens)


def try_read_exact(
    text: str | None,
    pattern: str | None,
    *,
    culture: Culture | str | None = None,
) -> Duration | None:
    """Like read_exact, but return None instead of raising on a format mismatch."""
    try:
        return read_exact(text, pattern, culture=culture)
    except DurationFormatError as e:
        logger.debug("duration does not match pattern %r: %s", pattern, e.internal())
        return None


def read_any(text: str, *, culture: Culture | str | None = None) -> Duration:
    """Parse text trying each standard pattern in PARSE_ORDER."""
    culture = resolve_culture(culture)
    _check_input(text)
    for pattern in PARSE_ORDER:
        result = try_read_exact(text, pattern, culture=culture)
        if result is not None:
            return result
    raise _mismatch(f"no standard pattern matches {text[:64]!r}")


def try_read_any(
    text: str | None, *, culture: Culture | str | None = None
) -> Duration | None:
    try:
        return read_any(text, culture=culture)
    except DurationFormatError as e:
        logger.debug("duration text not recognised: %s", e.internal())
        return None
