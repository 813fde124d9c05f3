"""Pattern tokenizer shared by the writer and the reader.

A custom pattern is a sequence of unit runs (``HH``, ``eee``), literal
text (quoted, ``\\``-escaped, or any other character), culture separators
(``:`` and ``/``) and ``%``-forced single units. The lexical rules live in
a small lark grammar; a Transformer turns the parse tree into tokens.
"""

from __future__ import annotations

import enum
import functools
from dataclasses import dataclass

from lark import Lark, Transformer
from lark.exceptions import LarkError

from pyaeon._constants import MAX_PATTERN_LENGTH
from pyaeon._errors import (
    ERR_MSG_INVALID_PATTERN,
    ERR_MSG_PATTERN_TOO_LONG,
    InvalidPatternError,
)
from pyaeon._units import (
    FORMAT_LETTERS,
    GENERAL_LONG_TIME_PATTERN,
    STANDARD_PATTERNS,
    FormatUnit,
)
from pyaeon.culture import Culture

_GRAMMAR = r"""
    start: (unit_run | forced | quoted | escaped | separator | literal)*

    unit_run: UNIT_RUN
    forced: FORCED
    quoted: QUOTED
    escaped: ESCAPED
    separator: TIME_SEPARATOR | DATE_SEPARATOR
    literal: LITERAL

    UNIT_RUN.2: /a+|d+|e+|f+|F+|[hH]+|m+|M+|n+|p+|P+|s+|u+|y+|Y+|z+/
    QUOTED.3: /'(?:[^'\\]|\\[\s\S])*'?|"(?:[^"\\]|\\[\s\S])*"?/
    ESCAPED.3: /\\[\s\S]?/
    FORCED.3: /%[\s\S]?/
    TIME_SEPARATOR.2: ":"
    DATE_SEPARATOR.2: "/"
    LITERAL: /[\s\S]/
"""

_parser = Lark(_GRAMMAR, parser="lalr", lexer="basic")


class SeparatorKind(enum.Enum):
    TIME = "time"
    DATE = "date"


@dataclass(frozen=True)
class UnitRun:
    """A run of one unit letter; ``count`` is the run length."""

    unit: FormatUnit
    count: int


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Separator:
    """Placeholder for the culture's time (``:``) or date (``/``) separator."""

    kind: SeparatorKind

    def text(self, culture: Culture) -> str:
        if self.kind is SeparatorKind.TIME:
            return culture.time_separator
        return culture.date_separator


PatternToken = UnitRun | Literal | Separator


class _PatternTransformer(Transformer):
    """Turns the pattern parse tree into a flat tuple of tokens."""

    def start(self, children: list[PatternToken | None]) -> tuple[PatternToken, ...]:
        tokens: list[PatternToken] = []
        for child in children:
            if child is None:
                continue
            if isinstance(child, Literal):
                if not child.text:
                    continue
                if tokens and isinstance(tokens[-1], Literal):
                    tokens[-1] = Literal(tokens[-1].text + child.text)
                    continue
            tokens.append(child)
        return tuple(tokens)

    def unit_run(self, children):
        run = str(children[0])
        return UnitRun(FORMAT_LETTERS[run[0]], len(run))

    def forced(self, children):
        # A lone trailing '%' contributes nothing.
        text = str(children[0])[1:]
        if not text:
            return None
        unit = FORMAT_LETTERS.get(text)
        if unit is None:
            return Literal(text)
        return UnitRun(unit, 1)

    def quoted(self, children):
        text = str(children[0])
        quote = text[0]
        chars: list[str] = []
        escaping = False
        for char in text[1:]:
            if escaping:
                chars.append(char)
                escaping = False
            elif char == "\\":
                escaping = True
            elif char == quote:
                break
            else:
                chars.append(char)
        return Literal("".join(chars))

    def escaped(self, children):
        return Literal(str(children[0])[1:])

    def separator(self, children):
        if children[0].type == "TIME_SEPARATOR":
            return Separator(SeparatorKind.TIME)
        return Separator(SeparatorKind.DATE)

    def literal(self, children):
        return Literal(str(children[0]))


@functools.lru_cache(maxsize=256)
def tokenize(pattern: str) -> tuple[PatternToken, ...]:
    """Split a custom pattern into tokens.

    Raises:
        InvalidPatternError: If the pattern is too long or cannot be tokenized.
    """
    if len(pattern) > MAX_PATTERN_LENGTH:
        raise InvalidPatternError(
            ERR_MSG_PATTERN_TOO_LONG,
            f"pattern length {len(pattern)} exceeds limit of {MAX_PATTERN_LENGTH}",
        )
    try:
        tree = _parser.parse(pattern)
    except LarkError as e:
        raise InvalidPatternError(
            ERR_MSG_INVALID_PATTERN, f"cannot tokenize pattern {pattern!r}: {e}", wrapped=e
        ) from e
    return _PatternTransformer().transform(tree)


def resolve(
    tokens: tuple[PatternToken, ...], culture: Culture
) -> tuple[UnitRun | str, ...]:
    """Replace separators with the culture's text and merge adjacent literals."""
    resolved: list[UnitRun | str] = []
    for token in tokens:
        if isinstance(token, UnitRun):
            resolved.append(token)
            continue
        text = token.text(culture) if isinstance(token, Separator) else token.text
        if not text:
            continue
        if resolved and isinstance(resolved[-1], str):
            resolved[-1] += text
        else:
            resolved.append(text)
    return tuple(resolved)


def expand(pattern: str | None) -> str:
    """Map a standard single-letter pattern to its custom form.

    Empty and unrecognized single-letter patterns fall back to ``G``.
    """
    if not pattern or not pattern.strip():
        return GENERAL_LONG_TIME_PATTERN
    if len(pattern) == 1:
        return STANDARD_PATTERNS.get(pattern, GENERAL_LONG_TIME_PATTERN)
    return pattern
