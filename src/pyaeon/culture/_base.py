"""Base class for cultures: the symbols used to write and read durations."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class CultureName(enum.StrEnum):
    INVARIANT = "invariant"
    EN_US = "en-US"
    DE_DE = "de-DE"
    FR_FR = "fr-FR"


@dataclass(frozen=True)
class Culture:
    """Number and separator symbols for one culture.

    Subclasses override the defaults; instances are immutable and hashable
    so compiled readers can be cached per culture.
    """

    name: str = CultureName.INVARIANT
    positive_infinity_symbol: str = "Infinity"
    negative_infinity_symbol: str = "-Infinity"
    negative_sign: str = "-"
    number_group_separator: str = ","
    number_decimal_separator: str = "."
    time_separator: str = ":"
    date_separator: str = "/"
