"""German (Germany) culture: comma decimals and dotted dates."""

from __future__ import annotations

from dataclasses import dataclass

from pyaeon.culture._base import Culture, CultureName


@dataclass(frozen=True)
class GermanCulture(Culture):
    name: str = CultureName.DE_DE
    positive_infinity_symbol: str = "∞"
    negative_infinity_symbol: str = "-∞"
    number_group_separator: str = "."
    number_decimal_separator: str = ","
    date_separator: str = "."
