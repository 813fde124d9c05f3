"""French (France) culture."""

from __future__ import annotations

from dataclasses import dataclass

from pyaeon.culture._base import Culture, CultureName


@dataclass(frozen=True)
class FrenchCulture(Culture):
    name: str = CultureName.FR_FR
    positive_infinity_symbol: str = "∞"
    negative_infinity_symbol: str = "-∞"
    number_group_separator: str = "\u202f"  # narrow no-break space
    number_decimal_separator: str = ","
