"""English (United States) culture."""

from __future__ import annotations

from dataclasses import dataclass

from pyaeon.culture._base import Culture, CultureName


@dataclass(frozen=True)
class EnglishUSCulture(Culture):
    name: str = CultureName.EN_US
    positive_infinity_symbol: str = "∞"
    negative_infinity_symbol: str = "-∞"
