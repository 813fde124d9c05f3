"""Invariant culture: the defaults, independent of any locale."""

from __future__ import annotations

from dataclasses import dataclass

from pyaeon.culture._base import Culture, CultureName


@dataclass(frozen=True)
class InvariantCulture(Culture):
    name: str = CultureName.INVARIANT
