"""Culture system: locale symbols for writing and reading durations."""

from __future__ import annotations

from pyaeon.culture._base import Culture, CultureName
from pyaeon.culture.de_de import GermanCulture
from pyaeon.culture.en_us import EnglishUSCulture
from pyaeon.culture.fr_fr import FrenchCulture
from pyaeon.culture.invariant import InvariantCulture

__all__ = [
    "Culture",
    "CultureName",
    "EnglishUSCulture",
    "FrenchCulture",
    "GermanCulture",
    "InvariantCulture",
    "INVARIANT",
    "get_culture",
    "resolve_culture",
]

_REGISTRY: dict[str, type[Culture]] = {
    CultureName.INVARIANT: InvariantCulture,
    CultureName.EN_US: EnglishUSCulture,
    CultureName.DE_DE: GermanCulture,
    CultureName.FR_FR: FrenchCulture,
}

INVARIANT = InvariantCulture()


def get_culture(name: str) -> Culture:
    """Get a culture instance by name.

    Args:
        name: Culture name (e.g., "invariant", "en-US", "de-DE", "fr-FR").

    Returns:
        A Culture instance.

    Raises:
        ValueError: If the culture name is unknown.
    """
    cls = _REGISTRY.get(name)
    if cls is None:
        raise ValueError(
            f"unknown culture: {name!r}. "
            f"Available: {', '.join(sorted(_REGISTRY))}"
        )
    return cls()


def resolve_culture(culture: Culture | str | None) -> Culture:
    """Accept a Culture, a registered name, or None (the invariant culture)."""
    if culture is None:
        return INVARIANT
    if isinstance(culture, Culture):
        return culture
    return get_culture(culture)
