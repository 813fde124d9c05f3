"""JSON adapter: durations travel as round-trip (``o``) pattern strings.

Perpetual values are written as the invariant culture's infinity symbols,
and the decoder accepts nothing but those two shapes.
"""

from __future__ import annotations

import json
from typing import Any

from pyaeon._errors import ERR_MSG_INVALID_FORMAT, DurationFormatError
from pyaeon._units import StandardPattern
from pyaeon.culture import INVARIANT
from pyaeon.duration import Duration
from pyaeon.relative import RelativeDuration


class DurationJSONEncoder(json.JSONEncoder):
    """JSONEncoder that writes Duration and RelativeDuration as strings."""

    def default(self, o: Any) -> Any:
        if isinstance(o, (Duration, RelativeDuration)):
            return o.format(StandardPattern.ROUND_TRIP, culture=INVARIANT)
        return super().default(o)


def encode_duration(value: Duration | RelativeDuration) -> str:
    return value.format(StandardPattern.ROUND_TRIP, culture=INVARIANT)


def decode_duration(text: str) -> Duration:
    """Decode a round-trip string.

    Raises:
        DurationFormatError: If text is not a round-trip string or an infinity symbol.
    """
    if not isinstance(text, str):
        raise DurationFormatError(
            ERR_MSG_INVALID_FORMAT, f"expected a JSON string, got {type(text).__name__}"
        )
    return Duration.parse_exact(text, StandardPattern.ROUND_TRIP, culture=INVARIANT)


def decode_relative_duration(text: str) -> RelativeDuration:
    if not isinstance(text, str):
        raise DurationFormatError(
            ERR_MSG_INVALID_FORMAT, f"expected a JSON string, got {type(text).__name__}"
        )
    return RelativeDuration.parse_exact(
        text, StandardPattern.ROUND_TRIP, culture=INVARIANT
    )


def dumps(value: Any, **kwargs: Any) -> str:
    """json.dumps with durations (possibly nested) encoded as round-trip strings."""
    return json.dumps(value, cls=DurationJSONEncoder, **kwargs)


def loads(document: str) -> Duration:
    """Parse a JSON document holding a single duration string."""
    return decode_duration(json.loads(document))
