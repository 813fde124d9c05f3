"""Error class hierarchy tests."""

import pytest

from pyaeon import Duration
from pyaeon._errors import (
    DurationError,
    DurationFormatError,
    DurationOverflowError,
    InvalidArgumentError,
    InvalidPatternError,
    MaxInputLengthExceededError,
)


class TestDurationErrorBase:
    def test_str_returns_user_message(self):
        err = DurationError("user msg", "internal detail")
        assert str(err) == "user msg"

    def test_internal_returns_details(self):
        err = DurationError("user msg", "internal detail")
        assert err.internal() == "internal detail"

    def test_internal_defaults_to_user_message(self):
        err = DurationError("same message")
        assert err.internal() == "same message"

    def test_wrapped_exception(self):
        cause = ValueError("root cause")
        err = DurationError("user msg", wrapped=cause)
        assert err.wrapped is cause

    def test_repr_shows_both_messages(self):
        err = DurationOverflowError("user msg", "internal detail")
        assert repr(err) == "DurationOverflowError('user msg', 'internal detail')"


class TestErrorHierarchy:
    @pytest.mark.parametrize(
        "cls",
        [
            InvalidArgumentError,
            DurationOverflowError,
            DurationFormatError,
            InvalidPatternError,
            MaxInputLengthExceededError,
        ],
    )
    def test_subclass_of_duration_error(self, cls):
        assert issubclass(cls, DurationError)

    @pytest.mark.parametrize("cls", [InvalidPatternError, MaxInputLengthExceededError])
    def test_format_family(self, cls):
        assert issubclass(cls, DurationFormatError)


class TestRaisedErrors:
    def test_nan_factor_message_is_sanitized(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            Duration.ONE_SECOND * float("nan")
        assert str(exc_info.value) == "factor is not a number"

    def test_overflow_keeps_internal_detail(self):
        with pytest.raises(DurationOverflowError) as exc_info:
            Duration.from_aeons(10**4096)
        assert "4096" in exc_info.value.internal()

    def test_input_length_error(self):
        with pytest.raises(MaxInputLengthExceededError):
            Duration.parse("1" * 10_000)

    def test_unreadable_unit_list(self):
        with pytest.raises(DurationFormatError) as exc_info:
            Duration.parse_exact("1.2.3 s", "X")
        assert exc_info.value.user_message == "invalid duration format"
