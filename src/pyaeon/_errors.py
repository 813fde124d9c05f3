"""Exception hierarchy for duration arithmetic, formatting and parsing."""


class DurationError(Exception):
    """Base class for every failure raised by pyaeon.

    ``str()`` is the short, stable ``user_message``, safe to echo back for
    untrusted text. The offending text, pattern or operand stays in
    ``internal()`` for debug logs, and ``wrapped`` keeps the lower-level
    lark or decimal exception, if there was one.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details
        self.wrapped = wrapped

    def internal(self) -> str:
        """Detail for logs, or the user message when none was recorded."""
        return self.internal_details or self.user_message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.user_message!r}, {self.internal()!r})"


class InvalidArgumentError(DurationError):
    """Raised when an operand cannot take part in an operation (e.g. a NaN factor)."""


class DurationOverflowError(DurationError):
    """Raised when a magnitude exceeds the maximum representable digit count."""


class DurationFormatError(DurationError):
    """Raised when text does not match the requested pattern."""


class InvalidPatternError(DurationFormatError):
    """Raised when a format pattern is unusable."""


class MaxInputLengthExceededError(DurationFormatError):
    """Raised when text to parse exceeds the input length limit."""


# Sanitized user-facing error message constants
ERR_MSG_NAN_FACTOR = "factor is not a number"
ERR_MSG_UNSUPPORTED_OPERAND = "unsupported operand type"
ERR_MSG_OVERFLOW = "duration magnitude overflow"
ERR_MSG_INVALID_FORMAT = "invalid duration format"
ERR_MSG_EMPTY_INPUT = "duration text is empty"
ERR_MSG_INPUT_TOO_LONG = "duration text too long"
ERR_MSG_PATTERN_TOO_LONG = "format pattern too long"
ERR_MSG_INVALID_PATTERN = "invalid format pattern"
