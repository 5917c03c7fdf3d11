"""Exception hierarchy for duration parsing and formatting."""

from __future__ import annotations


class DurationError(Exception):
    """Base exception for duration conversion errors.

    Provides dual messaging: a stable user-facing message that hosts can
    surface verbatim, and internal details (including the offending input)
    for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class ParseError(DurationError):
    """Raised when an input value cannot be turned into a duration."""


class FormatError(DurationError):
    """Raised when a duration cannot be rendered in the requested shape."""


class NegativeDurationError(ParseError):
    """Raised when a numeric input is below zero."""


class NonFiniteDurationError(ParseError):
    """Raised when a float input is NaN or infinite."""


class DurationOverflowError(ParseError):
    """Raised when a duration exceeds the representable range."""


class ExpectedNumberError(ParseError):
    """Raised when the tokenizer finds no digits where a number must start."""

    def __init__(self, position: int, internal_details: str = "") -> None:
        super().__init__(f"expected number at position {position}", internal_details)
        self.position = position


class ExpectedUnitError(ParseError):
    """Raised when a number is not followed by a unit."""

    def __init__(self, position: int, internal_details: str = "") -> None:
        super().__init__(
            f"expected unit after number at position {position}", internal_details
        )
        self.position = position


class UnknownUnitError(ParseError):
    """Raised when a unit token is not one of d, h, m, s, ms."""

    def __init__(self, unit: str, internal_details: str = "") -> None:
        super().__init__(f"unknown unit '{unit}' (use d, h, m, s, ms)", internal_details)
        self.unit = unit


class EmptyDurationError(ParseError):
    """Raised when a string holds no (number, unit) pair."""


class InvalidDurationTypeError(ParseError):
    """Raised when the input is not an integer, float or string."""


class DurationTooLargeError(FormatError):
    """Raised when a formatted number does not fit an unsigned 64-bit integer."""


# Stable user-facing message constants
ERR_MSG_NEGATIVE = "negative duration not allowed"
ERR_MSG_NON_FINITE = "non-finite float"
ERR_MSG_OVERFLOW = "duration overflow"
ERR_MSG_EMPTY = "empty duration string"
ERR_MSG_TOO_LARGE = "duration too large"
ERR_MSG_WHOLE_NUMBER = "invalid type: duration seconds and nanoseconds must be integers"
ERR_MSG_EXPECTING = (
    "integer seconds, float seconds.millis, or a string like "
    "'1h 23m 45s' / '123s' / '250ms'"
)
ERR_MSG_INVALID_TYPE = f"invalid type: expected {ERR_MSG_EXPECTING}"
