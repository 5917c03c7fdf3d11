"""Flexible duration parser: integer seconds, float seconds, or unit strings."""

from __future__ import annotations

import math
from datetime import timedelta
from typing import Any

from pyextduration._constants import (
    MAX_U64_DIGITS,
    MILLIS_PER_SEC,
    NANOS_PER_MILLI,
    U64_MAX,
    UNIT_MILLIS,
)
from pyextduration._duration import Duration
from pyextduration._errors import (
    ERR_MSG_EMPTY,
    ERR_MSG_INVALID_TYPE,
    ERR_MSG_NEGATIVE,
    ERR_MSG_NON_FINITE,
    ERR_MSG_OVERFLOW,
    DurationOverflowError,
    EmptyDurationError,
    ExpectedNumberError,
    ExpectedUnitError,
    InvalidDurationTypeError,
    NegativeDurationError,
    NonFiniteDurationError,
    UnknownUnitError,
)

# bytes.isspace() also accepts \x0b, which is not ASCII whitespace here
_WHITESPACE = frozenset(b" \t\n\x0c\r")


def parse(value: Any) -> Duration:
    """Parse an already-decoded scalar into a Duration.

    Args:
        value: An ``int`` (whole seconds), a ``float`` (seconds with a
            millisecond fraction), or a ``str`` of number/unit pairs such as
            ``"1h 23m 45s"``. A ``Duration`` is returned unchanged and a
            ``datetime.timedelta`` is converted.

    Returns:
        The parsed Duration.

    Raises:
        ParseError: If the value is negative, non-finite, out of range,
            malformed, or of an unsupported type.
    """
    # bool is an int subclass but never a duration
    if isinstance(value, bool):
        raise InvalidDurationTypeError(ERR_MSG_INVALID_TYPE, f"got bool {value!r}")
    if isinstance(value, Duration):
        return value
    if isinstance(value, int):
        return parse_int(value)
    if isinstance(value, float):
        return parse_float(value)
    if isinstance(value, str):
        return parse_str(value)
    if isinstance(value, timedelta):
        return Duration.from_timedelta(value)
    raise InvalidDurationTypeError(
        ERR_MSG_INVALID_TYPE, f"got {type(value).__name__} {value!r}"
    )


def parse_int(value: int) -> Duration:
    """Parse whole seconds."""
    if value < 0:
        raise NegativeDurationError(ERR_MSG_NEGATIVE, f"integer input {value}")
    if value > U64_MAX:
        raise DurationOverflowError(ERR_MSG_OVERFLOW, f"integer input {value} exceeds {U64_MAX}")
    return Duration(value)


def parse_float(value: float) -> Duration:
    """Parse seconds with a fractional part, rounded to the nearest millisecond.

    Ties round up. A fraction that rounds to 1000 ms carries into the
    seconds, so ``1.9996`` becomes exactly two seconds.
    """
    if not math.isfinite(value):
        raise NonFiniteDurationError(ERR_MSG_NON_FINITE, f"float input {value!r}")
    if value < 0.0:
        raise NegativeDurationError(ERR_MSG_NEGATIVE, f"float input {value!r}")

    secs = math.trunc(value)
    if secs > U64_MAX:
        raise DurationOverflowError(ERR_MSG_OVERFLOW, f"float input {value!r} exceeds {U64_MAX}")
    millis = round_half_up((value - secs) * 1000.0)
    if millis == MILLIS_PER_SEC:
        secs += 1
        millis = 0
        if secs > U64_MAX:
            raise DurationOverflowError(ERR_MSG_OVERFLOW, f"float input {value!r} carries past {U64_MAX}")
    return Duration(secs, millis * NANOS_PER_MILLI)


def round_half_up(x: float) -> int:
    """Round a non-negative float to the nearest integer, ties upward."""
    whole = math.floor(x)
    if x - whole >= 0.5:
        whole += 1
    return whole


def parse_str(text: str) -> Duration:
    """Parse a sequence of ``<digits><unit>`` pairs into a Duration.

    Whitespace around and between pairs is optional, units are matched
    case-insensitively (d, h, m, s, ms), and pairs may appear in any order
    or repeat; every pair adds to the total. Positions in error messages are
    byte offsets into the UTF-8 encoding of ``text``.
    """
    data = text.encode("utf-8")
    length = len(data)
    total_ms = 0
    pairs = 0
    i = 0

    while i < length:
        while i < length and data[i] in _WHITESPACE:
            i += 1
        if i >= length:
            break

        start_num = i
        while i < length and 0x30 <= data[i] <= 0x39:
            i += 1
        if i == start_num:
            raise ExpectedNumberError(start_num, f"at byte {start_num} of {text!r}")
        digits = data[start_num:i].lstrip(b"0")
        end_num = i

        while i < length and data[i] in _WHITESPACE:
            i += 1
        start_unit = i
        while i < length and _is_ascii_alpha(data[i]):
            i += 1
        if i == start_unit:
            raise ExpectedUnitError(end_num, f"at byte {end_num} of {text!r}")

        unit = data[start_unit:i].decode("ascii").lower()
        ms_per_unit = UNIT_MILLIS.get(unit)
        if ms_per_unit is None:
            raise UnknownUnitError(unit, f"unit {unit!r} in {text!r}")

        if len(digits) > MAX_U64_DIGITS:
            raise DurationOverflowError(ERR_MSG_OVERFLOW, f"number too long in {text!r}")
        increment = int(digits or b"0") * ms_per_unit
        if increment > U64_MAX:
            raise DurationOverflowError(ERR_MSG_OVERFLOW, f"{increment} ms term in {text!r}")
        total_ms += increment
        if total_ms > U64_MAX:
            raise DurationOverflowError(ERR_MSG_OVERFLOW, f"running total {total_ms} ms in {text!r}")
        pairs += 1

        while i < length and data[i] in _WHITESPACE:
            i += 1

    if pairs == 0:
        raise EmptyDurationError(ERR_MSG_EMPTY, f"no number/unit pairs in {text!r}")
    return Duration.from_millis(total_ms)


def _is_ascii_alpha(b: int) -> bool:
    return 0x41 <= b <= 0x5A or 0x61 <= b <= 0x7A
