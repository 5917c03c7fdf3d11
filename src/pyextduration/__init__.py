"""pyextduration - Flexible duration parsing with canonical output modes."""

from __future__ import annotations

try:
    from pyextduration._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from typing import Any

from pyextduration._duration import ZERO, Duration
from pyextduration._errors import (
    DurationError,
    DurationOverflowError,
    DurationTooLargeError,
    EmptyDurationError,
    ExpectedNumberError,
    ExpectedUnitError,
    FormatError,
    InvalidDurationTypeError,
    NegativeDurationError,
    NonFiniteDurationError,
    ParseError,
    UnknownUnitError,
)
from pyextduration._formatters import (
    format_human,
    format_millis,
    format_secs,
    format_secs_f64_ms,
)
from pyextduration._parser import parse, parse_str
from pyextduration.modes import ROOT, Mode, ModeName, get_mode

__all__ = [
    "deserialize",
    "deserialize_opt",
    "format_human",
    "format_millis",
    "format_secs",
    "format_secs_f64_ms",
    "get_mode",
    "parse",
    "parse_str",
    "serialize",
    "serialize_opt",
    "ZERO",
    "Duration",
    "Mode",
    "ModeName",
    "DurationError",
    "DurationOverflowError",
    "DurationTooLargeError",
    "EmptyDurationError",
    "ExpectedNumberError",
    "ExpectedUnitError",
    "FormatError",
    "InvalidDurationTypeError",
    "NegativeDurationError",
    "NonFiniteDurationError",
    "ParseError",
    "UnknownUnitError",
]


def serialize(dur: Duration) -> str:
    """Serialize in the default (human) mode, e.g. ``"1h 2m 3s 250ms"``."""
    return ROOT.serialize(dur)


def deserialize(value: Any) -> Duration:
    """Parse integer seconds, float seconds or a unit string.

    Raises:
        ParseError: If the value is not a valid non-negative duration.
    """
    return ROOT.deserialize(value)


def serialize_opt(dur: Duration | None) -> str | None:
    return ROOT.serialize_opt(dur)


def deserialize_opt(value: Any) -> Duration | None:
    return ROOT.deserialize_opt(value)
