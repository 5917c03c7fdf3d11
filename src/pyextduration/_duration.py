"""Canonical duration value and overflow-checked arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from pyextduration._constants import (
    MILLIS_PER_SEC,
    NANOS_PER_MILLI,
    NANOS_PER_SEC,
    U64_MAX,
)
from pyextduration._errors import (
    ERR_MSG_NEGATIVE,
    ERR_MSG_OVERFLOW,
    ERR_MSG_WHOLE_NUMBER,
    DurationOverflowError,
    InvalidDurationTypeError,
    NegativeDurationError,
)

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue
    from pydantic_core import CoreSchema


@dataclass(frozen=True, order=True)
class Duration:
    """A non-negative span of time: whole seconds plus a nanosecond remainder.

    A ``nanos`` value of a second or more is carried into ``secs`` on
    construction, so ``Duration(1, 1_500_000_000) == Duration(2, 500_000_000)``.
    Used directly as a pydantic field type it accepts any input the parser
    accepts and serializes in human form.
    """

    secs: int
    nanos: int = 0

    def __post_init__(self) -> None:
        for name in ("secs", "nanos"):
            value = getattr(self, name)
            # bool is an int subclass but never a count
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidDurationTypeError(
                    ERR_MSG_WHOLE_NUMBER,
                    f"Duration {name}={value!r} is {type(value).__name__}",
                )
        if self.secs < 0 or self.nanos < 0:
            raise NegativeDurationError(
                ERR_MSG_NEGATIVE,
                f"Duration(secs={self.secs}, nanos={self.nanos})",
            )
        if self.nanos >= NANOS_PER_SEC:
            carry, nanos = divmod(self.nanos, NANOS_PER_SEC)
            object.__setattr__(self, "secs", self.secs + carry)
            object.__setattr__(self, "nanos", nanos)
        if self.secs > U64_MAX:
            raise DurationOverflowError(
                ERR_MSG_OVERFLOW,
                f"{self.secs} seconds exceeds {U64_MAX}",
            )

    @classmethod
    def from_secs(cls, secs: int) -> Duration:
        return cls(secs)

    @classmethod
    def from_millis(cls, millis: int) -> Duration:
        if millis < 0:
            raise NegativeDurationError(ERR_MSG_NEGATIVE, f"{millis} milliseconds")
        secs, rem = divmod(millis, MILLIS_PER_SEC)
        return cls(secs, rem * NANOS_PER_MILLI)

    @classmethod
    def from_timedelta(cls, td: timedelta) -> Duration:
        if td < timedelta(0):
            raise NegativeDurationError(ERR_MSG_NEGATIVE, f"timedelta {td!r}")
        return cls(td.days * 86_400 + td.seconds, td.microseconds * 1_000)

    @property
    def subsec_millis(self) -> int:
        """Sub-second remainder in whole milliseconds, truncated."""
        return self.nanos // NANOS_PER_MILLI

    @property
    def subsec_nanos(self) -> int:
        return self.nanos

    def total_seconds(self) -> float:
        return self.secs + self.nanos / NANOS_PER_SEC

    def rounded_millis(self) -> int:
        """Total whole milliseconds, sub-millisecond remainder rounded half-up."""
        return self.secs * MILLIS_PER_SEC + (self.nanos + NANOS_PER_MILLI // 2) // NANOS_PER_MILLI

    def checked_add(self, other: Duration) -> Duration:
        """Add two durations, raising DurationOverflowError past the 64-bit range."""
        secs = self.secs + other.secs
        nanos = self.nanos + other.nanos
        if nanos >= NANOS_PER_SEC:
            secs += 1
            nanos -= NANOS_PER_SEC
        if secs > U64_MAX:
            raise DurationOverflowError(
                ERR_MSG_OVERFLOW,
                f"{self!r} + {other!r} exceeds {U64_MAX} seconds",
            )
        return Duration(secs, nanos)

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.checked_add(other)

    def to_timedelta(self) -> timedelta:
        """Convert to ``datetime.timedelta`` (microsecond resolution, truncated)."""
        try:
            return timedelta(seconds=self.secs, microseconds=self.nanos // 1_000)
        except OverflowError as e:
            raise DurationOverflowError(
                ERR_MSG_OVERFLOW,
                f"{self!r} does not fit in datetime.timedelta",
                wrapped=e,
            ) from e

    # --- pydantic integration ---

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        from pydantic_core import core_schema

        from pyextduration._formatters import format_human
        from pyextduration.fields import validate_duration

        return core_schema.no_info_plain_validator_function(
            validate_duration,
            serialization=core_schema.plain_serializer_function_ser_schema(
                format_human,
                return_schema=core_schema.str_schema(),
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "anyOf": [
                {"type": "integer", "minimum": 0},
                {"type": "number", "minimum": 0},
                {"type": "string", "examples": ["1h 23m 45s", "250ms"]},
            ]
        }


ZERO = Duration(0)
