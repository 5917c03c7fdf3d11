"""Canonical output shapes for a Duration.

Every formatter first rounds the duration to whole milliseconds (ties up),
so all modes agree with ``format_millis`` on the same value.
"""

from __future__ import annotations

from pyextduration._constants import HUMAN_UNITS, MILLIS_PER_SEC, U64_MAX
from pyextduration._duration import Duration
from pyextduration._errors import ERR_MSG_TOO_LARGE, DurationTooLargeError
from pyextduration._parser import round_half_up


def format_human(dur: Duration) -> str:
    """Render as non-zero d/h/m/s/ms parts, largest first: ``"1h 2m 3s 250ms"``.

    A zero duration renders as ``"0s"``.
    """
    remaining = dur.rounded_millis()
    if remaining == 0:
        return "0s"

    parts = []
    for unit, ms_per_unit in HUMAN_UNITS:
        count, remaining = divmod(remaining, ms_per_unit)
        if count:
            parts.append(f"{count}{unit}")
    return " ".join(parts)


def format_secs(dur: Duration) -> int:
    """Whole seconds; the sub-second remainder is dropped, not rounded."""
    secs = dur.rounded_millis() // MILLIS_PER_SEC
    if secs > U64_MAX:
        raise DurationTooLargeError(ERR_MSG_TOO_LARGE, f"{secs} seconds exceeds {U64_MAX}")
    return secs


def format_millis(dur: Duration) -> int:
    millis = dur.rounded_millis()
    if millis > U64_MAX:
        raise DurationTooLargeError(ERR_MSG_TOO_LARGE, f"{millis} milliseconds exceeds {U64_MAX}")
    return millis


def format_secs_f64_ms(dur: Duration) -> float:
    """Seconds as a float holding at most three decimals."""
    millis = dur.rounded_millis()
    secs = millis // MILLIS_PER_SEC + (millis % MILLIS_PER_SEC) / 1000.0
    return round_half_up(secs * 1000.0) / 1000.0
