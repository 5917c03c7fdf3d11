"""Unit factors and numeric limits for duration conversion."""

U64_MAX = 2**64 - 1
"""Largest whole-second or millisecond count a Duration may carry."""

NANOS_PER_SEC = 1_000_000_000
NANOS_PER_MILLI = 1_000_000
MILLIS_PER_SEC = 1_000

MS_PER_DAY = 86_400_000
MS_PER_HOUR = 3_600_000
MS_PER_MINUTE = 60_000
MS_PER_SECOND = 1_000

# Lowercased unit token -> milliseconds
UNIT_MILLIS: dict[str, int] = {
    "d": MS_PER_DAY,
    "h": MS_PER_HOUR,
    "m": MS_PER_MINUTE,
    "s": MS_PER_SECOND,
    "ms": 1,
}

# Largest-first decomposition used by the human formatter
HUMAN_UNITS: tuple[tuple[str, int], ...] = (
    ("d", MS_PER_DAY),
    ("h", MS_PER_HOUR),
    ("m", MS_PER_MINUTE),
    ("s", MS_PER_SECOND),
    ("ms", 1),
)

MAX_U64_DIGITS = len(str(U64_MAX))
"""Digit runs longer than this (without leading zeros) always overflow."""
