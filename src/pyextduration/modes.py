"""Output modes: one parser, four formatter strategies.

Every mode deserializes with the full flexible parser; modes differ only in
what they serialize to. Each mode also handles optional fields, mapping
``None`` to ``None`` in both directions.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pyextduration._duration import Duration
from pyextduration._formatters import (
    format_human,
    format_millis,
    format_secs,
    format_secs_f64_ms,
)
from pyextduration._parser import parse

__all__ = [
    "HUMAN",
    "MILLIS",
    "ROOT",
    "SECS",
    "SECS_F64_MS",
    "Mode",
    "ModeName",
    "get_mode",
]


class ModeName(enum.StrEnum):
    HUMAN = "human"
    SECS = "secs"
    MILLIS = "millis"
    SECS_F64_MS = "secs_f64_ms"


FormatFunc = Callable[[Duration], Any]
"""Formatter turning a Duration into a str, int or float output value."""


@dataclass(frozen=True)
class Mode:
    """A (parser, formatter) pairing bound to a field."""

    name: ModeName
    formatter: FormatFunc
    output_type: type

    def serialize(self, dur: Duration) -> Any:
        return self.formatter(dur)

    def deserialize(self, value: Any) -> Duration:
        return parse(value)

    def serialize_opt(self, dur: Duration | None) -> Any:
        if dur is None:
            return None
        return self.formatter(dur)

    def deserialize_opt(self, value: Any) -> Duration | None:
        if value is None:
            return None
        return parse(value)


HUMAN = Mode(ModeName.HUMAN, format_human, str)
SECS = Mode(ModeName.SECS, format_secs, int)
MILLIS = Mode(ModeName.MILLIS, format_millis, int)
SECS_F64_MS = Mode(ModeName.SECS_F64_MS, format_secs_f64_ms, float)

ROOT = HUMAN
"""Default mode: human output, flexible input."""

_REGISTRY: dict[str, Mode] = {
    ModeName.HUMAN: HUMAN,
    ModeName.SECS: SECS,
    ModeName.MILLIS: MILLIS,
    ModeName.SECS_F64_MS: SECS_F64_MS,
}


def get_mode(name: str) -> Mode:
    """Get a mode by name.

    Args:
        name: Mode name (``"human"``, ``"secs"``, ``"millis"``,
            ``"secs_f64_ms"``), optionally prefixed with ``"opt."``. The bare
            names ``""`` and ``"opt"`` select the root (human) mode.

    Returns:
        The Mode. Optional-field handling is provided by its ``*_opt``
        methods, so ``"opt.secs"`` and ``"secs"`` resolve to the same Mode.

    Raises:
        ValueError: If the mode name is unknown.
    """
    if name in ("", "opt"):
        return ROOT
    mode = _REGISTRY.get(name.removeprefix("opt."))
    if mode is None:
        raise ValueError(
            f"unknown duration mode: {name!r}. "
            f"Available: {', '.join(sorted(_REGISTRY))}"
        )
    return mode
