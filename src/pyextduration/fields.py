"""pydantic field types binding a duration mode to a model field.

Each type accepts integer seconds, float seconds or a unit string on input
and serializes in its mode's canonical shape::

    class Job(BaseModel):
        timeout: HumanDuration            # "1m 30s"
        poll: MillisDuration              # 250
        retry_after: OptSecsDuration = None

A bare ``Duration`` annotation behaves like ``HumanDuration``.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any

from pydantic import PlainSerializer
from pydantic_core import PydanticCustomError

from pyextduration._duration import Duration
from pyextduration._errors import ParseError
from pyextduration._parser import parse
from pyextduration.modes import HUMAN, MILLIS, SECS, SECS_F64_MS, Mode, get_mode

__all__ = [
    "HumanDuration",
    "MillisDuration",
    "OptHumanDuration",
    "OptMillisDuration",
    "OptSecsDuration",
    "OptSecsF64MsDuration",
    "SecsDuration",
    "SecsF64MsDuration",
    "duration_field",
    "validate_duration",
]

logger = logging.getLogger(__name__)


def validate_duration(value: Any) -> Duration:
    """Parse a field value, reporting failures as pydantic validation errors."""
    try:
        return parse(value)
    except ParseError as e:
        logger.debug("rejected duration value: %s", e.internal())
        raise PydanticCustomError(
            "duration_parsing",
            "{message}",
            {"message": e.user_message},
        ) from e


def duration_field(mode: str | Mode = HUMAN, *, optional: bool = False) -> Any:
    """Build an ``Annotated`` duration type serializing in the given mode.

    Args:
        mode: A Mode or mode name accepted by :func:`~pyextduration.modes.get_mode`.
        optional: If True, the field also accepts ``None`` and serializes it
            as ``None``. Give the field a ``None`` default to allow it to be
            missing, and use ``exclude_none=True`` to omit it on output.
    """
    if isinstance(mode, str):
        mode = get_mode(mode)
    if optional:
        return Annotated[
            Duration | None,
            PlainSerializer(mode.serialize_opt, return_type=mode.output_type | None),
        ]
    return Annotated[Duration, PlainSerializer(mode.serialize, return_type=mode.output_type)]


HumanDuration = duration_field(HUMAN)
SecsDuration = duration_field(SECS)
MillisDuration = duration_field(MILLIS)
SecsF64MsDuration = duration_field(SECS_F64_MS)

OptHumanDuration = duration_field(HUMAN, optional=True)
OptSecsDuration = duration_field(SECS, optional=True)
OptMillisDuration = duration_field(MILLIS, optional=True)
OptSecsF64MsDuration = duration_field(SECS_F64_MS, optional=True)
