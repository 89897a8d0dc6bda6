"""
Summary: Convert textual and numeric playback times into whole seconds.
Why: Player widgets report times in inconsistent shapes that must compare as integers.
"""

from __future__ import annotations

import math
import numbers
import re
from collections.abc import Sequence
from typing import Final

from playmeta.config.config import DEFAULT_PARSER_CONFIG
from playmeta.shared.track_info import TimeInfo

from .separators import split_string

_COMPONENT: Final[re.Pattern[str]] = re.compile(r"[0-9]+")
_MAX_COMPONENTS: Final[int] = 3


def string_to_seconds(value: object) -> int:
    """Parse ``hh:mm:ss``, ``mm:ss`` or ``ss`` into a signed number of seconds.

    A single leading ``-`` marks a negative time. Anything that is not a
    string in one of those shapes yields 0.
    """
    if not isinstance(value, str):
        return 0

    text = value.strip()
    if not text:
        return 0

    sign = 1
    if text.startswith("-"):
        sign = -1
        text = text[1:]

    parts = text.split(":")
    if len(parts) > _MAX_COMPONENTS:
        return 0

    seconds = 0
    for part in parts:
        if not _COMPONENT.fullmatch(part):
            return 0
        seconds = seconds * 60 + int(part)
    return sign * seconds


def escape_bad_time_values(value: object) -> int | None:
    """Round a numeric time to an integer, mapping NaN, infinities and non-numbers to None.

    Integers of any size pass through unchanged; other reals that overflow a
    float also map to None.
    """

    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)

    try:
        number = float(value)
    except OverflowError:
        return None
    if not math.isfinite(number):
        return None
    # Half-up, not banker's rounding: 2.5 -> 3.
    return math.floor(number + 0.5)


def split_time_info(
    text: str | None,
    separators: Sequence[str] | None = None,
    *,
    swap: bool = False,
) -> TimeInfo:
    """Split ``"01:00 / 03:00"`` style text into current time and duration.

    Args:
        text: Raw string holding both times.
        separators: Candidate separators. Defaults to the configured time separators.
        swap: Treat the text as ``"duration / current"``.

    Returns:
        TimeInfo: Both fields None when no separator was found.
    """
    current, duration = split_string(
        text, separators or DEFAULT_PARSER_CONFIG.time_separators, swap=swap
    )
    return TimeInfo(
        current_time=string_to_seconds(current) if current else None,
        duration=string_to_seconds(duration) if duration else None,
    )


__all__ = ["escape_bad_time_values", "split_time_info", "string_to_seconds"]
