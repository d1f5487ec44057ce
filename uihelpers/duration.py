"""Human-readable durations.

Durations arrive either as milliseconds (browser timers, JS timestamps) or
as seconds (API payloads). Both are floored to whole seconds, split into
days/hours/minutes/seconds and rendered as a phrase such as
``"2 days, 3 hours"``.
"""

import math
from typing import Literal

from uihelpers.util import DAY, HOUR, MINUTE, MS_PER_SECOND, pluralize

Unit = Literal["ms", "s"]

INVALID_TIME = "Invalid time"
LESS_THAN_A_SECOND = "less than a second"

SCALES: dict[str, int] = {
    "ms": MS_PER_SECOND,
    "s": 1,
}


def decompose(total_seconds: int) -> tuple[int, int, int, int]:
    """Split whole seconds into ``(days, hours, minutes, seconds)``."""
    days = total_seconds // DAY
    hours = (total_seconds % DAY) // HOUR
    minutes = (total_seconds % HOUR) // MINUTE
    seconds = total_seconds % MINUTE
    return days, hours, minutes, seconds


def duration_to_human_readable(value: float | None, unit: Unit = "ms") -> str:
    """Render a duration as ``"1 day, 1 hour, 1 minute, 1 second"``.

    Args:
        value: Duration expressed in ``unit``. Zero, ``None``, negative and
            non-finite values are all reported as ``"Invalid time"``.
        unit: ``"ms"`` for milliseconds or ``"s"`` for seconds.

    Returns:
        Comma-separated non-zero parts, or ``"less than a second"`` when the
        duration is positive but shorter than one second.

    Raises:
        ValueError: If ``unit`` is not one of the supported units
        TypeError: If ``value`` is not a number
    """
    if unit not in SCALES:
        valid = ", ".join(repr(u) for u in SCALES)
        raise ValueError(f"Invalid duration unit {unit!r}. Valid units: {valid}")

    if value is None:
        return INVALID_TIME
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(
            f"Duration must be an int or float.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Hint: Convert before formatting:\n"
            f"  duration_to_human_readable(int(raw), {unit!r})"
        )
    if not value or value < 0 or not math.isfinite(value):
        return INVALID_TIME

    total_seconds = int(value // SCALES[unit])
    days, hours, minutes, seconds = decompose(total_seconds)

    parts: list[str] = []
    if days > 0:
        parts.append(pluralize(days, "day"))
    if hours > 0:
        parts.append(pluralize(hours, "hour"))
    if minutes > 0:
        parts.append(pluralize(minutes, "minute"))
    if seconds > 0:
        parts.append(pluralize(seconds, "second"))

    return ", ".join(parts) if parts else LESS_THAN_A_SECOND


def ms_to_human_readable(ms: float | None) -> str:
    return duration_to_human_readable(ms, "ms")


def seconds_to_human_readable(seconds: float | None) -> str:
    return duration_to_human_readable(seconds, "s")


def convert_seconds_to_ms(seconds: float) -> int:
    return math.floor(seconds * MS_PER_SECOND)


def convert_ms_to_seconds(milliseconds: float) -> int:
    return math.floor(milliseconds / MS_PER_SECOND)
