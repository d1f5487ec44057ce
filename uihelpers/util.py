"""Utility constants and helpers for uihelpers.

Time unit constants represent durations in seconds, with a separate
millisecond scale for values coming from JavaScript-style timestamps.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400

MS_PER_SECOND = 1000


def pluralize(count: int, noun: str) -> str:
    """Render ``count noun``, adding an ``s`` only when count exceeds one."""
    return f"{count} {noun}{'s' if count > 1 else ''}"
