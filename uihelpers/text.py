"""String and mapping helpers for rendering API payloads."""

import math
import re
from collections.abc import Collection, Mapping, Sequence
from typing import Any

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_WORD_START = re.compile(r"\b\w")


def parse_key_to_title(key: str) -> str:
    """Turn a payload key into a display title.

    >>> parse_key_to_title("user_firstName")
    'User First Name'
    """
    spaced = _CAMEL_BOUNDARY.sub(r"\1 \2", key.replace("_", " "))
    return _WORD_START.sub(lambda m: m.group(0).upper(), spaced)


def remove_empty(mapping: Mapping[str, Any]) -> dict[str, Any]:
    """Drop missing and blank values.

    Numeric zero and empty containers are kept; ``None``, ``""``, ``False``
    and ``NaN`` are dropped.
    """
    return {key: value for key, value in mapping.items() if _is_present(value)}


def _is_present(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return not math.isnan(value)
    if _is_container(value):
        return True
    return bool(value)


def _is_container(value: Any) -> bool:
    return isinstance(value, (Mapping, Collection)) and not isinstance(
        value, (str, bytes)
    )


def get_nested_value(mapping: Mapping[str, Any], path: str) -> Any:
    """Follow a dot-separated ``path`` through nested mappings.

    Integer segments index into lists. Traversal stops at ``None`` or a
    falsy scalar (``0``, ``""``, ``False``), which is returned as-is; absent
    keys and out-of-range indexes yield ``None``.
    """
    current: Any = mapping
    for part in path.split("."):
        if current is None or (not _is_container(current) and not current):
            return current
        if isinstance(current, Mapping):
            current = current.get(part)
        elif (
            isinstance(current, Sequence)
            and not isinstance(current, (str, bytes))
            and part.isdigit()
        ):
            index = int(part)
            current = current[index] if index < len(current) else None
        else:
            return None
    return current


def strip_leading_minus(value: str) -> str:
    """Remove a leading ``-`` so numeric inputs stay non-negative."""
    return value[1:] if value.startswith("-") else value
