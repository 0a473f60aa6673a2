"""
Keypath resolution against a single data context.
"""

from __future__ import annotations

from collections.abc import Mapping
from collections.abc import Sequence
from typing import Any

from ..types import CURRENT
from ..types import MISSING


def is_sequence(value: Any) -> bool:
    """Lists, tuples and other sequences, but never strings or bytes."""
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def is_indexable(value: Any) -> bool:
    return isinstance(value, Mapping) or is_sequence(value)


def _child(value: Any, key: str) -> Any:
    if isinstance(value, Mapping):
        return value[key] if key in value else MISSING
    if is_sequence(value) and key.isdecimal():
        index = int(key)
        return value[index] if index < len(value) else MISSING
    return MISSING


def find(context: Any, path: str) -> Any:
    """
    Return the raw entry at `path`, or `MISSING` when it is absent.

    Unlike `resolve()`, an entry holding `None` is found, and callables are
    returned uncalled.
    """
    if path == CURRENT:
        if isinstance(context, Mapping) and len(context) == 1 and CURRENT in context:
            return context[CURRENT]
        return context
    if not path:
        return MISSING

    value = context
    for key in path.split("."):
        value = _child(value, key)
        if value is MISSING:
            break
    return value


def finalize(value: Any, fallback: Any = MISSING) -> Any:
    """Call a callable entry, and map `None` (or an absent entry) to `fallback`."""
    if value is MISSING:
        return fallback
    if callable(value):
        value = value()
    if value is None:
        return fallback
    return value


def resolve(context: Any, path: str, fallback: Any = MISSING) -> Any:
    """
    Resolve a dotted keypath against `context`.

    - `.` is the context itself (or the item of a `{".": item}` scope).
    - Mapping segments descend by key, sequence segments by decimal index.
    - The first miss returns `fallback`; so does a final value of `None`
      and an empty path.
    - A callable final value is called with no arguments.

    Example:

        >>> resolve({"tracks": [{"name": "Michelle"}]}, "tracks.0.name")
        'Michelle'
    """
    return finalize(find(context, path), fallback)
