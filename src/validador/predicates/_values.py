"""Coercion shared by the predicates.

Predicates receive whatever extraction produced: a string, ``None`` (no
radio checked) or a list (checkbox group, multi-select).
"""

from typing import Any


def as_text(value: Any) -> str:
    """The value as a string: ``None`` is empty, lists are comma-joined."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def as_number(value: Any) -> float | None:
    """Parse a number, ``None`` when the value is not one."""
    text = as_text(value).strip()
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def current_text(other: Any) -> str:
    """Text of a companion value, read when the predicate runs.

    Elements (anything with ``get_value()``) and zero-argument callables
    are read at call time, so a rule curried at registration still sees
    what the user typed afterwards.
    """
    get_value = getattr(other, "get_value", None)
    if callable(get_value):
        return as_text(get_value())
    if callable(other):
        return as_text(other())
    return as_text(other)
