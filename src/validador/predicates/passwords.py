"""Password strength predicates. Passwords are never trimmed here."""

import re
from typing import Any

from validador.predicates._values import as_text, current_text

_ALPHANUMERIC_RE = re.compile(r"^[A-Za-z0-9]+$")
_LETTER_RE = re.compile(r"[A-Za-z]")
_LOWER_RE = re.compile(r"[a-z]")
_UPPER_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SPECIAL_RE = re.compile(r"[^A-Za-z0-9]")


def pattern(value: Any, regex: str | re.Pattern[str]) -> bool:
    """Matches a caller-supplied policy anywhere in the value."""
    return re.search(regex, as_text(value)) is not None


def min_length(value: Any, n: int) -> bool:
    return len(as_text(value)) >= n


def alphanumeric(value: Any) -> bool:
    return bool(_ALPHANUMERIC_RE.match(as_text(value)))


def letters_numbers_special(value: Any) -> bool:
    """At least one letter, one digit and one other character."""
    text = as_text(value)
    return all(p.search(text) for p in (_LETTER_RE, _DIGIT_RE, _SPECIAL_RE))


def strong(value: Any, min_len: int = 8) -> bool:
    """Long enough, with lower, upper, digit and special characters."""
    text = as_text(value)
    return len(text) >= min_len and all(
        p.search(text) for p in (_LOWER_RE, _UPPER_RE, _DIGIT_RE, _SPECIAL_RE)
    )


def matches_other(value: Any, other: Any) -> bool:
    """Same as *other*, read at call time when it is an element or a callable."""
    return as_text(value) == current_text(other)
