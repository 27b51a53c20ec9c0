"""Email address predicates (format only, not deliverability)."""

import re
from typing import Any

from validador.predicates._values import as_text, current_text

_GENERIC_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def generic(value: Any) -> bool:
    """Something@something.tld, no whitespace."""
    return bool(_GENERIC_RE.match(as_text(value).strip()))


def domain(value: Any, expected: str) -> bool:
    """Address on exactly *expected* (case-insensitive)."""
    pattern = rf"^[^\s@]+@{re.escape(expected)}$"
    return bool(re.match(pattern, as_text(value).strip(), re.IGNORECASE))


def matches_other(value: Any, other: Any) -> bool:
    """Same as *other*: a confirmation element, a callable or plain text."""
    return as_text(value).strip() == current_text(other).strip()
