"""Escape hatch: validate against any regular expression."""

import re
from typing import Any

from validador.predicates._values import as_text


def expression(value: Any, regex: str | re.Pattern[str]) -> bool:
    """*regex* matches somewhere in the value (anchor it for full matches)."""
    return re.search(regex, as_text(value)) is not None
