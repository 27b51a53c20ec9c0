"""Numeric predicates. Blank or unparsable values fail every check."""

import re
from typing import Any

from validador.predicates._values import as_number, as_text

_INTEGER_RE = re.compile(r"^[+-]?\d+$")


def integer(value: Any) -> bool:
    """A whole number, written without a decimal point."""
    return bool(_INTEGER_RE.match(as_text(value).strip()))


def decimal(value: Any) -> bool:
    """A number written with a decimal point."""
    return as_number(value) is not None and "." in as_text(value)


def minimum(value: Any, low: float) -> bool:
    number = as_number(value)
    return number is not None and number >= low


def maximum(value: Any, high: float) -> bool:
    number = as_number(value)
    return number is not None and number <= high


def between(value: Any, low: float, high: float) -> bool:
    """Inclusive on both ends."""
    number = as_number(value)
    return number is not None and low <= number <= high
