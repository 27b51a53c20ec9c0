"""National identity numbers. Chile's RUN, in its usual written forms."""

import re
from typing import Any

from validador.predicates._values import as_text

_RUN_DIGITS_RE = re.compile(r"^[0-9]{7,8}$")
_RUN_WITH_DV_RE = re.compile(r"^[0-9]{7,8}[0-9kK]$")
_RUN_HYPHEN_RE = re.compile(r"^[0-9]{7,8}-[0-9kK]$")
_RUN_FULL_RE = re.compile(r"^\d{1,2}\.\d{3}\.\d{3}-[0-9kK]$")


def run_digits(value: Any) -> bool:
    """Body only: ``12345678``."""
    return bool(_RUN_DIGITS_RE.match(as_text(value).strip()))


def run_with_check_digit(value: Any) -> bool:
    """Body and check digit, no separator: ``12345678K``."""
    return bool(_RUN_WITH_DV_RE.match(as_text(value).strip()))


def run_with_hyphen(value: Any) -> bool:
    """``12345678-K``."""
    return bool(_RUN_HYPHEN_RE.match(as_text(value).strip()))


def run_full(value: Any) -> bool:
    """Dotted and hyphenated: ``12.345.678-K``."""
    return bool(_RUN_FULL_RE.match(as_text(value).strip()))


def run_check_digit(body: str) -> str:
    """Modulo 11 check digit for a RUN body (``"0"``-``"9"`` or ``"K"``)."""
    total = 0
    factor = 2
    for digit in reversed(body):
        total += int(digit) * factor
        factor = 2 if factor == 7 else factor + 1
    remainder = 11 - total % 11
    if remainder == 11:
        return "0"
    if remainder == 10:
        return "K"
    return str(remainder)


def run_check_digit_valid(value: Any) -> bool:
    """Any written form whose check digit matches its body."""
    text = as_text(value).strip().replace(".", "").replace("-", "").upper()
    if not _RUN_WITH_DV_RE.match(text):
        return False
    return run_check_digit(text[:-1]) == text[-1]
