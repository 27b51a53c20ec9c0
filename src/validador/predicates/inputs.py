"""Predicates over extracted control values.

Checkbox groups and multi-selects arrive as lists, radio groups as the
checked value or ``None``, everything else as a string.
"""

import re
from collections.abc import Collection
from typing import Any

from validador.predicates._values import as_text

_URL_RE = re.compile(r"^https?://[^\s/$.?#].\S*$", re.IGNORECASE)


def _selection(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    text = as_text(value)
    return [text] if text else []


# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------


def checked(value: Any) -> bool:
    """A radio is chosen, or at least one box of the group is checked."""
    return len(_selection(value)) > 0


def min_checked(value: Any, n: int) -> bool:
    return len(_selection(value)) >= n


def max_checked(value: Any, n: int) -> bool:
    return len(_selection(value)) <= n


def select_valid(value: Any, invalid: str = "0") -> bool:
    """The select is not on its placeholder option."""
    return as_text(value) != invalid


def other_option_filled(value: Any, other_text: Any, trigger: str = "other") -> bool:
    """When *trigger* is selected, the free-text companion must be filled.

    Bind the companion's current value at call time, for instance from a
    rule built with a lambda::

        [lambda v: inputs.other_option_filled(v, doc.get_element_by_id("other").get_value()),
         "Tell us which"]
    """
    if trigger not in _selection(value):
        return True
    return bool(as_text(other_text).strip())


# ---------------------------------------------------------------------------
# URLs and files
# ---------------------------------------------------------------------------


def url(value: Any) -> bool:
    """An http or https URL."""
    return bool(_URL_RE.match(as_text(value).strip()))


def https_url(value: Any) -> bool:
    return as_text(value).strip().lower().startswith("https://")


def file_extension(value: Any, extensions: Collection[str]) -> bool:
    """The file name ends in one of *extensions* (no dot, any case)."""
    name = as_text(value).strip()
    if "." not in name:
        return False
    ext = name.rsplit(".", 1)[1].lower()
    return ext in {e.lower().lstrip(".") for e in extensions}
