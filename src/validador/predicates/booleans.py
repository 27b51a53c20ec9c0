"""Boolean-ish text: yes/no answers typed or picked by the user."""

import re
from typing import Any

from validador.predicates._values import as_text

_TRUE_RE = re.compile(r"^(true|1|y|yes|s|si|sí)$", re.IGNORECASE)
_FALSE_RE = re.compile(r"^(false|0|n|no)$", re.IGNORECASE)


def is_true(value: Any) -> bool:
    return bool(_TRUE_RE.match(as_text(value).strip()))


def is_false(value: Any) -> bool:
    return bool(_FALSE_RE.match(as_text(value).strip()))
