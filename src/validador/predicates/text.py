"""Text shape predicates and capitalization helpers.

Every predicate has the signature ``(value, *args) -> bool`` and is used
in a rule entry with its args after the message::

    [text.min_length, "At least 3 characters", 3]
"""

import json
import re
from collections.abc import Collection, Iterable
from typing import Any

from validador.predicates._values import as_text

# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def required(value: Any) -> bool:
    """Non-blank text, a chosen radio, or at least one checked box."""
    if value is None:
        return False
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    return bool(as_text(value).strip())


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def min_length(value: Any, n: int) -> bool:
    """At least *n* characters, ignoring surrounding whitespace."""
    return len(as_text(value).strip()) >= n


def max_length(value: Any, n: int) -> bool:
    return len(as_text(value)) <= n


def exact_length(value: Any, n: int) -> bool:
    return len(as_text(value)) == n


def min_words(value: Any, n: int) -> bool:
    return len(as_text(value).split()) >= n


# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------

_LETTERS_RE = re.compile(r"^[A-Za-z]+$")
_LETTERS_SPACES_RE = re.compile(r"^[A-Za-z\s]+$")
_ALPHANUMERIC_RE = re.compile(r"^[A-Za-z0-9]+$")
_NO_SPECIAL_RE = re.compile(r"^[A-Za-z0-9\s]+$")


def only_letters(value: Any) -> bool:
    return bool(_LETTERS_RE.match(as_text(value)))


def letters_and_spaces(value: Any) -> bool:
    return bool(_LETTERS_SPACES_RE.match(as_text(value)))


def alphanumeric(value: Any) -> bool:
    return bool(_ALPHANUMERIC_RE.match(as_text(value)))


def no_special_characters(value: Any) -> bool:
    """Letters, digits and whitespace only."""
    return bool(_NO_SPECIAL_RE.match(as_text(value)))


def no_spaces(value: Any) -> bool:
    return not any(ch.isspace() for ch in as_text(value))


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------


def contains(value: Any, fragment: str) -> bool:
    return fragment in as_text(value)


def in_list(value: Any, allowed: Collection[str]) -> bool:
    return as_text(value) in allowed


def is_json(value: Any) -> bool:
    """Parses as JSON (an empty string does not)."""
    try:
        json.loads(as_text(value))
    except ValueError:
        return False
    return True


# ---------------------------------------------------------------------------
# Transforms (not predicates: they return text)
# ---------------------------------------------------------------------------


def capitalize_first(value: Any) -> str:
    text = as_text(value)
    return text[:1].upper() + text[1:]


def capitalize_words(value: Any) -> str:
    return " ".join(capitalize_first(word) for word in as_text(value).split(" "))


def capitalize_words_except(
    value: Any,
    exceptions: Iterable[str] = ("de", "la", "van", "von", "di", "le"),
) -> str:
    """Title-case words, keeping *exceptions* lowercase past the first word."""
    keep = {e.lower() for e in exceptions}
    words = as_text(value).strip().lower().split()
    return " ".join(
        word if i > 0 and word in keep else capitalize_first(word) for i, word in enumerate(words)
    )


# Particles that stay lowercase inside personal names
NAME_PARTICLES = frozenset({
    # Spanish
    "de", "del", "la", "las", "los", "y",
    # English
    "of", "and", "the",
    # French
    "du", "des", "le", "les", "et", "à", "au", "aux", "d'", "l'",
    # Portuguese
    "da", "do", "das", "dos", "e", "em", "ao", "aos", "na", "nos",
    # Italian
    "di", "della", "dei", "degli", "in", "al", "allo",
    # German
    "von", "zu", "zum", "zur", "am", "im", "der", "die", "das", "und", "bei",
    # Dutch
    "van", "den", "het", "en", "te", "op", "aan",
})  # fmt: skip


def person_name(value: Any, exceptions: Iterable[str] = NAME_PARTICLES) -> str:
    """Capitalize a personal name: ``"maría de la o"`` -> ``"María de la O"``."""
    return capitalize_words_except(value, exceptions)
