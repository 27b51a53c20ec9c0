"""Predicate library — pure ``(value, *args) -> bool`` checks.

Usage::

    from validador.predicates import email, numbers, phones, text

    validator.register_field("age", [
        [text.required, "Age is required"],
        [numbers.integer, "Whole years only"],
        [numbers.between, "Between 18 and 120", 18, 120],
    ])

The validator treats every predicate as a black box: it passes the
extracted value and reads back a boolean. Any callable of that shape
works as a custom rule.
"""

from validador.predicates import (
    booleans,
    custom,
    dates,
    email,
    identity,
    inputs,
    numbers,
    passwords,
    phones,
    text,
)

__all__ = [
    "booleans",
    "custom",
    "dates",
    "email",
    "identity",
    "inputs",
    "numbers",
    "passwords",
    "phones",
    "text",
]
