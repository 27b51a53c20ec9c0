"""Field registry — one canonical entry per field name.

Registering a name twice replaces the first entry. The replacement keeps
the original position, so ``validate_all()`` order does not move when a
field is re-bound after the DOM changed.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from validador.dom.element import ElementHandle
from validador.rules import Rule


@dataclass(frozen=True, slots=True)
class Field:
    """A named validation target and its rule chain."""

    name: str
    rules: tuple[Rule, ...]
    elements: tuple[ElementHandle, ...]


class FieldRegistry:
    """Ordered mapping of field name -> ``Field``."""

    __slots__ = ("_fields",)

    def __init__(self) -> None:
        self._fields: dict[str, Field] = {}

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[Field]:
        return iter(list(self._fields.values()))

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def add(self, field: Field) -> Field | None:
        """Store *field*; returns the entry it replaced, if any."""
        previous = self._fields.get(field.name)
        self._fields[field.name] = field
        return previous

    def get(self, name: str) -> Field | None:
        return self._fields.get(name)

    def names(self) -> list[str]:
        return list(self._fields)

    def elements(self) -> Iterator[ElementHandle]:
        """Every element of every field, in registration order."""
        for field in self._fields.values():
            yield from field.elements
