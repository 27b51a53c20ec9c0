"""Error store — the ordered record of which rules failed.

Order is insertion order. ``validate_all()`` rebuilds the store field by
field in registration order, so ``first()`` is the first failure of the
first invalid field. Per-field re-validation drops that field's entries
and appends the new ones, leaving every other field alone.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FieldError:
    """A failed rule: which field, and the message to show."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ErrorStore:
    """Mutable, ordered collection of ``FieldError``.

    Falsy when empty, so ``if not store:`` reads as "no errors".
    """

    __slots__ = ("_errors",)

    def __init__(self, errors: Iterable[FieldError] = ()) -> None:
        self._errors: list[FieldError] = list(errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[FieldError]:
        return iter(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __repr__(self) -> str:
        return f"ErrorStore({self._errors!r})"

    def append(self, error: FieldError) -> None:
        self._errors.append(error)

    def extend(self, errors: Iterable[FieldError]) -> None:
        self._errors.extend(errors)

    def remove_field(self, field: str) -> int:
        """Drop every error of *field*; returns how many were removed."""
        kept = [e for e in self._errors if e.field != field]
        removed = len(self._errors) - len(kept)
        self._errors = kept
        return removed

    def clear(self) -> None:
        self._errors.clear()

    def is_empty(self) -> bool:
        return not self._errors

    def to_list(self) -> list[FieldError]:
        """A copy of the errors, safe for callers to keep or mutate."""
        return list(self._errors)

    def for_field(self, field: str) -> list[FieldError]:
        return [e for e in self._errors if e.field == field]

    def messages(self) -> list[str]:
        return [e.message for e in self._errors]

    def first(self) -> FieldError | None:
        return self._errors[0] if self._errors else None

    def as_dict(self) -> dict[str, list[str]]:
        """Field -> messages, the shape templates usually want."""
        grouped: dict[str, list[str]] = {}
        for error in self._errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped
