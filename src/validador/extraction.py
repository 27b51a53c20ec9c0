"""Value extraction — turn an element group into the value rules compare.

The shape depends on the group, not on the caller:

- radio group       -> ``ExtractedValue("radio", "<checked value>" | None)``
- checkbox group    -> ``ExtractedValue("checkbox", [<checked values>])``
- ``<select multiple>`` -> ``ExtractedValue("multiple", [<selected values>])``
- anything else     -> ``ExtractedValue("single", "<value>")``

Extraction goes through ``ElementHandle`` only, so it works for any host.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from validador.dom.element import ElementHandle

type ValueKind = Literal["single", "radio", "checkbox", "multiple"]


@dataclass(frozen=True, slots=True)
class ExtractedValue:
    """A field's current value plus the kind of group it came from."""

    kind: ValueKind
    value: str | list[str] | None


def extract_value(elements: Sequence[ElementHandle], *, trim: bool = True) -> ExtractedValue:
    """Read the comparable value of a field's element group.

    Args:
        elements: The field's element group, in document order.
        trim: Strip surrounding whitespace from single values.
    """
    if not elements:
        return ExtractedValue("single", "")

    types = {el.type for el in elements}

    if types == {"radio"}:
        checked = next((el for el in elements if el.is_checked()), None)
        return ExtractedValue("radio", checked.get_value() if checked is not None else None)

    if types == {"checkbox"}:
        return ExtractedValue("checkbox", [el.get_value() for el in elements if el.is_checked()])

    first = elements[0]
    if first.type == "select-multiple":
        return ExtractedValue("multiple", first.selected_values())

    value = first.get_value()
    return ExtractedValue("single", value.strip() if trim else value)
