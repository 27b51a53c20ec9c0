"""Selector resolution — from what callers pass to the elements they mean.

Two families:

- ``resolve_group()`` / ``field_name_for()`` are lenient: the validator
  uses them at registration time, where "nothing matched" is a normal
  outcome (the field is simply not rendered yet).
- ``get_element()``, ``get_element_by_id()``, ``get_elements_by_name()``
  and ``normalize_selectors()`` back the form helpers and raise
  ``ElementNotFoundError`` on a strict miss.

Accepted targets: a field name (``"email"``), an id (``"#email"``), any CSS
selector supported by soupsieve (``".field input"``), an ``Element``, or an
iterable mixing those.
"""

from collections.abc import Iterable

from soupsieve import SelectorSyntaxError

from validador.dom.document import Document
from validador.dom.element import Element
from validador.errors import ElementNotFoundError

type Target = str | Element | Iterable[str | Element]

# Characters that make a string a CSS selector rather than a bare name
_SELECTOR_CHARS = frozenset("#.[]:> ,*~+()=")


def is_css_selector(value: str) -> bool:
    return any(ch in _SELECTOR_CHARS for ch in value)


def _expand_named(document: Document, element: Element) -> list[Element]:
    """Radio and checkbox groups share a name; return the whole group."""
    if element.name and element.type in ("radio", "checkbox"):
        group = document.get_elements_by_name(element.name)
        if group:
            return group
    return [element]


def resolve_group(document: Document, target: str | Element) -> list[Element]:
    """Find the element group a field declaration refers to.

    Returns an empty list when nothing matches. Never raises.
    """
    if isinstance(target, Element):
        return _expand_named(document, target)

    target = target.strip()
    if not target:
        return []

    if not is_css_selector(target):
        group = document.get_elements_by_name(target)
        if group:
            return group
        element = document.get_element_by_id(target)
        return _expand_named(document, element) if element is not None else []

    if target.startswith("#") and not is_css_selector(target[1:]):
        element = document.get_element_by_id(target[1:])
        return _expand_named(document, element) if element is not None else []

    try:
        return document.query_selector_all(target)
    except SelectorSyntaxError:
        return []


def field_name_for(target: str | Element, elements: list[Element]) -> str:
    """Registry key for a resolved group.

    A bare name is its own key. Selectors and handles fall back to the
    first element's ``name``, then its ``id``, then the selector text.
    """
    if isinstance(target, str) and not is_css_selector(target.strip()):
        return target.strip()
    first = elements[0] if elements else None
    if first is not None:
        if first.name:
            return first.name
        if first.id:
            return first.id
    return target.strip() if isinstance(target, str) else repr(target)


# ---------------------------------------------------------------------------
# Strict helpers
# ---------------------------------------------------------------------------


def get_element(document: Document, selector: str | Element) -> Element:
    """First element for a CSS selector, falling back to a ``name`` lookup."""
    if isinstance(selector, Element):
        return selector
    try:
        element = document.query_selector(selector)
    except SelectorSyntaxError:
        element = None
    if element is not None:
        return element
    if not selector.startswith(("#", ".")):
        group = document.get_elements_by_name(selector)
        if group:
            return group[0]
    raise ElementNotFoundError(selector)


def get_element_by_id(document: Document, element_id: str | Element) -> Element:
    """Element by id, with or without a leading ``#``."""
    if isinstance(element_id, Element):
        if element_id.id:
            return element_id
        raise ElementNotFoundError(element_id, "Element has no id")
    clean = element_id.removeprefix("#")
    element = document.get_element_by_id(clean)
    if element is None:
        raise ElementNotFoundError(element_id, f"No element with id {clean!r}")
    return element


def get_elements_by_name(document: Document, name: str) -> list[Element]:
    if not name or not name.strip():
        raise ElementNotFoundError(name, "A non-empty name is required")
    group = document.get_elements_by_name(name)
    if not group:
        raise ElementNotFoundError(name, f"No element with name {name!r}")
    return group


def normalize_selectors(document: Document, selectors: Target) -> list[Element]:
    """Flatten selectors and handles into unique elements, in order."""
    if isinstance(selectors, (str, Element)):
        selectors = [selectors]

    found: list[Element] = []
    for item in selectors:
        if isinstance(item, Element):
            found.append(item)
        elif isinstance(item, str):
            found.extend(document.query_selector_all(item))

    seen: set[int] = set()
    unique: list[Element] = []
    for element in found:
        if id(element) not in seen:
            seen.add(id(element))
            unique.append(element)
    return unique
