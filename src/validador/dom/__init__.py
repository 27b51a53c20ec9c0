"""Host document model — elements, events, selectors.

The validator never reaches into BeautifulSoup directly; it goes through
``ElementHandle`` and the lookups on ``Document``.
"""

from validador.dom.document import Document, Window
from validador.dom.element import Element, ElementHandle
from validador.dom.events import Event, EventTarget, Listener
from validador.dom.selectors import (
    field_name_for,
    get_element,
    get_element_by_id,
    get_elements_by_name,
    normalize_selectors,
    resolve_group,
)

__all__ = [
    "Document",
    "Element",
    "ElementHandle",
    "Event",
    "EventTarget",
    "Listener",
    "Window",
    "field_name_for",
    "get_element",
    "get_element_by_id",
    "get_elements_by_name",
    "normalize_selectors",
    "resolve_group",
]
