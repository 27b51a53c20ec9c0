"""Element handles over a BeautifulSoup tree.

``ElementHandle`` is the only surface the validation core touches: value
access, checked state, class toggling and listeners. ``Element`` is the
in-memory implementation backed by a ``bs4.Tag``; a different host only
has to provide the same protocol.

Wrappers are cached per document (see ``Document.wrap``) so the same tag
always yields the same ``Element`` and listeners survive lookups.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from bs4 import Tag

from validador.dom.events import Event, EventTarget, Listener

if TYPE_CHECKING:
    from validador.dom.document import Document

# Elements that carry a form value
FORM_CONTROL_TAGS = frozenset({"input", "select", "textarea"})


@runtime_checkable
class ElementHandle(Protocol):
    """What the validator needs from a host element.

    Defined structurally so a browser bridge or a test double can stand in
    for ``Element`` without inheriting from it.
    """

    @property
    def name(self) -> str | None: ...
    @property
    def type(self) -> str: ...
    def get_value(self) -> str: ...
    def set_value(self, value: str) -> None: ...
    def is_checked(self) -> bool: ...
    def selected_values(self) -> list[str]: ...
    def has_class(self, name: str) -> bool: ...
    def add_class(self, *names: str) -> None: ...
    def remove_class(self, *names: str) -> None: ...
    def add_event_listener(self, event_type: str, listener: Listener) -> None: ...
    def remove_event_listener(self, event_type: str, listener: Listener) -> None: ...


class Element(EventTarget):
    """A live handle on one tag of a ``Document``."""

    __slots__ = ("_document", "_tag")

    def __init__(self, document: Document, tag: Tag) -> None:
        super().__init__()
        self._document = document
        self._tag = tag

    def __repr__(self) -> str:
        bits = [self.tag_name]
        if self.id:
            bits.append(f"#{self.id}")
        if self.name:
            bits.append(f"[name={self.name!r}]")
        return f"<Element {''.join(bits)}>"

    # -- Identity -----------------------------------------------------------

    @property
    def document(self) -> Document:
        return self._document

    @property
    def tag(self) -> Tag:
        """The underlying ``bs4.Tag``."""
        return self._tag

    @property
    def tag_name(self) -> str:
        return self._tag.name

    @property
    def id(self) -> str | None:
        value = self._tag.get("id")
        return str(value) if value else None

    @property
    def name(self) -> str | None:
        value = self._tag.get("name")
        return str(value) if value else None

    @property
    def type(self) -> str:
        """Control type, following the browser's ``element.type`` values."""
        tag_name = self._tag.name
        if tag_name == "input":
            return str(self._tag.get("type") or "text").lower()
        if tag_name == "select":
            return "select-multiple" if self.multiple else "select-one"
        return tag_name

    @property
    def multiple(self) -> bool:
        return self._tag.has_attr("multiple")

    @property
    def is_form_control(self) -> bool:
        return self._tag.name in FORM_CONTROL_TAGS

    # -- Value access (ElementHandle) ---------------------------------------

    def get_value(self) -> str:
        tag_name = self._tag.name
        if tag_name == "textarea":
            return self._tag.get_text()
        if tag_name == "select":
            selected = self.selected_values()
            if selected:
                return selected[0]
            options = self._options()
            # A single select shows its first option when nothing is marked
            if options and not self.multiple:
                return _option_value(options[0])
            return ""
        value = self._tag.get("value")
        if value is None:
            # Unvalued checkboxes and radios submit "on"
            return "on" if self.type in ("checkbox", "radio") else ""
        return str(value)

    def set_value(self, value: str) -> None:
        tag_name = self._tag.name
        if tag_name == "textarea":
            self._tag.string = value
        elif tag_name == "select":
            for option in self._options():
                if _option_value(option) == value:
                    option["selected"] = ""
                elif option.has_attr("selected"):
                    del option["selected"]
        else:
            self._tag["value"] = value

    def is_checked(self) -> bool:
        return self._tag.has_attr("checked")

    def set_checked(self, checked: bool) -> None:
        if checked:
            self._tag["checked"] = ""
            if self.type == "radio" and self.name:
                for other in self._document.get_elements_by_name(self.name):
                    if other is not self and other.type == "radio":
                        other.set_checked(False)
        elif self._tag.has_attr("checked"):
            del self._tag["checked"]

    def selected_values(self) -> list[str]:
        """Values of the marked ``<option>`` children (select only)."""
        if self._tag.name != "select":
            return []
        return [_option_value(o) for o in self._options() if o.has_attr("selected")]

    def _options(self) -> list[Tag]:
        return list(self._tag.find_all("option"))

    # -- Attributes and classes ---------------------------------------------

    def get_attribute(self, name: str) -> str | None:
        value = self._tag.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def set_attribute(self, name: str, value: object = "") -> None:
        self._tag[name] = "" if value is True else str(value)

    def remove_attribute(self, name: str) -> None:
        if self._tag.has_attr(name):
            del self._tag[name]

    def has_attribute(self, name: str) -> bool:
        return self._tag.has_attr(name)

    @property
    def classes(self) -> tuple[str, ...]:
        value = self._tag.get("class") or []
        if isinstance(value, str):
            value = value.split()
        return tuple(value)

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def add_class(self, *names: str) -> None:
        current = list(self.classes)
        current.extend(n for n in names if n and n not in current)
        self._set_classes(current)

    def remove_class(self, *names: str) -> None:
        self._set_classes([c for c in self.classes if c not in names])

    def toggle_class(self, name: str, force: bool | None = None) -> bool:
        """Toggle *name*; returns whether the class is present afterwards."""
        present = self.has_class(name) if force is None else not force
        if present:
            self.remove_class(name)
        else:
            self.add_class(name)
        return not present

    def _set_classes(self, classes: list[str]) -> None:
        if classes:
            self._tag["class"] = classes
        elif self._tag.has_attr("class"):
            del self._tag["class"]

    # -- Content ------------------------------------------------------------

    @property
    def text(self) -> str:
        return self._tag.get_text()

    @text.setter
    def text(self, value: str) -> None:
        self._tag.clear()
        if value:
            self._tag.append(value)

    @property
    def inner_html(self) -> str:
        return self._tag.decode_contents()

    @inner_html.setter
    def inner_html(self, markup: str) -> None:
        self._tag.clear()
        for node in self._document.parse_fragment(markup):
            self._tag.append(node)

    def clear(self) -> None:
        self._tag.clear()

    @property
    def children(self) -> list[Element]:
        return [self._document.wrap(c) for c in self._tag.children if isinstance(c, Tag)]

    @property
    def parent(self) -> Element | None:
        parent = self._tag.parent
        if parent is None or parent.name == "[document]":
            return None
        return self._document.wrap(parent)

    def ancestors(self) -> Iterator[Element]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def append(self, child: Element) -> None:
        self._tag.append(child.tag.extract())

    def prepend(self, child: Element) -> None:
        self._tag.insert(0, child.tag.extract())

    def insert_after(self, sibling: Element) -> None:
        """Place *sibling* right after this element."""
        self._tag.insert_after(sibling.tag.extract())

    def remove(self) -> None:
        self._tag.extract()

    def query_selector_all(self, selector: str) -> list[Element]:
        return [self._document.wrap(t) for t in self._tag.select(selector)]

    def query_selector(self, selector: str) -> Element | None:
        found = self._tag.select_one(selector)
        return self._document.wrap(found) if found is not None else None

    def matches(self, selector: str) -> bool:
        return self._tag.css.match(selector)

    # -- Events -------------------------------------------------------------

    def dispatch_event(self, event: Event | str) -> Event:
        """Dispatch *event* here, then bubble through the ancestors."""
        if isinstance(event, str):
            event = Event(event)
        event.target = self
        self._invoke_listeners(event)
        if event.bubbles:
            for ancestor in self.ancestors():
                if event.propagation_stopped:
                    break
                ancestor._invoke_listeners(event)
        return event

    def click(self) -> None:
        """Simulate a user click: flip checked state and fire the events."""
        if self.type == "checkbox":
            self.set_checked(not self.is_checked())
        elif self.type == "radio":
            self.set_checked(True)
        self.dispatch_event("click")
        if self.type in ("checkbox", "radio"):
            self.dispatch_event("input")
            self.dispatch_event("change")

    def type_text(self, value: str) -> None:
        """Simulate typing: set the value and fire ``input`` then ``change``."""
        self.set_value(value)
        self.dispatch_event("input")
        self.dispatch_event("change")


def _option_value(option: Tag) -> str:
    value = option.get("value")
    if value is None:
        return option.get_text().strip()
    return str(value)
