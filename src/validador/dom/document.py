"""In-memory host document and window.

``Document`` parses markup with BeautifulSoup (``html.parser``) and hands
out cached ``Element`` wrappers. ``Window`` owns the blocking surfaces:
``alert()`` and the ``beforeunload`` hook.

Usage::

    doc = Document('<form id="signup"><input name="email"></form>')
    email = doc.get_elements_by_name("email")[0]
    email.type_text("ada@example.com")
"""

import logging
from collections.abc import Callable

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag

from validador.dom.element import Element
from validador.dom.events import Event, EventTarget

logger = logging.getLogger("validador.dom")


class Window(EventTarget):
    """Top-level browsing context.

    ``alert()`` records every message in ``alerts`` and forwards it to
    *alert_handler* when one is given (a GUI prompt, a test spy).
    """

    __slots__ = ("_alert_handler", "alerts")

    def __init__(self, alert_handler: Callable[[str], object] | None = None) -> None:
        super().__init__()
        self._alert_handler = alert_handler
        self.alerts: list[str] = []

    def alert(self, message: str) -> None:
        self.alerts.append(message)
        logger.debug("alert: %s", message)
        if self._alert_handler is not None:
            self._alert_handler(message)

    def dispatch_event(self, event: Event | str) -> Event:
        if isinstance(event, str):
            event = Event(event, bubbles=False)
        event.target = self
        self._invoke_listeners(event)
        return event

    def request_unload(self) -> bool:
        """Fire ``beforeunload``; True when navigation may proceed."""
        event = self.dispatch_event(Event("beforeunload", bubbles=False))
        return not (event.default_prevented or event.return_value is not None)


class Document:
    """A parsed HTML tree with DOM-style lookups."""

    __slots__ = ("_handles", "soup", "window")

    def __init__(self, markup: str = "", *, window: Window | None = None) -> None:
        self.soup = BeautifulSoup(markup, "html.parser")
        self.window = window if window is not None else Window()
        # id(tag) -> wrapper; the wrapper holds the tag, so ids stay unique
        self._handles: dict[int, Element] = {}

    def __str__(self) -> str:
        return str(self.soup)

    def wrap(self, tag: Tag) -> Element:
        """Return the one ``Element`` for *tag*, creating it on first use."""
        handle = self._handles.get(id(tag))
        if handle is None:
            handle = Element(self, tag)
            self._handles[id(tag)] = handle
        return handle

    # -- Lookups ------------------------------------------------------------

    def get_element_by_id(self, element_id: str) -> Element | None:
        tag = self.soup.find(id=element_id)
        return self.wrap(tag) if isinstance(tag, Tag) else None

    def get_elements_by_name(self, name: str) -> list[Element]:
        return [self.wrap(t) for t in self.soup.find_all(attrs={"name": name})]

    def query_selector(self, selector: str) -> Element | None:
        tag = self.soup.select_one(selector)
        return self.wrap(tag) if tag is not None else None

    def query_selector_all(self, selector: str) -> list[Element]:
        return [self.wrap(t) for t in self.soup.select(selector)]

    # -- Construction -------------------------------------------------------

    def create_element(
        self,
        tag_name: str,
        attrs: dict[str, str] | None = None,
        text: str = "",
    ) -> Element:
        tag = self.soup.new_tag(tag_name, attrs=attrs or {})
        if text:
            tag.string = text
        return self.wrap(tag)

    def parse_fragment(self, markup: str) -> list[PageElement]:
        """Parse *markup* and detach its top-level nodes for insertion."""
        fragment = BeautifulSoup(markup, "html.parser")
        return [node.extract() for node in list(fragment.contents)]
