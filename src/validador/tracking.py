"""Dirty-state tracking for forms.

One ``FormTracker`` per document, created by the caller and handed to
whoever needs it (usually a ``Validator``). Snapshots are kept per form
id, so several forms on one page track independently.

Usage::

    tracker = FormTracker(document)
    tracker.start_tracking("profile")
    tracker.warn_before_unload("profile")
    ...
    if tracker.has_changes("profile"):
        ...
"""

import logging
from collections.abc import Callable
from typing import Any

from validador.dom.document import Document
from validador.dom.element import Element
from validador.dom.events import Event
from validador.dom.selectors import get_element_by_id

logger = logging.getLogger("validador.tracking")

FORM_FIELDS = "input, select, textarea"


def form_values(document: Document, form: str | Element) -> str:
    """Concatenated values of every control in *form*.

    Checked state is part of the snapshot so toggling a checkbox or a
    radio counts as a change.
    """
    container = get_element_by_id(document, form)
    parts: list[str] = []
    for control in container.query_selector_all(FORM_FIELDS):
        if control.type in ("checkbox", "radio"):
            parts.append("1" if control.is_checked() else "0")
        elif control.type == "select-multiple":
            parts.append(",".join(control.selected_values()))
        else:
            parts.append(control.get_value())
    return "\x1f".join(parts)


class FormTracker:
    """Remembers initial form values and reports when they change."""

    __slots__ = ("_document", "_initial", "_unload_listeners")

    def __init__(self, document: Document) -> None:
        self._document = document
        self._initial: dict[str, str] = {}
        self._unload_listeners: dict[str, Callable[[Event], Any]] = {}

    @staticmethod
    def _key(form: str | Element) -> str:
        if isinstance(form, Element):
            return form.id or ""
        return form.removeprefix("#")

    def start_tracking(self, form: str | Element) -> None:
        """Snapshot *form*'s current values as its clean state."""
        self._initial[self._key(form)] = form_values(self._document, form)
        logger.debug("Tracking form %s", self._key(form))

    def reset(self, form: str | Element) -> None:
        """Accept the current values as the new clean state."""
        self.start_tracking(form)

    def is_tracking(self, form: str | Element) -> bool:
        return self._key(form) in self._initial

    def has_changes(self, form: str | Element) -> bool:
        """True when *form* differs from its snapshot.

        A form that was never snapshotted has no baseline and reports
        no changes.
        """
        initial = self._initial.get(self._key(form))
        if initial is None:
            return False
        return form_values(self._document, form) != initial

    def watch(self, form: str | Element, callback: Callable[[bool], Any]) -> None:
        """Call ``callback(has_changes)`` on every input/change in *form*."""
        element = get_element_by_id(self._document, form)

        def on_event(event: Event) -> None:
            callback(self.has_changes(form))

        element.add_event_listener("input", on_event)
        element.add_event_listener("change", on_event)

    def warn_before_unload(self, form: str | Element) -> None:
        """Block ``beforeunload`` while *form* has unsaved changes."""
        key = self._key(form)
        if key in self._unload_listeners:
            return

        def on_before_unload(event: Event) -> None:
            if self.has_changes(form):
                event.prevent_default()
                event.return_value = ""

        self._unload_listeners[key] = on_before_unload
        self._document.window.add_event_listener("beforeunload", on_before_unload)

    def stop_warning(self, form: str | Element) -> None:
        listener = self._unload_listeners.pop(self._key(form), None)
        if listener is not None:
            self._document.window.remove_event_listener("beforeunload", listener)
