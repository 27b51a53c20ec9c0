"""Reactive re-validation on value-changing DOM events.

Each bound field gets one listener per trigger event on every element of
its group. The listener re-runs a callback scoped to that field; events
are not debounced or coalesced.
"""

from collections.abc import Callable
from typing import Any

from validador.dom.element import ElementHandle
from validador.dom.events import Event
from validador.registry import Field

TRIGGER_EVENTS = ("input", "change", "blur")


class ReactivityBinder:
    """Attaches and detaches per-field listeners."""

    __slots__ = ("_bindings", "_events")

    def __init__(self, events: tuple[str, ...] = TRIGGER_EVENTS) -> None:
        self._events = events
        # field name -> (elements, listener)
        self._bindings: dict[str, tuple[tuple[ElementHandle, ...], Callable[[Event], Any]]] = {}

    def bind(self, field: Field, callback: Callable[[str], Any]) -> None:
        """Call ``callback(field.name)`` whenever the field's value may change.

        Re-binding a field first drops its previous listeners.
        """
        self.unbind(field.name)
        name = field.name

        def on_event(event: Event) -> None:
            callback(name)

        for element in field.elements:
            for event_type in self._events:
                element.add_event_listener(event_type, on_event)
        self._bindings[name] = (field.elements, on_event)

    def unbind(self, name: str) -> bool:
        binding = self._bindings.pop(name, None)
        if binding is None:
            return False
        elements, listener = binding
        for element in elements:
            for event_type in self._events:
                element.remove_event_listener(event_type, listener)
        return True

    def unbind_all(self) -> None:
        for name in list(self._bindings):
            self.unbind(name)

    def is_bound(self, name: str) -> bool:
        return name in self._bindings
