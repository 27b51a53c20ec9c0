"""Synchronous DOM-style events.

``EventTarget`` keeps per-type listener lists and dispatches to them in
registration order. Dispatch runs every listener to completion before
returning; there is no queue and no scheduling.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

type Listener = Callable[["Event"], Any]


@dataclass(slots=True)
class Event:
    """A dispatched event.

    Mutable on purpose: listeners call ``prevent_default()`` or set
    ``return_value`` (the ``beforeunload`` convention) and the dispatcher
    reads the result back.
    """

    type: str
    target: Any = None
    bubbles: bool = True
    current_target: Any = None
    default_prevented: bool = False
    propagation_stopped: bool = False
    return_value: str | None = None
    detail: dict[str, Any] = field(default_factory=dict)

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


class EventTarget:
    """Listener bookkeeping shared by elements and the window."""

    __slots__ = ("_listeners",)

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def add_event_listener(self, event_type: str, listener: Listener) -> None:
        """Register *listener* for *event_type*. Duplicates are ignored."""
        listeners = self._listeners.setdefault(event_type, [])
        if listener not in listeners:
            listeners.append(listener)

    def remove_event_listener(self, event_type: str, listener: Listener) -> None:
        listeners = self._listeners.get(event_type)
        if listeners and listener in listeners:
            listeners.remove(listener)

    def listener_count(self, event_type: str | None = None) -> int:
        """Number of listeners for one type, or for all types."""
        if event_type is not None:
            return len(self._listeners.get(event_type, ()))
        return sum(len(v) for v in self._listeners.values())

    def _invoke_listeners(self, event: Event) -> None:
        event.current_target = self
        # Copy: a listener may remove itself while we iterate
        for listener in list(self._listeners.get(event.type, ())):
            listener(event)
