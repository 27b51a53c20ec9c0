"""Output rendering — one renderer per output kind.

The validator picks a renderer once, at construction, from its
``OutputKind``. Dispatch is a plain dict lookup, no magic:

==================  =====================================================
``array``           no side effect; ``render()`` returns the errors
``console``         one ERROR record per error on ``validador.console``
``alert``           every message, newline-joined, in one ``alert()``
``html``            every message inside the ``message_container`` panel
``inputs``          each field's messages in its own container, plus the
                    field state classes
``short-circuit``   only the first error, through ``alert()``
==================  =====================================================

Renderers read the ``ErrorStore``; none of them mutate it. Rendering
twice with the same store leaves the same document.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from kida import Environment

from validador.config import OutputKind, ValidatorConfig
from validador.dom.document import Document
from validador.dom.element import Element, ElementHandle
from validador.registry import Field, FieldRegistry
from validador.store import ErrorStore, FieldError

logger = logging.getLogger("validador.rendering")
console_logger = logging.getLogger("validador.console")

MESSAGES_TEMPLATE = (
    "{% for message in messages %}"
    '<{{ tag }}{% if cls %} class="{{ cls }}"{% end %}>{{ message }}</{{ tag }}>'
    "{% end %}"
)

_env = Environment(autoescape=True)
_messages_template = _env.from_string(MESSAGES_TEMPLATE)


def render_messages(messages: Iterable[str], *, tag: str = "div", cls: str = "") -> str:
    """Render messages as sibling ``<tag class="cls">`` elements (escaped)."""
    return _messages_template.render({"messages": list(messages), "tag": tag, "cls": cls})


# ---------------------------------------------------------------------------
# Field state classes
# ---------------------------------------------------------------------------


def mark_field(elements: Iterable[ElementHandle], valid: bool, config: ValidatorConfig) -> None:
    """Put the success or the error class on every element of a group."""
    add, drop = (
        (config.input_success_class, config.input_error_class)
        if valid
        else (config.input_error_class, config.input_success_class)
    )
    for element in elements:
        element.remove_class(drop)
        element.add_class(add)


def unmark_field(elements: Iterable[ElementHandle], config: ValidatorConfig) -> None:
    for element in elements:
        element.remove_class(config.input_error_class, config.input_success_class)


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RenderContext:
    """What every renderer may look at."""

    document: Document
    config: ValidatorConfig
    fields: FieldRegistry


class Renderer:
    """Base renderer: nothing to show, nothing to clean up."""

    __slots__ = ("ctx",)

    def __init__(self, ctx: RenderContext) -> None:
        self.ctx = ctx

    def render(self, store: ErrorStore) -> list[FieldError] | None:
        return None

    def render_field(self, name: str, store: ErrorStore) -> None:
        """Refresh only the surface that belongs to *name*."""

    def clear(self) -> None:
        """Remove whatever this renderer put in the document."""


class ArrayRenderer(Renderer):
    __slots__ = ()

    def render(self, store: ErrorStore) -> list[FieldError]:
        return store.to_list()


class ConsoleRenderer(Renderer):
    __slots__ = ()

    def render(self, store: ErrorStore) -> None:
        for error in store:
            console_logger.error("%s: %s", error.field, error.message)

    def render_field(self, name: str, store: ErrorStore) -> None:
        for error in store.for_field(name):
            console_logger.error("%s: %s", error.field, error.message)


class AlertRenderer(Renderer):
    """All messages in one blocking alert. Silent per keystroke."""

    __slots__ = ()

    def render(self, store: ErrorStore) -> None:
        if store:
            self.ctx.document.window.alert("\n".join(store.messages()))


class ShortCircuitRenderer(Renderer):
    """Only the first error reaches the user."""

    __slots__ = ()

    def render(self, store: ErrorStore) -> None:
        first = store.first()
        if first is not None:
            self.ctx.document.window.alert(first.message)


class HtmlRenderer(Renderer):
    """Every message inside one panel, replacing its previous content."""

    __slots__ = ()

    def _panel(self) -> Element | None:
        panel = self.ctx.document.get_element_by_id(self.ctx.config.message_container)
        if panel is None:
            logger.warning("Message container #%s not found", self.ctx.config.message_container)
        return panel

    def render(self, store: ErrorStore) -> None:
        panel = self._panel()
        if panel is None:
            return
        config = self.ctx.config
        panel.inner_html = render_messages(
            store.messages(), tag=config.message_tag, cls=config.message_error_class
        )
        if store:
            panel.remove_class(config.message_success_class)
            panel.add_class(config.message_error_class)
        else:
            panel.remove_class(config.message_error_class)
            panel.add_class(config.message_success_class)

    def render_field(self, name: str, store: ErrorStore) -> None:
        # The panel is every field's surface
        self.render(store)

    def clear(self) -> None:
        panel = self.ctx.document.get_element_by_id(self.ctx.config.message_container)
        if panel is not None:
            panel.clear()
            panel.remove_class(self.ctx.config.message_error_class, self.ctx.config.message_success_class)


class InputsRenderer(Renderer):
    """Messages next to their own field, located by id convention."""

    __slots__ = ()

    def render(self, store: ErrorStore) -> None:
        for field in self.ctx.fields:
            self._render(field, store)

    def render_field(self, name: str, store: ErrorStore) -> None:
        field = self.ctx.fields.get(name)
        if field is not None:
            self._render(field, store)

    def clear(self) -> None:
        config = self.ctx.config
        for field in self.ctx.fields:
            container = self.ctx.document.get_element_by_id(config.message_id(field.name))
            if container is not None:
                container.clear()
                container.remove_class(config.message_error_class, config.message_success_class)

    def _render(self, field: Field, store: ErrorStore) -> None:
        config = self.ctx.config
        messages = [e.message for e in store.for_field(field.name)]
        mark_field(field.elements, not messages, config)

        container = self._container(field, create=bool(messages))
        if container is None:
            return
        container.inner_html = render_messages(messages, tag=config.message_tag)
        if messages:
            container.remove_attribute("hidden")
            container.remove_class(config.message_success_class)
            container.add_class(config.message_error_class)
        else:
            container.remove_class(config.message_error_class)
            container.add_class(config.message_success_class)

    def _container(self, field: Field, *, create: bool) -> Element | None:
        """Find the field's container; create it next to the field if asked."""
        config = self.ctx.config
        document = self.ctx.document
        container = document.get_element_by_id(config.message_id(field.name))
        if container is not None or not create:
            return container

        anchor = field.elements[-1]
        if not isinstance(anchor, Element):
            return None
        container = document.create_element(config.container_tag, {"id": config.message_id(field.name)})
        parent = anchor.parent
        if config.error_position == "after" or parent is None:
            anchor.insert_after(container)
        elif config.error_position == "append":
            parent.append(container)
        else:
            parent.prepend(container)
        return container


_RENDERERS: dict[OutputKind, type[Renderer]] = {
    OutputKind.ARRAY: ArrayRenderer,
    OutputKind.CONSOLE: ConsoleRenderer,
    OutputKind.ALERT: AlertRenderer,
    OutputKind.HTML: HtmlRenderer,
    OutputKind.INPUTS: InputsRenderer,
    OutputKind.SHORT_CIRCUIT: ShortCircuitRenderer,
}


def create_renderer(output: OutputKind, ctx: RenderContext) -> Renderer:
    return _RENDERERS[output](ctx)
