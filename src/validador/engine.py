"""The validator — fields, rule chains, error state, output.

Usage::

    from validador import Document, Validator
    from validador.predicates import email, text

    doc = Document(html)
    validator = (
        Validator(doc, "inputs")
        .register_field("email", [[text.required, "Required"], [email.generic, "Invalid email"]])
        .register_field("plan", [[text.required, "Choose a plan"]])
    )

    if not validator.validate_all():
        validator.render()

Evaluation policy:

- *short-circuit*: a field stops at its first failing rule, so it holds
  at most one error. Default for ``inputs`` and ``short-circuit``.
- *accumulate*: every failing rule of a field is reported, in
  declaration order. Default for the other kinds.

``ValidatorConfig.short_circuit`` overrides the default either way.
"""

import logging

from validador.config import OutputKind, ValidatorConfig
from validador.dom.document import Document
from validador.dom.element import Element
from validador.dom.selectors import field_name_for, is_css_selector, resolve_group
from validador.extraction import ExtractedValue, extract_value
from validador.reactivity import ReactivityBinder
from validador.registry import Field, FieldRegistry
from validador.rendering import RenderContext, create_renderer, mark_field, unmark_field
from validador.rules import Rule, RuleDeclaration, normalize_rules
from validador.store import ErrorStore, FieldError
from validador.tracking import FormTracker

logger = logging.getLogger("validador.engine")


class Validator:
    """Binds named form fields to rule chains and reports failures.

    Args:
        document: The host document the fields live in.
        output: Output kind (``OutputKind`` or its string value).
        config: Options; defaults to ``ValidatorConfig()``.
        tracker: Dirty-state tracker used by the tracking hooks. One is
            created for *document* when the hooks are on and none is given.

    Raises:
        ConfigurationError: Unknown output kind or inconsistent options.
    """

    __slots__ = (
        "_binder",
        "_config",
        "_document",
        "_errors",
        "_fields",
        "_output",
        "_renderer",
        "_short_circuit",
        "_tracker",
    )

    def __init__(
        self,
        document: Document,
        output: OutputKind | str = OutputKind.INPUTS,
        config: ValidatorConfig | None = None,
        *,
        tracker: FormTracker | None = None,
    ) -> None:
        self._output = OutputKind.parse(output)
        self._config = config or ValidatorConfig()
        self._document = document
        self._fields = FieldRegistry()
        self._errors = ErrorStore()
        self._binder = ReactivityBinder()
        self._short_circuit = self._config.stops_on_first_error(self._output)
        self._renderer = create_renderer(
            self._output, RenderContext(document=document, config=self._config, fields=self._fields)
        )

        cfg = self._config
        if tracker is None and (cfg.auto_track_dirty_state or cfg.warn_on_unsaved_exit):
            tracker = FormTracker(document)
        self._tracker = tracker
        if tracker is not None and cfg.form_id:
            if cfg.auto_track_dirty_state:
                tracker.start_tracking(cfg.form_id)
            if cfg.warn_on_unsaved_exit:
                tracker.warn_before_unload(cfg.form_id)

    def __repr__(self) -> str:
        return f"Validator(output={self._output.value!r}, fields={self._fields.names()!r})"

    # -- Properties ---------------------------------------------------------

    @property
    def output(self) -> OutputKind:
        return self._output

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    @property
    def document(self) -> Document:
        return self._document

    @property
    def fields(self) -> FieldRegistry:
        return self._fields

    @property
    def tracker(self) -> FormTracker | None:
        return self._tracker

    @property
    def short_circuit(self) -> bool:
        """Whether each field stops at its first failing rule."""
        return self._short_circuit

    # -- Registration -------------------------------------------------------

    def register_field(self, name: str | Element, rules: RuleDeclaration | Rule | None) -> "Validator":
        """Attach a rule chain to a field. Chainable.

        *name* is a field name, an ``#id``, any CSS selector, or an element.
        Nothing happens when no element matches: the field may simply not
        be rendered yet. Registering the same name again replaces the
        previous rules.
        """
        elements = resolve_group(self._document, name)
        if not elements:
            logger.debug("No element for field %r; registration skipped", name)
            return self

        field = Field(
            name=field_name_for(name, elements),
            rules=tuple(normalize_rules(rules)),
            elements=tuple(elements),
        )
        previous = self._fields.add(field)
        if previous is not None:
            # Errors of the old rule chain no longer describe this field
            self._errors.remove_field(field.name)
            self._binder.unbind(field.name)
            logger.debug("Field %r re-registered; previous rules replaced", field.name)

        if self._config.reactive:
            self._binder.bind(field, self._on_field_event)
        return self

    # Short alias for chained declarations: validator.input(...).input(...)
    input = register_field

    # -- Evaluation ---------------------------------------------------------

    def extract(self, field: Field) -> ExtractedValue:
        return extract_value(field.elements, trim=self._config.trim_values)

    def evaluate(self, field: Field) -> tuple[bool, list[FieldError]]:
        """Run *field*'s rule chain against its current value.

        Pure with respect to the error store. Exceptions raised by a
        predicate propagate: a broken rule is a bug, not a failure.
        """
        value = self.extract(field).value
        errors: list[FieldError] = []
        for rule in field.rules:
            if rule.passes(value):
                continue
            errors.append(FieldError(field=field.name, message=rule.message))
            if self._short_circuit:
                break
        return not errors, errors

    def evaluate_field(self, name: str) -> bool:
        """Re-validate one field, leaving every other field's errors alone.

        *name* may also be the selector the field was registered with.
        Returns True for names that are not registered.
        """
        field = self._lookup(name)
        if field is None:
            return True
        self._errors.remove_field(field.name)
        valid, errors = self.evaluate(field)
        self._errors.extend(errors)
        if self._output is not OutputKind.ARRAY:
            mark_field(field.elements, valid, self._config)
        return valid

    def _lookup(self, name: str) -> Field | None:
        field = self._fields.get(name)
        if field is None and is_css_selector(name):
            elements = resolve_group(self._document, name)
            if elements:
                field = self._fields.get(field_name_for(name, elements))
        return field

    def validate_all(self) -> bool:
        """Validate every field in registration order (the submit path)."""
        self._errors.clear()
        for field in self._fields:
            self.evaluate_field(field.name)
        return self._errors.is_empty()

    def is_valid(self) -> bool:
        """True when the error store is empty (no re-validation)."""
        return self._errors.is_empty()

    def get_errors(self) -> list[FieldError]:
        return self._errors.to_list()

    @property
    def errors(self) -> ErrorStore:
        return self._errors

    # -- Output -------------------------------------------------------------

    def render(self) -> list[FieldError] | None:
        """Show the current errors through the configured output kind.

        Returns the errors for ``array``, ``None`` for every other kind.
        """
        return self._renderer.render(self._errors)

    def render_field(self, name: str) -> None:
        """Refresh only *name*'s display surface."""
        field = self._lookup(name)
        self._renderer.render_field(field.name if field is not None else name, self._errors)

    def reset(self) -> "Validator":
        """Forget every error and return fields to their pre-validation look."""
        self._errors.clear()
        if self._output is not OutputKind.ARRAY:
            for field in self._fields:
                unmark_field(field.elements, self._config)
            self._renderer.clear()
        return self

    def close(self) -> None:
        """Detach every reactive listener."""
        self._binder.unbind_all()

    def _on_field_event(self, name: str) -> None:
        self.evaluate_field(name)
        self.render_field(name)
