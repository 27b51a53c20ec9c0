"""Validator configuration.

ValidatorConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass
from enum import StrEnum

from validador.errors import ConfigurationError


class OutputKind(StrEnum):
    """Channels a validator can surface its errors through."""

    ARRAY = "array"
    CONSOLE = "console"
    ALERT = "alert"
    HTML = "html"
    INPUTS = "inputs"
    SHORT_CIRCUIT = "short-circuit"

    @classmethod
    def parse(cls, value: "OutputKind | str") -> "OutputKind":
        """Coerce a string to an ``OutputKind``.

        Raises:
            ConfigurationError: *value* names no known output kind.
        """
        try:
            return cls(value)
        except ValueError:
            known = ", ".join(k.value for k in cls)
            msg = f"Unknown output kind {value!r}. Expected one of: {known}"
            raise ConfigurationError(msg) from None


# Kinds where one message per field is all the user can see
SHORT_CIRCUIT_KINDS = frozenset({OutputKind.INPUTS, OutputKind.SHORT_CIRCUIT})

ERROR_POSITIONS = frozenset({"after", "append", "prepend"})


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Validator options. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ValidatorConfig(reactive=False, input_error_class="is-invalid")
    """

    # Reactivity
    reactive: bool = True

    # Field state classes, toggled on every element of the group
    input_error_class: str = "input-error"
    input_success_class: str = "input-success"

    # Message containers
    message_container: str = "errors"  # id of the panel used by the html kind
    message_error_class: str = "message-error"
    message_success_class: str = "message-success"
    message_tag: str = "div"
    message_id_prefix: str = "error-"  # per-field container id = prefix + field name
    container_tag: str = "span"  # tag of containers created on demand
    error_position: str = "after"  # after | append | prepend

    # Evaluation
    trim_values: bool = True
    short_circuit: bool | None = None  # None = decided by the output kind

    # Dirty-state tracking hooks
    auto_track_dirty_state: bool = False
    warn_on_unsaved_exit: bool = False
    form_id: str | None = None

    def __post_init__(self) -> None:
        if self.error_position not in ERROR_POSITIONS:
            allowed = ", ".join(sorted(ERROR_POSITIONS))
            msg = f"error_position must be one of: {allowed} (got {self.error_position!r})"
            raise ConfigurationError(msg)
        if (self.auto_track_dirty_state or self.warn_on_unsaved_exit) and not self.form_id:
            msg = "form_id is required when dirty-state tracking is enabled"
            raise ConfigurationError(msg)

    def message_id(self, field_name: str) -> str:
        """Id of the per-field message container for *field_name*."""
        return f"{self.message_id_prefix}{field_name}"

    def stops_on_first_error(self, output: OutputKind) -> bool:
        """Whether a field's rule chain stops at its first failure."""
        if self.short_circuit is not None:
            return self.short_circuit
        return output in SHORT_CIRCUIT_KINDS
