"""Validador exception hierarchy.

Shared across the engine, the host document and the form helpers so every
module raises and catches the same types.

Only configuration mistakes and strict selector lookups raise. Rules that
fail are data (``FieldError``), not exceptions.
"""


class ValidadorError(Exception):
    """Base for all validador-specific errors."""


class ConfigurationError(ValidadorError):
    """Raised when a validator is constructed with invalid options.

    Typically an unknown output kind, caught at ``Validator(...)`` time.
    """


class ElementNotFoundError(ValidadorError, LookupError):
    """Raised by the strict lookup helpers when the target is missing.

    Field registration never raises this: a field without elements is
    skipped silently.
    """

    def __init__(self, selector: object, detail: str = "") -> None:
        self.selector = selector
        self.detail = detail or f"No element matches {selector!r}"
        super().__init__(self.detail)


class NotAFormError(ElementNotFoundError):
    """Raised when a form-only helper is pointed at something else."""

    def __init__(self, selector: object) -> None:
        super().__init__(selector, f"Element {selector!r} is not a <form>")
