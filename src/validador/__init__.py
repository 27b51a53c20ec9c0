"""Validador — form validation for DOM-style documents.

Binds named form fields to ordered ``(predicate, message)`` rules, keeps
per-field error state, and shows errors inline, in a panel, in an alert,
in the log, or hands them back as data.

Basic usage::

    from validador import Document, Validator
    from validador.predicates import email, text

    doc = Document(html)
    validator = Validator(doc, "inputs").register_field(
        "email",
        [[text.required, "Required"], [email.generic, "Invalid email"]],
    )

    if not validator.validate_all():
        validator.render()
"""

import importlib

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "Document",
    "Element",
    "ElementHandle",
    "ElementNotFoundError",
    "ErrorStore",
    "ExtractedValue",
    "FieldError",
    "FormTracker",
    "OutputKind",
    "Rule",
    "ValidadorError",
    "Validator",
    "ValidatorConfig",
    "Window",
    "normalize_rules",
]


# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "validador.errors",
    "Document": "validador.dom",
    "Element": "validador.dom",
    "ElementHandle": "validador.dom",
    "ElementNotFoundError": "validador.errors",
    "ErrorStore": "validador.store",
    "ExtractedValue": "validador.extraction",
    "FieldError": "validador.store",
    "FormTracker": "validador.tracking",
    "OutputKind": "validador.config",
    "Rule": "validador.rules",
    "ValidadorError": "validador.errors",
    "Validator": "validador.engine",
    "ValidatorConfig": "validador.config",
    "Window": "validador.dom",
    "normalize_rules": "validador.rules",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import validador`` fast (no BeautifulSoup or kida load) while
    providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_path), name)
