"""Rule declarations and their normalization.

A rule is a ``(predicate, message)`` pair: the message is reported when
the predicate returns falsy for the field's value. Callers may declare
rules in three shapes, all normalized to one ordered ``list[Rule]``::

    from validador.predicates import email, text

    # a. list of entries; extra items are curried into the predicate
    [[text.required, "Required"], [text.min_length, "Too short", 3]]

    # b. builder callback; calls keep their order
    lambda add: add([text.required, "Required"])([email.generic, "Invalid"])

    # c. mapping; values in insertion order, keys are only labels
    {"required": [text.required, "Required"], "format": [email.generic, "Invalid"]}

Malformed entries are dropped, never raised: a typo in one rule must not
keep the rest of the form from validating.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger("validador.rules")

type Predicate = Callable[[Any], Any]
type RuleEntry = Sequence[Any]
type RuleBuilder = Callable[[Callable[[RuleEntry], Any]], Any]
type RuleDeclaration = Sequence[Any] | Mapping[str, Any] | RuleBuilder

DEFAULT_MESSAGE = "Custom rule not satisfied"


@dataclass(frozen=True, slots=True)
class Rule:
    """One check of a field's rule chain."""

    predicate: Predicate
    message: str

    def passes(self, value: Any) -> bool:
        """Run the predicate. Exceptions from the predicate propagate."""
        return bool(self.predicate(value))


def _curry(predicate: Predicate, extra: tuple[Any, ...]) -> Predicate:
    if not extra:
        return predicate

    def bound(value: Any) -> Any:
        return predicate(value, *extra)

    bound.__name__ = getattr(predicate, "__name__", "rule")
    bound.__qualname__ = getattr(predicate, "__qualname__", bound.__name__)
    return bound


def is_rule_entry(candidate: Any) -> bool:
    """True for ``[predicate, message?, *args]`` shaped values."""
    return (
        isinstance(candidate, Sequence)
        and not isinstance(candidate, (str, bytes))
        and len(candidate) > 0
        and callable(candidate[0])
    )


def build_rule(entry: RuleEntry | Rule) -> Rule | None:
    """Turn one entry into a ``Rule``; ``None`` when the shape is wrong."""
    if isinstance(entry, Rule):
        return entry
    if not is_rule_entry(entry):
        logger.debug("Skipping malformed rule entry: %r", entry)
        return None
    predicate = entry[0]
    message = entry[1] if len(entry) > 1 else None
    if message is not None and not isinstance(message, str):
        # [pred, pred] and the like: the second slot must be the message
        logger.debug("Skipping rule entry with a non-text message: %r", entry)
        return None
    if not message:
        message = DEFAULT_MESSAGE
    return Rule(predicate=_curry(predicate, tuple(entry[2:])), message=message)


def normalize_rules(declaration: RuleDeclaration | Rule | None) -> list[Rule]:
    """Canonicalize any accepted rule declaration shape."""
    if declaration is None:
        return []

    if isinstance(declaration, Rule):
        return [declaration]

    if isinstance(declaration, Mapping):
        return _collect(v for v in declaration.values() if isinstance(v, Rule) or is_rule_entry(v))

    if callable(declaration):
        collected: list[Rule] = []

        def add(entry: RuleEntry) -> Callable[[RuleEntry], Any]:
            rule = build_rule(entry)
            if rule is not None:
                collected.append(rule)
            return add

        declaration(add)
        return collected

    if isinstance(declaration, Sequence) and not isinstance(declaration, (str, bytes)):
        # A single bare entry is accepted without the outer list
        if is_rule_entry(declaration):
            return _collect([declaration])
        return _collect(declaration)

    logger.debug("Ignoring rule declaration of type %s", type(declaration).__name__)
    return []


def _collect(entries: Any) -> list[Rule]:
    rules: list[Rule] = []
    for entry in entries:
        rule = build_rule(entry)
        if rule is not None:
            rules.append(rule)
    return rules
