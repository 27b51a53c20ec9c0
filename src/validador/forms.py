"""Form lifecycle helpers — clear, lock, require, reset.

These are thin conveniences over the host document, independent of any
``Validator``. Unlike field registration, they are strict: pointing them
at a missing element raises ``ElementNotFoundError``.
"""

from validador.dom.document import Document
from validador.dom.element import Element
from validador.dom.selectors import Target, get_element_by_id, normalize_selectors
from validador.errors import NotAFormError
from validador.tracking import FORM_FIELDS, form_values

__all__ = [
    "clear_container",
    "clear_form",
    "form_values",
    "is_complete",
    "lock_container",
    "lock_inputs",
    "require_inputs",
    "reset_classes_and_errors",
    "unlock_container",
    "unlock_inputs",
    "unrequire_inputs",
]


def is_complete(document: Document, form: str | Element, selector: str = ".required, [required]") -> bool:
    """True when every field matching *selector* inside *form* has a value."""
    container = get_element_by_id(document, form)
    return all(el.get_value().strip() for el in container.query_selector_all(selector))


# ---------------------------------------------------------------------------
# Clearing
# ---------------------------------------------------------------------------


def clear_form(
    document: Document,
    form: str | Element,
    *,
    click_checkboxes: bool = False,
    default_radio: str | None = None,
) -> None:
    """Empty every control of a ``<form>``.

    Raises:
        NotAFormError: *form* exists but is not a ``<form>`` element.
    """
    element = get_element_by_id(document, form)
    if element.tag_name != "form":
        raise NotAFormError(form)
    clear_container(document, element, click_checkboxes=click_checkboxes, default_radio=default_radio)


def clear_container(
    document: Document,
    container: str | Element,
    *,
    click_checkboxes: bool = False,
    default_radio: str | None = None,
) -> None:
    """Empty every control inside any container, not only forms.

    - text inputs and textareas are set to ``""``
    - selects go back to their first option
    - radios are unchecked; with *default_radio*, each group then clicks
      the radio with that value (or its first radio)
    - checkboxes are unchecked; with *click_checkboxes*, checked ones are
      clicked so their listeners run
    """
    root = get_element_by_id(document, container)

    for control in root.query_selector_all(
        "input:not([type=radio]):not([type=checkbox]), textarea"
    ):
        control.set_value("")

    for select in root.query_selector_all("select"):
        first = select.query_selector("option")
        if select.multiple:
            for option in select.query_selector_all("option"):
                option.remove_attribute("selected")
        elif first is not None:
            select.set_value(first.get_attribute("value") or first.text.strip())

    radios = root.query_selector_all("input[type=radio]")
    for radio in radios:
        radio.set_checked(False)
    if default_radio is not None:
        groups: dict[str, list[Element]] = {}
        for radio in radios:
            if radio.name:
                groups.setdefault(radio.name, []).append(radio)
        for group in groups.values():
            match = next((r for r in group if r.get_value() == str(default_radio)), group[0])
            match.click()

    for checkbox in root.query_selector_all("input[type=checkbox]"):
        if click_checkboxes and checkbox.is_checked():
            checkbox.click()
        else:
            checkbox.set_checked(False)


# ---------------------------------------------------------------------------
# Locking and requiring
# ---------------------------------------------------------------------------


def _set_container_disabled(document: Document, selectors: Target, disabled: bool) -> None:
    for container in normalize_selectors(document, selectors):
        for control in container.query_selector_all(FORM_FIELDS):
            if disabled:
                control.set_attribute("disabled")
            else:
                control.remove_attribute("disabled")


def lock_container(document: Document, selectors: Target) -> None:
    """Disable every control inside the matched containers."""
    _set_container_disabled(document, selectors, True)


def unlock_container(document: Document, selectors: Target) -> None:
    _set_container_disabled(document, selectors, False)


def lock_inputs(document: Document, selectors: Target, attribute: str = "disabled") -> None:
    """Set a locking attribute (``disabled``, ``readonly``) on the matches."""
    for element in normalize_selectors(document, selectors):
        element.set_attribute(attribute)


def unlock_inputs(document: Document, selectors: Target, attribute: str = "disabled") -> None:
    for element in normalize_selectors(document, selectors):
        element.remove_attribute(attribute)


def require_inputs(document: Document, selectors: Target) -> None:
    for element in normalize_selectors(document, selectors):
        element.set_attribute("required")


def unrequire_inputs(document: Document, selectors: Target) -> None:
    for element in normalize_selectors(document, selectors):
        element.remove_attribute("required")


# ---------------------------------------------------------------------------
# Visual reset
# ---------------------------------------------------------------------------


def reset_classes_and_errors(
    document: Document,
    form: str | Element,
    remove: tuple[str, ...] | list[str] = (),
    add: tuple[str, ...] | list[str] = (),
    error_prefix: str = "error-",
) -> None:
    """Swap classes on a form's controls and empty its message containers.

    Message containers are the elements whose id starts with
    *error_prefix*, anywhere in the document.
    """
    root = get_element_by_id(document, form)
    for control in root.query_selector_all(FORM_FIELDS):
        control.remove_class(*remove)
        control.add_class(*add)

    for container in document.query_selector_all(f'[id^="{error_prefix}"]'):
        container.clear()
        container.set_attribute("hidden")
