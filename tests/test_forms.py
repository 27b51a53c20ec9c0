"""Tests for validador.forms — clear, lock, require and reset helpers."""

import pytest

from validador.dom import Document
from validador.errors import ElementNotFoundError, NotAFormError
from validador.forms import (
    clear_container,
    clear_form,
    is_complete,
    lock_container,
    lock_inputs,
    require_inputs,
    reset_classes_and_errors,
    unlock_container,
    unlock_inputs,
    unrequire_inputs,
)


def _fill(document: Document) -> None:
    document.get_elements_by_name("username")[0].set_value("ada")
    document.get_elements_by_name("bio")[0].set_value("hello")
    document.get_elements_by_name("country")[0].set_value("pe")
    document.get_elements_by_name("plan")[1].set_checked(True)
    document.get_elements_by_name("topics")[0].set_checked(True)


# ---------------------------------------------------------------------------
# Completeness
# ---------------------------------------------------------------------------


class TestIsComplete:
    def test_required_fields(self, document: Document) -> None:
        require_inputs(document, ["input[name=username]", "textarea"])
        assert is_complete(document, "signup") is False

        _fill(document)
        assert is_complete(document, "signup") is True

    def test_no_required_fields(self, document: Document) -> None:
        assert is_complete(document, "signup") is True


# ---------------------------------------------------------------------------
# Clearing
# ---------------------------------------------------------------------------


class TestClearForm:
    def test_clears_every_control(self, document: Document) -> None:
        _fill(document)
        clear_form(document, "signup")

        assert document.get_elements_by_name("username")[0].get_value() == ""
        assert document.get_elements_by_name("bio")[0].get_value() == ""
        assert document.get_elements_by_name("country")[0].get_value() == "0"
        assert not any(r.is_checked() for r in document.get_elements_by_name("plan"))
        assert not any(c.is_checked() for c in document.get_elements_by_name("topics"))

    def test_default_radio(self, document: Document) -> None:
        _fill(document)
        clear_form(document, "signup", default_radio="free")
        free, pro = document.get_elements_by_name("plan")
        assert free.is_checked()
        assert not pro.is_checked()

    def test_click_checkboxes_fires_listeners(self, document: Document) -> None:
        _fill(document)
        changes: list[str] = []
        document.get_elements_by_name("topics")[0].add_event_listener("change", lambda e: changes.append("x"))

        clear_form(document, "signup", click_checkboxes=True)

        assert changes == ["x"]
        assert not document.get_elements_by_name("topics")[0].is_checked()

    def test_not_a_form(self, document: Document) -> None:
        with pytest.raises(NotAFormError):
            clear_form(document, "errors")

    def test_missing_form(self, document: Document) -> None:
        with pytest.raises(ElementNotFoundError):
            clear_form(document, "nope")

    def test_clear_container_accepts_any_element(self, document: Document) -> None:
        _fill(document)
        row = document.get_elements_by_name("username")[0].parent
        assert row is not None
        row.set_attribute("id", "row-username")

        clear_container(document, "row-username")

        assert document.get_elements_by_name("username")[0].get_value() == ""
        assert document.get_elements_by_name("bio")[0].get_value() == "hello"


# ---------------------------------------------------------------------------
# Locking and requiring
# ---------------------------------------------------------------------------


class TestLocking:
    def test_lock_and_unlock_container(self, document: Document) -> None:
        lock_container(document, "#signup")
        controls = document.query_selector_all("#signup input, #signup select, #signup textarea")
        assert all(c.has_attribute("disabled") for c in controls)

        unlock_container(document, "#signup")
        assert not any(c.has_attribute("disabled") for c in controls)

    def test_lock_inputs_with_readonly(self, document: Document) -> None:
        lock_inputs(document, "input[name=email]", attribute="readonly")
        email = document.get_elements_by_name("email")[0]
        assert email.has_attribute("readonly")
        assert not email.has_attribute("disabled")

        unlock_inputs(document, "input[name=email]", attribute="readonly")
        assert not email.has_attribute("readonly")

    def test_require_and_unrequire(self, document: Document) -> None:
        require_inputs(document, "textarea")
        bio = document.get_elements_by_name("bio")[0]
        assert bio.has_attribute("required")

        unrequire_inputs(document, bio)
        assert not bio.has_attribute("required")


# ---------------------------------------------------------------------------
# Visual reset
# ---------------------------------------------------------------------------


class TestResetClassesAndErrors:
    def test_swaps_classes_and_hides_containers(self, document: Document) -> None:
        email = document.get_elements_by_name("email")[0]
        email.add_class("input-error")
        container = document.get_element_by_id("error-email")
        assert container is not None
        container.text = "Required"

        reset_classes_and_errors(document, "signup", remove=["input-error"], add=["pristine"])

        assert email.classes == ("pristine",)
        assert container.text == ""
        assert container.has_attribute("hidden")
