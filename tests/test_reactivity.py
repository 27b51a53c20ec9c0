"""Tests for reactive re-validation through DOM events."""

from validador.config import ValidatorConfig
from validador.dom import Document
from validador.engine import Validator
from validador.predicates import email, inputs, text
from validador.reactivity import TRIGGER_EVENTS, ReactivityBinder
from validador.registry import Field


def _email_validator(document: Document, output: str = "inputs") -> Validator:
    return Validator(document, output).register_field(
        "email", [[text.required, "Required"], [email.generic, "Invalid email"]]
    )


class TestReactiveValidator:
    def test_typing_revalidates_the_field(self, document: Document) -> None:
        validator = _email_validator(document)
        field = document.get_elements_by_name("email")[0]

        field.type_text("not-an-email")

        assert [e.message for e in validator.get_errors()] == ["Invalid email"]
        assert field.has_class("input-error")
        assert document.get_element_by_id("error-email").text == "Invalid email"

    def test_fixing_the_value_clears_the_message(self, document: Document) -> None:
        validator = _email_validator(document)
        field = document.get_elements_by_name("email")[0]
        field.type_text("nope")

        field.type_text("ada@example.com")

        assert validator.get_errors() == []
        assert field.has_class("input-success")
        assert document.get_element_by_id("error-email").text == ""

    def test_blur_triggers_validation(self, document: Document) -> None:
        validator = _email_validator(document)
        document.get_elements_by_name("email")[0].dispatch_event("blur")
        assert [e.message for e in validator.get_errors()] == ["Required"]

    def test_events_only_touch_their_field(self, document: Document) -> None:
        validator = (
            _email_validator(document)
            .register_field("username", [[text.required, "Username required"]])
        )
        document.get_elements_by_name("email")[0].type_text("x")

        assert validator.errors.for_field("username") == []
        assert document.get_element_by_id("error-username") is None

    def test_clicking_a_checkbox_revalidates_the_group(self, document: Document) -> None:
        validator = Validator(document, "array").register_field(
            "topics", [[inputs.min_checked, "Pick one", 1]]
        )
        box = document.get_elements_by_name("topics")[0]

        box.click()
        assert validator.get_errors() == []

        box.click()
        assert [e.message for e in validator.get_errors()] == ["Pick one"]

    def test_html_panel_follows_typing(self, document: Document) -> None:
        _email_validator(document, "html")
        document.get_elements_by_name("email")[0].type_text("nope")

        panel = document.get_element_by_id("errors")
        assert panel is not None
        assert [c.text for c in panel.children] == ["Invalid email"]

    def test_alert_stays_silent_while_typing(self, document: Document, alerts: list[str]) -> None:
        validator = _email_validator(document, "alert")
        document.get_elements_by_name("email")[0].type_text("nope")

        assert alerts == []
        assert len(validator.get_errors()) == 1

    def test_non_reactive_validator_ignores_events(self, document: Document) -> None:
        validator = Validator(document, "inputs", ValidatorConfig(reactive=False)).register_field(
            "email", [[text.required, "Required"]]
        )
        field = document.get_elements_by_name("email")[0]
        field.type_text("")

        assert validator.get_errors() == []
        assert field.listener_count() == 0

    def test_reregistration_does_not_stack_listeners(self, document: Document) -> None:
        validator = _email_validator(document)
        validator.register_field("email", [[text.required, "Required"]])
        field = document.get_elements_by_name("email")[0]
        assert field.listener_count() == len(TRIGGER_EVENTS)

    def test_close_detaches_listeners(self, document: Document) -> None:
        validator = _email_validator(document)
        validator.close()

        field = document.get_elements_by_name("email")[0]
        field.type_text("nope")

        assert field.listener_count() == 0
        assert validator.get_errors() == []


class TestReactivityBinder:
    def test_bind_and_unbind(self, document: Document) -> None:
        group = tuple(document.get_elements_by_name("plan"))
        calls: list[str] = []
        binder = ReactivityBinder()

        binder.bind(Field("plan", (), group), calls.append)
        group[1].click()
        assert calls == ["plan", "plan"]
        assert binder.is_bound("plan")

        assert binder.unbind("plan") is True
        assert binder.unbind("plan") is False
        assert all(r.listener_count() == 0 for r in group)

    def test_custom_events(self, document: Document) -> None:
        element = document.get_elements_by_name("bio")[0]
        calls: list[str] = []
        binder = ReactivityBinder(events=("keyup",))
        binder.bind(Field("bio", (), (element,)), calls.append)

        element.dispatch_event("input")
        element.dispatch_event("keyup")

        assert calls == ["bio"]
