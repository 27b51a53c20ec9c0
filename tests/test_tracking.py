"""Tests for validador.tracking — dirty-state snapshots and unload guard."""

import pytest

from validador.dom import Document
from validador.errors import ElementNotFoundError
from validador.tracking import FormTracker, form_values


class TestFormValues:
    def test_checked_state_is_part_of_the_snapshot(self, document: Document) -> None:
        before = form_values(document, "signup")
        document.get_elements_by_name("topics")[0].set_checked(True)
        assert form_values(document, "signup") != before

    def test_missing_form_raises(self, document: Document) -> None:
        with pytest.raises(ElementNotFoundError):
            form_values(document, "nope")


class TestFormTracker:
    def test_untracked_form_has_no_changes(self, document: Document) -> None:
        tracker = FormTracker(document)
        document.get_elements_by_name("email")[0].set_value("x")
        assert tracker.is_tracking("signup") is False
        assert tracker.has_changes("signup") is False

    def test_detects_changes(self, document: Document) -> None:
        tracker = FormTracker(document)
        tracker.start_tracking("#signup")
        assert tracker.has_changes("signup") is False

        document.get_elements_by_name("country")[0].set_value("cl")
        assert tracker.has_changes("signup") is True

    def test_reverting_clears_changes(self, document: Document) -> None:
        tracker = FormTracker(document)
        tracker.start_tracking("signup")
        email = document.get_elements_by_name("email")[0]
        email.set_value("x")
        email.set_value("")
        assert tracker.has_changes("signup") is False

    def test_reset_accepts_current_values(self, document: Document) -> None:
        tracker = FormTracker(document)
        tracker.start_tracking("signup")
        document.get_elements_by_name("email")[0].set_value("x")

        tracker.reset("signup")

        assert tracker.has_changes("signup") is False

    def test_watch_reports_on_input(self, document: Document) -> None:
        tracker = FormTracker(document)
        tracker.start_tracking("signup")
        reports: list[bool] = []
        tracker.watch("signup", reports.append)

        document.get_elements_by_name("username")[0].type_text("ada")

        assert reports == [True, True]

    def test_unload_blocked_while_dirty(self, document: Document) -> None:
        tracker = FormTracker(document)
        tracker.start_tracking("signup")
        tracker.warn_before_unload("signup")
        tracker.warn_before_unload("signup")
        assert document.window.listener_count("beforeunload") == 1

        assert document.window.request_unload() is True
        document.get_elements_by_name("bio")[0].set_value("hello")
        assert document.window.request_unload() is False

    def test_stop_warning(self, document: Document) -> None:
        tracker = FormTracker(document)
        tracker.start_tracking("signup")
        tracker.warn_before_unload("signup")
        document.get_elements_by_name("bio")[0].set_value("hello")

        tracker.stop_warning("signup")

        assert document.window.request_unload() is True
