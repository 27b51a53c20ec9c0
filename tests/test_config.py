"""Tests for validador.config — OutputKind and the ValidatorConfig dataclass."""

import pytest

from validador.config import OutputKind, ValidatorConfig
from validador.errors import ConfigurationError


class TestOutputKind:
    @pytest.mark.parametrize("value", ["array", "console", "alert", "html", "inputs", "short-circuit"])
    def test_parse_known(self, value: str) -> None:
        assert OutputKind.parse(value).value == value

    def test_parse_passes_members_through(self) -> None:
        assert OutputKind.parse(OutputKind.HTML) is OutputKind.HTML

    def test_parse_unknown_lists_choices(self) -> None:
        with pytest.raises(ConfigurationError, match="short-circuit"):
            OutputKind.parse("modal")

    def test_is_a_string(self) -> None:
        assert OutputKind.INPUTS == "inputs"


class TestValidatorConfig:
    def test_defaults(self) -> None:
        cfg = ValidatorConfig()

        assert cfg.reactive is True
        assert cfg.input_error_class == "input-error"
        assert cfg.input_success_class == "input-success"
        assert cfg.message_container == "errors"
        assert cfg.message_error_class == "message-error"
        assert cfg.message_success_class == "message-success"
        assert cfg.message_tag == "div"
        assert cfg.message_id_prefix == "error-"
        assert cfg.error_position == "after"
        assert cfg.trim_values is True
        assert cfg.short_circuit is None
        assert cfg.auto_track_dirty_state is False
        assert cfg.warn_on_unsaved_exit is False
        assert cfg.form_id is None

    def test_frozen(self) -> None:
        cfg = ValidatorConfig()

        with pytest.raises(AttributeError):
            cfg.reactive = False  # type: ignore[misc]

    def test_message_id(self) -> None:
        assert ValidatorConfig().message_id("email") == "error-email"
        assert ValidatorConfig(message_id_prefix="msg_").message_id("email") == "msg_email"

    def test_bad_error_position(self) -> None:
        with pytest.raises(ConfigurationError, match="error_position"):
            ValidatorConfig(error_position="before")

    def test_tracking_needs_form_id(self) -> None:
        with pytest.raises(ConfigurationError, match="form_id"):
            ValidatorConfig(warn_on_unsaved_exit=True)

    @pytest.mark.parametrize(
        ("output", "expected"),
        [
            (OutputKind.INPUTS, True),
            (OutputKind.SHORT_CIRCUIT, True),
            (OutputKind.ARRAY, False),
            (OutputKind.CONSOLE, False),
            (OutputKind.ALERT, False),
            (OutputKind.HTML, False),
        ],
    )
    def test_default_policy(self, output: OutputKind, expected: bool) -> None:
        assert ValidatorConfig().stops_on_first_error(output) is expected

    def test_policy_override(self) -> None:
        assert ValidatorConfig(short_circuit=True).stops_on_first_error(OutputKind.ARRAY) is True
        assert ValidatorConfig(short_circuit=False).stops_on_first_error(OutputKind.INPUTS) is False
