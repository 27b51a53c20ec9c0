"""Tests for validador.extraction — value shapes per element group."""

from validador.dom import Document
from validador.extraction import ExtractedValue, extract_value


class TestExtractValue:
    def test_text_input_is_trimmed(self, document: Document) -> None:
        element = document.get_elements_by_name("username")[0]
        element.set_value("  ada ")
        assert extract_value([element]) == ExtractedValue("single", "ada")

    def test_trim_disabled(self, document: Document) -> None:
        element = document.get_elements_by_name("username")[0]
        element.set_value("  ada ")
        assert extract_value([element], trim=False).value == "  ada "

    def test_radio_group_without_choice(self, document: Document) -> None:
        assert extract_value(document.get_elements_by_name("plan")) == ExtractedValue("radio", None)

    def test_radio_group_with_choice(self, document: Document) -> None:
        group = document.get_elements_by_name("plan")
        group[1].set_checked(True)
        assert extract_value(group) == ExtractedValue("radio", "pro")

    def test_checkbox_group_lists_checked_values(self, document: Document) -> None:
        group = document.get_elements_by_name("topics")
        group[0].set_checked(True)
        group[1].set_checked(True)
        assert extract_value(group) == ExtractedValue("checkbox", ["news", "offers"])

    def test_checkbox_group_none_checked(self, document: Document) -> None:
        assert extract_value(document.get_elements_by_name("topics")).value == []

    def test_select_defaults_to_first_option(self, document: Document) -> None:
        assert extract_value(document.get_elements_by_name("country")).value == "0"

    def test_select_after_choice(self, document: Document) -> None:
        select = document.get_elements_by_name("country")[0]
        select.set_value("pe")
        assert extract_value([select]).value == "pe"

    def test_multiple_select(self) -> None:
        doc = Document(
            '<select name="langs" multiple>'
            '<option value="py" selected>Python</option>'
            '<option value="js">JS</option>'
            '<option value="go" selected>Go</option>'
            "</select>"
        )
        assert extract_value(doc.get_elements_by_name("langs")) == ExtractedValue("multiple", ["py", "go"])

    def test_textarea(self, document: Document) -> None:
        bio = document.get_elements_by_name("bio")[0]
        bio.set_value("hello\n")
        assert extract_value([bio]).value == "hello"

    def test_empty_group(self) -> None:
        assert extract_value([]) == ExtractedValue("single", "")
