# tests/dom/test_registry.py
import pytest
from bs4 import BeautifulSoup

from headless.core.exceptions import ConfigurationError, UnsupportedElementError
from headless.dom.core import ElementDefinition, HtmlElement, HtmlFormElement
from headless.dom.elements.button import HtmlButton
from headless.dom.elements.checkbox import HtmlCheckBox, HtmlRadioButton
from headless.dom.elements.form import HtmlForm
from headless.dom.elements.input import HtmlInput
from headless.dom.elements.link import HtmlLink
from headless.dom.elements.select import HtmlSelect
from headless.dom.registry import ElementRegistry


def node(markup: str):
    return BeautifulSoup(markup, "html.parser").find(True)


@pytest.fixture
def clean_registry():
    """Rebuilds the registry from the element modules before and after the test."""
    ElementRegistry.reset()
    yield ElementRegistry
    ElementRegistry.reset()


@pytest.mark.parametrize("markup, expected", [
    ("<form></form>", HtmlForm),
    ("<FORM></FORM>", HtmlForm),
    ("<input type='text' name='a'>", HtmlInput),
    ("<input name='a'>", HtmlInput),
    ("<input type='PASSWORD'>", HtmlInput),
    ("<textarea></textarea>", HtmlInput),
    ("<input type='checkbox'>", HtmlCheckBox),
    ("<input type='Radio'>", HtmlRadioButton),
    ("<input type='submit'>", HtmlButton),
    ("<button>Go</button>", HtmlButton),
    ("<select></select>", HtmlSelect),
    ("<a href='/'>x</a>", HtmlLink),
    ("<div></div>", HtmlElement),
])
def test_resolve_selects_expected_type(form_page, markup, expected):
    element = ElementRegistry.resolve(form_page, node(markup))
    assert type(element) is expected


def test_attribute_qualified_definition_beats_tag_only(form_page):
    """A checkbox matches both 'input' and 'input[type=checkbox]'; the qualified entry wins."""
    checkbox = node("<input type='checkbox' name='c'>")

    definition = ElementRegistry.find_definition(checkbox)

    assert definition.is_qualified
    assert definition.model is HtmlCheckBox
    assert ElementDefinition("input", HtmlInput).matches(checkbox)


def test_unknown_tag_is_unsupported(form_page):
    with pytest.raises(UnsupportedElementError) as exc_info:
        ElementRegistry.resolve(form_page, node("<video src='a.mp4'></video>"))

    assert exc_info.value.tag == "video"
    assert "video" in str(exc_info.value)


def test_unsupported_error_names_attribute_value(clean_registry, form_page):
    clean_registry.discover()
    clean_registry._definitions["input"] = [
        d for d in clean_registry._definitions["input"] if d.is_qualified
    ]

    with pytest.raises(UnsupportedElementError) as exc_info:
        clean_registry.resolve(form_page, node("<input type='file'>"))

    assert exc_info.value.attribute_value == "file"
    assert "file" in str(exc_info.value)


def test_ambiguous_qualified_matches_fail_fast(clean_registry, form_page):
    class NamedInput(HtmlInput):
        pass

    clean_registry.register(ElementDefinition("input", NamedInput, "name", "special"))

    with pytest.raises(ConfigurationError):
        clean_registry.resolve(form_page, node("<input type='text' name='special'>"))


def test_conflicting_registration_fails(clean_registry):
    class OtherForm(HtmlForm):
        pass

    with pytest.raises(ConfigurationError):
        clean_registry.register(ElementDefinition("form", OtherForm))


def test_registering_same_definition_twice_is_harmless(clean_registry):
    before = len(clean_registry.get_definitions("form"))

    clean_registry.register(ElementDefinition("form", HtmlForm))

    assert len(clean_registry.get_definitions("form")) == before


def test_registered_definition_is_resolved(clean_registry, form_page):
    class VideoElement(HtmlElement):
        pass

    clean_registry.register(ElementDefinition("video", VideoElement))

    assert type(clean_registry.resolve(form_page, node("<video></video>"))) is VideoElement


def test_tags_for_form_fields():
    tags = ElementRegistry.tags_for(HtmlFormElement)
    assert tags == ["button", "input", "select", "textarea"]


def test_definition_requires_attribute_name_and_value_together():
    with pytest.raises(ValueError):
        ElementDefinition("input", HtmlInput, "type")
