# tests/core/test_pages.py
import pytest

from headless.core.exceptions import ArgumentError, ConfigurationError
from headless.core.pages import BinaryPage, HtmlPage, page_factory_for
from headless.dom.elements.form import HtmlForm
from headless.model import HttpOutcome, HttpResult
from helpers import BASE_URL, make_response


class AccountPage(HtmlPage):
    LOCATION = "/account"


def _result(url):
    return HttpResult(outcomes=(HttpOutcome.record(url, "GET", 200, "OK", 0.01),))


def test_binary_page_keeps_bytes(browser):
    response = make_response(BASE_URL + "report.pdf", body=b"%PDF-1.7")

    page = page_factory_for(BinaryPage)(browser, response, _result(response.url))

    assert page.get_content() == b"%PDF-1.7"
    assert page.content == b"%PDF-1.7"
    assert page.browser is browser
    assert page.status_code == 200


@pytest.mark.parametrize("page_type", [BinaryPage, HtmlPage])
def test_set_content_requires_a_body(page_type):
    with pytest.raises(ArgumentError):
        page_type().set_content(None)


def test_empty_body_is_valid_content():
    page = BinaryPage()
    page.set_content(b"")
    assert page.get_content() == b""


def test_html_page_parses_document(browser):
    body = b"<html><head><title> Hello </title></head><body><form></form></body></html>"
    response = make_response(BASE_URL, body=body)

    page = page_factory_for(HtmlPage)(browser, response, _result(BASE_URL))

    assert page.title == "Hello"
    assert page.node.name == "html"
    assert len(page.find(HtmlForm).all()) == 1


def test_html_page_without_content_has_no_document():
    with pytest.raises(ConfigurationError):
        HtmlPage().document


def test_page_without_declared_location_uses_response_location(browser):
    response = make_response(BASE_URL + "some/where?x=1")
    page = page_factory_for(HtmlPage)(browser, response, _result(response.url))

    assert page.location == BASE_URL + "some/where?x=1"
    assert page.is_on(BASE_URL + "some/where")
    assert page.is_on("HTTP://LOCALHOST:80/some/where#top")
    assert not page.is_on(BASE_URL + "some/else")
    assert not page.is_on("https://localhost/some/where")


def test_relative_declared_location_resolves_against_response(browser):
    response = make_response(BASE_URL + "account")
    page = page_factory_for(AccountPage)(browser, response, _result(response.url))

    assert page.location == BASE_URL + "account"
    assert page.is_on(BASE_URL + "account?tab=2")


def test_initialize_requires_collaborators(browser):
    with pytest.raises(ArgumentError):
        HtmlPage().initialize(None, make_response(BASE_URL), _result(BASE_URL))
    with pytest.raises(ArgumentError):
        HtmlPage().initialize(browser, None, _result(BASE_URL))


def test_page_factory_requires_page_type():
    with pytest.raises(ArgumentError):
        page_factory_for(None)


def test_is_on_ignores_percent_encoding_differences(browser):
    response = make_response(BASE_URL + "caf%C3%A9/a%20b")
    page = page_factory_for(HtmlPage)(browser, response, _result(response.url))

    assert page.is_on(BASE_URL + "café/a b")
    assert not page.is_on(BASE_URL + "cafe/a b")


def test_html_page_decodes_with_charset_from_content_type(browser):
    body = "<html><head><title>Ωμέγα</title></head></html>".encode("iso-8859-7")
    response = make_response(BASE_URL, body=body, headers={"Content-Type": "text/html; charset=ISO-8859-7"})

    page = page_factory_for(HtmlPage)(browser, response, _result(BASE_URL))

    assert page.title == "Ωμέγα"
