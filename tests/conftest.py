# tests/conftest.py
import pytest

from headless.core.browser import Browser
from helpers import BASE_URL, FORM_PAGE, FakeTransport


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def browser(transport):
    """A browser on the fake transport with a small redirect limit."""
    with Browser(transport=transport, max_redirects=10) as b:
        yield b


@pytest.fixture
def form_page(browser, transport):
    """The HTML page served at /form/index."""
    location = BASE_URL + "form/index"
    transport.add("GET", location, 200, FORM_PAGE)
    return browser.browse_to(location)
