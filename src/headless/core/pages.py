# src/headless/core/pages.py
import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional, Type, TypeVar, TYPE_CHECKING

from bs4 import BeautifulSoup

from headless.core.exceptions import ArgumentError, ConfigurationError
from headless.core.utils.url_utils import UrlUtils
from headless.dom.core import HtmlElement
from headless.dom.finder import HtmlElementFinder
from headless.dom.registry import ElementRegistry
from headless.model import HttpResult, TransportResponse

if TYPE_CHECKING:
    from headless.core.browser import Browser

logger = logging.getLogger(__name__)

P = TypeVar("P", bound="Page")
E = TypeVar("E", bound=HtmlElement)

PageFactory = Callable[["Browser", TransportResponse, HttpResult], "Page"]


class Page(ABC):
    """
    The typed result of a navigation.

    Subclasses representing a known resource declare it with LOCATION (absolute,
    or relative to the server the response came from). Pages without a LOCATION
    accept whatever location the navigation ended on.
    """

    LOCATION: Optional[str] = None

    def __init__(self):
        self._browser: Optional["Browser"] = None
        self._result: Optional[HttpResult] = None
        self._response_location: Optional[str] = None
        self._status_code: Optional[int] = None
        self._content_type: str = ""
        self._charset: Optional[str] = None

    def initialize(self, browser: "Browser", response: TransportResponse, result: HttpResult) -> None:
        """Binds the page to its navigation and populates its content."""
        if browser is None:
            raise ArgumentError("browser")
        if response is None:
            raise ArgumentError("response")
        if result is None:
            raise ArgumentError("result")

        self._browser = browser
        self._result = result
        self._response_location = response.url
        self._status_code = response.status_code
        self._content_type = response.content_type
        self._charset = response.charset
        self.set_content(response.content)

    @abstractmethod
    def set_content(self, content: Optional[bytes]) -> None:
        """
        Populates the page from the response body. Called once, by initialize.

        Raises:
            ArgumentError: The body is absent.
        """

    @property
    def browser(self) -> "Browser":
        return self._browser

    @property
    def result(self) -> Optional[HttpResult]:
        return self._result

    @property
    def status_code(self) -> Optional[int]:
        return self._status_code

    @property
    def content_type(self) -> str:
        return self._content_type

    @property
    def location(self) -> Optional[str]:
        """The declared LOCATION of the page type, or the location the response was served from."""
        if self.LOCATION is None:
            return self._response_location
        if self._response_location is not None:
            return UrlUtils.resolve(self._response_location, self.LOCATION)
        return self.LOCATION

    def is_on(self, location: str) -> bool:
        """Whether location addresses this page; query and fragment are ignored."""
        if location is None or self.location is None:
            return False
        return UrlUtils.is_same_location(self.location, str(location))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.location}>"


class HtmlPage(Page):
    """A page whose content is an HTML document."""

    def __init__(self):
        super().__init__()
        self._document: Optional[BeautifulSoup] = None

    def set_content(self, content: Optional[bytes]) -> None:
        if content is None:
            raise ArgumentError("content")
        if isinstance(content, bytes) and self._charset:
            # A charset declared by the response header wins over one sniffed from the markup
            self._document = BeautifulSoup(content, "html.parser", from_encoding=self._charset)
        else:
            self._document = BeautifulSoup(content, "html.parser")

    @property
    def document(self) -> BeautifulSoup:
        if self._document is None:
            raise ConfigurationError(f"The page {type(self).__name__} has no content yet.")
        return self._document

    @property
    def node(self):
        """The root <html> node, or the document itself for fragments."""
        return self.document.find("html") or self.document

    @property
    def title(self) -> str:
        title = self.document.find("title")
        return title.get_text(strip=True) if title else ""

    def find(self, element_type: Type[E]) -> HtmlElementFinder[E]:
        return HtmlElementFinder(self, element_type)

    def element(self, node) -> HtmlElement:
        """Wraps a node of this page's document in its typed element."""
        return ElementRegistry.resolve(self, node)


class BinaryPage(Page):
    """A page whose content is kept as raw bytes, e.g. a download."""

    def __init__(self):
        super().__init__()
        self._content: Optional[bytes] = None

    def set_content(self, content: Optional[bytes]) -> None:
        if content is None:
            raise ArgumentError("content")
        self._content = bytes(content)

    def get_content(self) -> Optional[bytes]:
        return self._content

    @property
    def content(self) -> Optional[bytes]:
        return self._content


def page_factory_for(page_type: Type[P]) -> PageFactory:
    """Builds a page factory that instantiates page_type and initializes it from the response."""
    if page_type is None:
        raise ArgumentError("page_type")

    def factory(browser: "Browser", response: TransportResponse, result: HttpResult) -> P:
        page = page_type()
        page.initialize(browser, response, result)
        logger.debug("Created %s for %s.", page_type.__name__, response.url)
        return page

    factory.page_type = page_type
    return factory
