# src/headless/core/browser.py
import logging
import time
from http import HTTPStatus
from typing import Callable, List, Mapping, Optional, Type
from urllib.parse import urlencode

from headless.core.exceptions import (
    ArgumentError,
    BrowserClosedError,
    ConfigurationError,
    RedirectLimitError,
    UnexpectedOutcomeError,
)
from headless.core.managers.config_manager import config_manager
from headless.core.pages import HtmlPage, Page, PageFactory, page_factory_for
from headless.core.services.http_transport_service import HttpTransport, RequestsTransport
from headless.core.utils.url_utils import UrlUtils
from headless.model import HttpOutcome, HttpResult, TransportResponse

logger = logging.getLogger(__name__)

REDIRECT_STATUS_CODES = frozenset({
    HTTPStatus.MULTIPLE_CHOICES,    # 300
    HTTPStatus.MOVED_PERMANENTLY,   # 301
    HTTPStatus.FOUND,               # 302
    HTTPStatus.SEE_OTHER,           # 303
    HTTPStatus.USE_PROXY,           # 305
    HTTPStatus.TEMPORARY_REDIRECT,  # 307
    HTTPStatus.PERMANENT_REDIRECT,  # 308
})

# Only these keep the request method (and body) on the next hop
METHOD_PRESERVING_REDIRECTS = frozenset({
    HTTPStatus.TEMPORARY_REDIRECT,
    HTTPStatus.PERMANENT_REDIRECT,
})

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

RequestAction = Callable[[str], TransportResponse]

_UNSET = object()


def build_post_body(parameters: Mapping[str, str]) -> str:
    """Encodes parameters the way a browser encodes an ordinary form post."""
    return urlencode(list(parameters.items()))


def is_redirect(response: TransportResponse) -> bool:
    """A response redirects when it has a Location header and a redirect status."""
    if response.location is None:
        return False
    return response.status_code in REDIRECT_STATUS_CODES


class _PostAction:
    """
    Request action for a form post. The first request posts the body; a redirect
    continues with GET unless the server asked to keep the method (307/308).
    """

    def __init__(self, transport: HttpTransport, body: str):
        self.transport = transport
        self.body = body
        self._last_response: Optional[TransportResponse] = None

    def __call__(self, location: str) -> TransportResponse:
        last = self._last_response
        if last is None or last.status_code in METHOD_PRESERVING_REDIRECTS:
            response = self.transport.send(
                "POST", location, data=self.body, headers={"Content-Type": FORM_CONTENT_TYPE}
            )
        else:
            response = self.transport.send("GET", location)
        self._last_response = response
        return response


class Browser:
    """
    A wrapper around an HTTP browsing session.

    The browser owns its transport (and with it the cookie store). It is not
    thread-safe: one navigation at a time per browser.

    Example:
        with Browser() as browser:
            page = browser.browse_to("https://localhost/form/index")
            form = page.find(HtmlForm).by_id("login")
            result = form.submit(page.find(HtmlButton).by_name("save"))
    """

    def __init__(self, transport: Optional[HttpTransport] = None, max_redirects=_UNSET):
        self._transport = transport or RequestsTransport()
        if max_redirects is _UNSET:
            max_redirects = config_manager.get_nested("session.max_redirects", 20)
        self.max_redirects: Optional[int] = int(max_redirects) if max_redirects is not None else None
        self._closed = False

    def __enter__(self) -> "Browser":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """Releases the transport. Calling it again has no effect."""
        if self._closed:
            return
        self._closed = True
        self._transport.close()
        logger.debug("Browser closed.")

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def transport(self) -> HttpTransport:
        return self._transport

    @property
    def cookies(self):
        return self._transport.cookies

    @property
    def use_cookies(self) -> bool:
        return self._transport.use_cookies

    @use_cookies.setter
    def use_cookies(self, value: bool) -> None:
        self._transport.use_cookies = value

    def clear_cookies(self) -> None:
        self._transport.clear_cookies()

    def browse_to(
            self,
            location: Optional[str] = None,
            expected_status: int = HTTPStatus.OK,
            page_type: Type[Page] = HtmlPage,
            page_factory: Optional[PageFactory] = None,
    ) -> Page:
        """
        Requests location with GET and returns the page the navigation ends on.
        Without a location the LOCATION declared by page_type is requested.
        """
        location = self._default_location(location, page_type)
        factory = page_factory or page_factory_for(page_type)
        return self.execute_action(
            location, expected_status, lambda url: self._transport.send("GET", url), factory
        )

    def post_to(
            self,
            parameters: Mapping[str, str],
            location: Optional[str] = None,
            expected_status: int = HTTPStatus.OK,
            page_type: Type[Page] = HtmlPage,
            page_factory: Optional[PageFactory] = None,
    ) -> Page:
        """Posts parameters form-url-encoded to location and returns the resulting page."""
        if parameters is None:
            raise ArgumentError("parameters")

        location = self._default_location(location, page_type)
        factory = page_factory or page_factory_for(page_type)
        body = build_post_body(parameters)
        return self.execute_action(location, expected_status, _PostAction(self._transport, body), factory)

    @staticmethod
    def _default_location(location: Optional[str], page_type: Optional[Type[Page]]) -> Optional[str]:
        if location is not None:
            return str(location)
        return getattr(page_type, "LOCATION", None)

    def execute_action(
            self,
            location: Optional[str],
            expected_status: int,
            action: Optional[RequestAction],
            page_factory: Optional[PageFactory],
    ) -> Page:
        """
        Runs one navigation: requests location, follows redirects, builds the page
        from the terminal response and validates it.

        Raises:
            ConfigurationError: No location was given, or the page does not match the final location.
            ArgumentError: action or page_factory is missing.
            UnexpectedOutcomeError: The final status is not expected_status.
            RedirectLimitError: More than max_redirects redirects were followed.
            BrowserClosedError: The browser has been closed.
        """
        if location is None:
            raise ConfigurationError("No location has been specified for the browser to request.")
        if action is None:
            raise ArgumentError("action")
        if page_factory is None:
            raise ArgumentError("page_factory")
        if self._closed:
            raise BrowserClosedError("The browser has been closed.")

        current_location = str(location)
        outcomes: List[HttpOutcome] = []
        requires_redirect = True

        while requires_redirect:
            start_time = time.perf_counter()
            response = action(current_location)
            elapsed = time.perf_counter() - start_time

            outcome = HttpOutcome.record(
                current_location,
                response.method,
                response.status_code,
                response.reason,
                elapsed,
            )
            outcomes.append(outcome)
            logger.debug("Navigation hop %d: %s (%.1f ms)", len(outcomes), outcome, elapsed * 1000)

            requires_redirect = is_redirect(response)

            if requires_redirect:
                if self.max_redirects is not None and len(outcomes) > self.max_redirects:
                    raise RedirectLimitError(self.max_redirects, HttpResult(outcomes=tuple(outcomes)))
                current_location = UrlUtils.resolve(current_location, response.location)
            else:
                # This is the final response
                page = page_factory(self, response, HttpResult(outcomes=tuple(outcomes)))
                if page is None:
                    raise ConfigurationError("The page factory did not return a page.")

        last_outcome = outcomes[-1]
        if last_outcome.status_code != int(expected_status):
            raise UnexpectedOutcomeError(
                int(expected_status), last_outcome.status_code, HttpResult(outcomes=tuple(outcomes))
            )

        if not page.is_on(current_location):
            page_type = type(page)
            raise ConfigurationError(
                f"The url requested is {current_location} which does not match the location of "
                f"{page.location} defined by page {page_type.__module__}.{page_type.__qualname__}."
            )

        logger.info(
            "Navigated to %s (%d %s) after %d request(s).",
            current_location, last_outcome.status_code, last_outcome.reason_phrase, len(outcomes)
        )
        return page
