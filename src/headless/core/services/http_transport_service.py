# src/headless/core/services/http_transport_service.py
import logging
import platform
from abc import ABC, abstractmethod
from typing import Dict, Optional, Union

import requests
from requests.cookies import RequestsCookieJar

from headless.core.managers.config_manager import config_manager
from headless.model import TransportResponse

logger = logging.getLogger(__name__)


def generate_default_user_agent() -> str:
    """
    Generates a generic Chrome user agent string based on the operating system
    and the version retrieved from settings.json.
    """
    os_name = platform.system()

    if os_name == "Windows":
        os_part = "Windows NT 10.0; Win64; x64"
    elif os_name == "Darwin":  # macOS
        os_part = "Macintosh; Intel Mac OS X 10_15_7"
    elif os_name == "Linux":
        os_part = "X11; Linux x86_64"
    else:
        os_part = "Unknown OS"

    chrome_version = config_manager.get_nested("user_agent.chrome_version", "120.0.0.0")

    return (
        f"Mozilla/5.0 ({os_part}) AppleWebKit/537.36 (KHTML, like Gecko) "
        f"Chrome/{chrome_version} Safari/537.36"
    )


class HttpTransport(ABC):
    """
    The capability the browser uses to send a single HTTP request.
    Implementations must never follow redirects; the browser owns the redirect chain.
    """

    @abstractmethod
    def send(
            self,
            method: str,
            url: str,
            data: Optional[Union[bytes, str]] = None,
            headers: Optional[Dict[str, str]] = None,
    ) -> TransportResponse:
        """Sends one request and blocks until the complete response is available."""

    @abstractmethod
    def close(self) -> None:
        """Releases any pooled connections. Must be safe to call more than once."""

    @property
    @abstractmethod
    def cookies(self):
        """The cookie store shared by every request of this transport."""

    @property
    @abstractmethod
    def use_cookies(self) -> bool:
        ...

    @use_cookies.setter
    @abstractmethod
    def use_cookies(self, value: bool) -> None:
        ...

    @abstractmethod
    def clear_cookies(self) -> None:
        ...


class RequestsTransport(HttpTransport):
    """
    HttpTransport on top of a pooled requests.Session.
    Redirects are disabled per request and the session keeps the cookie jar.
    """

    def __init__(
            self,
            session: Optional[requests.Session] = None,
            timeout: Optional[float] = None,
            user_agent: Optional[str] = None,
            use_cookies: Optional[bool] = None,
    ):
        self.timeout = float(timeout if timeout is not None else config_manager.get_nested("session.time_out", 30))
        self._use_cookies = bool(
            use_cookies if use_cookies is not None else config_manager.get_nested("session.use_cookies", True)
        )
        self._session = session or requests.Session()
        self._session.headers.update({
            'User-Agent': user_agent or generate_default_user_agent()
        })
        self._closed = False
        logger.debug("RequestsTransport: Session initialized (timeout=%ss).", self.timeout)

    @property
    def session(self) -> requests.Session:
        return self._session

    @property
    def cookies(self) -> RequestsCookieJar:
        return self._session.cookies

    @property
    def use_cookies(self) -> bool:
        return self._use_cookies

    @use_cookies.setter
    def use_cookies(self, value: bool) -> None:
        self._use_cookies = bool(value)

    def clear_cookies(self) -> None:
        self._session.cookies.clear()

    def send(
            self,
            method: str,
            url: str,
            data: Optional[Union[bytes, str]] = None,
            headers: Optional[Dict[str, str]] = None,
    ) -> TransportResponse:
        if not self._use_cookies:
            self._session.cookies.clear()

        response = self._session.request(
            method.upper(),
            url,
            data=data,
            headers=headers,
            allow_redirects=False,
            timeout=self.timeout,
        )

        if not self._use_cookies:
            self._session.cookies.clear()

        # The effective method is the one of the request actually sent on the wire
        sent_method = response.request.method if response.request is not None else method

        return TransportResponse(
            url=response.url or url,
            method=sent_method,
            status_code=response.status_code,
            reason=response.reason or "",
            headers=dict(response.headers),
            content=response.content,
            encoding=response.encoding,
        )

    def close(self) -> None:
        if self._closed:
            return
        self._session.close()
        self._closed = True
        logger.debug("RequestsTransport: Session closed.")
