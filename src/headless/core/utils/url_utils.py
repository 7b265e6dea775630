# src/headless/core/utils/url_utils.py
import logging
from urllib.parse import urljoin, urlparse

from requests.utils import requote_uri

logger = logging.getLogger(__name__)

_DEFAULT_PORTS = {"http": 80, "https": 443}


class UrlUtils:
    """A collection of static methods for URL parsing and comparison."""

    @staticmethod
    def resolve(base_url: str, url: str) -> str:
        """
        Resolves `url` against `base_url`.

        Absolute URLs come back unchanged; network-path references ('//host/path')
        take the scheme of `base_url`.
        """
        if isinstance(url, bytes):
            url = url.decode('utf-8')

        return urljoin(base_url, url)

    @staticmethod
    def location_key(url: str) -> tuple:
        """
        Builds the comparison key for a URL: scheme, host, effective port and path.
        Query strings and fragments do not identify a location.

        The URL is quoted the way requests quotes it on the wire, so 'a b' and
        'a%20b' yield the same key.
        """
        parsed = urlparse(requote_uri(url))
        scheme = parsed.scheme.lower()
        port = parsed.port or _DEFAULT_PORTS.get(scheme)
        host = (parsed.hostname or "").lower()
        path = parsed.path or "/"
        return scheme, host, port, path

    @staticmethod
    def is_same_location(first: str, second: str) -> bool:
        """Checks whether two URLs address the same resource, ignoring query and fragment."""
        try:
            return UrlUtils.location_key(first) == UrlUtils.location_key(second)
        except ValueError:
            logger.debug("Could not compare invalid URLs '%s' and '%s'.", first, second)
            return False
