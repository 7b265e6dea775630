# src/headless/core/exceptions.py
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from headless.model import HttpResult


class HeadlessError(Exception):
    """Base exception for all errors raised by the browser layer."""


class ConfigurationError(HeadlessError):
    """
    Raised when a navigation or the element registry is set up inconsistently,
    e.g. no location to request, or a page that does not match the URL it was built from.
    """


class ArgumentError(HeadlessError, ValueError):
    """Raised when a required collaborator or value was not supplied."""

    def __init__(self, argument: str, message: Optional[str] = None):
        super().__init__(message or f"The '{argument}' argument is required.")
        self.argument = argument


class UnexpectedOutcomeError(HeadlessError):
    """Raised when the final HTTP status of a navigation is not the expected one."""

    def __init__(self, expected: int, actual: int, result: Optional["HttpResult"] = None):
        super().__init__(
            f"An unexpected HTTP outcome was encountered. "
            f"Expected status {expected} but the response returned {actual}."
        )
        self.expected = expected
        self.actual = actual
        self.result = result


class RedirectLimitError(HeadlessError):
    """Raised when a navigation follows more redirects than the browser allows."""

    def __init__(self, max_redirects: int, result: Optional["HttpResult"] = None):
        super().__init__(f"The navigation exceeded the limit of {max_redirects} redirects.")
        self.max_redirects = max_redirects
        self.result = result


class BrowserClosedError(HeadlessError):
    """Raised when a closed browser is asked to navigate."""


class UnsupportedElementError(HeadlessError):
    """Raised when no registered element type matches a markup node."""

    def __init__(self, tag: str, attribute_value: Optional[str] = None):
        if attribute_value:
            message = f"The element <{tag}> with type '{attribute_value}' is not supported."
        else:
            message = f"The element <{tag}> is not supported."
        super().__init__(message)
        self.tag = tag
        self.attribute_value = attribute_value


class ElementMatchError(HeadlessError):
    """Raised when a lookup that expects exactly one element finds none or several."""

    def __init__(self, description: str, match_count: int):
        super().__init__(f"Expected a single element matching {description} but found {match_count}.")
        self.description = description
        self.match_count = match_count
